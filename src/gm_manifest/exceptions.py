"""Exception protocol for manifest generation.

Every failure is fatal: a manifest missing entries is worse than no manifest,
so nothing here is meant to be caught and recovered from inside the pipeline.
"""

from __future__ import annotations


class ManifestError(RuntimeError):
    """Base class for all manifest generation failures."""


class NeverThrown(ManifestError):
    """Raised by the explicit never() marker.

    Reaching one of these means a code path that should be unreachable for a
    well-formed taxonomy was taken. `env` carries the diagnostic payload the
    call site attached.
    """

    def __init__(self, message: str, *, env: dict[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.env: dict[str, object] = dict(env or {})

    def __str__(self) -> str:
        if not self.env:
            return self.reason
        details = ", ".join(f"{key}={value!r}" for key, value in sorted(self.env.items()))
        return f"{self.reason} ({details})"


class ClassificationError(NeverThrown):
    """Unknown category or event subtype reached the classifier."""


class CardinalityError(NeverThrown):
    """A singleton category did not synthesize exactly one command."""


class DuplicateIdentifierError(NeverThrown):
    """Two commands or two submenus share an identifier."""


class MissingLocationError(NeverThrown):
    """Insertion into a menu location that was never declared."""


class FrozenTreeError(NeverThrown):
    """Mutation of a menu tree after it was frozen for assembly."""


class OrderViolationError(NeverThrown):
    """Caller-ordered sequence arrived out of order."""


class BaselineDocumentError(NeverThrown):
    """A static baseline document does not have the expected shape."""


class ProbeBoundError(NeverThrown):
    """The probe bound does not cover the enumerator's highest event index."""
