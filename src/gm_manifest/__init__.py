"""gm-manifest package root."""

from gm_manifest.exceptions import ManifestError, NeverThrown
from gm_manifest.invariants import never

__all__ = ["__version__", "ManifestError", "NeverThrown", "never"]

__version__ = "0.1.0"
