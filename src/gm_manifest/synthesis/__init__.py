"""Command synthesis subpackage."""

from gm_manifest.synthesis.commands import CommandSynthesizer, command_for_event
from gm_manifest.synthesis.model import DEFAULT_PROBE_BOUND, Command, SynthesisConfig
from gm_manifest.synthesis.naming import (
    submenu_id,
    to_lower_camel_case,
    to_upper_camel_case,
)

__all__ = [
    "DEFAULT_PROBE_BOUND",
    "Command",
    "CommandSynthesizer",
    "SynthesisConfig",
    "command_for_event",
    "submenu_id",
    "to_lower_camel_case",
    "to_upper_camel_case",
]
