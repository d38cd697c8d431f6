"""Pydantic models validating everything the host hands to the plugin.

- config_models: preferences accepted by ``setup``
- command_models: arguments of user commands

Usage:
    from obsidian_nav.models import ObsidianConfig, OpenNoteInput
"""

from .config_models import ObsidianConfig
from .command_models import OpenNoteInput

__all__ = [
    "ObsidianConfig",
    "OpenNoteInput",
]
