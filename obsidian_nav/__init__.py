"""Obsidian note navigation for text editors.

Follows ``[[id]]`` / ``[[id|tag]]`` references from the line under the cursor
to note files, behind a small command surface registered on the host editor.
"""

from obsidian_nav.core.frontmatter_operations import render_frontmatter
from obsidian_nav.core.reference_operations import format_reference, parse_reference
from obsidian_nav.data_models import Note, Reference
from obsidian_nav.errors import HostError, ObsidianError
from obsidian_nav.plugin import load
from obsidian_nav.session import Client

__version__ = "0.1.0"
__all__ = [
    "Client",
    "HostError",
    "Note",
    "ObsidianError",
    "Reference",
    "format_reference",
    "load",
    "parse_reference",
    "render_frontmatter",
]
