"""User commands exposed to the host editor.

Each tool module provides a ``register`` function that defines its commands on
the host, wrapping every handler with ``Client.create_fn``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from obsidian_nav.tools import note_tools

if TYPE_CHECKING:
    from obsidian_nav.session import Client

__all__ = [
    "note_tools",
    "register_commands",
]


def register_commands(client: "Client") -> None:
    """Register every user command of the plugin."""
    note_tools.register(client)
