"""One-time initialization of the plugin session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from obsidian_nav import highlights
from obsidian_nav.config import build_config
from obsidian_nav.errors import AlreadySetup
from obsidian_nav.tools import register_commands

if TYPE_CHECKING:
    from obsidian_nav.session import Client

logger = logging.getLogger(__name__)


def setup(client: "Client", preferences: Any = None) -> None:
    """Initialize the session from the user's preferences.

    Steps run in a fixed order and every fallible one comes before the session
    state is touched, so a failure leaves the session uninitialized:

    1. Refuse a second setup.
    2. Define highlight groups, so that a preferences error below is already
       rendered with the plugin colors. These are not rolled back.
    3. Build the configuration.
    4. Register the user commands.
    5. Store the configuration and mark the session as set up.

    Args:
        client: Session handle.
        preferences: Dynamic value received from the host, or ``None``.

    Raises:
        AlreadySetup: If the session was already set up.
        BadPreferences: If ``preferences`` does not match the schema.
        HostError: If the host rejects a highlight or command definition.
    """
    if client.already_setup:
        raise AlreadySetup()

    highlights.setup(client.host)

    config = build_config(preferences)

    register_commands(client)

    client.set_config(config)
    client.did_setup()
    logger.info("Session set up with notes_dir '%s'", config.notes_dir)
