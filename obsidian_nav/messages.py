"""Render styled messages on the host's message area.

Every message is prefixed with the plugin tag, colored according to its
severity, and kept in the message history.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence, Union

from obsidian_nav import highlights
from obsidian_nav.constants import MSG_TAG
from obsidian_nav.errors import Chunk, split_dquoted

if TYPE_CHECKING:
    from obsidian_nav.host import Host

logger = logging.getLogger(__name__)

Body = Union[str, Sequence[Chunk]]


def echo(host: "Host", body: Body, tag_hlgroup: str) -> None:
    """Write ``body`` prefixed by the plugin tag highlighted with ``tag_hlgroup``.

    Args:
        host: Host editor.
        body: Plain text (double-quoted segments get highlighted) or
            pre-built chunks.
        tag_hlgroup: Highlight group of the prefix tag.

    Raises:
        HostError: If the host fails to display the message.
    """
    body_chunks = split_dquoted(body) if isinstance(body, str) else list(body)
    logger.debug("Message: %s", "".join(text for text, _ in body_chunks))
    host.echo([(MSG_TAG, tag_hlgroup), (" ", None), *body_chunks], True)


def echoerr(host: "Host", body: Body) -> None:
    echo(host, body, highlights.ERROR_MSG_TAG)


def echowarn(host: "Host", body: Body) -> None:
    echo(host, body, highlights.WARNING_MSG_TAG)


def echoinfo(host: "Host", body: Body) -> None:
    echo(host, body, highlights.INFO_MSG_TAG)
