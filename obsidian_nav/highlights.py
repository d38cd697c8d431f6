"""Highlight groups used to style plugin messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from obsidian_nav.host import Host

logger = logging.getLogger(__name__)

# Highlights the path of the config option that caused a deserialization error.
BAD_OPTION_PATH = "ObsidianBadOptionPath"

# Highlights the prefix tag of error messages.
ERROR_MSG_TAG = "ObsidianErrorMsgTag"

# Highlights the prefix tag of info messages.
INFO_MSG_TAG = "ObsidianInfoMsgTag"

# Highlights double quoted strings in messages.
MSG_DQUOTED = "ObsidianMsgField"

# Highlights the prefix tag of warning messages.
WARNING_MSG_TAG = "ObsidianWarningMsgTag"

# Group -> built-in group it links to.
HIGHLIGHT_LINKS: dict[str, str] = {
    BAD_OPTION_PATH: "Statement",
    ERROR_MSG_TAG: "ErrorMsg",
    INFO_MSG_TAG: "Question",
    MSG_DQUOTED: "Special",
    WARNING_MSG_TAG: "WarningMsg",
}


def setup(host: Host) -> None:
    """Define every plugin highlight group on the host.

    Groups are defined as defaults so user colorschemes win, which also makes
    re-applying them harmless.

    Raises:
        HostError: If the host rejects a highlight definition.
    """
    for name, link in HIGHLIGHT_LINKS.items():
        host.set_highlight(name, link=link, default=True)
    logger.debug("Defined %d highlight groups", len(HIGHLIGHT_LINKS))
