"""Plugin entry point loaded by the host editor."""

import logging
from typing import Any, Callable

from obsidian_nav.constants import LOG_LEVEL
from obsidian_nav.host import Host
from obsidian_nav.session import Client

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def load(host: Host) -> dict[str, Callable[..., Any]]:
    """Create the plugin session for ``host`` and return its public API.

    The returned mapping currently holds ``setup``, which accepts an optional
    preferences value.
    """
    logger.info("Loading Obsidian navigation plugin")
    return Client(host).build_api()
