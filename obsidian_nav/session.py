"""Session state and the host-facing command wrapper."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from obsidian_nav import messages
from obsidian_nav.core import setup_operations
from obsidian_nav.errors import HostError, InternalError, ObsidianError
from obsidian_nav.host import Host
from obsidian_nav.models.config_models import ObsidianConfig

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


@dataclass
class SessionState:
    """Mutable state shared by every :class:`Client` handle of a session.

    ``config`` is only written before ``did_setup`` flips to True.
    """

    did_setup: bool = False
    config: ObsidianConfig = field(default_factory=ObsidianConfig)


class Client:
    """Handle on the plugin session.

    Every handle built from the same :class:`SessionState` sees the same
    setup flag and configuration. The host delivers one callback at a time,
    so the state is mutated without locking.
    """

    def __init__(self, host: Host, state: Optional[SessionState] = None) -> None:
        self.host = host
        self._state = state if state is not None else SessionState()

    def clone(self) -> "Client":
        """Return a new handle sharing this session's state."""
        return Client(self.host, self._state)

    @property
    def already_setup(self) -> bool:
        return self._state.did_setup

    def did_setup(self) -> None:
        self._state.did_setup = True

    @property
    def config(self) -> ObsidianConfig:
        return self._state.config

    @property
    def notes_dir(self) -> Path:
        return self._state.config.notes_dir

    def set_config(self, config: ObsidianConfig) -> None:
        self._state.config = config

    def create_fn(self, handler: Handler, default: Any = None) -> Callable[..., Any]:
        """Wrap ``handler`` into a callable the host can invoke.

        The returned function calls ``handler(client, *args)`` with a handle on
        this session. Errors are routed two ways:

        - :class:`HostError` is re-raised unchanged so the host sees its own
          failure.
        - Any other error is rendered as a tagged error message and ``default``
          is returned instead. Exceptions outside the domain taxonomy are
          logged and reported as :class:`InternalError`.

        Args:
            handler: Callable taking a :class:`Client` followed by the host's
                arguments.
            default: Value returned when the handler fails with a domain error.

        Returns:
            The host-facing callable.
        """
        host = self.host
        state = self._state
        name = getattr(handler, "__name__", type(handler).__name__)

        @functools.wraps(handler)
        def host_fn(*args: Any) -> Any:
            try:
                return handler(Client(host, state), *args)
            except HostError:
                raise
            except ObsidianError as err:
                logger.warning("%s failed: %s", name, err)
                messages.echoerr(host, err.chunks())
            except Exception as exc:
                logger.exception("Unexpected failure in %s", name)
                messages.echoerr(host, InternalError(str(exc)).chunks())
            return default

        return host_fn

    def setup(self) -> Callable[..., None]:
        """Return the wrapped ``setup`` entry point."""
        return self.create_fn(setup_operations.setup)

    def build_api(self) -> dict[str, Callable[..., Any]]:
        """Return the public API of the plugin, keyed by function name."""
        return {"setup": self.setup()}
