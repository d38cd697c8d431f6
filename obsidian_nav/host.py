"""Interface of the host editor API the plugin talks to.

The plugin never imports an editor binding directly. Everything it needs from
the editor goes through an object satisfying :class:`Host`. Implementations
must raise :class:`obsidian_nav.errors.HostError` for failures reported by the
editor itself so the command wrapper can let them through untouched.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

from obsidian_nav.data_models import CommandArgs

# A message chunk: text plus the highlight group to render it with.
MessageChunk = tuple[str, Optional[str]]


@runtime_checkable
class Host(Protocol):
    """Editor operations consumed by the plugin."""

    def create_user_command(
        self,
        name: str,
        callback: Callable[[CommandArgs], Any],
        *,
        nargs: str,
        bang: bool,
        desc: str,
    ) -> None:
        """Register ``name`` as a user command invoking ``callback``."""
        ...

    def set_highlight(self, name: str, *, link: str, default: bool) -> None:
        """Define highlight group ``name`` as a link to ``link``."""
        ...

    def echo(self, chunks: Sequence[MessageChunk], history: bool) -> None:
        """Write a styled message to the message area."""
        ...

    def get_cursor(self) -> tuple[int, int]:
        """Return ``(row, column)`` of the cursor in the current window.

        The column counts grapheme clusters from the start of the line.
        """
        ...

    def get_current_line(self) -> str:
        """Return the text of the line under the cursor."""
        ...

    def command(self, command: str) -> None:
        """Execute an ex command."""
        ...

    def get_current_lines(self) -> list[str]:
        """Return the content of the current buffer, one entry per line."""
        ...

    def set_current_lines(self, lines: Sequence[str]) -> None:
        """Replace the content of the current buffer with ``lines``."""
        ...
