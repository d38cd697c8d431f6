"""Shared fixtures: a recording stand-in for the host editor."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import pytest

from obsidian_nav.data_models import CommandArgs
from obsidian_nav.errors import HostError
from obsidian_nav.session import Client


class FakeHost:
    """In-memory host recording every call the plugin makes."""

    def __init__(self, line: str = "", column: int = 0) -> None:
        self.line = line
        self.column = column
        self.commands: dict[str, dict[str, Any]] = {}
        self.highlights: dict[str, dict[str, Any]] = {}
        self.messages: list[list[tuple[str, Optional[str]]]] = []
        self.executed: list[str] = []
        self.buffers: dict[str, list[str]] = {}
        self.current_buffer: Optional[str] = None
        self.fail_command: Optional[str] = None
        self.fail_cursor = False

    def create_user_command(
        self,
        name: str,
        callback: Callable[[CommandArgs], Any],
        *,
        nargs: str,
        bang: bool,
        desc: str,
    ) -> None:
        if self.fail_command == name:
            raise HostError(f"E174: Command already exists: {name}")
        self.commands[name] = {"callback": callback, "nargs": nargs, "bang": bang, "desc": desc}

    def set_highlight(self, name: str, *, link: str, default: bool) -> None:
        self.highlights[name] = {"link": link, "default": default}

    def echo(self, chunks: Sequence[tuple[str, Optional[str]]], history: bool) -> None:
        self.messages.append(list(chunks))

    def get_cursor(self) -> tuple[int, int]:
        if self.fail_cursor:
            raise HostError("Invalid window id")
        return 1, self.column

    def get_current_line(self) -> str:
        return self.line

    def command(self, command: str) -> None:
        self.executed.append(command)
        if command.startswith("edit "):
            self.current_buffer = command[len("edit "):]
            self.buffers.setdefault(self.current_buffer, [])

    def get_current_lines(self) -> list[str]:
        return list(self.buffer_lines)

    def set_current_lines(self, lines: Sequence[str]) -> None:
        self.buffers[self.current_buffer] = list(lines)

    # Test helpers

    @property
    def buffer_lines(self) -> list[str]:
        """Lines of the current buffer; edits to the list change the buffer."""
        if self.current_buffer is None:
            return []
        return self.buffers.setdefault(self.current_buffer, [])

    def run(self, name: str, *fargs: str, bang: bool = False) -> Any:
        """Invoke a registered command the way the editor would."""
        args = CommandArgs(args=" ".join(fargs) or None, fargs=list(fargs), bang=bang)
        return self.commands[name]["callback"](args)

    def message_texts(self) -> list[str]:
        return ["".join(text for text, _ in chunks) for chunks in self.messages]


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def client(host: FakeHost) -> Client:
    return Client(host)


@pytest.fixture
def notes_dir(tmp_path):
    """A notes directory holding a single note ``12345-ZXYD``."""
    directory = tmp_path / "notes"
    directory.mkdir()
    (directory / "12345-ZXYD.md").write_text("---\nid: 12345-ZXYD\n---\n# Note\n", encoding="utf-8")
    return directory
