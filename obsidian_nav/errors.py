"""Error taxonomy for the plugin.

Two categories exist:

- Domain errors (subclasses of :class:`ObsidianError`) are expected failures.
  The command wrapper renders them as a styled message and swallows them.
- :class:`HostError` originates from the editor API itself. It is never
  intercepted and always reaches the host unchanged.
"""

from __future__ import annotations

import re
from typing import Optional

from obsidian_nav import highlights

_DQUOTED = re.compile(r'"[^"]*"')

Chunk = tuple[str, Optional[str]]


class HostError(Exception):
    """Failure reported by the host editor API (e.g. invalid buffer handle)."""


class ObsidianError(Exception):
    """Base class for every domain error."""

    def chunks(self) -> list[Chunk]:
        """Return the message body as highlight chunks.

        Double-quoted substrings are highlighted with the message field group.
        """
        return split_dquoted(str(self))


class AlreadySetup(ObsidianError):
    def __init__(self) -> None:
        super().__init__("can't setup more than once per session")


class BadPreferences(ObsidianError):
    """A configuration value did not match the schema.

    Attributes:
        path: Dotted/indexed path to the offending field (``.`` for the root).
        reason: Human readable description of the violation.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"error parsing `{path}`: {reason}")

    def chunks(self) -> list[Chunk]:
        return [
            ("error parsing `", None),
            (self.path, highlights.BAD_OPTION_PATH),
            ("`: ", None),
            *split_dquoted(self.reason),
        ]


class InvalidArguments(ObsidianError):
    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"invalid arguments to command `{command}`: {reason}")


class InternalError(ObsidianError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"internal error: {reason}")


class MalformedReference(InternalError):
    """Text handed to the reference grammar is not a ``[[...]]`` token."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'malformed reference "{text}"')


class NoReference(ObsidianError):
    def __init__(self) -> None:
        super().__init__("cursor is not on a reference")


class FileNotFound(ObsidianError):
    def __init__(self, file: str) -> None:
        self.file = file
        super().__init__(f'file "{file}" not found')


def split_dquoted(text: str) -> list[Chunk]:
    """Split ``text`` into chunks, highlighting each ``"..."`` segment."""
    chunks: list[Chunk] = []
    last = 0
    for match in _DQUOTED.finditer(text):
        if match.start() > last:
            chunks.append((text[last:match.start()], None))
        chunks.append((match.group(0), highlights.MSG_DQUOTED))
        last = match.end()
    if last < len(text):
        chunks.append((text[last:], None))
    return chunks
