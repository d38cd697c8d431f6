"""Data models for references, notes and command invocations."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from obsidian_nav.constants import NOTE_EXTENSION


@dataclass(frozen=True)
class Reference:
    """Parsed form of a ``[[id]]`` or ``[[id|tag]]`` token.

    ``tag`` is the optional secondary label shown instead of the id. It is
    ``None`` when the token has no ``|`` separator.
    """

    id: str
    tag: Optional[str] = None

    def filename(self) -> str:
        """Return the file name of the note this reference points to."""
        return f"{self.id}{NOTE_EXTENSION}"

    def __str__(self) -> str:
        if self.tag is None:
            return f"[[{self.id}]]"
        return f"[[{self.id}|{self.tag}]]"


@dataclass(frozen=True)
class LocatedSpan:
    """A reference token found in a line, with its half-open byte range."""

    start: int
    end: int
    reference: Reference

    def contains(self, offset: int) -> bool:
        """Return True if ``offset`` is on the token, closing brackets included."""
        return self.start <= offset <= self.end


@dataclass(frozen=True)
class Note:
    """Metadata used to build a note's frontmatter.

    Built incrementally::

        Note("foo").with_alias("bar").with_tag("baz")
    """

    id: str
    aliases: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    @classmethod
    def from_reference(cls, reference: Reference) -> "Note":
        """Build the note ``reference`` points to.

        The reference label becomes the note's alias. An empty label
        (``[[id|]]``) names nothing, so it does not produce an alias.
        """
        note = cls(reference.id)
        if reference.tag is not None and reference.tag != "":
            note = note.with_alias(reference.tag)
        return note

    def with_alias(self, alias: str) -> "Note":
        """Return a copy of the note with ``alias`` appended."""
        return replace(self, aliases=(*self.aliases, alias))

    def with_tag(self, tag: str) -> "Note":
        """Return a copy of the note with ``tag`` appended."""
        return replace(self, tags=(*self.tags, tag))

    def as_payload(self) -> dict[str, Any]:
        """Return the frontmatter mapping in canonical key order."""
        return {
            "id": self.id,
            "aliases": list(self.aliases),
            "tags": list(self.tags),
        }


@dataclass
class CommandArgs:
    """Arguments the host passes to a user command callback.

    Attributes:
        args: Raw argument string, ``None`` when the command got no argument.
        fargs: Arguments split the way the host splits them.
        bang: Whether the command was invoked with ``!``.
    """

    args: Optional[str] = None
    fargs: list[str] = field(default_factory=list)
    bang: bool = False
