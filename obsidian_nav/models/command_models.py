"""Pydantic input models for user commands.

Validation failures are turned into ``InvalidArguments`` errors by the command
handlers, naming the command that received the bad input.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OpenNoteInput(BaseModel):
    """Input model for the ``ObsidianOpen`` command.

    With no argument the reference under the cursor is opened; with one
    argument the argument is taken as a raw note id.

    Examples:
        >>> OpenNoteInput(fargs=[])
        >>> OpenNoteInput(fargs=["12345-ZXYD"], bang=True)
    """

    model_config = ConfigDict(extra="forbid")

    fargs: list[str] = Field(
        default_factory=list,
        max_length=1,
        description="Command arguments; at most one note id.",
        examples=[[], ["12345-ZXYD"]],
    )

    bang: bool = Field(
        False,
        description="Open the note even if its file does not exist yet.",
    )

    @field_validator("fargs")
    @classmethod
    def validate_fargs(cls, v: list[str]) -> list[str]:
        """Strip the note id and reject blank ones.

        Raises:
            ValueError: If the single argument is empty or only whitespace
        """
        cleaned = [arg.strip() for arg in v]
        if any(not arg for arg in cleaned):
            raise ValueError("Note id cannot be empty.")
        return cleaned

    @property
    def note_id(self) -> Optional[str]:
        """The note id given on the command line, if any."""
        return self.fargs[0] if self.fargs else None
