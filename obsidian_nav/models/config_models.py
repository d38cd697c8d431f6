"""Pydantic schema for the preferences passed to ``setup``.

Unknown keys are rejected rather than ignored so that typos in a user's
configuration surface as errors.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from obsidian_nav.constants import DEFAULT_NOTES_DIR


class ObsidianConfig(BaseModel):
    """Resolved plugin configuration.

    Examples:
        >>> ObsidianConfig()
        ObsidianConfig(notes_dir=PosixPath('.'))
        >>> ObsidianConfig(notes_dir="~/notes")
        ObsidianConfig(notes_dir=PosixPath('~/notes'))
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        json_schema_extra={
            "examples": [
                {},
                {"notes_dir": "~/notes"},
            ]
        },
    )

    notes_dir: Path = Field(
        default=DEFAULT_NOTES_DIR,
        description=(
            "Directory holding the note files. "
            "Relative paths are resolved against the editor's working directory."
        ),
        examples=["./", "~/notes"],
    )
