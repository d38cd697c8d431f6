"""User commands for navigating notes.

Handlers receive the session handle and the host's command arguments, validate
them with the pydantic input models, and delegate to
obsidian_nav.core.note_operations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from obsidian_nav.constants import OPEN_COMMAND
from obsidian_nav.core.cursor_operations import get_reference_under_cursor
from obsidian_nav.core.note_operations import open_note
from obsidian_nav.data_models import CommandArgs, Reference
from obsidian_nav.errors import InvalidArguments, NoReference
from obsidian_nav.models import OpenNoteInput

if TYPE_CHECKING:
    from obsidian_nav.session import Client

logger = logging.getLogger(__name__)


def _validation_reason(exc: ValidationError) -> str:
    error = exc.errors(include_url=False)[0]
    return error["msg"].removeprefix("Value error, ")


def obsidian_open(client: "Client", args: CommandArgs) -> None:
    """Open the note under the cursor, or the note whose id is given.

    Args:
        client: Session handle.
        args: Host command arguments:
            - fargs: empty to use the reference under the cursor, or a single
              note id
            - bang: open the note even if its file does not exist

    Error Handling:
        - More than one argument or a blank id → InvalidArguments
        - Cursor not on a reference → NoReference
        - Reference with an empty id → InvalidArguments
        - Note file missing without bang → FileNotFound
    """
    try:
        command_input = OpenNoteInput(fargs=args.fargs, bang=args.bang)
    except ValidationError as exc:
        raise InvalidArguments(command=OPEN_COMMAND, reason=_validation_reason(exc)) from exc

    if command_input.note_id is None:
        reference = get_reference_under_cursor(client.host)
        if reference is None:
            raise NoReference()
    else:
        reference = Reference(command_input.note_id)

    if not reference.id.strip():
        raise InvalidArguments(command=OPEN_COMMAND, reason=f'empty note id in "{reference}"')

    open_note(client.host, client.notes_dir, reference, create=command_input.bang)


def register(client: "Client") -> None:
    """Register the note commands on the host.

    Raises:
        HostError: If the host rejects the command definition.
    """
    client.host.create_user_command(
        OPEN_COMMAND,
        client.create_fn(obsidian_open),
        nargs="?",
        bang=True,
        desc="Open the note under the cursor, or the note with the given id",
    )
    logger.info("Registered command '%s'", OPEN_COMMAND)
