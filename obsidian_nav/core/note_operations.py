"""Core logic for resolving and opening notes."""

from __future__ import annotations

import logging
from pathlib import Path

from obsidian_nav import messages
from obsidian_nav.core.frontmatter_operations import render_frontmatter
from obsidian_nav.data_models import Note, Reference
from obsidian_nav.errors import FileNotFound
from obsidian_nav.host import Host

logger = logging.getLogger(__name__)

# Characters the host command line treats specially inside a file name.
_FNAME_SPECIAL = set(" \t\n*?[{`$\\%#'\"|!<")


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def resolve_note_path(notes_dir: Path, reference: Reference) -> Path:
    """Return the path of the note file ``reference`` points to.

    Examples:
        >>> resolve_note_path(Path("notes"), Reference("12345-ZXYD"))
        PosixPath('notes/12345-ZXYD.md')
    """
    return notes_dir.expanduser() / reference.filename()


def fnameescape(path: Path) -> str:
    """Escape ``path`` for use as a file argument of an ex command."""
    return "".join(f"\\{char}" if char in _FNAME_SPECIAL else char for char in str(path))


def _buffer_is_empty(host: Host) -> bool:
    """A fresh buffer holds no lines or a single empty one."""
    return all(not line for line in host.get_current_lines())


# ==============================================================================
# NOTE OPERATIONS
# ==============================================================================


def open_note(host: Host, notes_dir: Path, reference: Reference, create: bool = False) -> Path:
    """Ask the host to edit the note ``reference`` points to.

    Args:
        host: Host editor.
        notes_dir: Directory holding the note files.
        reference: Reference to open.
        create: Open the note even if its file is missing. An empty buffer
            is seeded with the note's frontmatter; a buffer that already
            holds unsaved text is left alone.

    Returns:
        Path of the opened note.

    Raises:
        FileNotFound: If the note file is missing and ``create`` is False.
        HostError: If the host fails to open the file.
    """
    target_path = resolve_note_path(notes_dir, reference)
    exists = target_path.exists()
    if not exists and not create:
        raise FileNotFound(file=str(target_path))

    messages.echoinfo(host, f"opening {reference.id}")
    host.command(f"edit {fnameescape(target_path)}")

    if not exists and _buffer_is_empty(host):
        host.set_current_lines(render_frontmatter(Note.from_reference(reference)))
        logger.info("Created buffer for new note '%s' at %s", reference.id, target_path)
    elif not exists:
        logger.info("Kept unsaved buffer of new note '%s' at %s", reference.id, target_path)
    else:
        logger.info("Opened note '%s' at %s", reference.id, target_path)
    return target_path
