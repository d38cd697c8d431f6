"""YAML frontmatter generation for notes."""

from __future__ import annotations

import io

import yaml

from obsidian_nav.data_models import Note

FRONTMATTER_DELIMITER = "---"


def render_frontmatter(note: Note) -> list[str]:
    """Return the frontmatter block of ``note`` as a list of lines.

    The block always holds the keys ``id``, ``aliases`` and ``tags`` in that
    order, between two ``---`` lines. Empty lists are written inline as
    ``[]``; other lists are written as block sequences in insertion order.

    Args:
        note: Note metadata.

    Returns:
        The lines of the block, delimiters included, without line endings.

    Examples:
        >>> render_frontmatter(Note("foo").with_alias("bar"))
        ['---', 'id: foo', 'aliases:', '- bar', 'tags: []', '---']
    """
    buf = io.StringIO()
    yaml.safe_dump(
        note.as_payload(),
        buf,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=float("inf"),
    )
    return [FRONTMATTER_DELIMITER, *buf.getvalue().splitlines(), FRONTMATTER_DELIMITER]
