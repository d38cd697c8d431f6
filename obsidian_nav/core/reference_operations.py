"""Grammar of ``[[id]]`` / ``[[id|tag]]`` reference tokens."""

from __future__ import annotations

from obsidian_nav.data_models import Reference
from obsidian_nav.errors import MalformedReference

OPEN_DELIMITER = "[["
CLOSE_DELIMITER = "]]"
TAG_SEPARATOR = "|"


def parse_reference(text: str) -> Reference:
    """Parse a reference token.

    The token must start with ``[[`` and end with ``]]``; no surrounding
    whitespace is tolerated. The interior is split on the first ``|`` only, so
    ``[[a|b|c]]`` yields ``id="a"`` and ``tag="b|c"``. An empty interior gives
    an empty id; rejecting it is left to the caller.

    Args:
        text: The full token, delimiters included.

    Returns:
        The parsed :class:`Reference`.

    Raises:
        MalformedReference: If ``text`` is not delimited by ``[[`` and ``]]``.

    Examples:
        >>> parse_reference("[[12345-ZXYD|foo]]")
        Reference(id='12345-ZXYD', tag='foo')
        >>> parse_reference("[[12345-ZXYD]]")
        Reference(id='12345-ZXYD', tag=None)
    """
    if (
        len(text) < len(OPEN_DELIMITER) + len(CLOSE_DELIMITER)
        or not text.startswith(OPEN_DELIMITER)
        or not text.endswith(CLOSE_DELIMITER)
    ):
        raise MalformedReference(text)

    interior = text[len(OPEN_DELIMITER):-len(CLOSE_DELIMITER)]
    note_id, separator, tag = interior.partition(TAG_SEPARATOR)
    return Reference(id=note_id, tag=tag if separator else None)


def format_reference(reference: Reference) -> str:
    """Serialize a reference back to its token form.

    Exact left inverse of :func:`parse_reference`.
    """
    return str(reference)
