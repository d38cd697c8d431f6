"""Locate the reference under the cursor.

The host reports the cursor column as a display position, i.e. an index into
the grapheme clusters of the line. Reference tokens are matched on the UTF-8
encoded line, so the column is first converted to a byte offset.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

import regex

from obsidian_nav.core.reference_operations import parse_reference
from obsidian_nav.data_models import LocatedSpan, Reference
from obsidian_nav.host import Host

logger = logging.getLogger(__name__)

# UTF-8 continuation bytes never equal b"]", so the byte pattern cannot end a
# token in the middle of a multi-byte character.
_REFERENCE_PATTERN = re.compile(rb"\[\[[^\]]+\]\]")

_GRAPHEME = regex.compile(r"\X")

# Lone surrogates (undecodable bytes handed over by the host) are kept as
# three-byte sequences instead of failing the whole line.
_ENCODING_ERRORS = "surrogatepass"


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def display_to_byte_offset(line: str, display_column: int) -> int:
    """Convert a display column into a byte offset within ``line``.

    Args:
        line: Text of the line.
        display_column: 0-based index into the grapheme clusters of ``line``.

    Returns:
        The summed UTF-8 length of every cluster before ``display_column``.
    """
    clusters = _GRAPHEME.findall(line)
    return sum(len(cluster.encode("utf-8", _ENCODING_ERRORS)) for cluster in clusters[:display_column])


def find_references(line: str) -> Iterator[LocatedSpan]:
    """Yield every reference token of ``line`` in textual order.

    Raises:
        MalformedReference: If a matched token cannot be parsed.
    """
    encoded = line.encode("utf-8", _ENCODING_ERRORS)
    for match in _REFERENCE_PATTERN.finditer(encoded):
        reference = parse_reference(match.group(0).decode("utf-8", _ENCODING_ERRORS))
        yield LocatedSpan(start=match.start(), end=match.end(), reference=reference)


# ==============================================================================
# CURSOR OPERATIONS
# ==============================================================================


def find_reference(line: str, display_column: int) -> Optional[Reference]:
    """Return the reference at ``display_column`` in ``line``, if any.

    A column counts as being on a token when its byte offset lies within
    ``[start, end]``; the end is inclusive, so a cursor right after the closing
    ``]]`` still selects the token. The first such token wins.

    Args:
        line: Text of the line.
        display_column: 0-based grapheme index of the cursor.

    Returns:
        The :class:`Reference` under the cursor, or ``None``.

    Raises:
        MalformedReference: If the matched token cannot be parsed.

    Examples:
        >>> find_reference("[[12345-ZXYD|foo]] blah", 17)
        Reference(id='12345-ZXYD', tag='foo')
        >>> find_reference("[[12345-ZXYD|foo]]  blah", 19) is None
        True
    """
    offset = display_to_byte_offset(line, display_column)
    for span in find_references(line):
        if span.contains(offset):
            return span.reference
    return None


def get_reference_under_cursor(host: Host) -> Optional[Reference]:
    """Read the cursor and current line from ``host`` and locate a reference.

    Both values are queried on every call since the buffer may have changed
    since the previous invocation.

    Raises:
        HostError: If the host fails to report the cursor or line.
        MalformedReference: If the matched token cannot be parsed.
    """
    _, column = host.get_cursor()
    line = host.get_current_line()
    reference = find_reference(line, column)
    logger.debug("Reference at column %s: %s", column, reference)
    return reference
