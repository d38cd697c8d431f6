"""Tests for parsing and formatting reference tokens."""

import pytest

from obsidian_nav.core.reference_operations import format_reference, parse_reference
from obsidian_nav.data_models import Reference
from obsidian_nav.errors import InternalError, MalformedReference


def test_parse_reference_with_tag():
    reference = parse_reference("[[12345-ZXYD|foo]]")
    assert reference.id == "12345-ZXYD"
    assert reference.tag == "foo"


def test_parse_reference_without_tag():
    reference = parse_reference("[[12345-ZXYD]]")
    assert reference.id == "12345-ZXYD"
    assert reference.tag is None


def test_parse_splits_on_first_separator_only():
    assert parse_reference("[[a|b|c]]") == Reference(id="a", tag="b|c")


def test_parse_empty_tag_is_kept():
    """A trailing separator yields an empty tag, not a missing one."""
    assert parse_reference("[[a|]]") == Reference(id="a", tag="")


def test_parse_empty_interior_gives_empty_id():
    assert parse_reference("[[]]") == Reference(id="", tag=None)


@pytest.mark.parametrize(
    "text",
    ["[[abc", "abc]]", "abc", "", " [[abc]]", "[[abc]] ", "[[]", "[abc]"],
)
def test_parse_rejects_malformed_tokens(text):
    with pytest.raises(MalformedReference) as exc_info:
        parse_reference(text)
    assert exc_info.value.text == text


def test_malformed_reference_is_an_internal_error():
    with pytest.raises(InternalError, match="internal error"):
        parse_reference("abc")


def test_format_reference():
    assert format_reference(Reference("12345-ZXYD")) == "[[12345-ZXYD]]"
    assert format_reference(Reference("12345-ZXYD", "foo")) == "[[12345-ZXYD|foo]]"


@pytest.mark.parametrize(
    "reference",
    [
        Reference("note"),
        Reference("note", "label"),
        Reference("note", ""),
        Reference("émoji 👍🏽", "tag|with|pipes"),
    ],
)
def test_format_then_parse_is_identity(reference):
    assert parse_reference(format_reference(reference)) == reference


def test_reference_filename():
    assert Reference("12345-ZXYD", "foo").filename() == "12345-ZXYD.md"
