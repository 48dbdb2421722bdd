import pytest

from hasselattice.elements.element_set import ElementSet, parse_elements
from hasselattice.errors import InvalidInput


def test_parse_elements_splits_on_commas():
    elements = parse_elements("a,b,c,d")
    assert elements.labels == ("a", "b", "c", "d")
    assert len(elements) == 4
    assert elements.subset_count == 16
    assert elements.full_mask == 0b1111


def test_parse_elements_keeps_raw_split():
    """Whitespace is not trimmed and duplicates are not removed."""
    elements = parse_elements("a, b,a")
    assert elements.labels == ("a", " b", "a")


def test_parse_elements_custom_delimiter():
    assert parse_elements("x;y", delimiter=";").labels == ("x", "y")


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_parse_elements_rejects_blank_text(text):
    with pytest.raises(InvalidInput):
        parse_elements(text)


def test_parse_elements_rejects_empty_delimiter():
    with pytest.raises(InvalidInput):
        parse_elements("a,b", delimiter="")


def test_members_follow_input_order():
    elements = ElementSet(["c", "a", "b"])
    assert elements.members(0) == ()
    assert elements.members(0b101) == ("c", "b")
    assert elements.members(elements.full_mask) == ("c", "a", "b")


def test_element_set_rejects_non_string_labels():
    with pytest.raises(InvalidInput):
        ElementSet(["a", 1])


def test_element_set_equality():
    assert ElementSet(["a", "b"]) == ElementSet(("a", "b"))
    assert ElementSet(["a", "b"]) == ["a", "b"]
    assert ElementSet(["a", "b"]) != ElementSet(["b", "a"])
