"""Tests for soapenv.encoder — recursive value encoding."""

from collections import OrderedDict

import pytest

from soapenv.encoder import encode_value
from soapenv.errors import UnsupportedValueError
from soapenv.models import NamespaceParam
from soapenv.tokens import CharData, EndElement, StartElement, TokenStream


def _encode(value, strict=False):
    stream = TokenStream()
    encode_value(stream, value, strict=strict)
    return stream.tokens()


# ── Scalars ─────────────────────────────────────────────────────────


def test_text_becomes_chardata():
    assert _encode("hello") == [CharData("hello")]


def test_text_is_not_escaped_by_encoder():
    assert _encode("a<b&c") == [CharData("a<b&c")]


def test_empty_text_still_emits_chardata():
    assert _encode("") == [CharData("")]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "0"), (7, "7"), (-42, "-42"), (10**20, "100000000000000000000")],
    ids=["zero", "positive", "negative", "big"],
)
def test_int_becomes_decimal_chardata(value, expected):
    assert _encode(value) == [CharData(expected)]


@pytest.mark.parametrize(
    "value",
    [None, 1.5, True, False, b"bytes", {1, 2}, object()],
    ids=["none", "float", "true", "false", "bytes", "set", "object"],
)
def test_unsupported_values_are_dropped(value):
    assert _encode(value) == []


# ── Mappings ────────────────────────────────────────────────────────


def test_mapping_wraps_each_entry():
    tokens = _encode({"A": "x", "B": 7})
    assert tokens == [
        StartElement("A"),
        CharData("x"),
        EndElement("A"),
        StartElement("B"),
        CharData("7"),
        EndElement("B"),
    ]


def test_mapping_nested():
    tokens = _encode({"User": {"Id": 3}})
    assert tokens == [
        StartElement("User"),
        StartElement("Id"),
        CharData("3"),
        EndElement("Id"),
        EndElement("User"),
    ]


def test_mapping_with_unsupported_value_keeps_element():
    """The element is still written; only its content vanishes."""
    assert _encode({"Price": 1.5}) == [StartElement("Price"), EndElement("Price")]


def test_mapping_non_string_key_is_stringified():
    assert _encode({5: "x"})[0] == StartElement("5")


def test_ordered_dict_is_a_mapping():
    tokens = _encode(OrderedDict([("Z", "1"), ("A", "2")]))
    assert [t.name for t in tokens if isinstance(t, StartElement)] == ["Z", "A"]


def test_empty_mapping_emits_nothing():
    assert _encode({}) == []


# ── Sequences ───────────────────────────────────────────────────────


def test_list_items_are_siblings_without_wrapper():
    assert _encode(["a", "b", 3]) == [CharData("a"), CharData("b"), CharData("3")]


def test_list_of_pairs_preserves_order():
    tokens = _encode([("Second", "2"), ("First", "1")])
    assert [t.name for t in tokens if isinstance(t, StartElement)] == ["Second", "First"]


def test_nested_lists_flatten():
    assert _encode([["a"], [["b"]]]) == [CharData("a"), CharData("b")]


# ── Ordered pairs ───────────────────────────────────────────────────


def test_pair_with_list_value():
    assert _encode(("Item", ["a", "b"])) == [
        StartElement("Item"),
        CharData("a"),
        CharData("b"),
        EndElement("Item"),
    ]


def test_pair_non_string_label_is_stringified():
    assert _encode((12, "x")) == [StartElement("12"), CharData("x"), EndElement("12")]


@pytest.mark.parametrize("value", [(), ("a",), ("a", "b", "c")], ids=["empty", "one", "three"])
def test_tuple_of_wrong_length_is_dropped(value):
    assert _encode(value) == []


# ── NamespaceParam ──────────────────────────────────────────────────


def test_namespace_param():
    tokens = _encode(NamespaceParam(namespace="ns", name="Foo", value="bar"))
    assert tokens == [StartElement("ns:Foo"), CharData("bar"), EndElement("ns:Foo")]


def test_namespace_param_nested_in_mapping():
    tokens = _encode({"Outer": NamespaceParam("tns", "Inner", {"Leaf": 1})})
    assert tokens == [
        StartElement("Outer"),
        StartElement("tns:Inner"),
        StartElement("Leaf"),
        CharData("1"),
        EndElement("Leaf"),
        EndElement("tns:Inner"),
        EndElement("Outer"),
    ]


def test_namespace_param_without_value_is_empty_element():
    assert _encode(NamespaceParam("ns", "Empty")) == [
        StartElement("ns:Empty"),
        EndElement("ns:Empty"),
    ]


# ── Strict mode ─────────────────────────────────────────────────────


def test_strict_rejects_unsupported_value():
    with pytest.raises(UnsupportedValueError, match="float"):
        _encode({"Price": 1.5}, strict=True)


def test_strict_rejects_bool():
    with pytest.raises(UnsupportedValueError, match="bool"):
        _encode(True, strict=True)


def test_strict_rejects_non_string_pair_label():
    with pytest.raises(UnsupportedValueError, match="label"):
        _encode((1, "x"), strict=True)


def test_strict_accepts_supported_tree():
    value = {"A": [("B", "x"), NamespaceParam("ns", "C", 1)]}
    assert _encode(value, strict=True) == _encode(value)


def test_strict_rejects_deeply_nested_unsupported_value():
    with pytest.raises(UnsupportedValueError):
        _encode({"A": [{"B": ("C", None)}]}, strict=True)
