"""Tests for bound values and marker information."""

import pytest

from ngqlspec.exceptions import NotSupportedError
from ngqlspec.parameters import BoundValue, LiteralKind, ParameterInfo


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, LiteralKind.NULL),
        (True, LiteralKind.BOOLEAN),
        (False, LiteralKind.BOOLEAN),
        (0, LiteralKind.INTEGER),
        (-3, LiteralKind.INTEGER),
        (2.5, LiteralKind.FLOAT),
        ("text", LiteralKind.STRING),
    ],
)
def test_from_python_kinds(value: object, kind: LiteralKind) -> None:
    bound = BoundValue.from_python(value)
    assert bound.kind is kind
    assert bound.value == value


def test_bool_is_not_an_integer() -> None:
    assert BoundValue.from_python(True) != BoundValue.from_python(1)


def test_integer_and_float_differ() -> None:
    assert BoundValue.from_python(1) != BoundValue.from_python(1.0)


def test_from_python_passes_bound_values_through() -> None:
    bound = BoundValue.string("x")
    assert BoundValue.from_python(bound) is bound


def test_from_python_rejects_other_types() -> None:
    with pytest.raises(NotSupportedError, match="'bytes'"):
        BoundValue.from_python(b"raw")


def test_bound_value_hash_and_repr() -> None:
    assert hash(BoundValue.integer(1)) == hash(BoundValue.integer(1))
    assert {BoundValue.null(), BoundValue.null()} == {BoundValue.null()}
    assert repr(BoundValue.string("a")) == "BoundValue(kind=<LiteralKind.STRING: 'string'>, value='a')"


def test_literal_kind_str() -> None:
    assert str(LiteralKind.FLOAT) == "float"


def test_parameter_info_equality() -> None:
    first = ParameterInfo(ordinal=1, position=10, placeholder_text="?")
    assert first == ParameterInfo(1, 10, "?")
    assert first != ParameterInfo(2, 10, "?")
    assert first != "?"
    assert len({first, ParameterInfo(1, 10, "?")}) == 1
    assert first.end == 11
