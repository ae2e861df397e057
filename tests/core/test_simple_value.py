"""Tests for `valtype.core.simple` value lifecycle and the set-once guard."""

import pytest

from valtype.core.errors import ArgumentRequiredError, ValueImmutableError
from valtype.core.kinds import Boolean, Number, String
from valtype.core.simple import Simple


def test_number_end_to_end_scenario() -> None:
    v1 = Number(5)
    assert v1.value == 5
    assert v1.formatted is None
    assert v1.key == "5"

    v1.value = 5  # same value: silently accepted
    assert v1.value == 5

    with pytest.raises(ValueImmutableError, match="Cannot change the value"):
        v1.value = 6
    assert v1.value == 5

    assert v1.to_spec() == 5
    v1.formatted = "five"
    assert v1.to_spec() == {"v": 5, "f": "five"}


@pytest.mark.parametrize(
    "kind,payload,other",
    [
        (Number, 5, 7),
        (String, "a", "b"),
        (Boolean, True, False),
    ],
)
def test_set_once_invariant(kind: type[Simple], payload: object, other: object) -> None:
    v = kind(payload)
    before = v.value

    v.value = payload
    assert v.value == before

    with pytest.raises(ValueImmutableError):
        v.value = other


def test_reassert_goes_through_cast() -> None:
    v = Number(5)
    # "5" casts to the int 5, identical to the established value
    assert v.ensure_value("5") == 5


def test_reassert_with_integral_float_is_noop() -> None:
    v = Number(5)
    v.value = 5.0
    assert v.value == 5
    assert type(v.value) is int


@pytest.mark.parametrize(
    "a,b",
    [
        ("5.0", "5"),
        (5.0, 5),
        (-0.0, 0.0),
        (-0.0, 0),
        ("1e3", 1000),
    ],
)
def test_equal_numbers_share_one_key(a: object, b: object) -> None:
    assert Number(a).key == Number(b).key
    assert Number(a) == Number(b)


def test_negative_zero_guard_agrees_with_key() -> None:
    a = Number(0.0)
    a.value = -0.0
    assert a == Number(-0.0)
    assert a.key == "0"


def test_non_integral_floats_stay_floats() -> None:
    assert Number("2.5").key == "2.5"
    assert Number(float("inf")).key == "inf"


def test_reassign_none_is_required_error_not_conflict() -> None:
    v = Number(5)
    with pytest.raises(ArgumentRequiredError):
        v.value = None
    assert v.value == 5


def test_cast_is_deterministic() -> None:
    assert Number("12").value == Number("12").value
    assert type(Number("12").value) is int
    assert Number(" 1.5 ").value == 1.5


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        ("", None),
        ("five", "five"),
        (0, "0"),
    ],
)
def test_formatted_normalization(raw: object, expected: str | None) -> None:
    v = Number(5)
    v.formatted = raw
    assert v.formatted == expected


def test_formatted_is_freely_mutable() -> None:
    v = Number(5)
    v.formatted = "five"
    v.formatted = "FIVE"
    assert v.formatted == "FIVE"
    v.formatted = None
    assert v.formatted is None


def test_str_prefers_formatted() -> None:
    v = Number(5)
    assert str(v) == "5"
    v.formatted = "five"
    assert str(v) == "five"


def test_repr_shows_value_and_formatted() -> None:
    v = Number(5)
    assert repr(v) == "Number(5)"
    v.formatted = "five"
    assert repr(v) == "Number(5, formatted='five')"


def test_key_equality_coherence() -> None:
    a = Number(5)
    b = Number("5")
    c = Number(6)

    assert a.key == b.key
    assert a == b
    assert hash(a) == hash(b)
    assert a.key != c.key
    assert a != c
    assert len({a, b, c}) == 2


def test_equality_ignores_formatted() -> None:
    a = Number(5)
    b = Number({"v": 5, "f": "five"})
    assert a == b


def test_equality_requires_same_kind() -> None:
    assert Number(5) != String("5")
    assert Number(5) != 5


def test_boolean_key_is_lowercase() -> None:
    assert Boolean(True).key == "true"
    assert Boolean("false").key == "false"
    assert Boolean(1) == Boolean(True)


def test_clone_is_independent_and_equal() -> None:
    v = Number(5)
    v.formatted = "five"

    c = v.clone()

    assert c is not v
    assert isinstance(c, Number)
    assert c.value == 5
    assert c.formatted == "five"

    c.formatted = "cinco"
    assert v.formatted == "five"


def test_missing_payload_is_required_error() -> None:
    with pytest.raises(ArgumentRequiredError, match="'value' is required"):
        Number()
    with pytest.raises(ArgumentRequiredError):
        Number(None)


def test_abstract_kind_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match="abstract type Simple"):
        Simple(5)
