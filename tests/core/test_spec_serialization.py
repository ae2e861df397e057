"""Tests for spec rendering, serialization scopes, and JSON serde."""

from datetime import date
from typing import ClassVar

import pytest
from pydantic import ValidationError

from valtype.core.config import SpecOptions, SpecSettings
from valtype.core.kinds import Date, Number, NumberType, String
from valtype.core.scope import SpecScope
from valtype.core.serde import SimpleSpecObject, json_dumps_spec, spec_from_json


class AnonymousNumberType(NumberType):
    id = None


class AnonymousNumber(Number):
    type: ClassVar[AnonymousNumberType] = AnonymousNumberType()


class OtherAnonymousNumber(Number):
    type: ClassVar[AnonymousNumberType] = AnonymousNumberType()


def test_bare_value_when_nothing_else_to_emit() -> None:
    assert Number(5).to_spec() == 5
    assert String("a").to_spec() == "a"


def test_require_type_puts_type_reference_first() -> None:
    v = Number(5)
    v.formatted = "five"

    spec = v.to_spec(require_type=True)

    assert spec == {"_": "valtype/core/number", "v": 5, "f": "five"}
    assert list(spec) == ["_", "v", "f"]


def test_require_type_without_formatted() -> None:
    assert Number(5).to_spec(require_type=True) == {"_": "valtype/core/number", "v": 5}


def test_omit_formatted_suppresses_formatted() -> None:
    v = Number(5)
    v.formatted = "five"
    assert v.to_spec(omit_formatted=True) == 5
    assert v.to_spec(require_type=True, omit_formatted=True) == {
        "_": "valtype/core/number",
        "v": 5,
    }


def test_settings_supply_defaults_and_arguments_win() -> None:
    v = Number(5)
    v.formatted = "five"
    settings = SpecSettings(omit_formatted=True, require_type=True)

    assert v.to_spec(settings=settings) == {"_": "valtype/core/number", "v": 5}
    assert v.to_spec(settings=settings, require_type=False, omit_formatted=False) == {
        "v": 5,
        "f": "five",
    }


def test_to_spec_in_scope_with_explicit_options() -> None:
    v = Number(5)
    v.formatted = "five"
    with SpecScope() as scope:
        assert v.to_spec_in_scope(scope, False, SpecOptions()) == {"v": 5, "f": "five"}
        assert v.to_spec_in_scope(scope, False, SpecOptions(omit_formatted=True)) == 5


def test_spec_options_merge_ignores_none() -> None:
    base = SpecOptions(omit_formatted=True)
    assert base.merge(omit_formatted=None) is base
    assert base.merge(omit_formatted=False) == SpecOptions(omit_formatted=False)


def test_anonymous_types_get_scope_local_ids() -> None:
    with SpecScope() as scope:
        a = AnonymousNumber(1).to_spec_in_scope(scope, True, SpecOptions())
        b = OtherAnonymousNumber(2).to_spec_in_scope(scope, True, SpecOptions())
        c = AnonymousNumber(3).to_spec_in_scope(scope, True, SpecOptions())

    assert a == {"_": "_1", "v": 1}
    assert b == {"_": "_2", "v": 2}
    assert c == {"_": "_1", "v": 3}


def test_disposed_scope_cannot_be_used() -> None:
    scope = SpecScope()
    with scope:
        pass
    assert scope.is_disposed
    with pytest.raises(RuntimeError, match="disposed"):
        scope.reference(Number.type)


def test_spec_round_trips_through_constructor() -> None:
    v = Number(5)
    v.formatted = "five"

    back = Number(v.to_spec(require_type=True))

    assert back == v
    assert back.formatted == "five"


def test_json_dumps_spec_preserves_key_order() -> None:
    v = Number(5)
    v.formatted = "five"
    assert json_dumps_spec(v.to_spec()) == '{"v":5,"f":"five"}'
    assert json_dumps_spec(v.to_spec(require_type=True)) == (
        '{"_":"valtype/core/number","v":5,"f":"five"}'
    )
    assert json_dumps_spec(Number(5).to_spec()) == "5"


def test_json_dates_as_iso_strings() -> None:
    d = Date("2024-01-02")
    text = json_dumps_spec(d.to_spec())
    assert text == '"2024-01-02"'
    assert spec_from_json(Date, text).value == date(2024, 1, 2)


def test_spec_from_json_structured() -> None:
    v = spec_from_json(Number, '{"_":"valtype/core/number","v":5,"f":"five"}')
    assert isinstance(v, Number)
    assert v.value == 5
    assert v.formatted == "five"


def test_spec_object_model_forbids_extra_keys() -> None:
    with pytest.raises(ValidationError):
        SimpleSpecObject.model_validate({"v": 1, "x": 2})
    with pytest.raises(ValidationError):
        SimpleSpecObject.model_validate({"f": "five"})
