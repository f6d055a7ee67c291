import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal

import pytest

from actioninputs.coercion.engine import coerce_action_arguments, coerce_all, coerce_one
from actioninputs.core.contracts import CoercionFailure, TypedValue
from actioninputs.models.action_type import ActionType, InputDescriptor
from actioninputs.types.quantity import Quantity
from actioninputs.types.table import TypeTag


def _input(type_: str, name: str = "value") -> InputDescriptor:
    return InputDescriptor(name=name, type=type_)


def _value(type_: str, raw):
    result = coerce_one(_input(type_), raw, action_uid="test.action")
    assert isinstance(result, TypedValue), result
    return result.value


def test_none_is_absent_not_a_failure():
    assert coerce_one(_input("int"), None) is None


def test_number_to_int_truncates_toward_zero():
    assert _value("int", 3.9) == 3
    assert _value("java.lang.Integer", -3.9) == -3


def test_number_to_narrow_integral_wraps_like_fixed_width_conversion():
    assert _value("byte", 300.0) == 44
    assert _value("short", 70000.0) == 4464
    assert _value("int", 1e12) == 2**31 - 1
    assert _value("long", -1e30) == -(2**63)
    assert _value("int", float("nan")) == 0


def test_number_to_float_narrows_to_single_precision():
    assert _value("float", 0.1) == pytest.approx(0.1, rel=1e-7)
    assert _value("float", 0.1) != 0.1
    assert _value("float", 1e300) == float("inf")


def test_integer_wire_numbers_are_accepted():
    assert _value("long", 7) == 7
    assert _value("double", 2) == 2.0
    assert isinstance(_value("double", 2), float)


def test_number_to_decimal_and_quantity_uses_canonical_text():
    assert _value("DecimalType", 1.5) == Decimal("1.5")
    assert _value("QuantityType", 2.0) == Quantity(Decimal("2.0"))


def test_non_finite_number_to_decimal_is_a_failure():
    result = coerce_one(_input("DecimalType"), float("inf"), action_uid="a.b")

    assert isinstance(result, CoercionFailure)


def test_text_to_boolean_is_case_insensitive_and_strict():
    assert _value("boolean", "TRUE") is True
    assert _value("java.lang.Boolean", "False") is False
    assert isinstance(coerce_one(_input("boolean"), "yes"), CoercionFailure)


def test_text_to_integral_uses_literal_grammar_with_range_check():
    assert _value("int", "-42") == -42
    assert _value("long", "+9000000000") == 9_000_000_000
    assert isinstance(coerce_one(_input("byte"), "128"), CoercionFailure)
    assert isinstance(coerce_one(_input("int"), "3.0"), CoercionFailure)
    assert isinstance(coerce_one(_input("int"), "1_000"), CoercionFailure)


def test_text_to_floating_point():
    assert _value("double", "1.5e3") == 1500.0
    assert _value("double", " 2.5d ") == 2.5
    assert _value("java.lang.Double", "-Infinity") == float("-inf")
    assert isinstance(coerce_one(_input("double"), "1,5"), CoercionFailure)


def test_invalid_integer_literal_is_reported(caplog):
    with caplog.at_level(logging.WARNING, logger="actioninputs"):
        result = coerce_one(_input("int", name="speed"), "not-a-number", action_uid="fan.setSpeed")

    assert isinstance(result, CoercionFailure)
    assert result.kind == "InvalidLiteral"
    assert result.action_uid == "fan.setSpeed"
    assert result.input_name == "speed"
    assert result.value == "not-a-number"
    assert result.declared_type == "int"
    assert "Action fan.setSpeed input parameter 'speed'" in caplog.text


def test_text_to_calendar_types():
    assert _value("java.time.LocalDate", "2007-12-03") == date(2007, 12, 3)
    assert _value("java.time.LocalTime", "10:15:30") == time(10, 15, 30)
    assert _value("java.time.LocalTime", "10:15") == time(10, 15)
    assert _value("java.time.LocalDateTime", "2007-12-03T10:15:30.5") == datetime(2007, 12, 3, 10, 15, 30, 500000)


@pytest.mark.parametrize(
    "type_, raw",
    [
        ("java.time.LocalDate", "03/12/2007"),
        ("java.time.LocalDate", "2007-02-30"),
        ("java.time.LocalDate", "20071203"),
        ("java.time.LocalTime", "25:00:00"),
        ("java.time.LocalDateTime", "2007-12-03 10:15:30"),
        ("java.time.ZonedDateTime", "2007-12-03T10:15:30"),
        ("java.time.ZonedDateTime", "2007-12-03T10:15:30+01:00[Mars/Olympus]"),
    ],
)
def test_malformed_calendar_text_is_a_failure(type_, raw):
    assert isinstance(coerce_one(_input(type_), raw), CoercionFailure)


def test_zoned_datetime_with_region():
    value = _value("java.time.ZonedDateTime", "2007-12-03T10:15:30+01:00[Europe/Paris]")

    assert value.utcoffset() == timedelta(hours=1)
    assert value.tzinfo.zone == "Europe/Paris"
    assert (value.year, value.month, value.day, value.hour) == (2007, 12, 3, 10)


def test_zoned_datetime_offset_inconsistent_with_region_uses_region_rules():
    value = _value("java.time.ZonedDateTime", "2007-07-03T10:15:30+01:00[Europe/Paris]")

    assert value.utcoffset() == timedelta(hours=2)
    assert value.hour == 10


def test_zoned_datetime_with_offset_only():
    value = _value("java.time.ZonedDateTime", "2007-12-03T10:15:30-05:30")

    assert value.utcoffset() == -timedelta(hours=5, minutes=30)
    assert _value("java.time.ZonedDateTime", "2007-12-03T10:15:30Z").utcoffset() == timedelta(0)


def test_zoned_datetime_with_seconds_in_offset():
    value = _value("java.time.ZonedDateTime", "2007-12-03T10:15:30+01:00:30")

    assert value.utcoffset() == timedelta(hours=1, seconds=30)
    assert value.isoformat() == "2007-12-03T10:15:30+01:00:30"

    negative = _value("java.time.ZonedDateTime", "2007-12-03T10:15:30-01:00:30")
    assert negative.utcoffset() == -timedelta(hours=1, seconds=30)


def test_zoned_datetime_seconds_offset_with_region_uses_region_rules():
    value = _value("java.time.ZonedDateTime", "2007-12-03T10:15:30+01:00:30[Europe/Paris]")

    assert value.utcoffset() == timedelta(hours=1)
    assert value.tzinfo.zone == "Europe/Paris"


def test_zoned_datetime_rejects_out_of_range_offset_seconds():
    assert isinstance(coerce_one(_input("java.time.ZonedDateTime"), "2007-12-03T10:15:30+01:00:75"), CoercionFailure)


def test_text_to_decimal_and_quantity():
    assert _value("DecimalType", "12.50") == Decimal("12.50")
    assert _value("QuantityType", "21.5 °C") == Quantity(Decimal("21.5"), "°C")
    assert _value("QuantityType", "10m/s") == Quantity(Decimal("10"), "m/s")
    assert isinstance(coerce_one(_input("QuantityType"), "warm"), CoercionFailure)


def test_unhandled_pairings_pass_through():
    result = coerce_one(_input("java.lang.String"), "hello")
    assert result == TypedValue(TypeTag.STRING, "hello", passthrough=True)

    assert _value("boolean", True) is True
    assert _value("java.time.LocalDate", 20071203) == 20071203
    assert _value("java.util.List", [1, 2]) == [1, 2]
    assert _value("int", {"nested": 1}) == {"nested": 1}


def test_booleans_are_not_numbers():
    result = coerce_one(_input("int"), True)

    assert result.passthrough
    assert result.value is True


def test_coerce_all_is_best_effort():
    inputs = [_input("int", "a"), _input("int", "b"), _input("int", "c")]

    assert coerce_all("test.action", inputs, {"a": 3.0, "b": "oops"}) == {"a": 3}


def test_coerce_all_drops_undeclared_arguments():
    inputs = [_input("java.lang.String", "name")]

    assert coerce_all("test.action", inputs, {"name": "x", "extra": 1}) == {"name": "x"}


def test_coerce_all_accepts_generators_and_missing_arguments():
    inputs = (i for i in [_input("double", "x")])

    assert coerce_all("test.action", inputs, None) == {}


def test_coerce_action_arguments_uses_action_inputs():
    action_type = ActionType(
        uid="astro.getEventTime",
        inputs=[
            InputDescriptor(name="date", type="java.time.ZonedDateTime"),
            InputDescriptor(name="offset", type="long"),
        ],
    )

    result = coerce_action_arguments(action_type, {"date": "2024-03-31T12:00:00Z", "offset": 15.0})

    assert result["offset"] == 15
    assert result["date"].utcoffset() == timedelta(0)
