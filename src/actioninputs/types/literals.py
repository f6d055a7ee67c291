"""Literal grammars for declared types.

``parse_text`` and ``narrow_number`` convert wire values into native values for
one declared type and raise ``InvalidLiteralError`` when the value does not fit
the grammar. ``format_value`` is the inverse: it renders a native value in the
canonical text form that ``parse_text`` accepts back.
"""

from __future__ import annotations

import math
import re
import struct
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import pytz

from actioninputs.core.exceptions import InvalidLiteralError
from actioninputs.types.quantity import Quantity, parse_decimal
from actioninputs.types.table import DeclaredType, TypeTag

_INTEGER = re.compile(r"^[+-]?\d+$")
_FLOATING = re.compile(r"^[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?)$")

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_TIME = r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
_OFFSET = r"(?P<offset>Z|[+-]\d{2}:\d{2}(?::\d{2})?)"
_ZONE = r"(?:\[(?P<zone>[^\]]+)\])?"

DATE_PATTERN = re.compile(rf"^{_DATE}$")
TIME_PATTERN = re.compile(rf"^{_TIME}$")
DATETIME_PATTERN = re.compile(rf"^{_DATE}T{_TIME}$")
ZONED_DATETIME_PATTERN = re.compile(rf"^{_DATE}T{_TIME}{_OFFSET}{_ZONE}$")

# Signed bit widths of the integral kinds
_WIDTHS: Dict[TypeTag, int] = {
    TypeTag.BYTE: 8,
    TypeTag.SHORT: 16,
    TypeTag.INT: 32,
    TypeTag.LONG: 64,
}

_MAX_OFFSET = timedelta(hours=18)


def _bounds(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def truncate_to_width(number: float, tag: TypeTag) -> int:
    """Truncate toward zero into the integral kind's width.

    NaN becomes 0. Out-of-range values saturate at the 64-bit bounds for long
    and at the 32-bit bounds otherwise; byte and short then keep only their
    low-order bits.
    """
    if math.isnan(number):
        return 0
    bits = _WIDTHS[tag]
    low, high = _bounds(64 if bits == 64 else 32)
    if math.isinf(number):
        saturated = high if number > 0 else low
    else:
        saturated = min(max(math.trunc(number), low), high)
    if bits < 32:
        return _wrap(saturated, bits)
    return saturated


def to_single_precision(number: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _parse_integral(text: str, tag: TypeTag) -> int:
    if not _INTEGER.match(text):
        raise ValueError("not an integer literal")
    value = int(text)
    low, high = _bounds(_WIDTHS[tag])
    if not low <= value <= high:
        raise ValueError(f"value out of range [{low}, {high}]")
    return value


def _parse_floating(text: str) -> float:
    candidate = text.strip()
    if not _FLOATING.match(candidate):
        raise ValueError("not a floating point literal")
    if candidate[-1] in "fFdD":
        candidate = candidate[:-1]
    return float(candidate)


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError("not a boolean literal")


def _microseconds(fraction: Optional[str]) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _match(pattern: re.Pattern[str], text: str, grammar: str) -> re.Match[str]:
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"expected {grammar}")
    return match


def _date_from(match: re.Match[str]) -> date:
    return date(int(match["year"]), int(match["month"]), int(match["day"]))


def _time_from(match: re.Match[str]) -> time:
    return time(
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
        _microseconds(match["fraction"]),
    )


def parse_date(text: str) -> date:
    return _date_from(_match(DATE_PATTERN, text, "YYYY-MM-DD"))


def parse_time(text: str) -> time:
    return _time_from(_match(TIME_PATTERN, text, "HH:MM:SS"))


def parse_datetime(text: str) -> datetime:
    match = _match(DATETIME_PATTERN, text, "YYYY-MM-DDTHH:MM:SS")
    return datetime.combine(_date_from(match), _time_from(match))


def _fixed_offset(raw: str) -> timedelta:
    if raw == "Z":
        return timedelta(0)
    sign = -1 if raw[0] == "-" else 1
    hours, minutes = int(raw[1:3]), int(raw[4:6])
    seconds = int(raw[7:9]) if len(raw) > 6 else 0
    if minutes > 59 or seconds > 59:
        raise ValueError(f"invalid offset {raw!r}")
    offset = sign * timedelta(hours=hours, minutes=minutes, seconds=seconds)
    if abs(offset) > _MAX_OFFSET:
        raise ValueError(f"offset {raw!r} out of range")
    return offset


def _localize(naive: datetime, zone: pytz.BaseTzInfo, preferred: timedelta) -> datetime:
    # Keep the written offset when the zone allows it at that local time,
    # otherwise let the zone rules decide (this also moves times out of DST gaps).
    for is_dst in (False, True):
        candidate = zone.normalize(zone.localize(naive, is_dst=is_dst))
        if candidate.replace(tzinfo=None) == naive and candidate.utcoffset() == preferred:
            return candidate
    return zone.normalize(zone.localize(naive, is_dst=False))


def parse_zoned_datetime(text: str) -> datetime:
    match = _match(ZONED_DATETIME_PATTERN, text, "YYYY-MM-DDTHH:MM:SS+HH:MM[:SS][zone]")
    naive = datetime.combine(_date_from(match), _time_from(match))
    offset = _fixed_offset(match["offset"])
    zone_name = match["zone"]
    if zone_name is None:
        if match["offset"] == "Z":
            return pytz.utc.localize(naive)
        if offset.seconds % 60:
            # pytz fixed offsets are whole minutes
            return naive.replace(tzinfo=timezone(offset))
        return pytz.FixedOffset(int(offset.total_seconds()) // 60).localize(naive)
    try:
        zone = pytz.timezone(zone_name)
    except pytz.UnknownTimeZoneError as exc:
        raise ValueError(f"unknown time zone {zone_name!r}") from exc
    return _localize(naive, zone, offset)


_TEXT_PARSERS: Dict[TypeTag, Callable[[str], Any]] = {
    TypeTag.BOOL: _parse_bool,
    TypeTag.FLOAT: lambda text: to_single_precision(_parse_floating(text)),
    TypeTag.DOUBLE: _parse_floating,
    TypeTag.DECIMAL_TEXT: parse_decimal,
    TypeTag.DATE: parse_date,
    TypeTag.TIME: parse_time,
    TypeTag.DATETIME: parse_datetime,
    TypeTag.ZONED_DATETIME: parse_zoned_datetime,
    TypeTag.QUANTITY: Quantity.parse,
}


def has_text_grammar(declared: DeclaredType) -> bool:
    return declared.tag in _TEXT_PARSERS or declared.tag in _WIDTHS


def parse_text(declared: DeclaredType, text: str) -> Any:
    """Parse ``text`` with the grammar of ``declared``.

    Raises:
        KeyError: the declared type has no text grammar (see ``has_text_grammar``).
        InvalidLiteralError: ``text`` does not match the grammar.
    """
    if declared.tag in _WIDTHS:
        parser: Callable[[str], Any] = lambda value: _parse_integral(value, declared.tag)
    else:
        parser = _TEXT_PARSERS[declared.tag]
    try:
        return parser(text)
    except ValueError as exc:
        raise InvalidLiteralError(text, declared.identifier, str(exc)) from exc


def has_number_rule(declared: DeclaredType) -> bool:
    return declared.tag in _WIDTHS or declared.tag in (
        TypeTag.FLOAT,
        TypeTag.DOUBLE,
        TypeTag.DECIMAL_TEXT,
        TypeTag.QUANTITY,
    )


def narrow_number(declared: DeclaredType, number: float) -> Any:
    """Convert a wire number (always floating on the wire) into the declared kind."""
    tag = declared.tag
    if tag in _WIDTHS:
        return truncate_to_width(number, tag)
    if tag is TypeTag.FLOAT:
        return to_single_precision(number)
    if tag is TypeTag.DOUBLE:
        return number
    try:
        if tag is TypeTag.DECIMAL_TEXT:
            return parse_decimal(repr(number))
        if tag is TypeTag.QUANTITY:
            return Quantity.from_number(number)
    except ValueError as exc:
        raise InvalidLiteralError(number, declared.identifier, str(exc)) from exc
    raise KeyError(tag)


def _format_floating(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(float(value))


def _format_zoned(value: datetime) -> str:
    text = value.isoformat()
    zone = getattr(value.tzinfo, "zone", None)
    if zone:
        text += f"[{zone}]"
    return text


_FORMATTERS: Dict[TypeTag, Callable[[Any], str]] = {
    TypeTag.BOOL: lambda value: "true" if value else "false",
    TypeTag.BYTE: str,
    TypeTag.SHORT: str,
    TypeTag.INT: str,
    TypeTag.LONG: str,
    TypeTag.FLOAT: _format_floating,
    TypeTag.DOUBLE: _format_floating,
    TypeTag.DECIMAL_TEXT: str,
    TypeTag.STRING: str,
    TypeTag.DATE: lambda value: value.isoformat(),
    TypeTag.TIME: lambda value: value.isoformat(),
    TypeTag.DATETIME: lambda value: value.isoformat(),
    TypeTag.ZONED_DATETIME: _format_zoned,
    TypeTag.QUANTITY: str,
}


def format_value(tag: TypeTag, value: Any) -> str:
    """Render ``value`` in the canonical text form of ``tag``."""
    formatter = _FORMATTERS.get(tag)
    if formatter is None:
        return str(value)
    return formatter(value)
