from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

_DECIMAL = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
DECIMAL_PATTERN = re.compile(rf"^{_DECIMAL}$")

# A unit symbol cannot start with a digit, sign or dot and never contains whitespace,
# e.g. "°C", "kWh", "m/s", "m²", "%".
_UNIT = r"[^\s\d+\-.][^\s]*"
QUANTITY_PATTERN = re.compile(rf"^(?P<value>{_DECIMAL})(?:\s*(?P<unit>{_UNIT}))?$")


def parse_decimal(text: str) -> Decimal:
    """Parse a plain decimal literal (no NaN/Infinity, no digit separators)."""
    candidate = text.strip()
    if not DECIMAL_PATTERN.match(candidate):
        raise ValueError(f"not a decimal literal: {text!r}")
    try:
        return Decimal(candidate)
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal literal: {text!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A decimal magnitude with a unit symbol; ``unit == ""`` means dimensionless."""

    value: Decimal
    unit: str = ""

    @classmethod
    def parse(cls, text: str) -> "Quantity":
        match = QUANTITY_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"not a quantity literal: {text!r}")
        return cls(parse_decimal(match.group("value")), match.group("unit") or "")

    @classmethod
    def from_number(cls, number: float, unit: str = "") -> "Quantity":
        return cls(parse_decimal(repr(float(number))), unit)

    @property
    def dimensionless(self) -> bool:
        return not self.unit

    def __str__(self) -> str:
        if self.dimensionless:
            return str(self.value)
        return f"{self.value} {self.unit}"
