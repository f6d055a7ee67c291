"""Declared-type classification and the per-type descriptor rules.

Declared types arrive as identifier strings from an action-type catalog.
``classify`` turns them into a ``DeclaredType`` exactly once at the boundary;
both engines then dispatch on the ``TypeTag`` instead of re-matching strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Literal, NamedTuple, Optional, Tuple


class TypeTag(Enum):
    BOOL = "bool"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL_TEXT = "decimal_text"
    STRING = "string"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    ZONED_DATETIME = "zoned_datetime"
    QUANTITY = "quantity"
    UNSUPPORTED = "unsupported"


ParameterCategory = Literal["BOOLEAN", "INTEGER", "DECIMAL", "TEXT"]
ParameterContext = Literal["date", "time", "datetime"]


@dataclass(frozen=True)
class DeclaredType:
    identifier: str
    tag: TypeTag
    primitive: bool = False

    @property
    def supported(self) -> bool:
        return self.tag is not TypeTag.UNSUPPORTED

    def __str__(self) -> str:
        return self.identifier


class TypeIntrinsics(NamedTuple):
    category: ParameterCategory
    context: Optional[ParameterContext]
    default: Optional[str]
    required: bool


_PRIMITIVES: Dict[str, TypeTag] = {
    "boolean": TypeTag.BOOL,
    "byte": TypeTag.BYTE,
    "short": TypeTag.SHORT,
    "int": TypeTag.INT,
    "long": TypeTag.LONG,
    "float": TypeTag.FLOAT,
    "double": TypeTag.DOUBLE,
}

# Short name -> (tag, qualified catalog spelling)
_BOXED: Dict[str, Tuple[TypeTag, str]] = {
    "Boolean": (TypeTag.BOOL, "java.lang.Boolean"),
    "Byte": (TypeTag.BYTE, "java.lang.Byte"),
    "Short": (TypeTag.SHORT, "java.lang.Short"),
    "Integer": (TypeTag.INT, "java.lang.Integer"),
    "Long": (TypeTag.LONG, "java.lang.Long"),
    "Float": (TypeTag.FLOAT, "java.lang.Float"),
    "Double": (TypeTag.DOUBLE, "java.lang.Double"),
    "String": (TypeTag.STRING, "java.lang.String"),
    "LocalDate": (TypeTag.DATE, "java.time.LocalDate"),
    "LocalTime": (TypeTag.TIME, "java.time.LocalTime"),
    "LocalDateTime": (TypeTag.DATETIME, "java.time.LocalDateTime"),
    "ZonedDateTime": (TypeTag.ZONED_DATETIME, "java.time.ZonedDateTime"),
    "DecimalType": (TypeTag.DECIMAL_TEXT, "org.openhab.core.library.types.DecimalType"),
    "QuantityType": (TypeTag.QUANTITY, "org.openhab.core.library.types.QuantityType"),
}

_BOXED_BY_IDENTIFIER: Dict[str, TypeTag] = {
    **{short: tag for short, (tag, _) in _BOXED.items()},
    **{qualified: tag for tag, qualified in _BOXED.values()},
}


@lru_cache(maxsize=256)
def classify(identifier: str) -> DeclaredType:
    """Map a declared-type identifier to its ``DeclaredType``.

    Total and pure: unknown identifiers yield ``TypeTag.UNSUPPORTED``.
    Identifiers are case-sensitive (``int`` is primitive, ``Integer`` boxed).
    """
    if identifier in _PRIMITIVES:
        return DeclaredType(identifier, _PRIMITIVES[identifier], primitive=True)
    tag = _BOXED_BY_IDENTIFIER.get(identifier, TypeTag.UNSUPPORTED)
    return DeclaredType(identifier, tag, primitive=False)


def known_identifiers() -> Tuple[str, ...]:
    return tuple(_PRIMITIVES) + tuple(_BOXED_BY_IDENTIFIER)


_CATEGORIES: Dict[TypeTag, ParameterCategory] = {
    TypeTag.BOOL: "BOOLEAN",
    TypeTag.BYTE: "INTEGER",
    TypeTag.SHORT: "INTEGER",
    TypeTag.INT: "INTEGER",
    TypeTag.LONG: "INTEGER",
    TypeTag.FLOAT: "DECIMAL",
    TypeTag.DOUBLE: "DECIMAL",
    TypeTag.STRING: "TEXT",
    TypeTag.DATE: "TEXT",
    TypeTag.TIME: "TEXT",
    TypeTag.DATETIME: "TEXT",
    TypeTag.ZONED_DATETIME: "TEXT",
    TypeTag.QUANTITY: "TEXT",
}

_CONTEXTS: Dict[TypeTag, ParameterContext] = {
    TypeTag.DATE: "date",
    TypeTag.TIME: "time",
    TypeTag.DATETIME: "datetime",
    TypeTag.ZONED_DATETIME: "datetime",
}

_PRIMITIVE_DEFAULTS: Dict[ParameterCategory, str] = {
    "BOOLEAN": "false",
    "INTEGER": "0",
    "DECIMAL": "0",
}


def intrinsics(declared: DeclaredType) -> Optional[TypeIntrinsics]:
    """Descriptor rules for a declared type, or None when it cannot be described.

    Primitive kinds cannot represent absence, so they carry a default and are
    always required.
    """
    category = _CATEGORIES.get(declared.tag)
    if category is None:
        return None
    if declared.primitive:
        return TypeIntrinsics(category, None, _PRIMITIVE_DEFAULTS[category], True)
    return TypeIntrinsics(category, _CONTEXTS.get(declared.tag), None, False)
