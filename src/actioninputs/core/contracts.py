from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from actioninputs.types.table import TypeTag

# Loosely-typed value as produced by a JSON-like deserializer:
# None, bool, int/float, str, or anything else (passed through untouched).
RawValue = Any
RawArguments = Mapping[str, RawValue]


@dataclass(frozen=True)
class TypedValue:
    """Result of a successful coercion.

    ``passthrough`` is set when no coercion rule applied and ``value`` is the
    raw wire value itself.
    """

    tag: TypeTag
    value: Any
    passthrough: bool = False


@dataclass(frozen=True)
class CoercionFailure:
    """A raw value that is not a valid literal for the input's declared type."""

    action_uid: str
    input_name: str
    value: RawValue
    declared_type: str
    reason: str = "invalid literal"

    kind = "InvalidLiteral"

    def as_details(self) -> Dict[str, Any]:
        return {
            "action": self.action_uid,
            "input": self.input_name,
            "value": repr(self.value),
            "declared_type": self.declared_type,
            "reason": self.reason,
        }


CoercionResult = Optional[Union[TypedValue, CoercionFailure]]
