"""
Custom exception classes for the actioninputs package.

Two failure kinds exist in the coercion/description core:

- ``UnsupportedInputTypeError``: an input's declared type has no entry in the
  type table, so no parameter descriptor can be produced for it.
- ``InvalidLiteralError``: a raw value cannot be parsed per the declared
  type's grammar.

Neither is fatal. The engines turn them into an omitted field plus a
diagnostic (log record and event); they only escape as exceptions through
the strict helpers that explicitly ask for that.
"""

from typing import Any, Dict, Optional


class ActionInputsException(Exception):
    """Base exception class for all actioninputs exceptions."""

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class UnsupportedInputTypeError(ActionInputsException):
    """
    Raised when an action input has a declared type with no descriptor rule.

    Example:
        >>> raise UnsupportedInputTypeError(input_name="color", declared_type="HSBType")
    """

    kind = "UnsupportedInputType"

    def __init__(self, input_name: str, declared_type: str):
        self.input_name = input_name
        self.declared_type = declared_type
        super().__init__(
            reason=f"Unsupported input parameter '{input_name}' having type {declared_type}",
            details={"input": input_name, "declared_type": declared_type},
        )


class InvalidLiteralError(ActionInputsException):
    """
    Raised when a raw wire value is not a valid literal for the declared type.

    The literal parsers raise it; the coercion engine turns it into a
    ``CoercionFailure`` for the input it was processing.
    """

    kind = "InvalidLiteral"

    def __init__(self, value: Any, declared_type: str, reason: str = "invalid literal"):
        self.value = value
        self.declared_type = declared_type
        self.literal_reason = reason
        super().__init__(
            reason=f"Converting value {value!r} into type {declared_type} failed: {reason}",
            details={"declared_type": declared_type},
        )


class ActionTypeRegistryError(RuntimeError):
    pass


class CatalogLoadError(ActionInputsException):
    """Raised when an action-type catalog cannot be read or has an unknown shape."""

    pass
