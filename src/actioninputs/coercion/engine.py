"""Best-effort coercion of wire arguments into the native values an action expects.

A field that is absent or not a valid literal for its declared type is left
out of the result and reported through logging and the diagnostic event bus.
Nothing here raises into the caller.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from actioninputs.core.contracts import CoercionFailure, CoercionResult, RawArguments, RawValue, TypedValue
from actioninputs.core.events import publish_event
from actioninputs.core.exceptions import InvalidLiteralError
from actioninputs.core.logger import current_action_uid, get_logger, push_action_uid, reset_action_uid
from actioninputs.models.action_type import ActionType, InputDescriptor
from actioninputs.types import literals

logger = get_logger(__name__)


def _is_number(raw: RawValue) -> bool:
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def _report(failure: CoercionFailure) -> None:
    logger.warning(
        f"Action {failure.action_uid} input parameter '{failure.input_name}': "
        f"converting value {failure.value!r} into type {failure.declared_type} failed "
        f"({failure.reason})! Input parameter is ignored."
    )
    publish_event(
        stage="coerce.input",
        status="invalid_literal",
        action_uid=failure.action_uid,
        details=failure.as_details(),
    )


def coerce_one(input: InputDescriptor, raw: RawValue, *, action_uid: Optional[str] = None) -> CoercionResult:
    """Coerce one raw wire value for ``input``.

    Returns:
        None when ``raw`` is None (the field is absent), a ``TypedValue`` on
        success or passthrough, or a ``CoercionFailure`` when ``raw`` is not a
        valid literal for the declared type.
    """
    if raw is None:
        return None

    declared = input.declared_type
    uid = action_uid or current_action_uid()
    try:
        if _is_number(raw) and literals.has_number_rule(declared):
            try:
                number = float(raw)
            except OverflowError as exc:
                raise InvalidLiteralError(raw, declared.identifier, "number out of floating point range") from exc
            return TypedValue(declared.tag, literals.narrow_number(declared, number))
        if isinstance(raw, str) and literals.has_text_grammar(declared):
            return TypedValue(declared.tag, literals.parse_text(declared, raw))
    except InvalidLiteralError as exc:
        failure = CoercionFailure(
            action_uid=uid,
            input_name=input.name,
            value=raw,
            declared_type=declared.identifier,
            reason=exc.literal_reason,
        )
        _report(failure)
        return failure

    return TypedValue(declared.tag, raw, passthrough=True)


def coerce_all(action_uid: str, inputs: Iterable[InputDescriptor], arguments: Optional[RawArguments]) -> Dict[str, Any]:
    """Coerce every declared input found in ``arguments``.

    Arguments not declared by ``inputs`` are dropped. Absent inputs and
    inputs whose value failed to coerce are omitted from the result.
    """
    arguments = arguments or {}
    inputs = list(inputs)
    token = push_action_uid(action_uid)
    try:
        coerced: Dict[str, Any] = {}
        skipped = []
        for item in inputs:
            result = coerce_one(item, arguments.get(item.name), action_uid=action_uid)
            if isinstance(result, TypedValue):
                coerced[item.name] = result.value
            elif isinstance(result, CoercionFailure):
                skipped.append(item.name)

        undeclared = sorted(set(arguments) - {item.name for item in inputs})
        if undeclared:
            logger.debug(f"Ignoring undeclared arguments for action {action_uid}: {undeclared}")
        if skipped:
            logger.debug(f"Coerced {len(coerced)} argument(s) for action {action_uid}; skipped {skipped}")
        return coerced
    finally:
        reset_action_uid(token)


def coerce_action_arguments(action_type: ActionType, arguments: Optional[RawArguments]) -> Dict[str, Any]:
    return coerce_all(action_type.uid, action_type.inputs, arguments)
