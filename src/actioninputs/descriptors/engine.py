"""All-or-nothing derivation of UI parameter descriptors from action inputs."""

from __future__ import annotations

from typing import Iterable, List, Optional

from actioninputs.core.events import publish_event
from actioninputs.core.exceptions import UnsupportedInputTypeError
from actioninputs.core.logger import current_action_uid, get_logger
from actioninputs.models.action_type import InputDescriptor
from actioninputs.models.parameter import ParameterDescriptor
from actioninputs.types.table import intrinsics

logger = get_logger(__name__)


def derive_one(input: InputDescriptor) -> Optional[ParameterDescriptor]:
    """Describe ``input`` for a configuration UI.

    Returns None (after reporting it) when the declared type is unsupported.
    """
    rules = intrinsics(input.declared_type)
    if rules is None:
        error = UnsupportedInputTypeError(input_name=input.name, declared_type=input.type)
        logger.info(error.reason)
        publish_event(
            stage="describe.input",
            status="unsupported",
            action_uid=current_action_uid(),
            details=error.details,
        )
        return None

    default = input.default_value or rules.default
    return ParameterDescriptor(
        name=input.name,
        type=rules.category,
        label=input.label,
        description=input.description,
        required=rules.required or input.required,
        read_only=False,
        context=rules.context,
        default=default,
    )


def derive_batch(inputs: Iterable[InputDescriptor]) -> Optional[List[ParameterDescriptor]]:
    """Describe every input, or return None if any one of them cannot be described.

    A partially described parameter list is never returned.
    """
    parameters: List[ParameterDescriptor] = []
    for item in inputs:
        parameter = derive_one(item)
        if parameter is None:
            return None
        parameters.append(parameter)
    return parameters


def require_descriptors(inputs: Iterable[InputDescriptor]) -> List[ParameterDescriptor]:
    """Strict variant of ``derive_batch`` for callers that want an exception.

    The unsupported input is still logged and published by ``derive_one``
    before the exception is raised, so a caller that also logs it reports
    it twice.

    Raises:
        UnsupportedInputTypeError: for the first input with an unsupported type.
    """
    parameters: List[ParameterDescriptor] = []
    for item in inputs:
        parameter = derive_one(item)
        if parameter is None:
            raise UnsupportedInputTypeError(input_name=item.name, declared_type=item.type)
        parameters.append(parameter)
    return parameters
