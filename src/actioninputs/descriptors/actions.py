from __future__ import annotations

from typing import Iterable, List

from actioninputs.core.logger import get_logger, push_action_uid, reset_action_uid
from actioninputs.descriptors.engine import derive_batch
from actioninputs.models.action_type import ActionType
from actioninputs.models.parameter import ActionDescription

logger = get_logger(__name__)


def describe_action(action_type: ActionType) -> ActionDescription:
    """Build the configuration-UI view of an action type.

    ``input_config_descriptions`` is None when any input type is unsupported.
    """
    token = push_action_uid(action_type.uid)
    try:
        parameters = derive_batch(action_type.inputs)
        if parameters is None:
            logger.debug(f"Action {action_type.uid} has inputs without a UI representation")
        return ActionDescription(
            action_uid=action_type.uid,
            label=action_type.label,
            description=action_type.description,
            inputs=action_type.inputs,
            input_config_descriptions=parameters,
            outputs=action_type.outputs,
        )
    finally:
        reset_action_uid(token)


def describe_actions(action_types: Iterable[ActionType]) -> List[ActionDescription]:
    return [describe_action(action_type) for action_type in action_types]
