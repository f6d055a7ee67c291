"""actioninputs.

Typed input coercion and parameter-descriptor derivation for rule-engine actions.

Public API for action orchestrators:

- ``coerce_all`` / ``coerce_action_arguments``: best-effort conversion of wire
  arguments into the native values an action handler expects.
- ``derive_batch`` / ``describe_action``: all-or-nothing description of an
  action's inputs for a configuration UI.
"""

from actioninputs.coercion.engine import coerce_action_arguments, coerce_all, coerce_one
from actioninputs.descriptors.actions import describe_action, describe_actions
from actioninputs.descriptors.engine import derive_batch, derive_one
from actioninputs.models.action_type import ActionType, InputDescriptor, OutputDescriptor
from actioninputs.models.parameter import ActionDescription, ParameterDescriptor
from actioninputs.types.table import TypeTag, classify

__version__ = "0.1.0"

__all__ = [
    "ActionDescription",
    "ActionType",
    "InputDescriptor",
    "OutputDescriptor",
    "ParameterDescriptor",
    "TypeTag",
    "classify",
    "coerce_action_arguments",
    "coerce_all",
    "coerce_one",
    "derive_batch",
    "derive_one",
    "describe_action",
    "describe_actions",
]
