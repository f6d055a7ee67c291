from actioninputs.models.action_type import ActionType, InputDescriptor, OutputDescriptor
from actioninputs.models.parameter import ActionDescription, ParameterDescriptor

__all__ = [
    "ActionDescription",
    "ActionType",
    "InputDescriptor",
    "OutputDescriptor",
    "ParameterDescriptor",
]
