from actioninputs.descriptors.actions import describe_action, describe_actions
from actioninputs.descriptors.engine import derive_batch, derive_one, require_descriptors

__all__ = [
    "derive_batch",
    "derive_one",
    "describe_action",
    "describe_actions",
    "require_descriptors",
]
