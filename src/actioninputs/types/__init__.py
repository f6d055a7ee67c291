from actioninputs.types.quantity import Quantity
from actioninputs.types.table import DeclaredType, TypeIntrinsics, TypeTag, classify, intrinsics

__all__ = [
    "DeclaredType",
    "Quantity",
    "TypeIntrinsics",
    "TypeTag",
    "classify",
    "intrinsics",
]
