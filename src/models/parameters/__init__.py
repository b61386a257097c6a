"""Dialog parameter classes and utilities"""

from .dialog_parameter import DialogParameter
from .int_parameter import BoundedIntegerParameter, is_int, INT_MIN, INT_MAX

__all__ = [
    "DialogParameter",
    "BoundedIntegerParameter",
    "is_int",
    "INT_MIN",
    "INT_MAX",
]
