from .types import IntKind, INT_KINDS, MASK64
from .base import create_from_dict, ensure_literal_choice
from .bounds import Bounds, RangeLike, coerce_bounds

__all__ = [
    "IntKind",
    "INT_KINDS",
    "MASK64",
    "Bounds",
    "RangeLike",
    "coerce_bounds",
    "create_from_dict",
    "ensure_literal_choice",
]
