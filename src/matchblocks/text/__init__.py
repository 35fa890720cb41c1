from .canonical import full_process, is_valid, normalize, validate_string
from .slicing import ScalarOffsets, check_range, slice_scalars, slice_utf8

__all__ = [
    "ScalarOffsets",
    "check_range",
    "full_process",
    "is_valid",
    "normalize",
    "slice_scalars",
    "slice_utf8",
    "validate_string",
]
