from .path_tools import (
    split,
    validate,
    normalize,
    normalize_many,
    to_internal,
)

__all__ = [
    "split",
    "validate",
    "normalize",
    "normalize_many",
    "to_internal",
]
