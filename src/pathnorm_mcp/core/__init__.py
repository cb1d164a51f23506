from .classify import has_windows_drive, is_normalized_path, is_root_segment, is_valid_path
from .errors import InvalidBaseDirError, NotNormalizedError, PathNormError, UnrootedPathError
from .models import Dialect, Failure, Resolution, ResolvedPath
from .paths import base_dir_from_string, normalize_path, resolve_path, to_internal_path
from .resolver import resolve
from .tokenizer import split_path

__all__ = [
    "Dialect",
    "Failure",
    "InvalidBaseDirError",
    "NotNormalizedError",
    "PathNormError",
    "Resolution",
    "ResolvedPath",
    "UnrootedPathError",
    "base_dir_from_string",
    "has_windows_drive",
    "is_normalized_path",
    "is_root_segment",
    "is_valid_path",
    "normalize_path",
    "resolve",
    "resolve_path",
    "split_path",
    "to_internal_path",
]
