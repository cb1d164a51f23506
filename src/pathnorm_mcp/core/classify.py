from __future__ import annotations

from .models import PARENT_DIR, CURRENT_DIR, ROOT_MARKER, Dialect, Drive, Name, Root, Segment
from .names import portable_posix_name, windows_name
from .tokenizer import split_path


def has_windows_drive(segment: str) -> bool:
    """`C:` style drive marker: one uppercase ASCII letter followed by a colon."""
    return (
        len(segment) == 2
        and "A" <= segment[0] <= "Z"
        and segment[1] == ":"
    )


def is_root_segment(segment: str, dialect: Dialect, strict: bool) -> bool:
    """
    Root test for the first segment of a path.

    strict=False: any bare "/" is a root (does the path have a root at all?).
    strict=True: on Windows only a drive marker counts (is the path already
    in canonical rooted form?).
    Drive markers are roots on Windows in both modes.
    """
    if segment == ROOT_MARKER and (not strict or not dialect.is_windows):
        return True
    return dialect.is_windows and has_windows_drive(segment)


def classify_segment(segment: str, dialect: Dialect, *, first: bool) -> Segment:
    """Decide once whether a token is a Root, a Drive or an ordinary Name."""
    if first and is_root_segment(segment, dialect, strict=False):
        if segment == ROOT_MARKER:
            return Root()
        return Drive(letter=segment[0])
    return Name(text=segment)


def _name_ok(name: str, dialect: Dialect) -> bool:
    if dialect.is_windows:
        return windows_name(name)
    return portable_posix_name(name)


def _is_valid(path: str, dialect: Dialect) -> bool:
    if not dialect.is_windows and "\\" in path:
        return False

    segments = split_path(path)
    if not segments:
        return False

    offset = 1 if is_root_segment(segments[0], dialect, strict=False) else 0
    return all(_name_ok(s, dialect) for s in segments[offset:])


def is_valid_path(path: str, is_windows: bool) -> bool:
    return _is_valid(path, Dialect.from_flag(is_windows))


def is_normalized_path(path: str, is_windows: bool) -> bool:
    """Valid, rooted under the strict rule, and free of `.` / `..` segments."""
    dialect = Dialect.from_flag(is_windows)
    if not _is_valid(path, dialect):
        return False

    segments = split_path(path)
    if not is_root_segment(segments[0], dialect, strict=True):
        return False

    return not any(s in (CURRENT_DIR, PARENT_DIR) for s in segments)
