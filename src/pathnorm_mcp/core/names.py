from __future__ import annotations

import string


# POSIX portable filename character set.
_PORTABLE_POSIX_CHARS = frozenset(string.ascii_letters + string.digits + "._-")

_WINDOWS_INVALID_CHARS = frozenset("".join(chr(c) for c in range(32)) + '<>:"/\\|?*')


def portable_posix_name(name: str) -> bool:
    """True if `name` uses only letters, digits, `.`, `_` and `-`."""
    return bool(name) and all(ch in _PORTABLE_POSIX_CHARS for ch in name)


def windows_name(name: str) -> bool:
    """
    True if `name` is a legal Windows file name:
      - non-empty, no control characters and none of <>:"/\\|?*
      - no leading or trailing space
      - no trailing dot, except for `.` and `..` themselves
    Reserved device names (CON, NUL, ...) are accepted.
    """
    if not name:
        return False
    if any(ch in _WINDOWS_INVALID_CHARS for ch in name):
        return False
    if name[0] == " " or name[-1] == " ":
        return False
    if name[-1] == "." and name not in (".", ".."):
        return False
    return True
