from __future__ import annotations

from typing import Any

from ..core.models import Dialect


def name_rules(dialect: str = "posix") -> dict[str, Any]:
    """
    Describes what each dialect accepts: separators, root forms and the
    per-segment filename rules applied by validation.
    """
    d = Dialect(dialect.strip().lower())

    if d.is_windows:
        return {
            "dialect": d.value,
            "separators": ["/", "\\"],
            "roots": ["<A-Z>:", "/ (root of the base directory's drive)"],
            "name_rules": [
                "non-empty",
                'no control characters and none of <>:"/\\|?*',
                "no leading or trailing space",
                "no trailing dot, except '.' and '..'",
            ],
            "output_separator": "/",
        }

    return {
        "dialect": d.value,
        "separators": ["/"],
        "roots": ["/"],
        "name_rules": [
            "non-empty",
            "only A-Z a-z 0-9 . _ -",
        ],
        "output_separator": "/",
    }
