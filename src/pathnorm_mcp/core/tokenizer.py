from __future__ import annotations

import re

from .models import ROOT_MARKER


SEPARATORS = "/\\"

_SEPARATOR_RUN = re.compile(r"[/\\]+")


def split_path(path: str) -> list[str]:
    """
    Split `path` on runs of `/` or `\\`.

    Leading separators become a single root marker "/". Trailing separators
    and the empty string contribute no segment, so "" -> [] and "//" -> ["/"].
    """
    rest = path.lstrip(SEPARATORS)
    out: list[str] = [ROOT_MARKER] if len(rest) < len(path) else []
    out.extend(tok for tok in _SEPARATOR_RUN.split(rest) if tok)
    return out
