from __future__ import annotations

from typing import Sequence

from .classify import classify_segment, is_root_segment
from .errors import UnrootedPathError
from .models import Dialect, Failure, Name, Resolution, ResolvedPath


def resolve(segments: Sequence[str], dialect: Dialect) -> Resolution:
    """
    Collapse `.` and `..` in a rooted segment sequence.

    Scans right to left with a counter of pending `..`: each ordinary name
    either survives (counter is zero) or is consumed by one pending `..`.
    A counter left above zero means the path climbs past its root.
    """
    if not segments or not is_root_segment(segments[0], dialect, strict=True):
        raise UnrootedPathError(f"Expected a rooted {dialect.value} path, got {list(segments)!r}")

    root = classify_segment(segments[0], dialect, first=True)

    pending_parents = 0
    kept: list[str] = []
    for raw in reversed(segments[1:]):
        seg = Name(raw)
        if seg.is_current:
            continue
        if seg.is_parent:
            pending_parents += 1
        elif pending_parents == 0:
            kept.append(seg.text)
        else:
            pending_parents -= 1

    if pending_parents:
        return Resolution.failed(Failure.ESCAPES_ROOT)

    kept.reverse()
    return Resolution.success(ResolvedPath(root=root, names=tuple(kept)))
