from __future__ import annotations

from typing import Any, Iterable

from .common import base_segments, get_config
from ..core.classify import has_windows_drive, is_normalized_path, is_valid_path
from ..core.models import ROOT_MARKER, Dialect
from ..core.paths import resolve_path, to_internal_path
from ..core.resolver import resolve
from ..core.tokenizer import split_path


def _dialect_of(base: list[str]) -> Dialect:
    return Dialect.from_flag(has_windows_drive(base[0]))


def _format_base(base: list[str]) -> str:
    return str(resolve(base, _dialect_of(base)).value)


def split(path: str) -> dict[str, Any]:
    """
    Raw tokenization, no validation. `rooted` is True when the path starts
    with a separator.
    """
    segments = split_path(path)
    return {
        "path": path,
        "segments": segments,
        "rooted": bool(segments) and segments[0] == ROOT_MARKER,
    }


def validate(path: str, windows: bool = False) -> dict[str, Any]:
    return {
        "path": path,
        "dialect": Dialect.from_flag(windows).value,
        "valid": is_valid_path(path, windows),
        "normalized": is_normalized_path(path, windows),
    }


def normalize(path: str, base_dir: str | None = None) -> dict[str, Any]:
    """
    Absolute, `.`/`..`-free form of `path`.
    - base_dir=None => configured default base directory
    - relative paths resolve against base_dir
    - failure is one of: empty, invalid_syntax, escapes_root
    """
    base = base_segments(base_dir)
    res = resolve_path(path, base)
    return {
        "path": path,
        "base_dir": _format_base(base),
        "dialect": _dialect_of(base).value,
        **res.to_dict(),
    }


def normalize_many(paths: Iterable[str], base_dir: str | None = None) -> dict[str, Any]:
    """
    Normalizes a batch of paths against one base directory.
    """
    items = list(paths)
    limit = get_config().max_batch
    if len(items) > limit:
        raise ValueError(f"Too many paths: {len(items)} > {limit}")

    base = base_segments(base_dir)
    results = []
    for p in items:
        res = resolve_path(p, base)
        results.append({"path": p, **res.to_dict()})

    return {
        "base_dir": _format_base(base),
        "dialect": _dialect_of(base).value,
        "count": len(results),
        "failed": sum(1 for r in results if not r["ok"]),
        "results": results,
    }


def to_internal(path: str, windows: bool = False) -> dict[str, Any]:
    return {
        "path": path,
        "dialect": Dialect.from_flag(windows).value,
        "segments": to_internal_path(path, windows),
    }
