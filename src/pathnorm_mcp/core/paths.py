from __future__ import annotations

import logging
from typing import Sequence

from .classify import has_windows_drive, is_normalized_path, is_root_segment, is_valid_path
from .errors import InvalidBaseDirError, NotNormalizedError
from .models import ROOT_MARKER, Dialect, Failure, Resolution
from .resolver import resolve
from .tokenizer import split_path

logger = logging.getLogger(__name__)


def _base_dialect(base_dir: Sequence[str]) -> Dialect:
    if not base_dir:
        raise InvalidBaseDirError("Base directory must not be empty")
    dialect = Dialect.from_flag(has_windows_drive(base_dir[0]))
    if not is_root_segment(base_dir[0], dialect, strict=True):
        raise InvalidBaseDirError(f"Base directory is not rooted: {list(base_dir)!r}")
    return dialect


def resolve_path(path: str, base_dir: Sequence[str]) -> Resolution:
    """
    Turn `path` into an absolute, `.`/`..`-free path.

    `base_dir` is an already-normalized directory in segment form (see
    `to_internal_path`); its first segment picks the dialect. Relative paths
    are resolved against it; on Windows a bare leading separator means the
    root of the base directory's drive.
    """
    dialect = _base_dialect(base_dir)

    segments = split_path(path)
    if not segments:
        logger.debug("resolve_path(%r): empty path", path)
        return Resolution.failed(Failure.EMPTY)

    if not is_valid_path(path, dialect.is_windows):
        logger.debug("resolve_path(%r): invalid %s syntax", path, dialect.value)
        return Resolution.failed(Failure.INVALID_SYNTAX)

    if is_root_segment(segments[0], dialect, strict=True):
        route = "absolute"
    elif dialect.is_windows and segments[0] == ROOT_MARKER:
        route = "drive-root"
        segments = [base_dir[0], *segments[1:]]
    else:
        route = "relative"
        segments = [*base_dir, *segments]

    res = resolve(segments, dialect)
    logger.debug("resolve_path(%r): %s -> %s", path, route, res.value or res.failure)
    return res


def normalize_path(path: str, base_dir: Sequence[str]) -> str | None:
    """Normalized string form of `path`, or None if it has none."""
    return resolve_path(path, base_dir).value


def to_internal_path(normalized_path: str, is_windows: bool) -> list[str]:
    if not is_normalized_path(normalized_path, is_windows):
        raise NotNormalizedError(f"Path is not normalized: {normalized_path!r}")
    return split_path(normalized_path)


def base_dir_from_string(base_dir: str) -> list[str]:
    """
    Segment form of a normalized base directory such as "/data" or "Z:\\data".
    The Windows dialect is used iff the string starts with a drive marker.
    """
    is_windows = has_windows_drive(base_dir[:2])
    try:
        return to_internal_path(base_dir, is_windows)
    except NotNormalizedError as e:
        raise InvalidBaseDirError(f"Base directory is not a normalized absolute path: {base_dir!r}") from e
