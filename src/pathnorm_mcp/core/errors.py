from __future__ import annotations


class PathNormError(Exception):
    """Base error for the project."""


class InvalidBaseDirError(PathNormError, ValueError):
    pass


class UnrootedPathError(PathNormError, ValueError):
    pass


class NotNormalizedError(PathNormError, ValueError):
    pass
