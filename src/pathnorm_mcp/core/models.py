from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


ROOT_MARKER = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."


class Dialect(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def from_flag(cls, is_windows: bool) -> "Dialect":
        return cls.WINDOWS if is_windows else cls.POSIX

    @property
    def is_windows(self) -> bool:
        return self is Dialect.WINDOWS


@dataclass(frozen=True)
class Root:
    @property
    def text(self) -> str:
        return ROOT_MARKER


@dataclass(frozen=True)
class Drive:
    letter: str

    @property
    def text(self) -> str:
        return f"{self.letter}:"


@dataclass(frozen=True)
class Name:
    text: str

    @property
    def is_current(self) -> bool:
        return self.text == CURRENT_DIR

    @property
    def is_parent(self) -> bool:
        return self.text == PARENT_DIR


Segment = Union[Root, Drive, Name]


class Failure(str, Enum):
    EMPTY = "empty"
    INVALID_SYNTAX = "invalid_syntax"
    ESCAPES_ROOT = "escapes_root"


@dataclass(frozen=True)
class ResolvedPath:
    """
    Absolute path with every `.` and `..` collapsed.
    `names` never contains `.` or `..`.
    """
    root: Root | Drive
    names: tuple[str, ...] = ()

    @property
    def dialect(self) -> Dialect:
        return Dialect.WINDOWS if isinstance(self.root, Drive) else Dialect.POSIX

    def __str__(self) -> str:
        designator = self.root.text if isinstance(self.root, Drive) else ""
        return designator + "/" + "/".join(self.names)

    def to_internal(self) -> list[str]:
        return [self.root.text, *self.names]

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self),
            "dialect": self.dialect.value,
            "segments": self.to_internal(),
        }


@dataclass(frozen=True)
class Resolution:
    """Outcome of a normalization: exactly one of `path` / `failure` is set."""
    path: ResolvedPath | None = None
    failure: Failure | None = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.failure is None):
            raise ValueError("Resolution needs exactly one of path or failure")

    @classmethod
    def success(cls, path: ResolvedPath) -> "Resolution":
        return cls(path=path)

    @classmethod
    def failed(cls, failure: Failure) -> "Resolution":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.path is not None

    @property
    def value(self) -> str | None:
        return str(self.path) if self.path is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "normalized": self.value,
            "segments": self.path.to_internal() if self.path is not None else None,
            "failure": self.failure.value if self.failure is not None else None,
        }
