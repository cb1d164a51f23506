from __future__ import annotations

from dataclasses import dataclass

import pytest

from pathnorm_mcp.core.paths import to_internal_path


@dataclass(frozen=True)
class BaseCase:
    segments: list[str]
    path: str       # normalized form of the base directory
    parent: str     # normalized form of its parent
    drive: str      # "" on POSIX, e.g. "Z:" on Windows

    @property
    def is_windows(self) -> bool:
        return bool(self.drive)

    def rooted(self, rest: str) -> str:
        return self.drive + rest


@pytest.fixture()
def posix_base() -> list[str]:
    return to_internal_path("/data", False)


@pytest.fixture()
def windows_base() -> list[str]:
    return to_internal_path("Z:\\data", True)


@pytest.fixture(params=["posix", "windows"])
def base_case(request) -> BaseCase:
    """
    The two base directories every normalize_path scenario runs against:
      - /data     (POSIX)
      - Z:\\data  (Windows)
    """
    if request.param == "posix":
        return BaseCase(to_internal_path("/data", False), "/data", "/", "")
    return BaseCase(to_internal_path("Z:\\data", True), "Z:/data", "Z:/", "Z:")
