from __future__ import annotations

from functools import lru_cache

from ..core.config import ServerConfig
from ..core.paths import base_dir_from_string


@lru_cache(maxsize=1)
def get_config() -> ServerConfig:
    return ServerConfig.from_env()


def base_segments(base_dir: str | None = None) -> list[str]:
    if base_dir is None or not base_dir.strip():
        return get_config().base_dir_segments()
    return base_dir_from_string(base_dir.strip())
