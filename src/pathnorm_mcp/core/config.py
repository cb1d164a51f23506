from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import PathNormError
from .paths import base_dir_from_string


@dataclass(frozen=True)
class ServerConfig:
    """
    Server configuration.
    Every field can be overridden from the environment (see `from_env`).
    """
    default_base_dir: str = "/"
    log_level: str = "INFO"
    max_batch: int = 500

    def base_dir_segments(self) -> list[str]:
        return base_dir_from_string(self.default_base_dir)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_batch = env.get("PATHNORM_MAX_BATCH", "").strip()
        try:
            max_batch = int(raw_batch) if raw_batch else defaults.max_batch
        except ValueError as e:
            raise PathNormError(f"PATHNORM_MAX_BATCH must be an integer, got {raw_batch!r}") from e

        cfg = cls(
            default_base_dir=env.get("PATHNORM_BASE_DIR", "").strip() or defaults.default_base_dir,
            log_level=env.get("PATHNORM_LOG_LEVEL", "").strip().upper() or defaults.log_level,
            max_batch=max(1, max_batch),
        )
        # raises InvalidBaseDirError for a non-normalized base
        cfg.base_dir_segments()
        return cfg
