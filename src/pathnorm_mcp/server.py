from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from pathnorm_mcp.resources import name_rules
from pathnorm_mcp.tools import (
    normalize,
    normalize_many,
    split,
    to_internal,
    validate,
)
from pathnorm_mcp.tools.common import get_config

logger = logging.getLogger(__name__)

mcp = FastMCP("pathnorm-mcp")


@mcp.tool()
def split_tool(path: str) -> dict:
    return split(path=path)


@mcp.tool()
def validate_tool(path: str, windows: bool = False) -> dict:
    return validate(path=path, windows=windows)


@mcp.tool()
def normalize_tool(path: str, base_dir: str | None = None) -> dict:
    return normalize(path=path, base_dir=base_dir)


@mcp.tool()
def normalize_many_tool(paths: list[str], base_dir: str | None = None) -> dict:
    return normalize_many(paths=paths, base_dir=base_dir)


@mcp.tool()
def to_internal_tool(path: str, windows: bool = False) -> dict:
    return to_internal(path=path, windows=windows)


@mcp.resource("pathnorm://rules/{dialect}")
def name_rules_resource(dialect: str) -> dict:
    return name_rules(dialect=dialect)


def main() -> None:
    cfg = get_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting pathnorm-mcp (default base dir %s)", cfg.default_base_dir)
    mcp.run()


if __name__ == "__main__":
    main()
