"""Command-line entry point for the RPG Maker MZ database tool server."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from rpgmaker_mcp.logging_config import configure_logging
from rpgmaker_mcp.settings import ServerSettings
from rpgmaker_mcp.toolkit import Toolkit


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="RPG Maker MZ database tool server")
    parser.add_argument(
        "--project",
        type=Path,
        help="Project folder containing game.rmmzproject (default: $RPGMAKER_PROJECT_PATH).",
    )
    parser.add_argument(
        "--engine",
        type=Path,
        help="RPG Maker MZ install folder for resource scans (default: $RPGMAKER_ENGINE_PATH).",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="Serve the tools over MCP stdio or as an HTTP API (default: stdio).",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Interface the HTTP transport binds to (default: 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port the HTTP transport listens on (default: 8000).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level written to stderr (default: $RPGMAKER_LOG_LEVEL or INFO).",
    )
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> ServerSettings:
    settings = ServerSettings.from_env()
    if args.project is not None:
        settings = replace(settings, project_root=args.project.expanduser())
    if args.engine is not None:
        settings = replace(settings, engine_root=args.engine.expanduser())
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())
    return settings


def main(argv: Sequence[str] | None = None) -> None:
    """Start serving the database tools."""

    args = _parse_args(argv)
    try:
        settings = _resolve_settings(args)
        logger = configure_logging(settings.log_level)
        toolkit = Toolkit.from_settings(settings)
    except ValueError as exc:
        # Standard output belongs to the stdio transport.
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    logger.info("Project: %s", settings.project_root)
    if settings.engine_root is not None:
        logger.info("Engine: %s", settings.engine_root)

    if args.transport == "http":
        import uvicorn

        from rpgmaker_mcp.api import create_app

        uvicorn.run(create_app(toolkit), host=args.host, port=args.port)
        return

    from rpgmaker_mcp.server import run_stdio

    run_stdio(toolkit)


if __name__ == "__main__":
    main()
