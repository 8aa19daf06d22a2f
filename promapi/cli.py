"""CLI entry point for serving the Prometheus API shim.

Usage: uv run python -m promapi --binary-name frontend --binary-version v2.3.1
"""

import argparse
import logging

import uvicorn

from promapi.logging_config import setup_logging
from promapi.main import create_app
from promapi.settings import Settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="promapi", description=__doc__.splitlines()[0])
    parser.add_argument("--host", help="Bind address (SERVICE_HOST)")
    parser.add_argument("--port", type=int, help="Listen port (SERVICE_PORT)")
    parser.add_argument("--log-level", help="Log level (LOG_LEVEL)")
    parser.add_argument("--binary-name", help="Name reported in the revision (BINARY_NAME)")
    parser.add_argument("--binary-version", help="Version reported in the revision (BINARY_VERSION)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    overrides = {
        "service_host": args.host,
        "service_port": args.port,
        "log_level": args.log_level,
        "binary_name": args.binary_name,
        "binary_version": args.binary_version,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the shim server."""
    cfg = build_settings(_parse_args(argv))
    setup_logging(cfg.log_level)

    logging.getLogger(__name__).info(
        "Listening on %s:%d", cfg.service_host, cfg.service_port
    )
    uvicorn.run(
        create_app(cfg),
        host=cfg.service_host,
        port=cfg.service_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
