from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

import uvicorn
from dotenv import load_dotenv

from .server import create_app
from .settings import apply_env_overrides, load_server_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the API server.

    Settings are read from the JSON config file, then ``DEVURN_*``
    environment variables; CLI flags override both.
    """
    parser = argparse.ArgumentParser(
        description="Run the DEV URN API server",
        epilog="CLI arguments override config file and environment settings.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/devurn.json",
        help="Path to JSON configuration file (default: config/devurn.json)",
    )
    parser.add_argument("--host", type=str, default=None, help="Override server host")
    parser.add_argument("--port", type=int, default=None, help="Override server port")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s"
        )
    args = build_parser().parse_args(argv)

    config_path = Path(args.config)
    settings = apply_env_overrides(load_server_settings(config_path), os.environ)
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port

    logging.getLogger().setLevel(settings.log_level)
    if not config_path.exists():
        logger.info("Config file %s not found; using defaults", config_path)
    logger.info("Server configuration: %s:%d", settings.host, settings.port)

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
