"""Command line entry point."""

import argparse
import logging
import os
import sys

import uvicorn
from loguru import logger
from pydantic import ValidationError

from .common.config import ResizerConfig
from .server import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-resizer",
        description="Serve origin images resized on demand.",
    )
    _ = parser.add_argument("--base-url", default="", help="The base URL to which keys are appended")
    _ = parser.add_argument(
        "--listen", default="0.0.0.0:8080", help="The address to listen for connections"
    )
    _ = parser.add_argument("--max-size", default="1000x1000", help="The max size of an image")
    _ = parser.add_argument(
        "--fetch-timeout",
        type=float,
        default=30.0,
        help="Seconds to wait for the origin (0 waits forever)",
    )
    _ = parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Log level (DEBUG shows per-phase timings)",
    )
    return parser


def parse_flags(argv: list[str] | None = None) -> ResizerConfig:
    """Parse command line flags into a validated config.

    Raises:
        pydantic.ValidationError: If a flag value is invalid
    """
    args = build_parser().parse_args(argv)
    return ResizerConfig(
        base_url=args.base_url,
        listen=args.listen,
        max_size=args.max_size,
        fetch_timeout=args.fetch_timeout,
        log_level=args.log_level,
    )


def setup_logging(level: str) -> None:
    logger.remove()
    _ = logger.add(sys.stderr, level=level)
    logging.basicConfig(level=level)


def main(argv: list[str] | None = None) -> None:
    try:
        config = parse_flags(argv)
    except ValidationError as e:
        logger.error(f"Failed to parse flags: {e}")
        sys.exit(1)

    setup_logging(config.log_level)
    logger.info(f"Serving {config.base_url} on {config.listen} (max size {config.max_size})")
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
