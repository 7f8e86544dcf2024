#!/usr/bin/env python3
"""Main entry point for TaskBoard."""

import argparse
import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(settings.log_file, encoding="utf-8") if settings.log_file else logging.NullHandler()
        ]
    )


def run_http_server():
    """Run the HTTP API server."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "api.http_server:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TaskBoard task tracker")
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty task list"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Update settings if provided
    settings.api_host = args.host
    settings.api_port = args.port
    if args.no_seed:
        settings.seed_tasks = False

    configure_logging()

    try:
        run_http_server()
    except KeyboardInterrupt:
        logger.info("Shutting down TaskBoard...")
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
