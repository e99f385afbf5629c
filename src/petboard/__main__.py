"""Petboard entry point.

Examples:
  petboard                     Start the web app
  petboard --port 8000 --dev   Start with auto-reload
  petboard --check-db          Verify the MongoDB connection and exit
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from petboard import __version__
from petboard.config import get_settings
from petboard.db.connection import ConnectionManager
from petboard.errors import ConfigurationError, PetboardError
from petboard.logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def check_db() -> int:
    """Open one connection, report, close. Returns the exit code."""
    manager = ConnectionManager()
    try:
        handle = await manager.ensure_connection()
    except PetboardError as e:
        print(f"❌ {e}")
        return 1
    print(f"✅ Connected to MongoDB database '{handle.database_name}'")
    await manager.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petboard",
        description="\U0001f43e Petboard - register pets and their owners",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument("--host", type=str, default=None, help="Host to bind (default: PETBOARD_HOST)")
    parser.add_argument(
        "--port", "-p", type=int, default=None, help="Port to bind (default: PETBOARD_PORT)"
    )
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--check-db", action="store_true", help="Check MongoDB connectivity and exit"
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(level=settings.log_level)

    if args.check_db:
        sys.exit(asyncio.run(check_db()))

    try:
        settings.require_mongodb_uri()
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)

    from petboard.app import run_server

    run_server(
        host=args.host or settings.host,
        port=args.port or settings.port,
        dev=args.dev,
    )


if __name__ == "__main__":
    main()
