"""
CLI entry point: serve the HTTP API.

Usage:
    # Serve on the configured host/port
    python -m app

    # Override the port
    python -m app --port 3000

    # Run without a database
    python -m app --storage memory
"""

import argparse

import uvicorn

from app.core.config import settings
from app.main import create_app


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="app",
        description="Serve the user HTTP API.",
    )
    parser.add_argument("--host", default=settings.host, help="Interface to bind.")
    parser.add_argument(
        "--port", type=int, default=settings.port, help="Port to listen on."
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING, ERROR."
    )
    parser.add_argument(
        "--storage",
        choices=["postgres", "memory"],
        default=settings.storage_backend,
        help="User storage backend.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and serve until the process is stopped."""
    args = build_parser().parse_args(argv)
    run_settings = settings.model_copy(
        update={
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
            "storage_backend": args.storage,
        }
    )
    uvicorn.run(
        create_app(settings=run_settings),
        host=run_settings.host,
        port=run_settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
