#!/usr/bin/env python
"""
Start the Quill API under uvicorn.

Usage:
    python run_api.py
    python run_api.py --reload              # restart on code changes
    python run_api.py --port 8080 --log-level debug
"""

import argparse
import uvicorn

from shared.config import get_settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Start the Quill API")
    parser.add_argument("--host", help="Interface to bind (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Port to bind (default: PORT setting)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Server log level (default: LOG_LEVEL setting)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = get_settings()

    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=args.log_level or settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
