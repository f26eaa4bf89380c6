"""
Command-line entry point.

Usage:
    python -m device_simulator [--root DIR] [--host HOST] [--port PORT]
"""

import argparse
import dataclasses
import sys
from pathlib import Path

import uvicorn

from device_simulator.config import settings_from_env
from device_simulator.transport import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="device-simulator",
        description="Serve embedded device web assets and a WebSocket echo channel",
    )
    parser.add_argument("--root", type=Path, help="content root directory")
    parser.add_argument("--host", help="bind address")
    parser.add_argument("--port", type=int, help="listening port (default 8080)")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    parser.add_argument(
        "--no-gzip",
        action="store_true",
        help="do not serve <file>.gz when <file> is missing",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    
    overrides = {}
    if args.root is not None:
        overrides["content_root"] = args.root
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.no_gzip:
        overrides["serve_gzip"] = False
    
    try:
        settings = dataclasses.replace(settings_from_env(), **overrides)
    except ValueError as e:
        print(f"device-simulator: {e}", file=sys.stderr)
        return 2
    
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        ws="websockets",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
