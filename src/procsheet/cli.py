"""Command-line interface for procsheet."""

import argparse
import json
import sys
from pathlib import Path

import uvicorn

from .config import settings
from .engine import process_rows
from .logging_setup import configure_logging


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="procsheet - cleans judicial process spreadsheets"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Process command
    process_parser = subparsers.add_parser(
        "process", help="Process a grid stored as a JSON array of rows"
    )
    process_parser.add_argument("input", type=Path, help="JSON file with the raw grid")
    process_parser.add_argument(
        "--output", "-o", type=Path, help="Write the result here instead of stdout"
    )

    args = parser.parse_args(argv)

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "process":
        configure_logging(settings.log_level, settings.debug)
        sys.exit(run_process(args.input, args.output))
    else:
        parser.print_help()
        sys.exit(1)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "procsheet.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def run_process(input_path: Path, output_path: Path = None) -> int:
    """Process a JSON grid file; returns the exit status."""
    try:
        grid = json.loads(input_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error reading {input_path}: {e}", file=sys.stderr)
        return 1

    result = process_rows(grid)
    if not result.succeeded:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    payload = json.dumps(
        result.model_dump(mode="json", exclude={"error"}),
        ensure_ascii=False,
        indent=2,
    )
    if output_path:
        output_path.write_text(payload + "\n", encoding="utf-8")
        print(f"Wrote {len(result.data)} rows to {output_path}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    main()
