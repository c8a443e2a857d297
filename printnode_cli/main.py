"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m printnode_cli [--config PATH] [--log-level LVL] get <Name> [args...]
    python -m printnode_cli states [print_job_id]
    python -m printnode_cli client-key <uuid> <edition> <version>
    python -m printnode_cli delete-tag <name>

Environment Variables:
    PRINTNODE_API_KEY             API key (required)
    PRINTNODE_API_URL             API base URL (default: https://api.printnode.com)
    PRINTNODE_TIMEOUT             Per-call timeout in seconds (default: 4)
    PRINTNODE_CHILD_ACCOUNT_ID    Impersonate a child account by id
    PRINTNODE_CHILD_ACCOUNT_EMAIL Impersonate a child account by email
    PRINTNODE_LOG_LEVEL           Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from printnode.config import ClientConfig
from printnode.http.transport import Transport
from printnode.schemas.errors import PrintNodeException
from printnode_cli.commands import account, entities


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_USAGE_ERROR = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(path: Optional[Path]) -> ClientConfig:
    """Load a YAML config file if given, then overlay environment variables."""
    if path is None:
        return ClientConfig.from_env()
    return ClientConfig.from_yaml(path).with_env_overrides()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="printnode",
        description="PrintNode API client - list computers, printers and print jobs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--offset",
        type=str,
        default=None,
        help="Pagination offset for GET requests",
    )
    parser.add_argument(
        "--limit",
        type=str,
        default=None,
        help="Pagination limit for GET requests",
    )
    child = parser.add_mutually_exclusive_group()
    child.add_argument("--child-id", type=str, default=None, help="Act as child account (by id)")
    child.add_argument("--child-email", type=str, default=None, help="Act as child account (by email)")
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Report errors as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- get command ---
    get_parser = subparsers.add_parser(
        "get",
        help="Run a named accessor (Computers, Printers, PrintJobsByPrinters, ...)",
    )
    get_parser.add_argument("name", type=str, help="Accessor name")
    get_parser.add_argument("args", nargs="*", help="Ids / id sets")
    get_parser.set_defaults(func=entities.get_cmd)

    # --- states command ---
    states_parser = subparsers.add_parser(
        "states",
        help="Show print job states",
    )
    states_parser.add_argument("print_job_id", nargs="?", default=None, help="Print job id (set)")
    states_parser.set_defaults(func=entities.states_cmd)

    # --- client-key command ---
    key_parser = subparsers.add_parser(
        "client-key",
        help="Fetch a client key",
    )
    key_parser.add_argument("uuid", type=str)
    key_parser.add_argument("edition", type=str)
    key_parser.add_argument("version", type=str)
    key_parser.set_defaults(func=account.client_key_cmd)

    # --- delete-tag command ---
    tag_parser = subparsers.add_parser(
        "delete-tag",
        help="Delete an account tag",
    )
    tag_parser.add_argument("tag", type=str)
    tag_parser.set_defaults(func=account.delete_tag_cmd)

    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    transport: Optional[Transport] = None,
) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        transport: Transport override (used by tests)

    Returns:
        Exit code (0=success, 1=error, 2=usage error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE_ERROR

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.log_level, log_file=config.log_file)

    args.client_config = config
    args.transport = transport

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except PrintNodeException as e:
        if args.json:
            print(json.dumps(e.to_error_model().model_dump(), indent=2, default=str))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
