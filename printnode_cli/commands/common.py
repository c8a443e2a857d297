"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import json
from argparse import Namespace
from typing import Any

from printnode import RequestDispatcher
from printnode.dispatch import EntityResult, RawResult


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def make_dispatcher(args: Namespace) -> RequestDispatcher:
    """Build a dispatcher from the loaded config and global flags."""
    config = args.client_config
    dispatcher = RequestDispatcher.from_config(
        config,
        transport=getattr(args, "transport", None),
    )
    if args.offset is not None:
        dispatcher.set_offset(args.offset)
    if args.limit is not None:
        dispatcher.set_limit(args.limit)
    if args.child_id:
        dispatcher.impersonate_by_id(args.child_id)
    elif args.child_email:
        dispatcher.impersonate_by_email(args.child_email)
    return dispatcher


def print_entities(result: EntityResult) -> None:
    print(json.dumps([e.to_payload() for e in result], indent=2))


def print_raw(result: RawResult) -> None:
    payload: dict[str, Any] = {
        "status_code": result.status_code,
        "status_message": result.response.status_message,
        "body": result.response.text,
    }
    print(json.dumps(payload, indent=2))
