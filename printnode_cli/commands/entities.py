"""
CLI Entity Commands

    printnode get <Name> [args...]
    printnode states [print_job_id]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from .common import EXIT_SUCCESS, make_dispatcher, print_entities

logger = logging.getLogger(__name__)


def get_cmd(args: Namespace) -> int:
    """Run a named accessor from the operation table."""
    dispatcher = make_dispatcher(args)
    logger.info(f"Fetching {args.name} {' '.join(args.args)}".rstrip())
    result = dispatcher.get(args.name, *args.args)
    print_entities(result)
    return EXIT_SUCCESS


def states_cmd(args: Namespace) -> int:
    """Print job states, for all jobs or one job."""
    dispatcher = make_dispatcher(args)
    ids = [args.print_job_id] if args.print_job_id else []
    result = dispatcher.get_print_job_states(*ids)
    print_entities(result)
    return EXIT_SUCCESS
