"""
CLI Account Commands

    printnode client-key <uuid> <edition> <version>
    printnode delete-tag <name>
"""

from __future__ import annotations

from argparse import Namespace

from .common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, make_dispatcher, print_raw


def client_key_cmd(args: Namespace) -> int:
    """Fetch a client key. Non-200 answers are printed and exit non-zero."""
    dispatcher = make_dispatcher(args)
    result = dispatcher.get_client_key(args.uuid, args.edition, args.version)
    print_raw(result)
    return EXIT_SUCCESS if result.response.ok else EXIT_RUNTIME_ERROR


def delete_tag_cmd(args: Namespace) -> int:
    dispatcher = make_dispatcher(args)
    result = dispatcher.delete_tag(args.tag)
    print_raw(result)
    return EXIT_SUCCESS
