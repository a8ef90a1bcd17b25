#!/usr/bin/env python3
"""connpane - A terminal connections pane for a session snapshot."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connpane",
        description="Browse, filter and explore the connections of a session",
    )
    parser.add_argument(
        "--session",
        metavar="PATH",
        type=Path,
        help="Path to the session snapshot JSON (default: ~/.connpane/session.json)",
    )
    parser.add_argument(
        "--state",
        metavar="PATH",
        type=Path,
        help="Path to the client state JSON (default: ~/.connpane/client_state.json)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at debug level to ~/.connpane/connpane.log",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    conn_parser = subparsers.add_parser(
        "connections",
        help="Inspect session connections",
        aliases=["connection"],
    )
    conn_subparsers = conn_parser.add_subparsers(dest="conn_command", help="Connection commands")

    list_parser = conn_subparsers.add_parser("list", help="List session connections")
    list_parser.add_argument("--filter", "-f", help="Only show hosts matching every word")

    remove_parser = conn_subparsers.add_parser("remove", help="Remove a connection", aliases=["delete"])
    remove_parser.add_argument("type", help="Connection type (e.g. Spark)")
    remove_parser.add_argument("host", help="Connection host")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    from .shared.core.log_config import configure_logging

    configure_logging(debug=args.debug)

    if args.command is None:
        from .app import ConnpaneApp

        app = ConnpaneApp(session_path=args.session, state_path=args.state)
        app.run()
        return 0

    if args.command in {"connections", "connection"}:
        from .domains.connections.cli.commands import cmd_connection_list, cmd_connection_remove

        if args.conn_command == "list":
            return cmd_connection_list(args)
        if args.conn_command in {"remove", "delete"}:
            return cmd_connection_remove(args)
        print("Usage: connpane connections {list,remove} ...")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
