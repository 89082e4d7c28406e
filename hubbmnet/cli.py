"""Command-line entry point: load the network files and run the commands."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from hubbmnet.loader import read_clients, read_commands, read_routing_tables
from hubbmnet.network import Network


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hubbmnet",
        description="Simulate layered frames travelling between network clients.",
    )
    parser.add_argument("clients_file", help="file listing the clients")
    parser.add_argument("routing_file", help="file holding the routing tables")
    parser.add_argument("commands_file", help="file listing the commands to run")
    parser.add_argument(
        "message_limit", type=int, help="maximum characters carried per frame"
    )
    parser.add_argument("sender_port", help="port number of the sending side")
    parser.add_argument("receiver_port", help="port number of the receiving side")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the input files and execute every command; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        clients = read_clients(args.clients_file)
        read_routing_tables(clients, args.routing_file)
        commands = read_commands(args.commands_file)
        Network().process_commands(
            clients,
            commands,
            args.message_limit,
            args.sender_port,
            args.receiver_port,
        )
    except (OSError, ValueError, KeyError) as exc:
        print(f"hubbmnet: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())