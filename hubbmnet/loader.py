"""Reading clients, routing tables and commands from input files."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from hubbmnet.client import Client

StrPath = str | PathLike[str]


def _read_lines(path: StrPath) -> list[str]:
    return Path(path).read_text().splitlines()


def _leading_count(lines: list[str], path: StrPath) -> int:
    if not lines:
        raise ValueError(f"{path}: file is empty, expected a count on the first line")
    try:
        return int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"{path}: invalid count {lines[0]!r}") from exc


def _take_counted(lines: list[str], path: StrPath) -> list[str]:
    count = _leading_count(lines, path)
    body = lines[1 : count + 1]
    if len(body) < count:
        raise ValueError(f"{path}: expected {count} entries, found {len(body)}")
    return body


def parse_client(line: str) -> Client:
    """Build a client from a line holding its ID, IP and MAC address."""
    client_id = client_ip = client_mac = ""
    for position, token in enumerate(line.split()):
        if position == 0:
            client_id = token
        elif position == 1:
            client_ip = token
        else:
            client_mac = token
    return Client(client_id, client_ip, client_mac)


def read_clients(path: StrPath) -> list[Client]:
    """Read the client count and that many client lines."""
    return [parse_client(line) for line in _take_counted(_read_lines(path), path)]


def _parse_route(line: str) -> tuple[str, str]:
    receiver_id = next_hop_id = ""
    for position, token in enumerate(line.split()):
        if position == 0:
            receiver_id = token
        else:
            next_hop_id = token
    return receiver_id, next_hop_id


def read_routing_tables(clients: list[Client], path: StrPath) -> None:
    """Fill each client's routing table from blocks separated by '-' lines.

    The n-th block belongs to the n-th client.
    """
    blocks: list[list[str]] = [[]]
    for line in _read_lines(path):
        if line == "-":
            blocks.append([])
        else:
            blocks[-1].append(line)

    for index, block in enumerate(blocks):
        if not block:
            continue
        if index >= len(clients):
            raise ValueError(
                f"{path}: routing table #{index + 1} has no matching client"
            )
        table = clients[index].routing_table
        for line in block:
            receiver_id, next_hop_id = _parse_route(line)
            table[receiver_id] = next_hop_id


def read_commands(path: StrPath) -> list[str]:
    """Read the command count and that many command lines."""
    return _take_counted(_read_lines(path), path)