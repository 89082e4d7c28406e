"""A network client with its routing table, queues and log."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from hubbmnet.activity_log import LogEntry
from hubbmnet.packets import Frame


@dataclass
class Client:
    """A host on the network."""

    client_id: str
    client_ip: str
    client_mac: str
    log_entries: list[LogEntry] = field(default_factory=list)
    routing_table: dict[str, str] = field(default_factory=dict)
    incoming_queue: deque[Frame] = field(default_factory=deque)
    outgoing_queue: deque[Frame] = field(default_factory=deque)

    def __str__(self) -> str:
        return (
            f"client_id: {self.client_id} client_ip: {self.client_ip} "
            f"client_mac: {self.client_mac}"
        )