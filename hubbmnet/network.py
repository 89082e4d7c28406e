"""Command-driven simulation of frames travelling between clients."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from hubbmnet.activity_log import ActivityType, LogEntry
from hubbmnet.client import Client
from hubbmnet.packets import (
    ApplicationLayerPacket,
    Frame,
    NetworkLayerPacket,
    PhysicalLayerPacket,
    TransportLayerPacket,
)

TIMESTAMP = "2023-11-22 20:30:03"
FRAME_SEPARATOR = "--------"
COMMAND_RULE = "----------------------"


def split_message(message: str, limit: int) -> list[str]:
    """Cut a message into chunks of at most ``limit`` characters."""
    if limit < 1:
        raise ValueError(f"message limit must be at least 1, got {limit}")
    return [message[start : start + limit] for start in range(0, len(message), limit)]


class Network:
    """Runs network commands over a list of clients, writing a report."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    # -- output -----------------------------------------------------------

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def _line(self, text: str = "") -> None:
        self._write(text + "\n")

    # -- lookups ----------------------------------------------------------

    @staticmethod
    def _find_client(clients: Iterable[Client], client_id: str) -> Client:
        for client in clients:
            if client.client_id == client_id:
                return client
        raise KeyError(f"unknown client {client_id!r}")

    @staticmethod
    def _client_by_mac(clients: Iterable[Client], mac: str) -> Client | None:
        return next((client for client in clients if client.client_mac == mac), None)

    def _id_for_mac(self, clients: list[Client], mac: str) -> str:
        client = self._client_by_mac(clients, mac)
        return client.client_id if client is not None else ""

    @staticmethod
    def _mac_for_id(clients: Iterable[Client], client_id: str) -> str:
        return next(
            (client.client_mac for client in clients if client.client_id == client_id),
            "",
        )

    @staticmethod
    def _reachable(clients: Iterable[Client], client_id: str) -> bool:
        return any(client.client_id == client_id for client in clients)

    @staticmethod
    def _arguments(command: str, count: int) -> list[str]:
        tokens = command.split()
        if len(tokens) < count:
            raise ValueError(f"malformed command: {command!r}")
        return tokens

    # -- commands ---------------------------------------------------------

    def process_commands(
        self,
        clients: list[Client],
        commands: Iterable[str],
        message_limit: int,
        sender_port: str,
        receiver_port: str,
    ) -> None:
        """Execute every command in order."""
        for command in commands:
            self.execute(clients, command, message_limit, sender_port, receiver_port)

    def execute(
        self,
        clients: list[Client],
        command: str,
        message_limit: int,
        sender_port: str,
        receiver_port: str,
    ) -> None:
        """Print the command banner and run one command line."""
        tokens = command.split()
        self._write(f"{COMMAND_RULE}\nCommand: {command}\n{COMMAND_RULE}\n")
        name = tokens[0] if tokens else ""

        if name == "MESSAGE":
            self.message(clients, command, message_limit, sender_port, receiver_port)
        elif name == "SHOW_FRAME_INFO":
            tokens = self._arguments(command, 4)
            try:
                frame_index = int(tokens[3])
            except ValueError as exc:
                raise ValueError(f"invalid frame number in {command!r}") from exc
            self.show_frame_info(clients, tokens[1], tokens[2], frame_index)
        elif name == "SHOW_Q_INFO":
            tokens = self._arguments(command, 3)
            self.show_queue_info(clients, tokens[1], tokens[2])
        elif name == "SEND":
            self.send(clients)
        elif name == "RECEIVE":
            self.receive(clients)
        elif name == "PRINT_LOG":
            tokens = self._arguments(command, 2)
            self.print_log(clients, tokens[1])
        else:
            self._line("Invalid command.")

    def message(
        self,
        clients: list[Client],
        command: str,
        message_limit: int,
        sender_port: str,
        receiver_port: str,
    ) -> None:
        """Queue the frames of ``MESSAGE <sender> <receiver> #text#`` at the sender."""
        tokens = self._arguments(command, 3)
        sender = self._find_client(clients, tokens[1])
        receiver = self._find_client(clients, tokens[2])

        pieces = command.split("#")
        if len(pieces) < 2:
            raise ValueError(f"message text must be enclosed in '#': {command!r}")
        text = pieces[1]

        chunks = split_message(text, message_limit)
        for chunk in chunks:
            sender.outgoing_queue.append(
                self._build_frame(
                    clients, sender, receiver, chunk, sender_port, receiver_port, len(chunks)
                )
            )

        self._line(f'Message to be sent: "{text}"')
        self._line()
        self._print_frames(sender)

        sender.log_entries.append(
            LogEntry(
                TIMESTAMP,
                text,
                len(chunks),
                0,
                tokens[1],
                tokens[2],
                True,
                ActivityType.MESSAGE_SENT,
            )
        )

    def _build_frame(
        self,
        clients: list[Client],
        sender: Client,
        receiver: Client,
        chunk: str,
        sender_port: str,
        receiver_port: str,
        frame_count: int,
    ) -> Frame:
        next_hop_id = sender.routing_table.get(receiver.client_id)
        if next_hop_id is None:
            raise KeyError(
                f"client {sender.client_id!r} has no route to {receiver.client_id!r}"
            )
        next_hop = self._find_client(clients, next_hop_id)
        counters = {"frame_number": frame_count, "hop_number": 0}
        return Frame(
            application=ApplicationLayerPacket(
                0, sender.client_id, receiver.client_id, chunk, **counters
            ),
            transport=TransportLayerPacket(1, sender_port, receiver_port, **counters),
            network=NetworkLayerPacket(
                2, sender.client_ip, receiver.client_ip, **counters
            ),
            physical=PhysicalLayerPacket(
                3, sender.client_mac, next_hop.client_mac, **counters
            ),
        )

    def _print_frames(self, client: Client) -> None:
        for number, frame in enumerate(client.outgoing_queue, start=1):
            self._line(f"Frame: #{number}")
            self._line(frame.physical.describe())
            self._line(frame.network.describe())
            self._line(frame.transport.describe())
            self._line(frame.application.describe())
            self._line(f'Message chunk carried: "{frame.application.message_data}"')
            self._line("Number of hops so far: 0")
            self._line(FRAME_SEPARATOR)

    def show_frame_info(
        self, clients: list[Client], client_id: str, direction: str, frame_index: int
    ) -> None:
        """Describe frame number ``frame_index`` (from 1) of a client's queue."""
        client = self._find_client(clients, client_id)
        outgoing = direction == "out"
        queue = client.outgoing_queue if outgoing else client.incoming_queue

        if not 1 <= frame_index <= len(queue):
            self._line("No such frame.")
            return

        frame = queue[frame_index - 1]
        which = "outgoing" if outgoing else "incoming"
        app = frame.application
        self._line(f"Current Frame #{frame_index} on the {which} queue of client {client.client_id}")
        self._line(f'Carried Message: "{app.message_data}"')
        self._line(f"Layer 0 info: {app.describe()}")
        self._line(f"Layer 1 info: {frame.transport.describe()}")
        self._line(f"Layer 2 info: {frame.network.describe()}")
        self._line(f"Layer 3 info: {frame.physical.describe()}")
        self._line("Number of hops so far: 0")

    def show_queue_info(self, clients: list[Client], client_id: str, direction: str) -> None:
        """Report how many frames wait in a client's queue."""
        client = self._find_client(clients, client_id)
        if direction == "out":
            label, queue = "Outgoing", client.outgoing_queue
        else:
            label, queue = "Incoming", client.incoming_queue
        self._line(f"Client {client_id} {label} Queue Status")
        self._line(f"Current total number of frames: {len(queue)}")

    def send(self, clients: list[Client]) -> None:
        """Move every outgoing frame to the incoming queue of its next hop."""
        for client in clients:
            if not client.outgoing_queue:
                continue
            self._print_frames(client)
            while client.outgoing_queue:
                frame = client.outgoing_queue.popleft()
                frame.physical.hop_number += 1
                target = self._client_by_mac(clients, frame.physical.receiver_mac)
                if target is None:
                    raise KeyError(
                        f"no client with MAC address {frame.physical.receiver_mac!r}"
                    )
                target.incoming_queue.append(frame)

    def receive(self, clients: list[Client]) -> None:
        """Deliver, forward or drop every incoming frame at every client."""
        for client in clients:
            if not client.incoming_queue:
                continue
            frame_counter = 1
            received = ""
            while client.incoming_queue:
                frame = client.incoming_queue.popleft()
                app, physical = frame.application, frame.physical
                from_id = self._id_for_mac(clients, physical.sender_mac)
                route = client.routing_table.get(app.receiver_id, "")
                is_destination = app.receiver_id == client.client_id

                if is_destination:
                    self._line(
                        f"Client {client.client_id} receiving frame #{frame_counter} "
                        f"from client {from_id}, originating from client {app.sender_id}"
                    )
                    self._line(physical.describe())
                    self._line(frame.network.describe())
                    self._line(frame.transport.describe())
                    self._line(app.describe())
                    self._line(f'Message chunk carried: "{app.message_data}"')
                    self._line(f"Number of hops so far: {physical.hop_number}")
                    self._line(FRAME_SEPARATOR)
                elif not self._reachable(clients, route):
                    self._line(
                        f"Client {client.client_id} receiving frame #{frame_counter} "
                        f"from client {from_id}, but intended for client "
                        f"{app.receiver_id}. Forwarding..."
                    )
                    self._line(
                        "Error: Unreachable destination. Packets are dropped after "
                        f"{physical.hop_number} hops!"
                    )
                else:
                    if frame_counter == 1:
                        self._line(
                            f"Client {client.client_id} receiving a message from client "
                            f"{from_id}, but intended for client {app.receiver_id}. "
                            "Forwarding..."
                        )
                    holder = self._client_by_mac(clients, physical.receiver_mac)
                    if holder is None:
                        holder = client
                    next_hop_id = holder.routing_table.get(app.receiver_id, "")
                    next_mac = self._mac_for_id(clients, next_hop_id)
                    self._line(
                        f"Frame #{frame_counter} MAC address change: New sender MAC "
                        f"{physical.receiver_mac}, new receiver MAC {next_mac}"
                    )
                    physical.sender_mac = physical.receiver_mac
                    physical.receiver_mac = next_mac
                    client.outgoing_queue.append(frame)
                received += app.message_data

                frame_counter += 1
                if frame_counter != app.frame_number + 1:
                    continue
                frame_counter = 1

                if is_destination:
                    self._line(
                        f'Client {client.client_id} received the message "{received}" '
                        f"from client {app.sender_id}"
                    )
                    activity, success = ActivityType.MESSAGE_RECEIVED, True
                elif not self._reachable(clients, route):
                    activity, success = ActivityType.MESSAGE_DROPPED, False
                else:
                    activity, success = ActivityType.MESSAGE_FORWARDED, True
                self._line(FRAME_SEPARATOR)

                client.log_entries.append(
                    LogEntry(
                        TIMESTAMP,
                        received,
                        physical.frame_number,
                        physical.hop_number + 1,
                        app.sender_id,
                        app.receiver_id,
                        success,
                        activity,
                    )
                )
                received = ""

    def print_log(self, clients: list[Client], client_id: str) -> None:
        """List every log entry of a client."""
        client = self._find_client(clients, client_id)
        if client.log_entries:
            self._write(f"Client {client.client_id} Logs:\n--------------\n")
        for number, entry in enumerate(client.log_entries, start=1):
            self._write(entry.render(number))