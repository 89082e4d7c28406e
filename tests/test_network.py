import io

import pytest

from hubbmnet.activity_log import ActivityType
from hubbmnet.client import Client
from hubbmnet.network import Network, split_message

TEXT = "Hello world"
LIMIT = 4
MESSAGE = f"MESSAGE A C #{TEXT}#"
SENDER_PORT = "0706"
RECEIVER_PORT = "0607"


@pytest.fixture
def clients():
    a = Client("A", "10.0.0.1", "MAC-A")
    b = Client("B", "10.0.0.2", "MAC-B")
    c = Client("C", "10.0.0.3", "MAC-C")
    a.routing_table.update({"B": "B", "C": "B"})
    b.routing_table.update({"A": "A", "C": "C"})
    c.routing_table.update({"A": "B", "B": "B"})
    return [a, b, c]


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def network(out):
    return Network(out)


def _run(network, clients, *commands):
    network.process_commands(clients, list(commands), LIMIT, SENDER_PORT, RECEIVER_PORT)


def test_split_message_chunks_rejoin():
    chunks = split_message("abcdefg", 3)
    assert chunks == ["abc", "def", "g"]
    assert "".join(chunks) == "abcdefg"
    assert all(len(chunk) <= 3 for chunk in chunks)


def test_split_message_empty():
    assert split_message("", 5) == []


def test_split_message_rejects_bad_limit():
    with pytest.raises(ValueError):
        split_message("abc", 0)


def test_message_queues_frames(network, clients):
    _run(network, clients, MESSAGE)
    a = clients[0]
    chunks = split_message(TEXT, LIMIT)
    assert [f.application.message_data for f in a.outgoing_queue] == chunks
    for frame in a.outgoing_queue:
        assert frame.physical.sender_mac == "MAC-A"
        assert frame.physical.receiver_mac == "MAC-B"
        assert frame.network.receiver_ip == "10.0.0.3"
        assert frame.transport.sender_port == SENDER_PORT
        assert frame.application.frame_number == len(chunks)
        assert frame.physical.hop_number == 0
    entry = a.log_entries[-1]
    assert entry.activity_type is ActivityType.MESSAGE_SENT
    assert entry.message_content == TEXT
    assert entry.number_of_frames == len(chunks)


def test_message_prints_text(network, clients, out):
    _run(network, clients, MESSAGE)
    text = out.getvalue()
    queued = len(clients[0].outgoing_queue)
    assert queued == 3
    assert f'Message to be sent: "{TEXT}"' in text
    assert text.count("Frame: #") == queued
    assert f"Frame: #{queued}" in text


def test_send_moves_frames_to_next_hop(network, clients):
    _run(network, clients, MESSAGE, "SEND")
    a, b, _ = clients
    assert not a.outgoing_queue
    assert len(b.incoming_queue) == len(split_message(TEXT, LIMIT))
    assert all(frame.physical.hop_number == 1 for frame in b.incoming_queue)


def test_receive_forwards(network, clients):
    _run(network, clients, MESSAGE, "SEND", "RECEIVE")
    b = clients[1]
    assert not b.incoming_queue
    assert len(b.outgoing_queue) == len(split_message(TEXT, LIMIT))
    for frame in b.outgoing_queue:
        assert frame.physical.sender_mac == "MAC-B"
        assert frame.physical.receiver_mac == "MAC-C"
    entry = b.log_entries[-1]
    assert entry.activity_type is ActivityType.MESSAGE_FORWARDED
    assert entry.success_status is True
    assert entry.message_content == TEXT


def test_full_delivery(network, clients, out):
    _run(network, clients, MESSAGE, "SEND", "RECEIVE", "SEND", "RECEIVE")
    c = clients[2]
    entry = c.log_entries[-1]
    assert entry.activity_type is ActivityType.MESSAGE_RECEIVED
    assert entry.message_content == TEXT
    assert entry.number_of_hops == 3
    assert entry.sender_id == "A"
    assert f'Client C received the message "{TEXT}" from client A' in out.getvalue()


def test_unreachable_destination_drops(network, clients, out):
    del clients[1].routing_table["C"]
    _run(network, clients, MESSAGE, "SEND", "RECEIVE")
    b = clients[1]
    assert not b.outgoing_queue
    entry = b.log_entries[-1]
    assert entry.activity_type is ActivityType.MESSAGE_DROPPED
    assert entry.success_status is False
    assert "Packets are dropped after 1 hops!" in out.getvalue()


def test_show_queue_info(network, clients, out):
    _run(network, clients, MESSAGE)
    out.seek(0)
    out.truncate()
    network.show_queue_info(clients, "A", "out")
    count = len(split_message(TEXT, LIMIT))
    assert out.getvalue() == (
        f"Client A Outgoing Queue Status\nCurrent total number of frames: {count}\n"
    )


def test_show_queue_info_incoming(network, clients, out):
    network.show_queue_info(clients, "B", "in")
    count = len(clients[1].incoming_queue)
    assert count == 0
    assert out.getvalue() == (
        f"Client B Incoming Queue Status\nCurrent total number of frames: {count}\n"
    )


def test_show_frame_info(network, clients, out):
    _run(network, clients, MESSAGE)
    first = next(iter(clients[0].outgoing_queue))
    assert first.application.message_data == TEXT[:LIMIT]
    out.seek(0)
    out.truncate()
    network.show_frame_info(clients, "A", "out", 1)
    text = out.getvalue()
    assert "Current Frame #1 on the outgoing queue of client A" in text
    assert f'Carried Message: "{first.application.message_data}"' in text
    assert (
        f"Layer 3 info: Sender MAC address: {first.physical.sender_mac}, "
        f"Receiver MAC address: {first.physical.receiver_mac}"
    ) in text


def test_show_frame_info_missing(network, clients, out):
    assert len(clients[0].incoming_queue) == 0
    network.show_frame_info(clients, "A", "in", 1)
    assert out.getvalue() == "No such frame.\n"


def test_print_log(network, clients, out):
    _run(network, clients, MESSAGE)
    entries = clients[0].log_entries
    assert len(entries) == 1
    out.seek(0)
    out.truncate()
    network.print_log(clients, "A")
    text = out.getvalue()
    assert text == "Client A Logs:\n--------------\n" + entries[0].render(1)
    assert f'Message: "{entries[0].message_content}"' in text


def test_print_log_empty(network, clients, out):
    assert len(clients[2].log_entries) == 0
    network.print_log(clients, "C")
    assert out.getvalue() == ""


def test_invalid_command(network, clients, out):
    network.execute(clients, "BOGUS", LIMIT, SENDER_PORT, RECEIVER_PORT)
    text = out.getvalue()
    assert text == (
        "----------------------\nCommand: BOGUS\n----------------------\n"
        "Invalid command.\n"
    )
    assert all(len(client.outgoing_queue) == 0 for client in clients)
    assert all(len(client.log_entries) == 0 for client in clients)


def test_unknown_client_raises(network, clients):
    with pytest.raises(KeyError):
        network.show_queue_info(clients, "Z", "out")


def test_message_without_delimiters_raises(network, clients):
    with pytest.raises(ValueError):
        network.message(clients, "MESSAGE A C hello", LIMIT, SENDER_PORT, RECEIVER_PORT)


def test_message_without_route_raises(network, clients):
    clients[0].routing_table.clear()
    with pytest.raises(KeyError):
        network.message(clients, MESSAGE, LIMIT, SENDER_PORT, RECEIVER_PORT)