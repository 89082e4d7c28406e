import pytest

from hubbmnet.packets import (
    ApplicationLayerPacket,
    Frame,
    NetworkLayerPacket,
    Packet,
    PhysicalLayerPacket,
    TransportLayerPacket,
)


@pytest.fixture
def frame():
    return Frame(
        application=ApplicationLayerPacket(0, "A", "B", "hello"),
        transport=TransportLayerPacket(1, "0706", "0607"),
        network=NetworkLayerPacket(2, "10.0.0.1", "10.0.0.2"),
        physical=PhysicalLayerPacket(3, "MAC-A", "MAC-B"),
    )


def test_packet_str_shows_layer():
    assert str(Packet(2)) == "Packet layer: 2"


def test_base_packet_describes_nothing():
    assert Packet(0).describe() == ""


def test_counters_default_to_zero():
    packet = ApplicationLayerPacket(0, "A", "B", "m")
    assert (packet.frame_number, packet.hop_number) == (0, 0)


def test_counters_are_keyword_settable():
    packet = PhysicalLayerPacket(3, "x", "y", frame_number=4, hop_number=2)
    assert packet.frame_number == 4
    assert packet.hop_number == 2
    assert packet.sender_mac == "x"


def test_application_describe():
    packet = ApplicationLayerPacket(0, "C", "E", "chunk")
    assert packet.describe() == "Sender ID: C, Receiver ID: E"


def test_transport_describe():
    packet = TransportLayerPacket(1, "0706", "0607")
    assert packet.describe() == "Sender port number: 0706, Receiver port number: 0607"


def test_network_describe():
    packet = NetworkLayerPacket(2, "1.1.1.1", "2.2.2.2")
    assert packet.describe() == "Sender IP address: 1.1.1.1, Receiver IP address: 2.2.2.2"


def test_physical_describe():
    packet = PhysicalLayerPacket(3, "M1", "M2")
    assert packet.describe() == "Sender MAC address: M1, Receiver MAC address: M2"


def test_frame_layers_top_down(frame):
    layers = frame.layers()
    assert [p.layer_id for p in layers] == [3, 2, 1, 0]
    assert layers[0] is frame.physical
    assert layers[-1] is frame.application


def test_frame_iterates_like_layers(frame):
    assert list(frame) == list(frame.layers())


def test_mutating_physical_is_seen_through_frame(frame):
    frame.physical.hop_number += 1
    assert frame.layers()[0].hop_number == 1