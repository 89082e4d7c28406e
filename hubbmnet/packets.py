"""Layered packets and the frames built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Packet:
    """A packet at one layer of the stack."""

    layer_id: int
    frame_number: int = field(default=0, kw_only=True)
    hop_number: int = field(default=0, kw_only=True)

    def describe(self) -> str:
        """Layer-specific description; the base packet has none."""
        return ""

    def __str__(self) -> str:
        return f"Packet layer: {self.layer_id}"


@dataclass
class ApplicationLayerPacket(Packet):
    """Carries the end-to-end sender, receiver and a message chunk."""

    sender_id: str
    receiver_id: str
    message_data: str

    def describe(self) -> str:
        return f"Sender ID: {self.sender_id}, Receiver ID: {self.receiver_id}"


@dataclass
class TransportLayerPacket(Packet):
    """Carries the sender and receiver port numbers."""

    sender_port: str
    receiver_port: str

    def describe(self) -> str:
        return (
            f"Sender port number: {self.sender_port}, "
            f"Receiver port number: {self.receiver_port}"
        )


@dataclass
class NetworkLayerPacket(Packet):
    """Carries the sender and receiver IP addresses."""

    sender_ip: str
    receiver_ip: str

    def describe(self) -> str:
        return (
            f"Sender IP address: {self.sender_ip}, "
            f"Receiver IP address: {self.receiver_ip}"
        )


@dataclass
class PhysicalLayerPacket(Packet):
    """Carries the MAC addresses of the current hop."""

    sender_mac: str
    receiver_mac: str

    def describe(self) -> str:
        return (
            f"Sender MAC address: {self.sender_mac}, "
            f"Receiver MAC address: {self.receiver_mac}"
        )


@dataclass
class Frame:
    """A full stack of packets, one per layer, as sent over a link."""

    application: ApplicationLayerPacket
    transport: TransportLayerPacket
    network: NetworkLayerPacket
    physical: PhysicalLayerPacket

    def layers(self) -> tuple[Packet, Packet, Packet, Packet]:
        """The packets from the top of the stack down: physical first."""
        return (self.physical, self.network, self.transport, self.application)

    def __iter__(self) -> Iterator[Packet]:
        return iter(self.layers())