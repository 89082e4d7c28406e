"""Activity log entries kept by each client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActivityType(Enum):
    """What happened to a message at a client."""

    MESSAGE_RECEIVED = "Message Received"
    MESSAGE_FORWARDED = "Message Forwarded"
    MESSAGE_SENT = "Message Sent"
    MESSAGE_DROPPED = "Message Dropped"

    def label(self) -> str:
        """Human-readable name used in log listings."""
        return self.value


@dataclass
class LogEntry:
    """One record of message activity."""

    timestamp: str
    message_content: str
    number_of_frames: int
    number_of_hops: int
    sender_id: str
    receiver_id: str
    success_status: bool
    activity_type: ActivityType

    def render(self, number: int) -> str:
        """The entry as listed by PRINT_LOG, numbered from 1."""
        success = "Yes" if self.success_status else "No"
        return (
            f"Log Entry #{number}\n"
            f"Activity: {self.activity_type.label()}\n"
            f"Timestamp: {self.timestamp}\n"
            f"Number of frames: {self.number_of_frames}\n"
            f"Number of hops: {self.number_of_hops}\n"
            f"Sender ID: {self.sender_id}\n"
            f"Receiver ID: {self.receiver_id}\n"
            f"Success: {success}\n"
            f'Message: "{self.message_content}"\n'
            "--------------\n"
        )