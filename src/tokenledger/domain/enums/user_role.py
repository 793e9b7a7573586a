from enum import Enum


class UserRole(str, Enum):
    """Which side of a transfer an address is resolved from."""

    SENDER = "SENDER"
    RECEIVER = "RECEIVER"
