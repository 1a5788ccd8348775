"""Application data records: opaque payload carried by the record layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApplicationData:
    """Opaque application payload."""

    data: bytes = b""

    def size(self) -> int:
        """Encoded length in bytes."""
        return len(self.data)

    def marshal(self) -> bytes:
        """Encode the message."""
        return bytes(self.data)

    @classmethod
    def unmarshal(cls, data: bytes) -> ApplicationData:
        """Decode a message; every remaining byte is payload."""
        return cls(bytes(data))