"""ChangeCipherSpec message: a single byte of value 1."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCipherSpecError, TruncatedDataError

_CHANGE_CIPHER_SPEC_VALUE = 0x01


@dataclass(frozen=True)
class ChangeCipherSpec:
    """Signals a switch to the newly negotiated cipher state."""

    def size(self) -> int:
        """Encoded length in bytes."""
        return 1

    def marshal(self) -> bytes:
        """Encode the message."""
        return bytes([_CHANGE_CIPHER_SPEC_VALUE])

    @classmethod
    def unmarshal(cls, data: bytes) -> ChangeCipherSpec:
        """Decode the message, rejecting any value other than 1."""
        data = bytes(data)
        if not data:
            raise TruncatedDataError(1, 0)
        if data[0] != _CHANGE_CIPHER_SPEC_VALUE:
            raise InvalidCipherSpecError()
        return cls()