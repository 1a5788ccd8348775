"""Compression method lists offered in hello messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .errors import TruncatedDataError


class CompressionMethodId(IntEnum):
    """Compression method; unknown wire values map to UNSUPPORTED."""

    NULL = 0
    UNSUPPORTED = 1

    @classmethod
    def _missing_(cls, value: object) -> CompressionMethodId:
        return cls.UNSUPPORTED


@dataclass
class CompressionMethods:
    """A length-prefixed list of compression method identifiers."""

    ids: list[CompressionMethodId] = field(default_factory=list)

    def size(self) -> int:
        """Encoded length in bytes."""
        return 1 + len(self.ids)

    def marshal(self) -> bytes:
        """Encode as a one-byte count followed by one byte per method."""
        if len(self.ids) > 0xFF:
            raise ValueError("too many compression methods to encode")
        return bytes([len(self.ids), *(int(method) for method in self.ids)])

    @classmethod
    def unmarshal(cls, data: bytes) -> CompressionMethods:
        """Decode a list, dropping methods this package does not support."""
        data = bytes(data)
        if not data:
            raise TruncatedDataError(1, 0)
        count = data[0]
        body = data[1 : 1 + count]
        if len(body) < count:
            raise TruncatedDataError(1 + count, len(data))
        ids = [
            method
            for method in map(CompressionMethodId, body)
            if method is not CompressionMethodId.UNSUPPORTED
        ]
        return cls(ids)


def default_compression_methods() -> CompressionMethods:
    """The methods offered by default: only NULL."""
    return CompressionMethods([CompressionMethodId.NULL])