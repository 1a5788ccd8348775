"""Alert messages: a severity level and a description of the problem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import TruncatedDataError


class AlertLevel(IntEnum):
    """Alert severity; unknown wire values map to INVALID."""

    WARNING = 1
    FATAL = 2
    INVALID = 3

    @classmethod
    def _missing_(cls, value: object) -> AlertLevel:
        return cls.INVALID

    def __str__(self) -> str:
        return _LEVEL_NAMES.get(self, "Invalid alert level")


_LEVEL_NAMES = {
    AlertLevel.WARNING: "LevelWarning",
    AlertLevel.FATAL: "LevelFatal",
}


class AlertDescription(IntEnum):
    """Alert description; unknown wire values map to INVALID."""

    CLOSE_NOTIFY = 0
    UNEXPECTED_MESSAGE = 10
    BAD_RECORD_MAC = 20
    DECRYPTION_FAILED = 21
    RECORD_OVERFLOW = 22
    DECOMPRESSION_FAILURE = 30
    HANDSHAKE_FAILURE = 40
    NO_CERTIFICATE = 41
    BAD_CERTIFICATE = 42
    UNSUPPORTED_CERTIFICATE = 43
    CERTIFICATE_REVOKED = 44
    CERTIFICATE_EXPIRED = 45
    CERTIFICATE_UNKNOWN = 46
    ILLEGAL_PARAMETER = 47
    UNKNOWN_CA = 48
    ACCESS_DENIED = 49
    DECODE_ERROR = 50
    DECRYPT_ERROR = 51
    EXPORT_RESTRICTION = 60
    PROTOCOL_VERSION = 70
    INSUFFICIENT_SECURITY = 71
    INTERNAL_ERROR = 80
    USER_CANCELED = 90
    NO_RENEGOTIATION = 100
    UNSUPPORTED_EXTENSION = 110
    UNKNOWN_PSK_IDENTITY = 115
    INVALID = 116

    @classmethod
    def _missing_(cls, value: object) -> AlertDescription:
        return cls.INVALID

    def __str__(self) -> str:
        if self is AlertDescription.INVALID:
            return "Invalid alert description"
        if self is AlertDescription.UNKNOWN_CA:
            return "UnknownCA"
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class Alert:
    """An alert record: level and description, one byte each."""

    alert_level: AlertLevel
    alert_description: AlertDescription

    def __str__(self) -> str:
        return f"Alert {self.alert_level}: {self.alert_description}"

    def size(self) -> int:
        """Encoded length in bytes."""
        return 2

    def marshal(self) -> bytes:
        """Encode the alert."""
        return bytes([int(self.alert_level), int(self.alert_description)])

    @classmethod
    def unmarshal(cls, data: bytes) -> Alert:
        """Decode an alert from the first two bytes of ``data``."""
        data = bytes(data)
        if len(data) < 2:
            raise TruncatedDataError(2, len(data))
        return cls(AlertLevel(data[0]), AlertDescription(data[1]))