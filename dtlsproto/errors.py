"""Exceptions raised while encoding, decoding and negotiating DTLS messages."""


class DtlsError(Exception):
    """Base class for every error raised by this package."""


class TruncatedDataError(DtlsError):
    """The input ended before a complete message could be read."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(
            f"unexpected end of data: needed {needed} byte(s), {available} available"
        )
        self.needed = needed
        self.available = available


class InvalidCipherSpecError(DtlsError):
    """A ChangeCipherSpec message did not carry the value 1."""

    def __init__(self, message: str = "cipher spec invalid") -> None:
        super().__init__(message)


class InvalidCipherSuiteError(DtlsError):
    """A cipher suite identifier is not one this package supports."""

    def __init__(self, message: str = "invalid or unknown cipher suite") -> None:
        super().__init__(message)


class NoAvailableCipherSuitesError(DtlsError):
    """No cipher suite remained after filtering the configured ones."""

    def __init__(self, message: str = "connection can not be created, no CipherSuites satisfy this Config") -> None:
        super().__init__(message)