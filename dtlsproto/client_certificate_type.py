"""Certificate types a server may ask a client to present."""

from __future__ import annotations

from enum import IntEnum


class ClientCertificateType(IntEnum):
    """Client certificate type; unknown wire values map to UNSUPPORTED."""

    RSA_SIGN = 1
    ECDSA_SIGN = 64
    UNSUPPORTED = 65

    @classmethod
    def _missing_(cls, value: object) -> ClientCertificateType:
        return cls.UNSUPPORTED