"""Cipher suites: identifiers, their properties, lookup and selection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar

from .client_certificate_type import ClientCertificateType
from .errors import InvalidCipherSuiteError, NoAvailableCipherSuitesError


class CipherSuiteId(IntEnum):
    """Wire identifier of a cipher suite; unknown values map to UNSUPPORTED."""

    TLS_ECDHE_ECDSA_WITH_AES_128_CCM = 0xC0AC
    TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8 = 0xC0AE
    TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256 = 0xC02B
    TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA = 0xC00A
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0xC014
    TLS_PSK_WITH_AES_128_CCM = 0xC0A4
    TLS_PSK_WITH_AES_128_CCM_8 = 0xC0A8
    TLS_PSK_WITH_AES_128_GCM_SHA256 = 0x00A8
    UNSUPPORTED = 0xFFFF

    @classmethod
    def _missing_(cls, value: object) -> CipherSuiteId:
        return cls.UNSUPPORTED

    def __str__(self) -> str:
        if self is CipherSuiteId.UNSUPPORTED:
            return "Unsupported CipherSuiteID"
        return self.name


class CipherSuiteHash(Enum):
    """Hash function used by a cipher suite's PRF."""

    SHA256 = "sha256"

    def size(self) -> int:
        """Digest length in bytes."""
        return {CipherSuiteHash.SHA256: 32}[self]


class CcmTagLength(IntEnum):
    """Authentication tag length, in bytes, of an AES-CCM suite."""

    CCM = 16
    CCM_8 = 8


class CipherSuite(ABC):
    """A combination of key agreement, cipher and MAC function."""

    prf_mac_len: ClassVar[int]
    prf_key_len: ClassVar[int]
    prf_iv_len: ClassVar[int]

    @property
    @abstractmethod
    def id(self) -> CipherSuiteId:
        """The suite's wire identifier."""

    @property
    @abstractmethod
    def certificate_type(self) -> ClientCertificateType:
        """Certificate type the suite authenticates with."""

    @property
    @abstractmethod
    def is_psk(self) -> bool:
        """Whether the suite uses a pre-shared key."""

    @property
    def hash_func(self) -> CipherSuiteHash:
        """Hash function of the suite's PRF."""
        return CipherSuiteHash.SHA256

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class CipherSuiteAes128Ccm(CipherSuite):
    """AES-128 in CCM mode, with either a full or an 8-byte tag."""

    client_certificate_type: ClientCertificateType
    suite_id: CipherSuiteId
    psk: bool
    tag_length: CcmTagLength

    prf_mac_len: ClassVar[int] = 0
    prf_key_len: ClassVar[int] = 16
    prf_iv_len: ClassVar[int] = 4

    @property
    def id(self) -> CipherSuiteId:
        return self.suite_id

    @property
    def certificate_type(self) -> ClientCertificateType:
        return self.client_certificate_type

    @property
    def is_psk(self) -> bool:
        return self.psk


@dataclass(frozen=True)
class CipherSuiteAes128GcmSha256(CipherSuite):
    """ECDHE with AES-128-GCM and SHA-256, signed by ECDSA or RSA."""

    rsa: bool = False

    prf_mac_len: ClassVar[int] = 0
    prf_key_len: ClassVar[int] = 16
    prf_iv_len: ClassVar[int] = 4

    @property
    def id(self) -> CipherSuiteId:
        if self.rsa:
            return CipherSuiteId.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256
        return CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256

    @property
    def certificate_type(self) -> ClientCertificateType:
        return ClientCertificateType.RSA_SIGN if self.rsa else ClientCertificateType.ECDSA_SIGN

    @property
    def is_psk(self) -> bool:
        return False


@dataclass(frozen=True)
class CipherSuiteAes256CbcSha(CipherSuite):
    """ECDHE with AES-256-CBC and SHA-1 MAC, signed by ECDSA or RSA."""

    rsa: bool = False

    prf_mac_len: ClassVar[int] = 20
    prf_key_len: ClassVar[int] = 32
    prf_iv_len: ClassVar[int] = 16

    @property
    def id(self) -> CipherSuiteId:
        if self.rsa:
            return CipherSuiteId.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA
        return CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA

    @property
    def certificate_type(self) -> ClientCertificateType:
        return ClientCertificateType.RSA_SIGN if self.rsa else ClientCertificateType.ECDSA_SIGN

    @property
    def is_psk(self) -> bool:
        return False


@dataclass(frozen=True)
class CipherSuiteTlsPskWithAes128GcmSha256(CipherSuite):
    """Pre-shared key with AES-128-GCM and SHA-256."""

    prf_mac_len: ClassVar[int] = 0
    prf_key_len: ClassVar[int] = 16
    prf_iv_len: ClassVar[int] = 4

    @property
    def id(self) -> CipherSuiteId:
        return CipherSuiteId.TLS_PSK_WITH_AES_128_GCM_SHA256

    @property
    def certificate_type(self) -> ClientCertificateType:
        return ClientCertificateType.UNSUPPORTED

    @property
    def is_psk(self) -> bool:
        return True


def new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm() -> CipherSuiteAes128Ccm:
    """TLS_ECDHE_ECDSA_WITH_AES_128_CCM."""
    return CipherSuiteAes128Ccm(
        ClientCertificateType.ECDSA_SIGN,
        CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_128_CCM,
        False,
        CcmTagLength.CCM,
    )


def new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm8() -> CipherSuiteAes128Ccm:
    """TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8."""
    return CipherSuiteAes128Ccm(
        ClientCertificateType.ECDSA_SIGN,
        CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8,
        False,
        CcmTagLength.CCM_8,
    )


def new_cipher_suite_tls_psk_with_aes_128_ccm() -> CipherSuiteAes128Ccm:
    """TLS_PSK_WITH_AES_128_CCM."""
    return CipherSuiteAes128Ccm(
        ClientCertificateType.UNSUPPORTED,
        CipherSuiteId.TLS_PSK_WITH_AES_128_CCM,
        True,
        CcmTagLength.CCM,
    )


def new_cipher_suite_tls_psk_with_aes_128_ccm8() -> CipherSuiteAes128Ccm:
    """TLS_PSK_WITH_AES_128_CCM_8."""
    return CipherSuiteAes128Ccm(
        ClientCertificateType.UNSUPPORTED,
        CipherSuiteId.TLS_PSK_WITH_AES_128_CCM_8,
        True,
        CcmTagLength.CCM_8,
    )


_FACTORIES = {
    CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_128_CCM: new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm,
    CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8: new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm8,
    CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256: lambda: CipherSuiteAes128GcmSha256(rsa=False),
    CipherSuiteId.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256: lambda: CipherSuiteAes128GcmSha256(rsa=True),
    CipherSuiteId.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA: lambda: CipherSuiteAes256CbcSha(rsa=True),
    CipherSuiteId.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA: lambda: CipherSuiteAes256CbcSha(rsa=False),
    CipherSuiteId.TLS_PSK_WITH_AES_128_CCM: new_cipher_suite_tls_psk_with_aes_128_ccm,
    CipherSuiteId.TLS_PSK_WITH_AES_128_CCM_8: new_cipher_suite_tls_psk_with_aes_128_ccm8,
    CipherSuiteId.TLS_PSK_WITH_AES_128_GCM_SHA256: CipherSuiteTlsPskWithAes128GcmSha256,
}


def cipher_suite_for_id(suite_id: CipherSuiteId | int) -> CipherSuite:
    """Build the cipher suite with the given identifier."""
    factory = _FACTORIES.get(CipherSuiteId(suite_id))
    if factory is None:
        raise InvalidCipherSuiteError()
    return factory()


def default_cipher_suites() -> list[CipherSuite]:
    """The suites offered by default, in order of preference."""
    return [
        CipherSuiteAes128GcmSha256(rsa=False),
        CipherSuiteAes256CbcSha(rsa=False),
        CipherSuiteAes128GcmSha256(rsa=True),
        CipherSuiteAes256CbcSha(rsa=True),
    ]


def all_cipher_suites() -> list[CipherSuite]:
    """Every supported suite."""
    return [
        new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm(),
        new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm8(),
        CipherSuiteAes128GcmSha256(rsa=False),
        CipherSuiteAes128GcmSha256(rsa=True),
        CipherSuiteAes256CbcSha(rsa=False),
        CipherSuiteAes256CbcSha(rsa=True),
        new_cipher_suite_tls_psk_with_aes_128_ccm(),
        new_cipher_suite_tls_psk_with_aes_128_ccm8(),
        CipherSuiteTlsPskWithAes128GcmSha256(),
    ]


def cipher_suites_for_ids(ids: Iterable[CipherSuiteId | int]) -> list[CipherSuite]:
    """Build the suites for the given identifiers, in the same order."""
    return [cipher_suite_for_id(suite_id) for suite_id in ids]


def parse_cipher_suites(
    user_selected_suites: Iterable[CipherSuiteId | int],
    exclude_psk: bool,
    exclude_non_psk: bool,
) -> list[CipherSuite]:
    """Resolve the configured suites (or the defaults) and filter by PSK use."""
    selected = list(user_selected_suites)
    suites = cipher_suites_for_ids(selected) if selected else default_cipher_suites()
    filtered = [
        suite
        for suite in suites
        if not ((exclude_psk and suite.is_psk) or (exclude_non_psk and not suite.is_psk))
    ]
    if not filtered:
        raise NoAvailableCipherSuitesError()
    return filtered