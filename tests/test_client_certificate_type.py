import pytest

from dtlsproto.client_certificate_type import ClientCertificateType


def test_rsa_sign_from_byte():
    assert ClientCertificateType(1) is ClientCertificateType.RSA_SIGN


def test_ecdsa_sign_from_byte():
    assert ClientCertificateType(64) is ClientCertificateType.ECDSA_SIGN


@pytest.mark.parametrize("value", [0, 2, 63, 255])
def test_unknown_values_are_unsupported(value):
    assert ClientCertificateType(value) is ClientCertificateType.UNSUPPORTED


def test_known_members_round_trip_through_int():
    for member in (ClientCertificateType.RSA_SIGN, ClientCertificateType.ECDSA_SIGN):
        assert ClientCertificateType(int(member)) is member