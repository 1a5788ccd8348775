import pytest

from dtlsproto.change_cipher_spec import ChangeCipherSpec
from dtlsproto.errors import InvalidCipherSpecError, TruncatedDataError


def test_change_cipher_spec_round_trip():
    message = ChangeCipherSpec()
    assert ChangeCipherSpec.unmarshal(message.marshal()) == message


def test_change_cipher_spec_invalid():
    with pytest.raises(InvalidCipherSpecError) as excinfo:
        ChangeCipherSpec.unmarshal(bytes([0x00]))
    assert str(excinfo.value) == str(InvalidCipherSpecError())


def test_wire_byte():
    assert ChangeCipherSpec().marshal() == b"\x01"


def test_size_matches_encoding():
    message = ChangeCipherSpec()
    assert message.size() == len(message.marshal())


def test_empty_input_raises():
    with pytest.raises(TruncatedDataError):
        ChangeCipherSpec.unmarshal(b"")