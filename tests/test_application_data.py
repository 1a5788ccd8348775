from dtlsproto.application_data import ApplicationData


def test_round_trip():
    payload = b"hello over dtls"
    message = ApplicationData(payload)
    assert ApplicationData.unmarshal(message.marshal()) == message


def test_marshal_is_payload_unchanged():
    payload = bytes(range(10))
    assert ApplicationData(payload).marshal() == payload


def test_size_matches_encoding():
    message = ApplicationData(b"abcdef")
    assert message.size() == len(message.marshal())


def test_empty_payload():
    message = ApplicationData.unmarshal(b"")
    assert message.data == b""
    assert message.size() == 0


def test_unmarshal_accepts_bytearray():
    message = ApplicationData.unmarshal(bytearray(b"xyz"))
    assert message.data == b"xyz"