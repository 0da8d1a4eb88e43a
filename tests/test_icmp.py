import pytest

from gopractice.icmp import EchoReplyCheck, build_echo_request, check_echo_reply, checksum, main

REPLY = bytes([
    69, 0, 9, 0, 32, 96, 0, 0, 54, 1, 187, 104, 61, 135, 169, 125, 192, 168, 1, 107,
    0, 0, 156, 205, 0, 13, 0, 37, 99,
])


def test_reply_from_capture_matches_request():
    result = check_echo_reply(REPLY, 13, 37, b"c")
    assert result == EchoReplyCheck(True, True, True)


def test_reply_checksum_verifies_to_zero():
    assert checksum(REPLY[20:]) == 0


def test_reply_with_other_identifier():
    result = check_echo_reply(REPLY, 14, 37, b"c")
    assert result == EchoReplyCheck(False, True, True)


def test_reply_with_other_sequence_and_payload():
    result = check_echo_reply(REPLY, 13, 38, b"d")
    assert result == EchoReplyCheck(True, False, False)


def test_short_reply_is_rejected():
    with pytest.raises(ValueError):
        check_echo_reply(REPLY[:25], 13, 37, b"c")


def test_empty_packet_is_rejected():
    with pytest.raises(ValueError):
        check_echo_reply(b"", 13, 37, b"c")


def test_request_layout():
    request = build_echo_request(13, 37, b"c")
    assert len(request) == 9
    assert request[0] == 8
    assert request[1] == 0
    assert request[4:8] == bytes([0, 13, 0, 37])
    assert request[8:] == b"c"


def test_request_checksum_value():
    request = build_echo_request(13, 37, b"c")
    assert request[2:4] == (0x94CD).to_bytes(2, "big")


@pytest.mark.parametrize("payload", [b"", b"c", b"hello world", bytes(range(64))])
def test_request_checksum_verifies(payload):
    assert checksum(build_echo_request(1234, 5678, payload)) == 0


def test_request_round_trip_through_reply_check():
    request = build_echo_request(300, 4000, b"payload")
    packet = b"\x45" + bytes(19) + request
    assert check_echo_reply(packet, 300, 4000, b"payload") == EchoReplyCheck(True, True, True)


@pytest.mark.parametrize("identifier,sequence", [(-1, 0), (0x10000, 0), (0, 0x10000)])
def test_request_fields_out_of_range(identifier, sequence):
    with pytest.raises(ValueError):
        build_echo_request(identifier, sequence, b"")


def test_checksum_of_nothing():
    assert checksum(b"") == 0xFFFF


def test_checksum_pads_odd_length_at_the_end():
    assert checksum(b"\x01") == checksum(b"\x01\x00")
    assert checksum(b"\x12\x34\x56") == checksum(b"\x12\x34\x56\x00")


@pytest.mark.parametrize("data", [b"\x00\x01", b"\xff\xff\xff\xff", b"abcdefgh"])
def test_checksum_appended_verifies(data):
    total = checksum(data)
    assert checksum(data + total.to_bytes(2, "big")) == 0


def test_main_usage(capsys):
    assert main([]) == 1
    assert "USAGE:" in capsys.readouterr().out