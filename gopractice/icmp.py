"""ICMP echo ("ping") packets: building requests and checking replies."""

from __future__ import annotations

import socket
import struct
import sys
from dataclasses import dataclass

ECHO_REQUEST = 8
ECHO_REPLY = 0

_HEADER = struct.Struct("!BBHHH")
_MAX_READ = 512

_IDENTIFIER = 13
_SEQUENCE = 37
_PAYLOAD = b"c"


def checksum(data: bytes) -> int:
    """Return the 16-bit one's-complement Internet checksum of ``data``.

    An odd trailing byte counts as the high byte of a final word.
    """
    padded = data + b"\x00" if len(data) % 2 else data
    total = sum(word for (word,) in struct.iter_unpack("!H", padded))
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return ~total & 0xFFFF


def build_echo_request(identifier: int, sequence: int, payload: bytes) -> bytes:
    """Return an ICMP echo request with its checksum filled in.

    Raises ``ValueError`` if ``identifier`` or ``sequence`` does not fit in
    16 bits.
    """
    for label, value in (("identifier", identifier), ("sequence", sequence)):
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"{label} {value} does not fit in 16 bits")
    unsigned = _HEADER.pack(ECHO_REQUEST, 0, 0, identifier, sequence) + payload
    return _HEADER.pack(ECHO_REQUEST, 0, checksum(unsigned), identifier, sequence) + payload


@dataclass(frozen=True)
class EchoReplyCheck:
    """Which parts of an echo reply match the request that was sent."""

    identifier_matches: bool
    sequence_matches: bool
    payload_matches: bool


def _ip_header_length(packet: bytes) -> int:
    if not packet:
        raise ValueError("empty packet")
    return (packet[0] & 0x0F) * 4


def check_echo_reply(packet: bytes, identifier: int, sequence: int, payload: bytes) -> EchoReplyCheck:
    """Compare an IPv4 packet carrying an echo reply with what was sent.

    Raises ``ValueError`` if the packet is too short to hold the reply.
    """
    icmp = packet[_ip_header_length(packet):]
    if len(icmp) < _HEADER.size + len(payload):
        raise ValueError(f"packet of {len(packet)} bytes is too short for an echo reply")
    _, _, _, got_identifier, got_sequence = _HEADER.unpack_from(icmp)
    body = icmp[_HEADER.size:_HEADER.size + len(payload)]
    return EchoReplyCheck(
        identifier_matches=got_identifier == identifier,
        sequence_matches=got_sequence == sequence,
        payload_matches=body == payload,
    )


def main(argv: list[str] | None = None) -> int:
    """Ping a host once over a raw socket; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("USAGE: ", "icmp", "host")
        return 1
    host = args[0]

    request = build_echo_request(_IDENTIFIER, _SEQUENCE, _PAYLOAD)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP) as sock:
            sock.connect((socket.gethostbyname(host), 0))
            sock.sendall(request)
            reply = sock.recv(_MAX_READ)
        header_length = _ip_header_length(reply)
        print("[" + " ".join(str(byte) for byte in reply[:header_length + len(request)]) + "]")
        print("Got response")
        result = check_echo_reply(reply, _IDENTIFIER, _SEQUENCE, _PAYLOAD)
    except (OSError, ValueError) as exc:
        print(f"Fatal error : {exc}", file=sys.stderr)
        return 1

    if result.identifier_matches:
        print("Identifier matches")
    if result.sequence_matches:
        print("Sequence matches")
    if result.payload_matches:
        print("Custom data matches")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())