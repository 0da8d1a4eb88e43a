"""Send a bare ``HEAD /`` request over TCP and return the raw reply."""

from __future__ import annotations

import socket
import sys

_REQUEST = b"HEAD / HTTP/1.0\r\n\r\n"
_CHUNK = 512


def _split_address(address: str) -> tuple[str, int]:
    host, separator, port = address.rpartition(":")
    if not separator or not port.isdigit():
        raise ValueError(f"missing port in address {address!r}")
    return host.strip("[]") or "localhost", int(port)


def read_fully(sock: socket.socket) -> bytes:
    """Read from ``sock`` until the peer closes it, then close ``sock``."""
    with sock:
        return b"".join(iter(lambda: sock.recv(_CHUNK), b""))


def head_request(address: str) -> bytes:
    """Send ``HEAD / HTTP/1.0`` to ``host:port`` and return the whole reply.

    Raises ``ValueError`` for an address without a port and ``OSError`` for
    network failures.
    """
    sock = socket.create_connection(_split_address(address))
    try:
        sock.sendall(_REQUEST)
    except OSError:
        sock.close()
        raise
    return read_fully(sock)


def main(argv: list[str] | None = None) -> int:
    """Print a server's reply to a HEAD request; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: simplehttp host:port", file=sys.stderr)
        return 1
    try:
        result = head_request(args[0])
    except (OSError, ValueError) as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    print(result.decode("utf-8", errors="replace"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())