"""A TLS echo server and a client that sends it one message."""

from __future__ import annotations

import argparse
import logging
import socket
import ssl
import sys
import threading

log = logging.getLogger(__name__)

_READ_SIZE = 512
_REPLY_SIZE = 256
_DEFAULT_CERT = "../../cert/cert.pem"
_DEFAULT_KEY = "../../cert/key.pem"


def _split_address(address: str) -> tuple[str, int]:
    host, separator, port = address.rpartition(":")
    if not separator or not port.isdigit():
        raise ValueError(f"missing port in address {address!r}")
    return host.strip("[]"), int(port)


def handle_client(conn: socket.socket) -> None:
    """Echo everything read from ``conn`` back to it until the peer closes."""
    with conn:
        while True:
            log.info("server: conn : waiting")
            try:
                data = conn.recv(_READ_SIZE)
            except OSError as exc:
                log.error("server: conn: read: %s", exc)
                break
            if not data:
                break
            log.info("server: conn: echo %r", data.decode("utf-8", errors="replace"))
            try:
                conn.sendall(data)
            except OSError as exc:
                log.error("server: write: %s", exc)
                break
            log.info("server: conn: wrote %d bytes", len(data))
    log.info("server: conn: closed")


def serve(address: str, certfile: str, keyfile: str) -> None:
    """Accept TLS connections on ``host:port`` forever, echoing each in a thread.

    Raises ``OSError`` or ``ssl.SSLError`` if the key pair cannot be loaded or
    the address cannot be bound, and ``ValueError`` for a malformed address.
    """
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(certfile, keyfile)
    host, port = _split_address(address)

    with socket.create_server((host, port)) as raw, context.wrap_socket(raw, server_side=True) as listener:
        log.info("server: listen")
        while True:
            log.info("server: conn: waiting")
            try:
                conn, peer = listener.accept()
            except (ssl.SSLError, ConnectionError) as exc:
                log.error("server: accept: %s", exc)
                continue
            log.info("server: accepted from %s:%s", peer[0], peer[1])
            threading.Thread(target=handle_client, args=(conn,), daemon=True).start()


def echo_once(address: str, message: bytes | str) -> bytes:
    """Send ``message`` to a TLS echo server and return its reply.

    The server's certificate is not verified.
    """
    host, port = _split_address(address)
    host = host or "127.0.0.1"
    payload = message.encode("utf-8") if isinstance(message, str) else message

    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE

    with socket.create_connection((host, port)) as raw, context.wrap_socket(raw, server_hostname=host) as conn:
        peer = conn.getpeername()
        log.info("client: connected to: %s:%s", peer[0], peer[1])
        log.info("client: handshake: %s", conn.version() is not None)
        conn.sendall(payload)
        log.info("client: wrote %r (%d bytes)", payload.decode("utf-8", errors="replace"), len(payload))
        reply = conn.recv(_REPLY_SIZE)
        log.info("client: read %r (%d bytes)", reply.decode("utf-8", errors="replace"), len(reply))
    log.info("client: exiting")
    return reply


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="echo", description="TLS echo server and client.")
    modes = parser.add_subparsers(dest="mode", required=True)

    server = modes.add_parser("server", help="run the echo server")
    server.add_argument("--address", default=":8000")
    server.add_argument("--cert", default=_DEFAULT_CERT)
    server.add_argument("--key", default=_DEFAULT_KEY)

    client = modes.add_parser("client", help="send one message to the server")
    client.add_argument("--address", default="127.0.0.1:8000")
    client.add_argument("--message", default="Hello\n")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the echo server or client; returns the exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    if args.mode == "server":
        try:
            serve(args.address, args.cert, args.key)
        except KeyboardInterrupt:
            return 0
        except (OSError, ValueError) as exc:
            print(f"server: {exc}", file=sys.stderr)
            return 1
        return 0

    try:
        echo_once(args.address, args.message)
    except (OSError, ValueError) as exc:
        print(f"client: dial: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())