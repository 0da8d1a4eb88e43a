"""In-process request/response messaging between clients and a server.

Each client connection gets its own session, served by a worker thread that
decodes JSON requests, hands them to the server and sends JSON replies back.
"""

from __future__ import annotations

import json
import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass

_CLOSE = "CLOSE"


def _decode_object(text: str, fields: tuple[str, ...]) -> dict[str, str]:
    """Decode a JSON object whose listed fields are strings (missing ones empty)."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {text!r}")
    values = {}
    for name in fields:
        value = data.get(name, "")
        if not isinstance(value, str):
            raise ValueError(f"field {name!r} must be a string")
        values[name] = value
    return values


@dataclass
class Request:
    """A call of ``method`` with ``params``."""

    method: str
    params: str

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, text: str) -> Request:
        """Decode a request; raises ``ValueError`` on malformed input."""
        return cls(**_decode_object(text, ("method", "params")))


@dataclass
class Response:
    """The result of a call: a status ``code`` and a ``body``."""

    code: str
    body: str = ""

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, text: str) -> Response:
        """Decode a response; raises ``ValueError`` on malformed input."""
        return cls(**_decode_object(text, ("code", "body")))


class Server(ABC):
    """A service that answers method calls."""

    @abstractmethod
    def name(self) -> str:
        """Return the name of the service."""

    @abstractmethod
    def handler(self, method: str, params: str) -> Response:
        """Answer one call of ``method`` with ``params``."""


class _Session:
    """One client's connection to a server, served by a worker thread."""

    def __init__(self, server: Server) -> None:
        self._requests: queue.Queue[str] = queue.Queue()
        self._replies: queue.Queue[str | None] = queue.Queue()
        self._worker = threading.Thread(target=self._serve, args=(server,), daemon=True)
        self._worker.start()

    def _serve(self, server: Server) -> None:
        while True:
            raw = self._requests.get()
            if raw == _CLOSE:
                break
            try:
                request = Request.from_json(raw)
            except ValueError:
                print("Invalid request format:", raw)
                self._replies.put(None)
                return
            response = server.handler(request.method, request.params)
            self._replies.put(response.to_json())
        print("Session closed.")

    def send(self, text: str) -> None:
        """Queue a raw request for the server."""
        self._requests.put(text)

    def receive(self) -> str | None:
        """Wait for the next raw reply; ``None`` if the session broke down."""
        return self._replies.get()


class IpcServer:
    """Hands out sessions connected to ``server``."""

    def __init__(self, server: Server) -> None:
        self.server = server

    def connect(self) -> _Session:
        """Open a new session to the server."""
        session = _Session(self.server)
        print("A new session has been created successfully.")
        return session


class IpcClient:
    """Makes calls to a server over its own session."""

    def __init__(self, server: IpcServer) -> None:
        self._session = server.connect()
        self._lock = threading.Lock()
        self._closed = False

    def call(self, method: str, params: str) -> Response:
        """Call ``method`` with ``params`` and wait for the response.

        Raises ``ConnectionError`` if the session is closed or broke down.
        """
        payload = Request(method, params).to_json()
        with self._lock:
            if self._closed:
                raise ConnectionError("session is closed")
            self._session.send(payload)
            reply = self._session.receive()
            if reply is None:
                self._closed = True
                raise ConnectionError("session ended unexpectedly")
        return Response.from_json(reply)

    def close(self) -> None:
        """End the session; further calls raise ``ConnectionError``."""
        with self._lock:
            if not self._closed:
                self._closed = True
                self._session.send(_CLOSE)

    def __enter__(self) -> IpcClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()