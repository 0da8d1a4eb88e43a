"""A central game server keeping track of online players, and its client."""

from __future__ import annotations

import json
import queue
import threading
from dataclasses import dataclass, field
from typing import Any

from gopractice.ipc import IpcClient, IpcServer, Response, Server

_OK = "200"


class CenterError(Exception):
    """A request to the central server failed."""


@dataclass
class Message:
    """A chat message."""

    sender: str = ""
    to: str = ""
    content: str = ""

    def to_json(self) -> str:
        return json.dumps({"from": self.sender, "to": self.to, "content": self.content})

    @classmethod
    def from_json(cls, text: str) -> Message:
        """Decode a message; raises ``ValueError`` on malformed input."""
        data = _json_object(text)
        values = {key: data.get(key, "") for key in ("from", "to", "content")}
        if not all(isinstance(value, str) for value in values.values()):
            raise ValueError("message fields must be strings")
        return cls(values["from"], values["to"], values["content"])


@dataclass
class Room:
    """A game room."""


@dataclass
class Player:
    """An online player who prints every message delivered to them."""

    name: str = ""
    level: int = 0
    exp: int = 0
    room: int = 0
    _inbox: queue.Queue = field(default_factory=queue.Queue, init=False, repr=False, compare=False)
    _listener: threading.Thread | None = field(default=None, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def deliver(self, message: Message) -> None:
        """Queue ``message``; a background listener prints it."""
        with self._lock:
            if self._listener is None:
                self._listener = threading.Thread(target=self._listen, daemon=True)
                self._listener.start()
        self._inbox.put(message)

    def _listen(self) -> None:
        while True:
            message = self._inbox.get()
            print(self.name, "received message:", message.content)

    def _to_dict(self) -> dict[str, Any]:
        return {"Name": self.name, "Level": self.level, "Exp": self.exp, "Room": self.room}

    @classmethod
    def _from_dict(cls, data: Any) -> Player:
        if not isinstance(data, dict):
            raise ValueError("player must be a JSON object")
        name = data.get("Name", "")
        if not isinstance(name, str):
            raise ValueError("player Name must be a string")
        numbers = {}
        for key in ("Level", "Exp", "Room"):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"player {key} must be an integer")
            numbers[key] = value
        return cls(name, numbers["Level"], numbers["Exp"], numbers["Room"])


def _json_object(text: str) -> dict[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {text!r}")
    return data


class CenterServer(Server):
    """Keeps the list of online players and relays broadcasts to them."""

    def __init__(self) -> None:
        self.players: list[Player] = []
        self.rooms: list[Room] = []
        self._lock = threading.RLock()

    def name(self) -> str:
        return "CenterServer"

    def handler(self, method: str, params: str) -> Response:
        """Answer ``addplayer``, ``removeplayer``, ``listplayer`` and ``broadcast``."""
        actions = {
            "addplayer": self._add_player,
            "removeplayer": self._remove_player,
            "listplayer": self._list_players,
            "broadcast": self._broadcast,
        }
        action = actions.get(method)
        if action is None:
            return Response("404", method + ":" + params)
        try:
            body = action(params)
        except (CenterError, ValueError) as exc:
            return Response(str(exc))
        return Response(_OK, body)

    def _add_player(self, params: str) -> str:
        player = Player._from_dict(json.loads(params))
        with self._lock:
            self.players.append(player)
        return ""

    def _remove_player(self, params: str) -> str:
        with self._lock:
            for index, player in enumerate(self.players):
                if player.name == params:
                    del self.players[index]
                    return ""
        raise CenterError("Player not found.")

    def _list_players(self, params: str) -> str:
        with self._lock:
            if not self.players:
                raise CenterError("No player online.")
            return json.dumps([player._to_dict() for player in self.players])

    def _broadcast(self, params: str) -> str:
        message = Message.from_json(params)
        with self._lock:
            if not self.players:
                raise CenterError("No player online")
            for player in self.players:
                player.deliver(message)
        return ""


class CenterClient(IpcClient):
    """Client for a :class:`CenterServer` behind an :class:`IpcServer`."""

    def __init__(self, server: IpcServer) -> None:
        super().__init__(server)

    def _checked_call(self, method: str, params: str) -> Response:
        response = self.call(method, params)
        if response.code != _OK:
            raise CenterError(response.code)
        return response

    def add_player(self, player: Player) -> None:
        """Register ``player`` as online; raises ``CenterError`` on failure."""
        self._checked_call("addplayer", json.dumps(player._to_dict()))

    def remove_player(self, name: str) -> None:
        """Log out the player called ``name``; raises ``CenterError`` on failure."""
        self._checked_call("removeplayer", name)

    def list_players(self) -> list[Player]:
        """Return the online players; raises ``CenterError`` if there are none."""
        response = self._checked_call("listplayer", "")
        data = json.loads(response.body)
        if not isinstance(data, list):
            raise ValueError("player list must be a JSON array")
        return [Player._from_dict(item) for item in data]

    def broadcast(self, message: str) -> None:
        """Send ``message`` to every online player; raises ``CenterError`` on failure."""
        self._checked_call("broadcast", Message(content=message).to_json())