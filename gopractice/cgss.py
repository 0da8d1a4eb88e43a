"""Interactive console for the casual game server."""

from __future__ import annotations

import argparse
import contextlib
import re
from collections.abc import Callable

from gopractice.cg import CenterClient, CenterError, CenterServer, Player
from gopractice.ipc import IpcServer

_INTEGER = re.compile(r"[+-]?\d+")

_HELP = """Command:
\t\t\tlogin<username><level><exp>
\t\t\tlogout<username>
\t\t\tsend<message>
\t\t\tlistplayer
\t\t\tquit(q)
\t\t\thelp(h)
\t\t"""

_HELP_COMMANDS = frozenset({"help", "H"})
_QUIT_COMMANDS = frozenset({"quit", "q"})


def _parse_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


class GameConsole:
    """Interprets console commands against a central game server."""

    def __init__(self, client: CenterClient | None = None) -> None:
        self.client = CenterClient(IpcServer(CenterServer())) if client is None else client
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "login": self._login,
            "logout": self._logout,
            "listplayer": self._list_players,
            "send": self._send,
        }

    def execute(self, line: str) -> bool:
        """Run one command line; returns ``False`` when the console should stop."""
        tokens = line.split(" ")
        name = tokens[0]
        if name in _QUIT_COMMANDS:
            return False
        if name in _HELP_COMMANDS:
            print(_HELP)
            return True
        command = self._commands.get(name)
        if command is None:
            print("Unknown command:", name)
        else:
            command(tokens)
        return True

    def _logout(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            print("USAGE:logout <username>")
            return
        with contextlib.suppress(CenterError):
            self.client.remove_player(tokens[1])

    def _login(self, tokens: list[str]) -> None:
        if len(tokens) != 4:
            print("USAGE : login<username><level><exp>")
            return
        level = _parse_int(tokens[2])
        if level is None:
            print("Invalid Parameter: <level> should be an integer.")
            return
        exp = _parse_int(tokens[3])
        if exp is None:
            print("Invalid Parameter: <exp> should be an integer.")
            return
        try:
            self.client.add_player(Player(tokens[1], level, exp))
        except CenterError as exc:
            print("Failed adding player", exc)

    def _list_players(self, tokens: list[str]) -> None:
        try:
            players = self.client.list_players()
        except CenterError as exc:
            print("Failed.", exc)
            return
        for number, player in enumerate(players, start=1):
            print(number, ":", player)

    def _send(self, tokens: list[str]) -> None:
        try:
            self.client.broadcast(" ".join(tokens[1:]))
        except CenterError as exc:
            print("Failed.", exc)


def main(argv: list[str] | None = None) -> int:
    """Run the game server console until quit or end of input."""
    argparse.ArgumentParser(prog="cgss", description="Casual game server console.").parse_args(argv)
    print("Casual Game Server Solution")
    console = GameConsole()
    console.execute("help")
    try:
        while True:
            print("Command> ")
            try:
                line = input()
            except EOFError:
                break
            if not console.execute(line):
                break
    finally:
        console.client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())