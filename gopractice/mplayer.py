"""Interactive console that manages a music library and plays entries."""

from __future__ import annotations

import argparse

from gopractice import players
from gopractice.mlib import MusicEntry, MusicManager

_BANNER = """
\tEnter following commands to control the player:
\tlib list -- View the existing music lib
\tlib add <name><artist><source><type> --Add a music to the music lib
\tlib remove <id> --Remove the specified music from the lib
\tplay <name> -- Play the specified music
"""

_QUIT_COMMANDS = {"q", "e"}


class MusicConsole:
    """Interprets console commands against a music library."""

    def __init__(self, library: MusicManager | None = None) -> None:
        self.lib = MusicManager() if library is None else library
        self._last_id = 1

    def handle(self, line: str) -> bool:
        """Run one command line; returns ``False`` when the console should stop."""
        if line in _QUIT_COMMANDS:
            return False
        tokens = line.split(" ")
        if tokens[0] == "lib":
            self.handle_lib(tokens)
        elif tokens[0] == "play":
            self.handle_play(tokens)
        else:
            print("Unrecognized command:", tokens[0])
        return True

    def handle_lib(self, tokens: list[str]) -> None:
        """Run a ``lib`` sub-command."""
        if len(tokens) < 2:
            print("USAGE : lib list|add|remove")
            return
        command = tokens[1]
        if command == "list":
            for number, entry in enumerate(self.lib, start=1):
                print(number, ":", entry.name, entry.source, entry.type)
        elif command == "add":
            if len(tokens) != 6:
                print("USAGE : lib add <name><artist><source><type>")
                return
            self._last_id += 1
            self.lib.add(MusicEntry(str(self._last_id), *tokens[2:6]))
        elif command == "remove":
            if len(tokens) != 3:
                print("USAGE : lib remove <id>")
                return
            try:
                index = int(tokens[2])
            except ValueError:
                print("Unrecognized index :", tokens[2])
                return
            self.lib.remove(index)
        else:
            print("Unrecognized lib command:", command)

    def handle_play(self, tokens: list[str]) -> None:
        """Run a ``play`` command."""
        if len(tokens) != 2:
            print("USAGE: play<name>")
            return
        entry = self.lib.find(tokens[1])
        if entry is None:
            print("The music", tokens[1], "does not exist.")
            return
        try:
            players.play(entry.source, entry.type)
        except ValueError as exc:
            print(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive music console until quit or end of input."""
    argparse.ArgumentParser(prog="mplayer", description="Music library console.").parse_args(argv)
    print(_BANNER)
    console = MusicConsole()
    while True:
        try:
            line = input("Enter command -> ")
        except EOFError:
            break
        if not console.handle(line):
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())