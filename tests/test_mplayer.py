import io
from unittest import mock

from gopractice.mplayer import MusicConsole, main


def _console_with_song():
    console = MusicConsole()
    console.handle("lib add Title Artist src MP3")
    return console


def test_lib_add_stores_entry():
    console = _console_with_song()
    assert len(console.lib) == 1
    entry = console.lib.find("Title")
    assert (entry.name, entry.artist, entry.source, entry.type) == (
        "Title",
        "Artist",
        "src",
        "MP3",
    )


def test_lib_add_assigns_distinct_ids():
    console = _console_with_song()
    console.handle("lib add Other Artist src2 WAV")
    ids = [entry.id for entry in console.lib]
    assert len(set(ids)) == 2


def test_lib_add_wrong_arity_prints_usage(capsys):
    console = MusicConsole()
    console.handle("lib add OnlyName")
    assert "USAGE : lib add <name><artist><source><type>" in capsys.readouterr().out
    assert len(console.lib) == 0


def test_lib_list_prints_entries(capsys):
    console = _console_with_song()
    console.handle("lib list")
    assert capsys.readouterr().out == "1 : Title src MP3\n"


def test_lib_remove_by_index():
    console = _console_with_song()
    assert console.handle("lib remove 0") is True
    assert len(console.lib) == 0


def test_lib_remove_bad_index(capsys):
    console = _console_with_song()
    console.handle("lib remove x")
    assert "Unrecognized index : x" in capsys.readouterr().out
    assert len(console.lib) == 1


def test_unknown_lib_command(capsys):
    MusicConsole().handle("lib shuffle")
    assert "Unrecognized lib command: shuffle" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert MusicConsole().handle("dance") is True
    assert "Unrecognized command: dance" in capsys.readouterr().out


def test_quit_commands_stop():
    console = MusicConsole()
    assert console.handle("q") is False
    assert console.handle("e") is False


def test_play_missing(capsys):
    MusicConsole().handle("play Missing")
    assert "The music Missing does not exist." in capsys.readouterr().out


def test_play_existing(capsys):
    console = _console_with_song()
    with mock.patch("gopractice.players.time.sleep"):
        console.handle("play Title")
    out = capsys.readouterr().out
    assert "Playing mp3 music  src" in out
    assert "Finished playing src" in out


def test_play_unsupported_type_is_reported(capsys):
    console = MusicConsole()
    console.handle("lib add Song Artist src FLAC")
    console.handle("play Song")
    assert "Unsupported music type: FLAC" in capsys.readouterr().out


def test_main_reads_commands_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("lib add A B C MP3\nlib list\nq\nlib list\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("1 : A C MP3") == 1


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bogus\n"))
    assert main([]) == 0
    assert "Unrecognized command: bogus" in capsys.readouterr().out