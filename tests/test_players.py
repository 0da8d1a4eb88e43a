from unittest import mock

import pytest

from gopractice.players import MP3Player, WAVPlayer, play


def test_mp3_player_output(capsys):
    player = MP3Player(tick=0)
    player.play("song.mp3")
    out = capsys.readouterr().out
    assert out.startswith("Playing mp3 music  song.mp3\n")
    assert out.endswith("Finished playing song.mp3\n")


def test_player_reaches_full_progress(capsys):
    player = WAVPlayer(tick=0)
    player.play("track.wav")
    capsys.readouterr()
    assert player.progress == 100


def test_progress_dots_match_sleep_calls(capsys):
    with mock.patch("gopractice.players.time.sleep") as sleep:
        MP3Player().play("x")
    out = capsys.readouterr().out
    dots_line = out.splitlines()[1]
    assert set(dots_line) == {"."}
    assert len(dots_line) == sleep.call_count
    assert sleep.call_count == 10


def test_play_dispatches_wav(capsys):
    with mock.patch("gopractice.players.time.sleep"):
        play("clip", "WAV")
    out = capsys.readouterr().out
    assert "Playing wav music  clip" in out
    assert "Finished playing clip" in out


def test_play_dispatches_mp3(capsys):
    with mock.patch("gopractice.players.time.sleep"):
        play("clip", "MP3")
    assert "Playing mp3 music  clip" in capsys.readouterr().out


@pytest.mark.parametrize("mtype", ["OGG", "mp3", ""])
def test_play_unsupported_type_raises(mtype):
    with pytest.raises(ValueError, match="Unsupported music type:"):
        play("clip", mtype)