import pytest

from gopractice.calc import main


def test_add(capsys):
    status = main(["add", "1", "2"])
    assert status == 0
    assert capsys.readouterr().out == "Result:  3\n"


def test_sqrt(capsys):
    status = main(["sqrt", "16"])
    assert status == 0
    assert capsys.readouterr().out == "Result:  4\n"


@pytest.mark.parametrize("argv", [[], ["add"], ["mul", "1", "2"]])
def test_general_usage(argv, capsys):
    status = main(argv)
    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("USAGE: calc command [arguments] ...")


@pytest.mark.parametrize("argv", [["add", "1"], ["add", "1", "x"], ["add", "1", "2", "3"]])
def test_add_usage(argv, capsys):
    status = main(argv)
    assert status == 1
    assert capsys.readouterr().out == "USAGE: calc add <integer1> <integer2>\n"


@pytest.mark.parametrize("argv", [["sqrt", "abc"], ["sqrt", "4", "9"], ["sqrt", "-4"]])
def test_sqrt_usage(argv, capsys):
    status = main(argv)
    assert status == 1
    assert capsys.readouterr().out == "USAGE: calc sqrt <integer>\n"