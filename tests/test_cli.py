import pytest

from blocktris.cli import main, parse_args
from blocktris.constants import VERSION


def test_defaults():
    args = parse_args(["start"])
    assert args.command == "start"
    assert args.printmode == "nocolor"
    assert args.sound is False
    assert args.endless is False


def test_options_before_command():
    args = parse_args(["-p", "1", "-s", "start"])
    assert args.command == "start"
    assert args.printmode == "1"
    assert args.sound is True
    assert args.endless is False


def test_options_after_command():
    args = parse_args(["start", "--endless", "--printmode", "60"])
    assert args.printmode == "60"
    assert args.endless is True
    assert args.sound is False


def test_no_command():
    args = parse_args([])
    assert args.command is None


def test_unknown_command_exits_with_one():
    with pytest.raises(SystemExit) as exc:
        parse_args(["launch"])
    assert exc.value.code == 1


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--version"])
    assert exc.value.code == 0
    assert VERSION in capsys.readouterr().out


def test_main_without_command_prints_help(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "start" in out
    assert "--printmode" in out