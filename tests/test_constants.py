import pytest

from blocktris.constants import (
    PAUSED,
    SLOGAN,
    PrintMode,
    Settings,
    parse_print_mode,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", PrintMode.BACKGROUND),
        ("background", PrintMode.BACKGROUND),
        ("BACKGROUND", PrintMode.BACKGROUND),
        ("2", PrintMode.FOREGROUND),
        ("Foreground", PrintMode.FOREGROUND),
        ("3", PrintMode.NOCOLOR),
        ("nocolor", PrintMode.NOCOLOR),
        ("4", PrintMode.ELECTRONIKA),
        ("60", PrintMode.ELECTRONIKA),
        ("electronika", PrintMode.ELECTRONIKA),
    ],
)
def test_parse_print_mode_known(value, expected):
    assert parse_print_mode(value) is expected


@pytest.mark.parametrize("value", ["", "rainbow", "5", "0"])
def test_parse_print_mode_unknown_falls_back(value):
    assert parse_print_mode(value) is PrintMode.NOCOLOR


@pytest.mark.parametrize("number, expected", [(1, 1), (2, 2), (3, 3), (4, 4)])
def test_parse_print_mode_accepts_numbers(number, expected):
    assert int(parse_print_mode(number)) == expected


def test_settings_defaults():
    settings = Settings()
    assert settings.print_mode is PrintMode.NOCOLOR
    assert settings.sound is False
    assert settings.endless is False
    assert settings.drop_speed == 1.0
    assert settings.slogan == SLOGAN


def test_paused_text_depends_on_mode():
    assert Settings().paused_text == PAUSED
    assert Settings(endless=True).paused_text == "      Paused - Relax and enjoy!"


def test_settings_keep_chosen_mode():
    settings = Settings(print_mode=parse_print_mode("electronika"), sound=True)
    assert settings.print_mode is PrintMode.ELECTRONIKA
    assert settings.sound is True