import io
import random
from unittest import mock

import pytest

from blocktris.constants import GREEN, PrintMode, Settings
from blocktris.game import Game, game_over_animation, intro_text
from blocktris.logic import rotate
from blocktris.scores import read_high_scores


def _game(tmp_path, **settings):
    stream = io.StringIO()
    game = Game(
        Settings(**settings),
        rng=random.Random(7),
        score_path=tmp_path / "score.txt",
        stream=stream,
    )
    game.state.spawn_piece()
    return game, stream


@pytest.mark.parametrize("key", ["q", "Q", "KEY_ESCAPE"])
def test_quit_keys_stop(tmp_path, key):
    game, _ = _game(tmp_path)
    game.handle_key(key)
    assert game.stopped is True


@pytest.mark.parametrize("key", ["a", "KEY_LEFT"])
def test_left_moves_piece(tmp_path, key):
    game, _ = _game(tmp_path)
    x0 = game.state.x
    game.handle_key(key)
    assert game.state.x == x0 - 1


@pytest.mark.parametrize("key", ["d", "KEY_RIGHT"])
def test_right_moves_piece(tmp_path, key):
    game, _ = _game(tmp_path)
    x0 = game.state.x
    game.handle_key(key)
    assert game.state.x == x0 + 1


def test_down_moves_piece(tmp_path):
    game, _ = _game(tmp_path)
    game.handle_key("s")
    assert game.state.y == 1


def test_rotate_key_turns_piece(tmp_path):
    game, _ = _game(tmp_path)
    before = game.state.current
    game.handle_key("w")
    assert game.state.current == rotate(before)


def test_space_hard_drops(tmp_path):
    game, _ = _game(tmp_path)
    game.handle_key(" ")
    state = game.state
    assert state.y > 0
    assert not state.board.can_place(state.current, state.x, state.y + 1)


def test_pause_blocks_moves_and_toggles(tmp_path):
    game, _ = _game(tmp_path)
    x0 = game.state.x
    game.handle_key("p")
    assert game.state.paused is True
    game.handle_key("a")
    assert game.state.x == x0
    game.handle_key("P")
    assert game.state.paused is False
    game.handle_key("a")
    assert game.state.x == x0 - 1


def test_draw_writes_frame(tmp_path):
    game, stream = _game(tmp_path)
    frame = game.draw()
    output = stream.getvalue()
    assert output.startswith("\033[H")
    assert output.endswith(frame)
    assert "Score: 0" in frame
    assert "Next:" in frame


def test_intro_lists_scores_and_mode():
    text = intro_text(Settings(), [500, 100])
    assert "Top Scores:\n1. 500\n2. 100\n" in text
    assert "Marathon Mode" in text
    assert text.endswith("Press Enter to start or type 'q' to exit...\n")


def test_intro_endless_and_electronika():
    text = intro_text(Settings(print_mode=PrintMode.ELECTRONIKA, endless=True), [])
    assert text.startswith(GREEN)
    assert "Endless (Relaxed) Mode" in text


def test_game_over_animation_blinks():
    stream = io.StringIO()
    with mock.patch("blocktris.game.time.sleep") as sleep:
        game_over_animation(Settings(), 80, 24, stream)
    output = stream.getvalue()
    assert sleep.call_count == 6
    assert output.count("GAME OVER") == 4
    assert "\033[12;37H" in output
    assert output.endswith("Press Enter to continue...")


def test_goodbye_records_score(tmp_path):
    game, stream = _game(tmp_path)
    game.state.score = 40
    with mock.patch("blocktris.terminal.subprocess.run"):
        game.goodbye()
    assert read_high_scores(tmp_path / "score.txt") == [40]
    assert "Your score is: 40" in stream.getvalue()
    assert "Thank you for playing!" in stream.getvalue()


def test_goodbye_skips_zero_score(tmp_path):
    game, stream = _game(tmp_path)
    with mock.patch("blocktris.terminal.subprocess.run"):
        game.goodbye()
    assert not (tmp_path / "score.txt").exists()
    assert "Your score is: 0" in stream.getvalue()


def test_start_quits_from_welcome(tmp_path):
    stream = io.StringIO()
    game = Game(
        Settings(),
        score_path=tmp_path / "score.txt",
        stream=stream,
        stdin=io.StringIO("q\n"),
    )
    with mock.patch("blocktris.terminal.subprocess.run"):
        with pytest.raises(SystemExit) as exc:
            game.start()
    assert exc.value.code == 0
    assert "Press Enter to start" in stream.getvalue()