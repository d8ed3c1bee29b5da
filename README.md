# blocktris

A falling-blocks puzzle game that runs in your terminal.

## Installation

```
pip install blocktris
```

## Playing

Start a game:

```
blocktris start
```

Running `blocktris` with no command prints the help text.

The welcome screen shows the controls, the five best scores so far and the
chosen mode. Press Enter to begin, or type `q` and press Enter to leave.

### Options

These options may be given before or after the `start` command:

- `-p`, `--printmode MODE`: how the board is drawn. The choices are:
  - `1` or `background`: coloured cell backgrounds
  - `2` or `foreground`: coloured `[]` blocks
  - `3` or `nocolor`: plain text. This is the default, and it is also used
    for any value that is not recognised.
  - `4`, `60` or `electronika`: green on black, like an old terminal
- `-s`, `--sound`: play background music and a game-over tune. This uses
  pygame's mixer and needs the WAV files `assets/background.wav` and
  `assets/gameover2.wav`, looked up relative to the current directory. On
  Linux, if no sound card is listed in `/proc/asound/cards`, a warning is
  printed and sound is turned off.
- `-e`, `--endless`: endless (relaxed) mode. It changes the mode description
  on the welcome screen and the banner shown while paused.
- `-v`, `--version`: print the version and exit.

Example:

```
blocktris start --printmode background --sound
```

### Controls

| Key          | Action         |
|--------------|----------------|
| Left / `A`   | Move left      |
| Right / `D`  | Move right     |
| Down / `S`   | Soft drop      |
| Up / `W`     | Rotate         |
| Space        | Hard drop      |
| `P`          | Pause / resume |
| `Q` / Esc    | Quit           |

Pieces fall one row per second. The game ends when you quit or when a new
piece no longer fits at the top of the board; "GAME OVER" then blinks on
screen, followed by the final score. Pressing Ctrl+C leaves at once without
recording the score.

### Scoring

Points depend on how many lines one piece clears at once:

| Lines     | Points |
|-----------|--------|
| 1         | 40     |
| 2         | 100    |
| 3         | 300    |
| 4 or more | 1200   |

When a game ends with a score above zero, the score is appended to
`score.txt` in the current directory.

## Using the pieces in code

The game rules can be used without a terminal:

- `blocktris.logic.Board` holds the grid and offers `can_place`, `lock` and
  `clear_lines`.
- `blocktris.logic.GameState` holds the falling piece, the preview piece and
  the score, with `spawn_piece`, `move`, `rotate_current`, `hard_drop`,
  `tick` and `cell_value`.
- `blocktris.render.render_board` and `render_next` build the text frames.
- `blocktris.scores` reads, formats and appends high scores.

## What it does not do

The fall speed stays at one row per second for the whole game in both
modes; there are no levels and the speed does not increase as lines are
cleared. There is no hold piece, no ghost piece and no line-clear animation.