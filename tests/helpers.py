# Column order that fills a 7x6 board without anyone getting four in a row.
# Columns 0-1 and 2-3 are filled as pairs, then 4-6 together.
TIE_SEQUENCE = (
    [0, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0]
    + [2, 3, 3, 2, 3, 2, 2, 3, 2, 3, 3, 2]
    + [4, 5, 6, 4, 5, 4, 5, 6, 4, 6, 4, 5, 6, 5, 6, 4, 5, 6]
)


def play(game, columns):
    """Play a list of columns, returning every MoveResult."""
    return [game.attempt_move(col) for col in columns]


def scripted_input(lines):
    """input() replacement that replays lines, then behaves like Ctrl-D."""
    remaining = list(lines)

    def _input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input
