"""Move validation and time control."""

import time

from ..Board import IllegalMove


def check_move(move, board, deadline=None):
    """
    Validate a proposed move against time, shape, bounds, and occupancy.
    Raises IllegalMove/TimeoutError on invalid moves.
    """
    if deadline is not None and time.time() > deadline:
        raise TimeoutError("Move exceeded allotted time")

    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise IllegalMove(f"malformed move {move!r}") from exc
    if not isinstance(row, int) or not isinstance(col, int) or isinstance(row, bool) or isinstance(col, bool):
        raise IllegalMove(f"move coordinates must be integers, got {move!r}")
    if not board.in_bounds(row, col):
        raise IllegalMove("Move out of bounds")
    if not board.is_empty(row, col):
        raise IllegalMove("Cell already occupied")

    return True


def is_legal(move, board):
    try:
        return check_move(move, board)
    except IllegalMove:
        return False
