"""Candidate move generation (stone neighbourhood, proximity ordering)."""

CANDIDATE_RADIUS = 2


def center_move(board):
    center = board.size // 2
    return (center, center)


def neighbourhood(board, radius=CANDIDATE_RADIUS) -> set[tuple[int, int]]:
    """Every empty cell within Chebyshev `radius` of an occupied cell."""
    size = board.size
    cells = board.cells
    found = set()
    for orow, ocol in board.occupied():
        for drow in range(-radius, radius + 1):
            for dcol in range(-radius, radius + 1):
                nrow, ncol = orow + drow, ocol + dcol
                if nrow < 0 or nrow >= size or ncol < 0 or ncol >= size:
                    continue
                if cells[nrow * size + ncol] == 0:
                    found.add((nrow, ncol))
    return found


def generate_candidates(board, last_move=None, radius=CANDIDATE_RADIUS):
    """
    Generate candidate empty cells near existing stones.
    - If board empty: return center only.
    - Neighbourhood: Chebyshev radius (default 2) around every stone.
    - Order: Manhattan distance to the most recent move, ascending; ties by
      (row, col) so that ordering is stable across calls.
    """
    if board.move_count == 0:
        return [center_move(board)]

    if last_move is None:
        last_move = board.last_move

    found = neighbourhood(board, radius)
    if last_move is None:
        return sorted(found)

    lrow, lcol = last_move
    return sorted(found, key=lambda mv: (abs(mv[0] - lrow) + abs(mv[1] - lcol), mv))
