"""Line scanning, five-in-a-row detection, and draw detection."""

from ..Board import Board, EMPTY


# Horizontal, vertical, diagonal down-right, diagonal down-left as (drow, dcol)
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def _walk(board: Board, row: int, col: int, drow: int, dcol: int, color: int):
    """Cells of `color` contiguous to (row, col) along (drow, dcol), start excluded."""
    run = []
    for step in range(1, board.win_length):
        r = row + drow * step
        c = col + dcol * step
        if not board.in_bounds(r, c) or board.cells[r * board.size + c] != color:
            break
        run.append((r, c))
    return run


def winning_line(board: Board, row: int, col: int, color=None):
    """
    Return the coordinates of a win-length run through (row, col), or None.
    Assumes the stone is already placed; only the four axes through the
    anchor are scanned.
    """
    if not board.in_bounds(row, col):
        return None
    if color is None:
        color = board.get(row, col)
    if color == EMPTY or board.get(row, col) != color:
        return None

    for drow, dcol in DIRECTIONS:
        forward = _walk(board, row, col, drow, dcol, color)
        backward = _walk(board, row, col, -drow, -dcol, color)
        if 1 + len(forward) + len(backward) >= board.win_length:
            return list(reversed(backward)) + [(row, col)] + forward
    return None


def is_win_after_move(board: Board, row: int, col: int, color: int) -> bool:
    """Assumes stone is already placed."""
    return winning_line(board, row, col, color) is not None


def is_draw(board: Board, last_win=None) -> bool:
    """Board is full and the final move did not complete a run."""
    return last_win is None and board.is_full()


def all_lines(board: Board):
    """Yield every row, column, and diagonal long enough to hold a win."""
    size = board.size
    cells = board.cells
    min_len = board.win_length

    for row in range(size):
        yield cells[row * size:(row + 1) * size]
    for col in range(size):
        yield cells[col::size]

    # Diagonals (top-left to bottom-right), keyed by col - row
    for offset in range(-(size - min_len), size - min_len + 1):
        yield [cells[r * size + r + offset] for r in range(size) if 0 <= r + offset < size]

    # Anti-diagonals (top-right to bottom-left), keyed by row + col
    for total in range(min_len - 1, 2 * size - min_len):
        yield [cells[r * size + total - r] for r in range(size) if 0 <= total - r < size]


def scan_runs(line, color):
    """
    Yield (length, open_start, open_end) for every maximal run of `color`.
    An end is open only if the next cell exists and is empty; the board edge
    and opposing stones both close it.
    """
    n = len(line)
    i = 0
    while i < n:
        if line[i] != color:
            i += 1
            continue
        start = i
        while i < n and line[i] == color:
            i += 1
        open_start = start > 0 and line[start - 1] == EMPTY
        open_end = i < n and line[i] == EMPTY
        yield i - start, open_start, open_end
