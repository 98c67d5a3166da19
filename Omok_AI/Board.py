"""Board state container: flat N*N cell list addressed by (row, col)."""

EMPTY = 0
BLACK = -1
WHITE = 1

BOARD_SIZE = 15
WIN_LENGTH = 5


class IllegalMove(ValueError):
    """Target cell is occupied, out of range, or the game is already decided."""


def color_name(color):
    return {BLACK: "Black", WHITE: "White"}.get(color, "Empty")


class Board:
    def __init__(self, size=BOARD_SIZE, win_length=WIN_LENGTH):
        if size < win_length:
            raise ValueError("board size must be at least the win length")
        # Store cells as -1 (black), 0 (empty), 1 (white); index = row * size + col
        self.size = size
        self.win_length = win_length
        self.cells = [EMPTY] * (size * size)
        self.move_count = 0
        self.history = []

    @classmethod
    def empty(cls, size=BOARD_SIZE, win_length=WIN_LENGTH):
        return cls(size, win_length)

    def index(self, row, col):
        return row * self.size + col

    def coords(self, index):
        return divmod(index, self.size)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        return self.cells[row * self.size + col]

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row * self.size + col] == EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    @property
    def last_move(self):
        return self.history[-1] if self.history else None

    def place(self, row, col, color):
        """Place a stone; raise IllegalMove if out of bounds or occupied."""
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        if not self.in_bounds(row, col):
            raise IllegalMove(f"move ({row}, {col}) out of bounds")
        if self.cells[row * self.size + col] != EMPTY:
            raise IllegalMove(f"cell ({row}, {col}) already occupied")
        self._push_stone(row, col, color)
        return self

    def _push_stone(self, row, col, color):
        """Unchecked placement used by search for speculative moves."""
        self.cells[row * self.size + col] = color
        self.move_count += 1
        self.history.append((row, col))

    def _pop_stone(self, row, col):
        """Undo the most recent _push_stone at (row, col)."""
        self.cells[row * self.size + col] = EMPTY
        self.move_count -= 1
        self.history.pop()

    def occupied(self):
        size = self.size
        return [divmod(i, size) for i, v in enumerate(self.cells) if v != EMPTY]

    def empty_cells(self):
        size = self.size
        return [divmod(i, size) for i, v in enumerate(self.cells) if v == EMPTY]

    def clone(self):
        new_board = Board(self.size, self.win_length)
        new_board.cells = self.cells[:]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def to_text(self, symbols=(".", "X", "O")):
        """Render rows with coordinate labels; X is Black, O is White."""
        empty_sym, black_sym, white_sym = symbols
        lookup = {EMPTY: empty_sym, BLACK: black_sym, WHITE: white_sym}
        header = "   " + " ".join(str(c % 10) for c in range(self.size))
        lines = [header]
        for row in range(self.size):
            start = row * self.size
            cells = self.cells[start:start + self.size]
            lines.append(f"{row:2d} " + " ".join(lookup[v] for v in cells))
        return "\n".join(lines)
