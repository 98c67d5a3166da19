"""Move-source interface for human or machine controllers."""


class MoveSourceError(RuntimeError):
    """A move source could not produce a usable move."""


class Player:
    """
    A move source. `propose` returns a (row, col) tuple or None when it has
    no move to offer; the game decides what to do with None.
    """

    is_machine = False

    def __init__(self, color):
        self.color = color

    def propose(self, board, last_move=None, deadline=None):
        """Return (row, col) for next move, or None."""
        raise NotImplementedError

    def close(self):
        """Release anything the move source holds (workers, windows)."""


def parse_move_text(raw):
    """Parse 'row col' or 'row,col' into a (row, col) tuple."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError("Invalid input format; expected two integers")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers") from exc


class HumanPlayer(Player):
    def __init__(self, color, input_fn=input, output_fn=print):
        super().__init__(color)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def propose(self, board, last_move=None, deadline=None):
        """Text-input player; unparsable input is flagged and yields None."""
        raw = self.input_fn("Enter move as 'row col' (0-indexed): ").strip()
        try:
            return parse_move_text(raw)
        except ValueError as exc:
            self.output_fn(str(exc))
            return None


class GuiHumanPlayer(Player):
    def __init__(self, color, view):
        super().__init__(color)
        self.view = view

    def propose(self, board, last_move=None, deadline=None):
        return self.view.wait_for_move(board, self.color)
