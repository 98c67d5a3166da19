"""Turn state machine and game loop: validation, win/draw bookkeeping, machine turns."""

import random
import threading
import time
from dataclasses import dataclass
from enum import Enum

from .Board import Board, BLACK, WHITE, BOARD_SIZE, WIN_LENGTH, IllegalMove, color_name
from .ai import move_selector
from .engine import referee, rules
from .utils import timer
from .utils.logger import log_event


class Status(Enum):
    AWAITING = "awaiting"
    EVALUATING = "evaluating"
    WIN = "win"
    DRAW = "draw"


TERMINAL = (Status.WIN, Status.DRAW)


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything a renderer needs for one frame."""
    size: int
    cells: tuple
    current_color: int
    status: Status
    winner: int | None
    last_move: tuple | None
    winning_line: tuple
    generation: int

    def cell(self, row, col):
        return self.cells[row * self.size + col]

    @property
    def result_text(self):
        if self.status is Status.WIN:
            return f"{color_name(self.winner)} Wins!"
        if self.status is Status.DRAW:
            return "Draw!"
        return ""


class Omokgame:
    def __init__(self, board_size=BOARD_SIZE, move_timeout=2.0, black_player=None, white_player=None,
                 logger=log_event, renderer=None, closer=None, fallback_player=None,
                 win_length=WIN_LENGTH, result_pause=3.0, seed=None):
        self.board_size = board_size
        self.win_length = win_length
        self.move_timeout = move_timeout
        self.players = {BLACK: black_player, WHITE: white_player}
        self.fallback_player = fallback_player
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.result_pause = result_pause
        self.rng = random.Random(seed)
        self._lock = threading.RLock()
        self.generation = 0
        self.reset()

    # -------------------------
    # State
    # -------------------------

    def reset(self):
        """Fresh board, Black to move; pending machine results become stale."""
        with self._lock:
            self.board = Board(self.board_size, self.win_length)
            self.color = BLACK
            self.status = Status.AWAITING
            self.winner = None
            self.winning_line = []
            self.last_move = None
            self.move_index = 0
            self.generation += 1
            self.logger(f"New game (generation {self.generation})")

    @property
    def is_over(self):
        return self.status in TERMINAL

    @property
    def result(self):
        """-1 (black win), 1 (white win), 0 (draw), or None while in progress."""
        if self.status is Status.WIN:
            return self.winner
        if self.status is Status.DRAW:
            return 0
        return None

    def snapshot(self):
        with self._lock:
            return BoardSnapshot(
                size=self.board.size,
                cells=tuple(self.board.cells),
                current_color=self.color,
                status=self.status,
                winner=self.winner,
                last_move=self.last_move,
                winning_line=tuple(self.winning_line),
                generation=self.generation,
            )

    # -------------------------
    # Transitions
    # -------------------------

    def apply_move(self, move):
        """
        Apply a move for the side to play. Returns False (state unchanged)
        if the game is over or the move is illegal.
        """
        with self._lock:
            if self.is_over:
                self.logger(f"Rejected {move}: game is over")
                return False
            try:
                referee.check_move(move, self.board)
            except IllegalMove as exc:
                self.logger(f"Rejected {move}: {exc}")
                return False

            color = self.color
            row, col = move
            self.status = Status.EVALUATING
            self.board.place(row, col, color)
            self.last_move = (row, col)
            self.move_index += 1
            self.logger(f"Move {self.move_index}: {'B' if color == BLACK else 'W'} {self.last_move}")

            line = rules.winning_line(self.board, row, col, color)
            if line is not None:
                self.winning_line = line
                self.winner = color
                self.status = Status.WIN
                self.logger(f"Winner: {color_name(color)}")
            elif rules.is_draw(self.board, line):
                self.status = Status.DRAW
                self.logger("Result: Draw (board full)")
            else:
                self.color = -color
                self.status = Status.AWAITING
            return True

    def apply_deferred(self, move, generation, color):
        """Apply a move computed off-thread only if its turn is still current."""
        with self._lock:
            if generation != self.generation or color != self.color or self.is_over:
                self.logger(f"Discarded stale move {move} (generation {generation})")
                return False
            return self.apply_move(move)

    # -------------------------
    # Machine turns
    # -------------------------

    def machine_move(self, player):
        """
        Ask a machine move source for a move on a private board copy. A None or
        illegal proposal is replaced by the fallback source, then by a random
        legal cell.
        """
        with self._lock:
            board = self.board.clone()
            last_move = self.last_move

        deadline = timer.deadline_after(getattr(player, "move_timeout", self.move_timeout))
        move = player.propose(board, last_move=last_move, deadline=deadline)
        if move is not None and referee.is_legal(move, board):
            return move
        self.logger(f"{color_name(player.color)} move source gave {move}; using fallback")

        if self.fallback_player is not None and self.fallback_player is not player:
            move = self.fallback_player.propose(board, last_move=last_move)
            if move is not None and referee.is_legal(move, board):
                return move

        return self._random_legal_move(board)

    def _random_legal_move(self, board):
        pool = move_selector.generate_candidates(board) or board.empty_cells()
        pool = [mv for mv in pool if board.is_empty(*mv)]
        return self.rng.choice(pool) if pool else None

    def submit_machine_turn(self, executor, player=None):
        """
        Run the machine ply on `executor`; the result is applied when it
        arrives unless the game was reset or moved on in the meantime.
        """
        with self._lock:
            generation = self.generation
            color = self.color
        player = player or self.players[color]

        def _done(future):
            if future.cancelled():
                return
            try:
                move = future.result()
            except Exception as exc:
                self.logger(f"{color_name(color)} move source raised {exc!r}; playing a random legal cell")
                with self._lock:
                    move = self._random_legal_move(self.board.clone())
                    if move is not None:
                        self.apply_deferred(move, generation, color)
                return
            if move is None:
                return
            self.apply_deferred(move, generation, color)

        future = executor.submit(self.machine_move, player)
        future.add_done_callback(_done)
        return future

    # -------------------------
    # Loop
    # -------------------------

    def _render(self):
        if self.renderer:
            self.renderer(self.snapshot())

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), or 0 (draw)."""
        try:
            while not self.is_over:
                self._render()
                player = self.players[self.color]

                if player.is_machine:
                    move = self.machine_move(player)
                    if move is None:
                        # Unreachable with correct draw detection; close the game anyway.
                        self.status = Status.DRAW
                        self.logger("Result: Draw (no legal move)")
                        break
                    self.apply_move(move)
                    continue

                move = player.propose(self.board.clone(), last_move=self.last_move)
                if move is None:
                    continue
                self.apply_move(move)

            if self.renderer:
                self._render()
                # Pause to show the result
                time.sleep(self.result_pause)

            return self.result
        finally:
            if self.closer:
                self.closer()
