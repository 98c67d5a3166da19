"""Local search move source."""

import random
from collections import deque

from .Player import Player
from .ai import heuristic, search_minimax
from .utils import timer


STATS_HISTORY = 200


class SearchPlayer(Player):
    is_machine = True

    def __init__(self, color, move_timeout=2.0, depth=None, depth_table=search_minimax.DEFAULT_DEPTH_TABLE, weights=None, seed=None, stats_history=STATS_HISTORY):
        super().__init__(color)
        self.move_timeout = move_timeout
        self.depth = depth
        self.depth_table = depth_table
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.rng = random.Random(seed)
        self.stats = deque(maxlen=stats_history)

    def propose(self, board, last_move=None, deadline=None):
        if deadline is None:
            deadline = timer.deadline_after(self.move_timeout)
        return search_minimax.choose_move(
            board,
            self.color,
            deadline=deadline,
            depth=self.depth,
            depth_table=self.depth_table,
            weights=self.weights,
            last_move=last_move,
            rng=self.rng,
            stats=self.stats,
        )
