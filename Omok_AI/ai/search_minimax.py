"""Minimax with alpha-beta pruning over neighbourhood candidates under a wall-clock deadline."""

import time
import random

from . import heuristic
from . import move_selector
from ..utils import timer
from ..utils.logger import get_logger


INF = float("inf")
WIN_THRESHOLD = heuristic.WIN // 2
DEPTH_STEP = 1000  # per-ply damping for decided positions: win fast, lose slowly

# (max root candidates, depth); the final row (None) catches wider frontiers.
DEFAULT_DEPTH_TABLE = ((20, 4), (None, 2))

logger = get_logger(__name__)


def select_depth(candidate_count, depth_table=DEFAULT_DEPTH_TABLE):
    """Pick search depth from the root frontier width: narrow -> deep, wide -> shallow."""
    for max_candidates, depth in depth_table:
        if max_candidates is None or candidate_count <= max_candidates:
            return depth
    return depth_table[-1][1]


class MinimaxSearcher:
    """Encapsulates the state and logic for a single-color minimax search."""

    def __init__(self, color, depth=None, depth_table=DEFAULT_DEPTH_TABLE, weights=None, rng=None, stats=None):
        self.color = color
        self.fixed_depth = depth
        self.depth_table = depth_table
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.rng = rng or random.Random()
        self.stats_list = stats

        # Internal state
        self.max_depth = 0
        self.node_counter = 0
        self.deadline = None
        self.start_time = None
        self.timed_out = False

    def choose_move(self, board, deadline, last_move=None):
        """
        Return the best move for color found before the deadline, or None if
        the board has no empty cell. The caller's board is never mutated.
        """
        self.deadline = deadline
        self.start_time = time.time()
        self.node_counter = 0
        self.timed_out = False

        # Trivial opening: center, no search.
        if board.move_count == 0:
            return move_selector.center_move(board)

        work = board.clone()
        candidates = move_selector.generate_candidates(work, last_move=last_move)
        if not candidates:
            return self._fallback_move(work, candidates)

        self.max_depth = self.fixed_depth or select_depth(len(candidates), self.depth_table)

        best_move = None
        best_score = -INF
        alpha = -INF
        for move in candidates:
            row, col = move
            work._push_stone(row, col, self.color)
            try:
                score = self._minimax(work, self.max_depth - 1, -self.color, alpha, INF)
            finally:
                work._pop_stone(row, col)

            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)

        if best_move is None:
            best_move = self._fallback_move(work, candidates)

        self._record_stats(len(candidates), best_move, best_score)
        return best_move

    def _minimax(self, board, depth, node_color, alpha, beta):
        self.node_counter += 1
        score = heuristic.score_board(board, self.color, self.weights)

        # Decided position: damp by plies played so shallower wins rank higher.
        ply = self.max_depth - depth
        if score > WIN_THRESHOLD:
            return score - ply * DEPTH_STEP
        if score < -WIN_THRESHOLD:
            return score + ply * DEPTH_STEP

        if depth <= 0:
            return score
        if timer.expired(self.deadline):
            self.timed_out = True
            return score

        candidates = move_selector.generate_candidates(board)
        if not candidates:
            return score

        return self._search_moves(board, node_color, depth, alpha, beta, candidates)

    def _search_moves(self, board, node_color, depth, alpha, beta, candidates):
        maximizing = (node_color == self.color)
        best_score = -INF if maximizing else INF

        for row, col in candidates:
            board._push_stone(row, col, node_color)
            try:
                score = self._minimax(board, depth - 1, -node_color, alpha, beta)
            finally:
                board._pop_stone(row, col)

            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return best_score

    def _fallback_move(self, board, candidates):
        pool = list(candidates) or board.empty_cells()
        if not pool:
            logger.debug("No legal moves available for search fallback")
            return None
        return self.rng.choice(pool)

    def _record_stats(self, candidate_count, move, score):
        total_time = max(time.time() - self.start_time, 1e-9)
        stats = {
            "color": self.color,
            "depth": self.max_depth,
            "candidates": candidate_count,
            "nodes": self.node_counter,
            "time": total_time,
            "timed_out": self.timed_out,
            "move": move,
            "score": score,
        }
        logger.debug(
            "search depth=%d candidates=%d nodes=%d time=%.3fs timed_out=%s move=%s score=%s",
            self.max_depth, candidate_count, self.node_counter, total_time, self.timed_out, move, score,
        )
        if self.stats_list is not None:
            self.stats_list.append(stats)


def choose_move(board, color, deadline, depth=None, depth_table=DEFAULT_DEPTH_TABLE, weights=None, last_move=None, rng=None, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(
        color=color,
        depth=depth,
        depth_table=depth_table,
        weights=weights,
        rng=rng,
        stats=stats,
    )
    return searcher.choose_move(board, deadline, last_move=last_move)
