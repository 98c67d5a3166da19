"""Run-shape weights and static evaluation over all board lines."""

from pathlib import Path
import yaml

from ..Board import EMPTY, WIN_LENGTH
from ..engine import rules


WIN = 10_000_000
OPEN_4 = 100_000
CLOSED_4 = 10_000
OPEN_3 = 10_000
CLOSED_3 = 1_000
OPEN_2 = 100
CLOSED_2 = 10

# Default weights; can be overridden by loading config/weights.yaml if desired.
DEFAULT_WEIGHTS = {
    "win": WIN,
    "open_4": OPEN_4,
    "closed_4": CLOSED_4,
    "open_3": OPEN_3,
    "closed_3": CLOSED_3,
    "open_2": OPEN_2,
    "closed_2": CLOSED_2,
}

# Each tuple must hold strictly decreasing weights.
_ORDER_CHAINS = (
    ("win", "open_4", "closed_4", "closed_3", "open_2", "closed_2"),
    ("win", "open_4", "open_3", "closed_3", "open_2", "closed_2"),
)


def validate_weights(weights):
    """Raise ValueError unless the weights keep the tactical ordering."""
    missing = [k for k in DEFAULT_WEIGHTS if k not in weights]
    if missing:
        raise ValueError(f"missing weights: {', '.join(missing)}")
    for chain in _ORDER_CHAINS:
        for higher, lower in zip(chain, chain[1:]):
            if not weights[higher] > weights[lower]:
                raise ValueError(f"weight {higher} must exceed {lower}")
    if weights["closed_2"] <= 0:
        raise ValueError("weight closed_2 must be positive")
    return weights


def load_weights(path="config/weights.yaml"):
    """Load run weights from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Omok_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    weights = dict(DEFAULT_WEIGHTS)
    for key, value in (data.get("weights") or {}).items():
        if key not in DEFAULT_WEIGHTS:
            raise ValueError(f"unknown weight: {key}")
        weights[key] = int(value)
    return validate_weights(weights)


def run_score(length, open_start, open_end, weights=None, win_length=WIN_LENGTH):
    """
    Score one maximal run by (length, open ends). The four/three/two rows are
    counted back from `win_length`, so on a six-to-win board a run of five
    scores as a four.
    """
    weights = weights or DEFAULT_WEIGHTS
    if length >= win_length:
        return weights["win"]
    open_ends = int(open_start) + int(open_end)
    short = win_length - length
    if open_ends == 0 or length < 2 or short > 3:
        return 0
    if short == 1:
        return weights["open_4"] if open_ends == 2 else weights["closed_4"]
    if short == 2:
        return weights["open_3"] if open_ends == 2 else weights["closed_3"]
    return weights["open_2"] if open_ends == 2 else weights["closed_2"]


def evaluate(board, color, weights=None):
    """Sum of run scores for `color` across every row, column, and diagonal."""
    weights = weights or DEFAULT_WEIGHTS
    win_length = board.win_length
    total = 0
    for line in rules.all_lines(board):
        if color not in line:
            continue
        for length, open_start, open_end in rules.scan_runs(line, color):
            total += run_score(length, open_start, open_end, weights, win_length)
    return total


def score_board(board, color, weights=None):
    """
    Net evaluation. Positive favors `color`, negative favors opponent.
    board: Board instance
    color: -1 (black) or 1 (white)
    """
    if color == EMPTY:
        raise ValueError("score_board needs a player color")
    return evaluate(board, color, weights) - evaluate(board, -color, weights)
