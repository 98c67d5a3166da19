"""Remote move source: asks a hosted model for a move through an injected client."""

import json
import shlex
import subprocess
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout

from .Board import BLACK, color_name
from .Player import Player, MoveSourceError
from .engine import referee
from .utils import timer
from .utils.logger import get_logger

logger = get_logger(__name__)

PROMPT_TEMPLATE = """You are playing Gomoku as {me} ({me_sym}). The opponent is {opp} ({opp_sym}).
The board is {size}x{size}; five stones in a row (horizontal, vertical, or diagonal) wins.

Board ({black_sym} = Black, {white_sym} = White, . = empty):
{grid}

{last}

Priorities: win now if you can, otherwise block the opponent's fours and open threes, otherwise build your own lines.
Reply with a JSON object {{"row": <int>, "col": <int>}} naming an empty cell, rows and columns 0 to {max_index}.
"""


def build_prompt(board, color, last_move=None):
    me_sym, opp_sym = ("X", "O") if color == BLACK else ("O", "X")
    if last_move is not None:
        last = f"Opponent's last move was row {last_move[0]}, col {last_move[1]}."
    else:
        last = "No stone has been played yet."
    return PROMPT_TEMPLATE.format(
        me=color_name(color),
        opp=color_name(-color),
        me_sym=me_sym,
        opp_sym=opp_sym,
        black_sym="X",
        white_sym="O",
        size=board.size,
        grid=board.to_text(),
        last=last,
        max_index=board.size - 1,
    )


def parse_reply(text, board):
    """Extract a legal (row, col) from a JSON reply; raise MoveSourceError otherwise."""
    if not text:
        raise MoveSourceError("empty reply")
    start, end = text.find("{"), text.rfind("}")
    if start < 0 or end < start:
        raise MoveSourceError(f"no JSON object in reply: {text!r}")
    try:
        data = json.loads(text[start:end + 1])
        move = (data["row"], data["col"])
    except (ValueError, KeyError, TypeError) as exc:
        raise MoveSourceError(f"unparsable reply: {text!r}") from exc
    if not referee.is_legal(move, board):
        raise MoveSourceError(f"reply names an illegal cell: {move}")
    return move


def command_client(command, timeout=None):
    """
    Client that pipes the prompt to an external command's stdin and returns its
    stdout, e.g. a model CLI such as `llm -m gemini-2.5-flash`.
    """
    argv = shlex.split(command) if isinstance(command, str) else list(command)

    def _call(prompt):
        completed = subprocess.run(argv, input=prompt, capture_output=True, text=True, check=True, timeout=timeout)
        return completed.stdout

    return _call


class RemotePlayer(Player):
    """
    Wraps `client(prompt) -> str`. Any client failure, timeout, or bad reply
    is logged and turned into None so the game can substitute its own move.
    """

    is_machine = True

    def __init__(self, color, client, move_timeout=10.0, executor=None):
        super().__init__(color)
        self.client = client
        self.move_timeout = move_timeout
        self._executor = executor or self._new_executor()

    def propose(self, board, last_move=None, deadline=None):
        try:
            return self._request(board.clone(), last_move, deadline)
        except MoveSourceError as exc:
            logger.warning("remote move source failed: %s", exc)
            return None

    def _request(self, board, last_move, deadline):
        wait = self.move_timeout
        if deadline is not None:
            wait = min(wait, max(timer.time_remaining(deadline), 0.0))

        prompt = build_prompt(board, self.color, last_move)
        future = self._executor.submit(self.client, prompt)
        try:
            text = future.result(timeout=wait)
        except FutureTimeout as exc:
            if not future.cancel():
                self._abandon_executor()
            raise MoveSourceError(f"no reply within {wait:.2f}s") from exc
        except Exception as exc:
            raise MoveSourceError(f"client error: {exc}") from exc
        return parse_reply(text, board)

    @staticmethod
    def _new_executor():
        return ThreadPoolExecutor(max_workers=1, thread_name_prefix="remote-move")

    def _abandon_executor(self):
        """Leave a hung call on its own worker; later requests get a fresh one."""
        logger.warning("remote client still running after timeout; starting a new worker")
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._executor = self._new_executor()

    def close(self):
        self._executor.shutdown(wait=False, cancel_futures=True)
