"""Entry point for Omok games. Load config, wire players, start Omokgame."""

import logging
from pathlib import Path

import yaml

from .AiPlayer import SearchPlayer
from .Board import BLACK, WHITE
from .Omokgame import Omokgame
from .Player import HumanPlayer, GuiHumanPlayer
from .RemotePlayer import RemotePlayer, command_client
from .ai import heuristic
from .utils import logger as log_utils
from .utils.cli import parse_args
from .utils.logger import log_event


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 15,
    "win_length": 5,
    "move_timeout_seconds": 2.0,
    "search_depth_table": [{"max_candidates": 20, "depth": 4}, {"depth": 2}],
    "mode": "human-vs-ai",
    "move_source": "local",
    "remote_command": None,
    "remote_timeout_seconds": 10.0,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Omok_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        log_event(f"Settings file {path} not found; using defaults")
    if settings["board_size"] < settings["win_length"]:
        raise ValueError("board_size must be at least win_length")
    return settings


def parse_depth_table(rows):
    """[{max_candidates, depth}, ..., {depth}] -> ((max, depth), ..., (None, depth))."""
    table = []
    for row in rows or []:
        depth = int(row["depth"])
        if depth < 1:
            raise ValueError("search depth must be >= 1")
        limit = row.get("max_candidates")
        table.append((int(limit) if limit is not None else None, depth))
    if not table or table[-1][0] is not None:
        table.append((None, table[-1][1] if table else 2))
    return tuple(table)


def build_machine(color, settings, args, weights, depth_table):
    timeout = args.timeout or settings["move_timeout_seconds"]
    local = SearchPlayer(
        color=color,
        move_timeout=timeout,
        depth=args.depth,
        depth_table=depth_table,
        weights=weights,
        seed=args.seed,
    )
    source = args.move_source or settings["move_source"]
    if source == "local":
        return local, None

    command = args.remote_command or settings.get("remote_command")
    if not command:
        raise ValueError("move_source 'remote' needs remote_command")
    remote = RemotePlayer(
        color=color,
        client=command_client(command, timeout=settings["remote_timeout_seconds"]),
        move_timeout=settings["remote_timeout_seconds"],
    )
    return remote, local


def build_human(color, view):
    if view:
        return GuiHumanPlayer(color=color, view=view)
    return HumanPlayer(color=color)


def main(argv=None):
    args = parse_args(argv)
    log_utils.configure(logging.DEBUG if args.verbose else logging.INFO)
    settings = load_settings(args.settings)
    weights = heuristic.load_weights(resolve_project_path(args.weights))
    depth_table = parse_depth_table(settings["search_depth_table"])
    mode = args.mode or settings["mode"]

    view = None
    if args.gui:
        from .gui.pygame_view import PygameView

        view = PygameView(board_size=settings["board_size"])

    fallbacks = []
    players = {}
    for color, kind in zip((BLACK, WHITE), mode.split("-vs-")):
        if kind == "ai":
            players[color], fallback = build_machine(color, settings, args, weights, depth_table)
            fallbacks.append(fallback)
        else:
            players[color] = build_human(color, view)

    game = Omokgame(
        board_size=settings["board_size"],
        win_length=settings["win_length"],
        move_timeout=args.timeout or settings["move_timeout_seconds"],
        black_player=players[BLACK],
        white_player=players[WHITE],
        logger=log_event,
        renderer=view.render if view else _print_snapshot(players),
        closer=_closer(players, view),
        fallback_player=next((f for f in fallbacks if f is not None), None),
        result_pause=3.0 if view else 0.0,
        seed=args.seed,
    )
    result = game.play()
    outcome = {BLACK: "Black wins", WHITE: "White wins", 0: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return 0


def _closer(players, view):
    """Shut down move sources, then the window, once the game ends."""

    def close():
        for player in players.values():
            player.close()
        if view:
            view.close()

    return close


def _print_snapshot(players):
    """Text renderer; only draws when a human is at the keyboard."""
    if all(p.is_machine for p in players.values()):
        return None

    def render(snapshot):
        rows = ["   " + " ".join(str(c % 10) for c in range(snapshot.size))]
        win = set(snapshot.winning_line)
        for row in range(snapshot.size):
            cells = []
            for col in range(snapshot.size):
                v = snapshot.cell(row, col)
                sym = "X" if v == BLACK else "O" if v == WHITE else "."
                if (row, col) in win:
                    sym = "*"
                cells.append(sym)
            rows.append(f"{row:2d} " + " ".join(cells))
        print("\n".join(rows))
        if snapshot.result_text:
            print(snapshot.result_text)

    return render


if __name__ == "__main__":
    raise SystemExit(main())
