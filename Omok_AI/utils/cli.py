"""CLI options for selecting players, time budget, and config paths."""


MODES = ["human-vs-ai", "ai-vs-human", "human-vs-human", "ai-vs-ai"]


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Omok (Gomoku, five in a row) against a minimax opponent")
    parser.add_argument("--timeout", type=float, help="Seconds per machine move (default from settings)")
    parser.add_argument("--depth", type=int, help="Fixed search depth (default: chosen from the depth table)")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Play mode (who plays black/white; default from settings)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default="config/weights.yaml", help="Path to evaluator weights YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument(
        "--move-source",
        choices=["local", "remote"],
        default=None,
        help="Machine move source (default from settings)",
    )
    parser.add_argument("--remote-command", default=None, help="Command that reads a prompt on stdin and prints a JSON move")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random fallbacks")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search statistics")
    return parser.parse_args(argv)
