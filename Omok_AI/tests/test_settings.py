"""Settings loading, depth-table parsing, and the command-line entry point."""

import pytest

from Omok_AI import main as entry
from Omok_AI.Omokgame import Omokgame
from Omok_AI.utils.cli import parse_args


def test_load_settings_missing_file_uses_defaults(tmp_path):
    settings = entry.load_settings(tmp_path / "absent.yaml")
    assert settings == entry.DEFAULT_SETTINGS


def test_load_settings_overrides(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("board_size: 9\nmove_timeout_seconds: 0.5\n", encoding="utf-8")
    settings = entry.load_settings(path)
    assert settings["board_size"] == 9
    assert settings["move_timeout_seconds"] == 0.5
    assert settings["win_length"] == 5


def test_load_settings_rejects_board_smaller_than_win_length(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("board_size: 4\n", encoding="utf-8")
    with pytest.raises(ValueError):
        entry.load_settings(path)


def test_packaged_settings_load():
    settings = entry.load_settings("config/settings.yaml")
    assert settings["board_size"] == 15
    assert entry.parse_depth_table(settings["search_depth_table"]) == ((20, 4), (None, 2))


def test_parse_depth_table_adds_catch_all():
    assert entry.parse_depth_table([{"max_candidates": 10, "depth": 3}]) == ((10, 3), (None, 3))
    assert entry.parse_depth_table([]) == ((None, 2),)
    with pytest.raises(ValueError):
        entry.parse_depth_table([{"depth": 0}])


def test_cli_flags():
    args = parse_args(["--mode", "ai-vs-ai", "--timeout", "0.5", "--depth", "3", "--seed", "4"])
    assert args.mode == "ai-vs-ai"
    assert args.timeout == 0.5
    assert args.depth == 3
    assert args.seed == 4
    assert not args.gui
    with pytest.raises(SystemExit):
        parse_args(["--mode", "cat-vs-dog"])


def test_remote_source_requires_command():
    args = parse_args(["--move-source", "remote"])
    settings = dict(entry.DEFAULT_SETTINGS)
    with pytest.raises(ValueError):
        entry.build_machine(-1, settings, args, None, ((None, 2),))


def test_main_runs_a_game(monkeypatch, capsys):
    monkeypatch.setattr(Omokgame, "play", lambda self: 0)
    assert entry.main(["--mode", "ai-vs-ai", "--timeout", "0.1"]) == 0
    assert "Draw" in capsys.readouterr().out


def test_remote_command_gets_timeout(monkeypatch):
    seen = {}

    def fake_client(command, timeout=None):
        seen["command"], seen["timeout"] = command, timeout
        return lambda prompt: ""

    monkeypatch.setattr(entry, "command_client", fake_client)
    args = parse_args(["--move-source", "remote", "--remote-command", "model-cli --json"])
    settings = dict(entry.DEFAULT_SETTINGS, remote_timeout_seconds=4.0)
    remote, fallback = entry.build_machine(1, settings, args, None, ((None, 2),))
    try:
        assert seen == {"command": "model-cli --json", "timeout": 4.0}
        assert remote.move_timeout == 4.0
        assert fallback.is_machine
    finally:
        remote.close()


def test_main_closes_players_after_game(monkeypatch):
    closed = []
    monkeypatch.setattr(entry.RemotePlayer, "close", lambda self: closed.append(self.color))

    def fake_play(self):
        self.closer()
        return 1

    monkeypatch.setattr(Omokgame, "play", fake_play)
    assert entry.main(["--mode", "ai-vs-ai", "--move-source", "remote", "--remote-command", "model-cli"]) == 0
    assert sorted(closed) == [-1, 1]
