"""Remote move source: prompt, reply parsing, failure handling, game fallback."""

import threading

import pytest

from Omok_AI.AiPlayer import SearchPlayer
from Omok_AI.Board import Board, BLACK, WHITE
from Omok_AI.Omokgame import Omokgame
from Omok_AI.Player import HumanPlayer, MoveSourceError, parse_move_text
from Omok_AI.RemotePlayer import RemotePlayer, build_prompt, parse_reply


def board_with_center():
    b = Board(size=15)
    b.place(7, 7, BLACK)
    return b


def test_parse_reply_accepts_plain_json():
    assert parse_reply('{"row": 7, "col": 8}', board_with_center()) == (7, 8)


def test_parse_reply_accepts_fenced_json():
    text = 'Sure.\n```json\n{"row": 6, "col": 6}\n```\n'
    assert parse_reply(text, board_with_center()) == (6, 6)


@pytest.mark.parametrize(
    "text",
    ["", "I pass", '{"row": 7}', '{"row": "a", "col": 1}', '{"row": 7, "col": 7}', '{"row": 15, "col": 0}'],
)
def test_parse_reply_rejects_bad_replies(text):
    with pytest.raises(MoveSourceError):
        parse_reply(text, board_with_center())


def test_build_prompt_describes_position():
    b = board_with_center()
    prompt = build_prompt(b, WHITE, last_move=(7, 7))
    assert "White (O)" in prompt
    assert "row 7, col 7" in prompt
    assert b.to_text() in prompt
    assert '"row"' in prompt

    opening = build_prompt(Board(size=15), BLACK)
    assert "No stone has been played yet." in opening


def test_remote_player_returns_client_move():
    prompts = []

    def client(prompt):
        prompts.append(prompt)
        return '{"row": 7, "col": 8}'

    player = RemotePlayer(WHITE, client, move_timeout=5)
    try:
        assert player.propose(board_with_center(), last_move=(7, 7)) == (7, 8)
    finally:
        player.close()
    assert len(prompts) == 1


def test_remote_player_client_error_yields_none():
    def client(prompt):
        raise ConnectionError("offline")

    player = RemotePlayer(WHITE, client, move_timeout=5)
    try:
        assert player.propose(board_with_center()) is None
    finally:
        player.close()


def test_remote_player_timeout_yields_none():
    release = threading.Event()

    def client(prompt):
        release.wait(5)
        return '{"row": 7, "col": 8}'

    player = RemotePlayer(WHITE, client, move_timeout=0.05)
    try:
        assert player.propose(board_with_center()) is None
    finally:
        release.set()
        player.close()


def test_hung_call_does_not_block_next_request():
    release = threading.Event()
    calls = []

    def client(prompt):
        calls.append(prompt)
        if len(calls) == 1:
            release.wait(5)
        return '{"row": 7, "col": 8}'

    player = RemotePlayer(WHITE, client, move_timeout=0.3)
    try:
        assert player.propose(board_with_center()) is None
        assert player.propose(board_with_center()) == (7, 8)
    finally:
        release.set()
        player.close()
    assert len(calls) == 2


def test_game_substitutes_local_search_for_failed_remote():
    remote = RemotePlayer(WHITE, lambda prompt: "no idea", move_timeout=1)
    game = Omokgame(
        board_size=15,
        logger=lambda *_: None,
        fallback_player=SearchPlayer(WHITE, move_timeout=0.5, depth=1),
    )
    try:
        game.apply_move((7, 7))
        move = game.machine_move(remote)
    finally:
        remote.close()
    assert game.board.is_empty(*move)
    assert max(abs(move[0] - 7), abs(move[1] - 7)) <= 2


def test_parse_move_text_formats():
    assert parse_move_text("7 8") == (7, 8)
    assert parse_move_text(" 3,4 ") == (3, 4)
    with pytest.raises(ValueError):
        parse_move_text("7")
    with pytest.raises(ValueError):
        parse_move_text("a b")


def test_human_player_flags_bad_input():
    messages = []
    replies = iter(["seven eight", "7 8"])
    player = HumanPlayer(BLACK, input_fn=lambda _: next(replies), output_fn=messages.append)
    b = Board(size=15)
    assert player.propose(b) is None
    assert messages
    assert player.propose(b) == (7, 8)
