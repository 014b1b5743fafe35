import pytest

from ttt_console.board import Board
from ttt_console.config import GameConfig
from ttt_console.game import Game, Session
from ttt_console.player import Player, render_scoreboard

X_WINS_TOP_ROW = ["0,0", "0,1", "1,0", "1,1", "2,0"]
DRAW = ["0,0", "1,1", "2,0", "1,0", "1,2", "2,1", "0,1", "0,2", "2,2"]


def _reader(lines):
    it = iter(lines)
    return lambda prompt: next(it)


def _players():
    return [Player("Ann", "X"), Player("Bob", "O")]


def test_game_x_wins_and_records():
    ann, bob = _players()
    out = []
    result = Game([ann, bob], read=_reader(X_WINS_TOP_ROW), write=out.append).play()
    assert result.winner is ann
    assert result.turns == 5
    assert result.is_draw is False
    assert result.board.moves[0] == ["X", "X", "X"]
    assert out[-1] == "Ann (X) wins!"
    assert ann.record == (1, 0, 0)
    assert bob.record == (0, 1, 0)


def test_game_draw_records_both():
    ann, bob = _players()
    out = []
    result = Game([ann, bob], read=_reader(DRAW), write=out.append).play()
    assert result.winner is None
    assert result.is_draw
    assert result.turns == 9
    assert str(result.board) == "XOXXOOOXX"
    assert out[-1] == "It's a draw."
    assert ann.record == bob.record == (0, 0, 1)


def test_game_skips_bad_input_without_losing_turn():
    ann, bob = _players()
    script = ["0,0", "0,0", "oops", "0,1", "1,0", "1,1", "2,0"]
    result = Game([ann, bob], read=_reader(script), write=lambda s: None).play()
    assert result.winner is ann
    assert result.turns == 5


def test_game_alternates_players():
    ann, bob = _players()
    g = Game([ann, bob], read=_reader(["1,1", "0,0"]), write=lambda s: None)
    assert g.current_player is ann
    g.play_turn()
    assert g.current_player is bob
    g.play_turn()
    assert g.board.moves[1][1] == "X" and g.board.moves[0][0] == "O"


def test_game_on_finished_board_does_not_prompt():
    ann, bob = _players()

    def read(prompt):
        raise AssertionError("should not prompt")

    board = Board.from_string("OOOXX.X..")
    result = Game([ann, bob], board=board, read=read, write=lambda s: None).play()
    assert result.winner is bob
    assert result.turns == 6


def test_game_resumes_with_second_player_on_partial_board():
    ann, bob = _players()
    board = Board.from_string("X........")
    g = Game([ann, bob], board=board, read=_reader(["1,1"]), write=lambda s: None)
    assert g.turn == 1
    assert g.current_player is bob
    g.play_turn()
    assert board.moves[1][1] == "O"


@pytest.mark.parametrize("text", ["XZ.......", "OOOXX.Z.."])
def test_game_rejects_board_with_unknown_marks(text):
    with pytest.raises(ValueError, match="no player uses"):
        Game(_players(), board=Board.from_string(text))


@pytest.mark.parametrize("text", ["XX.......", "O........", "XXXOO.X.."])
def test_game_rejects_unreachable_mark_counts(text):
    with pytest.raises(ValueError, match="unreachable"):
        Game(_players(), board=Board.from_string(text))


@pytest.mark.parametrize("players", [[Player("A", "X")], [Player("A", "X"), Player("B", "X")]])
def test_game_rejects_bad_players(players):
    with pytest.raises(ValueError):
        Game(players)


def test_player_for_mark_unknown():
    with pytest.raises(KeyError):
        Game(_players()).player_for_mark("Z")


def test_session_plays_rounds_and_prints_scoreboard():
    config = GameConfig(names=("Ann", "Bob"), rounds=2)
    out = []
    session = Session(config, read=_reader(X_WINS_TOP_ROW * 2), write=out.append)
    results = session.run()
    assert len(results) == 2
    assert all(r.winner is session.players[0] for r in results)
    assert "Round 1 of 2" in out and "Round 2 of 2" in out
    assert out[-1] == render_scoreboard(session.players)
    assert session.players[0].record == (2, 0, 0)
    assert session.players[1].record == (0, 2, 0)


def test_render_scoreboard_columns():
    ann, bob = _players()
    ann.record_win()
    bob.record_loss()
    assert render_scoreboard([ann, bob]).splitlines() == [
        "player   W  L  D",
        "Ann (X)  1  0  0",
        "Bob (O)  0  1  0",
    ]
