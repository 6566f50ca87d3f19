"""
Unit Tests for UCI Interface

Tests for UCI protocol implementation, focusing on:
    - Command parsing: uci, isready, setoption, position, go, stop, d, quit
    - Position setup: move application, rejected FEN and illegal moves
    - Search invocation: depth handling and difficulty fallback
    - Output format: Proper UCI responses
"""

import io

import pytest

from arcade_chess.board import Color, Piece, PieceType
from arcade_chess.config import Difficulty
from arcade_chess.game import parse_uci_move
from arcade_chess.uci import UCIEngine


@pytest.fixture
def engine(tmp_path):
    """Create a UCI engine logging into a temporary directory."""
    return UCIEngine(log_dir=tmp_path)


def bestmove(output: str) -> str:
    lines = [line for line in output.splitlines() if line.startswith("bestmove")]
    assert lines, f"No bestmove in output: {output!r}"
    return lines[-1].split()[1]


class TestUCICommands:
    """Tests for UCI command handling."""

    def test_handle_uci(self, engine, capsys):
        """Test 'uci' command response."""
        engine.handle_uci()

        output = capsys.readouterr().out

        assert "id name ArcadeChess" in output, "Should include engine name"
        assert "id author" in output, "Should include author"
        assert (
            "option name Difficulty type combo default normal var easy var normal var hard" in output
        )
        assert output.strip().endswith("uciok"), "Should end with uciok"

    def test_handle_isready(self, engine, capsys):
        """Test 'isready' command response."""
        engine.handle_isready()

        assert "readyok" in capsys.readouterr().out

    def test_handle_ucinewgame(self, engine):
        """Test 'ucinewgame' command."""
        engine.handle_position(["position", "startpos", "moves", "e2e4", "e7e5"])

        engine.handle_ucinewgame()

        assert engine.game.history == (), "Game should be reset"
        assert engine.game.turn is Color.WHITE

    def test_setoption_difficulty(self, engine):
        engine.handle_setoption("setoption name Difficulty value hard".split())
        assert engine.config.difficulty is Difficulty.HARD

        engine.handle_setoption("setoption name Difficulty value Easy".split())
        assert engine.config.difficulty is Difficulty.EASY

    def test_setoption_unknown_option(self, engine):
        engine.handle_setoption("setoption name Hash value 64".split())
        assert engine.config.difficulty is Difficulty.NORMAL

    def test_setoption_bad_value(self, engine):
        with pytest.raises(ValueError):
            engine.handle_setoption("setoption name Difficulty value impossible".split())

    def test_setoption_malformed(self, engine):
        engine.handle_setoption(["setoption", "Difficulty"])
        assert engine.config.difficulty is Difficulty.NORMAL

    def test_display(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "e2e4"])
        engine.handle_display()

        output = capsys.readouterr().out

        assert "4 . . . . P . . ." in output
        assert "Turn: black  Status: playing" in output
        assert "Moves: e4" in output


class TestUCIPositionSetup:
    """Tests for position setup via UCI."""

    def test_startpos(self, engine):
        engine.handle_position(["position", "startpos", "moves", "e2e4"])
        engine.handle_position(["position", "startpos"])

        assert engine.game.history == (), "Should reset to starting position"

    def test_move_sequence(self, engine):
        moves = ["e2e4", "e7e5", "g1f3", "b8c6"]

        engine.handle_position(["position", "startpos", "moves"] + moves)

        assert [entry.notation for entry in engine.game.history] == ["e4", "e5", "Nf3", "Nc6"]
        assert engine.game.piece_at((5, 5)) == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_promotion_letter(self, engine):
        moves = ["h2h4", "g7g5", "h4g5", "a7a6", "g5g6", "a6a5", "g6h7", "a5a4", "h7g8n"]

        engine.handle_position(["position", "startpos", "moves"] + moves)

        assert engine.game.piece_at((0, 6)) == Piece(Color.WHITE, PieceType.KNIGHT)
        assert engine.game.history[-1].notation == "hxg8=N"

    def test_illegal_move_stops_sequence(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "e2e4", "e7e4", "g1f3"])

        assert len(engine.game.history) == 1, "Moves after the illegal one are ignored"
        assert "Illegal move" in capsys.readouterr().err

    def test_fen_rejected(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "e2e4"])

        engine.handle_position(
            ["position", "fen", *"8/8/8/8/8/8/8/K6k w - - 0 1".split()]
        )

        assert len(engine.game.history) == 1, "Rejected FEN leaves the game unchanged"
        assert "FEN" in capsys.readouterr().err


class TestUCISearch:
    """Tests for go/stop."""

    def test_go_depth(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "e2e4"])

        engine.handle_go(["go", "depth", "1"])
        engine.handle_stop()

        output = capsys.readouterr().out
        assert "info depth 1 score cp" in output
        parse_uci_move(engine.game, bestmove(output))
        assert len(engine.game.history) == 1, "Search runs on a copy"
        assert not engine.searching

    def test_go_uses_difficulty(self, engine, capsys):
        engine.handle_setoption("setoption name Difficulty value easy".split())
        engine.handle_position(["position", "startpos"])

        engine.handle_go(["go", "wtime", "1000", "btime", "1000"])
        engine.handle_stop()

        assert "info depth 1 " in capsys.readouterr().out

    def test_go_finds_mate(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "f2f3", "e7e5", "g2g4"])

        engine.handle_go(["go", "depth", "1"])
        engine.handle_stop()

        output = capsys.readouterr().out
        assert bestmove(output) == "d8h4"
        assert "score cp 100000" in output, "Score is reported from the side to move"

    def test_go_when_game_over(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "f2f3", "e7e5", "g2g4", "d8h4"])

        engine.handle_go(["go", "depth", "1"])
        engine.handle_stop()

        assert bestmove(capsys.readouterr().out) == "0000"

    def test_stop_without_search(self, engine):
        engine.handle_stop()
        assert engine.search_thread is None


class TestUCIIntegration:
    """Integration tests for full UCI workflow."""

    def test_full_uci_session(self, engine, capsys, monkeypatch):
        """Test a complete UCI session."""
        commands = "\n".join([
            "uci",
            "setoption name Difficulty value easy",
            "isready",
            "ucinewgame",
            "position startpos moves e2e4 e7e5",
            "go",
            "bogus command",
            "quit",
        ]) + "\n"
        monkeypatch.setattr("sys.stdin", io.StringIO(commands))

        engine.run()

        output = capsys.readouterr().out
        assert "uciok" in output
        assert "readyok" in output
        assert "info depth 1 " in output
        parse_uci_move(engine.game, bestmove(output))

    def test_eof_ends_loop(self, engine, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("isready\n"))

        engine.run()

        assert "readyok" in capsys.readouterr().out

    def test_errors_do_not_kill_loop(self, engine, capsys, monkeypatch):
        commands = "setoption name Difficulty value impossible\nisready\nquit\n"
        monkeypatch.setattr("sys.stdin", io.StringIO(commands))

        engine.run()

        captured = capsys.readouterr()
        assert "# Error:" in captured.err
        assert "readyok" in captured.out

    def test_log_file_written(self, tmp_path):
        UCIEngine(log_dir=tmp_path)

        log_file = tmp_path / "engine.log"
        assert log_file.exists()
        assert "Engine Started" in log_file.read_text()
