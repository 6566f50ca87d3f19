"""
UCI Protocol Implementation

This module implements a subset of the Universal Chess Interface (UCI)
protocol on top of the game state machine, so the computer opponent can
be driven from a terminal or a chess GUI.

UCI Commands Supported:
    - uci: Identify engine
    - isready: Synchronization check
    - ucinewgame: Start new game
    - setoption name Difficulty value <easy|normal|hard>
    - position startpos [moves ...]: Set board position
    - go [depth N]: Start searching
    - stop: Wait for the running search
    - d: Print the board
    - quit: Shutdown engine

Positions are always built from the start position: FEN import is not
supported.

Threading:
    - Main thread: Listen for UCI commands
    - Search thread: Run minimax on a clone of the game
    - The search cannot be interrupted; bounded depth is the only latency control

References:
    - UCI Protocol: https://www.chessprogramming.org/UCI
"""

import logging
import sys
import threading
import time
from pathlib import Path
from typing import List, Optional

from arcade_chess.config import Difficulty, EngineConfig
from arcade_chess.evaluation.classical import ClassicalEvaluator
from arcade_chess.game.machine import ChessGame
from arcade_chess.game.uci_moves import move_to_uci, parse_uci_move
from arcade_chess.search.minimax import find_best_move

LOG_DIR = Path.home() / ".arcade_chess"


def setup_logger(debug=True, log_dir: Optional[Path] = None):
    """
    Setup file-based logger for UCI debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_dir: Directory for engine.log (default: ~/.arcade_chess)

    Returns:
        Configured logger instance
    """
    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "engine.log"

    logger = logging.getLogger("arcade_chess")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class UCIEngine:
    """
    UCI-compliant front-end for the arcade chess engine.

    Attributes:
        game: Current game
        evaluator: Position evaluation function
        config: Difficulty and search options
        searching: Flag indicating if search is in progress
        search_thread: Background thread for search

    Methods:
        run: Main UCI command loop
        handle_uci: Respond to 'uci' command
        handle_isready: Respond to 'isready' command
        handle_setoption: Change difficulty
        handle_position: Set board position
        handle_go: Start search
        handle_stop: Wait for search
        handle_display: Print the board
        handle_quit: Shutdown engine
    """

    def __init__(self, evaluator=None, config: Optional[EngineConfig] = None, debug=True,
                 log_dir: Optional[Path] = None):
        """
        Initialize UCI engine.

        Args:
            evaluator: Position evaluator (default: ClassicalEvaluator)
            config: Engine configuration (default: EngineConfig())
            debug: Enable debug logging (default: True)
            log_dir: Directory for the log file (default: ~/.arcade_chess)
        """
        self.game = ChessGame()
        self.evaluator = evaluator if evaluator else ClassicalEvaluator()
        self.config = config if config else EngineConfig()

        # Search state
        self.searching = False
        self.search_thread: Optional[threading.Thread] = None

        # Engine info
        self.name = "ArcadeChess"
        self.version = "0.1"
        self.author = "Arcade Chess developers"

        self.logger = setup_logger(debug=debug, log_dir=log_dir)
        self.logger.info("=== ArcadeChess Engine Started ===")

    def run(self):
        """
        Main UCI command loop.

        Listens for UCI commands on stdin and responds on stdout.
        Runs until 'quit' command or end of input.
        """
        while True:
            try:
                command = input().strip()
                if not command:
                    continue

                self.logger.debug(f">>> {command}")

                tokens = command.split()
                cmd = tokens[0].lower()

                if cmd == "uci":
                    self.handle_uci()

                elif cmd == "isready":
                    self.handle_isready()

                elif cmd == "ucinewgame":
                    self.handle_ucinewgame()

                elif cmd == "setoption":
                    self.handle_setoption(tokens)

                elif cmd == "position":
                    self.handle_position(tokens)

                elif cmd == "go":
                    self.handle_go(tokens)

                elif cmd == "stop":
                    self.handle_stop()

                elif cmd == "d":
                    self.handle_display()

                elif cmd == "quit":
                    self.handle_quit()
                    break

                else:
                    # Unknown commands are ignored, as UCI requires
                    self.logger.debug(f"Unknown command ignored: {command}")

            except EOFError:
                self.logger.info("EOF received, shutting down")
                self.handle_stop()
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def _send(self, line: str):
        print(line)
        sys.stdout.flush()
        self.logger.debug(f"<<< {line}")

    def handle_uci(self):
        """
        Handle 'uci' command - identify engine.

        Response:
            id name ArcadeChess 0.1
            id author ...
            option name Difficulty type combo ...
            uciok
        """
        self.logger.info("Handling: uci")

        self._send(f"id name {self.name} {self.version}")
        self._send(f"id author {self.author}")
        choices = " ".join(f"var {d.name.lower()}" for d in Difficulty)
        self._send(
            f"option name Difficulty type combo "
            f"default {self.config.difficulty.name.lower()} {choices}"
        )
        self._send("uciok")

    def handle_isready(self):
        """Handle 'isready' command - synchronization."""
        self.logger.info("Handling: isready")
        self._send("readyok")

    def handle_ucinewgame(self):
        """Handle 'ucinewgame' command - reset for new game."""
        self.logger.info("Handling: ucinewgame - resetting game")
        self.handle_stop()
        self.game.reset()

    def handle_setoption(self, tokens: List[str]):
        """
        Handle 'setoption' command.

        Format:
            setoption name Difficulty value hard
        """
        try:
            name = " ".join(tokens[tokens.index("name") + 1:tokens.index("value")])
            value = " ".join(tokens[tokens.index("value") + 1:])
        except ValueError:
            self.logger.warning(f"Malformed setoption: {' '.join(tokens)}")
            return

        if name.lower() != "difficulty":
            self.logger.debug(f"Unknown option ignored: {name}")
            return

        self.config.difficulty = Difficulty.parse(value)
        self.logger.info(f"Difficulty set to {self.config.difficulty.name.lower()}")

    def handle_position(self, tokens: List[str]):
        """
        Handle 'position' command - set board position.

        Formats:
            position startpos
            position startpos moves e2e4 e7e5

        Args:
            tokens: Command tokens (e.g., ['position', 'startpos', 'moves', 'e2e4'])
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            self.logger.warning("Position command with insufficient arguments")
            return

        if tokens[1] == "fen":
            self.logger.warning("FEN positions are not supported")
            print("# FEN positions are not supported", file=sys.stderr)
            return
        if tokens[1] != "startpos":
            self.logger.warning(f"Unknown position type: {tokens[1]}")
            return

        self.game.reset()

        if len(tokens) > 2 and tokens[2] == "moves":
            moves_applied = []
            for move_str in tokens[3:]:
                try:
                    move, promotion = parse_uci_move(self.game, move_str)
                    self.game.make_move(move, promotion)
                    moves_applied.append(move_str)
                except ValueError as e:
                    self.logger.error(f"Rejected move {move_str}: {e}")
                    print(f"# {e}", file=sys.stderr)
                    break

            if moves_applied:
                self.logger.debug(f"Applied moves: {' '.join(moves_applied)}")

        self.logger.info(
            f"Position updated: {len(self.game.history)} moves, "
            f"{self.game.turn.value} to move, {self.game.status.value}"
        )

    def handle_go(self, tokens: List[str]):
        """
        Handle 'go' command - start search.

        Formats:
            go                (depth from the difficulty setting)
            go depth 3

        Time controls are accepted and ignored.

        Args:
            tokens: Command tokens (e.g., ['go', 'depth', '3'])
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        depth = None
        i = 1
        while i < len(tokens):
            if tokens[i] == "depth" and i + 1 < len(tokens):
                depth = int(tokens[i + 1])
                i += 2
            elif tokens[i] in ("wtime", "btime", "movetime", "winc", "binc") and i + 1 < len(tokens):
                self.logger.debug(f"{tokens[i]} {tokens[i + 1]} ignored (no time management)")
                i += 2
            else:
                i += 1

        if depth is None:
            depth = self.config.search_depth
            self.logger.debug(f"No depth specified, using {self.config!r}")

        self.handle_stop()

        # The search explores a clone, never the game the GUI is driving
        game_copy = self.game.copy()

        self.searching = True
        self.search_thread = threading.Thread(
            target=self._search_thread,
            args=(depth, game_copy)
        )
        self.search_thread.start()

    def _search_thread(self, depth: int, game: ChessGame):
        """
        Background thread for search.

        Output:
            info depth X score cp Y nodes Z time T
            bestmove <move> (or "bestmove 0000" when there is no legal move)
        """
        start_time = time.time()

        try:
            self.logger.info(f"Search started: depth={depth}, {game!r}")

            best_move, score, nodes_searched = find_best_move(
                game,
                depth,
                self.evaluator,
                self.config,
            )

            elapsed_ms = int((time.time() - start_time) * 1000)
            self.logger.info(
                f"Search complete: best_move={best_move}, score={score}, "
                f"nodes={nodes_searched}, time={elapsed_ms}ms"
            )

            if best_move is None:
                self._send("bestmove 0000")
                return

            # UCI scores are from the side to move
            relative = score if game.turn.value == "white" else -score
            self._send(
                f"info depth {depth} score cp {int(relative)} "
                f"nodes {nodes_searched} time {elapsed_ms}"
            )
            self._send(f"bestmove {move_to_uci(best_move)}")

        except Exception as e:
            elapsed_time = time.time() - start_time
            self.logger.error(f"Search error after {elapsed_time:.3f}s: {e}", exc_info=True)
            print(f"# Search error: {e}", file=sys.stderr)

        finally:
            self.searching = False
            self.logger.debug("Search thread finished")

    def handle_stop(self):
        """
        Handle 'stop' command.

        The search has no cancellation point, so this waits for it to finish.
        """
        if self.search_thread and self.search_thread.is_alive():
            self.logger.debug("Waiting for search thread to finish")
            self.search_thread.join()

    def handle_display(self):
        """Handle 'd' command - print board, side to move and status."""
        print(self.game.board)
        print(f"Turn: {self.game.turn.value}  Status: {self.game.status.value}")
        notations = [entry.notation for entry in self.game.history]
        if notations:
            print(f"Moves: {' '.join(notations)}")
        sys.stdout.flush()

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("Handling: quit - shutting down engine")
        self.handle_stop()
        self.logger.info("=== ArcadeChess Engine Stopped ===")


def main():
    """Run the engine on stdin/stdout."""
    engine = UCIEngine()
    engine.run()
