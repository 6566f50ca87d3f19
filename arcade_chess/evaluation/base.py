"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns centipawns from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Checkmate positions score ±MATE_SCORE, stalemate and draws 0

Convention:
    - Material values in centipawns (1/100th of a pawn, pawn = 100, queen = 900)
    - Return 0 for perfectly equal positions
"""

from abc import ABC, abstractmethod
from typing import Optional

from arcade_chess.board.pieces import Color
from arcade_chess.board.representation import Board
from arcade_chess.game.machine import ChessGame
from arcade_chess.game.state import GameStatus

# Evaluation constants
MATE_SCORE = 100000  # Score for a delivered checkmate


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.

    Methods:
        evaluate(board): Returns position evaluation in centipawns
        evaluate_terminal(game): Score for finished games, None otherwise
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Evaluate a position from White's perspective.

        Args:
            board: Board to evaluate

        Returns:
            int: Evaluation in centipawns
        """
        pass

    def evaluate_terminal(
        self,
        game: ChessGame,
        depth_remaining: int = 0,
        prefer_faster_mates: bool = False,
    ) -> Optional[int]:
        """
        Evaluate terminal positions (checkmate, stalemate, draw).

        Mate scores are flat by default: every mate found inside the search
        horizon is worth the same. With `prefer_faster_mates`, the score grows
        with the depth still left, so a mate found nearer the root wins.

        Args:
            game: Game to inspect
            depth_remaining: Plies left in the search when this node was reached
            prefer_faster_mates: Reward shorter mates

        Returns:
            int: Evaluation if terminal position
            None: If position is not terminal
        """
        if game.status is GameStatus.CHECKMATE:
            score = MATE_SCORE + (depth_remaining if prefer_faster_mates else 0)
            # The side to move has been mated
            return -score if game.turn is Color.WHITE else score

        if game.status in (GameStatus.STALEMATE, GameStatus.DRAW):
            return 0

        return None

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
