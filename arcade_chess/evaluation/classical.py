"""
Classical Piece-Square Table Evaluation

This module implements a traditional chess evaluation function using:
    1. Material counting (piece values)
    2. Piece-Square Tables (positional bonuses/penalties)

Evaluation Components:
    - Material: P=100, N=320, B=330, R=500, Q=900, K=20000
    - Position: PST bonuses for each piece type

The king's large value never decides a game (mate is detected by the
search); it keeps the search from trading the king away for material.

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

import numpy as np

from arcade_chess.board.pieces import Color, Piece, PieceType
from arcade_chess.board.representation import PIECE_TO_CHANNEL, Board, board_to_tensor
from arcade_chess.evaluation.base import Evaluator

#fmt: off
# ============================================================================
# Material Values (centipawns)
# ============================================================================

PIECE_VALUES = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20000,
}


# ============================================================================
# Piece-Square Tables (PSTs)
# ============================================================================
# Values are from White's perspective (row 0 = rank 8, row 7 = rank 1).
# Black pieces read the table flipped vertically.
#
# Convention: Higher values = better squares
# Units: Centipawns (added to material value)
# ============================================================================

# Pawn PST: Encourage central pawns, bonuses for advanced pawns
PAWN_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 8 (promotion)
    [ 50,  50,  50,  50,  50,  50,  50,  50],  # Rank 7
    [ 10,  10,  20,  30,  30,  20,  10,  10],  # Rank 6
    [  5,   5,  10,  25,  25,  10,   5,   5],  # Rank 5
    [  0,   0,   0,  20,  20,   0,   0,   0],  # Rank 4
    [  5,  -5, -10,   0,   0, -10,  -5,   5],  # Rank 3
    [  5,  10,  10, -20, -20,  10,  10,   5],  # Rank 2
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 1
], dtype=np.int64)

# Knight PST: "Knights on the rim are dim"
KNIGHT_TABLE = np.array([
    [-50, -40, -30, -30, -30, -30, -40, -50],
    [-40, -20,   0,   0,   0,   0, -20, -40],
    [-30,   0,  10,  15,  15,  10,   0, -30],
    [-30,   5,  15,  20,  20,  15,   5, -30],
    [-30,   0,  15,  20,  20,  15,   0, -30],
    [-30,   5,  10,  15,  15,  10,   5, -30],
    [-40, -20,   0,   5,   5,   0, -20, -40],
    [-50, -40, -30, -30, -30, -30, -40, -50],
], dtype=np.int64)

# Bishop PST: Prefer central diagonals, avoid corners
BISHOP_TABLE = np.array([
    [-20, -10, -10, -10, -10, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,  10,  10,   5,   0, -10],
    [-10,   5,   5,  10,  10,   5,   5, -10],
    [-10,   0,  10,  10,  10,  10,   0, -10],
    [-10,  10,  10,  10,  10,  10,  10, -10],
    [-10,   5,   0,   0,   0,   0,   5, -10],
    [-20, -10, -10, -10, -10, -10, -10, -20],
], dtype=np.int64)

# Rook PST: Prefer 7th rank and central files
ROOK_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  5,  10,  10,  10,  10,  10,  10,   5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [  0,   0,   0,   5,   5,   0,   0,   0],
], dtype=np.int64)

# Queen PST: Avoid early development, prefer central control
QUEEN_TABLE = np.array([
    [-20, -10, -10,  -5,  -5, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,   5,   5,   5,   0, -10],
    [ -5,   0,   5,   5,   5,   5,   0,  -5],
    [  0,   0,   5,   5,   5,   5,   0,  -5],
    [-10,   5,   5,   5,   5,   5,   0, -10],
    [-10,   0,   5,   0,   0,   0,   0, -10],
    [-20, -10, -10,  -5,  -5, -10, -10, -20],
], dtype=np.int64)

# King PST: Stay safe behind pawns, prefer castled position
KING_TABLE = np.array([
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-20, -30, -30, -40, -40, -30, -30, -20],
    [-10, -20, -20, -20, -20, -20, -20, -10],
    [ 20,  20,   0,   0,   0,   0,  20,  20],
    [ 20,  30,  10,   0,   0,  10,  30,  20],
], dtype=np.int64)
#fmt: on

PIECE_TABLES = {
    PieceType.PAWN: PAWN_TABLE,
    PieceType.KNIGHT: KNIGHT_TABLE,
    PieceType.BISHOP: BISHOP_TABLE,
    PieceType.ROOK: ROOK_TABLE,
    PieceType.QUEEN: QUEEN_TABLE,
    PieceType.KING: KING_TABLE,
}


def build_weights() -> np.ndarray:
    """
    Signed (12, 8, 8) weight tensor matching board_to_tensor's channels.

    Each plane holds material value + PST bonus for one colored piece:
    positive for White, negative and vertically mirrored for Black.
    """
    weights = np.zeros((12, 8, 8), dtype=np.int64)
    for piece, channel in PIECE_TO_CHANNEL.items():
        plane = PIECE_VALUES[piece.kind] + PIECE_TABLES[piece.kind]
        if piece.color is Color.WHITE:
            weights[channel] = plane
        else:
            weights[channel] = -np.flipud(plane)
    return weights


class ClassicalEvaluator(Evaluator):
    """
    Classical evaluation using material and piece-square tables.

    The whole evaluation is one contraction of the board's piece planes
    with a precomputed weight tensor.

    Attributes:
        weights: (12, 8, 8) signed weights, see build_weights()
    """

    def __init__(self):
        """Initialize the classical evaluator with piece-square tables."""
        self.weights = build_weights()

    def square_value(self, piece: Piece, row: int, col: int) -> int:
        """Signed contribution of one piece standing on (row, col)."""
        return int(self.weights[PIECE_TO_CHANNEL[piece], row, col])

    def evaluate(self, board: Board) -> int:
        """
        Evaluate position using material + PST.

        Args:
            board: Board to evaluate

        Returns:
            int: Evaluation in centipawns (White's perspective)
        """
        tensor = board_to_tensor(board)
        return int(np.rint(np.sum(tensor * self.weights)))
