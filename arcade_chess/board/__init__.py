"""
Board Module

Board model, move generation and legality checking.

Key Components:
    - pieces: Color, PieceType, Piece, Move, MoveFlag and square helpers
    - representation: Board grid, CastlingRights, board_to_tensor (12-8-8)
    - movegen: pseudo-legal move generation and attack detection
    - legality: legal-move filtering, check detection, move application

Data Flow:
    Board + square → pseudo_legal_moves() → legal_moves_from() → [Move]
"""

from arcade_chess.board.pieces import (
    Color,
    Move,
    MoveFlag,
    Piece,
    PieceType,
    Square,
    on_board,
    parse_square,
    square_name,
)
from arcade_chess.board.representation import Board, CastlingRights, board_to_tensor
from arcade_chess.board.movegen import is_square_attacked, pseudo_legal_moves
from arcade_chess.board.legality import all_legal_moves, apply_move, is_in_check, legal_moves_from

__all__ = [
    'Color',
    'Move',
    'MoveFlag',
    'Piece',
    'PieceType',
    'Square',
    'on_board',
    'parse_square',
    'square_name',
    'Board',
    'CastlingRights',
    'board_to_tensor',
    'is_square_attacked',
    'pseudo_legal_moves',
    'all_legal_moves',
    'apply_move',
    'is_in_check',
    'legal_moves_from',
]
