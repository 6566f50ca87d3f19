"""
Legality Filter

Turns pseudo-legal moves into legal moves: a move is kept only if the
mover's king is not attacked once the move has been played on a
disposable copy of the board. Castling additionally requires that the
king's current square and every square it crosses are safe on the board
as it stands before the move.
"""

from typing import List, Optional

from arcade_chess.board.movegen import is_square_attacked, pseudo_legal_moves
from arcade_chess.board.pieces import Color, Move, MoveFlag, Piece, PieceType, Square
from arcade_chess.board.representation import Board, CastlingRights

# Columns the king stands on or passes through while castling
CASTLING_PATH_COLS = {
    MoveFlag.CASTLE_KINGSIDE: (4, 5, 6),
    MoveFlag.CASTLE_QUEENSIDE: (4, 3, 2),
}

# Rook (from_col, to_col) for each castling side
CASTLING_ROOK_COLS = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}


def apply_move(board: Board, move: Move, promotion: Optional[PieceType] = None) -> Optional[Piece]:
    """
    Play a move on a board in place.

    Handles the side effects of special moves: removes the pawn taken en
    passant, relocates the rook when castling, and replaces a promoting
    pawn (Queen unless `promotion` says otherwise).

    Args:
        board: Board to mutate
        move: Move to play (assumed pseudo-legal on this board)
        promotion: Piece type for a promoting pawn

    Returns:
        The captured piece, including an en-passant victim, or None
    """
    piece = board.remove_piece(move.from_square)
    color = piece.color
    captured = board.piece_at(move.to_square)
    board.set_piece(move.to_square, piece)

    if move.flag is MoveFlag.EN_PASSANT:
        # The victim stands beside the mover, one row behind the landing square
        to_row, to_col = move.to_square
        captured = board.remove_piece((to_row - color.forward, to_col))

    elif move.is_castle:
        row = color.home_row
        rook_from, rook_to = CASTLING_ROOK_COLS[move.flag]
        board.set_piece((row, rook_to), board.remove_piece((row, rook_from)))

    elif move.is_promotion:
        board.set_piece(move.to_square, Piece(color, promotion or PieceType.QUEEN))

    return captured


def is_in_check(board: Board, color: Color) -> bool:
    """True if `color`'s king is attacked. A board without that king is never in check."""
    king = board.find_king(color)
    if king is None:
        return False
    return is_square_attacked(board, king, color.opponent)


def legal_moves_from(
    board: Board,
    square: Square,
    turn: Color,
    en_passant: Optional[Square] = None,
    castling: Optional[CastlingRights] = None,
) -> List[Move]:
    """
    Legal moves for the piece on a square.

    Args:
        board: Current position
        square: (row, col) of the piece
        turn: Side to move; pieces of the other side have no legal moves
        en_passant: En-passant target square, if any
        castling: Current castling rights

    Returns:
        List of legal moves (empty for an empty, enemy or off-board square)
    """
    piece = board.piece_at(square)
    if piece is None or piece.color is not turn:
        return []

    opponent = turn.opponent
    legal = []

    for move in pseudo_legal_moves(board, square, en_passant, castling):
        if move.is_castle:
            row = turn.home_row
            if any(
                is_square_attacked(board, (row, col), opponent)
                for col in CASTLING_PATH_COLS[move.flag]
            ):
                continue

        scratch = board.copy()
        apply_move(scratch, move)
        king = scratch.find_king(turn)
        if king is None:
            continue
        if not is_square_attacked(scratch, king, opponent):
            legal.append(move)

    return legal


def all_legal_moves(
    board: Board,
    turn: Color,
    en_passant: Optional[Square] = None,
    castling: Optional[CastlingRights] = None,
) -> List[Move]:
    """Legal moves for every piece of the side to move, in board order."""
    moves = []
    for square, _ in board.pieces(turn):
        moves.extend(legal_moves_from(board, square, turn, en_passant, castling))
    return moves
