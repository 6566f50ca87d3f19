"""
Minimal algebraic notation, without disambiguation or check suffixes.

    O-O / O-O-O               castling
    e4, exd5, e8=Q, bxa8=N    pawn moves
    Nf3, Bxc6, Kxe2           piece moves
"""

from typing import Optional

from arcade_chess.board.pieces import Move, MoveFlag, Piece, PieceType, square_name


def build_notation(
    move: Move,
    piece: Piece,
    captured: Optional[Piece],
    promotion: Optional[PieceType] = None,
) -> str:
    if move.flag is MoveFlag.CASTLE_KINGSIDE:
        return "O-O"
    if move.flag is MoveFlag.CASTLE_QUEENSIDE:
        return "O-O-O"

    is_pawn = piece.kind is PieceType.PAWN
    prefix = "" if is_pawn else piece.kind.letter
    if is_pawn and captured is not None:
        prefix = square_name(move.from_square)[0]

    capture = "x" if captured is not None else ""
    suffix = ""
    if move.is_promotion:
        suffix = "=" + (promotion or PieceType.QUEEN).letter

    return f"{prefix}{capture}{square_name(move.to_square)}{suffix}"
