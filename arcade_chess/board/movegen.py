"""
Pseudo-Legal Move Generation

Generates every move a piece can make according to its movement pattern
and the occupancy of the board, without checking whether the mover's own
king is left in check (that is the job of `arcade_chess.board.legality`).

All piece-specific behavior is table driven:
    - KNIGHT_OFFSETS / KING_OFFSETS: fixed jumps
    - SLIDE_DIRECTIONS: rays for bishops, rooks and queens
    - Pawns and castling are handled explicitly

Off-board destinations are silently dropped, never emitted.
"""

from typing import List, Optional

from arcade_chess.board.pieces import Color, Move, MoveFlag, Piece, PieceType, Square, on_board
from arcade_chess.board.representation import Board, CastlingRights

KNIGHT_OFFSETS = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
KING_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONALS = ((-1, 0), (1, 0), (0, -1), (0, 1))

SLIDE_DIRECTIONS = {
    PieceType.BISHOP: DIAGONALS,
    PieceType.ROOK: ORTHOGONALS,
    PieceType.QUEEN: DIAGONALS + ORTHOGONALS,
}

STEP_OFFSETS = {
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.KING: KING_OFFSETS,
}

KING_HOME_COL = 4


def pseudo_legal_moves(
    board: Board,
    square: Square,
    en_passant: Optional[Square] = None,
    castling: Optional[CastlingRights] = None,
) -> List[Move]:
    """
    Generate pseudo-legal moves for the piece on a square.

    Args:
        board: Position to generate on
        square: (row, col) of the moving piece
        en_passant: Square skipped by the previous double pawn step, if any
        castling: Castling rights; None disables castling generation

    Returns:
        List of moves (empty for an empty or off-board square)
    """
    piece = board.piece_at(square)
    if piece is None:
        return []

    if piece.kind is PieceType.PAWN:
        return _pawn_moves(board, square, piece.color, en_passant)

    if piece.kind in SLIDE_DIRECTIONS:
        return _slide_moves(board, square, piece.color, SLIDE_DIRECTIONS[piece.kind])

    moves = _step_moves(board, square, piece.color, STEP_OFFSETS[piece.kind])
    if piece.kind is PieceType.KING and castling is not None:
        moves.extend(_castling_moves(board, square, piece.color, castling))
    return moves


def _pawn_moves(
    board: Board, square: Square, color: Color, en_passant: Optional[Square]
) -> List[Move]:
    row, col = square
    forward = color.forward
    start_row = 6 if color is Color.WHITE else 1
    promotion_row = 0 if color is Color.WHITE else 7
    moves = []

    one_step = (row + forward, col)
    if on_board(one_step) and board.piece_at(one_step) is None:
        flag = MoveFlag.PROMOTION if one_step[0] == promotion_row else MoveFlag.NONE
        moves.append(Move(square, one_step, flag))

        two_step = (row + 2 * forward, col)
        if row == start_row and board.piece_at(two_step) is None:
            moves.append(Move(square, two_step, MoveFlag.PAWN_DOUBLE_STEP))

    for dc in (-1, 1):
        target = (row + forward, col + dc)
        if not on_board(target):
            continue
        occupant = board.piece_at(target)
        if occupant is not None and occupant.color is not color:
            flag = MoveFlag.PROMOTION_CAPTURE if target[0] == promotion_row else MoveFlag.CAPTURE
            moves.append(Move(square, target, flag))
        elif occupant is None and target == en_passant:
            moves.append(Move(square, target, MoveFlag.EN_PASSANT))

    return moves


def _step_moves(board: Board, square: Square, color: Color, offsets) -> List[Move]:
    row, col = square
    moves = []
    for dr, dc in offsets:
        target = (row + dr, col + dc)
        if not on_board(target):
            continue
        occupant = board.piece_at(target)
        if occupant is None:
            moves.append(Move(square, target))
        elif occupant.color is not color:
            moves.append(Move(square, target, MoveFlag.CAPTURE))
    return moves


def _slide_moves(board: Board, square: Square, color: Color, directions) -> List[Move]:
    row, col = square
    moves = []
    for dr, dc in directions:
        target = (row + dr, col + dc)
        while on_board(target):
            occupant = board.piece_at(target)
            if occupant is None:
                moves.append(Move(square, target))
            else:
                if occupant.color is not color:
                    moves.append(Move(square, target, MoveFlag.CAPTURE))
                break
            target = (target[0] + dr, target[1] + dc)
    return moves


def _castling_moves(
    board: Board, square: Square, color: Color, castling: CastlingRights
) -> List[Move]:
    """
    Castling candidates. Only occupancy is checked here; whether the king
    passes through an attacked square is decided by the legality filter.
    """
    row = color.home_row
    if square != (row, KING_HOME_COL):
        return []

    rook = Piece(color, PieceType.ROOK)
    moves = []

    if (
        castling.kingside(color)
        and board.piece_at((row, 5)) is None
        and board.piece_at((row, 6)) is None
        and board.piece_at((row, 7)) == rook
    ):
        moves.append(Move(square, (row, 6), MoveFlag.CASTLE_KINGSIDE))

    if (
        castling.queenside(color)
        and board.piece_at((row, 3)) is None
        and board.piece_at((row, 2)) is None
        and board.piece_at((row, 1)) is None
        and board.piece_at((row, 0)) == rook
    ):
        moves.append(Move(square, (row, 2), MoveFlag.CASTLE_QUEENSIDE))

    return moves


def is_square_attacked(board: Board, square: Square, by_color: Color) -> bool:
    """
    Test whether any piece of `by_color` attacks a square.

    Attacks are capture-style: a pawn attacks its two forward diagonals
    whether or not they are occupied, and never attacks by pushing. Every
    other piece attacks the squares its pseudo-legal moves land on, with no
    castling or en-passant context. The lookup walks outward from the
    target square using the same offset tables as the generator.

    Args:
        board: Position to test
        square: Target (row, col)
        by_color: Attacking side

    Returns:
        True if the square is attacked
    """
    if not on_board(square):
        return False
    row, col = square

    # A pawn of by_color attacks from one row behind the target, relative to its push direction
    pawn = Piece(by_color, PieceType.PAWN)
    for dc in (-1, 1):
        if board.piece_at((row - by_color.forward, col + dc)) == pawn:
            return True

    for kind, offsets in STEP_OFFSETS.items():
        attacker = Piece(by_color, kind)
        for dr, dc in offsets:
            if board.piece_at((row + dr, col + dc)) == attacker:
                return True

    for directions, kinds in (
        (DIAGONALS, (PieceType.BISHOP, PieceType.QUEEN)),
        (ORTHOGONALS, (PieceType.ROOK, PieceType.QUEEN)),
    ):
        for dr, dc in directions:
            target = (row + dr, col + dc)
            while on_board(target):
                occupant = board.piece_at(target)
                if occupant is not None:
                    if occupant.color is by_color and occupant.kind in kinds:
                        return True
                    break
                target = (target[0] + dr, target[1] + dc)

    return False
