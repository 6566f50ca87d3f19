"""
Coordinate move strings ("e2e4", "e7e8q")

Bridges text input to engine moves. Parsing of the move string itself is
delegated to python-chess; the parsed squares are then matched against
the game's own legal moves.
"""

from typing import Iterable, List, Optional, Tuple

import chess

from arcade_chess.board.pieces import Move, PieceType
from arcade_chess.board.representation import coordinates_to_square, square_to_coordinates
from arcade_chess.game.machine import ChessGame

TO_CHESS_PIECE = {
    PieceType.KNIGHT: chess.KNIGHT,
    PieceType.BISHOP: chess.BISHOP,
    PieceType.ROOK: chess.ROOK,
    PieceType.QUEEN: chess.QUEEN,
}
FROM_CHESS_PIECE = {v: k for k, v in TO_CHESS_PIECE.items()}


def move_to_uci(move: Move, promotion: Optional[PieceType] = None) -> str:
    """
    Format a move as a UCI string.

    Promotion moves always carry a piece letter (queen unless given).
    """
    promotion_piece = None
    if move.is_promotion:
        promotion_piece = TO_CHESS_PIECE[promotion or PieceType.QUEEN]

    return chess.Move(
        coordinates_to_square(*move.from_square),
        coordinates_to_square(*move.to_square),
        promotion=promotion_piece,
    ).uci()


def parse_uci_move(game: ChessGame, text: str) -> Tuple[Move, Optional[PieceType]]:
    """
    Resolve a UCI move string against the legal moves of a game.

    Args:
        game: Game whose side to move is playing
        text: Move like "g1f3" or "a7a8n"

    Returns:
        Tuple of (move, promotion) where promotion is None for
        non-promoting moves and defaults to Queen when omitted

    Raises:
        ValueError: If the string is malformed or the move is not legal
    """
    try:
        parsed = chess.Move.from_uci(text)
    except ValueError as e:
        raise ValueError(f"Invalid move format: {text!r}") from e

    if not parsed:
        raise ValueError(f"Null move is not playable: {text!r}")

    from_square = square_to_coordinates(parsed.from_square)
    to_square = square_to_coordinates(parsed.to_square)

    for move in game.legal_moves_from(from_square):
        if move.to_square != to_square:
            continue
        if not move.is_promotion:
            if parsed.promotion is not None:
                break
            return move, None
        if parsed.promotion is None:
            return move, PieceType.QUEEN
        if parsed.promotion in FROM_CHESS_PIECE:
            return move, FROM_CHESS_PIECE[parsed.promotion]
        break

    raise ValueError(f"Illegal move: {text}")


def play_moves(game: ChessGame, moves: Iterable[str]) -> List[str]:
    """
    Apply a sequence of UCI moves.

    Returns:
        Notation of each applied move

    Raises:
        ValueError: On the first malformed or illegal move (earlier moves stay applied)
    """
    notations = []
    for text in moves:
        move, promotion = parse_uci_move(game, text)
        notations.append(game.make_move(move, promotion))
    return notations
