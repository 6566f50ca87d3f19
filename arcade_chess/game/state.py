"""
Game State Records

Plain data carried by the game state machine: the status enum, one entry
of move history, and the full snapshot used by search to explore and
unwind hypothetical moves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from arcade_chess.board.pieces import Color, Move, MoveFlag, Piece, PieceType, Square
from arcade_chess.board.representation import CastlingRights

Grid = Tuple[Tuple[Optional[Piece], ...], ...]


class GameStatus(Enum):
    """
    Status of the side to move.

    Transitions:
        PLAYING ⇄ CHECK → CHECKMATE | STALEMATE | DRAW
    Terminal statuses are absorbing: no further moves are accepted.
    """

    PLAYING = "playing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.DRAW)


@dataclass(frozen=True)
class HistoryEntry:
    """One committed move, as shown in a move list."""

    move: Move
    piece: Piece
    captured: Optional[Piece]
    notation: str
    promotion: Optional[PieceType] = None

    @property
    def special(self) -> MoveFlag:
        return self.move.flag


@dataclass(frozen=True)
class GameSnapshot:
    """
    Complete copy of a game's mutable state.

    Every field is immutable, so restoring the same snapshot twice yields
    identical games.
    """

    grid: Grid
    turn: Color
    en_passant: Optional[Square]
    castling: CastlingRights
    half_move_clock: int
    full_move_number: int
    captured_by_white: Tuple[Piece, ...]
    captured_by_black: Tuple[Piece, ...]
    status: GameStatus
    winner: Optional[Color]
    last_move: Optional[Move]
    history: Tuple[HistoryEntry, ...]
