"""
Pieces, Squares and Moves

Value types shared by every other module. Pieces are plain immutable
values (a color and a kind), never objects with behavior: anything that
depends on the piece kind is a table lookup keyed on `PieceType`.

Coordinates:
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file
"""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional, Tuple

Square = Tuple[int, int]

FILES = "abcdefgh"


class Color(Enum):
    """Side to move / piece owner."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row delta of a pawn push for this color."""
        return -1 if self is Color.WHITE else 1

    @property
    def home_row(self) -> int:
        return 7 if self is Color.WHITE else 0


class PieceType(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Upper-case letter (pawns are 'P')."""
        return PIECE_LETTERS[self]


PIECE_LETTERS = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

PROMOTION_TYPES = (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)


class Piece(NamedTuple):
    """A colored piece. The empty square is represented by None."""

    color: Color
    kind: PieceType

    @property
    def symbol(self) -> str:
        """FEN-style symbol: upper case for White, lower case for Black."""
        letter = self.kind.letter
        return letter if self.color is Color.WHITE else letter.lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> "Piece":
        """
        Build a piece from its one-letter symbol ('K' = white king, 'n' = black knight).

        Raises:
            ValueError: If the symbol is not one of PNBRQK (any case)
        """
        for kind, letter in PIECE_LETTERS.items():
            if symbol == letter:
                return cls(Color.WHITE, kind)
            if symbol == letter.lower():
                return cls(Color.BLACK, kind)
        raise ValueError(f"Invalid piece symbol: {symbol!r}")

    def __repr__(self) -> str:
        return f"Piece({self.symbol})"


class MoveFlag(Enum):
    """Special-move tag carried by every generated move."""

    NONE = "none"
    CAPTURE = "capture"
    PAWN_DOUBLE_STEP = "pawn-double-step"
    EN_PASSANT = "en-passant"
    CASTLE_KINGSIDE = "castle-kingside"
    CASTLE_QUEENSIDE = "castle-queenside"
    PROMOTION = "promotion"
    PROMOTION_CAPTURE = "promotion-capture"


class Move(NamedTuple):
    """
    A move from one square to another.

    The move itself does not carry the captured piece or its notation;
    both are derived when the move is applied.
    """

    from_square: Square
    to_square: Square
    flag: MoveFlag = MoveFlag.NONE

    @property
    def is_capture(self) -> bool:
        return self.flag in (MoveFlag.CAPTURE, MoveFlag.EN_PASSANT, MoveFlag.PROMOTION_CAPTURE)

    @property
    def is_promotion(self) -> bool:
        return self.flag in (MoveFlag.PROMOTION, MoveFlag.PROMOTION_CAPTURE)

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    def __str__(self) -> str:
        return f"{square_name(self.from_square)}{square_name(self.to_square)}"


def on_board(square: Square) -> bool:
    """True if both coordinates lie in [0, 7]."""
    row, col = square
    return 0 <= row <= 7 and 0 <= col <= 7


def square_name(square: Square) -> str:
    """
    Algebraic name of a square.

    Example:
        square_name((6, 4)) == "e2"
    """
    row, col = square
    return f"{FILES[col]}{8 - row}"


def parse_square(name: str) -> Square:
    """
    Parse an algebraic square name into (row, col).

    Raises:
        ValueError: If the name is not a file letter followed by a rank digit
    """
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return 8 - int(name[1]), FILES.index(name[0])


def piece_or_empty(value: Optional[Piece]) -> str:
    """Single character for ASCII rendering ('.' for an empty square)."""
    return value.symbol if value is not None else "."
