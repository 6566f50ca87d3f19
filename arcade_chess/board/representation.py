"""
Board Representation

This module holds the 8*8 piece grid, the castling-rights value, and the
conversions used by other layers:

    - Board: mutable grid of Optional[Piece] with bounds-checked access
    - CastlingRights: four independent flags that can only ever be cleared
    - board_to_tensor: 12-channel one-hot piece planes (12, 8, 8) for evaluation
    - square_to_coordinates / coordinates_to_square: python-chess square
      index (0-63) <-> (row, col)

12-Channel Representation (piece positions only):
    0: White Pawns      6: Black Pawns
    1: White Knights    7: Black Knights
    2: White Bishops    8: Black Bishops
    3: White Rooks      9: Black Rooks
    4: White Queens    10: Black Queens
    5: White Kings     11: Black Kings

Board Orientation:
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple, Union

import numpy as np

from arcade_chess.board.pieces import (
    Color,
    Piece,
    PieceType,
    Square,
    on_board,
    parse_square,
    piece_or_empty,
)

BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# White pieces: channels 0-5
# Black pieces: channels 6-11
PIECE_TO_CHANNEL = {
    Piece(color, kind): (0 if color is Color.WHITE else 6) + int(kind) - 1
    for color in Color
    for kind in PieceType
}


@dataclass(frozen=True)
class CastlingRights:
    """
    Castling availability for both sides.

    Rights are only ever cleared. Every update returns a new value, so a
    snapshot can hold a reference without copying.
    """

    white_kingside: bool = True
    white_queenside: bool = True
    black_kingside: bool = True
    black_queenside: bool = True

    @classmethod
    def none(cls) -> "CastlingRights":
        return cls(False, False, False, False)

    def kingside(self, color: Color) -> bool:
        return self.white_kingside if color is Color.WHITE else self.black_kingside

    def queenside(self, color: Color) -> bool:
        return self.white_queenside if color is Color.WHITE else self.black_queenside

    def without_color(self, color: Color) -> "CastlingRights":
        """Clear both rights of one side (its king moved)."""
        if color is Color.WHITE:
            return replace(self, white_kingside=False, white_queenside=False)
        return replace(self, black_kingside=False, black_queenside=False)

    def without_rook_square(self, square: Square) -> "CastlingRights":
        """Clear the right tied to a rook home square (rook moved or was captured)."""
        if square == (7, 7):
            return replace(self, white_kingside=False)
        if square == (7, 0):
            return replace(self, white_queenside=False)
        if square == (0, 7):
            return replace(self, black_kingside=False)
        if square == (0, 0):
            return replace(self, black_queenside=False)
        return self

    def __str__(self) -> str:
        flags = "".join(
            letter
            for letter, allowed in (
                ("K", self.white_kingside),
                ("Q", self.white_queenside),
                ("k", self.black_kingside),
                ("q", self.black_queenside),
            )
            if allowed
        )
        return flags or "-"


class Board:
    """
    8*8 grid of pieces.

    Empty squares hold None. All accessors treat off-board coordinates as
    "not applicable" instead of raising.
    """

    def __init__(self, grid: Optional[List[List[Optional[Piece]]]] = None):
        if grid is None:
            grid = [[None] * 8 for _ in range(8)]
        self.grid = grid

    @classmethod
    def starting_position(cls) -> "Board":
        """Standard initial setup."""
        board = cls()
        for col, kind in enumerate(BACK_RANK):
            board.grid[0][col] = Piece(Color.BLACK, kind)
            board.grid[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            board.grid[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            board.grid[7][col] = Piece(Color.WHITE, kind)
        return board

    @classmethod
    def from_placement(cls, placement: Dict[str, Union[Piece, str]]) -> "Board":
        """
        Build a board from square names.

        Args:
            placement: Mapping like {"e1": "K", "e8": "k", "a7": Piece(...)}

        Returns:
            Board with only the given pieces

        Raises:
            ValueError: On a malformed square name or piece symbol
        """
        board = cls()
        for name, value in placement.items():
            piece = Piece.from_symbol(value) if isinstance(value, str) else value
            board.set_piece(parse_square(name), piece)
        return board

    def piece_at(self, square: Square) -> Optional[Piece]:
        if not on_board(square):
            return None
        row, col = square
        return self.grid[row][col]

    def set_piece(self, square: Square, piece: Optional[Piece]) -> None:
        if not on_board(square):
            return
        row, col = square
        self.grid[row][col] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Empty a square and return what was on it."""
        piece = self.piece_at(square)
        self.set_piece(square, None)
        return piece

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[Square, Piece]]:
        """Yield (square, piece) for every occupied square, optionally one side only."""
        for row in range(8):
            for col in range(8):
                piece = self.grid[row][col]
                if piece is not None and (color is None or piece.color is color):
                    yield (row, col), piece

    def find_king(self, color: Color) -> Optional[Square]:
        king = Piece(color, PieceType.KING)
        for row in range(8):
            for col in range(8):
                if self.grid[row][col] == king:
                    return row, col
        return None

    def count(self, piece: Piece) -> int:
        return sum(row.count(piece) for row in self.grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        lines = []
        for row in range(8):
            cells = " ".join(piece_or_empty(p) for p in self.grid[row])
            lines.append(f"{8 - row} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self.pieces())} pieces)"


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert python-chess square index to (row, column) coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (row, col) where:
            - row 0 = rank 8 (index 56-63)
            - row 7 = rank 1 (index 0-7)
            - col 0 = A-file
            - col 7 = H-file
    """
    rank = square // 8
    file = square % 8
    return 7 - rank, file


def coordinates_to_square(row: int, col: int) -> int:
    """
    Convert (row, column) coordinates to python-chess square index.

    Args:
        row: Row index (0-7) where 0 is rank 8
        col: Column index (0-7) where 0 is A-file

    Returns:
        Square index (0-63)
    """
    return (7 - row) * 8 + col


def board_to_tensor(board: Board) -> np.ndarray:
    """
    Convert a board to a 12-channel tensor representation.

    Args:
        board: Board to convert

    Returns:
        numpy array of shape (12, 8, 8) with dtype float32
        - 12 channels: 6 piece types * 2 colors
        - Binary values: 1.0 piece exists, 0.0 no piece
    """
    tensor = np.zeros((12, 8, 8), dtype=np.float32)

    for (row, col), piece in board.pieces():
        tensor[PIECE_TO_CHANNEL[piece], row, col] = 1.0

    return tensor
