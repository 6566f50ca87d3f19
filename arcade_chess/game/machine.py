"""
Game State Machine

`ChessGame` owns exactly one position plus its auxiliary state (side to
move, castling rights, en-passant target, clocks, captures, history) and
is mutated only through `make_move`. Status is recomputed after every
move:

    PLAYING → CHECK → CHECKMATE | STALEMATE | DRAW (terminal)
               ↑  ↓
             back to PLAYING / CHECK on the next move

Preconditions:
    `make_move` expects a move previously returned by `legal_moves_from`,
    `all_legal_moves` or the search engine. Moves are not re-validated; an
    illegal move corrupts the game.
"""

import logging
from typing import List, Optional, Tuple

from arcade_chess.board.legality import (
    all_legal_moves,
    apply_move,
    is_in_check,
    legal_moves_from,
)
from arcade_chess.board.pieces import (
    PROMOTION_TYPES,
    Color,
    Move,
    MoveFlag,
    Piece,
    PieceType,
    Square,
)
from arcade_chess.board.representation import Board, CastlingRights
from arcade_chess.game.notation import build_notation
from arcade_chess.game.state import GameSnapshot, GameStatus, HistoryEntry

logger = logging.getLogger(__name__)

FIFTY_MOVE_LIMIT = 100  # half-moves


class ChessGame:
    """
    One game of chess.

    Attributes:
        board: Current piece grid (read it, never write it)
        turn: Side to move
        castling: Current CastlingRights
        en_passant: Square skipped by the last double pawn step, or None
        half_move_clock: Half-moves since the last pawn move or capture
        full_move_number: Starts at 1, incremented after each Black move
        captured_by_white / captured_by_black: Pieces taken by each side
        status: GameStatus of the side to move
        winner: Color that delivered checkmate, else None
        last_move: Most recent Move, or None
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        turn: Color = Color.WHITE,
        castling: Optional[CastlingRights] = None,
        en_passant: Optional[Square] = None,
        half_move_clock: int = 0,
        full_move_number: int = 1,
    ):
        """
        Create a game.

        Args:
            board: Custom starting position (copied); None for the standard setup
            turn: Side to move in the custom position
            castling: Castling rights for the custom position (default: none)
            en_passant: En-passant target for the custom position
            half_move_clock: Initial half-move clock
            full_move_number: Initial full-move number
        """
        self.board = Board()
        self.captured_by_white: List[Piece] = []
        self.captured_by_black: List[Piece] = []
        self._history: List[HistoryEntry] = []

        if board is None:
            self.reset()
        else:
            self._start(
                board.copy(),
                turn,
                castling if castling is not None else CastlingRights.none(),
                en_passant,
                half_move_clock,
                full_move_number,
            )

    def _start(
        self,
        board: Board,
        turn: Color,
        castling: CastlingRights,
        en_passant: Optional[Square],
        half_move_clock: int,
        full_move_number: int,
    ) -> None:
        self.board.grid = board.grid
        self.turn = turn
        self.castling = castling
        self.en_passant = en_passant
        self.half_move_clock = half_move_clock
        self.full_move_number = full_move_number
        self.captured_by_white.clear()
        self.captured_by_black.clear()
        self._history.clear()
        self.status = GameStatus.PLAYING
        self.winner: Optional[Color] = None
        self.last_move: Optional[Move] = None
        self._update_status()
        self._origin = self.snapshot()

    def reset(self) -> None:
        """Reinitialize to the standard starting position."""
        self._start(Board.starting_position(), Color.WHITE, CastlingRights(), None, 0, 1)
        logger.debug("Game reset to starting position")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.board.piece_at(square)

    def legal_moves_from(self, square: Square) -> List[Move]:
        """Legal moves of the piece on `square`; empty unless it belongs to the side to move."""
        return legal_moves_from(self.board, square, self.turn, self.en_passant, self.castling)

    def all_legal_moves(self) -> List[Move]:
        return all_legal_moves(self.board, self.turn, self.en_passant, self.castling)

    def has_legal_moves(self) -> bool:
        for square, _ in self.board.pieces(self.turn):
            if self.legal_moves_from(square):
                return True
        return False

    def is_in_check(self, color: Optional[Color] = None) -> bool:
        return is_in_check(self.board, color or self.turn)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def make_move(self, move: Move, promotion: Optional[PieceType] = None) -> str:
        """
        Commit a legal move.

        Args:
            move: A move returned by legal_moves_from / all_legal_moves / search
            promotion: Piece type for a promoting pawn (default Queen)

        Returns:
            Algebraic notation of the move

        Raises:
            ValueError: If the game is already over, or the promotion piece
                is not a queen, rook, bishop or knight
        """
        if self.status.is_terminal:
            raise ValueError(f"Game is over ({self.status.value}); no further moves accepted")
        if promotion is not None and promotion not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {promotion.name.lower()}")

        piece = self.board.piece_at(move.from_square)
        color = piece.color
        if move.is_promotion:
            promotion = promotion or PieceType.QUEEN
        else:
            promotion = None

        captured = apply_move(self.board, move, promotion)

        if captured is not None:
            if color is Color.WHITE:
                self.captured_by_white.append(captured)
            else:
                self.captured_by_black.append(captured)

        self._update_castling(move, piece)

        if move.flag is MoveFlag.PAWN_DOUBLE_STEP:
            (from_row, col), (to_row, _) = move.from_square, move.to_square
            self.en_passant = ((from_row + to_row) // 2, col)
        else:
            self.en_passant = None

        if piece.kind is PieceType.PAWN or captured is not None:
            self.half_move_clock = 0
        else:
            self.half_move_clock += 1

        if color is Color.BLACK:
            self.full_move_number += 1

        notation = build_notation(move, piece, captured, promotion)

        self.turn = color.opponent
        self.last_move = move
        self._update_status()

        self._history.append(HistoryEntry(move, piece, captured, notation, promotion))
        return notation

    def _update_castling(self, move: Move, piece: Piece) -> None:
        rights = self.castling
        if piece.kind is PieceType.KING:
            rights = rights.without_color(piece.color)
        elif piece.kind is PieceType.ROOK:
            rights = rights.without_rook_square(move.from_square)
        # Anything landing on a rook home square removes that rook's right
        self.castling = rights.without_rook_square(move.to_square)

    def _update_status(self) -> None:
        in_check = self.is_in_check()
        self.winner = None

        if not self.has_legal_moves():
            if in_check:
                self.status = GameStatus.CHECKMATE
                self.winner = self.turn.opponent
            else:
                self.status = GameStatus.STALEMATE
        elif in_check:
            self.status = GameStatus.CHECK
        elif self.half_move_clock >= FIFTY_MOVE_LIMIT:
            self.status = GameStatus.DRAW
        else:
            self.status = GameStatus.PLAYING

    def undo(self, plies: int = 1) -> int:
        """
        Take back the last `plies` half-moves.

        The game is rebuilt from its starting position by replaying the
        remaining history, promotion choices included.

        Returns:
            Number of half-moves actually taken back (0 with no history)
        """
        if plies < 1:
            raise ValueError(f"plies must be positive, got {plies}")

        undone = min(plies, len(self._history))
        if undone == 0:
            return 0

        replay = self._history[: len(self._history) - undone]
        self.restore(self._origin)
        for entry in replay:
            self.make_move(entry.move, entry.promotion)

        logger.debug(f"Undid {undone} half-move(s), {len(replay)} remain")
        return undone

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=tuple(tuple(row) for row in self.board.grid),
            turn=self.turn,
            en_passant=self.en_passant,
            castling=self.castling,
            half_move_clock=self.half_move_clock,
            full_move_number=self.full_move_number,
            captured_by_white=tuple(self.captured_by_white),
            captured_by_black=tuple(self.captured_by_black),
            status=self.status,
            winner=self.winner,
            last_move=self.last_move,
            history=tuple(self._history),
        )

    def restore(self, snapshot: GameSnapshot) -> None:
        """Put every field back to the snapshot, reusing the existing containers."""
        for row, cells in enumerate(snapshot.grid):
            self.board.grid[row][:] = cells
        self.turn = snapshot.turn
        self.en_passant = snapshot.en_passant
        self.castling = snapshot.castling
        self.half_move_clock = snapshot.half_move_clock
        self.full_move_number = snapshot.full_move_number
        self.captured_by_white[:] = snapshot.captured_by_white
        self.captured_by_black[:] = snapshot.captured_by_black
        self.status = snapshot.status
        self.winner = snapshot.winner
        self.last_move = snapshot.last_move
        self._history[:] = snapshot.history

    def copy(self) -> "ChessGame":
        """Independent clone (e.g. to search on another thread)."""
        clone = ChessGame()
        clone.restore(self.snapshot())
        clone._origin = self._origin
        return clone

    def __repr__(self) -> str:
        return (
            f"ChessGame(turn={self.turn.value}, status={self.status.value}, "
            f"moves={len(self._history)})"
        )
