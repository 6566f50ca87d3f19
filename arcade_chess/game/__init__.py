"""
Game Module

The game state machine: owns one position, applies moves, derives the
status of the side to move and records move history.

Key Components:
    - ChessGame: move application, status, snapshots, undo
    - GameStatus / HistoryEntry / GameSnapshot: plain records
    - build_notation: minimal algebraic notation
    - uci_moves: "e2e4"-style move strings ↔ Move

Data Flow:
    UI selects square → legal_moves_from() → make_move() → notation + status
"""

from arcade_chess.game.state import GameSnapshot, GameStatus, HistoryEntry
from arcade_chess.game.notation import build_notation
from arcade_chess.game.machine import ChessGame
from arcade_chess.game.uci_moves import move_to_uci, parse_uci_move, play_moves

__all__ = [
    'ChessGame',
    'GameSnapshot',
    'GameStatus',
    'HistoryEntry',
    'build_notation',
    'move_to_uci',
    'parse_uci_move',
    'play_moves',
]
