"""
Arcade Chess

The rules engine and computer opponent behind the chess mini-game:
complete legal-move rules (castling, en passant, promotion, check,
checkmate, stalemate, fifty-move draw) and a minimax opponent with
adjustable difficulty.

## Architecture

The engine is organized into several key modules:

1. **board**: Board model, move generation and legality
   - Pieces are immutable (color, kind) values; empty squares are None
   - Pseudo-legal generation per piece, table driven
   - Legality filter (king safety, castling path safety)

2. **game**: Game state machine
   - Applies moves, tracks castling/en-passant/clocks/captures
   - Derives status (playing/check/checkmate/stalemate/draw)
   - Move history with algebraic notation, snapshots, undo

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - ClassicalEvaluator: material + piece-square tables

4. **search**: Search algorithms
   - Minimax with alpha-beta pruning
   - Captures-first move ordering

5. **uci**: Universal Chess Interface front-end (subset)

6. **utils**: Perft and tactical test suites

## Quick Start

```python
from arcade_chess import ChessGame, get_best_move

game = ChessGame()
move = next(m for m in game.legal_moves_from((6, 4)) if m.to_square == (4, 4))
print(game.make_move(move))          # "e4"

reply = get_best_move(game, depth=2)
print(game.make_move(reply), game.status)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from arcade_chess.board import Board, CastlingRights, Color, Move, MoveFlag, Piece, PieceType
from arcade_chess.config import Difficulty, EngineConfig
from arcade_chess.evaluation import ClassicalEvaluator, Evaluator
from arcade_chess.game import ChessGame, GameStatus, HistoryEntry
from arcade_chess.search import find_best_move, get_best_move

__all__ = [
    'Board',
    'CastlingRights',
    'Color',
    'Move',
    'MoveFlag',
    'Piece',
    'PieceType',
    'Difficulty',
    'EngineConfig',
    'ClassicalEvaluator',
    'Evaluator',
    'ChessGame',
    'GameStatus',
    'HistoryEntry',
    'find_best_move',
    'get_best_move',
]
