"""
Search Module

This module implements the computer opponent: minimax with alpha-beta
pruning over the live game, using snapshot/restore to unwind each
explored move.

Key Components:
    - minimax: Core search algorithm with alpha-beta pruning
    - find_best_move: Root-level search returning (move, score, nodes)
    - get_best_move: Move-only convenience wrapper
    - order_moves: Captures-first move ordering
"""

from arcade_chess.search.minimax import find_best_move, get_best_move, minimax, order_moves

__all__ = ['minimax', 'find_best_move', 'get_best_move', 'order_moves']
