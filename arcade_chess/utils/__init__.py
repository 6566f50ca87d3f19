"""
Utilities Module

This module provides utility functions for testing and benchmarking the
chess engine.

Key Components:
    - Perft: Move generation verification against reference counts
    - Tactical suite: mates in one and hanging pieces with known answers

Testing Methodology:
    Perft counts must match the published values exactly; tactical
    positions check that the search finds the known best move at a given
    depth.
"""

from arcade_chess.utils.testing import (
    PERFT_START_POSITION,
    TACTICAL_POSITIONS,
    divide,
    evaluate_position,
    perft,
    run_tactics,
)

__all__ = [
    'PERFT_START_POSITION',
    'TACTICAL_POSITIONS',
    'divide',
    'evaluate_position',
    'perft',
    'run_tactics',
]
