"""
Evaluation Module

This module provides position evaluation functions for the chess engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm should work with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - ClassicalEvaluator: Material + piece-square table evaluation

Data Flow:
    Board → evaluator.evaluate() → int (centipawns)
                                    Positive = White advantage
                                    Negative = Black advantage
"""

from arcade_chess.evaluation.base import MATE_SCORE, Evaluator
from arcade_chess.evaluation.classical import ClassicalEvaluator

__all__ = ['Evaluator', 'ClassicalEvaluator', 'MATE_SCORE']
