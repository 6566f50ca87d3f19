"""
Chess Engine Testing and Benchmarking

This module provides correctness checks and benchmarks for the engine.

Test Suites:
    1. Perft: counts leaf nodes of the legal-move tree to a fixed depth
       - Compared against well-known reference values for the start position
       - Any move-generation bug (castling, en passant, pins, promotion)
         shows up as a count mismatch

    2. Tactics: short positions reached from the start by a move sequence,
       each with a known best move (mates in one, hanging queens)

Evaluation Metrics:
    - Correct Moves: Number of positions where engine found best move
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes evaluated

References:
    - Perft: https://www.chessprogramming.org/Perft_Results
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from arcade_chess.board.pieces import PROMOTION_TYPES, Move, PieceType
from arcade_chess.config import EngineConfig
from arcade_chess.evaluation.base import Evaluator
from arcade_chess.game.machine import ChessGame
from arcade_chess.game.uci_moves import move_to_uci, play_moves
from arcade_chess.search.minimax import find_best_move

# Leaf counts from the standard starting position
PERFT_START_POSITION = {
    1: 20,
    2: 400,
    3: 8902,
    4: 197281,
}


def expand_promotions(move: Move) -> List[Tuple[Move, Optional[PieceType]]]:
    """A promotion counts once per piece it can promote to."""
    if move.is_promotion:
        return [(move, piece) for piece in PROMOTION_TYPES]
    return [(move, None)]


def perft(game: ChessGame, depth: int) -> int:
    """
    Count leaf nodes of the legal-move tree.

    Finished games (including fifty-move draws) have no children.

    Args:
        game: Game to start from (restored before returning)
        depth: Plies to expand

    Returns:
        Number of leaf positions
    """
    if depth == 0:
        return 1
    if game.is_over:
        return 0

    moves = game.all_legal_moves()
    if depth == 1:
        return sum(4 if move.is_promotion else 1 for move in moves)

    total = 0
    for move in moves:
        for candidate, promotion in expand_promotions(move):
            saved = game.snapshot()
            game.make_move(candidate, promotion)
            total += perft(game, depth - 1)
            game.restore(saved)
    return total


def divide(game: ChessGame, depth: int) -> Dict[str, int]:
    """
    Perft split by root move, keyed by UCI string.

    Args:
        game: Game to start from
        depth: Total depth including the root move (>= 1)

    Returns:
        Mapping like {"e2e4": 20, ...}
    """
    counts = {}
    for move in game.all_legal_moves():
        for candidate, promotion in expand_promotions(move):
            saved = game.snapshot()
            game.make_move(candidate, promotion)
            counts[move_to_uci(candidate, promotion)] = perft(game, depth - 1)
            game.restore(saved)
    return counts


@dataclass
class TestPosition:
    """
    A test position with expected best move(s).

    Attributes:
        moves: UCI moves leading from the starting position to the test position
        best_moves: List of acceptable best moves (UCI format)
        description: Human-readable description of the position
        id: Position identifier (e.g., "T.01")
    """
    moves: List[str]
    best_moves: List[str]
    description: str = ""
    id: str = ""

    def setup(self) -> ChessGame:
        game = ChessGame()
        play_moves(game, self.moves)
        return game


@dataclass
class TestResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Move the engine found (UCI format)
        score: Evaluation score for the move
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes evaluated
        depth: Search depth used
    """
    position: TestPosition
    found_move: str
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


# ============================================================================
# Tactical Test Suite
# ============================================================================

TACTICAL_POSITIONS = [
    TestPosition(
        id="T.01",
        moves=["f2f3", "e7e5", "g2g4"],
        best_moves=["d8h4"],
        description="Fool's mate: Black mates with Qh4#"
    ),
    TestPosition(
        id="T.02",
        moves=["e2e4", "e7e5", "f1c4", "b8c6", "d1h5", "g8f6"],
        best_moves=["h5f7"],
        description="Scholar's mate: White mates with Qxf7#"
    ),
    TestPosition(
        id="T.03",
        moves=["e2e4", "e7e5", "d1h5", "d8g5"],
        best_moves=["h5g5"],
        description="White wins the undefended queen with Qxg5"
    ),
]


def evaluate_position(
    position: TestPosition,
    depth: int,
    evaluator: Evaluator,
    config: Optional[EngineConfig] = None,
    verbose: bool = False,
) -> TestResult:
    """
    Evaluate a single test position.

    Args:
        position: Test position to evaluate
        depth: Search depth
        evaluator: Position evaluator
        config: Search options
        verbose: If True, print detailed output

    Returns:
        TestResult with engine's move and whether it was correct
    """
    game = position.setup()

    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(f"Moves: {' '.join(position.moves)}")
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()
    best_move, score, nodes = find_best_move(game, depth, evaluator, config)
    time_taken = time.time() - start_time

    found_move_uci = move_to_uci(best_move) if best_move else ""
    correct = found_move_uci in position.best_moves

    if verbose:
        print(f"Engine found: {found_move_uci} (score: {score})")
        print(f"Nodes searched: {nodes:,}")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'✓ CORRECT' if correct else '✗ WRONG'}")

    return TestResult(
        position=position,
        found_move=found_move_uci,
        score=score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=nodes,
        depth=depth,
    )


def run_tactics(
    evaluator: Evaluator,
    depth: int = 2,
    config: Optional[EngineConfig] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run the tactical test suite.

    Args:
        evaluator: Position evaluator
        depth: Search depth (default: 2)
        config: Search options
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TestResult objects
            - avg_time: Average time per position
            - total_time: Sum of search times
    """
    if verbose:
        print("=" * 70)
        print("TACTICAL TEST SUITE")
        print("=" * 70)

    results = [
        evaluate_position(position, depth, evaluator, config, verbose=verbose)
        for position in TACTICAL_POSITIONS
    ]
    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)

    total = len(TACTICAL_POSITIONS)
    avg_time = total_time / total if total else 0
    percentage = (correct_count / total * 100) if total else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{total} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")
        print(f"Total time: {total_time:.2f}s")

    return {
        'score': correct_count,
        'total': total,
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }
