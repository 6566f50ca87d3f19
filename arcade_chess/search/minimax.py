"""
Minimax Search with Alpha-Beta Pruning

This module implements the computer opponent's search. Minimax explores
the game tree to find the best move, and alpha-beta pruning discards
branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Move Ordering: Captures first, to maximize pruning

Evaluation is White-positive, so White is always the maximizing side and
Black the minimizing side.

Exploration plays moves on the live game with make_move() and puts the
game back with a full snapshot/restore, so a search leaves the game
exactly as it found it.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import random
from typing import List, Optional, Tuple

from arcade_chess.board.pieces import Color, Move
from arcade_chess.config import EngineConfig
from arcade_chess.evaluation.base import Evaluator
from arcade_chess.evaluation.classical import ClassicalEvaluator
from arcade_chess.game.machine import ChessGame

logger = logging.getLogger(__name__)


def order_moves(game: ChessGame, moves: List[Move]) -> List[Move]:
    """
    Order moves to improve alpha-beta pruning efficiency.

    Moves landing on an occupied square (captures) come first; the sort is
    stable, so generation order is kept within each group. En-passant
    captures land on an empty square and are ordered as quiet moves.

    Args:
        game: Game whose board the moves belong to
        moves: Legal moves to order

    Returns:
        Sorted list of moves (captures first)
    """
    board = game.board
    return sorted(moves, key=lambda move: board.piece_at(move.to_square) is None)


def minimax(
    game: ChessGame,
    depth: int,
    alpha: float,
    beta: float,
    maximizing_player: bool,
    evaluator: Evaluator,
    prefer_faster_mates: bool = False,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Args:
        game: Game to search; mutated during the search and restored before returning
        depth: Remaining search depth (decrements each recursive call)
        alpha: Best score the maximizer can guarantee so far
        beta: Best score the minimizer can guarantee so far
        maximizing_player: True if the side to move wants the highest score
        evaluator: Position evaluation function
        prefer_faster_mates: Score nearer mates higher
        nodes_searched: Optional mutable list [count] to track positions visited

    Returns:
        float: Evaluation of the position in centipawns

    Algorithm:
        1. Terminal status or depth 0 → score the position
        2. Generate and order legal moves
        3. For each move: snapshot, make move, recurse, restore
        4. Prune once alpha >= beta
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    terminal_score = evaluator.evaluate_terminal(game, depth, prefer_faster_mates)
    if terminal_score is not None:
        return terminal_score

    # Base case: Reached leaf node (depth = 0)
    if depth == 0:
        return evaluator.evaluate(game.board)

    ordered_moves = order_moves(game, game.all_legal_moves())

    if maximizing_player:
        max_eval = -float("inf")
        for move in ordered_moves:
            saved = game.snapshot()
            game.make_move(move)
            eval_score = minimax(
                game,
                depth - 1,
                alpha,
                beta,
                False,
                evaluator,
                prefer_faster_mates,
                nodes_searched,
            )
            game.restore(saved)

            max_eval = max(max_eval, eval_score)
            alpha = max(alpha, eval_score)

            # Beta cutoff: Minimizing player won't allow this branch
            if beta <= alpha:
                break

        return max_eval

    else:
        min_eval = float("inf")
        for move in ordered_moves:
            saved = game.snapshot()
            game.make_move(move)
            eval_score = minimax(
                game,
                depth - 1,
                alpha,
                beta,
                True,
                evaluator,
                prefer_faster_mates,
                nodes_searched,
            )
            game.restore(saved)

            min_eval = min(min_eval, eval_score)
            beta = min(beta, eval_score)

            # Alpha cutoff: Maximizing player won't allow this branch
            if beta <= alpha:
                break

        return min_eval


def find_best_move(
    game: ChessGame,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    config: Optional[EngineConfig] = None,
) -> Tuple[Optional[Move], float, int]:
    """
    Find the best move for the side to move.

    Each root move is searched with a full window, so every root score is
    exact and ties can be broken fairly.

    Args:
        game: Current game (left unchanged on return)
        depth: Search depth in plies (>= 1)
        evaluator: Position evaluation function (default: ClassicalEvaluator)
        config: Tie-breaking and mate-scoring options (default: EngineConfig())

    Returns:
        Tuple of (best_move, evaluation, nodes)
            - best_move: The best move found, None if the game is already over
            - evaluation: Score of the best move (terminal score if none)
            - nodes: Number of positions visited

    Raises:
        ValueError: If depth < 1
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    evaluator = evaluator or ClassicalEvaluator()
    config = config or EngineConfig()

    # A fifty-move draw still has legal moves, but the game accepts none of them
    legal_moves = [] if game.is_over else game.all_legal_moves()
    if not legal_moves:
        score = evaluator.evaluate_terminal(game) or 0
        logger.debug(f"No legal moves ({game.status.value}), nothing to search")
        return None, score, 0

    maximizing = game.turn is Color.WHITE
    rng = random.Random(config.random_seed)

    best_moves: List[Move] = []
    best_score = -float("inf") if maximizing else float("inf")
    nodes = [0]

    for move in order_moves(game, legal_moves):
        saved = game.snapshot()
        game.make_move(move)
        score = minimax(
            game,
            depth - 1,
            -float("inf"),
            float("inf"),
            not maximizing,
            evaluator,
            config.prefer_faster_mates,
            nodes,
        )
        game.restore(saved)

        improved = score > best_score if maximizing else score < best_score
        if improved:
            best_score = score
            best_moves = [move]
        elif score == best_score:
            best_moves.append(move)

        logger.debug(f"Move: {move}, Score: {score}")

    if config.random_tiebreak:
        best_move = rng.choice(best_moves)
    else:
        best_move = best_moves[0]

    logger.debug(
        f"Search done: depth={depth}, nodes={nodes[0]}, "
        f"best_move={best_move}, score={best_score}"
    )
    return best_move, best_score, nodes[0]


def get_best_move(
    game: ChessGame,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[Move]:
    """
    Pick a move for the side to move, or None when it has no legal moves.

    The caller applies the move with game.make_move(); promotions default
    to a queen.
    """
    best_move, _, _ = find_best_move(game, depth, evaluator, config)
    return best_move
