#!/usr/bin/env python3
"""
Perft Runner

Counts leaf nodes of the legal-move tree from the starting position and
compares them with the published reference counts. A mismatch points at
a move-generation bug; --divide prints the per-root-move split to narrow
it down.

Usage:
    python tools/perft.py [--depth 3] [--divide] [--verbose]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from arcade_chess.game.machine import ChessGame
from arcade_chess.game.uci_moves import move_to_uci
from arcade_chess.utils.testing import PERFT_START_POSITION, expand_promotions, perft


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run_perft(depth: int, show_divide: bool = False) -> bool:
    """
    Run perft to the given depth and check it against the reference.

    Returns:
        True if the count matches (or no reference exists for the depth)
    """
    logger = logging.getLogger(__name__)
    game = ChessGame()

    start_time = time.time()
    counts = {}
    root_moves = [
        expanded
        for move in game.all_legal_moves()
        for expanded in expand_promotions(move)
    ]
    for move, promotion in tqdm(root_moves, desc=f"Perft depth {depth}", disable=show_divide):
        saved = game.snapshot()
        game.make_move(move, promotion)
        counts[move_to_uci(move, promotion)] = perft(game, depth - 1)
        game.restore(saved)
    elapsed = time.time() - start_time

    if show_divide:
        for uci_move in sorted(counts):
            print(f"{uci_move}: {counts[uci_move]}")
        print()

    total = sum(counts.values())
    rate = total / elapsed if elapsed > 0 else 0
    print(f"Depth {depth}: {total:,} nodes in {elapsed:.2f}s ({rate:,.0f} nodes/s)")

    expected = PERFT_START_POSITION.get(depth)
    if expected is None:
        logger.info(f"No reference count for depth {depth}")
        return True
    if total != expected:
        logger.error(f"Perft mismatch at depth {depth}: got {total}, expected {expected}")
        return False

    logger.info(f"Perft depth {depth} matches reference ({expected:,})")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Count legal-move tree leaves from the starting position"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=3,
        help="Search depth in plies (default: 3)"
    )
    parser.add_argument(
        "--divide",
        action="store_true",
        help="Print leaf counts per root move"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    if args.depth < 1:
        print("Error: depth must be at least 1")
        sys.exit(1)

    try:
        ok = run_perft(args.depth, show_divide=args.divide)
    except KeyboardInterrupt:
        print("\n\nPerft interrupted by user")
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
