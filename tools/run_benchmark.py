#!/usr/bin/env python3
"""
Tactical Benchmark Runner

Runs the tactical test suite at multiple depths to check that the
opponent finds the known best moves and to track search speed.

Usage:
    python tools/run_benchmark.py [--depths 1,2,3] [--verbose]
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from arcade_chess.config import EngineConfig
from arcade_chess.evaluation.classical import ClassicalEvaluator
from arcade_chess.utils.testing import run_tactics
import time


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], verbose: bool = False, prefer_faster_mates: bool = False):
    """
    Run the tactical suite at multiple depths.

    Args:
        depths: List of depths to test
        verbose: If True, print detailed results for each position
        prefer_faster_mates: Score nearer mates higher
    """
    evaluator = ClassicalEvaluator()
    config = EngineConfig(prefer_faster_mates=prefer_faster_mates)

    print("=" * 80)
    print("TACTICAL BENCHMARK - ArcadeChess")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r}")
    print(f"Search: Minimax with Alpha-Beta Pruning, captures first")
    print(f"Depths: {depths}")
    print("=" * 80)
    print()

    all_results = []

    for depth in depths:
        print(f"\n{'=' * 80}")
        print(f"DEPTH {depth}")
        print("=" * 80)

        start_time = time.time()
        result = run_tactics(
            evaluator=evaluator,
            depth=depth,
            config=config,
            verbose=verbose
        )
        total_time = time.time() - start_time

        total_nodes = sum(r.nodes_searched for r in result['results'])
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': result['score'],
            'total': result['total'],
            'percentage': result['percentage'],
            'avg_time': result['avg_time'],
            'total_time': total_time,
            'total_nodes': total_nodes,
            'nodes_per_sec': nodes_per_sec,
            'results': result['results']
        })

        print(f"\nResults at depth {depth}:")
        print(f"  Correct: {result['score']}/{result['total']} ({result['percentage']:.1f}%)")
        print(f"  Total time: {format_time(total_time)}")
        print(f"  Avg time per position: {format_time(result['avg_time'])}")
        print(f"  Total nodes: {total_nodes:,}")
        print(f"  Nodes/sec: {nodes_per_sec:,.0f}")

        failed = [r for r in result['results'] if not r.correct]
        if failed and verbose:
            print(f"\n  Failed positions:")
            for r in failed:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Correct':<12} {'%':<8} {'Avg Time':<12} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(f"{r['depth']:<8} {r['score']}/{r['total']:<8} {r['percentage']:<7.1f}% {format_time(r['avg_time']):<12} {r['nodes_per_sec']:>12,.0f}")

    print("=" * 80)

    position_results = {}
    for r in all_results:
        for pos_result in r['results']:
            position_results.setdefault(pos_result.position.id, []).append(pos_result.correct)

    always_failed = [pos_id for pos_id, results in position_results.items()
                     if not any(results)]

    if always_failed:
        print(f"\nPositions that failed at all depths: {', '.join(sorted(always_failed))}")

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the tactical test suite at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3",
        help="Comma-separated list of depths to test (default: 1,2,3)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )
    parser.add_argument(
        "--prefer-faster-mates",
        action="store_true",
        help="Score nearer mates higher than distant ones"
    )

    args = parser.parse_args()

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, verbose=args.verbose, prefer_faster_mates=args.prefer_faster_mates)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\nError running benchmark: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
