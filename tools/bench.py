#!/usr/bin/env python3
"""
Benchmark: measure nodes visited and time per move for the move selector.

Run after any change to the search or the evaluator to check that node counts
and timings have not regressed. Minimax node counts on 3×3 positions are fully
deterministic; heuristic positions use a fixed seed so their moves are too.

Usage: python3 tools/bench.py
"""
import os
import random
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

from engine.search import SearchState, get_best_move

_ = ""

# Fixed positions: (label, side length, board). Same set for every comparison.
POSITIONS = [
    ("Empty 3x3",    3, [_] * 9),
    ("X centre",     3, [_, _, _, _, "X", _, _, _, _]),
    ("X corner",     3, ["X", _, _, _, _, _, _, _, _]),
    ("Block row",    3, ["X", "X", _, _, "O", _, _, _, _]),
    ("Win row",      3, ["O", "O", _, "X", "X", _, "X", _, _]),
    ("Fork threat",  3, ["X", _, _, _, "O", _, _, _, "X"]),
    ("Empty 4x4",    4, [_] * 16),
    ("Block 4x4",    4, ["X", "X", "X", _] + [_] * 4 + ["O", "O", _, _] + [_] * 4),
    ("Empty 5x5",    5, [_] * 25),
    ("Busy 5x5",     5, ["X", "O", "X", "O", _] * 4 + [_] * 5),
]

SEED = 1234


def run_position(label: str, n: int, board: list[str]) -> dict:
    """Run a single position through the selector and return metrics.

    Args:
        label: Human-readable position name for display.
        n: Board side length.
        board: The position, n * n cells.

    Returns:
        Dict with keys: label, size, move, nodes, nps, time_ms.
    """
    state = SearchState()
    start = time.perf_counter()
    move = get_best_move(board, n, random.Random(SEED), state)
    elapsed = time.perf_counter() - start

    time_ms = int(elapsed * 1000)
    nps = int(state.node_count / elapsed) if elapsed > 0 else 0
    return {
        "label": label,
        "size": n,
        "move": "(none)" if move is None else str(move),
        "nodes": state.node_count,
        "nps": nps,
        "time_ms": time_ms,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    print(f"Tic-tac-toe selector benchmark: {sys.executable}")
    print()
    print(
        f"{'Position':<14} {'Size':>4} {'Move':>5} "
        f"{'Nodes':>8} {'NPS':>10} {'Time(ms)':>9}"
    )
    print("-" * 55)

    results = []
    for label, n, board in POSITIONS:
        r = run_position(label, n, board)
        results.append(r)
        print(
            f"{r['label']:<14} {r['size']:>4} {r['move']:>5} "
            f"{r['nodes']:>8,} {r['nps']:>10,} {r['time_ms']:>9,}"
        )

    if results:
        avg_nodes = sum(r["nodes"] for r in results) // len(results)
        avg_time = sum(r["time_ms"] for r in results) // len(results)
        print("-" * 55)
        print(f"{'AVERAGE':<14} {'':>4} {'':>5} {avg_nodes:>8,} {'':>10} {avg_time:>9,}")


if __name__ == "__main__":
    main()
