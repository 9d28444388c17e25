#!/usr/bin/env python3
"""
Regression check for solver output.

For every solutions/NAME.txt, solves levels/NAME.txt and compares the
printed solution against the stored one.

Usage:
    python tools/verify_solutions.py [levels_dir] [solutions_dir]

Examples:
    python tools/verify_solutions.py                    # levels/ vs solutions/
    python tools/verify_solutions.py my_levels my_sols  # Custom directories
"""

import sys
import difflib
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mergeblocks.level import load_level
from mergeblocks.solver import SolutionContext, create_strategy
from mergeblocks.display import format_solution


def verify_level(level_path: Path, solution_path: Path) -> bool:
    """
    Solve one level and compare with its expected output.

    Args:
        level_path: Level file
        solution_path: Expected solver output

    Returns:
        True if the output matches
    """
    print(f"Verifying {solution_path}...")

    board = load_level(level_path)
    if board is None:
        print(f"  FAIL: could not read {level_path}")
        return False

    solution = create_strategy("bfs").solve(SolutionContext(board=board))
    actual = format_solution(solution)
    expected = solution_path.read_text(encoding='utf-8')

    if actual == expected:
        return True

    diff = difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile=str(solution_path),
        tofile="solver output",
    )
    sys.stdout.writelines(diff)
    return False


def main():
    """Verify every stored solution."""
    root = Path(__file__).parent.parent
    levels_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else root / "levels"
    solutions_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else root / "solutions"

    solutions = sorted(solutions_dir.glob("*.txt"))
    if not solutions:
        print(f"No solutions found in {solutions_dir}")
        return 1

    failed = []
    for solution_path in solutions:
        level_path = levels_dir / solution_path.name
        if not level_path.exists():
            print(f"Missing level: {level_path}")
            failed.append(solution_path.name)
            continue
        if not verify_level(level_path, solution_path):
            failed.append(solution_path.name)

    print(f"\n{len(solutions) - len(failed)}/{len(solutions)} solutions match")
    if failed:
        print("Mismatched: " + ", ".join(failed))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
