"""
Test script for move physics

Covers:
1. Pushing groups and chained blocks
2. Rollback when a push hits a wall
3. Gravity settling in a single sweep
4. Group merging and renumbering

Usage:
    python tests/test_physics.py
"""

import sys
from collections import deque
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mergeblocks.solver import (
    BoardState,
    Cell,
    Direction,
    EMPTY,
    GridSimulator,
    HORIZONTAL,
    Move,
    find_successors,
    settle_board,
)


SAMPLE_LEVELS = [
    ["1 1"],
    ["12 21"],
    ["12#"],
    ["1  ", "# 1"],
    ["2  ", "11 "],
    ["2 1", "1 1"],
    ["  1 2", " ## #", "2 # 1"],
    ["1 2 ", "2 1 ", "## #"],
]


def _groups_are_contiguous(board: BoardState) -> bool:
    return board.groups() == set(range(1, board.group_count + 1))


def test_chain_push():
    """A block in the push direction is pushed along."""
    print("\n" + "="*60)
    print("TEST: Chain Push")
    print("="*60)

    board = BoardState.from_rows(["12 "])
    assert board.group_count == 2

    result = board.apply_move(Move(1, Direction.RIGHT))
    assert result is not None
    print(f"  After push: {result.to_rows()}")

    assert result.get_cell(1, 1) == EMPTY
    assert result.get_cell(1, 2) == Cell.block(1, 1)
    assert result.get_cell(1, 3) == Cell.block(2, 2)
    print("  [PASS] Chain push tests")


def test_rollback_on_wall():
    """A chained push into a wall leaves the grid untouched."""
    print("\n" + "="*60)
    print("TEST: Rollback On Wall")
    print("="*60)

    board = BoardState.from_rows(["12#"])
    simulator = GridSimulator(board)

    assert not simulator.attempt_group_move(1, Direction.RIGHT)
    assert simulator.to_board() == board
    assert simulator.group_count == board.group_count

    assert not simulator.attempt_group_move(1, Direction.LEFT)
    assert simulator.to_board() == board

    assert board.apply_move(Move(1, Direction.RIGHT)) is None
    print("  [PASS] Rollback tests")


def test_rollback_exactness():
    """Every failed push on the sample levels restores the exact grid."""
    print("\n" + "="*60)
    print("TEST: Rollback Exactness")
    print("="*60)

    failures = 0
    for rows in SAMPLE_LEVELS:
        board = BoardState.from_rows(rows)
        for group in range(1, board.group_count + 1):
            for direction in HORIZONTAL:
                simulator = GridSimulator(board)
                if not simulator.attempt_group_move(group, direction):
                    failures += 1
                    assert simulator.grid == [list(row) for row in board.grid]
                    assert simulator.to_board() == board

    print(f"  Checked {failures} failed pushes")
    assert failures > 0
    print("  [PASS] Rollback exactness tests")


def test_group_cohesion():
    """All cells of a group move together, including ones beside the push line."""
    print("\n" + "="*60)
    print("TEST: Group Cohesion")
    print("="*60)

    board = BoardState.from_rows(["1  ", "11 "])
    assert board.group_count == 1

    result = board.apply_move(Move(1, Direction.RIGHT))
    print(f"  After push: {result.to_rows()}")

    assert result.to_rows() == [" 1 ", " 11"]
    assert {cell.group for _, cell in result.blocks()} == {1}
    print("  [PASS] Group cohesion tests")


def test_other_group_not_carried():
    """A block resting on a moving group stays behind and then falls."""
    print("\n" + "="*60)
    print("TEST: Other Group Not Carried")
    print("="*60)

    board = BoardState.from_rows(["2  ", "11 "])
    assert board.group_count == 2
    assert board.get_cell(1, 1) == Cell.block(2, 1)

    result = board.apply_move(Move(2, Direction.RIGHT))
    print(f"  After push: {result.to_rows()}")

    assert result.to_rows() == ["   ", "211"]
    assert result.get_cell(2, 1) == Cell.block(2, 1)
    assert result.get_cell(2, 2) == Cell.block(1, 2)
    assert result.get_cell(2, 3) == Cell.block(1, 2)
    print("  [PASS] Other group tests")


def test_gravity_single_sweep():
    """A block two rows above the floor lands with one settle call."""
    print("\n" + "="*60)
    print("TEST: Gravity Single Sweep")
    print("="*60)

    board = BoardState.from_rows(["1", " ", " "])
    simulator = GridSimulator(board)
    simulator.settle()
    settled = simulator.to_board()

    print(f"  Settled: {settled.to_rows()}")
    assert settled.to_rows() == [" ", " ", "1"]

    simulator.settle()
    assert simulator.to_board() == settled
    print("  [PASS] Gravity single sweep tests")


def test_gravity_stack():
    """A stack of blocks falls together."""
    print("\n" + "="*60)
    print("TEST: Gravity Stack")
    print("="*60)

    board = BoardState.from_rows(["2", "1", " ", " "])
    settled = settle_board(board)

    print(f"  Settled: {settled.to_rows()}")
    assert settled.to_rows() == [" ", " ", "2", "1"]
    assert settled.get_cell(3, 1) == Cell.block(2, 1)
    assert settled.get_cell(4, 1) == Cell.block(1, 2)
    print("  [PASS] Gravity stack tests")


def test_gravity_after_push():
    """A block pushed off a ledge falls and merges on landing."""
    print("\n" + "="*60)
    print("TEST: Gravity After Push")
    print("="*60)

    board = BoardState.from_rows(["1  ", "# 1"])
    assert board.group_count == 2

    result = board.apply_move(Move(1, Direction.RIGHT))
    print(f"  After push: {result.to_rows()}")

    assert result.to_rows() == ["   ", "#11"]
    assert result.group_count == 1
    print("  [PASS] Gravity after push tests")


def test_gravity_fixpoint():
    """Settling a settled board changes nothing."""
    print("\n" + "="*60)
    print("TEST: Gravity Fixpoint")
    print("="*60)

    for rows in SAMPLE_LEVELS:
        once = settle_board(BoardState.from_rows(rows))
        simulator = GridSimulator(once)
        simulator.settle()
        assert simulator.to_board() == once, rows

        for _, successor in find_successors(once):
            simulator = GridSimulator(successor)
            simulator.settle()
            assert simulator.to_board() == successor, rows

    print("  [PASS] Gravity fixpoint tests")


def test_merge_renumbering():
    """Merges leave group ids contiguous."""
    print("\n" + "="*60)
    print("TEST: Merge Renumbering")
    print("="*60)

    board = BoardState.from_rows(["2 1", "111"])
    print(f"  Groups: {board.group_count}")

    assert board.group_count == 2
    assert board.get_cell(1, 1) == Cell.block(2, 1)
    for coord, cell in board.blocks():
        if cell.color == 1:
            assert cell.group == 2, coord
    assert _groups_are_contiguous(board)
    print("  [PASS] Merge renumbering tests")


def test_group_contiguity_over_search():
    """Group ids stay 1..N on every reachable board."""
    print("\n" + "="*60)
    print("TEST: Group Contiguity Over Search")
    print("="*60)

    for rows in SAMPLE_LEVELS:
        start = BoardState.from_rows(rows)
        seen = {start}
        queue = deque([start])
        while queue and len(seen) < 500:
            board = queue.popleft()
            assert _groups_are_contiguous(board), board.to_rows()
            for _, successor in find_successors(board):
                if successor not in seen:
                    seen.add(successor)
                    queue.append(successor)
        print(f"  {rows}: {len(seen)} boards checked")

    print("  [PASS] Group contiguity tests")


def test_neutral_blocks():
    """Neutral blocks never merge but are pushed and carried like any block."""
    print("\n" + "="*60)
    print("TEST: Neutral Blocks")
    print("="*60)

    board = BoardState.from_interior([[Cell.block(0, 1), Cell.block(0, 2), EMPTY]])
    simulator = GridSimulator(board)
    simulator.update_connections()
    assert simulator.group_count == 2

    board = BoardState.from_interior([[Cell.block(1, 1), Cell.block(0, 2), EMPTY]])
    result = board.apply_move(Move(1, Direction.RIGHT))
    assert result.get_cell(1, 2) == Cell.block(1, 1)
    assert result.get_cell(1, 3) == Cell.block(0, 2)

    # mixed-color group moves as one piece
    board = BoardState.from_interior([[EMPTY, Cell.block(1, 1), Cell.block(0, 1)]])
    result = board.apply_move(Move(1, Direction.LEFT))
    assert result.get_cell(1, 1) == Cell.block(1, 1)
    assert result.get_cell(1, 2) == Cell.block(0, 1)
    assert result.get_cell(1, 3) == EMPTY
    print("  [PASS] Neutral block tests")


def test_invalid_arguments():
    """Bad group ids and directions are programming errors."""
    print("\n" + "="*60)
    print("TEST: Invalid Arguments")
    print("="*60)

    board = BoardState.from_rows(["1 1"])
    simulator = GridSimulator(board)

    with pytest.raises(ValueError):
        simulator.attempt_group_move(0, Direction.RIGHT)
    with pytest.raises(ValueError):
        simulator.attempt_group_move(board.group_count + 1, Direction.RIGHT)
    with pytest.raises(ValueError):
        simulator.attempt_group_move(1, (0, 1))
    with pytest.raises(ValueError):
        BoardState.from_interior([[Cell.block(1, 2)]])

    assert simulator.to_board() == board
    print("  [PASS] Invalid argument tests")


TESTS = [
    ("Chain Push", test_chain_push),
    ("Rollback On Wall", test_rollback_on_wall),
    ("Rollback Exactness", test_rollback_exactness),
    ("Group Cohesion", test_group_cohesion),
    ("Other Group Not Carried", test_other_group_not_carried),
    ("Gravity Single Sweep", test_gravity_single_sweep),
    ("Gravity Stack", test_gravity_stack),
    ("Gravity After Push", test_gravity_after_push),
    ("Gravity Fixpoint", test_gravity_fixpoint),
    ("Merge Renumbering", test_merge_renumbering),
    ("Group Contiguity", test_group_contiguity_over_search),
    ("Neutral Blocks", test_neutral_blocks),
    ("Invalid Arguments", test_invalid_arguments),
]


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# PHYSICS TESTS")
    print("#"*60)

    results = []
    for name, test in TESTS:
        try:
            test()
            results.append((name, True))
        except (AssertionError, pytest.fail.Exception) as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
