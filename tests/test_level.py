"""
Test script for level reading and settings

Usage:
    python tests/test_level.py
"""

import io
import json
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mergeblocks.level import read_level, parse_level, load_level
from mergeblocks.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_read_level():
    """Rows are read up to the first blank line."""
    print("\n" + "="*60)
    print("TEST: Read Level")
    print("="*60)

    assert read_level(io.StringIO("1 1\n")) == ["1 1"]
    assert read_level(io.StringIO("1 1")) == ["1 1"]
    assert read_level(io.StringIO("1 1\n\n222\n")) == ["1 1"]
    assert read_level(io.StringIO(" 1 \n#2#\r\n")) == [" 1 ", "#2#"]
    print("  [PASS] Read level tests")


def test_malformed_level():
    """Empty and ragged input is rejected."""
    print("\n" + "="*60)
    print("TEST: Malformed Level")
    print("="*60)

    assert read_level(io.StringIO("")) is None
    assert read_level(io.StringIO("\n1\n")) is None
    assert read_level(io.StringIO("12\n1\n")) is None
    assert parse_level(io.StringIO("12\n123\n")) is None
    print("  [PASS] Malformed level tests")


def test_parse_level():
    """Characters map to walls, blocks and empty cells."""
    print("\n" + "="*60)
    print("TEST: Parse Level")
    print("="*60)

    board = parse_level(io.StringIO("#1.\n0a2\n"))
    print(f"  Rows: {board.to_rows()}")

    assert (board.width, board.height) == (5, 4)
    assert board.get_cell(1, 1).is_wall
    assert board.get_cell(1, 2).is_block and board.get_cell(1, 2).color == 1
    assert board.get_cell(1, 3).is_empty
    assert board.get_cell(2, 1).is_empty  # '0' is not a block
    assert board.get_cell(2, 2).is_empty
    assert board.get_cell(2, 3).color == 2
    assert board.group_count == 2
    print("  [PASS] Parse level tests")


def test_settle_on_load():
    """Settling at load time drops floating blocks."""
    print("\n" + "="*60)
    print("TEST: Settle On Load")
    print("="*60)

    text = "1\n \n"
    assert parse_level(io.StringIO(text)).to_rows() == ["1", " "]
    assert parse_level(io.StringIO(text), settle=True).to_rows() == [" ", "1"]
    print("  [PASS] Settle on load tests")


def test_load_level():
    """Levels load from files; missing files raise OSError."""
    print("\n" + "="*60)
    print("TEST: Load Level")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "level.txt"
        path.write_text("1 1\n", encoding='utf-8')
        board = load_level(path)
        assert board is not None
        assert board.to_rows() == ["1 1"]

        with pytest.raises(OSError):
            load_level(Path(tmp) / "missing.txt")
    print("  [PASS] Load level tests")


def test_settings():
    """Settings merge with defaults and survive a save/load cycle."""
    print("\n" + "="*60)
    print("TEST: Settings")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"

        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text(json.dumps({"settle_on_load": True}), encoding='utf-8')
        settings = load_settings(path)
        assert settings["settle_on_load"] is True
        assert settings["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]

        path.write_text("{not json", encoding='utf-8')
        assert load_settings(path) == DEFAULT_SETTINGS

        settings["progress_interval"] = 5
        save_settings(settings, path)
        assert load_settings(path)["progress_interval"] == 5
    print("  [PASS] Settings tests")


TESTS = [
    ("Read Level", test_read_level),
    ("Malformed Level", test_malformed_level),
    ("Parse Level", test_parse_level),
    ("Settle On Load", test_settle_on_load),
    ("Load Level", test_load_level),
    ("Settings", test_settings),
]


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# LEVEL TESTS")
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
