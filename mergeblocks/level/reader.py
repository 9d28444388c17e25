"""
Level Reader

Parses the plain-text level format into a BoardState.

Format:
    One line per grid row, all rows the same length.
    '#' is a wall, '1'-'9' a colored block, any other character is empty.
    A blank line (or end of file) ends the level.
"""

import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from ..solver import BoardState, settle_board

logger = logging.getLogger(__name__)


def read_level(stream: TextIO) -> Optional[List[str]]:
    """
    Read level rows from a text stream.

    Only line terminators are stripped; spaces are empty cells.

    Args:
        stream: Text stream positioned at the start of a level

    Returns:
        List of equal-length rows, or None if the input is empty or ragged
    """
    rows: List[str] = []
    width = 0

    for line in stream:
        line = line.rstrip("\r\n")
        if not line:
            break
        if not rows:
            width = len(line)
        elif len(line) != width:
            logger.warning(f"Row {len(rows) + 1} has length {len(line)}, expected {width}")
            return None
        rows.append(line)

    if not rows:
        logger.warning("Level is empty")
        return None

    return rows


def parse_level(stream: TextIO, settle: bool = False) -> Optional[BoardState]:
    """
    Parse a level from a text stream.

    Args:
        stream: Text stream with the level
        settle: Drop blocks to rest (and merge) before returning

    Returns:
        BoardState, or None if the level is malformed
    """
    rows = read_level(stream)
    if rows is None:
        return None

    board = BoardState.from_rows(rows)
    logger.debug(f"Parsed {board.rows}x{board.cols} level with {board.group_count} groups")

    if settle:
        board = settle_board(board)
    return board


def load_level(path: Union[str, Path], settle: bool = False) -> Optional[BoardState]:
    """
    Load a level from a file.

    Args:
        path: Level file path
        settle: Drop blocks to rest (and merge) before returning

    Returns:
        BoardState, or None if the level is malformed

    Raises:
        OSError: If the file cannot be opened
    """
    with open(path, 'r', encoding='utf-8') as f:
        return parse_level(f, settle=settle)
