"""
Image Display

Saves PNG snapshots of boards and solution steps.
"""

import logging
from pathlib import Path
from typing import List, Union

from PIL import Image, ImageDraw, ImageFont

from ..solver import BoardState, Solution

logger = logging.getLogger(__name__)


DEFAULT_CELL_SIZE = 40

BACKGROUND_COLOR = "#f5f5f5"
WALL_COLOR = "#424242"
DIVIDER_COLOR = "#212121"

# Fill per block color; index 0 is neutral
BLOCK_COLORS = [
    "#000000",  # 0 neutral
    "#e53935",  # 1 red
    "#1e88e5",  # 2 blue
    "#43a047",  # 3 green
    "#fdd835",  # 4 yellow
    "#8e24aa",  # 5 purple
    "#fb8c00",  # 6 orange
    "#00acc1",  # 7 cyan
    "#d81b60",  # 8 pink
    "#6d4c41",  # 9 brown
]


def _load_font(size: int) -> ImageFont.ImageFont:
    """Load a TrueType font, falling back to Pillow's default."""
    try:
        return ImageFont.truetype("arial.ttf", size)
    except OSError:
        return ImageFont.load_default()


def render_board_image(board: BoardState, cell_size: int = DEFAULT_CELL_SIZE) -> Image.Image:
    """
    Draw a board as an image.

    Walls are dark squares, blocks are filled with their color and
    labelled with the color digit. A thick divider separates cells
    that do not belong to the same piece.

    Args:
        board: Board to draw
        cell_size: Side of one cell in pixels

    Returns:
        RGB PIL Image
    """
    img = Image.new("RGB", (board.width * cell_size, board.height * cell_size), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)
    font = _load_font(cell_size // 2)
    line_width = max(1, cell_size // 12)

    for r, row in enumerate(board.grid):
        for c, cell in enumerate(row):
            x, y = c * cell_size, r * cell_size
            box = [x, y, x + cell_size - 1, y + cell_size - 1]

            if cell.is_wall:
                draw.rectangle(box, fill=WALL_COLOR)
            elif cell.is_block:
                fill = BLOCK_COLORS[cell.color]
                draw.rectangle(box, fill=fill)
                text_fill = "white" if cell.color in (0, 2, 5, 9) else "black"
                draw.text((x + cell_size // 3, y + cell_size // 5), str(cell.color),
                          fill=text_fill, font=font)

            if not cell.is_block:
                continue
            # dividers on the right and bottom edges only; the neighbour draws the rest
            right = row[c + 1]
            if not cell.same_piece(right):
                draw.line([x + cell_size - 1, y, x + cell_size - 1, y + cell_size - 1],
                          fill=DIVIDER_COLOR, width=line_width)
            below = board.grid[r + 1][c]
            if not cell.same_piece(below):
                draw.line([x, y + cell_size - 1, x + cell_size - 1, y + cell_size - 1],
                          fill=DIVIDER_COLOR, width=line_width)
            left = row[c - 1]
            if not left.is_block:
                draw.line([x, y, x, y + cell_size - 1], fill=DIVIDER_COLOR, width=line_width)
            above = board.grid[r - 1][c]
            if not above.is_block:
                draw.line([x, y, x + cell_size - 1, y], fill=DIVIDER_COLOR, width=line_width)

    return img


def save_board_image(board: BoardState, path: Union[str, Path],
                     cell_size: int = DEFAULT_CELL_SIZE) -> None:
    """
    Save a board snapshot as PNG.

    Args:
        board: Board to draw
        path: Output file path
        cell_size: Side of one cell in pixels
    """
    render_board_image(board, cell_size).save(path, "PNG")


def save_solution_images(solution: Solution, out_dir: Union[str, Path],
                         cell_size: int = DEFAULT_CELL_SIZE) -> List[Path]:
    """
    Save one PNG per solution step (step_000.png, step_001.png, ...).

    Args:
        solution: Solved result (nothing is written if unsolvable)
        out_dir: Directory to write into (created if missing)
        cell_size: Side of one cell in pixels

    Returns:
        Paths of the written images
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for i, board in enumerate(solution.board_states):
        path = out_dir / f"step_{i:03d}.png"
        save_board_image(board, path, cell_size)
        paths.append(path)

    logger.info(f"Saved {len(paths)} step images to {out_dir}")
    return paths
