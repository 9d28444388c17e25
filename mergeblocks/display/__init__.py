"""
Display Module for Merge Blocks Solver

Text and image renderings of boards and solutions.
"""

from .text import render_board, format_solution
from .image import (
    DEFAULT_CELL_SIZE,
    render_board_image,
    save_board_image,
    save_solution_images,
)

__all__ = [
    "render_board",
    "format_solution",
    "DEFAULT_CELL_SIZE",
    "render_board_image",
    "save_board_image",
    "save_solution_images",
]
