"""N皇后问题：逐列回溯生成所有方案"""

from .position import Position, new_is_ok, visualize_solution
from .solver import (
    InvalidBoardSizeError,
    NQueensSolver,
    add_new_queen,
    is_solution,
    queens,
    validate_size,
)

__all__ = [
    "InvalidBoardSizeError",
    "NQueensSolver",
    "Position",
    "add_new_queen",
    "is_solution",
    "new_is_ok",
    "queens",
    "validate_size",
    "visualize_solution",
]
