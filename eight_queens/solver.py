import logging
from typing import Iterator, List, Optional

from .position import Position, new_is_ok

logger = logging.getLogger(__name__)


class InvalidBoardSizeError(ValueError):
    """棋盘大小不合法（负数或非整数）"""


def validate_size(n) -> int:
    # bool 是 int 的子类，这里单独排除
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidBoardSizeError(f"棋盘大小必须是整数，收到 {n!r}")
    if n < 0:
        raise InvalidBoardSizeError(f"棋盘大小不能为负数，收到 {n}")
    return n


def add_new_queen(position: Position, size: int) -> Iterator[Position]:
    """对一个方案尝试新一列的每一行，生成 size 个子方案"""
    for row in range(1, size + 1):
        yield position.prepend(row)


def queens(columns: int, size: int) -> Iterator[Position]:
    """递归生成前 columns 列的所有合法方案

    Args:
        columns (int): 已放置的列数
        size (int): 棋盘大小，每列的候选行为 1 到 size
    Returns:
        Iterator[Position]: 惰性生成的合法方案
    """
    if columns == 0:
        yield Position()
        return
    for position in queens(columns - 1, size):
        for child in add_new_queen(position, size):
            if new_is_ok(child):
                yield child


def is_solution(position: Position, size: int) -> bool:
    """完整检查一个方案：长度、取值范围、行互异和对角线"""
    if len(position) != size:
        return False
    if any(not 1 <= row <= size for row in position):
        return False
    for i in range(size):
        for j in range(i + 1, size):
            shift = abs(position[i] - position[j])
            if shift == 0 or shift == j - i:
                return False
    return True


class NQueensSolver:
    def __init__(self, n: int = 8):
        self.N = validate_size(n)

    def iter_solutions(self) -> Iterator[Position]:
        return queens(self.N, self.N)

    def solve(self) -> List[Position]:
        """求解N皇后问题，返回全部方案"""
        solutions = list(self.iter_solutions())
        logger.debug("N=%d 共 %d 个方案", self.N, len(solutions))
        return solutions

    def count(self) -> int:
        return sum(1 for _ in self.iter_solutions())

    def first(self) -> Optional[Position]:
        return next(self.iter_solutions(), None)
