import logging
import time
from itertools import islice
from typing import Iterator

from .config import parse_args
from .position import Position, visualize_solution
from .solver import NQueensSolver, is_solution
from .utils import setup_logging

logger = logging.getLogger(__name__)


def iter_backend(backend: str, n: int) -> Iterator[Position]:
    if backend == "logic":
        # 只有选择逻辑求解器时才导入kanren
        from .logic_solver import LogicNQueens
        return iter(LogicNQueens(n).solve())
    return NQueensSolver(n).iter_solutions()


def main(argv=None) -> int:
    """
    主函数：求解N皇后问题并逐行打印每个方案。
    """
    args = parse_args(argv)
    setup_logging(args)
    logger.info("棋盘大小 %d，求解器 %s", args.size, args.backend)

    start_time = time.perf_counter()
    solutions = iter_backend(args.backend, args.size)
    if args.limit is not None:
        solutions = islice(solutions, args.limit)

    found = 0
    for position in solutions:
        if args.verify and not is_solution(position, args.size):
            raise RuntimeError(f"invalid solution produced: {position}")
        found += 1
        if args.count:
            continue
        print(position)
        if args.board:
            print(visualize_solution(position))
            print()

    if args.count:
        print(found)
    elapsed = time.perf_counter() - start_time
    logger.info("找到 %d 个解决方案，用时 %.4fs", found, elapsed)
    return 0

