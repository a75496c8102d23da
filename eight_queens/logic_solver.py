from typing import List

from kanren import run, var  # 导入kanren库的核心功能
from kanren.goals import membero  # 导入约束相关的功能
from unification import isvar, reify

from .position import Position, new_is_ok
from .solver import validate_size


def safe_queeno(queens, column):
    """约束：第 column 个皇后与之前的皇后不在同一行或同一对角线

    与 goalify 的用法相同，把 Python 判断函数包装成逻辑约束。
    这里的皇后变量此前已由 membero 绑定到具体行号。
    """
    def safe_queeno_goal(S):
        rows = reify(queens[:column + 1], S)
        if any(isvar(row) for row in rows):
            return
        # 最新的皇后放在最前面，与 Position 的顺序一致
        if new_is_ok(Position(reversed(rows))):
            yield S
    return safe_queeno_goal


class LogicNQueens:
    def __init__(self, n: int = 8):
        """初始化基于逻辑编程的N皇后求解器
        Args:
            n (int): 棋盘大小和皇后数量，默认为8
        """
        self.N = validate_size(n)
        self.rows = tuple(range(1, n + 1))  # 行值域(1到n)
        self.queens = tuple(var() for _ in range(n))  # 每列一个逻辑变量

    def get_constraints(self):
        """生成所有约束条件
        Returns:
            list: 包含所有约束的列表
        """
        constraints = []
        for column, queen in enumerate(self.queens):
            # 约束1：行范围约束 - 每个皇后的行号在1到N之间
            constraints.append(membero(queen, self.rows))
            # 约束2：新皇后与已放置的皇后互不攻击
            constraints.append(safe_queeno(self.queens, column))
        return constraints

    def solve(self) -> List[Position]:
        """求解N皇后问题
        Returns:
            list: 所有方案，顺序与递归生成器一致
        """
        if self.N == 0:
            return [Position()]
        solutions = run(0, self.queens, *self.get_constraints())
        positions = [Position(solution) for solution in solutions]
        # 按最早放置的列优先排序
        return sorted(positions, key=lambda p: p.rows[::-1])
