from typing import Iterable, Iterator, Tuple


class Position:
    """部分或完整的皇后摆放方案

    每一列放一个皇后，按列记录皇后所在的行号（1 到 N）。
    第一个元素是最新加入的一列（最右侧的列），依次往前是更早放置的列。
    Position 创建后不再修改，prepend 总是返回新的对象。
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[int] = ()):
        self._rows: Tuple[int, ...] = tuple(rows)

    def prepend(self, row: int) -> "Position":
        """在最前面加入新的一列

        Args:
            row (int): 新皇后所在的行号
        Returns:
            Position: 长度加一的新方案，原方案保持不变
        """
        return Position((row,) + self._rows)

    @property
    def newest(self) -> int:
        return self._rows[0]

    @property
    def rows(self) -> Tuple[int, ...]:
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> int:
        return self._rows[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Position({list(self._rows)})"

    def __str__(self) -> str:
        return str(list(self._rows))


def new_is_ok(position: Position) -> bool:
    """检查最新放置的皇后与之前的皇后是否冲突

    之前的皇后在加入时已经两两检查过，这里只需检查第一个元素。
    与相隔 i 列的皇后行差为 0（同一行）或为 i（同一对角线）即冲突。
    """
    if len(position) < 2:
        return True
    new_queen = position.newest
    for i in range(1, len(position)):
        shift = abs(new_queen - position[i])
        if shift == 0 or shift == i:
            return False
    return True


def visualize_solution(position: Position) -> str:
    """将方案可视化为棋盘样式

    Args:
        position (Position): 一个方案，每个元素是对应列的皇后行号
    Returns:
        str: 可视化的棋盘字符串，每一行对应方案中的一列
    """
    size = len(position)
    board = []
    for queen in position:
        row = ['□'] * size  # 创建空棋盘行
        row[queen - 1] = '♕'  # 行号从 1 开始
        board.append(' '.join(row))
    return '\n'.join(board)
