import pytest

from eight_queens.position import Position
from eight_queens.solver import (
    InvalidBoardSizeError,
    NQueensSolver,
    add_new_queen,
    is_solution,
    queens,
    validate_size,
)


@pytest.mark.parametrize(
    "n, count_exp",
    [(0, 1), (1, 1), (2, 0), (3, 0), (4, 2), (5, 10), (6, 4), (7, 40), (8, 92)],
)
def test_known_solution_counts(n, count_exp):
    assert len(NQueensSolver(n).solve()) == count_exp


def test_zero_size_yields_empty_position():
    assert NQueensSolver(0).solve() == [Position()]


def test_one_queen():
    assert NQueensSolver(1).solve() == [Position([1])]


def test_four_queens_in_order():
    assert NQueensSolver(4).solve() == [Position([3, 1, 4, 2]), Position([2, 4, 1, 3])]


def test_eight_queens_first_solution():
    assert NQueensSolver(8).first() == Position([4, 2, 7, 3, 6, 8, 5, 1])


def test_first_without_solution():
    assert NQueensSolver(3).first() is None


def test_every_eight_queens_solution_is_valid():
    solutions = NQueensSolver(8).solve()
    assert len(set(solutions)) == 92
    for position in solutions:
        assert len(position) == 8
        assert len(set(position)) == 8
        for i in range(8):
            for j in range(i + 1, 8):
                assert abs(position[i] - position[j]) != j - i
        assert is_solution(position, 8)


def test_solving_twice_gives_same_set():
    solver = NQueensSolver(6)
    assert set(solver.solve()) == set(solver.solve())
    assert set(NQueensSolver(8).solve()) == set(NQueensSolver(8).solve())


def test_count_matches_solve():
    solver = NQueensSolver(7)
    assert solver.count() == len(solver.solve())


def test_add_new_queen_tries_every_row():
    parent = Position([1])
    children = list(add_new_queen(parent, 4))
    assert children == [Position([r, 1]) for r in range(1, 5)]
    assert parent == Position([1])


def test_queens_partial_columns():
    # 4x4 棋盘上放两列时合法的方案
    partial = list(queens(2, 4))
    assert partial == [
        Position([3, 1]),
        Position([4, 1]),
        Position([4, 2]),
        Position([1, 3]),
        Position([1, 4]),
        Position([2, 4]),
    ]


def test_queens_is_lazy():
    stream = queens(8, 8)
    assert next(stream) == Position([4, 2, 7, 3, 6, 8, 5, 1])


def test_is_solution_rejects_bad_positions():
    assert not is_solution(Position([1, 2, 3, 4]), 4)
    assert not is_solution(Position([2, 4, 1]), 4)
    assert not is_solution(Position([2, 4, 1, 5]), 4)
    assert not is_solution(Position([2, 2, 4, 1]), 4)
    assert is_solution(Position([2, 4, 1, 3]), 4)
    assert is_solution(Position(), 0)


@pytest.mark.parametrize("bad", [-1, -8, 2.5, "8", None, True])
def test_invalid_sizes_are_rejected(bad):
    with pytest.raises(InvalidBoardSizeError):
        NQueensSolver(bad)


def test_invalid_size_error_is_value_error():
    with pytest.raises(ValueError):
        validate_size(-3)
    assert validate_size(0) == 0
