import argparse

BACKENDS = ("generator", "logic")


def board_size(value: str) -> int:
    """argparse 使用的棋盘大小类型，拒绝负数"""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"棋盘大小必须是整数: {value!r}")
    if size < 0:
        raise argparse.ArgumentTypeError(f"棋盘大小不能为负数: {size}")
    return size


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"需要正整数: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"需要正整数: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eight-queens",
        description="Enumerate every placement of N non-attacking queens on an N x N board.",
    )
    parser.add_argument(
        "--size",
        type=board_size,
        default=8,
        help="Board size N (number of queens). Must be >= 0.",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="generator",
        help='Solver to use: the recursive "generator" or the kanren "logic" solver.',
    )
    parser.add_argument(
        "--limit",
        type=positive_int,
        default=None,
        help="Print at most this many solutions.",
    )
    parser.add_argument(
        "--board",
        action="store_true",
        help="Print a board drawing after each solution.",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Only print the number of solutions.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-check every solution pairwise before printing it.",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for messages written to stderr.",
    )
    return parser


def parse_args(argv=None):
    """解析所有命令行参数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 健全性检查
    if args.count and args.board:
        parser.error("--count and --board cannot be used together.")

    return args
