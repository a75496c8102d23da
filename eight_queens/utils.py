import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"


def setup_logging(args):
    """
    配置日志记录，日志输出到标准错误，标准输出只保留求解结果。

    参数:
        args: 命令行参数，包含日志级别
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=getattr(logging, args.log_level),
    )
    logging.getLogger("eight_queens").setLevel(getattr(logging, args.log_level))
