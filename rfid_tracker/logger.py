import logging
import sys


def setup_logger(log_level: str = "INFO", use_stdout: bool = False) -> None:
    logger = logging.getLogger()
    logger.setLevel(log_level)

    stream_handler = logging.StreamHandler(sys.stdout if use_stdout else sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.handlers = [stream_handler]
