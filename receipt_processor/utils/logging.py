import logging
import sys

def setup_logging(name: str = "receipt_processor", level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure the shared service logger.

    Safe to call more than once: the level is updated, the stdout handler is
    only attached the first time.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

logger = setup_logging()
