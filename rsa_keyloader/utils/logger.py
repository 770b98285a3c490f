import logging
import os
import sys

DEFAULT_LEVEL = "INFO"


def get_logger(name: str = "rsa_keyloader") -> logging.Logger:
    """
    Returns a logger writing to stdout.
    Level comes from RSA_KEYLOADER_LOG_LEVEL (default INFO) when the logger is first set up.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        level = os.getenv("RSA_KEYLOADER_LOG_LEVEL", DEFAULT_LEVEL).upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger
