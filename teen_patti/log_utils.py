# log_utils.py
import logging
import os

# LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Default stays quiet so the console game output is not interleaved.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Root handler on stderr, so log lines never mix with the round printed
    to the Console. cli.main runs it per invocation, api_server on import.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=_FORMAT,
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"teen_patti.{name}")
