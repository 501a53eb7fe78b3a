import logging
import os

# Environment switch:
#   BARK_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Records go to stderr; stdout carries the game itself.
LOG_LEVEL = os.getenv('BARK_LOG_LEVEL', 'WARNING').upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (cli.main)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
