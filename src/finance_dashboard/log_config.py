"""Process-wide logging setup.

Call ``setup()`` once before starting the server so every log line carries
a timestamp and the emitting module's name.
"""
import logging

_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup(level: str = "INFO") -> None:
    """Configure the root logger.

    Args:
        level: Level name such as "INFO" or "DEBUG"; unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=logging.getLevelNamesMapping().get(level.upper(), logging.INFO),
        format=_LOG_FORMAT,
        datefmt=_DATE_FORMAT,
    )
