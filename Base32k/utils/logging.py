import logging
import sys
from typing import Optional

class Base32kLogger:
    def __init__(self, name: str = "Base32k", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.handler = logging.StreamHandler(sys.stdout)
        self.handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        self.set_level(level)

        if not self.logger.hasHandlers():
            self.logger.addHandler(self.handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
        self.handler.setLevel(level)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def is_debug(self) -> bool:
        """Checks whether debug messages would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)


_logger: Optional[Base32kLogger] = None

def get_logger(level: Optional[int] = None) -> Base32kLogger:
    """
    Gets the process-wide codec logger.

    The codec itself never changes the level; pass `level` to set it.
    """
    global _logger
    if _logger is None:
        _logger = Base32kLogger()
    if level is not None:
        _logger.set_level(level)
    return _logger
