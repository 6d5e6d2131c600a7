from Base32k.utils.logging import get_logger, Base32kLogger

__all__ = [
    "get_logger",
    "Base32kLogger",
]
