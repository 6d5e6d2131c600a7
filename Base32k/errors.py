"""
Exceptions raised by Base32k.
"""

from typing import Optional


class Base32kError(Exception):
    """Base class for all Base32k errors."""


class InvalidEncoding(Base32kError, ValueError):
    """
    Raised by the decoder when the text is not a valid base32k encoding.

    Attributes:
        codepoint: The offending codepoint, or None when the text was empty
    """

    def __init__(self, codepoint: Optional[int], message: Optional[str] = None):
        self.codepoint = codepoint
        if message is None:
            if codepoint is None:
                message = "Invalid encoding: missing terminator"
            else:
                message = f"Invalid encoding U+{codepoint:04X}"
        super().__init__(message)
