"""
Base32k - binary-to-text codec

Packs sequences of 32-bit words into normalization-stable Unicode text at
15 bits per character, and decodes them back exactly.
"""

from Base32k.version import __version__

from Base32k.encoding.codec import encode, decode
from Base32k.encoding.batch import encode_batch, decode_batch
from Base32k.encoding.words import encode_bytes, decode_bytes
from Base32k.encoding.config import CodecConfig
from Base32k.errors import Base32kError, InvalidEncoding

from Base32k import encoding
from Base32k import utils

__all__ = [
    "__version__",
    "encode",
    "decode",
    "encode_batch",
    "decode_batch",
    "encode_bytes",
    "decode_bytes",
    "CodecConfig",
    "Base32kError",
    "InvalidEncoding",
    "encoding",
    "utils",
]
