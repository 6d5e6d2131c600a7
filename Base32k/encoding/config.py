"""
Codec configuration for Base32k.
"""

from dataclasses import dataclass


BYTEORDERS = ("big", "little")


@dataclass
class CodecConfig:
    """
    Settings for the byte-level helpers.

    The word codec itself has no tunables; the range boundaries are fixed
    so that encoded text stays interoperable.
    """

    byteorder: str = "big"

    def validate(self) -> "CodecConfig":
        """Checks the settings, returning self."""
        if self.byteorder not in BYTEORDERS:
            raise ValueError(f"byteorder must be one of {BYTEORDERS}, got {self.byteorder!r}")
        return self

    @property
    def word_dtype(self) -> str:
        """Gets the numpy dtype string for one word in this byte order."""
        return ">u4" if self.byteorder == "big" else "<u4"

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
