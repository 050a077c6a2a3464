"""Exceptions raised by strict encoding and decoding."""


class Tis620Error(ValueError):
    """Base class for TIS-620 conversion errors."""
    pass


class EncodeError(Tis620Error):
    """A character has no TIS-620 byte."""

    def __init__(self, position: int, character: str):
        self.position = position
        self.character = character
        super().__init__(position, character)

    @property
    def scalar(self) -> int:
        """Unicode scalar value of the offending character."""
        return ord(self.character)

    def __str__(self) -> str:
        return (
            f"{self.character!r} (U+{self.scalar:04X}) at position {self.position} "
            "is invalid TIS-620 character."
        )


class DecodeError(Tis620Error):
    """A byte has no character in TIS-620."""

    def __init__(self, position: int, byte: int):
        self.position = position
        self.byte = byte
        super().__init__(position, byte)

    def __str__(self) -> str:
        return f"0x{self.byte:02X} at position {self.position} is invalid TIS-620 byte."
