"""Bidirectional TIS-620 code table."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from tis620.core.constants import TIS620_TO_UNICODE
from tis620.utils.logging import get_logger

logger = get_logger(__name__)

TABLE_SIZE = 256
MAX_SCALAR = 0x10FFFF

# charmap_decode treats this code point as "undefined"
_CHARMAP_UNDEFINED = "\ufffe"


@dataclass(frozen=True)
class CodeTable:
    """
    Immutable mapping between the 256 byte values and Unicode scalars.

    ``byte_to_scalar`` is indexed by byte value; ``None`` marks an unmapped
    byte. The reverse mapping is derived at construction and checked to be
    the exact inverse, so no two bytes may share a scalar.
    """
    byte_to_scalar: tuple[Optional[int], ...]
    scalar_to_byte: Mapping[int, int] = field(init=False, repr=False, compare=False)
    _chars: tuple[Optional[str], ...] = field(init=False, repr=False, compare=False)
    _bytes: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        scalars = tuple(self.byte_to_scalar)
        if len(scalars) != TABLE_SIZE:
            raise ValueError(f"Code table must have {TABLE_SIZE} entries, got {len(scalars)}")

        reverse: dict[int, int] = {}
        for byte, scalar in enumerate(scalars):
            if scalar is None:
                continue
            if not 0 <= scalar <= MAX_SCALAR or 0xD800 <= scalar <= 0xDFFF:
                raise ValueError(f"Byte 0x{byte:02X} maps to invalid scalar {scalar:#x}")
            if scalar in reverse:
                raise ValueError(
                    f"Bytes 0x{reverse[scalar]:02X} and 0x{byte:02X} both map to U+{scalar:04X}"
                )
            reverse[scalar] = byte

        # Frozen dataclass: derived fields are set once, here
        object.__setattr__(self, "byte_to_scalar", scalars)
        object.__setattr__(self, "scalar_to_byte", MappingProxyType(reverse))
        object.__setattr__(
            self, "_chars", tuple(None if s is None else chr(s) for s in scalars)
        )
        object.__setattr__(
            self, "_bytes", MappingProxyType({chr(s): b for s, b in reverse.items()})
        )
        logger.debug("Built code table with %d mapped bytes", len(reverse))

    @classmethod
    def from_chars(cls, chars: Iterable[Optional[str]]) -> CodeTable:
        """Build a table from a sequence of 256 characters (or ``None``)."""
        return cls(tuple(None if ch is None else ord(ch) for ch in chars))

    def char_for(self, byte: int) -> Optional[str]:
        """Return the character for ``byte``, or None if it is unmapped."""
        if not 0 <= byte < TABLE_SIZE:
            raise ValueError(f"Byte value must be 0-255, got {byte}")
        return self._chars[byte]

    def byte_for(self, char: str) -> Optional[int]:
        """Return the byte for a single character, or None if it has none."""
        return self.scalar_to_byte.get(ord(char))

    def is_mapped_byte(self, byte: int) -> bool:
        return self.char_for(byte) is not None

    def is_mapped_char(self, char: str) -> bool:
        return self.byte_for(char) is not None

    def mapped_bytes(self) -> Iterator[int]:
        """Iterate over the byte values that have a character, in order."""
        return (byte for byte, ch in enumerate(self._chars) if ch is not None)

    @property
    def decoding_chars(self) -> tuple[Optional[str], ...]:
        """Per-byte characters, indexed by byte value."""
        return self._chars

    @property
    def encoding_bytes(self) -> Mapping[str, int]:
        """Read-only character to byte mapping."""
        return self._bytes

    @property
    def charmap(self) -> str:
        """256-character string in the form ``codecs.charmap_decode`` expects."""
        return "".join(_CHARMAP_UNDEFINED if ch is None else ch for ch in self._chars)

    def __len__(self) -> int:
        """Number of mapped bytes."""
        return len(self.scalar_to_byte)


# Process-wide instance, built once at import
TABLE = CodeTable.from_chars(TIS620_TO_UNICODE)
