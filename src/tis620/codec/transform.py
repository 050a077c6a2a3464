"""
Encode and decode between str and TIS-620 bytes.

Strict functions raise on the first unit the table cannot map and return
nothing partial. Lossy functions always succeed, substituting a replacement
for each unmappable unit. Every character is handled as a single Unicode
scalar; combining marks are not grouped with their base.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

from tis620.core.chars import ReplacementChar
from tis620.core.constants import DECODE_REPLACEMENT, DEFAULT_REPLACEMENT
from tis620.core.errors import DecodeError, EncodeError
from tis620.core.table import TABLE
from tis620.utils.logging import get_logger

logger = get_logger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
ReplacementValue = Union[str, bytes, int, ReplacementChar, None]
Replacement = Union[ReplacementValue, Callable[[str], ReplacementValue]]


class TextSink(Protocol):
    def write(self, s: str) -> int: ...


@dataclass(frozen=True)
class SubstitutionReport:
    """Where a lossy conversion replaced (or dropped) input units."""
    positions: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        return len(self.positions)

    @property
    def was_lossy(self) -> bool:
        """True if any unit was substituted."""
        return bool(self.positions)


def _check_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"expected str, not {type(text).__name__}")


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, not str")
    if isinstance(data, bytes):
        return data
    return bytes(memoryview(data))


def _replacement_byte(value: ReplacementValue) -> Optional[int]:
    """Resolve a replacement value to a byte, or None to drop the character."""
    if value is None:
        return None
    if isinstance(value, ReplacementChar):
        return value.byte
    if isinstance(value, bool):
        raise TypeError("replacement must not be a bool")
    if isinstance(value, int):
        replacement = ReplacementChar.from_byte(value)
    elif isinstance(value, bytes):
        if len(value) != 1:
            raise ValueError(f"replacement must be a single byte, got {value!r}")
        replacement = ReplacementChar.from_byte(value[0])
    elif isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"replacement must be a single character, got {value!r}")
        replacement = ReplacementChar.from_char(value)
    else:
        raise TypeError(f"unsupported replacement type: {type(value).__name__}")

    if replacement is None:
        raise ValueError(f"replacement {value!r} has no TIS-620 byte")
    return replacement.byte


def encode(text: str) -> bytes:
    """
    Encode ``text`` as TIS-620.

    Raises:
        EncodeError: for the first character with no TIS-620 byte. The error
            carries the character index and the character.
    """
    _check_text(text)
    lookup = TABLE.encoding_bytes
    result = bytearray()
    for position, ch in enumerate(text):
        byte = lookup.get(ch)
        if byte is None:
            raise EncodeError(position, ch)
        result.append(byte)
    return bytes(result)


def encode_into(text: str, buffer: bytearray) -> int:
    """
    Encode ``text`` and append it to ``buffer``.

    Returns the number of bytes appended. The buffer is not touched when
    encoding fails.
    """
    encoded = encode(text)
    buffer.extend(encoded)
    return len(encoded)


def encode_lossy_report(
    text: str,
    replacement: Replacement = DEFAULT_REPLACEMENT,
) -> tuple[bytes, SubstitutionReport]:
    """
    Encode ``text``, substituting unencodable characters.

    ``replacement`` is an encodable character, a mapped byte value, a
    ``ReplacementChar``, ``None`` (drop the character), or a callable that
    receives each unencodable character and returns one of those.

    Returns:
        Tuple of (encoded bytes, SubstitutionReport)
    """
    _check_text(text)
    per_char = callable(replacement)
    fallback = None if per_char else _replacement_byte(replacement)

    lookup = TABLE.encoding_bytes
    result = bytearray()
    positions: list[int] = []
    for position, ch in enumerate(text):
        byte = lookup.get(ch)
        if byte is None:
            positions.append(position)
            byte = _replacement_byte(replacement(ch)) if per_char else fallback
            if byte is None:
                continue
        result.append(byte)

    if positions:
        logger.debug("Substituted %d unencodable characters", len(positions))
    return bytes(result), SubstitutionReport(tuple(positions))


def encode_lossy(text: str, replacement: Replacement = DEFAULT_REPLACEMENT) -> bytes:
    """Encode ``text``, substituting unencodable characters. Never fails on content."""
    return encode_lossy_report(text, replacement)[0]


def decode(data: BytesLike) -> str:
    """
    Decode TIS-620 bytes.

    Raises:
        DecodeError: for the first unmapped byte, with its offset and value.
    """
    chars = TABLE.decoding_chars
    result = []
    for position, byte in enumerate(_as_bytes(data)):
        ch = chars[byte]
        if ch is None:
            raise DecodeError(position, byte)
        result.append(ch)
    return "".join(result)


def decode_into(data: BytesLike, out: TextSink) -> int:
    """
    Decode ``data`` and write the text to ``out``.

    Returns the number of characters written. Nothing is written when
    decoding fails.
    """
    text = decode(data)
    out.write(text)
    return len(text)


def decode_lossy_report(data: BytesLike) -> tuple[str, SubstitutionReport]:
    """
    Decode ``data``, writing U+FFFD for each unmapped byte.

    Returns:
        Tuple of (decoded text, SubstitutionReport)
    """
    chars = TABLE.decoding_chars
    result = []
    positions: list[int] = []
    for position, byte in enumerate(_as_bytes(data)):
        ch = chars[byte]
        if ch is None:
            positions.append(position)
            ch = DECODE_REPLACEMENT
        result.append(ch)

    if positions:
        logger.debug("Substituted %d unmapped bytes", len(positions))
    return "".join(result), SubstitutionReport(tuple(positions))


def decode_lossy(data: BytesLike) -> str:
    """Decode ``data``, writing U+FFFD for each unmapped byte. Never fails on content."""
    return decode_lossy_report(data)[0]
