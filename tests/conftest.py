"""Shared fixtures for the tis620 tests."""

import pytest

from tis620.core.table import TABLE

ALL_THAI_CHARS = (
    "กขฃคฅฆงจฉชซฌญฎฏฐฑฒณดตถทธนบปผฝพฟภมยรฤลฦวศษสหฬอฮฯะัาำิีึืฺุู฿เแโใไๅๆ็่้๊๋์ํ๎๏๐๑๒๓๔๕๖๗๘๙๚๛"
)

UNMAPPED_BYTES = (
    list(range(0x80, 0xA1))
    + list(range(0xDB, 0xDF))
    + list(range(0xFC, 0x100))
)


@pytest.fixture(scope="session")
def thai_chars() -> str:
    """Every Thai character TIS-620 can encode, in byte order."""
    return ALL_THAI_CHARS


@pytest.fixture(scope="session")
def mapped_bytes() -> bytes:
    """Every mapped byte value, ascending."""
    return bytes(TABLE.mapped_bytes())


@pytest.fixture(scope="session")
def unmapped_bytes() -> list[int]:
    return UNMAPPED_BYTES
