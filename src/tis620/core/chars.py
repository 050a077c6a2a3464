"""Named Thai characters and lossy-encoding replacement bytes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from tis620.core.table import TABLE


class ThaiChar(IntEnum):
    """
    Thai characters of TIS-620, valued by their byte.

    Names follow the Unicode character names of the Thai block.
    """
    # Consonants
    KO_KAI = 0xA1
    KHO_KHAI = 0xA2
    KHO_KHUAT = 0xA3
    KHO_KHWAI = 0xA4
    KHO_KHON = 0xA5
    KHO_RAKHANG = 0xA6
    NGO_NGU = 0xA7
    CHO_CHAN = 0xA8
    CHO_CHING = 0xA9
    CHO_CHANG = 0xAA
    SO_SO = 0xAB
    CHO_CHOE = 0xAC
    YO_YING = 0xAD
    DO_CHADA = 0xAE
    TO_PATAK = 0xAF
    THO_THAN = 0xB0
    THO_NANGMONTHO = 0xB1
    THO_PHUTHAO = 0xB2
    NO_NEN = 0xB3
    DO_DEK = 0xB4
    TO_TAO = 0xB5
    THO_THUNG = 0xB6
    THO_THAHAN = 0xB7
    THO_THONG = 0xB8
    NO_NU = 0xB9
    BO_BAIMAI = 0xBA
    PO_PLA = 0xBB
    PHO_PHUNG = 0xBC
    FO_FA = 0xBD
    PHO_PHAN = 0xBE
    FO_FAN = 0xBF
    PHO_SAMPHAO = 0xC0
    MO_MA = 0xC1
    YO_YAK = 0xC2
    RO_RUA = 0xC3
    RU = 0xC4
    LO_LING = 0xC5
    LU = 0xC6
    WO_WAEN = 0xC7
    SO_SALA = 0xC8
    SO_RUSI = 0xC9
    SO_SUA = 0xCA
    HO_HIP = 0xCB
    LO_CHULA = 0xCC
    O_ANG = 0xCD
    HO_NOKHUK = 0xCE
    # Signs and vowels
    PAIYANNOI = 0xCF
    SARA_A = 0xD0
    MAI_HAN_AKAT = 0xD1
    SARA_AA = 0xD2
    SARA_AM = 0xD3
    SARA_I = 0xD4
    SARA_II = 0xD5
    SARA_UE = 0xD6
    SARA_UEE = 0xD7
    SARA_U = 0xD8
    SARA_UU = 0xD9
    PHINTHU = 0xDA
    # Currency symbol
    BAHT = 0xDF
    # Leading vowels, tone marks and diacritics
    SARA_E = 0xE0
    SARA_AE = 0xE1
    SARA_O = 0xE2
    SARA_AI_MAIMUAN = 0xE3
    SARA_AI_MAIMALAI = 0xE4
    LAKKHANGYAO = 0xE5
    MAIYAMOK = 0xE6
    MAITAIKHU = 0xE7
    MAI_EK = 0xE8
    MAI_THO = 0xE9
    MAI_TRI = 0xEA
    MAI_CHATTAWA = 0xEB
    THANTHAKHAT = 0xEC
    NIKHAHIT = 0xED
    YAMAKKAN = 0xEE
    FONGMAN = 0xEF
    # Digits
    ZERO = 0xF0
    ONE = 0xF1
    TWO = 0xF2
    THREE = 0xF3
    FOUR = 0xF4
    FIVE = 0xF5
    SIX = 0xF6
    SEVEN = 0xF7
    EIGHT = 0xF8
    NINE = 0xF9
    # Punctuation
    ANGKHANKHU = 0xFA
    KHOMUT = 0xFB

    @property
    def byte(self) -> int:
        return int(self)

    @property
    def char(self) -> str:
        return TABLE.char_for(self.value)

    @classmethod
    def from_char(cls, ch: str) -> Optional[ThaiChar]:
        """Return the member for ``ch``, or None if it is not a Thai TIS-620 character."""
        byte = TABLE.byte_for(ch)
        if byte is None or byte < 0x80:
            return None
        return cls(byte)

    @classmethod
    def from_byte(cls, byte: int) -> Optional[ThaiChar]:
        """Return the member for ``byte``, or None if it is not a Thai byte."""
        try:
            return cls(byte)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class ReplacementChar:
    """A byte the lossy encoder writes in place of an unencodable character."""
    byte: int

    def __post_init__(self) -> None:
        if not 0 <= self.byte <= 0xFF or not TABLE.is_mapped_byte(self.byte):
            raise ValueError(f"Replacement must be a mapped TIS-620 byte, got {self.byte!r}")

    @classmethod
    def from_char(cls, ch: str) -> Optional[ReplacementChar]:
        """Build a replacement from an encodable character, or None if it has no byte."""
        byte = TABLE.byte_for(ch)
        if byte is None:
            return None
        return cls(byte)

    @classmethod
    def from_byte(cls, byte: int) -> Optional[ReplacementChar]:
        """Build a replacement from a byte value, or None if the byte is unmapped."""
        if not 0 <= byte <= 0xFF or not TABLE.is_mapped_byte(byte):
            return None
        return cls(byte)

    @property
    def char(self) -> str:
        return TABLE.char_for(self.byte)
