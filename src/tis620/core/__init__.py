"""Core code table, character types and errors."""

from tis620.core.table import CodeTable, TABLE
from tis620.core.chars import ThaiChar, ReplacementChar
from tis620.core.errors import Tis620Error, EncodeError, DecodeError

__all__ = [
    "CodeTable",
    "TABLE",
    "ThaiChar",
    "ReplacementChar",
    "Tis620Error",
    "EncodeError",
    "DecodeError",
]
