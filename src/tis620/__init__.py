"""
tis620: Thai TIS-620 encoding for Python

Convert text between str and the TIS-620 single-byte encoding with a
fixed, verified code table.

Quick Start:
    >>> import tis620
    >>> data = tis620.encode("แมว")
    >>> data
    b'\\xe1\\xc1\\xc7'
    >>> tis620.decode(data)
    'แมว'
    >>> tis620.encode_lossy("42 µs")
    b'42 ?s'

Features:
    - Strict encode/decode that report the position of the first bad unit
    - Lossy variants with configurable replacement and substitution reports
    - Named Thai characters (ThaiChar) valued by their TIS-620 byte
    - Registered Python codec "tis-620-2533" for open() and str.encode()
    - File helpers and a command-line converter
"""

__version__ = "0.1.0"

# Code table and types
from tis620.core.table import CodeTable, TABLE
from tis620.core.chars import ThaiChar, ReplacementChar
from tis620.core.errors import Tis620Error, EncodeError, DecodeError

# Conversion
from tis620.codec.transform import (
    SubstitutionReport,
    decode,
    decode_into,
    decode_lossy,
    decode_lossy_report,
    encode,
    encode_into,
    encode_lossy,
    encode_lossy_report,
)
from tis620.codec.registry import register

# File I/O
from tis620.io.reader import load_text
from tis620.io.writer import save_text

register()

__all__ = [
    # Version
    "__version__",
    # Table and types
    "CodeTable",
    "TABLE",
    "ThaiChar",
    "ReplacementChar",
    # Errors
    "Tis620Error",
    "EncodeError",
    "DecodeError",
    # Conversion
    "SubstitutionReport",
    "encode",
    "encode_into",
    "encode_lossy",
    "encode_lossy_report",
    "decode",
    "decode_into",
    "decode_lossy",
    "decode_lossy_report",
    "register",
    # I/O
    "load_text",
    "save_text",
]
