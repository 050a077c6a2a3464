"""Encoding/decoding between str and TIS-620 bytes."""

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

__all__ = [
    "SubstitutionReport",
    "decode",
    "decode_into",
    "decode_lossy",
    "decode_lossy_report",
    "encode",
    "encode_into",
    "encode_lossy",
    "encode_lossy_report",
    "register",
]
