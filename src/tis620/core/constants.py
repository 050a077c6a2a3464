"""Shared constants for TIS-620 conversion."""

from typing import Optional

# Name used when the codec is registered with Python's codecs machinery
CODEC_NAME = "tis-620-2533"
CODEC_ALIASES = ("tis_620_2533", "tis6202533")

# Substituted for unencodable characters by the lossy encoder
DEFAULT_REPLACEMENT = "?"

# Substituted for unmapped bytes by the lossy decoder
DECODE_REPLACEMENT = "\uFFFD"

# TIS-620 to Unicode mapping (bytes 0x00-0xFF), None marks an unmapped byte
# Source: https://en.wikipedia.org/wiki/Thai_Industrial_Standard_620-2533
TIS620_TO_UNICODE: tuple[Optional[str], ...] = (
    # 0x00-0x7F: ASCII, identity
    *(chr(code) for code in range(0x80)),
    # 0x80-0x9F: unmapped (no C1 controls in TIS-620)
    None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None,
    # 0xA0-0xFF: Thai block, with gaps at 0xA0, 0xDB-0xDE and 0xFC-0xFF
    None, '\u0E01', '\u0E02', '\u0E03', '\u0E04', '\u0E05', '\u0E06', '\u0E07',
    '\u0E08', '\u0E09', '\u0E0A', '\u0E0B', '\u0E0C', '\u0E0D', '\u0E0E', '\u0E0F',
    '\u0E10', '\u0E11', '\u0E12', '\u0E13', '\u0E14', '\u0E15', '\u0E16', '\u0E17',
    '\u0E18', '\u0E19', '\u0E1A', '\u0E1B', '\u0E1C', '\u0E1D', '\u0E1E', '\u0E1F',
    '\u0E20', '\u0E21', '\u0E22', '\u0E23', '\u0E24', '\u0E25', '\u0E26', '\u0E27',
    '\u0E28', '\u0E29', '\u0E2A', '\u0E2B', '\u0E2C', '\u0E2D', '\u0E2E', '\u0E2F',
    '\u0E30', '\u0E31', '\u0E32', '\u0E33', '\u0E34', '\u0E35', '\u0E36', '\u0E37',
    '\u0E38', '\u0E39', '\u0E3A', None, None, None, None, '\u0E3F',
    '\u0E40', '\u0E41', '\u0E42', '\u0E43', '\u0E44', '\u0E45', '\u0E46', '\u0E47',
    '\u0E48', '\u0E49', '\u0E4A', '\u0E4B', '\u0E4C', '\u0E4D', '\u0E4E', '\u0E4F',
    '\u0E50', '\u0E51', '\u0E52', '\u0E53', '\u0E54', '\u0E55', '\u0E56', '\u0E57',
    '\u0E58', '\u0E59', '\u0E5A', '\u0E5B', None, None, None, None,
)
