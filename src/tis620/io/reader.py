"""Load TIS-620 text files."""

from pathlib import Path

from tis620.codec.transform import decode, decode_lossy


def load_text(path: str | Path, lossy: bool = False) -> str:
    """
    Read a TIS-620 file and return its text.

    With ``lossy`` unmapped bytes become U+FFFD; otherwise the first one
    raises ``DecodeError``.
    """
    path = Path(path)

    with open(path, 'rb') as f:
        data = f.read()

    return decode_lossy(data) if lossy else decode(data)
