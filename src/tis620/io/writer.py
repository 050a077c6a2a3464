"""Save TIS-620 text files."""

from pathlib import Path

from tis620.codec.transform import Replacement, encode, encode_lossy
from tis620.core.constants import DEFAULT_REPLACEMENT


def save_text(
    path: str | Path,
    text: str,
    lossy: bool = False,
    replacement: Replacement = DEFAULT_REPLACEMENT,
) -> int:
    """
    Encode ``text`` as TIS-620 and write it to ``path``.

    The text is encoded before the file is opened, so a strict failure
    leaves any existing file untouched. Returns the number of bytes written.
    """
    path = Path(path)

    data = encode_lossy(text, replacement) if lossy else encode(text)

    with open(path, 'wb') as f:
        f.write(data)
    return len(data)
