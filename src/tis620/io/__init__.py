"""File I/O for TIS-620 text files."""

from tis620.io.reader import load_text
from tis620.io.writer import save_text

__all__ = ["load_text", "save_text"]
