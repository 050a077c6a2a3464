"""Tests for file loading and saving."""

import pytest

from tis620 import DecodeError, EncodeError, load_text, save_text


class TestSaveText:
    """save_text encodes before writing."""

    def test_save(self, tmp_path) -> None:
        path = tmp_path / "out.tis"
        assert save_text(path, "แมว") == 3
        assert path.read_bytes() == b'\xe1\xc1\xc7'

    def test_strict_failure_leaves_file(self, tmp_path) -> None:
        path = tmp_path / "out.tis"
        path.write_bytes(b"old")
        with pytest.raises(EncodeError):
            save_text(path, "€")
        assert path.read_bytes() == b"old"

    def test_lossy(self, tmp_path) -> None:
        path = tmp_path / "out.tis"
        save_text(str(path), "42 µs", lossy=True, replacement="m")
        assert path.read_bytes() == b"42 ms"


class TestLoadText:
    """load_text decodes a whole file."""

    def test_load(self, tmp_path) -> None:
        path = tmp_path / "in.tis"
        path.write_bytes(b'\xe1\xc1\xc7')
        assert load_text(path) == "แมว"

    def test_strict_failure(self, tmp_path) -> None:
        path = tmp_path / "in.tis"
        path.write_bytes(b'ok\xfe')
        with pytest.raises(DecodeError) as exc_info:
            load_text(path)
        assert exc_info.value.position == 2

    def test_lossy(self, tmp_path) -> None:
        path = tmp_path / "in.tis"
        path.write_bytes(b'ok\xfe')
        assert load_text(path, lossy=True) == "ok\ufffd"
