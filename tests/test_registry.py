"""Tests for the registered Python codec."""

import codecs

import pytest

import tis620
from tis620.codec.registry import codec_search_function, register


class TestCodecLookup:
    """The codec is found under its names."""

    def test_lookup(self) -> None:
        info = codecs.lookup("tis-620-2533")
        assert info.name == "tis-620-2533"

    def test_aliases(self) -> None:
        assert codecs.lookup("TIS_620_2533").name == "tis-620-2533"

    def test_search_function_normalizes_names(self) -> None:
        for name in ("tis-620-2533", "TIS 620 2533", "tis_620_2533", "TIS6202533"):
            info = codec_search_function(name)
            assert info is not None, name
            assert info.name == "tis-620-2533"

    def test_unknown_name(self) -> None:
        assert codec_search_function("tis-620") is None

    def test_register_is_idempotent(self) -> None:
        register()
        register()
        assert "แมว".encode("tis-620-2533") == b'\xe1\xc1\xc7'


class TestCodecBehaviour:
    """The codec agrees with the module functions."""

    def test_encode_decode(self, thai_chars) -> None:
        assert thai_chars.encode("tis-620-2533") == tis620.encode(thai_chars)
        assert tis620.encode(thai_chars).decode("tis-620-2533") == thai_chars

    def test_strict_errors(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            "€".encode("tis-620-2533")
        with pytest.raises(UnicodeDecodeError):
            b'\xdb'.decode("tis-620-2533")

    def test_error_handlers(self) -> None:
        assert "a€".encode("tis-620-2533", errors="replace") == b"a?"
        assert b'a\xdb'.decode("tis-620-2533", errors="replace") == "a\ufffd"
        assert b'a\xdb'.decode("tis-620-2533", errors="ignore") == "a"

    def test_incremental_decoder(self) -> None:
        decoder = codecs.getincrementaldecoder("tis-620-2533")()
        text = decoder.decode(b'\xe1') + decoder.decode(b'\xc1\xc7', final=True)
        assert text == "แมว"

    def test_text_file(self, tmp_path) -> None:
        path = tmp_path / "cat.txt"
        with open(path, "w", encoding="tis-620-2533") as f:
            f.write("แมว\n")
        assert path.read_bytes() == b'\xe1\xc1\xc7\n'
        with open(path, encoding="tis-620-2533") as f:
            assert f.read() == "แมว\n"
