"""Python codecs registration for TIS-620.

After ``register()``, ``"แมว".encode("tis-620-2533")`` and
``open(path, encoding="tis-620-2533")`` use the same table as the
module-level functions, with the usual ``errors=`` handlers.
"""

import codecs
import threading
from typing import Optional

from tis620.core.constants import CODEC_ALIASES, CODEC_NAME
from tis620.core.table import TABLE
from tis620.utils.logging import get_logger

logger = get_logger(__name__)

decoding_table = TABLE.charmap
encoding_table = codecs.charmap_build(decoding_table)


class Codec(codecs.Codec):

    def encode(self, input, errors='strict'):
        return codecs.charmap_encode(input, errors, encoding_table)

    def decode(self, input, errors='strict'):
        return codecs.charmap_decode(input, errors, decoding_table)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):
        return codecs.charmap_encode(input, self.errors, encoding_table)[0]


class IncrementalDecoder(codecs.IncrementalDecoder):
    def decode(self, input, final=False):
        return codecs.charmap_decode(input, self.errors, decoding_table)[0]


class StreamReader(Codec, codecs.StreamReader):
    pass


class StreamWriter(Codec, codecs.StreamWriter):
    pass


def getregentry() -> codecs.CodecInfo:
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def codec_search_function(encoding_name: str) -> Optional[codecs.CodecInfo]:
    # codecs.lookup already folds hyphens and spaces to underscores; direct
    # callers may not
    normalized = encoding_name.lower().replace("-", "_").replace(" ", "_")
    if normalized in CODEC_ALIASES:
        return getregentry()
    return None


_lock = threading.Lock()
_registered = False


def register() -> None:
    """Register the codec search function once per process."""
    global _registered
    with _lock:
        if _registered:
            return
        codecs.register(codec_search_function)
        _registered = True
    logger.debug("Registered codec %s", CODEC_NAME)
