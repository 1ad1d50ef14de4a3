from __future__ import annotations

import zlib

from got.errors import CorruptObject


def compress(data: bytes) -> bytes:
    return zlib.compress(data)


def decompress(data: bytes) -> bytes:
    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(data)
    except zlib.error as e:
        raise CorruptObject(f"object is not a valid zlib stream: {e}") from e

    if not decompressor.eof:
        raise CorruptObject("object is a truncated zlib stream")

    return result
