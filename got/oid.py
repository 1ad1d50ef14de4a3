from __future__ import annotations

import hashlib
import string

from got.errors import InvalidAddress

OID_LENGTH = 40
RAW_LENGTH = 20
HEX_DIGITS = frozenset(string.hexdigits)


def digest(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def hash_content(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


def to_hex(raw: bytes) -> str:
    return raw.hex()


def validate(text: str) -> str:
    if len(text) != OID_LENGTH or not HEX_DIGITS.issuperset(text):
        raise InvalidAddress(f"Not a valid object name {text}")
    return text.lower()


def from_hex(text: str) -> bytes:
    return bytes.fromhex(validate(text))
