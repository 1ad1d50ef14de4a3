import pytest

from got import oid
from got.errors import InvalidAddress
from tests.conftest import EMPTY_BLOB_OID, HELLO_OID


def test_it_hashes_the_exact_bytes_given() -> None:
    assert oid.hash_content(b"blob 6\x00hello\n") == HELLO_OID
    assert oid.hash_content(b"blob 0\x00") == EMPTY_BLOB_OID


def test_it_produces_a_twenty_byte_digest() -> None:
    raw = oid.digest(b"")
    assert len(raw) == 20
    assert oid.to_hex(raw) == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_hex_round_trips_through_raw_bytes() -> None:
    assert oid.to_hex(oid.from_hex(HELLO_OID)) == HELLO_OID


def test_it_normalizes_upper_case_hex() -> None:
    assert oid.validate(HELLO_OID.upper()) == HELLO_OID


@pytest.mark.parametrize(
    "text",
    [
        "",
        HELLO_OID[:39],
        HELLO_OID + "0",
        "g" + HELLO_OID[1:],
        " " + HELLO_OID[1:],
        "../" + HELLO_OID[3:],
    ],
)
def test_it_rejects_malformed_addresses(text: str) -> None:
    with pytest.raises(InvalidAddress):
        oid.from_hex(text)
