from __future__ import annotations

import pytest

from het_huffman.core.bitpack import pack_bits, unpack_bits
from het_huffman.errors import DecodeError


def test_pack_vectors() -> None:
    assert pack_bits(b"") == (b"", 0)
    assert pack_bits(b"11100") == (b"\xe0", 5)
    assert pack_bits(b"01101110") == (b"\x6e", 8)
    assert pack_bits(b"011011101") == (b"\x6e\x80", 1)


def test_unpack_vectors() -> None:
    assert unpack_bits(b"", 0) == b""
    assert unpack_bits(b"\xe0", 5) == b"11100"
    assert unpack_bits(b"\x6e\x80", 1) == b"011011101"


def test_pack_unpack_abracadabra_bits() -> None:
    bits = b"01101110100010101101110"
    packed, lastbits = pack_bits(bits)
    assert len(packed) == 3
    assert lastbits == 7
    assert unpack_bits(packed, lastbits) == bits


def test_pack_rejects_non_bits() -> None:
    with pytest.raises(DecodeError, match="non valido"):
        pack_bits(b"0120")


@pytest.mark.parametrize("packed, lastbits", [(b"", 3), (b"\x00", 0), (b"\x00", 9)])
def test_unpack_rejects_bad_lastbits(packed: bytes, lastbits: int) -> None:
    with pytest.raises(DecodeError):
        unpack_bits(packed, lastbits)
