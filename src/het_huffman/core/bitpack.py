from __future__ import annotations

from het_huffman.errors import DecodeError

_BIT0 = ord("0")
_BIT1 = ord("1")


def pack_bits(bits: bytes) -> tuple[bytes, int]:
    """
    bitstream ASCII -> (bytes MSB-first, lastbits)
    lastbits = numero di bit validi nell'ultimo byte (1..8) oppure 0 se vuoto.
    """
    if not bits:
        return b"", 0

    out_bytes = bytearray()
    current_byte = 0
    bit_count = 0

    for pos, ch in enumerate(bits):
        if ch == _BIT0:
            bit = 0
        elif ch == _BIT1:
            bit = 1
        else:
            raise DecodeError(f"carattere non valido nel bitstream (pos {pos}): {bytes([ch])!r}")
        current_byte = (current_byte << 1) | bit
        bit_count += 1
        if bit_count == 8:
            out_bytes.append(current_byte)
            current_byte = 0
            bit_count = 0

    if bit_count > 0:
        current_byte = current_byte << (8 - bit_count)
        out_bytes.append(current_byte)
        lastbits = bit_count
    else:
        lastbits = 8  # tutti i byte pieni

    return bytes(out_bytes), lastbits


def unpack_bits(packed: bytes, lastbits: int) -> bytes:
    if not packed:
        if lastbits != 0:
            raise DecodeError("lastbits != 0 con payload vuoto")
        return b""
    if not (1 <= lastbits <= 8):
        raise DecodeError(f"lastbits fuori range: {lastbits}")

    out = bytearray()
    total_bytes = len(packed)
    for i, byte in enumerate(packed):
        bits_in_this_byte = lastbits if i == total_bytes - 1 else 8
        for bit_index in range(bits_in_this_byte):
            out.append(_BIT1 if (byte >> (7 - bit_index)) & 1 else _BIT0)
    return bytes(out)
