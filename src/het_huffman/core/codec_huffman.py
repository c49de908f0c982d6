from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from het_huffman.core.codec_base import Codec
from het_huffman.core.het_format import pack_het_header, unpack_het_header
from het_huffman.errors import DecodeError, PreconditionError

_BIT0 = ord("0")
_BIT1 = ord("1")


# -------------------
# Strutture di base Huffman
# -------------------
@dataclass
class HuffmanNode:
    freq: int
    symbol: Optional[int] = None  # 0-255 per foglie, None per interni
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True)
class PairedEncoding:
    """Bitstream senza header + radice dell'albero che serve a decodificarlo."""

    bits: bytes
    root: HuffmanNode


def build_freq_table(data: bytes) -> dict[int, int]:
    freq: dict[int, int] = {}
    for b in data:
        freq[b] = freq.get(b, 0) + 1
    return dict(sorted(freq.items()))


def build_huffman_tree(freq: Mapping[int, int]) -> HuffmanNode:
    """
    Merge greedy su min-heap con chiave (freq, seq).

    Tie-break: le foglie ricevono seq in ordine di simbolo crescente prima di
    qualsiasi merge, i nodi interni al momento della costruzione. A parita' di
    frequenza vince quindi il simbolo piu' piccolo tra foglie, la foglia contro
    un interno, e il primo interno costruito tra interni.
    """
    if not freq:
        raise PreconditionError("tabella delle frequenze vuota: nessun simbolo da codificare")

    heap: list[tuple[int, int, HuffmanNode]] = []
    counter = itertools.count()

    for sym in sorted(freq):
        f = freq[sym]
        if sym < 0 or sym > 0xFF:
            raise PreconditionError(f"simbolo fuori range: {sym}")
        if f <= 0:
            raise PreconditionError(f"frequenza non positiva per il simbolo {sym}: {f}")
        heapq.heappush(heap, (f, next(counter), HuffmanNode(freq=f, symbol=sym)))

    # Caso speciale: un solo simbolo => la foglia e' la radice, nessun merge
    while len(heap) > 1:
        f1, _, n1 = heapq.heappop(heap)
        f2, _, n2 = heapq.heappop(heap)
        parent = HuffmanNode(freq=f1 + f2, symbol=None, left=n1, right=n2)
        heapq.heappush(heap, (parent.freq, next(counter), parent))

    return heap[0][2]


def build_code_table(root: HuffmanNode) -> dict[int, str]:
    # Radice-foglia: codice fisso a un bit
    if root.is_leaf:
        return {root.symbol: "0"}

    codes: dict[int, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        # destra sotto, cosi' la sinistra viene visitata per prima
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))

    return codes


def encode_symbols(data: bytes, codes: Mapping[int, str]) -> bytes:
    """data -> bitstream ASCII ('0'/'1', un byte per bit)."""
    table = {sym: code.encode("ascii") for sym, code in codes.items()}
    try:
        return b"".join(table[b] for b in data)
    except KeyError as e:
        raise PreconditionError(f"simbolo senza codice nella tabella: {e.args[0]}") from None


def decode_bits(bits: bytes, root: Optional[HuffmanNode]) -> bytes:
    """
    Cammina l'albero bit per bit: '0' a sinistra, '1' a destra, emette alla foglia.
    """
    if root is None:
        raise DecodeError("nessun albero disponibile per la decodifica")

    out = bytearray()

    if root.is_leaf:
        # Niente da ramificare: un simbolo per ogni bit
        for pos, bit in enumerate(bits):
            if bit != _BIT0 and bit != _BIT1:
                raise DecodeError(f"carattere non valido nel bitstream (pos {pos}): {bytes([bit])!r}")
            out.append(root.symbol)
        return bytes(out)

    node = root
    for pos, bit in enumerate(bits):
        if bit == _BIT0:
            node = node.left
        elif bit == _BIT1:
            node = node.right
        else:
            raise DecodeError(f"carattere non valido nel bitstream (pos {pos}): {bytes([bit])!r}")
        if node.is_leaf:
            out.append(node.symbol)
            node = root

    if node is not root:
        raise DecodeError("bitstream troncato: codice incompleto alla fine dello stream")

    return bytes(out)


def huffman_encode_paired(data: bytes) -> PairedEncoding:
    freq = build_freq_table(data)
    root = build_huffman_tree(freq)
    codes = build_code_table(root)
    return PairedEncoding(bits=encode_symbols(data, codes), root=root)


def huffman_encode_het(data: bytes) -> bytes:
    """
    Core self-contained: data -> header het + bitstream.
    """
    freq = build_freq_table(data)
    root = build_huffman_tree(freq)
    codes = build_code_table(root)
    return pack_het_header(freq) + encode_symbols(data, codes)


def huffman_decode_het(blob: bytes) -> bytes:
    freq, idx = unpack_het_header(blob)
    root = build_huffman_tree(freq)
    out = decode_bits(blob[idx:], root)

    expected = sum(freq.values())
    if len(out) != expected:
        raise DecodeError(f"attesi {expected} simboli dall'header, decodificati {len(out)}")
    return out


def _require_bytes(data: bytes) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes")
    return bytes(data)


class CodecHuffman(Codec):
    codec_id = "huffman"

    def encode(self, data: bytes) -> bytes:
        return huffman_encode_het(_require_bytes(data))

    def decode(self, blob: bytes) -> bytes:
        return huffman_decode_het(_require_bytes(blob))

    def encode_paired(self, data: bytes) -> PairedEncoding:
        return huffman_encode_paired(_require_bytes(data))

    def decode_paired(self, bits: bytes, root: Optional[HuffmanNode]) -> bytes:
        return decode_bits(_require_bytes(bits), root)
