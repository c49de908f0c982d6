"""Header "het" (formato self-contained).

Layout (bytes):

    het\\n
    <simbolo><spazio><conteggio decimale>\\n     (uno per simbolo, ordine crescente)
    ...
    het\\n
    <bit '0'/'1' in ASCII>

Il simbolo e' un byte grezzo qualsiasi (anche ' ', '\\n' o 'h'): la riga di un
simbolo 'h' e' sempre "h <n>", quindi non si confonde con la sentinella.
"""

from __future__ import annotations

from collections.abc import Mapping

from het_huffman.errors import FormatError, PreconditionError

HET_SENTINEL = b"het"
_SENTINEL_LINE = HET_SENTINEL + b"\n"
_SPACE = 0x20
# 20 cifre coprono qualsiasi conteggio u64
_MAX_COUNT_DIGITS = 20


def is_het(blob: bytes) -> bool:
    return bytes(blob[: len(_SENTINEL_LINE)]) == _SENTINEL_LINE


def pack_het_header(freq: Mapping[int, int]) -> bytes:
    out = bytearray(_SENTINEL_LINE)
    for sym in sorted(freq):
        f = freq[sym]
        if sym < 0 or sym > 0xFF:
            raise PreconditionError(f"simbolo fuori range per header het: {sym}")
        if f <= 0:
            raise PreconditionError(f"frequenza non positiva per il simbolo {sym}: {f}")
        out.append(sym)
        out.append(_SPACE)
        out += str(int(f)).encode("ascii")
        out += b"\n"
    out += _SENTINEL_LINE
    return bytes(out)


def unpack_het_header(blob: bytes) -> tuple[dict[int, int], int]:
    """
    Ritorna (freq, idx): idx e' l'offset del primo byte del bitstream.
    Qualsiasi deviazione dal layout solleva FormatError.
    """
    if not is_het(blob):
        raise FormatError("sentinella di apertura 'het' mancante")

    freq: dict[int, int] = {}
    idx = len(_SENTINEL_LINE)
    n = len(blob)

    while True:
        if idx >= n:
            raise FormatError("header troncato: sentinella di chiusura 'het' mancante")
        if bytes(blob[idx : idx + len(_SENTINEL_LINE)]) == _SENTINEL_LINE:
            return freq, idx + len(_SENTINEL_LINE)

        sym = blob[idx]
        if idx + 1 >= n:
            raise FormatError(f"header troncato dopo il simbolo {bytes([sym])!r}")
        if blob[idx + 1] != _SPACE:
            raise FormatError(f"atteso spazio dopo il simbolo {bytes([sym])!r}")
        idx += 2

        end = blob.find(b"\n", idx)
        if end < 0:
            raise FormatError(f"conteggio troncato per il simbolo {bytes([sym])!r}")
        digits = bytes(blob[idx:end])
        if not digits or not digits.isdigit():
            raise FormatError(f"conteggio non numerico per il simbolo {bytes([sym])!r}: {digits!r}")
        if len(digits) > _MAX_COUNT_DIGITS:
            raise FormatError(
                f"conteggio troppo lungo per il simbolo {bytes([sym])!r}: {len(digits)} cifre"
            )
        try:
            count = int(digits)
        except ValueError as e:
            raise FormatError(f"conteggio non valido per il simbolo {bytes([sym])!r}") from e
        if count == 0:
            raise FormatError(f"conteggio nullo per il simbolo {bytes([sym])!r}")
        if sym in freq:
            raise FormatError(f"simbolo duplicato nell'header: {bytes([sym])!r}")

        freq[sym] = count
        idx = end + 1
