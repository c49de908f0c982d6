"""Mini-report for `het-huffman stats`.

Determinism note:
the report MUST be identical across runs for the same input content, so we do
not embed timestamps or paths. Baselines that are not installed are reported
as None (never silently skipped).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from het_huffman.core.bitpack import pack_bits, unpack_bits
from het_huffman.core.codec_huffman import (
    build_code_table,
    build_freq_table,
    build_huffman_tree,
    encode_symbols,
)
from het_huffman.core.codec_zlib import CodecZlib
from het_huffman.core.codec_zstd import CodecZstd, have_zstd
from het_huffman.core.het_format import pack_het_header
from het_huffman.errors import DecodeError


def _sym_label(sym: int) -> str:
    ch = chr(sym)
    if ch == " ":
        return "' '"
    if 0x21 <= sym <= 0x7E:
        return ch
    return f"\\x{sym:02x}"


def _entropy_bits(freq: dict[int, int], total: int) -> float:
    h = 0.0
    for f in freq.values():
        p = f / total
        h -= p * math.log2(p)
    return h


def _baseline_sizes(
    data: bytes, baselines: Iterable[str], zlib_level: int, zstd_level: int
) -> dict[str, int | None]:
    out: dict[str, int | None] = {}
    for name in baselines:
        if name == "zlib":
            out[name] = len(CodecZlib(level=zlib_level).compress(data))
        elif name == "zstd":
            out[name] = len(CodecZstd(level=zstd_level).compress(data)) if have_zstd() else None
        else:
            raise ValueError(f"baseline non supportata: {name}")
    return out


def build_stats_report(
    data: bytes,
    *,
    baselines: Iterable[str] = ("zlib", "zstd"),
    zlib_level: int = 9,
    zstd_level: int = 19,
) -> dict[str, Any]:
    """Build the report for one input.

    Raises PreconditionError on empty input, like encoding does, and
    DecodeError if the packed bitstream does not unpack to the same bits.
    """
    freq = build_freq_table(data)
    root = build_huffman_tree(freq)
    codes = build_code_table(root)
    bits = encode_symbols(data, codes)
    header = pack_het_header(freq)
    packed, lastbits = pack_bits(bits)
    if unpack_bits(packed, lastbits) != bits:
        raise DecodeError("stats: bitstream impacchettato non reversibile")

    total = len(data)
    encoded_bits = len(bits)

    symbols = [
        {
            "symbol": sym,
            "label": _sym_label(sym),
            "count": freq[sym],
            "code": codes[sym],
        }
        for sym in sorted(freq, key=lambda s: (-freq[s], s))
    ]

    return {
        "schema": "het-huffman.stats.v1",
        "input_bytes": total,
        "distinct_symbols": len(freq),
        "encoded_bits": encoded_bits,
        "header_bytes": len(header),
        "het_bytes": len(header) + encoded_bits,
        "packed_bytes": len(packed),
        "lastbits": lastbits,
        "avg_code_len": encoded_bits / total,
        "entropy_bits": _entropy_bits(freq, total),
        "baselines": _baseline_sizes(data, baselines, zlib_level, zstd_level),
        "symbols": symbols,
    }


def render_stats_text(rep: dict[str, Any]) -> str:
    lines: list[str] = []
    lines.append("het-huffman stats\n")
    lines.append(
        f"input={rep['input_bytes']} B distinct={rep['distinct_symbols']} "
        f"bits={rep['encoded_bits']} packed={rep['packed_bytes']} B het={rep['het_bytes']} B\n"
    )
    lines.append(
        f"avg_code_len={rep['avg_code_len']:.3f} entropy={rep['entropy_bits']:.3f} bits/symbol\n\n"
    )

    lines.append("Baselines\n")
    base = rep.get("baselines") or {}
    if not base:
        lines.append("  (nessuna)\n")
    for name, size in base.items():
        lines.append(f"  {name:6s} {'n/a' if size is None else f'{size} B'}\n")
    lines.append("\n")

    lines.append("Simboli (per frequenza)\n")
    for r in rep["symbols"]:
        lines.append(f"  {r['label']:>6s} count={r['count']:<8d} code={r['code']}\n")

    return "".join(lines)
