from __future__ import annotations

from dataclasses import dataclass

try:
    import zstandard as zstd  # type: ignore
except Exception:  # pragma: no cover
    zstd = None


def have_zstd() -> bool:
    return zstd is not None


@dataclass
class CodecZstd:
    """
    Baseline zstd per il report `stats` (lavora su bytes grezzi).

    Frame "tight": niente content size e niente checksum, cosi' il confronto
    con il bitstream Huffman impacchettato non paga overhead di framing.
    """

    level: int = 19
    codec_id: str = "zstd"

    def _require(self) -> None:
        if zstd is None:
            raise RuntimeError(
                "Modulo 'zstandard' non disponibile. Installa con: python3 -m pip install zstandard"
            )

    def compress(self, data: bytes) -> bytes:
        self._require()
        c = zstd.ZstdCompressor(
            level=int(self.level),
            write_content_size=False,
            write_checksum=False,
        )
        return c.compress(bytes(data))
