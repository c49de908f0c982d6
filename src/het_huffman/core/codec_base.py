from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Codec(ABC):
    """
    Interfaccia minima per codec pluggabili.

    NOTA: teniamo due API distinte:
      - self-contained: l'output porta con se' la tabella delle frequenze
      - paired: l'albero resta in memoria e viaggia accanto al bitstream
    """

    codec_id: str

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Return header + bitstream."""
        raise NotImplementedError

    @abstractmethod
    def decode(self, blob: bytes) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def encode_paired(self, data: bytes) -> Any:
        """Return a handle carrying (bits, root)."""
        raise NotImplementedError

    @abstractmethod
    def decode_paired(self, bits: bytes, root: Any) -> bytes:
        raise NotImplementedError
