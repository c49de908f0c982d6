from __future__ import annotations

from pathlib import Path

from het_huffman.errors import FileError


def read_input(path: Path) -> bytes:
    p = Path(path)
    try:
        return p.read_bytes()
    except OSError as e:
        raise FileError(f'Can not open "{p}" for reading: {e.strerror or e}') from e


def write_output(path: Path, data: bytes) -> None:
    p = Path(path)
    try:
        p.write_bytes(data)
    except OSError as e:
        raise FileError(f'Can not open "{p}" for writing: {e.strerror or e}') from e
