from __future__ import annotations

from pathlib import Path

from het_huffman.errors import (
    EXIT_CODES,
    EXIT_DECODE,
    EXIT_FORMAT,
    EXIT_PRECONDITION,
    DecodeError,
    FormatError,
    HetError,
    PreconditionError,
    exit_code_info,
    render_exit_codes_markdown,
)


def test_exit_codes_are_unique() -> None:
    codes = [e.code for e in EXIT_CODES]
    names = [e.name for e in EXIT_CODES]
    assert len(set(codes)) == len(codes)
    assert len(set(names)) == len(names)


def test_error_kinds_carry_exit_codes() -> None:
    assert issubclass(FormatError, HetError)
    assert FormatError.exit_code == EXIT_FORMAT
    assert DecodeError.exit_code == EXIT_DECODE
    assert PreconditionError.exit_code == EXIT_PRECONDITION
    assert exit_code_info(EXIT_FORMAT).name == "FORMAT"
    assert exit_code_info(99) is None


def test_exit_codes_doc_is_in_sync() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    doc = repo_root / "docs" / "exit_codes.md"
    assert doc.read_text(encoding="utf-8") == render_exit_codes_markdown()
