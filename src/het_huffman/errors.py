"""Typed errors for het-huffman.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_FILE = 11
EXIT_FORMAT = 12
EXIT_DECODE = 13
EXIT_PRECONDITION = 14


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid config spec, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_FILE, "FILE", "Input file cannot be read or output file cannot be written"),
    ExitCodeInfo(EXIT_FORMAT, "FORMAT", "Malformed het header (sentinel, separator, count)"),
    ExitCodeInfo(EXIT_DECODE, "DECODE", "Bit stream truncated/corrupt, or no tree to decode against"),
    ExitCodeInfo(EXIT_PRECONDITION, "PRECONDITION", "Empty input: no symbols to build a tree from"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/het_huffman/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- All internal errors extend `HetError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HetError(Exception):
    """Base error for het-huffman."""

    exit_code: int = EXIT_GENERIC


class UsageError(HetError):
    exit_code = EXIT_USAGE


class ConfigError(UsageError):
    pass


class FileError(HetError):
    exit_code = EXIT_FILE


class FormatError(HetError):
    """Malformed self-contained header."""

    exit_code = EXIT_FORMAT


class DecodeError(HetError):
    exit_code = EXIT_DECODE


class PreconditionError(HetError):
    exit_code = EXIT_PRECONDITION
