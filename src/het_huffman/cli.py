"""het-huffman CLI.

This is the stable CLI entrypoint (console-script: ``het-huffman``).

UX policy:
  - encode/decode take an input path and write to ``-o`` or to the configured
    default name (``encoded.txt`` / ``decoded.txt``).
  - ``interactive`` keeps the historical prompt flow (1 - encode, 2 - decode).
  - Diagnostics go to stderr with the ``[het-huffman]`` prefix, results to stdout.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from het_huffman.config import HetConfigV1, load_config
from het_huffman.core.codec_huffman import CodecHuffman
from het_huffman.errors import EXIT_GENERIC, HetError, UsageError
from het_huffman.fileio import read_input, write_output

VERSION = "0.1.0"
PROG = "het-huffman"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        default=None,
        help="Config spec (JSON). Use '@file.json' to load from file, or pass JSON inline.",
    )
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _encode_file(input_path: Path, output_path: Path) -> int:
    data = read_input(input_path)
    write_output(output_path, CodecHuffman().encode(data))
    return 0


def _decode_file(input_path: Path, output_path: Path) -> int:
    blob = read_input(input_path)
    write_output(output_path, CodecHuffman().decode(blob))
    return 0


def _stats_file(input_path: Path, cfg: HetConfigV1, *, as_json: bool) -> int:
    from het_huffman.stats import build_stats_report, render_stats_text

    rep = build_stats_report(
        read_input(input_path),
        baselines=cfg.baselines,
        zlib_level=cfg.zlib_level,
        zstd_level=cfg.zstd_level,
    )
    if as_json:
        print(json.dumps(rep, sort_keys=True, separators=(",", ":")))
    else:
        sys.stdout.write(render_stats_text(rep))
    return 0


def _interactive(cfg: HetConfigV1) -> int:
    print("1 - encode, 2 - decode")
    try:
        choice = input().strip()
        if choice not in {"1", "2"}:
            raise UsageError("Invalid usage.")
        filename = input("Filename: ").strip()
    except EOFError:
        raise UsageError("Invalid usage.") from None

    if not filename:
        raise UsageError("Invalid usage: empty filename.")

    if choice == "1":
        return _encode_file(Path(filename), cfg.encoded_path())
    return _decode_file(Path(filename), cfg.decoded_path())


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG, description="Huffman text codec (het format)")
    p.add_argument("--version", action="version", version=f"{PROG} {VERSION}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_e = sub.add_parser("encode", help="Encode a file into the self-contained het format")
    p_e.add_argument("input", type=Path)
    p_e.add_argument(
        "-o", "--output", type=Path, default=None, help="Output path (default: encoded.txt)"
    )
    _add_common_args(p_e)

    p_d = sub.add_parser("decode", help="Decode a het file")
    p_d.add_argument("input", type=Path)
    p_d.add_argument(
        "-o", "--output", type=Path, default=None, help="Output path (default: decoded.txt)"
    )
    _add_common_args(p_d)

    p_s = sub.add_parser("stats", help="Frequency/code table, entropy and baseline sizes")
    p_s.add_argument("input", type=Path)
    p_s.add_argument("--json", action="store_true", help="Print the report as one JSON line")
    _add_common_args(p_s)

    p_i = sub.add_parser("interactive", help="Prompt for mode (1/2) and filename")
    _add_common_args(p_i)

    p_v = sub.add_parser("config-validate", help="Validate a config spec (v1)")
    p_v.add_argument("spec", help="Config spec JSON (@file.json or inline JSON)")
    _add_common_args(p_v)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        cfg = load_config(ns.config)

        if ns.cmd == "encode":
            return _encode_file(ns.input, ns.output or cfg.encoded_path())
        if ns.cmd == "decode":
            return _decode_file(ns.input, ns.output or cfg.decoded_path())
        if ns.cmd == "stats":
            return _stats_file(ns.input, cfg, as_json=bool(ns.json))
        if ns.cmd == "interactive":
            return _interactive(cfg)
        if ns.cmd == "config-validate":
            # load is the validation
            load_config(str(ns.spec))
            print("OK")
            return 0
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HetError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[{PROG}] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[{PROG}] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
