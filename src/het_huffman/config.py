"""CLI config spec (v1) for het-huffman.

Goal: make output naming and the `stats` baselines reproducible (CLI, CI).

This module intentionally stays *small* and strict:
  - JSON only
  - explicit schema id
  - unknown keys are rejected
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from het_huffman.errors import ConfigError

SPEC_ID_V1 = "het-huffman.config.v1"

DEFAULT_ENCODED_NAME = "encoded.txt"
DEFAULT_DECODED_NAME = "decoded.txt"
KNOWN_BASELINES: tuple[str, ...] = ("zlib", "zstd")


def _load_json_arg(config_arg: str) -> dict[str, Any]:
    s = config_arg.strip()
    if not s:
        raise ConfigError("config: argomento vuoto")

    if s.startswith("@"):
        p = Path(s[1:]).expanduser()
        if not p.exists() or not p.is_file():
            raise ConfigError(f"config: file non trovato: {p}")
        raw = p.read_text(encoding="utf-8")
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"config: JSON non valido in {p}: {e}") from e
        if not isinstance(obj, dict):
            raise ConfigError(f"config: il JSON in {p} deve essere un oggetto")
        return obj

    try:
        obj = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigError(f"config: JSON inline non valido: {e}") from e
    if not isinstance(obj, dict):
        raise ConfigError("config: il JSON inline deve essere un oggetto")
    return obj


def _optional_name(obj: dict[str, Any], key: str, default: str) -> str:
    if key not in obj:
        return default
    v = obj.get(key)
    if not isinstance(v, str) or not v.strip():
        raise ConfigError(f"config: campo '{key}' deve essere una stringa non vuota")
    name = v.strip()
    if Path(name).name != name:
        raise ConfigError(f"config: campo '{key}' deve essere un nome file, non un path: {name!r}")
    return name


def _optional_level(obj: dict[str, Any], key: str, lo: int, hi: int, default: int) -> int:
    if key not in obj:
        return default
    v = obj.get(key)
    # bool e' un int: lo escludiamo esplicitamente
    if isinstance(v, bool) or not isinstance(v, int):
        raise ConfigError(f"config: campo '{key}' deve essere intero")
    if not (lo <= v <= hi):
        raise ConfigError(f"config: campo '{key}' fuori range {lo}..{hi}: {v}")
    return v


def _optional_baselines(obj: dict[str, Any]) -> tuple[str, ...]:
    if "baselines" not in obj:
        return KNOWN_BASELINES
    v = obj.get("baselines")
    if not isinstance(v, list):
        raise ConfigError("config: 'baselines' deve essere una lista di stringhe")
    out: list[str] = []
    for item in v:
        if not isinstance(item, str) or item.strip().lower() not in KNOWN_BASELINES:
            raise ConfigError(
                f"config: baseline non supportata: {item!r} (ammesse: {', '.join(KNOWN_BASELINES)})"
            )
        name = item.strip().lower()
        if name not in out:
            out.append(name)
    return tuple(out)


@dataclass(frozen=True)
class HetConfigV1:
    """Output naming + stats baselines."""

    encoded_name: str = DEFAULT_ENCODED_NAME
    decoded_name: str = DEFAULT_DECODED_NAME
    output_dir: Path | None = None
    baselines: tuple[str, ...] = KNOWN_BASELINES
    zlib_level: int = 9
    zstd_level: int = 19

    def encoded_path(self) -> Path:
        return (self.output_dir or Path.cwd()) / self.encoded_name

    def decoded_path(self) -> Path:
        return (self.output_dir or Path.cwd()) / self.decoded_name


def load_config(config_arg: str | None) -> HetConfigV1:
    """Load and validate a config spec.

    config_arg:
      - None -> defaults
      - '@file.json'
      - inline JSON object
    """
    if config_arg is None:
        return HetConfigV1()

    obj = _load_json_arg(config_arg)

    allowed = {
        "spec",
        "encoded_name",
        "decoded_name",
        "output_dir",
        "baselines",
        "zlib_level",
        "zstd_level",
    }
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise ConfigError(f"config: chiavi non supportate: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise ConfigError(f"config: spec non supportata: {spec_id!r} (attesa {SPEC_ID_V1!r})")

    output_dir: Path | None = None
    if "output_dir" in obj:
        v = obj.get("output_dir")
        if not isinstance(v, str) or not v.strip():
            raise ConfigError("config: campo 'output_dir' deve essere stringa")
        output_dir = Path(v.strip()).expanduser()

    return HetConfigV1(
        encoded_name=_optional_name(obj, "encoded_name", DEFAULT_ENCODED_NAME),
        decoded_name=_optional_name(obj, "decoded_name", DEFAULT_DECODED_NAME),
        output_dir=output_dir,
        baselines=_optional_baselines(obj),
        zlib_level=_optional_level(obj, "zlib_level", 0, 9, 9),
        zstd_level=_optional_level(obj, "zstd_level", 1, 22, 19),
    )
