from __future__ import annotations

import json
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

from lyricconv.song.options import DEFAULT_CREATED_BY, WriteOptions


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lyricconv"
    return Path.home() / ".config" / "lyricconv"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # LRC
    created_by: str

    # WebVTT
    vtt_cue_ids: bool
    vtt_meta_notes: bool

    def write_options(
        self, *, apply_offset: bool = False, add_offset_ms: int = 0, ratio: float = 1.0
    ) -> WriteOptions:
        return WriteOptions(
            apply_offset=apply_offset,
            add_offset_ms=add_offset_ms,
            ratio=ratio,
            created_by=self.created_by,
            cue_ids=self.vtt_cue_ids,
            meta_notes=self.vtt_meta_notes,
        )


def load_config() -> AppConfig:
    # Priority for every key: config.json → LYRICCONV_* env → default
    config_dir = _config_dir()
    data = _load_file(config_dir / "config.json")

    created_by = data.get("created_by") or os.getenv("LYRICCONV_CREATED_BY") or DEFAULT_CREATED_BY

    return AppConfig(
        config_dir=config_dir,
        created_by=str(created_by),
        vtt_cue_ids=_flag(data.get("vtt_cue_ids"), "LYRICCONV_VTT_CUE_IDS", True),
        vtt_meta_notes=_flag(data.get("vtt_meta_notes"), "LYRICCONV_VTT_META_NOTES", False),
    )


def _flag(value: Any, env_name: str, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    raw = os.getenv(env_name)
    if raw is None or not raw.strip():
        return default
    return raw.strip() not in ("0", "false", "False", "no")


def _load_file(cfg_path: Path) -> dict[str, Any]:
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config_value(key: str, value: str | bool) -> None:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _load_file(cfg_path)
    data[key] = value
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
