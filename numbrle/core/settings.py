from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Optional

import yaml

from numbrle.core.daily import DEFAULT_EPOCH
from numbrle.core.feedback import SHARE_FOOTER

DATA_DIR_ENV = "NUMBRLE_DATA_DIR"


@dataclass(frozen=True)
class Settings:
    title: str = "Numbrle"
    epoch: date = DEFAULT_EPOCH
    share_footer: str = SHARE_FOOTER
    data_dir: Path = Path.home() / ".numbrle"


def default_settings_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


def _parse_epoch(name: str, value: object) -> date:
    # yaml.safe_load already turns an unquoted ISO date into a date.
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{name}: 'epoch' must be an ISO date (YYYY-MM-DD)")


def _text(name: str, raw: dict, key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name}: missing or invalid '{key}'")
    return value.strip()


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from YAML, falling back to defaults for absent keys."""
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping")

    defaults = Settings()
    data_dir = raw.get("data_dir")
    if data_dir is None:
        resolved_dir = defaults.data_dir
    elif isinstance(data_dir, str) and data_dir.strip():
        resolved_dir = Path(data_dir.strip()).expanduser()
    else:
        raise ValueError(f"{path.name}: missing or invalid 'data_dir'")

    return Settings(
        title=_text(path.name, raw, "title", defaults.title),
        epoch=_parse_epoch(path.name, raw.get("epoch", defaults.epoch)),
        share_footer=_text(path.name, raw, "share_footer", defaults.share_footer),
        data_dir=resolved_dir,
    )


def apply_environment(settings: Settings) -> Settings:
    """Let ``NUMBRLE_DATA_DIR`` point storage somewhere else."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return replace(settings, data_dir=Path(override).expanduser())
    return settings
