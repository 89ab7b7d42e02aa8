from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from numbrle.core.records import GameState, GameStats, state_for_day

logger = logging.getLogger(__name__)

STATS_KEY = "numbrle-stats"
STATE_KEY = "numbrle-state"


class KeyValueStore(Protocol):
    def load(self, key: str) -> Optional[Dict[str, Any]]:
        ...

    def save(self, key: str, payload: Dict[str, Any]) -> None:
        ...


class JsonFileStore:
    """Stores each record as ``<directory>/<key>.json``.

    Read and write problems are logged and never raised: a record that
    cannot be read is treated as missing, and a failed write leaves the
    previous file in place.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load %s from %s: %s", key, path, e)
            return None
        if not isinstance(payload, dict):
            logger.warning("Ignoring %s in %s: expected a JSON object", key, path)
            return None
        return payload

    def save(self, key: str, payload: Dict[str, Any]) -> None:
        path = self.path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        try:
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save %s to %s: %s", key, path, e)


class MemoryStore:
    """In-process store; records are copied through JSON like the file store."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def save(self, key: str, payload: Dict[str, Any]) -> None:
        self._data[key] = json.dumps(payload)


def load_stats(store: KeyValueStore) -> GameStats:
    payload = store.load(STATS_KEY)
    if payload is None:
        return GameStats()
    return GameStats.from_dict(payload)


def save_stats(store: KeyValueStore, stats: GameStats) -> None:
    store.save(STATS_KEY, stats.to_dict())


def load_state(store: KeyValueStore, day: int) -> Optional[GameState]:
    """Saved state for *day*, or ``None`` if there is none or it is stale."""
    payload = store.load(STATE_KEY)
    if payload is None:
        return None
    return state_for_day(GameState.from_dict(payload), day)


def save_state(store: KeyValueStore, state: GameState) -> None:
    store.save(STATE_KEY, state.to_dict())
