from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from numbrle.core.validation import MAX_GUESSES

logger = logging.getLogger(__name__)


def _default_distribution() -> List[int]:
    return [0] * MAX_GUESSES


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass
class GameStats:
    """Lifetime statistics, updated once per finished game."""

    played: int = 0
    won: int = 0
    streak: int = 0
    max_streak: int = 0
    guess_distribution: List[int] = field(default_factory=_default_distribution)
    last_day: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "played": self.played,
            "won": self.won,
            "streak": self.streak,
            "maxStreak": self.max_streak,
            "guessDistribution": list(self.guess_distribution),
            "lastDay": self.last_day,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameStats":
        raw = payload.get("guessDistribution")
        distribution = _default_distribution()
        if isinstance(raw, list):
            for i, count in enumerate(raw[:MAX_GUESSES]):
                distribution[i] = _as_int(count)
        return cls(
            played=_as_int(payload.get("played", 0)),
            won=_as_int(payload.get("won", 0)),
            streak=_as_int(payload.get("streak", 0)),
            max_streak=_as_int(payload.get("maxStreak", 0)),
            guess_distribution=distribution,
            last_day=_as_int(payload.get("lastDay", 0)),
        )


@dataclass
class GameState:
    """Progress on one day's puzzle."""

    day: int
    guesses: List[str] = field(default_factory=list)
    finished: bool = False
    won: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "guesses": list(self.guesses),
            "finished": self.finished,
            "won": self.won,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> Optional["GameState"]:
        guesses = payload.get("guesses", [])
        if "day" not in payload or not isinstance(guesses, list):
            return None
        return cls(
            day=_as_int(payload["day"]),
            guesses=[str(g) for g in guesses][:MAX_GUESSES],
            finished=bool(payload.get("finished", False)),
            won=bool(payload.get("won", False)),
        )


def record_game(stats: GameStats, day: int, won: bool, guess_count: int) -> GameStats:
    """Return *stats* updated with one finished game on *day*.

    A win extends the streak only when the previous finished game was
    yesterday, or when nothing has been finished before. A loss resets it.
    """
    distribution = list(stats.guess_distribution)
    played = stats.played + 1
    wins = stats.won
    if won:
        wins += 1
        continued = stats.last_day == day - 1 or stats.last_day == 0
        streak = stats.streak + 1 if continued else 1
        if 1 <= guess_count <= MAX_GUESSES:
            distribution[guess_count - 1] += 1
    else:
        streak = 0
    logger.info("Day %d finished: won=%s in %d guesses", day, won, guess_count)
    return replace(
        stats,
        played=played,
        won=wins,
        streak=streak,
        max_streak=max(stats.max_streak, streak),
        guess_distribution=distribution,
        last_day=day,
    )


def state_for_day(state: Optional[GameState], day: int) -> Optional[GameState]:
    """Drop a saved state that belongs to another day."""
    if state is None or state.day != day:
        return None
    return state


def win_percentage(stats: GameStats) -> int:
    if not stats.played:
        return 0
    # Half rounds up (12.5 -> 13), unlike round().
    return int(stats.won * 100 / stats.played + 0.5)
