from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from numbrle.core.daily import DEFAULT_EPOCH, DateLike, daily_target, day_number
from numbrle.core.feedback import (
    SHARE_FOOTER,
    CellState,
    keyboard_states,
    score_guess,
    share_text,
)
from numbrle.core.records import GameState, GameStats, record_game
from numbrle.core.storage import (
    KeyValueStore,
    load_state,
    load_stats,
    save_state,
    save_stats,
)
from numbrle.core.validation import MAX_GUESSES, validate_guess

logger = logging.getLogger(__name__)


@dataclass
class GuessOutcome:
    """Result of submitting one guess."""

    accepted: bool
    reason: Optional[str] = None
    cells: List[CellState] = field(default_factory=list)
    finished: bool = False
    won: bool = False


class GameSession:
    """Today's puzzle: target, accepted guesses and lifetime statistics.

    The session is bound to a single calendar day, fixed when it is created.
    Saved progress for any other day is ignored, and every accepted guess is
    written back to *store* straight away. Statistics are updated exactly
    once, when the game finishes.
    """

    def __init__(
        self,
        store: KeyValueStore,
        today: Optional[DateLike] = None,
        epoch: DateLike = DEFAULT_EPOCH,
        share_footer: str = SHARE_FOOTER,
    ) -> None:
        self._store = store
        self._today = today if today is not None else date.today()
        self._target = daily_target(self._today)
        self._day = day_number(self._today, epoch)
        self._share_footer = share_footer

        saved = load_state(store, self._day)
        self._restored = saved is not None
        self._state = saved if saved is not None else GameState(day=self._day)
        self._stats = load_stats(store)
        logger.debug(
            "Session for day %d (target %d), restored=%s",
            self._day,
            self._target,
            self._restored,
        )

    @property
    def target(self) -> int:
        return self._target

    @property
    def day(self) -> int:
        return self._day

    @property
    def guesses(self) -> List[str]:
        return list(self._state.guesses)

    @property
    def finished(self) -> bool:
        return self._state.finished

    @property
    def won(self) -> bool:
        return self._state.won

    @property
    def stats(self) -> GameStats:
        return self._stats

    @property
    def is_first_visit(self) -> bool:
        """True when nothing is saved for today and no game was ever played."""
        return not self._restored and self._stats.played == 0

    def submit(self, guess: str) -> GuessOutcome:
        """Validate *guess* and, if it is a true equation, record it."""
        if self._state.finished:
            return GuessOutcome(
                accepted=False,
                reason="Game is already finished",
                finished=True,
                won=self._state.won,
            )

        result = validate_guess(guess, self._target)
        if not result.valid:
            return GuessOutcome(accepted=False, reason=result.reason)

        # A valid guess is a correct one.
        self._state.guesses.append(guess)
        won = True
        finished = won or len(self._state.guesses) >= MAX_GUESSES
        self._state.finished = finished
        self._state.won = won

        if finished:
            self._stats = record_game(
                self._stats, self._day, won, len(self._state.guesses)
            )
            save_stats(self._store, self._stats)
        save_state(self._store, self._state)

        return GuessOutcome(
            accepted=True,
            cells=score_guess(guess, self._target),
            finished=finished,
            won=won,
        )

    def rows(self) -> List[List[CellState]]:
        return [score_guess(g, self._target) for g in self._state.guesses]

    def keyboard(self) -> Dict[str, CellState]:
        return keyboard_states(self._state.guesses, self._target)

    def share(self) -> str:
        return share_text(
            self._state.guesses, self._target, self._day, self._share_footer
        )
