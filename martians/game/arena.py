from __future__ import annotations
import logging
import math
from typing import Callable, Dict, Tuple

from martians.game.target import Target

logger = logging.getLogger(__name__)


class Arena:
    """
    Aggregate game state: live targets in spawn order, score, difficulty
    factor and the running flag.

    Once `end()` has been called the arena is frozen: spawns are dropped
    and hits are ignored. There is no way back to running.

    Not thread-safe; all mutation is expected to happen on the host loop.
    """

    def __init__(self, difficulty: float = 1.0):
        self._targets: Dict[int, Target] = {}
        self._score = 0
        self._running = True
        self._difficulty = 1.0
        self.set_difficulty(difficulty)

    # ------------- accessors -------------
    @property
    def score(self) -> int:
        return self._score

    @property
    def difficulty(self) -> float:
        return self._difficulty

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def target_count(self) -> int:
        return len(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def list_targets(self) -> Tuple[Target, ...]:
        return tuple(self._targets.values())

    # ------------- mutation -------------
    def spawn(self, target: Target) -> bool:
        if not self._running:
            logger.debug("spawn of target %d dropped: game over", target.id)
            return False
        self._targets[target.id] = target
        return True

    def remove_first_match(self, predicate: Callable[[Target], bool]) -> bool:
        """Remove the oldest target satisfying `predicate`; True if one was removed."""
        for tid, target in self._targets.items():
            if predicate(target):
                del self._targets[tid]
                return True
        return False

    def award_point(self) -> None:
        self._score += 1

    def set_difficulty(self, value: float) -> None:
        value = float(value)
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"difficulty must be finite and > 0, got {value}")
        self._difficulty = value

    def end(self) -> None:
        if self._running:
            self._running = False
            logger.info("Game over with %d martians on screen, final score %d",
                        len(self._targets), self._score)
