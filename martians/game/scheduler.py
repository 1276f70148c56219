from __future__ import annotations
import logging
from typing import Callable, Optional, Protocol, Tuple

from martians.api.config import GameConfig
from martians.game.arena import Arena
from martians.game.difficulty import decay_factor
from martians.game.placement import TargetPlacer
from martians.game.target import Target

logger = logging.getLogger(__name__)


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class TimerHost(Protocol):
    def call_later(self, delay_ms: float, fn: Callable[[], None]) -> Cancellable: ...


class SpawnScheduler:
    """
    Variable-rate spawner. Each tick spawns one martian, shrinks the delay
    and re-arms itself, until the arena fills up to capacity.

    The first martian appears one full initial delay after `start()`.
    """

    def __init__(
        self,
        arena: Arena,
        timers: TimerHost,
        canvas_size: Callable[[], Tuple[int, int]],
        cfg: GameConfig,
        placer: Optional[TargetPlacer] = None,
    ):
        self.arena = arena
        self.timers = timers
        self.canvas_size = canvas_size
        self.cfg = cfg
        self.placer = placer or TargetPlacer(cfg.target_size, seed=cfg.seed)
        self._handle: Optional[Cancellable] = None
        self.ticks = 0

    @property
    def current_delay_ms(self) -> float:
        return self.cfg.base_delay_ms * self.arena.difficulty

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._handle is not None:
            raise RuntimeError("scheduler already started")
        if not self.arena.is_running:
            return
        logger.info("First martian in %.0f ms", self.current_delay_ms)
        self._arm()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self) -> None:
        self._handle = self.timers.call_later(self.current_delay_ms, self.tick)

    def tick(self) -> None:
        self._handle = None
        if not self.arena.is_running:
            return

        # canvas may have been resized since the last tick
        rect = self.placer.place(self.canvas_size())
        target = Target(rect=rect, asset=self.cfg.enemy_asset)
        self.arena.spawn(target)
        self.ticks += 1

        self.arena.set_difficulty(decay_factor(
            self.arena.difficulty, self.cfg.base_delay_ms,
            self.cfg.decay_rate, self.cfg.min_delay_ms))

        logger.debug("spawned martian %d at (%.0f, %.0f); %d live, next delay %.1f ms",
                     target.id, rect.x, rect.y, len(self.arena), self.current_delay_ms)

        if len(self.arena) < self.cfg.capacity:
            self._arm()
        else:
            self.arena.end()
