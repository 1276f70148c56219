from __future__ import annotations

from martians.const import DECAY_RATE, MIN_DELAY_MS


def decay(delay: float, rate: float = DECAY_RATE, floor: float = MIN_DELAY_MS) -> float:
    """
    One step of the spawn-delay curve: shrink by `rate` unless that would
    reach the floor, in which case the delay stays where it is.
    """
    nxt = delay * rate
    return nxt if nxt > floor else delay


def decay_factor(factor: float, base_delay: float, rate: float = DECAY_RATE,
                 floor: float = MIN_DELAY_MS) -> float:
    """Apply `decay` to the delay `base_delay * factor`, returning the new factor."""
    delay = base_delay * factor
    if decay(delay, rate, floor) != delay:
        return factor * rate
    return factor
