"""Countdown software timers driven by a periodic tick."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TIMER_COUNT = 2
"""Number of software timers available by default."""

_MAX_VALUE = 0xFF


@dataclass
class _Timer:
    start_value: int = 0
    manual: bool = False
    value: int = 0


class SoftwareTimers:
    """A fixed set of countdown timers, decremented once per `process` call.

    Each timer counts down from its start value to zero. A timer that has
    reached zero is expired. Timers started without `manual` restart
    themselves from their start value as soon as their expiry is observed
    through `is_expired`.

    Out-of-range timer ids are ignored by `start` and `stop` and are
    reported as expired by `is_expired`.
    """

    def __init__(self, count: int = DEFAULT_TIMER_COUNT) -> None:
        if count < 0:
            raise ValueError("timer count must not be negative")
        self._timers = [_Timer() for _ in range(count)]

    def __len__(self) -> int:
        return len(self._timers)

    def _get(self, timer_id: int) -> _Timer | None:
        if 0 <= timer_id < len(self._timers):
            return self._timers[timer_id]
        return None

    def start(self, timer_id: int, value: int, manual: bool) -> None:
        """Start a timer counting down from `value` ticks."""
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"timer value must be in 0..{_MAX_VALUE}, got {value}")
        timer = self._get(timer_id)
        if timer is None:
            return
        timer.start_value = value
        timer.manual = bool(manual)
        timer.value = value

    def stop(self, timer_id: int) -> None:
        """Stop a timer; it reads as expired afterwards."""
        timer = self._get(timer_id)
        if timer is not None:
            timer.value = 0

    def is_expired(self, timer_id: int) -> bool:
        """Return True if the timer has run down.

        An expired timer that is not manual is restarted from its start value.
        """
        timer = self._get(timer_id)
        if timer is None:
            return True
        if timer.value != 0:
            return False
        if not timer.manual:
            timer.value = timer.start_value
        return True

    def process(self) -> None:
        """Advance every running timer by one tick."""
        for timer in self._timers:
            if timer.value > 0:
                timer.value -= 1