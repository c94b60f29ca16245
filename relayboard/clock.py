"""Time of day kept by a periodic tick, with a day counter."""

from __future__ import annotations

import threading
from dataclasses import dataclass

_BYTE = 0xFF
_WORD = 0xFFFF


@dataclass(frozen=True)
class TimeOfDay:
    """A clock reading in hours, minutes, seconds and milliseconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        for name, value, maximum in (
            ("hours", self.hours, _BYTE),
            ("minutes", self.minutes, _BYTE),
            ("seconds", self.seconds, _BYTE),
            ("milliseconds", self.milliseconds, _WORD),
        ):
            if not 0 <= value <= maximum:
                raise ValueError(f"{name} must be in 0..{maximum}, got {value}")


def _is_older_first(ts1: TimeOfDay, ts2: TimeOfDay) -> bool:
    if ts1.hours < ts2.hours:
        return True
    if ts1.minutes > ts2.minutes:
        return True
    if ts1.seconds > ts2.seconds:
        return True
    return ts1.milliseconds > ts2.milliseconds


def time_difference(ts1: TimeOfDay, ts2: TimeOfDay) -> TimeOfDay:
    """Return the difference between two timestamps.

    The older timestamp is chosen by the same field comparisons the board
    firmware uses, and borrows are carried from milliseconds up to hours.
    """
    if _is_older_first(ts1, ts2):
        old, now = ts1, ts2
    else:
        old, now = ts2, ts1

    if now.milliseconds < old.milliseconds:
        ms = 1000 - old.milliseconds + now.milliseconds
        borrow = 1
    else:
        ms = now.milliseconds - old.milliseconds
        borrow = 0

    if now.seconds < old.seconds + borrow:
        s = 60 - old.seconds - borrow + now.seconds
        borrow = 1
    else:
        s = now.seconds - old.seconds - borrow
        borrow = 0

    if now.minutes < old.minutes + borrow:
        m = 60 - old.minutes - borrow + now.minutes
        borrow = 1
    else:
        m = now.minutes - old.minutes - borrow
        borrow = 0

    if now.hours < old.hours + borrow:
        h = 60 - old.hours - borrow + now.hours
    else:
        h = now.hours - old.hours - borrow

    return TimeOfDay(
        hours=h & _BYTE,
        minutes=m & _BYTE,
        seconds=s & _BYTE,
        milliseconds=ms & _WORD,
    )


class Clock:
    """System clock advanced by `process` and a wrapping 8-bit day counter.

    The day counter increases whenever the clock passes midnight and also
    whenever the time is set, so a change of it signals a time change.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._time = TimeOfDay()
        self._day = 0

    @property
    def day(self) -> int:
        """The day counter; it wraps after 255."""
        return self._day

    def set(self, time: TimeOfDay) -> None:
        """Set the clock and advance the day counter."""
        if not isinstance(time, TimeOfDay):
            raise TypeError("time must be a TimeOfDay")
        with self._lock:
            self._time = time
            self._day = (self._day + 1) & _BYTE

    def get(self) -> TimeOfDay:
        """Return the current time."""
        with self._lock:
            return self._time

    def process(self, period: int) -> None:
        """Advance the clock by `period` milliseconds.

        Once a full second is reached the milliseconds restart at zero.
        """
        if not 0 <= period <= _WORD:
            raise ValueError(f"period must be in 0..{_WORD}, got {period}")
        with self._lock:
            t = self._time
            ms = (t.milliseconds + period) & _WORD
            s, m, h = t.seconds, t.minutes, t.hours
            if ms >= 1000:
                ms = 0
                s += 1
                if s >= 60:
                    s = 0
                    m += 1
                    if m >= 60:
                        m = 0
                        h += 1
                        if h >= 24:
                            h = 0
                            self._day = (self._day + 1) & _BYTE
            self._time = TimeOfDay(hours=h, minutes=m, seconds=s, milliseconds=ms)