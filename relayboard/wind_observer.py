"""Wind speed observer that reports changes of the wind level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

MIN_STABLE_TIME = 2
"""Minimum number of cycles a wind speed has to stay in one level."""

SpeedReader = Callable[[], int]
WindEventSender = Callable[["WindLevel", int, int], object]


class WindLevel(IntEnum):
    """Wind speed level."""

    INIT = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VERY_HIGH = 4


@dataclass
class WindConfig:
    """Thresholds and event zone of the wind observation.

    A speed strictly above a threshold reaches that level.
    """

    speed_medium: int
    speed_high: int
    speed_very_high: int
    enabled: bool = True
    zone: int = 0xFF
    sub_zone: int = 0xFF


class WindObserver:
    """Classifies the wind speed and reports each change of level.

    `read_speed` returns the current wind speed. `send_event` is called
    with the new level, the zone and the sub-zone. `config` is read on
    every call of `process`, which is meant to run once per second.
    """

    def __init__(
        self, read_speed: SpeedReader, send_event: WindEventSender, config: WindConfig
    ) -> None:
        self._read_speed = read_speed
        self._send_event = send_event
        self.config = config
        self._level = WindLevel.INIT

    @property
    def level(self) -> WindLevel:
        """The last determined wind level."""
        return self._level

    def _classify(self, speed: int) -> WindLevel:
        config = self.config
        if config.speed_very_high < speed:
            return WindLevel.VERY_HIGH
        if config.speed_high < speed:
            return WindLevel.HIGH
        if config.speed_medium < speed:
            return WindLevel.MEDIUM
        return WindLevel.LOW

    def process(self) -> None:
        """Sample the wind speed once and report a change of level."""
        speed = self._read_speed()
        if not self.config.enabled:
            self._level = WindLevel.INIT
            return
        level = self._classify(speed)
        if level is not self._level:
            self._send_event(level, self.config.zone, self.config.sub_zone)
        self._level = level