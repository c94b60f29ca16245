"""Shutter driver switching a power relay and a direction relay per shutter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional

SHUTTER_COUNT = 4
"""Number of shutters handled by default."""

PROCESS_PERIOD_MS = 10
"""Period in milliseconds at which `ShutterDriver.process` is expected to run."""

WAIT_CYCLES_TO_POWER = 100 // PROCESS_PERIOD_MS
"""Cycles between setting the direction relay and switching on power."""

WAIT_CYCLES_TO_REMOVE_DIR = 100 // PROCESS_PERIOD_MS
"""Cycles between switching off power and releasing the direction relay."""

_BYTE = 0xFF


class Direction(IntEnum):
    """Drive direction of a shutter."""

    STOP = 0
    UP = 1
    DOWN = 2


class _Phase(Enum):
    STOPPED = 0
    DIR = 1
    POWER = 2
    DRIVE = 3
    REMOVE_POWER = 4
    REMOVE_DIR = 5


RelaySwitch = Callable[[int, bool], object]
ShutterCallback = Callable[[int, Direction, bool], object]


@dataclass
class _Shutter:
    enabled: bool = False
    relay_power: int = 0
    relay_dir: int = 0
    callback: Optional[ShutterCallback] = None
    phase: _Phase = _Phase.STOPPED
    direction: Direction = Direction.STOP
    next_direction: Direction = Direction.STOP
    wait_cycles: int = 0

    @property
    def configured(self) -> bool:
        return self.relay_power != self.relay_dir


class ShutterDriver:
    """Drives shutters, each through a power relay and a direction relay.

    `relay_activate(relay, on)` switches a relay. A direction relay that is
    on means down, off means up. Power is applied only after the direction
    relay has settled and removed before the direction relay is released.

    Shutter numbers out of range are ignored by `enable` and `drive`, and
    report `Direction.STOP` from `drive_direction`.
    """

    def __init__(self, relay_activate: RelaySwitch, count: int = SHUTTER_COUNT) -> None:
        if count < 0:
            raise ValueError("shutter count must not be negative")
        self._relay_activate = relay_activate
        self._shutters = [_Shutter() for _ in range(count)]

    def __len__(self) -> int:
        return len(self._shutters)

    def _get(self, nr: int) -> Optional[_Shutter]:
        if 0 <= nr < len(self._shutters):
            return self._shutters[nr]
        return None

    def configure(
        self,
        nr: int,
        relay_power: int,
        relay_dir: int,
        callback: Optional[ShutterCallback] = None,
    ) -> None:
        """Assign the power and direction relays and the drive callback.

        The callback is called with the shutter number, the direction and
        whether the shutter starts (True) or stops (False) driving.
        """
        shutter = self._get(nr)
        if shutter is None:
            raise ValueError(f"invalid shutter number {nr}")
        if relay_power == relay_dir:
            raise ValueError("power and direction relay must differ")
        for name, relay in (("power relay", relay_power), ("direction relay", relay_dir)):
            if not 0 <= relay <= _BYTE:
                raise ValueError(f"{name} must be in 0..{_BYTE}, got {relay}")
        shutter.relay_power = relay_power
        shutter.relay_dir = relay_dir
        shutter.callback = callback

    def enable(self, nr: int, enable_it: bool) -> None:
        """Enable or disable a shutter; disabling stops a driving shutter."""
        shutter = self._get(nr)
        if shutter is None:
            return
        if not enable_it:
            self.drive(nr, Direction.STOP)
        shutter.enabled = bool(enable_it)

    def drive(self, nr: int, direction: Direction) -> None:
        """Request the shutter to drive in `direction` (or stop).

        Requests for unconfigured or disabled shutters are ignored.
        """
        direction = Direction(direction)
        shutter = self._get(nr)
        if shutter is None or not shutter.configured or not shutter.enabled:
            return
        shutter.next_direction = direction

    def drive_direction(self, nr: int) -> Direction:
        """Return the current, or if stopped the pending, drive direction."""
        shutter = self._get(nr)
        if shutter is None:
            return Direction.STOP
        if shutter.direction is Direction.STOP and shutter.next_direction is not Direction.STOP:
            return shutter.next_direction
        return shutter.direction

    def process(self) -> bool:
        """Advance every shutter by one cycle; return True if all are idle."""
        idle = True
        for nr, shutter in enumerate(self._shutters):
            self._run(nr, shutter)
            if not (shutter.phase is _Phase.STOPPED and shutter.direction is Direction.STOP):
                idle = False
        return idle

    def _notify(self, nr: int, shutter: _Shutter, driving: bool) -> None:
        if shutter.callback is not None:
            shutter.callback(nr, shutter.direction, driving)

    def _run(self, nr: int, shutter: _Shutter) -> None:
        again = True
        while again:
            again = False
            phase = shutter.phase
            changed = shutter.direction is not shutter.next_direction

            if phase is _Phase.STOPPED:
                if changed:
                    shutter.direction = shutter.next_direction
                    if shutter.direction is not Direction.STOP:
                        shutter.phase = _Phase.DIR
                        shutter.wait_cycles = 0
                        again = True

            elif phase is _Phase.DIR:
                if changed:
                    shutter.phase = _Phase.REMOVE_DIR if shutter.wait_cycles > 0 else _Phase.STOPPED
                    again = True
                elif shutter.wait_cycles == 0:
                    if shutter.direction is Direction.UP:
                        self._relay_activate(shutter.relay_dir, False)
                    elif shutter.direction is Direction.DOWN:
                        self._relay_activate(shutter.relay_dir, True)
                    else:
                        shutter.direction = Direction.STOP
                        shutter.phase = _Phase.REMOVE_POWER
                        again = True

                if WAIT_CYCLES_TO_POWER <= shutter.wait_cycles:
                    shutter.wait_cycles = 0
                    shutter.phase = _Phase.POWER
                    again = True
                else:
                    shutter.wait_cycles += 1

            elif phase is _Phase.POWER:
                if changed:
                    shutter.phase = _Phase.REMOVE_DIR
                    again = True
                else:
                    self._relay_activate(shutter.relay_power, True)
                    shutter.phase = _Phase.DRIVE
                    self._notify(nr, shutter, True)

            elif phase is _Phase.DRIVE:
                if changed:
                    shutter.phase = _Phase.REMOVE_POWER
                    shutter.wait_cycles = 0
                    again = True

            elif phase is _Phase.REMOVE_POWER:
                if shutter.wait_cycles == 0:
                    self._relay_activate(shutter.relay_power, False)
                    self._notify(nr, shutter, False)
                if WAIT_CYCLES_TO_REMOVE_DIR <= shutter.wait_cycles:
                    shutter.wait_cycles = 0
                    shutter.phase = _Phase.REMOVE_DIR
                    again = True
                else:
                    shutter.wait_cycles += 1

            elif phase is _Phase.REMOVE_DIR:
                self._relay_activate(shutter.relay_dir, False)
                shutter.phase = _Phase.STOPPED
                again = True