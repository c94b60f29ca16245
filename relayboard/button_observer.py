"""Push button observer that reports presses, holds and pulse trains as events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Tuple

BUTTON_COUNT = 8
"""Number of observed buttons; bit n of the status byte is button n."""

DEFAULT_MAX_ON_TIME = 40
"""Default maximum pressed time in process cycles for pulse detection."""

DEFAULT_MAX_OFF_TIME = 40
"""Default maximum released time in process cycles for pulse detection."""

MAX_REPORTED_PULSES = 32
"""Pulse counts above this are reported as this many."""

_BYTE = 0xFF

StatusReader = Callable[[], int]
EventSender = Callable[[int, int, int, int], object]
ZoneLookup = Callable[[int], Tuple[int, int]]


class ButtonState(IntEnum):
    """State of a single push button."""

    DISABLED = 0
    RELEASED = 1
    PRESSED = 2


def encode_button_event(num_pulse: int, state: ButtonState) -> int:
    """Return the event state byte for a button notification.

    A non-zero pulse count yields 2 with the count (limited to 32) in the
    bits from bit 3 upwards, truncated to one byte. Without pulses the
    byte is 1 for a pressed and 0 for any other button.
    """
    if num_pulse < 0:
        raise ValueError(f"pulse count must not be negative, got {num_pulse}")
    if num_pulse > 0:
        pulses = min(num_pulse, MAX_REPORTED_PULSES)
        return (2 | (pulses << 3)) & _BYTE
    if ButtonState(state) is ButtonState.PRESSED:
        return 1
    return 0


@dataclass
class _Button:
    max_on_time: int
    max_off_time: int
    active: bool = False
    state: ButtonState = ButtonState.RELEASED
    on_off_time: int = 0
    num_pulse: int = 0


def _default_zones(index: int) -> Tuple[int, int]:
    return (0xFF, 0xFF)


class ButtonObserver:
    """Debounces up to eight buttons and reports their state changes.

    `read_status` returns the current button bits. `send_event` is called
    with the event state byte, zone, sub-zone and button index. `zones`
    maps a button index to its (zone, sub-zone) pair. Call `process`
    once per cycle (typically every 10 ms).
    """

    def __init__(
        self,
        read_status: StatusReader,
        send_event: EventSender,
        zones: Optional[ZoneLookup] = None,
        *,
        max_on_time: int = DEFAULT_MAX_ON_TIME,
        max_off_time: int = DEFAULT_MAX_OFF_TIME,
    ) -> None:
        for name, value in (("max_on_time", max_on_time), ("max_off_time", max_off_time)):
            if not 0 <= value <= _BYTE:
                raise ValueError(f"{name} must be in 0..{_BYTE}, got {value}")
        self._read_status = read_status
        self._send_event = send_event
        self._zones = zones if zones is not None else _default_zones
        self._buttons = [
            _Button(max_on_time=max_on_time, max_off_time=max_off_time)
            for _ in range(BUTTON_COUNT)
        ]
        self._status = read_status() & _BYTE

    def state(self, index: int) -> ButtonState:
        """Return the tracked state of button `index`."""
        return self._buttons[index].state

    def set_filter(self, filter_mask: int) -> None:
        """Enable the buttons whose bit is set in `filter_mask`, disable the rest."""
        for index, button in enumerate(self._buttons):
            if filter_mask & (1 << index):
                button.state = ButtonState.RELEASED
            else:
                button.state = ButtonState.DISABLED

    def process(self) -> None:
        """Sample the buttons once and emit any events that became due."""
        status = self._read_status() & _BYTE
        unstable = status ^ self._status
        self._status = status

        for index, button in enumerate(self._buttons):
            if button.state is ButtonState.DISABLED:
                continue
            bit = 1 << index
            if unstable & bit:
                self._process_button(index, button, button.state)
            elif status & bit:
                self._process_button(index, button, ButtonState.PRESSED)
            else:
                self._process_button(index, button, ButtonState.RELEASED)

    def _process_button(self, index: int, button: _Button, state: ButtonState) -> None:
        notify = False
        num_pulse = 0

        if state is not button.state:
            button.on_off_time = 0
            if state is ButtonState.RELEASED:
                if button.active:
                    button.num_pulse = (button.num_pulse + 1) & _BYTE
                else:
                    notify = True
            if not notify:
                button.active = True
            button.state = state
        elif button.active:
            button.on_off_time = (button.on_off_time + 1) & _BYTE
            if button.state is ButtonState.PRESSED:
                limit = button.max_on_time
            else:
                limit = button.max_off_time
            if limit < button.on_off_time:
                notify = True
                num_pulse = button.num_pulse
                button.active = False
                button.num_pulse = 0

        if notify:
            zone, sub_zone = self._zones(index)
            self._send_event(
                encode_button_event(num_pulse, button.state), zone, sub_zone, index
            )