"""System state machine holding the current state and its pending action."""

from __future__ import annotations

from enum import IntEnum


class SystemAction(IntEnum):
    """Action carried out once the requested state is reached."""

    NOTHING = 0
    KEEP = 1
    REBOOT = 2
    HALT = 3


class SystemState(IntEnum):
    """States of the system."""

    START_UP = 0
    ACTIVE = 1
    SHUTDOWN = 2
    ERROR = 3
    IDLE = 4


class SystemStateMachine:
    """Tracks the requested system state and the action assigned to it."""

    def __init__(self) -> None:
        self._state = SystemState.START_UP
        self._action = SystemAction.NOTHING

    @property
    def state(self) -> SystemState:
        """The current system state."""
        return self._state

    @property
    def action(self) -> SystemAction:
        """The action currently assigned."""
        return self._action

    def request_state(self, state: SystemState, action: SystemAction) -> None:
        """Request a transition to `state` with `action`.

        Start-up cannot be requested and such requests are ignored; to
        restart, request shutdown with the reboot action. An action of
        `KEEP` leaves the assigned action unchanged.
        """
        state = SystemState(state)
        action = SystemAction(action)
        if state is SystemState.START_UP:
            return
        self._state = state
        if action is not SystemAction.KEEP:
            self._action = action