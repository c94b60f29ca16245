"""Control logic for a relay board node: shutters, buttons, wind, timers, clock, system state, CAN types and bit helpers."""

__version__ = "0.2.2"