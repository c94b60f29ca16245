# relayboard

The control logic of a relay board node, written in pure Python with no
third-party dependencies. Each stateful part has a `process` method, and your
own loop calls it periodically. Reading inputs, switching relays and sending
events are left to callables that you pass in.

## Modules

- `relayboard.swtimer.SoftwareTimers(count=2)`: count-down timers.
  - `start(timer_id, value, manual)` starts a timer. The value is between 0
    and 255 ticks.
  - `stop(timer_id)` stops a timer.
  - `process()` counts every running timer down by one tick.
  - `is_expired(timer_id)` reports whether a timer has reached zero. If the
    timer is not manual, this call also restarts it from its start value.
  - `start` and `stop` ignore unknown timer ids. `is_expired` reports an
    unknown id as expired.
- `relayboard.system_state`: holds the system state and the action assigned
  to it.
  - `SystemStateMachine` starts in `SystemState.START_UP` with
    `SystemAction.NOTHING`.
  - `request_state(state, action)` changes the state. Requests for
    `START_UP` are ignored. The action `SystemAction.KEEP` leaves the
    assigned action as it is.
  - The `state` and `action` properties give the current values.
- `relayboard.shutter_driver.ShutterDriver(relay_activate, count=4)`: drives
  shutters, each through a power relay and a direction relay.
  - `relay_activate(relay, on)` is the callable that switches a relay. A
    direction relay that is on means down.
  - `configure(nr, relay_power, relay_dir, callback=None)` assigns the
    relays. It raises `ValueError` for a bad shutter number or when both
    relays are the same.
  - `enable(nr, enable_it)` enables or disables a shutter. Disabling it also
    stops it.
  - `drive(nr, direction)` takes a `Direction`: `STOP`, `UP` or `DOWN`.
  - `drive_direction(nr)` gives the current direction, or the pending one if
    the shutter is stopped.
  - `process()` should be called every 10 ms. It returns `True` when all
    shutters are idle.
  - The direction relay is set about 100 ms before power is applied. Power
    is removed about 100 ms before the direction relay is released.
  - The callback receives `(nr, direction, driving)` when driving starts and
    when it stops.
- `relayboard.button_observer`: debounces up to eight push buttons.
  - `ButtonObserver(read_status, send_event, zones=None, *, max_on_time=40, max_off_time=40)`
    creates the observer.
  - `read_status()` returns the button bits. Bit n is button n.
  - `send_event(state_byte, zone, sub_zone, index)` receives each
    notification.
  - `zones(index)` returns `(zone, sub_zone)`. The default is `(0xFF, 0xFF)`.
  - `process()` runs once per cycle.
  - `set_filter(mask)` enables the buttons whose bit is set and disables the
    others.
  - `state(index)` returns a `ButtonState`.
  - `encode_button_event(num_pulse, state)` builds the state byte that an
    event carries:
    - 1 for a pressed button that has no pulses
    - 0 for a released button
    - `2 | (pulses << 3)` for a series of pulses, with the count limited to 32
- `relayboard.wind_observer`: sorts the wind speed into a `WindLevel`.
  - The levels are `INIT`, `LOW`, `MEDIUM`, `HIGH` and `VERY_HIGH`.
  - `WindConfig` holds the thresholds. A speed strictly above a threshold
    reaches that level. It also has an `enabled` flag and the event zone
    and sub-zone.
  - `WindObserver(read_speed, send_event, config).process()` calls
    `send_event(level, zone, sub_zone)` when the level changes.
  - While the observer is disabled it resets to `INIT`.
- `relayboard.clock`: time of day.
  - `TimeOfDay(hours, minutes, seconds, milliseconds)` is an immutable
    reading.
  - `Clock` has `set(time)`, `get()` and `process(period_ms)`.
  - `Clock.day` is an 8-bit counter. It goes up at midnight and on every
    `set`.
  - `time_difference(ts1, ts2)` returns the span between two readings as a
    `TimeOfDay`.
- `relayboard.can`: CAN data types.
  - The enums are `Bitrate` (with `bits_per_second`) and `CanMode`.
  - The validated frozen dataclasses are `CanMessage`, `CanFilter` and
    `ErrorRegister`.
  - `mcp2515_filter(can_id)` and `mcp2515_filter_extended(can_id)` return
    the four MCP2515 filter register bytes for an identifier.
- `relayboard.bits`: bit helpers.
  - `is_bit_set`, `set_bit` and `clear_bit`
  - `swap_nibbles`
  - `bit_count8` and `bit_count32`
  - `low_byte`, `high_byte`, `low_word` and `high_word`
- `relayboard.device_info`: the identity of the node.
  - `default_device_config()` returns a frozen `DeviceConfig` with these
    fields:
    - a 16-byte GUID
    - the zone and sub-zone
    - the manufacturer ids and the MDF URL
    - the firmware version
  - `DeviceConfig.version_string()` returns `"0.2.2"` for the default.

## What the package does not do

The package does not access hardware. It does not read GPIO pins, drive
relays or talk to a CAN controller. It sends no bus messages and has no
protocol stack. It stores no settings. You pass in callables for these jobs,
and the package provides only the decision logic and the data types.

There is no command-line program and no main loop. Your application calls
`process` on each part at the right interval.

## Installation

```
pip install .
```

## Example

```python
from relayboard.bits import bit_count8, high_byte, is_bit_set, low_byte, swap_nibbles
from relayboard.shutter_driver import Direction, ShutterDriver
from relayboard.swtimer import SoftwareTimers

assert is_bit_set(0b0000_0100, 2)
assert swap_nibbles(0x12) == 0x21
assert bit_count8(0xFF) == 8
assert (high_byte(0x1234), low_byte(0x1234)) == (0x12, 0x34)

timers = SoftwareTimers()
timers.start(0, 3, manual=False)
for _ in range(3):
    timers.process()
assert timers.is_expired(0)       # expired, and restarted from 3
assert not timers.is_expired(0)

relays = {}
driver = ShutterDriver(lambda relay, on: relays.__setitem__(relay, on))
driver.configure(0, relay_power=0, relay_dir=1)
driver.enable(0, True)
driver.drive(0, Direction.DOWN)
for _ in range(20):
    driver.process()
assert relays == {1: True, 0: True}  # direction relay down, power on
```

## Running the tests

```
pip install ".[test]"
pytest
```