import pytest

from relayboard.shutter_driver import (
    SHUTTER_COUNT,
    WAIT_CYCLES_TO_POWER,
    WAIT_CYCLES_TO_REMOVE_DIR,
    Direction,
    ShutterDriver,
)

POWER = 0
DIR = 1


class Recorder:
    def __init__(self):
        self.relays = []
        self.events = []

    def relay(self, relay, on):
        self.relays.append((relay, on))

    def callback(self, nr, direction, driving):
        self.events.append((nr, direction, driving))


def make_driver():
    rec = Recorder()
    driver = ShutterDriver(rec.relay)
    driver.configure(0, POWER, DIR, rec.callback)
    driver.enable(0, True)
    return driver, rec


def run(driver, cycles=50):
    idle = None
    for _ in range(cycles):
        idle = driver.process()
    return idle


def test_configure_rejects_invalid_shutter_number():
    driver = ShutterDriver(lambda relay, on: None)
    with pytest.raises(ValueError):
        driver.configure(SHUTTER_COUNT, 0, 1)


def test_configure_rejects_same_relays():
    driver = ShutterDriver(lambda relay, on: None)
    with pytest.raises(ValueError):
        driver.configure(0, 3, 3)


def test_drive_rejects_unknown_direction():
    driver, _ = make_driver()
    with pytest.raises(ValueError):
        driver.drive(0, 7)


def test_unconfigured_shutter_ignores_drive():
    rec = Recorder()
    driver = ShutterDriver(rec.relay)
    driver.enable(0, True)
    driver.drive(0, Direction.UP)
    assert driver.drive_direction(0) is Direction.STOP
    assert run(driver) is True
    assert rec.relays == []


def test_disabled_shutter_ignores_drive():
    rec = Recorder()
    driver = ShutterDriver(rec.relay)
    driver.configure(0, POWER, DIR, rec.callback)
    driver.drive(0, Direction.DOWN)
    assert driver.drive_direction(0) is Direction.STOP
    assert run(driver) is True


def test_invalid_number_reports_stop():
    driver, _ = make_driver()
    assert driver.drive_direction(SHUTTER_COUNT) is Direction.STOP


def test_pending_direction_is_reported_before_processing():
    driver, _ = make_driver()
    driver.drive(0, Direction.DOWN)
    assert driver.drive_direction(0) is Direction.DOWN


def test_drive_up_sets_direction_then_power():
    driver, rec = make_driver()
    driver.drive(0, Direction.UP)
    assert run(driver) is False
    assert rec.relays == [(DIR, False), (POWER, True)]
    assert rec.events == [(0, Direction.UP, True)]
    assert driver.drive_direction(0) is Direction.UP


def test_drive_down_switches_direction_relay_on():
    driver, rec = make_driver()
    driver.drive(0, Direction.DOWN)
    run(driver)
    assert rec.relays == [(DIR, True), (POWER, True)]


def test_power_waits_for_direction_relay():
    driver, rec = make_driver()
    driver.drive(0, Direction.UP)
    for _ in range(WAIT_CYCLES_TO_POWER):
        driver.process()
    assert (POWER, True) not in rec.relays
    assert rec.events == []
    run(driver, 5)
    assert (POWER, True) in rec.relays


def test_stop_removes_power_before_direction():
    driver, rec = make_driver()
    driver.drive(0, Direction.DOWN)
    run(driver)
    rec.relays.clear()
    driver.drive(0, Direction.STOP)
    driver.process()
    assert rec.relays == [(POWER, False)]
    for _ in range(WAIT_CYCLES_TO_REMOVE_DIR):
        driver.process()
    assert rec.relays == [(POWER, False), (DIR, False)]
    assert rec.events[-1] == (0, Direction.DOWN, False)
    assert run(driver, 3) is True
    assert driver.drive_direction(0) is Direction.STOP


def test_reversal_stops_then_drives_other_way():
    driver, rec = make_driver()
    driver.drive(0, Direction.UP)
    run(driver)
    driver.drive(0, Direction.DOWN)
    run(driver)
    assert rec.events == [
        (0, Direction.UP, True),
        (0, Direction.UP, False),
        (0, Direction.DOWN, True),
    ]
    assert rec.relays[-1] == (POWER, True)
    assert (DIR, True) in rec.relays
    assert driver.drive_direction(0) is Direction.DOWN


def test_disable_stops_driving_shutter():
    driver, rec = make_driver()
    driver.drive(0, Direction.UP)
    run(driver)
    driver.enable(0, False)
    assert run(driver) is True
    assert rec.events[-1] == (0, Direction.UP, False)
    driver.drive(0, Direction.UP)
    assert driver.drive_direction(0) is Direction.STOP


def test_abort_during_direction_phase_never_powers():
    driver, rec = make_driver()
    driver.drive(0, Direction.UP)
    driver.process()
    driver.process()
    driver.drive(0, Direction.STOP)
    assert run(driver) is True
    assert (POWER, True) not in rec.relays
    assert rec.events == []
    assert rec.relays[-1] == (DIR, False)


def test_shutters_are_independent():
    rec = Recorder()
    driver = ShutterDriver(rec.relay)
    driver.configure(0, 0, 1, rec.callback)
    driver.configure(2, 4, 5, rec.callback)
    driver.enable(0, True)
    driver.enable(2, True)
    driver.drive(2, Direction.DOWN)
    run(driver)
    assert driver.drive_direction(0) is Direction.STOP
    assert driver.drive_direction(2) is Direction.DOWN
    assert rec.events == [(2, Direction.DOWN, True)]
    assert rec.relays == [(5, True), (4, True)]