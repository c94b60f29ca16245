import pytest

from relayboard.swtimer import DEFAULT_TIMER_COUNT, SoftwareTimers


def tick(timers, count):
    for _ in range(count):
        timers.process()


def test_default_count_matches_source():
    assert len(SoftwareTimers()) == DEFAULT_TIMER_COUNT == 2


def test_fresh_timers_are_expired():
    timers = SoftwareTimers()
    assert all(timers.is_expired(i) for i in range(len(timers)))


def test_manual_timer_counts_down_and_stays_expired():
    timers = SoftwareTimers()
    timers.start(0, 3, manual=True)
    tick(timers, 2)
    assert timers.is_expired(0) is False
    timers.process()
    assert timers.is_expired(0) is True
    assert timers.is_expired(0) is True


def test_automatic_timer_restarts_after_expiry_is_read():
    timers = SoftwareTimers()
    timers.start(1, 2, manual=False)
    tick(timers, 2)
    assert timers.is_expired(1) is True
    assert timers.is_expired(1) is False
    tick(timers, 1)
    assert timers.is_expired(1) is False
    tick(timers, 1)
    assert timers.is_expired(1) is True


def test_stop_expires_timer():
    timers = SoftwareTimers()
    timers.start(0, 10, manual=True)
    assert timers.is_expired(0) is False
    timers.stop(0)
    assert timers.is_expired(0) is True


def test_stopped_automatic_timer_restarts_on_read():
    timers = SoftwareTimers()
    timers.start(0, 5, manual=False)
    timers.stop(0)
    assert timers.is_expired(0) is True
    assert timers.is_expired(0) is False


def test_timers_are_independent():
    timers = SoftwareTimers()
    timers.start(0, 1, manual=True)
    timers.start(1, 4, manual=True)
    timers.process()
    assert timers.is_expired(0) is True
    assert timers.is_expired(1) is False


def test_process_does_not_underflow():
    timers = SoftwareTimers()
    timers.start(0, 1, manual=True)
    tick(timers, 5)
    assert timers.is_expired(0) is True
    timers.start(0, 1, manual=True)
    assert timers.is_expired(0) is False


def test_zero_start_value_is_always_expired():
    timers = SoftwareTimers()
    timers.start(0, 0, manual=False)
    assert [timers.is_expired(0) for _ in range(3)] == [True, True, True]


def test_invalid_id_reads_expired_and_is_ignored():
    timers = SoftwareTimers()
    timers.start(0, 3, manual=True)
    timers.start(7, 3, manual=True)
    timers.stop(7)
    assert timers.is_expired(7) is True
    assert timers.is_expired(0) is False


@pytest.mark.parametrize("value", [-1, 256])
def test_value_out_of_range_raises(value):
    timers = SoftwareTimers()
    with pytest.raises(ValueError):
        timers.start(0, value, manual=True)


def test_custom_count():
    timers = SoftwareTimers(count=4)
    timers.start(3, 2, manual=True)
    timers.process()
    assert len(timers) == 4
    assert timers.is_expired(3) is False


def test_negative_count_raises():
    with pytest.raises(ValueError):
        SoftwareTimers(count=-1)