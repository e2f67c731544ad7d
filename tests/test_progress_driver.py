import math

import pytest

from phaseplayer.events.bus import EVENT_TICK, EventBus
from phaseplayer.systems.progress_driver import DriverStatus, TickProgressDriver
from tests.helpers import drive


def _listen(driver):
    ticks, statuses = [], []
    driver.add_tick_listener(ticks.append)
    driver.add_status_listener(statuses.append)
    return ticks, statuses


def test_forward_run_reports_direction_then_ticks_to_completion():
    driver = TickProgressDriver(duration=0.25)
    ticks, statuses = _listen(driver)

    driver.forward(0.0)
    assert statuses == [DriverStatus.FORWARD]
    assert ticks == []
    assert driver.is_animating

    driver.advance(0.1)
    assert ticks[-1] == pytest.approx(0.4)
    driver.advance(0.2)
    assert ticks[-1] == 1.0
    assert statuses == [DriverStatus.FORWARD, DriverStatus.COMPLETED]
    assert not driver.is_animating


def test_reverse_run_ends_dismissed_at_zero():
    driver = TickProgressDriver(duration=0.5)
    ticks, statuses = _listen(driver)

    driver.reverse(1.0)
    driver.advance(0.25)
    assert ticks[-1] == pytest.approx(0.5)
    driver.advance(1.0)
    assert driver.value == 0.0
    assert statuses == [DriverStatus.REVERSE, DriverStatus.DISMISSED]


def test_driver_follows_bus_ticks():
    bus = EventBus()
    driver = TickProgressDriver(bus, duration=0.25)
    driver.forward(0.0)

    drive(bus, 5)

    assert driver.value == pytest.approx(0.4)


def test_restart_redirects_in_flight_run():
    driver = TickProgressDriver(duration=0.25)
    ticks, statuses = _listen(driver)
    driver.forward(0.0)
    driver.advance(0.1)

    driver.reverse(1.0)
    driver.advance(0.05)

    assert driver.value == pytest.approx(0.8)
    assert statuses == [DriverStatus.FORWARD, DriverStatus.REVERSE]


def test_restart_in_same_direction_does_not_repeat_status():
    driver = TickProgressDriver(duration=0.25)
    _, statuses = _listen(driver)
    driver.forward(0.0)
    driver.advance(0.1)
    driver.forward(0.0)

    assert statuses == [DriverStatus.FORWARD]
    assert driver.value == 0.0


def test_infinite_duration_never_moves():
    driver = TickProgressDriver(duration=math.inf)
    ticks, statuses = _listen(driver)
    driver.forward(0.0)
    for _ in range(100):
        driver.advance(1.0)

    assert driver.value == 0.0
    assert driver.is_animating
    assert statuses == [DriverStatus.FORWARD]
    assert len(ticks) == 100


def test_zero_duration_jumps_to_bound():
    driver = TickProgressDriver(duration=0.0)
    _, statuses = _listen(driver)
    driver.forward(0.0)
    driver.advance(0.01)

    assert driver.value == 1.0
    assert statuses[-1] == DriverStatus.COMPLETED


def test_advance_ignored_when_idle():
    driver = TickProgressDriver(duration=0.25)
    ticks, _ = _listen(driver)
    driver.advance(0.1)
    assert ticks == []


def test_tick_listener_redirect_wins_over_completion():
    driver = TickProgressDriver(duration=0.25)
    statuses = []
    driver.add_status_listener(statuses.append)

    def bounce(value):
        if value >= 1.0:
            driver.reverse()

    driver.add_tick_listener(bounce)
    driver.forward(0.0)
    driver.advance(1.0)

    assert statuses == [DriverStatus.FORWARD, DriverStatus.REVERSE]
    assert driver.is_animating


def test_dispose_detaches_from_bus_and_stops():
    bus = EventBus()
    driver = TickProgressDriver(bus, duration=0.25)
    ticks, _ = _listen(driver)
    driver.forward(0.0)
    drive(bus, 2)
    seen = len(ticks)

    driver.dispose()
    drive(bus, 5)
    driver.forward(0.0)

    assert len(ticks) == seen
    assert not driver.is_animating
    assert driver.disposed
    assert not bus._signals[EVENT_TICK].receivers
    driver.dispose()


def test_malformed_tick_payload_is_ignored():
    bus = EventBus()
    driver = TickProgressDriver(bus, duration=0.25)
    driver.forward(0.0)
    bus.emit(EVENT_TICK, dt="soon")
    assert driver.value == 0.0
