import logging

import pytest

from ghostchase.config import FAILURE, FrameClock, report_error


def fake_clock(*times):
    it = iter(times)
    return lambda: next(it)


def test_delta_is_zero_before_first_tick():
    clock = FrameClock(clock=fake_clock(1.0))
    assert clock.delta_second == 0.0


def test_first_tick_is_capped_at_one_refresh():
    clock = FrameClock(refresh_rate=60.0, clock=fake_clock(100.0))
    assert clock.tick() == pytest.approx(1.0 / 60.0)


def test_short_frame_is_measured():
    clock = FrameClock(refresh_rate=60.0, clock=fake_clock(100.0, 100.005))
    clock.tick()
    delta = clock.tick()
    assert delta == pytest.approx(0.005)
    assert clock.delta_second == delta


def test_long_frame_is_capped_and_rate_is_queried_each_tick():
    rates = iter([60.0, 30.0])
    clock = FrameClock(refresh_rate=lambda: next(rates), clock=fake_clock(10.0, 12.0))
    assert clock.tick() == pytest.approx(1.0 / 60.0)
    assert clock.tick() == pytest.approx(1.0 / 30.0)


def test_report_error_logs_and_returns_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="ghostchase"):
        result = report_error("map file missing")
    assert result == FAILURE
    assert "map file missing" in caplog.text