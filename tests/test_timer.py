import pytest

from enginecore.timer import Timer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_elapsed_before_run_measures_from_origin(clock):
    timer = Timer(clock)
    clock.now = 4.0
    assert timer.elapsed() == pytest.approx(clock.now)


def test_run_then_elapsed(clock):
    timer = Timer(clock)
    clock.now = 10.0
    timer.run()
    clock.now = 12.5
    assert timer.elapsed() == pytest.approx(12.5 - 10.0)


def test_stop_accumulates_span(clock):
    timer = Timer(clock)
    clock.now = 1.0
    timer.run()
    clock.now = 3.0
    timer.stop()
    clock.now = 3.0
    timer.run()
    assert timer.elapsed() == pytest.approx(3.0 - 1.0)


def test_reset_clears_accumulation(clock):
    timer = Timer(clock)
    timer.set_time(50.0)
    clock.now = 7.0
    timer.reset()
    assert timer.elapsed() == pytest.approx(0.0)
    clock.now = 8.0
    assert timer.elapsed() == pytest.approx(8.0 - 7.0)


def test_set_add_subtract(clock):
    timer = Timer(clock)
    timer.run()
    timer.set_time(2.0)
    timer.add_time(5.0)
    timer.subtract_time(1.5)
    assert timer.elapsed() == pytest.approx(2.0 + 5.0 - 1.5)


def test_add_then_subtract_round_trip(clock):
    timer = Timer(clock)
    timer.run()
    before = timer.elapsed()
    timer.add_time(3.25)
    timer.subtract_time(3.25)
    assert timer.elapsed() == pytest.approx(before)


def test_default_clock_is_non_decreasing():
    timer = Timer()
    timer.run()
    first = timer.elapsed()
    second = timer.elapsed()
    assert 0.0 <= first <= second