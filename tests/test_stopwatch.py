from mcutools.stopwatch import Resolution, State, StopWatch


class FakeClock:
    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now


def make(resolution=Resolution.MILLIS):
    clock = FakeClock()
    return StopWatch(resolution, clock), clock


def test_initial_state():
    sw, _ = make()
    assert sw.state is State.RESET
    assert sw.value() == 0
    assert not sw.is_running()
    assert sw.resolution is Resolution.MILLIS


def test_running_counts_millis():
    sw, clock = make()
    sw.start()
    assert sw.is_running()
    clock.now += 1.5
    assert sw.value() == 1500
    assert sw.elapsed() == sw.value()


def test_stop_freezes_value():
    sw, clock = make()
    sw.start()
    clock.now += 2
    sw.stop()
    frozen = sw.value()
    clock.now += 10
    assert sw.value() == frozen
    assert sw.state is State.STOPPED


def test_resume_excludes_paused_time():
    sw, clock = make()
    sw.start()
    clock.now += 1
    sw.stop()
    first = sw.value()
    clock.now += 50
    sw.start()
    clock.now += 1
    assert sw.value() == 2 * first


def test_start_while_running_is_ignored():
    sw, clock = make()
    sw.start()
    clock.now += 1
    before = sw.value()
    sw.start()
    clock.now += 1
    assert sw.value() == 2 * before


def test_reset():
    sw, clock = make()
    sw.start()
    clock.now += 3
    sw.reset()
    assert sw.state is State.RESET
    assert sw.value() == 0


def test_micros_and_seconds_resolution():
    sw_us, clock_us = make(Resolution.MICROS)
    sw_s, clock_s = make(Resolution.SECONDS)
    sw_us.start()
    sw_s.start()
    clock_us.now += 2
    clock_s.now += 2
    assert sw_us.value() == 2_000_000
    assert sw_s.value() == 2