"""
frame_loop_test.py
------------------
FrameLoop timing, driven by a fake clock.
"""
import pytest

from dynamics import AxisController, CompositeController, FrameLoop


class FakeClock:
    """Manually advanced clock; ``sleep`` advances it."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


class Recorder:
    """Controller stand-in that records the elapsed times it receives."""

    def __init__(self) -> None:
        self.elapsed: list[float] = []
        self.is_moving = True

    def update(self, elapsed_ms: float) -> bool:
        self.elapsed.append(elapsed_ms)
        return True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def test_tick_passes_elapsed_milliseconds(clock):
    recorder = Recorder()
    loop = FrameLoop(recorder, clock=clock, sleep=clock.sleep)

    clock.now = 0.020
    assert loop.tick() is True
    clock.now = 0.055
    loop.tick()

    assert recorder.elapsed == [pytest.approx(20.0), pytest.approx(35.0)]
    assert loop.frames == 2


def test_reset_restarts_measurement(clock):
    recorder = Recorder()
    loop = FrameLoop(recorder, clock=clock, sleep=clock.sleep)
    clock.now = 5.0
    loop.reset()
    clock.now = 5.01
    loop.tick()

    assert recorder.elapsed == [pytest.approx(10.0)]
    assert loop.frames == 1


def test_run_ticks_at_frame_rate(clock):
    recorder = Recorder()
    loop = FrameLoop(recorder, fps=50.0, clock=clock, sleep=clock.sleep)

    frames = loop.run(1.0)

    assert frames in (50, 51)
    assert all(e == pytest.approx(20.0) for e in recorder.elapsed)


def test_run_until_idle_settles_axis(clock):
    axis = AxisController()
    axis.max_speed = 2.0
    axis.goto(1.0)
    loop = FrameLoop(axis, fps=60.0, clock=clock, sleep=clock.sleep)

    assert loop.run_until_idle(timeout=10.0) is True
    assert axis.current == 1.0
    assert not axis.is_moving


def test_run_until_idle_times_out_while_rolling(clock):
    camera = CompositeController({"yaw": None})
    camera.max_speed = 1.0
    camera.roll({"yaw": False})
    loop = FrameLoop(camera, clock=clock, sleep=clock.sleep)

    assert loop.run_until_idle(timeout=0.5) is False
    assert camera["yaw"].current > 0.0


def test_run_until_idle_returns_immediately_when_idle(clock):
    loop = FrameLoop(AxisController(), clock=clock, sleep=clock.sleep)
    assert loop.run_until_idle() is True
    assert loop.frames == 0


@pytest.mark.parametrize("fps", [0.0, -30.0])
def test_invalid_fps(fps):
    with pytest.raises(ValueError):
        FrameLoop(AxisController(), fps=fps)
