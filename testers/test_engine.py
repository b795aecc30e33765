# -*- coding: utf-8 -*-
import importlib.util
import logging
from pathlib import Path

import pytest

from gameclock.core.runtime import ENTER_FRAME
from gameclock.engine import Engine


class FakeWindow:
    """Окно без GLFW: закрывается после `frames` кадров."""
    def __init__(self, frames):
        self._left = frames
        self.calls = []
        self.now = 0.0

    def set_vsync(self, enable=True):
        self.calls.append(("set_vsync", enable))

    def get_timer(self):
        return self.now

    def poll_events(self):
        self.calls.append("poll_events")

    def should_close(self):
        return self._left <= 0

    def swap_buffers(self):
        self._left -= 1
        self.now += 16.0
        self.calls.append("swap_buffers")

    def close(self):
        self.calls.append("close")

    def destroy(self):
        self.calls.append("destroy")


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def headless(config, sleeps):
    return Engine(config=config, headless=True, sleep=sleeps.append)


def test_headless_run_dispatches_frames(headless, sleeps):
    frames = []
    headless.runtime.add_event_listener(ENTER_FRAME, lambda e: frames.append(e.frame))

    assert headless.run(max_frames=3) == 3
    assert frames == [1, 2, 3]
    assert len(sleeps) == 3
    assert all(0 < s <= 1.0 / 60 for s in sleeps)
    assert headless.clock.destroyed


def test_clock_counts_frames_during_run(headless):
    seen = []
    headless.runtime.add_event_listener(
        ENTER_FRAME, lambda e: seen.append(headless.clock.get_frames())
    )
    headless.run(max_frames=2)
    assert seen == [1, 2]


def test_stop_from_listener(headless):
    def on_frame(event):
        if event.frame == 2:
            headless.stop()

    headless.runtime.add_event_listener(ENTER_FRAME, on_frame)
    assert headless.run(max_frames=10) == 2


def test_target_fps_from_config(config, sleeps):
    config["display"] = {"fps": 30}
    engine = Engine(config=config, headless=True, frames=7, sleep=sleeps.append)
    assert engine.target_fps == 30
    assert engine.clock.target_fps == 30
    assert engine.clock.get_frames() == 7
    engine.shutdown()


def test_shutdown_is_idempotent(headless):
    headless.shutdown()
    headless.shutdown()
    assert headless.clock.destroyed


def test_windowed_run(config, monkeypatch):
    window = FakeWindow(frames=4)
    monkeypatch.setattr(Engine, "_create_window", lambda self, w, h, title: window)

    engine = Engine(config=config)
    assert engine.run() == 4
    assert window.calls[0] == ("set_vsync", True)
    assert window.calls.count("swap_buffers") == 4
    assert window.calls[-2:] == ["close", "destroy"]


def test_windowed_delta_uses_window_timer(config, monkeypatch):
    window = FakeWindow(frames=3)
    monkeypatch.setattr(Engine, "_create_window", lambda self, w, h, title: window)

    engine = Engine(config=config)
    deltas = []
    engine.runtime.add_event_listener(ENTER_FRAME, lambda e: deltas.append(engine.clock.delta()))
    engine.run()
    # Первый кадр – 0 мс, дальше по 16 мс при кадре 1000/60 мс
    assert deltas[0] == pytest.approx(0.0)
    assert deltas[1] == pytest.approx(16.0 * 60 / 1000)


def _load_example(name):
    path = Path(__file__).resolve().parents[1] / "examples" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(f"example_{name}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_example_report_with_fractional_fps(make_clock, runtime, caplog):
    example = _load_example("minimal_example")
    clock = make_clock(target_fps=59.94)
    runtime.add_event_listener(ENTER_FRAME, example.report(clock))

    with caplog.at_level(logging.INFO, logger="GameClock"):
        for _ in range(120):
            runtime.enter_frame()

    reports = [r for r in caplog.records if r.getMessage().startswith("frame=")]
    assert [r.getMessage().split()[0] for r in reports] == ["frame=60", "frame=120"]
