import random

import numpy as np
import pytest

from config import GameConfig
from input_module import CameraUnavailableError
from quiz_state import Question
from scheduler import Scheduler


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeCapture:
    """Stands in for InputModule: serves queued frames, records start/release."""

    def __init__(self, frames=None, fail=False):
        self.frames = list(frames or [])
        self.fail = fail
        self.started = False
        self.release_count = 0

    def start(self):
        if self.fail:
            raise CameraUnavailableError("denied")
        self.started = True

    def get_frame(self):
        if not self.started or not self.frames:
            return None
        return self.frames.pop(0)

    def release(self):
        self.started = False
        self.release_count += 1


def blank_frame(width=64, height=48, value=0):
    return np.full((height, width, 3), value, dtype=np.uint8)


def frame_with_bar(x_start, x_end, width=64, height=48):
    """Black frame with a white vertical bar over columns [x_start, x_end)."""
    frame = blank_frame(width, height)
    frame[:, x_start:x_end] = 255
    return frame


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock)


@pytest.fixture
def config():
    return GameConfig(sound_enabled=False)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def questions():
    return [
        Question("Q1", ["a1", "b1", "c1"], 0),
        Question("Q2", ["a2", "b2", "c2"], 1),
        Question("Q3", ["a3", "b3", "c3"], 2),
    ]
