import numpy as np

from config import GameConfig
from conftest import FakeCapture, blank_frame, frame_with_bar
from motion_tracker import MotionTracker


def make_tracker(frames=None, **overrides):
    overrides.setdefault('mirror', False)
    config = GameConfig(sound_enabled=False, **overrides)
    return MotionTracker(config, FakeCapture(frames))


def test_first_frame_only_primes_previous():
    tracker = make_tracker()
    assert tracker.process_frame(frame_with_bar(40, 48)) == 50.0
    assert tracker.previous_frame is not None


def test_static_scene_leaves_position_unchanged():
    tracker = make_tracker()
    frame = frame_with_bar(10, 20)
    for _ in range(10):
        tracker.process_frame(frame.copy())
    assert tracker.position == 50.0


def test_position_converges_monotonically_to_motion():
    tracker = make_tracker()
    expected = (40 + 47) / 2 / 64 * 100  # centroid of columns 40..47

    tracker.process_frame(blank_frame())
    positions = []
    for i in range(40):
        frame = frame_with_bar(40, 48) if i % 2 == 0 else blank_frame()
        positions.append(tracker.process_frame(frame))

    assert all(b > a for a, b in zip(positions, positions[1:]))
    assert all(p <= expected for p in positions)
    assert abs(positions[-1] - expected) < 0.5


def test_single_update_uses_smoothing_factor():
    tracker = make_tracker()
    tracker.process_frame(blank_frame())
    new_position = tracker.process_frame(frame_with_bar(40, 48))
    target = 43.5 / 64 * 100
    assert np.isclose(new_position, 50 + (target - 50) * 0.15)


def test_mirror_reflects_motion_x():
    tracker = make_tracker(mirror=True)
    tracker.process_frame(blank_frame())
    for i in range(40):
        tracker.process_frame(frame_with_bar(40, 48) if i % 2 == 0 else blank_frame())
    # Columns 40..47 map to 24..17 when mirrored
    assert abs(tracker.position - 20.5 / 64 * 100) < 0.5


def test_too_few_moving_pixels_is_noise():
    tracker = make_tracker()
    tracker.process_frame(blank_frame())
    noisy = blank_frame()
    noisy[0, 60:65] = 255  # 5 pixels
    assert tracker.process_frame(noisy) == 50.0

    tracker.process_frame(blank_frame())
    enough = blank_frame()
    enough[0, 58:64] = 255  # 6 pixels
    assert tracker.process_frame(enough) > 50.0


def test_change_at_threshold_is_not_motion():
    tracker = make_tracker()
    tracker.process_frame(blank_frame(value=100))
    assert tracker.process_frame(blank_frame(value=120)) == 50.0
    assert tracker.process_frame(blank_frame(value=141)) != 50.0


def test_large_frames_are_downsampled_before_diffing():
    tracker = make_tracker()
    tracker.process_frame(blank_frame(320, 240))
    big = frame_with_bar(200, 240, width=320, height=240)
    tracker.process_frame(big)
    assert tracker.previous_frame.shape == (48, 64, 3)
    assert tracker.position > 50.0


def test_update_reads_from_capture_when_active():
    tracker = make_tracker(frames=[blank_frame(), frame_with_bar(40, 48)])
    assert tracker.start()
    tracker.update()
    assert tracker.update() > 50.0
    # Capture ran dry: position holds
    held = tracker.position
    assert tracker.update() == held


def test_denied_camera_never_updates_position():
    tracker = MotionTracker(GameConfig(mirror=False), FakeCapture([blank_frame(), frame_with_bar(40, 48)], fail=True))
    assert tracker.start() is False
    assert tracker.permission_granted is False
    tracker.update()
    tracker.update()
    assert tracker.position == 50.0


def test_stop_releases_capture_and_clears_history():
    capture = FakeCapture([blank_frame()])
    tracker = MotionTracker(GameConfig(), capture)
    tracker.start()
    tracker.update()
    tracker.stop()
    assert capture.release_count == 1
    assert tracker.active is False
    assert tracker.previous_frame is None
