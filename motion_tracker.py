# motion_tracker.py

import cv2
import numpy as np

from config import GameConfig
from helpers import clamp, smooth_towards
from input_module import CameraUnavailableError, InputModule


class MotionTracker:
    """
    Turns a webcam feed into a smoothed horizontal player position (0-100).

    Each frame is shrunk to a fixed low resolution and compared with the
    previous one. Pixels whose average RGB change exceeds the threshold are
    "moving"; the mean x of those pixels is the motion centroid, and the
    player position eases toward it. Frames with too few moving pixels
    leave the position where it is.
    """

    def __init__(self, config=None, capture=None):
        self.config = config or GameConfig()
        self.capture = capture or InputModule(self.config.camera_index, *self.config.capture_size)
        self.position = float(self.config.initial_position)
        self.permission_granted = False
        self.active = False
        self.previous_frame = None
        self.last_frame = None

    def start(self):
        """Opens the camera. Returns False (and stays inactive) if it cannot."""
        try:
            self.capture.start()
        except CameraUnavailableError as e:
            print(f"[WARN] Camera access denied: {e}")
            self.permission_granted = False
            self.active = False
            return False
        self.permission_granted = True
        self.active = True
        return True

    def stop(self):
        self.active = False
        self.previous_frame = None
        self.last_frame = None
        self.capture.release()

    def downsample(self, frame):
        w, h = self.config.downsample_size
        return cv2.resize(frame, (w, h), interpolation=cv2.INTER_NEAREST)

    def motion_centroid(self, current, previous):
        """
        Mean x of the moving pixels between two downsampled frames.

        Returns (avg_x, moving_pixel_count); avg_x is None when nothing moved.
        """
        diff = np.abs(current.astype(np.int16) - previous.astype(np.int16))
        avg_diff = diff[:, :, :3].sum(axis=2) / 3.0
        _, xs = np.nonzero(avg_diff > self.config.motion_threshold)
        count = xs.size
        if count == 0:
            return None, 0
        if self.config.mirror:
            xs = current.shape[1] - xs
        return float(xs.mean()), count

    def process_frame(self, frame):
        """Feeds one camera frame through the tracker and returns the new position."""
        small = self.downsample(frame)
        previous = self.previous_frame
        self.previous_frame = small

        if previous is None or previous.shape != small.shape:
            return self.position

        avg_x, count = self.motion_centroid(small, previous)
        if count < self.config.min_motion_pixels:
            return self.position

        normalized_x = clamp(avg_x / small.shape[1] * 100.0, 0.0, 100.0)
        self.position = smooth_towards(self.position, normalized_x, self.config.smoothing)
        return self.position

    def update(self):
        """Reads the next frame from the camera, if tracking, and processes it."""
        if not self.active:
            return self.position
        frame = self.capture.get_frame()
        if frame is None:
            return self.position
        self.last_frame = frame
        return self.process_frame(frame)
