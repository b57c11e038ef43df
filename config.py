# config.py

import os


def _env_int(name):
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"[WARN] Ignoring {name}={raw!r}: not an integer. Using default.")
        return None


class GameConfig:
    """All tuning values of a quiz-catch session in one place.

    Motion tracking
        motion_threshold   per-pixel avg RGB change (0-255) that counts as motion
        min_motion_pixels  frames with fewer moving pixels are treated as noise
        smoothing          exponential smoothing factor for the player position
        downsample_size    (w, h) the camera frame is shrunk to before diffing
        mirror             reflect motion x so moving left moves the basket left

    Spawning / physics
        spawn_interval     seconds between new tokens
        correct_probability  chance a spawned token carries the right answer
        fall_speed_range   (min, max) units per tick
        hitbox_size        (w, h) of the player's catch area
        reward / penalty   score change on a right / wrong catch

    Session
        session_duration   countdown start in seconds
        feedback_duration  seconds a feedback message stays on screen

    Questions
        gemini_api_key     when set, questions are generated with gemini_model
        question_api_url   otherwise, a JSON service to GET them from
    """

    def __init__(self, **overrides):
        # -- Motion tracker --
        self.motion_threshold = 20
        self.min_motion_pixels = 6
        self.smoothing = 0.15
        self.downsample_size = (64, 48)
        self.mirror = True
        self.initial_position = 50.0

        # -- Camera --
        self.camera_index = 0
        self.capture_size = (320, 240)

        # -- Playfield --
        self.playfield_size = (1280, 720)

        # -- Spawner --
        self.spawn_interval = 1.5
        self.correct_probability = 0.6
        self.token_size = (120, 60)
        self.spawn_margin = 25
        self.spawn_y = -100
        self.fall_speed_range = (3.0, 5.0)

        # -- Physics --
        self.hitbox_size = (120, 80)
        self.hitbox_bottom_offset = 100
        self.reward = 10
        self.penalty = 5

        # -- Session --
        self.session_duration = 60
        self.countdown_period = 1.0
        self.feedback_duration = 1.0

        # -- Questions / sound --
        self.gemini_api_key = None
        self.gemini_model = 'gemini-2.5-flash'
        self.question_count = 5
        self.question_api_url = None
        self.question_timeout = 5
        self.sound_enabled = True

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise TypeError(f"Unknown config option: {name}")
            setattr(self, name, value)

    @classmethod
    def from_env(cls, **overrides):
        """Build a config, letting environment variables override the defaults."""
        env = {}
        camera_index = _env_int("MOTION_QUIZ_CAMERA_INDEX")
        if camera_index is not None:
            env["camera_index"] = camera_index
        duration = _env_int("MOTION_QUIZ_DURATION")
        if duration is not None:
            env["session_duration"] = duration
        if os.getenv("GEMINI_API_KEY"):
            env["gemini_api_key"] = os.getenv("GEMINI_API_KEY")
        if os.getenv("QUESTION_API_URL"):
            env["question_api_url"] = os.getenv("QUESTION_API_URL")
        env.update(overrides)
        return cls(**env)

    @property
    def playfield_width(self):
        return self.playfield_size[0]

    @property
    def playfield_height(self):
        return self.playfield_size[1]
