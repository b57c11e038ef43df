# spawner.py

import random
import uuid

from config import GameConfig
from quiz_state import Token


class Spawner:
    def __init__(self, config=None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.last_spawn = None

    def reset(self):
        self.last_spawn = None

    def is_due(self, now):
        if self.last_spawn is None:
            return True
        return now - self.last_spawn > self.config.spawn_interval

    def pick_answer(self, question):
        """Returns (text, is_correct) for the next token of `question`."""
        if self.rng.random() < self.config.correct_probability:
            return question.correct_answer, True
        return self.rng.choice(question.wrong_answers), False

    def spawn_token(self, question):
        cfg = self.config
        token_w, token_h = cfg.token_size
        text, is_correct = self.pick_answer(question)
        max_x = max(cfg.spawn_margin, cfg.playfield_width - token_w - cfg.spawn_margin)
        return Token(
            id=uuid.uuid4().hex[:12],
            text=text,
            is_correct=is_correct,
            x=self.rng.uniform(cfg.spawn_margin, max_x),
            y=float(cfg.spawn_y),
            velocity_y=self.rng.uniform(*cfg.fall_speed_range),
            width=token_w,
            height=token_h,
        )

    def maybe_spawn(self, state, question, now, item_hit=False):
        """
        Appends a new token to state.tokens when the interval has elapsed.

        Nothing spawns on a tick that just resolved a catch; the interval
        keeps running so the next tick can spawn instead.
        """
        if item_hit or state.terminated or not self.is_due(now):
            return None
        token = self.spawn_token(question)
        state.tokens.append(token)
        self.last_spawn = now
        return token
