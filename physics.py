# physics.py

from config import GameConfig
from helpers import boxes_overlap
from quiz_state import Feedback


class TickResult:
    def __init__(self):
        self.item_hit = False
        self.hit_token = None
        self.feedback = None
        self.dropped = []


class PhysicsEngine:
    def __init__(self, config=None):
        self.config = config or GameConfig()

    def player_hitbox(self, player_position):
        """(x, y, w, h) of the catch area, centred on the player and anchored near the bottom."""
        cfg = self.config
        hit_w, hit_h = cfg.hitbox_size
        center_x = player_position / 100.0 * cfg.playfield_width
        top_y = cfg.playfield_height - cfg.hitbox_bottom_offset
        return (center_x - hit_w / 2, top_y, hit_w, hit_h)

    def positive_feedback(self):
        return Feedback(f"+{self.config.reward} Great job!", positive=True)

    def negative_feedback(self):
        return Feedback(f"-{self.config.penalty} Try again!", positive=False)

    def apply_hit(self, state, token, question_count):
        if token.is_correct:
            state.add_score(self.config.reward)
            state.current_question_index = (state.current_question_index + 1) % question_count
            return self.positive_feedback()
        state.add_score(-self.config.penalty)
        return self.negative_feedback()

    def step(self, state, player_position, question_count):
        """
        Advances one animation tick.

        Tokens move, then are checked against the hitbox in stored order.
        Only the first overlapping token is caught and scored; any later
        overlapping tokens stay in play this tick. Tokens that fell past the
        bottom are dropped without penalty.
        """
        result = TickResult()
        if state.terminated:
            return result

        hitbox = self.player_hitbox(player_position)
        height = self.config.playfield_height
        remaining = []

        for token in state.tokens:
            token.y += token.velocity_y

            if not result.item_hit and boxes_overlap(token.rect(), hitbox):
                result.item_hit = True
                result.hit_token = token
                result.feedback = self.apply_hit(state, token, question_count)
            elif token.y < height:
                remaining.append(token)
            else:
                result.dropped.append(token)

        state.tokens = remaining
        return result
