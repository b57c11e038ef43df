# quiz_catch_game.py

import os

import cv2
import pygame

from config import GameConfig
from game import Game
from helpers import FONT, draw_centered_text, draw_panel
from motion_tracker import MotionTracker
from physics import PhysicsEngine
from question_provider import fallback_questions
from quiz_state import SessionState
from scheduler import Scheduler
from session_clock import SessionClock
from spawner import Spawner

GREEN = (80, 200, 60)
RED = (60, 60, 220)
WHITE = (255, 255, 255)
DARK = (30, 30, 30)
AMBER = (40, 180, 250)
BANNER_BLUE = (200, 110, 30)


class QuizCatchGame(Game):
    """
    One play session: catch the falling answers that match the question.

    This object owns every moving part of the session. start() opens the
    camera and registers two tasks on the scheduler, the per-frame tick and
    the one-second countdown; stop() cancels both and releases the camera.
    """

    def __init__(self, questions, on_game_over, config=None, scheduler=None, tracker=None, rng=None):
        self.config = config or GameConfig()
        self.questions = list(questions) or fallback_questions()
        self.on_game_over = on_game_over
        self.scheduler = scheduler or Scheduler()
        self.tracker = tracker or MotionTracker(self.config)
        self.spawner = Spawner(self.config, rng)
        self.physics = PhysicsEngine(self.config)

        self.state = SessionState(self.config.session_duration)
        self.clock = SessionClock(self.scheduler, self.state, self.handle_time_up, self.config.countdown_period)
        self.frame_task = None
        self.feedback_task = None
        self.started = False
        self.stopped = False

        self.correct_sound, self.wrong_sound = None, None
        if self.config.sound_enabled:
            self.load_sounds()

    def load_sounds(self):
        try:
            pygame.mixer.init()
            correct_path = os.path.join('assets', 'sounds', 'correct.mp3')
            wrong_path = os.path.join('assets', 'sounds', 'wrong.mp3')
            self.correct_sound = pygame.mixer.Sound(correct_path) if os.path.exists(correct_path) else None
            self.wrong_sound = pygame.mixer.Sound(wrong_path) if os.path.exists(wrong_path) else None
            if self.correct_sound: self.correct_sound.set_volume(0.5)
            if self.wrong_sound: self.wrong_sound.set_volume(0.5)
        except pygame.error as e:
            print(f"Sound init failed: {e}. Running without sound.")
            self.correct_sound, self.wrong_sound = None, None

    # --------- lifecycle ---------

    def start(self):
        """Opens the camera and starts both drivers. Returns False if the camera is unavailable."""
        if self.started:
            return self.tracker.permission_granted
        self.started = True
        if not self.tracker.start():
            # Gameplay stays blocked; the countdown never starts
            return False
        self.frame_task = self.scheduler.call_every(0, self.tick)
        self.clock.start()
        return True

    def stop(self):
        """Tears the session down. Safe to call more than once."""
        if self.stopped:
            return
        self.stopped = True
        self.state.terminated = True
        try:
            if self.frame_task is not None:
                self.frame_task.cancel()
                self.frame_task = None
        finally:
            try:
                self.clock.stop()
            finally:
                try:
                    if self.feedback_task is not None:
                        self.feedback_task.cancel()
                        self.feedback_task = None
                finally:
                    self.tracker.stop()

    def reset(self):
        self.stop()
        self.tracker.position = float(self.config.initial_position)
        self.spawner.reset()
        self.state = SessionState(self.config.session_duration)
        self.clock = SessionClock(self.scheduler, self.state, self.handle_time_up, self.config.countdown_period)
        self.started = False
        self.stopped = False

    def handle_time_up(self, score):
        self.stop()
        self.on_game_over(score)

    def is_blocked(self):
        return self.started and not self.tracker.permission_granted

    # --------- simulation ---------

    @property
    def current_question(self):
        return self.questions[self.state.current_question_index]

    def tick(self):
        if self.state.terminated:
            return
        position = self.tracker.update()
        self.update(position, self.scheduler.now())

    def update(self, player_position, now):
        if self.state.terminated:
            return None
        result = self.physics.step(self.state, player_position, len(self.questions))
        if result.feedback is not None:
            self.show_feedback(result.feedback)
        self.spawner.maybe_spawn(self.state, self.current_question, now, result.item_hit)
        return result

    def show_feedback(self, feedback):
        self.state.feedback = feedback
        sound = self.correct_sound if feedback.positive else self.wrong_sound
        if sound: sound.play()
        if self.feedback_task is not None:
            self.feedback_task.cancel()
        self.feedback_task = self.scheduler.call_later(
            self.config.feedback_duration, lambda: self.clear_feedback(feedback))

    def clear_feedback(self, feedback):
        if self.state.feedback is feedback:
            self.state.feedback = None
        self.feedback_task = None

    def snapshot(self):
        """What the screen needs this tick."""
        return {
            'score': self.state.score,
            'time_remaining': self.state.time_remaining,
            'question': self.current_question,
            'player_position': self.tracker.position,
            'tokens': list(self.state.tokens),
            'feedback': self.state.feedback,
            'permission_granted': self.tracker.permission_granted,
        }

    # --------- rendering ---------

    def draw_background(self, frame):
        width, height = self.config.playfield_size
        camera = self.tracker.last_frame
        if camera is None:
            frame[:] = DARK
            return frame
        if self.config.mirror:
            camera = cv2.flip(camera, 1)
        camera = cv2.resize(camera, (width, height), interpolation=cv2.INTER_LINEAR)
        frame[:] = cv2.convertScaleAbs(camera, alpha=0.6)
        return frame

    def draw_hud(self, frame, view):
        width = frame.shape[1]
        draw_panel(frame, (width // 2 - 420, 20), (width // 2 + 420, 80), WHITE, alpha=0.9)
        cv2.putText(frame, f"SCORE: {view['score']}", (width // 2 - 400, 62), FONT, 1.0, (40, 140, 40), 2, cv2.LINE_AA)
        time_color = RED if view['time_remaining'] < 10 else BANNER_BLUE
        cv2.putText(frame, f"TIME: {view['time_remaining']}", (width // 2 + 220, 62), FONT, 1.0, time_color, 2, cv2.LINE_AA)

        draw_panel(frame, (width // 2 - 500, 95), (width // 2 + 500, 160), BANNER_BLUE, alpha=0.9)
        draw_centered_text(frame, view['question'].text, width // 2, 138, 0.8, WHITE, 2)

    def draw_tokens(self, frame, tokens):
        for token in tokens:
            x1, y1 = int(token.x), int(token.y)
            x2, y2 = int(token.x + token.width), int(token.y + token.height)
            fill = (200, 240, 200) if token.is_correct else (200, 200, 250)
            border = GREEN if token.is_correct else RED
            draw_panel(frame, (x1, y1), (x2, y2), fill, alpha=0.95)
            cv2.rectangle(frame, (x1, y1), (x2, y2), border, 2)
            draw_centered_text(frame, token.text, (x1 + x2) // 2, (y1 + y2) // 2 + 7, 0.55, DARK, 2)

    def draw_player(self, frame, position):
        x, y, w, h = self.physics.player_hitbox(position)
        x1, y1, x2, y2 = int(x), int(y), int(x + w), int(y + h)
        draw_panel(frame, (x1, y1), (x2, y2), AMBER, alpha=0.95)
        cv2.rectangle(frame, (x1, y1), (x2, y2), (20, 100, 200), 3)
        draw_centered_text(frame, "CATCH!", (x1 + x2) // 2, y1 - 10, 0.6, WHITE, 2)

    def draw_feedback(self, frame, feedback):
        height, width = frame.shape[:2]
        color = GREEN if feedback.positive else RED
        draw_centered_text(frame, feedback.message, width // 2 + 3, height // 2 + 3, 2.0, WHITE, 8)
        draw_centered_text(frame, feedback.message, width // 2, height // 2, 2.0, color, 5)

    def draw_permission_overlay(self, frame):
        height, width = frame.shape[:2]
        frame[:] = cv2.convertScaleAbs(frame, alpha=0.2)
        draw_centered_text(frame, "Camera permission required", width // 2, height // 2 - 20, 1.4, WHITE, 3)
        draw_centered_text(frame, "Allow camera access to play with motion tracking. Press M for menu.",
                           width // 2, height // 2 + 30, 0.7, (220, 220, 220), 2)

    def render(self, frame):
        view = self.snapshot()
        frame = self.draw_background(frame)
        self.draw_hud(frame, view)
        self.draw_tokens(frame, view['tokens'])
        self.draw_player(frame, view['player_position'])
        if view['feedback'] is not None:
            self.draw_feedback(frame, view['feedback'])
        if self.is_blocked():
            self.draw_permission_overlay(frame)
        return frame
