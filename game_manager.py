# game_manager.py

import threading

import cv2
import numpy as np

from config import GameConfig
from main_menu import (EXIT_ACTION, MENU_ACTION, START_ACTION, GameOverScreen,
                       LoadingScreen, MainMenu)
from question_provider import fallback_questions, load_questions
from quiz_catch_game import QuizCatchGame
from scheduler import Scheduler

WINDOW_NAME = 'Motion Quiz Catch'


class QuestionLoader(threading.Thread):
    """Runs the question source off the main loop; `questions` is set when done."""

    def __init__(self, question_source):
        super().__init__()
        self.daemon = True
        self.question_source = question_source
        self.questions = None

    def run(self):
        try:
            self.questions = self.question_source()
        except Exception as e:
            print(f"[WARN] Question loading failed: {e}. Using built-in questions.")
            self.questions = fallback_questions()

    def is_done(self):
        return not self.is_alive() and self.questions is not None


class GameManager:
    """MENU -> LOADING -> PLAYING -> GAME_OVER loop around one cv2 window."""

    def __init__(self, config=None, scheduler=None, question_source=None, game_factory=None):
        self.config = config or GameConfig.from_env()
        self.scheduler = scheduler or Scheduler()
        self.question_source = question_source or (lambda: load_questions(self.config))
        self.game_factory = game_factory or QuizCatchGame
        self.current_game = MainMenu()
        self.loader = None
        self.running = True

    def canvas(self):
        width, height = self.config.playfield_size
        return np.zeros((height, width, 3), dtype=np.uint8)

    def start_game(self):
        self.end_session()
        self.current_game = LoadingScreen()
        print("Loading questions...")
        self.loader = QuestionLoader(self.question_source)
        self.loader.start()

    def poll_loader(self):
        """Starts the session on the main thread once the loader has finished."""
        if self.loader is None or not self.loader.is_done():
            return
        questions = self.loader.questions
        self.loader = None
        print(f"Loaded {len(questions)} questions.")

        game = self.game_factory(questions, self.game_over, config=self.config, scheduler=self.scheduler)
        self.current_game = game
        if not game.start():
            print("[WARN] Camera unavailable; waiting on the permission screen.")

    def is_loading(self):
        return self.loader is not None

    def game_over(self, score):
        self.current_game = GameOverScreen(score)

    def end_session(self):
        # A pending load is abandoned; its result is never used
        self.loader = None
        if isinstance(self.current_game, QuizCatchGame):
            self.current_game.stop()

    def return_to_menu(self):
        self.end_session()
        self.current_game = MainMenu()

    def handle_action(self, action):
        if action == START_ACTION:
            self.start_game()
        elif action == MENU_ACTION:
            self.return_to_menu()
        elif action == EXIT_ACTION:
            self.running = False

    def handle_key(self, key):
        if key == 0xFF:
            return
        if key in (ord('q'), 27):
            self.running = False
        elif key == ord('m') and not self.current_game.is_menu():
            self.return_to_menu()
        else:
            self.handle_action(self.current_game.handle_key(key))

    def show(self, frame):
        """Puts the frame on screen and returns the pressed key (0xFF for none)."""
        cv2.imshow(WINDOW_NAME, frame)
        return cv2.waitKey(1) & 0xFF

    def step(self):
        """One main-loop iteration: finish loading, run due timers, draw, read a key."""
        self.poll_loader()
        self.scheduler.run_pending()
        frame = self.current_game.render(self.canvas())
        self.handle_key(self.show(frame))

    def run(self):
        try:
            while self.running:
                self.step()
        finally:
            self.end_session()
            self.scheduler.cancel_all()
            cv2.destroyAllWindows()


def main():
    GameManager().run()


if __name__ == "__main__":
    main()
