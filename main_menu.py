# main_menu.py

import cv2

from game import Game
from helpers import draw_centered_text, draw_panel

START_ACTION = "Start Quiz Game"
MENU_ACTION = "Return To Menu"
EXIT_ACTION = "Exit"

START_KEYS = (ord(' '), 13)


class MainMenu(Game):
    def __init__(self):
        self.title = "Sufficiency Quest"
        self.lines = [
            "Move left and right in front of the camera",
            "to catch the answer that matches the question!",
            " ",
            "SPACE: start    Q: quit",
        ]

    def is_menu(self):
        return True

    def handle_key(self, key):
        if key in START_KEYS:
            return START_ACTION
        if key == ord('q'):
            return EXIT_ACTION
        return None

    def render(self, frame):
        height, width = frame.shape[:2]
        frame[:] = (60, 140, 60)
        draw_panel(frame, (width // 2 - 450, 120), (width // 2 + 450, height - 120), (245, 245, 245), alpha=0.92)
        draw_centered_text(frame, self.title, width // 2, 230, 2.0, (40, 120, 40), 4)
        for i, line in enumerate(self.lines):
            draw_centered_text(frame, line, width // 2, 330 + i * 50, 0.9, (60, 60, 60), 2)
        return frame


class LoadingScreen(Game):
    def __init__(self):
        self.frames_drawn = 0

    def is_menu(self):
        return True

    def handle_key(self, key):
        if key == ord('m'):
            return MENU_ACTION
        return None

    def render(self, frame):
        height, width = frame.shape[:2]
        frame[:] = (240, 220, 200)
        dots = "." * (self.frames_drawn // 10 % 4)
        self.frames_drawn += 1
        draw_centered_text(frame, "Preparing questions" + dots, width // 2, height // 2, 1.4, (60, 60, 60), 3)
        draw_centered_text(frame, "Get ready to move!", width // 2, height // 2 + 60, 0.9, (110, 110, 110), 2)
        return frame


class GameOverScreen(Game):
    def __init__(self, final_score):
        self.final_score = final_score

    def is_menu(self):
        return True

    def handle_key(self, key):
        if key in START_KEYS:
            return START_ACTION
        if key == ord('m'):
            return MENU_ACTION
        if key == ord('q'):
            return EXIT_ACTION
        return None

    def render(self, frame):
        height, width = frame.shape[:2]
        frame[:] = (180, 100, 170)
        draw_panel(frame, (width // 2 - 400, 120), (width // 2 + 400, height - 120), (255, 255, 255), alpha=0.95)
        draw_centered_text(frame, "Time's up!", width // 2, 220, 2.0, (50, 50, 50), 4)
        draw_centered_text(frame, "YOUR SCORE", width // 2, 300, 0.9, (120, 120, 120), 2)
        draw_centered_text(frame, str(self.final_score), width // 2, 420, 3.5, (160, 40, 130), 8)
        cv2.putText(frame, "SPACE: play again    M: menu    Q: quit", (width // 2 - 330, height - 170),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, (80, 80, 80), 2, cv2.LINE_AA)
        return frame
