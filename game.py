# game.py

class Game:
    def update(self, player_position, now):
        """Advance game state using the current player position and clock time."""
        pass

    def render(self, frame):
        """Draw the game onto the frame. May return an action string instead."""
        return frame

    def handle_key(self, key):
        """React to a keyboard key. May return an action string."""
        return None

    def reset(self):
        """Reset game state."""
        pass

    def stop(self):
        """Release anything the game holds (timers, camera)."""
        pass

    def is_menu(self):
        """Return True if this is a menu, False if a playable game."""
        return False
