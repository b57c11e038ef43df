# session_clock.py

class SessionClock:
    """
    One-second countdown for a session.

    On reaching zero it cancels itself, marks the session terminated and
    hands the final score to `on_expire` exactly once.
    """

    def __init__(self, scheduler, state, on_expire, period=1.0):
        self.scheduler = scheduler
        self.state = state
        self.on_expire = on_expire
        self.period = period
        self.task = None
        self.expired = False

    def start(self):
        if self.task is not None or self.expired:
            return
        self.task = self.scheduler.call_every(self.period, self.tick)

    def stop(self):
        if self.task is not None:
            self.task.cancel()
            self.task = None

    def is_running(self):
        return self.task is not None

    def tick(self):
        if self.expired or self.state.terminated:
            self.stop()
            return
        self.state.time_remaining = max(0, self.state.time_remaining - 1)
        if self.state.time_remaining == 0:
            self.stop()
            self.expired = True
            self.state.terminated = True
            print("Game Over!")
            self.on_expire(self.state.score)
