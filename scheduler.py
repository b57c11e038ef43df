# scheduler.py

import time


class ScheduledTask:
    def __init__(self, callback, interval, next_run, repeat):
        self.callback = callback
        self.interval = interval
        self.next_run = next_run
        self.repeat = repeat
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def is_due(self, now):
        return not self.cancelled and now >= self.next_run


class Scheduler:
    """Cooperative timer wheel polled once per main-loop iteration.

    Every callback runs on the caller's thread inside run_pending(), so
    state touched by callbacks never needs locking. An interval of 0 means
    "every poll", which is how the per-frame tick is driven.
    """

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.tasks = []

    def now(self):
        return self.clock()

    def call_every(self, interval, callback):
        task = ScheduledTask(callback, interval, self.now() + interval, repeat=True)
        self.tasks.append(task)
        return task

    def call_later(self, delay, callback):
        task = ScheduledTask(callback, delay, self.now() + delay, repeat=False)
        self.tasks.append(task)
        return task

    def run_pending(self):
        now = self.now()
        # Snapshot: tasks added by callbacks wait for the next poll
        for task in list(self.tasks):
            if not task.is_due(now):
                continue
            if task.repeat:
                # Catch up one period at a time; never fire twice per poll
                task.next_run += task.interval
                if task.next_run <= now and task.interval > 0:
                    task.next_run = now + task.interval
            else:
                task.cancel()
            task.callback()
        self.tasks = [t for t in self.tasks if not t.cancelled]

    def cancel_all(self):
        for task in self.tasks:
            task.cancel()
        self.tasks = []

    def pending_count(self):
        return sum(1 for t in self.tasks if not t.cancelled)
