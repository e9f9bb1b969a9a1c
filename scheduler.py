class ScheduledTask:
    def __init__(self, callback, due_ms, interval_ms, repeat):
        self.callback = callback
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.repeat = repeat
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class TaskQueue:
    """Delayed callbacks polled once per tick on the game thread.

    Time only moves when advance() is called, so a scene that is not being
    updated also holds its timers still.
    """

    def __init__(self):
        self.now_ms = 0
        self.tasks = []

    def schedule(self, delay_ms, callback, repeat=False) -> ScheduledTask:
        task = ScheduledTask(callback, self.now_ms + delay_ms, delay_ms, repeat)
        self.tasks.append(task)
        return task

    def clear(self):
        for task in self.tasks:
            task.cancel()
        self.tasks = []

    def pending(self):
        return [task for task in self.tasks if not task.cancelled]

    def advance(self, dt_ms):
        self.now_ms += dt_ms
        # callbacks may schedule, cancel or clear while we run
        for task in list(self.tasks):
            while not task.cancelled and task.due_ms <= self.now_ms:
                if task.repeat:
                    task.due_ms += max(task.interval_ms, 1)
                else:
                    task.cancel()
                task.callback()
        self.tasks = [task for task in self.tasks if not task.cancelled]
