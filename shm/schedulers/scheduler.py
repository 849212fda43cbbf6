class Scheduler:
    """
    Chains frame callbacks one at a time, like a host's request-next-frame.
    A callback receives the current time in milliseconds.
    """
    def __init__(self):
        self.pending = None

    def schedule_next_tick(self, callback):
        if self.pending is not None:
            raise RuntimeError("a tick is already scheduled")
        self.pending = callback

    def has_pending(self):
        return self.pending is not None

    def take_pending(self):
        # cleared before the callback runs so it can schedule its successor
        callback, self.pending = self.pending, None
        return callback

    def __repr__(self):
        return f"<{self.__class__.__name__} pending={self.pending is not None}>"

    def __str__(self):
        return self.__repr__()
