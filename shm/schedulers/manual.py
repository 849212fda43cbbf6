from .scheduler import Scheduler


class ManualScheduler(Scheduler):
    """Drives ticks from a synthetic clock; no display or real time involved."""
    def __init__(self, start_ms=0.0):
        super().__init__()
        self.now_ms = float(start_ms)

    def advance(self, ms):
        """Move the clock forward by `ms` and fire the pending tick, if any. Returns True if a tick ran."""
        self.now_ms += ms
        callback = self.take_pending()
        if callback is None:
            return False
        callback(self.now_ms)
        return True

    def run(self, frames, frame_ms):
        for _ in range(frames):
            if not self.advance(frame_ms):
                break
