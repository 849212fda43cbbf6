import pygame

from constants import FPS
from .scheduler import Scheduler


class PygameScheduler(Scheduler):
    """Fires the pending tick once per display frame, paced by pygame.time.Clock."""
    def __init__(self, clock=None, fps=FPS):
        super().__init__()
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.fps = fps

    def run_frame(self):
        """Run the pending tick with pygame's millisecond clock, flip the display, then wait out the frame."""
        callback = self.take_pending()
        if callback is not None:
            callback(pygame.time.get_ticks())
        pygame.display.flip()
        self.clock.tick(self.fps)
