import logging

from constants import MAX_FRAME_LENGTH
from . import renderer

logger = logging.getLogger(__name__)

IDLE = 'idle'
RUNNING = 'running'


class SimulationContext:
    """Everything one running demo owns: the models, the drawing surface and the frame timing."""
    def __init__(self, surface=None):
        self.surface = surface
        self.size = surface.get_size() if surface is not None else (0, 0)
        self.oscillator = None
        self.spinner = None
        self.last_time = None   # ms timestamp of the previous tick
        self.state = IDLE
        self.ticks = 0
        self.skipped_ticks = 0

    def models(self):
        return [self.oscillator, self.spinner]

    def __repr__(self):
        return f"<{self.__class__.__name__} state={self.state} ticks={self.ticks} skipped={self.skipped_ticks}>"


class FrameLoop:
    def __init__(self, context, scheduler, max_frame_length=MAX_FRAME_LENGTH):
        self.context = context
        self.scheduler = scheduler
        self.max_frame_length = max_frame_length

    def start(self):
        if self.context.state == RUNNING or self.scheduler.has_pending():
            return
        self.context.state = RUNNING
        logger.info("Frame loop started")
        self.scheduler.schedule_next_tick(self.tick)

    def step_physics(self, now_ms):
        """
        Advance both models by the time since the previous tick.
        A frame longer than max_frame_length is treated as a stall: the models
        are left where they are and nothing is caught up later. The first tick
        has no previous time and is treated the same way.
        Returns True if the models moved.
        """
        ctx = self.context
        last_time, ctx.last_time = ctx.last_time, now_ms
        if last_time is None:
            return False

        frame_length = (now_ms - last_time) * 0.001
        if frame_length > self.max_frame_length:
            ctx.skipped_ticks += 1
            logger.debug("Skipped physics for a %.3fs frame", frame_length)
            return False

        for model in ctx.models():
            model.update(frame_length)
        return True

    def tick(self, now_ms):
        ctx = self.context
        if ctx.oscillator is None or ctx.spinner is None:
            raise RuntimeError("tick() called before any configuration was applied")

        self.step_physics(now_ms)
        if ctx.surface is not None:
            renderer.draw_all(ctx.surface, ctx)
        ctx.ticks += 1
        self.scheduler.schedule_next_tick(self.tick)
