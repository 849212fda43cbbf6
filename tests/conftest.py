import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from shm.config_intake import ConfigIntake
from shm.frame_loop import SimulationContext


@pytest.fixture
def fields():
    return {
        'oscillator_amplitude': "100",
        'oscillator_omega': "50",
        'spinner_amplitude': "100",
        'spinner_omega': "50",
    }


@pytest.fixture
def context(fields):
    """Headless context (no drawing surface) configured for a 1200x750 viewport."""
    ctx = SimulationContext()
    ConfigIntake(fields).apply(ctx, (1200, 750))
    return ctx
