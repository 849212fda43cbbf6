import copy

import pygame
import pytest

from shm.config_intake import ConfigIntake
from shm.frame_loop import IDLE, RUNNING, FrameLoop, SimulationContext
from shm.schedulers.manual import ManualScheduler
from shm.schedulers.scheduler import Scheduler


def _positions(ctx):
    return [(m.body.x, m.body.y) for m in ctx.models()]


@pytest.fixture
def loop(context):
    return FrameLoop(context, ManualScheduler())


def test_start_moves_to_running_and_schedules_once(loop):
    assert loop.context.state == IDLE
    loop.start()
    loop.start()
    assert loop.context.state == RUNNING
    assert loop.scheduler.has_pending()


def test_first_tick_only_records_time(loop):
    before = _positions(loop.context)
    loop.start()
    loop.scheduler.advance(16)
    assert _positions(loop.context) == before
    assert loop.context.last_time == 16
    assert loop.context.ticks == 1
    assert loop.scheduler.has_pending()


def test_short_frames_advance_models(loop):
    loop.start()
    loop.scheduler.advance(16)
    expected = copy.deepcopy(loop.context.models())
    for m in expected:
        m.update(16.0 * 0.001)
    loop.scheduler.advance(16)
    assert _positions(loop.context) == [(m.body.x, m.body.y) for m in expected]


def test_lag_skip_freezes_models_without_catch_up(loop):
    ctx = loop.context
    loop.start()
    loop.scheduler.run(3, 16)
    frozen = _positions(ctx)

    loop.scheduler.advance(40)
    assert _positions(ctx) == frozen
    assert ctx.skipped_ticks == 1

    # the next short frame is a single ordinary step, nothing from the stall
    expected = copy.deepcopy(ctx.models())
    for m in expected:
        m.update(16.0 * 0.001)
    loop.scheduler.advance(16)
    assert _positions(ctx) == [(m.body.x, m.body.y) for m in expected]
    assert ctx.skipped_ticks == 1


def test_loop_keeps_chaining(loop):
    loop.start()
    loop.scheduler.run(50, 10)
    assert loop.context.ticks == 50
    assert loop.scheduler.has_pending()


def test_tick_without_configuration_raises():
    loop = FrameLoop(SimulationContext(), ManualScheduler())
    loop.start()
    with pytest.raises(RuntimeError):
        loop.scheduler.advance(16)


def test_reconfigure_between_ticks(fields, loop):
    loop.start()
    loop.scheduler.run(2, 16)
    fields['spinner_amplitude'] = "40"
    ConfigIntake(fields).apply(loop.context, (1200, 750))
    assert loop.context.spinner.body.x == pytest.approx(840)
    loop.scheduler.advance(16)
    assert loop.context.spinner.body.x < 840


def test_tick_draws_on_surface(fields):
    ctx = SimulationContext(pygame.Surface((600, 400)))
    ConfigIntake(fields).apply(ctx, (600, 550))
    loop = FrameLoop(ctx, ManualScheduler())
    ctx.surface.fill((1, 2, 3))
    loop.start()
    loop.scheduler.advance(16)
    assert ctx.surface.get_at((5, 5))[:3] == (255, 255, 255)


def test_scheduler_allows_one_pending_tick():
    s = Scheduler()
    s.schedule_next_tick(lambda now: None)
    with pytest.raises(RuntimeError):
        s.schedule_next_tick(lambda now: None)
    assert s.take_pending() is not None
    assert s.take_pending() is None


def test_manual_scheduler_without_pending_does_nothing():
    s = ManualScheduler(start_ms=100)
    assert s.advance(16) is False
    assert s.now_ms == 116


def test_start_leaves_an_already_pending_tick_alone(context):
    scheduler = ManualScheduler()
    seen = []
    scheduler.schedule_next_tick(seen.append)
    loop = FrameLoop(context, scheduler)
    loop.start()
    assert context.state == IDLE
    scheduler.advance(16)
    assert seen == [16]
