import pygame
import pytest

import main
from shm.config_intake import ConfigIntake
from shm.frame_loop import SimulationContext
from shm.schedulers.pygame_clock import PygameScheduler


@pytest.fixture
def screen():
    pygame.init()
    yield pygame.display.set_mode((800, 600))
    pygame.quit()


class ClickDuringApply(ConfigIntake):
    """Sets the panel's Apply flag while an apply is running."""
    def apply(self, context, viewport_size):
        self.fields['apply_config'] = True
        return super().apply(context, viewport_size)


def test_apply_settings_slices_surface_above_hud(fields, screen):
    ctx = SimulationContext()
    main.apply_settings(ConfigIntake(fields), ctx, screen)
    assert ctx.size == (800, 450)
    assert ctx.surface.get_size() == (800, 450)
    assert ctx.spinner.center_x == pytest.approx(800 * 2 / 3)


def test_apply_settings_follows_resize(fields, screen):
    ctx = SimulationContext()
    main.apply_settings(ConfigIntake(fields), ctx, screen)
    bigger = pygame.display.set_mode((1000, 700))
    main.apply_settings(ConfigIntake(fields), ctx, bigger)
    assert ctx.surface.get_size() == (1000, 550)


def test_panel_apply_request_reapplies_settings(fields, screen):
    ctx = SimulationContext()
    fields.update(apply_config=True, spinner_amplitude="40")
    assert main.handle_panel_requests(fields, ConfigIntake(fields), ctx, screen) is True
    assert fields['apply_config'] is False
    assert ctx.spinner.amplitude == 40


def test_click_during_apply_is_kept(fields, screen):
    ctx = SimulationContext()
    fields['apply_config'] = True
    main.handle_panel_requests(fields, ClickDuringApply(fields), ctx, screen)
    assert fields['apply_config'] is True


def test_panel_exit_request_stops_loop(fields, screen):
    fields['__exit__'] = True
    assert main.handle_panel_requests(fields, ConfigIntake(fields), SimulationContext(), screen) is False


def test_run_frame_fires_pending_tick(screen):
    scheduler = PygameScheduler(fps=1000)
    stamps = []
    scheduler.schedule_next_tick(stamps.append)
    scheduler.run_frame()
    assert len(stamps) == 1
    assert isinstance(stamps[0], int)
    assert not scheduler.has_pending()


def test_run_frame_without_pending_tick(screen):
    scheduler = PygameScheduler(fps=1000)
    scheduler.run_frame()
    assert not scheduler.has_pending()
