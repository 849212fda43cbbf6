import logging
from multiprocessing import Process, Manager

import pygame

import gui_controller as gui_ctrl
from constants import AMPLITUDE_DEFAULT, FIELD_NAMES, HEIGHT, OMEGA_DISPLAY_DEFAULT, WIDTH
from shm.config_intake import ConfigIntake
from shm.frame_loop import FrameLoop, SimulationContext
from shm.renderer import draw_hud
from shm.schedulers.pygame_clock import PygameScheduler

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = {
    'oscillator_amplitude': str(AMPLITUDE_DEFAULT),
    'oscillator_omega': str(OMEGA_DISPLAY_DEFAULT),
    'spinner_amplitude': str(AMPLITUDE_DEFAULT),
    'spinner_omega': str(OMEGA_DISPLAY_DEFAULT),
}


def open_display(viewport_size):
    return pygame.display.set_mode(viewport_size, pygame.RESIZABLE)


def apply_settings(intake, context, screen):
    """Rebuild the models for the current window and point the context at the matching drawing area."""
    intake.apply(context, screen.get_size())
    context.surface = screen.subsurface(pygame.Rect((0, 0), context.size))


def handle_panel_requests(shared, intake, context, screen):
    """Act on flags set by the control panel. Returns False once the panel asked to exit."""
    if shared.get('apply_config', False):
        # cleared first so a click during the apply is not lost
        shared['apply_config'] = False
        apply_settings(intake, context, screen)
    return not shared.get('__exit__', False)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    pygame.init()
    screen = open_display((WIDTH, HEIGHT))
    pygame.display.set_caption("Simple Harmonic Motion")
    font = pygame.font.Font(None, 28)

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    for name in FIELD_NAMES:
        _shared[name] = DEFAULT_FIELDS[name]
    _shared['apply_config'] = False
    _shared['config_revision'] = 0
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()
    logger.info("Control panel started (pid %s)", _gui_proc.pid)

    # --- Simulation ---
    context = SimulationContext()
    intake = ConfigIntake(_shared)
    apply_settings(intake, context, screen)
    scheduler = PygameScheduler()
    loop = FrameLoop(context, scheduler)
    loop.start()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = open_display(event.size)
                apply_settings(intake, context, screen)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                apply_settings(intake, context, screen)

        # --- Handle GUI requests ---
        if not handle_panel_requests(_shared, intake, context, screen):
            running = False

        # --- Tick, draw, flip ---
        draw_hud(screen, font, context, context.size[1])
        scheduler.run_frame()

    # cleanup: signal GUI to exit and join
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)
    if _gui_proc.is_alive():
        logger.warning("Control panel did not exit; terminating it")
        _gui_proc.terminate()

    pygame.quit()


if __name__ == "__main__":
    main()
