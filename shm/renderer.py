import numpy as np
import pygame

import constants


def oscillator_mass_rect(oscillator):
    b = oscillator.body
    return pygame.Rect(int(b.x), int(b.y), oscillator.width, oscillator.height)


def oscillator_anchor_rect(oscillator):
    """The fixed block the spring hangs from, twice as wide as the mass, one amplitude above the center."""
    return pygame.Rect(int(oscillator.center_x - oscillator.width / 2),
                       int(oscillator.center_y - oscillator.amplitude - oscillator.height),
                       oscillator.width * 2, oscillator.height)


def spring_points(oscillator, segments=constants.SPRING_SEGMENTS, offset=constants.SPRING_OFFSET):
    """
    Zig-zag polyline from the bottom of the anchor down to the top of the mass.
    Each segment is two half-steps; the midpoint of segment i is pushed
    `offset` pixels left for even i and right for odd i.
    Returns an array of shape (2 * segments + 1, 2).
    """
    x0 = oscillator.center_x + oscillator.width / 2
    y0 = oscillator.center_y - oscillator.amplitude
    half_step = (oscillator.body.y - oscillator.center_y + oscillator.amplitude) / (2 * segments)

    n = 2 * segments + 1
    xs = np.full(n, x0, dtype=float)
    xs[1::2] += np.where(np.arange(segments) % 2 == 0, -offset, offset)
    ys = y0 + half_step * np.arange(n)
    return np.column_stack((xs, ys))


def draw_oscillator(screen, oscillator, color=constants.GREY, spring_color=constants.BLACK):
    pygame.draw.rect(screen, color, oscillator_mass_rect(oscillator))
    pygame.draw.rect(screen, color, oscillator_anchor_rect(oscillator))
    pygame.draw.lines(screen, spring_color, False, spring_points(oscillator).tolist(), 1)


def draw_spinner(screen, spinner, color=constants.SPINNER_BLUE, line_color=constants.BLACK):
    b = spinner.body
    center = (int(spinner.center_x), int(spinner.center_y))
    bob = (int(b.x), int(b.y))
    # orbit guide
    pygame.draw.circle(screen, line_color, center, max(1, int(spinner.amplitude)), 1)
    pygame.draw.circle(screen, color, center, constants.SPINNER_HUB_RADIUS)
    pygame.draw.line(screen, line_color, center, bob, 1)
    pygame.draw.circle(screen, color, bob, spinner.radius)


def draw_border(screen, color=constants.BLACK):
    pygame.draw.rect(screen, color, screen.get_rect(), 1)


def draw_all(screen, context):
    """Clear the surface and draw every model in the context."""
    screen.fill(constants.WHITE)
    draw_border(screen)
    draw_oscillator(screen, context.oscillator)
    draw_spinner(screen, context.spinner)


def draw_hud(screen, font, context, top):
    """Parameter readout in the strip below the drawing surface."""
    lines = [
        f"Oscillator: amplitude={context.oscillator.amplitude:g}  omega^2={context.oscillator.omega_squared:g}",
        f"Spinner: amplitude={context.spinner.amplitude:g}  omega^2={context.spinner.omega_squared:g}",
        f"Skipped frames: {context.skipped_ticks}   (R: re-apply settings)",
    ]
    screen.fill(constants.WHITE, pygame.Rect(0, top, screen.get_width(), screen.get_height() - top))
    y = top + 10
    for line in lines:
        surf = font.render(line, True, constants.BLACK)
        screen.blit(surf, (10, y))
        y += surf.get_height() + 6
