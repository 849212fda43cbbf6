"""
Reads the user's amplitude and omega fields, corrects them, and rebuilds the
two models for the current viewport.

Malformed or out-of-range input is never an error: it is replaced by a
default or a limit and the corrected value is written back into the field
so the user sees it. This is a usability compromise (a typo silently
becomes 100) kept on purpose for the demo.
"""
import logging
import re

import constants
from .models import OscillatorModel, SpinnerModel

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))')


def parse_int(text):
    """
    Leading-integer parse: "42" -> 42, " 12px" -> 12, "3.7" -> 3, "0x1A" -> 26.
    Only ASCII digits count. Returns None when the text does not start with
    an integer ("0x" with no hex digits after it included).
    """
    if text is None:
        return None
    match = _LEADING_INT.match(str(text))
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == '-' else value


def correct_amplitude(text):
    """Return (amplitude, display) where display is the text to write back, or None if unchanged."""
    value = parse_int(text)
    if value is None:
        return constants.AMPLITUDE_DEFAULT, str(constants.AMPLITUDE_DEFAULT)
    if value > constants.AMPLITUDE_MAX:
        return constants.AMPLITUDE_MAX, str(constants.AMPLITUDE_MAX)
    if value < constants.AMPLITUDE_MIN:
        return constants.AMPLITUDE_MIN, str(constants.AMPLITUDE_MIN)
    return value, None


def correct_omega_squared(text):
    """
    Return (omega_squared, display). omega_squared = omega ** 2 / OMEGA_SCALE.
    The field holds omega while the model stores omega squared, so the text
    written back ("100", "500") differs from the value stored (4, 100).
    There is no lower limit.
    """
    value = parse_int(text)
    if value is None:
        return constants.OMEGA_SQUARED_DEFAULT, str(constants.OMEGA_DISPLAY_DEFAULT)
    # compared as integers: a huge omega would overflow the float division
    if value * value > constants.OMEGA_SQUARED_MAX * constants.OMEGA_SCALE:
        return constants.OMEGA_SQUARED_MAX, str(constants.OMEGA_DISPLAY_MAX)
    return value * value / constants.OMEGA_SCALE, None


def surface_size(viewport_size):
    """The drawing surface takes the viewport minus the HUD strip."""
    width, height = viewport_size
    return int(width), max(1, int(height) - constants.HUD_HEIGHT)


class ConfigIntake:
    """
    `fields` is any mutable mapping holding the four input texts under
    constants.FIELD_NAMES (a Manager dict shared with the control panel in
    the app, a plain dict in tests).
    """
    def __init__(self, fields):
        self.fields = fields

    def _read(self, name, correct):
        value, display = correct(self.fields.get(name))
        if display is not None:
            logger.debug("Corrected %s from %r to %s", name, self.fields.get(name), display)
            self.fields[name] = display
            return value, True
        return value, False

    def read_amplitude(self, name):
        return self._read(name, correct_amplitude)

    def read_omega_squared(self, name):
        return self._read(name, correct_omega_squared)

    def apply(self, context, viewport_size):
        """Rebuild both models from the fields and the viewport, replacing the ones in `context`."""
        width, height = surface_size(viewport_size)

        osc_amplitude, c1 = self.read_amplitude('oscillator_amplitude')
        spin_amplitude, c2 = self.read_amplitude('spinner_amplitude')
        osc_omega_squared, c3 = self.read_omega_squared('oscillator_omega')
        spin_omega_squared, c4 = self.read_omega_squared('spinner_omega')

        context.size = (width, height)
        context.oscillator = OscillatorModel(width / 3 - width / 21, height / 2 - height / 43,
                                             osc_amplitude, osc_omega_squared)
        context.spinner = SpinnerModel(width * 2 / 3, height / 2, spin_amplitude, spin_omega_squared)

        if c1 or c2 or c3 or c4:
            # tells the control panel to refresh its widgets from the fields
            self.fields['config_revision'] = self.fields.get('config_revision', 0) + 1

        logger.info("Applied settings: oscillator amplitude=%s omega^2=%s, spinner amplitude=%s omega^2=%s, surface=%dx%d",
                    osc_amplitude, osc_omega_squared, spin_amplitude, spin_omega_squared, width, height)
        logger.debug("Initial state: oscillator %s, spinner %s",
                     context.oscillator.body.to_dict(), context.spinner.body.to_dict())
        return context
