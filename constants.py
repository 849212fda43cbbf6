# --- Constants ---
WIDTH, HEIGHT = 1200, 750
FPS = 60
HUD_HEIGHT = 150            # strip below the drawing surface for the parameter readout

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (128, 128, 128)
SPINNER_BLUE = (0, 149, 221)  # "#0095DD"

# --- Physics ---
MAX_FRAME_LENGTH = 0.025    # seconds; longer frames are skipped, never integrated

# --- Config intake limits ---
AMPLITUDE_DEFAULT = 100
AMPLITUDE_MIN = 1
AMPLITUDE_MAX = 200
OMEGA_SCALE = 2500          # omega_squared = omega ** 2 / OMEGA_SCALE
OMEGA_SQUARED_DEFAULT = 4
OMEGA_SQUARED_MAX = 100
OMEGA_DISPLAY_DEFAULT = 100
OMEGA_DISPLAY_MAX = 500

# --- Model geometry ---
OSCILLATOR_WIDTH = 120
OSCILLATOR_HEIGHT = 60
SPINNER_RADIUS = 30
SPINNER_HUB_RADIUS = 10
SPRING_SEGMENTS = 10
SPRING_OFFSET = 10

FIELD_NAMES = ('oscillator_amplitude', 'oscillator_omega', 'spinner_amplitude', 'spinner_omega')
