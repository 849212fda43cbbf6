import math

from constants import OSCILLATOR_HEIGHT, OSCILLATOR_WIDTH, SPINNER_RADIUS
from .PhysicsBody import PhysicsBody


class HarmonicModel:
    """Base class for a body pulled back towards (center_x, center_y) with strength omega_squared."""
    def __init__(self, center_x, center_y, amplitude, omega_squared):
        self.center_x = float(center_x)
        self.center_y = float(center_y)
        self.amplitude = float(amplitude)
        self.omega_squared = float(omega_squared)
        self.body = PhysicsBody(self.center_x, self.center_y)

    @property
    def omega(self):
        return math.sqrt(self.omega_squared)

    @property
    def peak_velocity(self):
        return self.amplitude * self.omega

    def restoring_acceleration(self, position, center):
        return -(position - center) * self.omega_squared

    def update(self, frame_length):
        """Update the model. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return (f"<{self.__class__.__name__} center=({self.center_x:.1f}, {self.center_y:.1f}) "
                f"amplitude={self.amplitude} omega_squared={self.omega_squared} body={self.body}>")

    def __str__(self):
        return self.__repr__()


class OscillatorModel(HarmonicModel):
    """Vertical mass on a spring. Moves along x == center_x only."""
    def __init__(self, center_x, center_y, amplitude, omega_squared,
                 width=OSCILLATOR_WIDTH, height=OSCILLATOR_HEIGHT):
        super().__init__(center_x, center_y, amplitude, omega_squared)
        self.width = width
        self.height = height
        # passes the center at peak speed: y(t) = center_y + amplitude * sin(wt)
        self.body.dy = self.peak_velocity

    def update(self, frame_length):
        """
        Semi-implicit Euler step: the velocity is updated from the old position,
        then the position from the new velocity.
        """
        b = self.body
        b.dy += self.restoring_acceleration(b.y, self.center_y) * frame_length
        b.move(frame_length)


class SpinnerModel(HarmonicModel):
    """
    The same restoring force applied on both axes. Starting the axes in
    quadrature (x at rest at full displacement, y at peak speed through the
    center) gives a near-circular orbit of radius `amplitude`.
    """
    def __init__(self, center_x, center_y, amplitude, omega_squared, radius=SPINNER_RADIUS):
        super().__init__(center_x, center_y, amplitude, omega_squared)
        self.radius = radius
        self.body.x = self.center_x + self.amplitude
        self.body.dx = 0.0
        self.body.dy = self.peak_velocity

    def update(self, frame_length):
        b = self.body
        b.dy += self.restoring_acceleration(b.y, self.center_y) * frame_length
        b.dx += self.restoring_acceleration(b.x, self.center_x) * frame_length
        b.move(frame_length)
