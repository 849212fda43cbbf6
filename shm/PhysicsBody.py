from constants import MAX_FRAME_LENGTH


class PhysicsBody:
    """A point with a position and an instantaneous velocity, in pixels and pixels/second."""
    def __init__(self, x=0.0, y=0.0, dx=0.0, dy=0.0):
        self.x = float(x)
        self.y = float(y)
        self.dx = float(dx)
        self.dy = float(dy)

    def move(self, frame_length):
        """
        Advance the position by the current velocity over `frame_length` seconds.
        Steps longer than MAX_FRAME_LENGTH are shortened to it, so a slow frame
        never produces a large integration step.
        """
        if frame_length > MAX_FRAME_LENGTH:
            frame_length = MAX_FRAME_LENGTH
        self.x += self.dx * frame_length
        self.y += self.dy * frame_length

    def distance_squared(self, other):
        return (self.x - other.x) * (self.x - other.x) + (self.y - other.y) * (self.y - other.y)

    def __repr__(self):
        return f"{self.__class__.__name__}(pos=({self.x:.2f}, {self.y:.2f}), vel=({self.dx:.2f}, {self.dy:.2f}))"

    def __str__(self):
        return self.__repr__()

    def to_dict(self):
        return {
            'pos': (self.x, self.y),
            'vel': (self.dx, self.dy),
        }
