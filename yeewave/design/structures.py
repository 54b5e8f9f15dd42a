from numbers import Integral

from yeewave.errors import InvalidConfiguration


class Obstacle:
    """Axis-aligned perfect electric conductor, forced to zero field every step.

    Args:
        x_min, x_max: Half-open column range [x_min, x_max)
        y_min, y_max: Half-open row range [y_min, y_max)
    """
    def __init__(self, x_min, x_max, y_min, y_max):
        self.x_min = x_min
        self.x_max = x_max
        self.y_min = y_min
        self.y_max = y_max

    @classmethod
    def from_size(cls, position, width, height):
        """Build an obstacle from its lower corner and extent in cells."""
        x, y = position
        return cls(x, x + width, y, y + height)

    @property
    def width(self):
        return self.x_max - self.x_min

    @property
    def height(self):
        return self.y_max - self.y_min

    def contains(self, x, y):
        return self.x_min <= x < self.x_max and self.y_min <= y < self.y_max

    def cells(self):
        """Yield every (x, y) cell covered by the obstacle."""
        for y in range(self.y_min, self.y_max):
            for x in range(self.x_min, self.x_max):
                yield x, y

    def validate(self, width, height):
        bounds = (self.x_min, self.x_max, self.y_min, self.y_max)
        if any(isinstance(v, bool) or not isinstance(v, Integral) for v in bounds):
            raise InvalidConfiguration(f"{self!r} bounds must be integer cells")
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"{self!r} is empty")
        if self.x_min < 0 or self.y_min < 0 or self.x_max > width or self.y_max > height:
            raise InvalidConfiguration(f"{self!r} lies outside the {width} x {height} grid")

    def apply(self, Ez):
        """Zero the covered cells of a raw (height, width) field array."""
        Ez[self.y_min:self.y_max, self.x_min:self.x_max] = 0.0

    def to_dict(self):
        return {"x_min": self.x_min, "x_max": self.x_max, "y_min": self.y_min, "y_max": self.y_max}

    @classmethod
    def from_dict(cls, data):
        return cls(data["x_min"], data["x_max"], data["y_min"], data["y_max"])

    def copy(self):
        return Obstacle(self.x_min, self.x_max, self.y_min, self.y_max)

    def __eq__(self, other):
        if not isinstance(other, Obstacle):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Obstacle(x=[{self.x_min}, {self.x_max}), y=[{self.y_min}, {self.y_max}))"
