import math
from numbers import Integral

from yeewave.errors import InvalidConfiguration


class PointSource():
    """Continuous sinusoidal source stamped onto a single Ez cell.

    Args:
        position: Grid cell (x, y).
        omega: Angular frequency in radians per unit of simulated time.
        amplitude: Peak value written to the cell.
        phase: Phase offset in radians.
        enabled: Disabled sources are skipped during injection.
    """
    def __init__(self, position=(0, 0), omega=0.25, amplitude=1.0, phase=0.0, enabled=True):
        self.position = tuple(position)
        self.omega = float(omega)
        self.amplitude = float(amplitude)
        self.phase = float(phase)
        self.enabled = bool(enabled)

    @property
    def x(self):
        return self.position[0]

    @property
    def y(self):
        return self.position[1]

    def value(self, t: float) -> float:
        """Source value at simulated time t."""
        return self.amplitude * math.sin(t * self.omega + self.phase)

    def validate(self, width, height):
        if len(self.position) != 2:
            raise InvalidConfiguration(f"{self!r} needs an (x, y) position")
        if any(isinstance(v, bool) or not isinstance(v, Integral) for v in self.position):
            raise InvalidConfiguration(f"{self!r} position must be integer cells")
        x, y = self.position
        if not (0 <= x < width and 0 <= y < height):
            raise InvalidConfiguration(f"{self!r} lies outside the {width} x {height} grid")
        for name in ("omega", "amplitude", "phase"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidConfiguration(f"{self!r} has a non-finite {name}")

    def to_dict(self):
        return {
            "position": list(self.position),
            "omega": self.omega,
            "amplitude": self.amplitude,
            "phase": self.phase,
            "enabled": self.enabled,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(**data)

    def copy(self):
        """Create a copy of the PointSource."""
        return PointSource(self.position, self.omega, self.amplitude, self.phase, self.enabled)

    def __eq__(self, other):
        if not isinstance(other, PointSource):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"PointSource(position={self.position}, omega={self.omega})"
