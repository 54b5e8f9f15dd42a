import json
import math
from datetime import datetime
from numbers import Integral, Real
from typing import Dict, Any, Iterable, Optional

from yeewave.const import (DEFAULT_SIZE, DEFAULT_DT, DEFAULT_C, ABSORBING,
                           BOUNDARY_MODES, MIN_SIZE, MAX_CELLS)
from yeewave.design import Obstacle, PointSource
from yeewave.errors import InvalidConfiguration
from yeewave.helpers import check_courant

class FieldConfig:
    """Static configuration of a field simulation.

    Args:
        width: Number of grid columns
        height: Number of grid rows
        dt: Time step
        c: Wave speed. The Courant factor c * dt must stay below 1.
        boundary: "absorbing" (first-order Mur) or "reflecting" (hard truncation)
        obstacles: Obstacle rectangles zeroed after every step
        sources: Point sources stamped after the obstacles
    """
    def __init__(self, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE, dt: float = DEFAULT_DT,
                 c: float = DEFAULT_C, boundary: str = ABSORBING,
                 obstacles: Optional[Iterable[Obstacle]] = None,
                 sources: Optional[Iterable[PointSource]] = None):
        self.width = width
        self.height = height
        self.dt = dt
        self.c = c
        self.boundary = boundary
        self.obstacles = list(obstacles or [])
        self.sources = list(sources or [])

    @property
    def courant(self) -> float:
        return self.c * self.dt

    @property
    def mur_coefficient(self) -> float:
        """(c*dt - 1) / (c*dt + 1), the one-way wave factor of the Mur boundary."""
        return (self.courant - 1.0) / (self.courant + 1.0)

    def validate(self) -> "FieldConfig":
        """Raise InvalidConfiguration if the scheme cannot run with these values."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            if value < MIN_SIZE:
                raise InvalidConfiguration(f"{name} must be at least {MIN_SIZE}, got {value}")
        if self.width * self.height > MAX_CELLS:
            raise InvalidConfiguration(f"Grid of {self.width} x {self.height} exceeds {MAX_CELLS} cells")
        for name in ("dt", "c"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value) or value <= 0:
                raise InvalidConfiguration(f"{name} must be a positive finite number, got {value!r}")
        is_stable, courant, limit = check_courant(self.c, self.dt)
        if not is_stable:
            raise InvalidConfiguration(f"Courant factor c*dt = {courant:.3f} must be below {limit:.3f}")
        if self.boundary not in BOUNDARY_MODES:
            raise InvalidConfiguration(f"Unknown boundary mode {self.boundary!r}, expected one of {BOUNDARY_MODES}")
        for obstacle in self.obstacles:
            obstacle.validate(self.width, self.height)
        for source in self.sources:
            source.validate(self.width, self.height)
        return self

    def copy(self) -> "FieldConfig":
        return FieldConfig(self.width, self.height, self.dt, self.c, self.boundary,
                           [o.copy() for o in self.obstacles], [s.copy() for s in self.sources])

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary.

        Returns:
            Dict containing all simulation parameters
        """
        return {
            'width': self.width,
            'height': self.height,
            'dt': self.dt,
            'c': self.c,
            'boundary': self.boundary,
            'obstacles': [o.to_dict() for o in self.obstacles],
            'sources': [s.to_dict() for s in self.sources],
        }

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "FieldConfig":
        """Create a configuration from a dictionary produced by to_dict."""
        try:
            return cls(
                width=config['width'],
                height=config['height'],
                dt=config['dt'],
                c=config['c'],
                boundary=config.get('boundary', ABSORBING),
                obstacles=[Obstacle.from_dict(o) for o in config.get('obstacles', [])],
                sources=[PointSource.from_dict(s) for s in config.get('sources', [])],
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Malformed configuration: {e}") from e

    def save(self, filepath: str) -> None:
        """Save the configuration to a JSON file.

        Args:
            filepath: Path to save the configuration file
        """
        config = self.to_dict()
        config['timestamp'] = datetime.now().isoformat()
        from yeewave import __version__  # Import here to avoid circular imports
        config['version'] = __version__
        with open(filepath, 'w') as f:
            json.dump(config, f, indent=4)

    @classmethod
    def load(cls, filepath: str) -> "FieldConfig":
        """Load a configuration from a JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            The loaded, not yet validated, configuration
        """
        with open(filepath, 'r') as f:
            try:
                config = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidConfiguration(f"{filepath} is not valid JSON: {e}") from e
        if not isinstance(config, dict):
            raise InvalidConfiguration(f"{filepath} does not hold a configuration object")
        return cls.from_dict(config)

    def __eq__(self, other):
        if not isinstance(other, FieldConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"FieldConfig({self.width} x {self.height}, dt={self.dt}, c={self.c}, "
                f"boundary={self.boundary!r}, {len(self.obstacles)} obstacles, {len(self.sources)} sources)")
