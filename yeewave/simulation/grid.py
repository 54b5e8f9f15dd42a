from numbers import Integral

from yeewave.const import MAX_CELLS
from yeewave.errors import InvalidConfiguration, IndexOutOfBounds
from yeewave.simulation.backends import get_backend


class Grid:
    """Fixed-size 2D array of float32 field samples addressed by (x, y).

    Samples are stored row-major (offset ``x + y * width``), which is a backend
    array of shape ``(height, width)`` indexed ``[y, x]``. The kernels work on
    ``data`` directly; ``read`` and ``write`` are the bounds-checked accessors
    for everything else.
    """
    def __init__(self, width, height, backend="numpy", data=None):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
                raise InvalidConfiguration(f"Grid {name} must be a positive integer, got {value!r}")
        if width * height > MAX_CELLS:
            raise InvalidConfiguration(f"Grid of {width} x {height} exceeds {MAX_CELLS} cells")
        self.width = int(width)
        self.height = int(height)
        self.backend = get_backend(backend)
        if data is None:
            data = self.backend.zeros((self.height, self.width))
        elif tuple(data.shape) != (self.height, self.width):
            raise InvalidConfiguration(f"Data of shape {tuple(data.shape)} does not match grid {self.width} x {self.height}")
        self.data = data

    @classmethod
    def create(cls, width, height, backend="numpy"):
        """Allocate a zero-initialized grid."""
        return cls(width, height, backend=backend)

    @property
    def shape(self):
        return (self.height, self.width)

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfBounds(f"Cell ({x}, {y}) outside grid of {self.width} x {self.height}")

    def read(self, x, y) -> float:
        self._check(x, y)
        return float(self.data[y, x])

    def write(self, x, y, value) -> None:
        self._check(x, y)
        self.data[y, x] = value

    def __getitem__(self, xy):
        return self.read(*xy)

    def __setitem__(self, xy, value):
        self.write(*xy, value)

    def fill(self, value) -> None:
        self.data[...] = value

    def clone(self):
        """Deep copy on the same backend."""
        return Grid(self.width, self.height, backend=self.backend, data=self.backend.copy(self.data))

    def to_numpy(self):
        return self.backend.to_numpy(self.data)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self.backend.array_equal(self.data, other.data)

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height}, backend={self.backend.__class__.__name__})"
