import numpy as np
from yeewave.simulation.backends.base import Backend

class NumPyBackend(Backend):
    """NumPy backend for FDTD computations."""

    def __init__(self, dtype=np.float32, **kwargs):
        """Initialize NumPy backend."""
        self.dtype = dtype

    def zeros(self, shape):
        """Create an array of zeros with the given shape."""
        return np.zeros(shape, dtype=self.dtype)

    def copy(self, array):
        """Create a copy of the array."""
        return array.copy()

    def to_numpy(self, array):
        """Convert the array to a numpy array."""
        return array  # Already numpy array

    def from_numpy(self, array):
        """Convert a numpy array to the backend's array type."""
        return np.asarray(array, dtype=self.dtype)

    def array_equal(self, a, b):
        return bool(np.array_equal(a, b))

    def update_h_fields(self, Hx, Hy, Ez, dt):
        """Update magnetic field components from forward differences of Ez."""
        # Both differences read Ez from the previous step
        curl_e_x = Ez[1:, :-1] - Ez[:-1, :-1]
        curl_e_y = Ez[:-1, 1:] - Ez[:-1, :-1]
        Hx[:-1, :-1] -= dt * curl_e_x
        Hy[:-1, :-1] += dt * curl_e_y
        return Hx, Hy

    def update_e_field(self, Ez, Hx, Hy, c, dt):
        """Update the electric field from backward differences of H."""
        curl_h_y = Hy[1:-1, 1:-1] - Hy[1:-1, :-2]
        curl_h_x = Hx[1:-1, 1:-1] - Hx[:-2, 1:-1]
        Ez[1:-1, 1:-1] += (c * dt) * (curl_h_y - curl_h_x)
        return Ez
