class Backend:
    """Array storage and field-update kernels for one array library.

    Field arrays are shaped ``(height, width)`` and indexed ``[y, x]``. Both
    kernels update their target arrays in place and also return them.
    """

    def zeros(self, shape):
        """Create a float32 array of zeros with the given shape."""
        raise NotImplementedError

    def copy(self, array):
        """Create a copy of the array."""
        raise NotImplementedError

    def to_numpy(self, array):
        """Convert the array to a numpy array."""
        raise NotImplementedError

    def from_numpy(self, array):
        """Convert a numpy array to the backend's array type."""
        raise NotImplementedError

    def array_equal(self, a, b):
        """Return True if both arrays hold identical values."""
        raise NotImplementedError

    def update_h_fields(self, Hx, Hy, Ez, dt):
        """Magnetic half-step on x in [0, W-2], y in [0, H-2]."""
        raise NotImplementedError

    def update_e_field(self, Ez, Hx, Hy, c, dt):
        """Electric half-step on the strict interior x in [1, W-2], y in [1, H-2]."""
        raise NotImplementedError
