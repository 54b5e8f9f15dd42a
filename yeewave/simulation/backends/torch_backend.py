import logging

import numpy as np
import torch
from yeewave.simulation.backends.base import Backend

logger = logging.getLogger(__name__)

class TorchBackend(Backend):
    """PyTorch backend for FDTD computations."""

    def __init__(self, device="auto", **kwargs):
        """Initialize PyTorch backend.

        Args:
            device: Device to use for computation:
                   - "auto": automatically select the best available device
                   - "cuda": use NVIDIA GPU if available
                   - "mps": use Apple Metal (M-series chips) if available
                   - "cpu": use CPU
                   - or a specific device like "cuda:0", "mps:0"
            **kwargs: Additional arguments, currently only "dtype"
        """
        self.device_name = device

        # Auto-detect best available device
        if device.lower() == "auto":
            if torch.cuda.is_available():
                self.device = torch.device("cuda")
            elif hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
                self.device = torch.device("mps")
            else:
                self.device = torch.device("cpu")
        elif "cuda" in device and not torch.cuda.is_available():
            logger.warning("CUDA is not available. Falling back to CPU.")
            self.device = torch.device("cpu")
        elif "mps" in device and not (hasattr(torch.backends, "mps") and torch.backends.mps.is_available()):
            logger.warning("Apple Metal (MPS) is not available. Falling back to CPU.")
            self.device = torch.device("cpu")
        else:
            self.device = torch.device(device)
        logger.info("PyTorch backend using %s", self.device)

        # Set default dtype
        self.dtype = kwargs.get("dtype", torch.float32)

    def zeros(self, shape):
        """Create an array of zeros with the given shape."""
        return torch.zeros(shape, dtype=self.dtype, device=self.device)

    def copy(self, array):
        """Create a copy of the array."""
        return array.clone()

    def to_numpy(self, array):
        """Convert the array to a numpy array."""
        if array.device.type != "cpu":
            return array.cpu().detach().numpy()
        return array.detach().numpy()

    def from_numpy(self, array):
        """Convert a numpy array to the backend's array type."""
        return torch.tensor(np.asarray(array), dtype=self.dtype, device=self.device)

    def array_equal(self, a, b):
        return bool(torch.equal(a, b))

    def update_h_fields(self, Hx, Hy, Ez, dt):
        """Update magnetic field components from forward differences of Ez."""
        curl_e_x = Ez[1:, :-1] - Ez[:-1, :-1]
        curl_e_y = Ez[:-1, 1:] - Ez[:-1, :-1]

        # Using in-place operations on views to avoid memory allocations
        Hx[:-1, :-1].sub_(dt * curl_e_x)
        Hy[:-1, :-1].add_(dt * curl_e_y)

        return Hx, Hy

    def update_e_field(self, Ez, Hx, Hy, c, dt):
        """Update the electric field from backward differences of H."""
        curl_h_y = Hy[1:-1, 1:-1] - Hy[1:-1, :-2]
        curl_h_x = Hx[1:-1, 1:-1] - Hx[:-2, 1:-1]
        Ez[1:-1, 1:-1].add_((c * dt) * (curl_h_y - curl_h_x))
        return Ez
