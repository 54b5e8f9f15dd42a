"""
Backend implementations for FDTD simulations.
"""
import logging

from yeewave.simulation.backends.base import Backend

logger = logging.getLogger(__name__)

def get_backend(name="numpy", **kwargs):
    """Select the backend."""
    if isinstance(name, Backend):
        return name
    name = name.lower()

    if name == "numpy":
        from yeewave.simulation.backends.numpy_backend import NumPyBackend
        return NumPyBackend(**kwargs)

    if name == "torch":
        try:
            from yeewave.simulation.backends.torch_backend import TorchBackend
        except ImportError:
            logger.warning("PyTorch not available, falling back to NumPy backend")
            from yeewave.simulation.backends.numpy_backend import NumPyBackend
            return NumPyBackend()
        return TorchBackend(**kwargs)

    raise ValueError(f"Unknown backend: {name}")

# Export available backends
__all__ = ['Backend', 'get_backend']
