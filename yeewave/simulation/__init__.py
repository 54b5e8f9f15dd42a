from yeewave.simulation.grid import Grid
from yeewave.simulation.fdtd import FieldState, create, step, read_field
from yeewave.simulation.driver import Simulation
from yeewave.simulation.backends import get_backend

__all__ = ['Grid', 'FieldState', 'create', 'step', 'read_field', 'Simulation', 'get_backend']
