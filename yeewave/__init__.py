"""
yeewave - 2D TE electromagnetic wave propagation with the FDTD Yee scheme.
"""

# Import constants
from yeewave.const import *

from yeewave.errors import YeeWaveError, InvalidConfiguration, IndexOutOfBounds
from yeewave.config import FieldConfig

# Import design-related classes
from yeewave.design import Obstacle, PointSource

# Import simulation-related classes and functions
from yeewave.simulation import Grid, FieldState, Simulation, create, step, read_field, get_backend
from yeewave.presets import radar_scene, get_preset

# Version information
__version__ = "0.1.0"
