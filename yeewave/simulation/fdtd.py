import logging

from yeewave.config import FieldConfig
from yeewave.const import ABSORBING
from yeewave.simulation.backends import get_backend
from yeewave.simulation.boundaries import get_boundary_handler
from yeewave.simulation.grid import Grid
from yeewave.simulation import helper as sim_helper

logger = logging.getLogger(__name__)


class FieldState:
    """2D TE field state (Ez, Hx, Hy) advanced with the Yee leapfrog scheme.

    The grid uses unit cells (dx = dy = 1). Hx and Hy are conceptually offset
    half a cell from Ez but share its index grid, so all three fields are
    Grids of identical size.

    One step runs, in this order:
    - snapshot Ez into Ez_prev (absorbing boundaries only)
    - magnetic half-step from the previous step's Ez
    - electric half-step from the Hx, Hy just computed, then the boundary
    - zero the obstacle cells
    - stamp the sources at the pre-increment time
    - advance the clock by dt

    The configuration must satisfy c * dt < 1; this is checked here, once, and
    never while stepping.
    """
    def __init__(self, config: FieldConfig = None, backend="numpy", backend_options=None):
        self.config = (config or FieldConfig()).copy().validate()
        self.width = self.config.width
        self.height = self.config.height
        self.dt = float(self.config.dt)
        self.c = float(self.config.c)
        self.boundary = self.config.boundary
        self.obstacles = self.config.obstacles
        self.sources = self.config.sources
        self.mur_coefficient = self.config.mur_coefficient
        self._apply_boundary = get_boundary_handler(self.boundary)

        # Initialize the backend
        backend_options = backend_options or {}
        self.backend = get_backend(backend, **backend_options)

        self._init_fields()
        self.time = 0.0
        self.step_count = 0
        if self.c * self.dt * self.dt > 0.5:
            # H advances with dt and Ez with c*dt; the 2D scheme needs their product <= 1/2
            logger.warning("c*dt^2 = %.3f exceeds 0.5, the 2D update may grow without bound",
                           self.c * self.dt * self.dt)
        logger.debug("Created %r on %s", self.config, self.backend.__class__.__name__)

    def _init_fields(self):
        self.Ez = Grid(self.width, self.height, backend=self.backend)
        self.Hx = Grid(self.width, self.height, backend=self.backend)
        self.Hy = Grid(self.width, self.height, backend=self.backend)
        # Only the Mur boundary needs the previous step's Ez
        self.Ez_prev = Grid(self.width, self.height, backend=self.backend) if self.absorbing else None

    @property
    def absorbing(self) -> bool:
        return self.boundary == ABSORBING

    def step(self) -> None:
        """Advance the fields by exactly one time step."""
        if self.absorbing:
            self.Ez_prev.data[...] = self.Ez.data
        Ez, Hx, Hy = self.Ez.data, self.Hx.data, self.Hy.data
        self.backend.update_h_fields(Hx, Hy, Ez, self.dt)
        self.backend.update_e_field(Ez, Hx, Hy, self.c, self.dt)
        self._apply_boundary(Ez, self.Ez_prev.data if self.absorbing else None, self.mur_coefficient)
        # Obstacles first so that a source on an obstacle cell still radiates
        sim_helper.apply_obstacles(self)
        sim_helper.apply_sources(self)
        self.time += self.dt
        self.step_count += 1

    def run(self, steps: int) -> None:
        """Advance the fields by the given number of steps."""
        for _ in range(steps):
            self.step()

    def read_field(self, x, y) -> float:
        """Bounds-checked read of Ez at cell (x, y)."""
        return self.Ez.read(x, y)

    def energy(self) -> float:
        return sim_helper.field_energy(self)

    def snapshot(self):
        """Return a numpy copy of Ez, shaped (height, width)."""
        return self.backend.to_numpy(self.backend.copy(self.Ez.data))

    def reset(self) -> None:
        """Zero all fields and rewind the clock."""
        for grid in (self.Ez, self.Hx, self.Hy, self.Ez_prev):
            if grid is not None:
                grid.fill(0.0)
        self.time = 0.0
        self.step_count = 0

    def __repr__(self):
        return f"FieldState({self.width} x {self.height}, boundary={self.boundary!r}, t={self.time:.4g})"


def create(config: FieldConfig = None, backend="numpy", **backend_options) -> FieldState:
    """Build a FieldState from a configuration, validating it first."""
    return FieldState(config, backend=backend, backend_options=backend_options)


def step(state: FieldState) -> None:
    """Advance state by one time step in place."""
    state.step()


def read_field(state: FieldState, x, y) -> float:
    """Bounds-checked read of the electric field at cell (x, y)."""
    return state.read_field(x, y)
