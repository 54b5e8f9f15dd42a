import numpy as np


def apply_obstacles(state) -> None:
    """Force every obstacle cell of state.Ez to exactly zero."""
    for obstacle in state.obstacles:
        obstacle.apply(state.Ez.data)


def apply_sources(state) -> None:
    """Stamp each enabled source onto state.Ez at the current (pre-increment) time."""
    for source in state.sources:
        if not source.enabled:
            continue
        state.Ez.data[source.y, source.x] = source.value(state.time)


def field_energy(state) -> float:
    """Sum of Ez^2 + Hx^2 + Hy^2 over the grid, accumulated in double precision."""
    total = 0.0
    for grid in (state.Ez, state.Hx, state.Hy):
        values = np.asarray(grid.to_numpy(), dtype=np.float64)
        total += float(np.sum(values * values))
    return total
