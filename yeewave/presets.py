from yeewave.config import FieldConfig
from yeewave.const import ABSORBING
from yeewave.design import Obstacle, PointSource


def radar_scene(omega: float = 0.25) -> FieldConfig:
    """100 x 100 absorbing domain with a five-element line source on the left edge.

    Two horizontal walls channel the wave toward a conducting block on the
    right-hand side.
    """
    obstacles = [
        Obstacle(21, 80, 31, 35),
        Obstacle(21, 80, 66, 70),
        Obstacle(96, 100, 21, 80),
    ]
    sources = [PointSource((0, y), omega=omega) for y in (30, 40, 50, 60, 70)]
    return FieldConfig(width=100, height=100, dt=0.1, c=1.0, boundary=ABSORBING,
                       obstacles=obstacles, sources=sources)


PRESETS = {
    "radar": radar_scene,
}


def get_preset(name: str) -> FieldConfig:
    try:
        return PRESETS[name]()
    except KeyError:
        raise ValueError(f"Unknown preset: {name}") from None
