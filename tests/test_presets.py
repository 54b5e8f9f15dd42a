import numpy as np
import pytest

from yeewave import Simulation, create, get_preset, radar_scene


def test_radar_scene_layout():
    config = radar_scene().validate()
    assert (config.width, config.height) == (100, 100)
    assert config.boundary == "absorbing"
    assert [s.position for s in config.sources] == [(0, 30), (0, 40), (0, 50), (0, 60), (0, 70)]
    assert all(s.omega == 0.25 for s in config.sources)
    assert len(config.obstacles) == 3
    # Cells strictly between 20 and 80 in x, 30 and 35 in y
    wall = config.obstacles[0]
    assert wall.contains(21, 31) and wall.contains(79, 34)
    assert not wall.contains(20, 31) and not wall.contains(80, 31) and not wall.contains(21, 35)


def test_radar_scene_runs():
    state = create(radar_scene())
    state.run(30)
    ez = state.snapshot()
    assert np.all(ez[31:35, 21:80] == 0.0)
    assert np.all(ez[21:80, 96:100] == 0.0)
    assert state.energy() > 0.0


def test_get_preset():
    sim = Simulation(get_preset("radar"), substeps=5, verbose=False)
    sim.advance_frame()
    assert sim.state.step_count == 5
    with pytest.raises(ValueError):
        get_preset("sonar")
