import json

import pytest

from yeewave import FieldConfig, Obstacle, PointSource, InvalidConfiguration


def test_defaults_are_valid():
    config = FieldConfig().validate()
    assert (config.width, config.height) == (100, 100)
    assert config.dt == 0.1
    assert config.c == 1.0
    assert config.boundary == "absorbing"
    assert config.courant == pytest.approx(0.1)
    assert config.mur_coefficient == pytest.approx((0.1 - 1.0) / (0.1 + 1.0))


@pytest.mark.parametrize("kwargs", [
    {"width": 2},
    {"height": 0},
    {"width": 10.5},
    {"width": "10"},
    {"dt": 0.0},
    {"dt": -0.1},
    {"dt": float("nan")},
    {"c": 0.0},
    {"c": float("inf")},
    {"dt": 0.5, "c": 2.0},
    {"dt": 1.0, "c": 1.0},
    {"boundary": "periodic"},
    {"obstacles": [Obstacle(5, 5, 0, 3)]},
    {"obstacles": [Obstacle(8, 12, 0, 3)]},
    {"obstacles": [Obstacle(-1, 3, 0, 3)]},
    {"sources": [PointSource((10, 0))]},
    {"sources": [PointSource((0, -1))]},
    {"sources": [PointSource((1, 1), omega=float("nan"))]},
    {"sources": [PointSource((2.7, 3))]},
    {"sources": [PointSource((True, 1))]},
    {"sources": [PointSource((1,))]},
    {"sources": [PointSource((1, 2, 3))]},
    {"obstacles": [Obstacle(0.5, 3, 0, 3)]},
    {"obstacles": [Obstacle(0, 3, 0, 2.0)]},
])
def test_invalid_configurations(kwargs):
    params = {"width": 10, "height": 10}
    params.update(kwargs)
    with pytest.raises(InvalidConfiguration):
        FieldConfig(**params).validate()


def test_obstacle_may_touch_far_edge():
    FieldConfig(width=10, height=10, obstacles=[Obstacle(6, 10, 0, 10)]).validate()


def test_json_round_trip(tmp_path):
    config = FieldConfig(width=30, height=20, dt=0.2, c=1.5, boundary="reflecting",
                         obstacles=[Obstacle(3, 8, 4, 6)],
                         sources=[PointSource((1, 2), omega=0.5, amplitude=2.0, phase=0.1, enabled=False)])
    path = tmp_path / "config.json"
    config.save(str(path))

    with open(path) as f:
        raw = json.load(f)
    assert raw["version"] == "0.1.0"
    assert "timestamp" in raw

    loaded = FieldConfig.load(str(path))
    assert loaded == config
    assert loaded.sources[0].enabled is False
    loaded.validate()


def test_malformed_config_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(InvalidConfiguration):
        FieldConfig.load(str(path))

    path.write_text(json.dumps({"width": 10}))
    with pytest.raises(InvalidConfiguration):
        FieldConfig.load(str(path))

    path.write_text(json.dumps([1, 2, 3]))
    with pytest.raises(InvalidConfiguration):
        FieldConfig.load(str(path))


def test_copy_is_independent():
    config = FieldConfig(sources=[PointSource((1, 1))])
    copy = config.copy()
    copy.sources[0].enabled = False
    copy.obstacles.append(Obstacle(0, 1, 0, 1))
    assert config.sources[0].enabled is True
    assert config.obstacles == []


def test_obstacle_geometry():
    obstacle = Obstacle.from_size((2, 3), 4, 2)
    assert obstacle == Obstacle(2, 6, 3, 5)
    assert obstacle.width == 4 and obstacle.height == 2
    assert obstacle.contains(2, 3)
    assert not obstacle.contains(6, 3)
    assert len(list(obstacle.cells())) == 8


def test_fractional_coordinates_are_kept_for_validation():
    source = PointSource((2.7, 3))
    obstacle = Obstacle(0.5, 3, 0, 3)
    assert source.position == (2.7, 3)
    assert obstacle.x_min == 0.5


@pytest.mark.parametrize("position", [[1], 5, [1.5, 2], [], None])
def test_malformed_source_position(position):
    data = {"width": 10, "height": 10, "dt": 0.1, "c": 1.0,
            "sources": [{"position": position}]}
    with pytest.raises(InvalidConfiguration):
        FieldConfig.from_dict(data).validate()


def test_malformed_obstacle_entry():
    data = {"width": 10, "height": 10, "dt": 0.1, "c": 1.0,
            "obstacles": [{"x_min": 0, "x_max": 2.5, "y_min": 0, "y_max": 3}]}
    with pytest.raises(InvalidConfiguration):
        FieldConfig.from_dict(data).validate()
