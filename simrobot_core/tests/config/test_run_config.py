import pytest

from simrobot_core.config.enums import EngineVariant
from simrobot_core.config.run_config import SimulationConfig, load_config, parse_config
from simrobot_core.config.settings import ROBOTS_PER_TEAM, SIM_STEP_LENGTH_MS


def test_default_profile_loads():
    config = load_config("default")
    assert config.engine_variant == EngineVariant.VOLUMETRIC
    assert config.robots_per_team == 20
    assert len(config.setup_poses.poses) == 5
    assert config.setup_poses.get_pose_of_robot(3).position.x == -2500


def test_planar_profile_loads():
    config = load_config("planar")
    assert config.engine_variant == EngineVariant.PLANAR
    assert config.ball_friction > 0
    # single entry profile falls back for every player
    assert config.setup_poses.get_pose_of_robot(4).player_number == 1


def test_load_from_path(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("engine_variant: planar\nrobots_per_team: 5\nseed: 42\n")

    config = load_config(str(path))

    assert config.engine_variant == EngineVariant.PLANAR
    assert config.robots_per_team == 5
    assert config.seed == 42
    assert config.setup_poses.poses == []


def test_unknown_profile_raises():
    with pytest.raises(FileNotFoundError):
        load_config("does_not_exist")


def test_empty_mapping_uses_defaults():
    config = parse_config({})
    assert config == SimulationConfig()
    assert config.robots_per_team == ROBOTS_PER_TEAM
    assert config.step_length_ms == SIM_STEP_LENGTH_MS


def test_unknown_variant_raises():
    with pytest.raises(ValueError, match="hovercraft"):
        parse_config({"engine_variant": "hovercraft"})


def test_invalid_values_rejected():
    with pytest.raises(AssertionError):
        SimulationConfig(ball_friction=-1.0)
    with pytest.raises(AssertionError):
        SimulationConfig(robots_per_team=0)
