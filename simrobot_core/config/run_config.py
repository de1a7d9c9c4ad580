"""Run config loader: parses YAML simulation profiles into typed dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from simrobot_core.config.enums import EngineVariant, variant_str_to_enum
from simrobot_core.config.settings import (
    BALL_FRICTION,
    PROFILES_DIR,
    ROBOTS_PER_TEAM,
    SIM_STEP_LENGTH_MS,
)
from simrobot_core.config.setup_poses import SetupPoses


@dataclass(frozen=True)
class SimulationConfig:
    """
    Settings of one simulation run.

    Args:
        engine_variant (EngineVariant): Physics engine backing the run. Fixed for the whole run.
        robots_per_team (int): Robot numbers up to this value belong to the first team.
        step_length_ms (float): Length of one physics step in milliseconds.
        ball_friction (float): Deceleration (m/s^2) the planar engine applies to the ball. Must be >= 0.
        seed (Optional[int]): Seed for the ball curve random source. None draws fresh entropy.
        setup_poses (SetupPoses): Where robots enter the pitch.
    """

    engine_variant: EngineVariant = EngineVariant.VOLUMETRIC
    robots_per_team: int = ROBOTS_PER_TEAM
    step_length_ms: float = SIM_STEP_LENGTH_MS
    ball_friction: float = BALL_FRICTION
    seed: Optional[int] = None
    setup_poses: SetupPoses = field(default_factory=SetupPoses)

    def __post_init__(self):
        assert self.robots_per_team > 0
        assert self.step_length_ms > 0
        assert self.ball_friction >= 0


def load_config(name_or_path: str) -> SimulationConfig:
    """Load a SimulationConfig from a built-in profile name or an absolute/relative path.

    Built-in names: "default", "planar".
    """
    p = Path(name_or_path)
    if not p.is_absolute():
        candidate = PROFILES_DIR / f"{name_or_path}.yaml"
        if candidate.exists():
            p = candidate
        elif not p.exists():
            raise FileNotFoundError(f"Profile '{name_or_path}' not found as a built-in name or file path.")

    with open(p, "r") as fh:
        data = yaml.safe_load(fh) or {}

    return parse_config(data)


def parse_config(data: dict) -> SimulationConfig:
    variant_str = data.get("engine_variant", EngineVariant.VOLUMETRIC.value)
    if variant_str not in variant_str_to_enum:
        raise ValueError(f"Unknown engine variant '{variant_str}', expected one of {sorted(variant_str_to_enum)}.")

    return SimulationConfig(
        engine_variant=variant_str_to_enum[variant_str],
        robots_per_team=data.get("robots_per_team", ROBOTS_PER_TEAM),
        step_length_ms=data.get("step_length_ms", SIM_STEP_LENGTH_MS),
        ball_friction=data.get("ball_friction", BALL_FRICTION),
        seed=data.get("seed"),
        setup_poses=SetupPoses.from_list(data.get("setup_poses", [])),
    )
