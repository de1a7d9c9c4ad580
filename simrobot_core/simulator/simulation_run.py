import logging
import time
from typing import Callable, Optional

import numpy as np

from simrobot_core.config.enums import EngineVariant
from simrobot_core.config.run_config import SimulationConfig
from simrobot_core.config.settings import BALL_FRICTION, ROBOTS_PER_TEAM, SIM_STEP_LENGTH_MS
from simrobot_core.simulator.backend import SceneBackend, SimObject
from simrobot_core.simulator.engine import AbstractPhysicsEngine, make_engine

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class SimulationRun:
    """State shared by all simulated robots of one run.

    Holds the scene, the engine accessor (chosen once for the run) and the ball. The
    ball can be set once; robots only read it.

    Args:
        scene (SceneBackend): Object resolution of the host simulator.
        variant (EngineVariant): Physics engine backing the scene.
        robots_per_team (int): Robot numbers up to this value belong to the first team.
        step_length_ms (float): Length of one physics step.
        ball_friction (float): Deceleration (m/s^2) applied to the ball by the planar engine each step.
        clock (Callable[[], int]): Millisecond timestamps, must not go backwards. Defaults to the monotonic clock.
        rng (np.random.Generator): Random source handed to the ball models of the robots.
    """

    def __init__(
        self,
        scene: SceneBackend,
        variant: EngineVariant = EngineVariant.VOLUMETRIC,
        robots_per_team: int = ROBOTS_PER_TEAM,
        step_length_ms: float = SIM_STEP_LENGTH_MS,
        ball_friction: float = BALL_FRICTION,
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._scene = scene
        self._engine = make_engine(variant)
        self._robots_per_team = robots_per_team
        self._step_length_ms = step_length_ms
        self._ball_friction = ball_friction
        self._clock = clock if clock is not None else monotonic_ms
        self._rng = rng if rng is not None else np.random.default_rng()
        self._ball: Optional[SimObject] = None

    @classmethod
    def from_config(
        cls,
        scene: SceneBackend,
        config: SimulationConfig,
        clock: Optional[Callable[[], int]] = None,
    ) -> "SimulationRun":
        return cls(
            scene,
            variant=config.engine_variant,
            robots_per_team=config.robots_per_team,
            step_length_ms=config.step_length_ms,
            ball_friction=config.ball_friction,
            clock=clock,
            rng=np.random.default_rng(config.seed),
        )

    def set_ball(self, ball: SimObject) -> None:
        if self._ball is not None and self._ball is not ball:
            raise RuntimeError(f"Ball is already set to '{self._ball.full_name}', cannot replace it within a run.")
        self._ball = ball
        logger.info("Ball set to '%s'", ball.full_name)

    def now_ms(self) -> int:
        return self._clock()

    @property
    def ball(self) -> Optional[SimObject]:
        return self._ball

    @property
    def scene(self) -> SceneBackend:
        return self._scene

    @property
    def engine(self) -> AbstractPhysicsEngine:
        return self._engine

    @property
    def robots_per_team(self) -> int:
        return self._robots_per_team

    @property
    def step_length_ms(self) -> float:
        return self._step_length_ms

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @property
    def ball_friction(self) -> float:
        return self._ball_friction
