"""Simplified ball model: velocity estimation, random curve and rolling friction."""

import logging
from enum import Enum, auto
from typing import Optional

import numpy as np

from simrobot_core.config.settings import CURVE_STDDEV_PER_SECOND, MS_PER_S
from simrobot_core.entities.data.vector import Vector2D, Vector3D

logger = logging.getLogger(__name__)


class BallSampleState(Enum):
    NO_SAMPLE = auto()
    SAMPLED = auto()


class BallDynamicsModel:
    """
    Keeps the state of the ball between two world state queries of one robot.

    Velocity is differentiated from consecutive positions. Whenever the ball starts
    moving a new curve angle is drawn, which the engine uses to bend the rolling
    direction. Only the previous sample is remembered.

    Args:
        rng (np.random.Generator): Source for the curve angle. Pass a seeded generator
            for reproducible runs. Defaults to a freshly seeded generator.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self._last_position: Optional[Vector3D] = None
        self._last_timestamp: Optional[int] = None
        self._last_elapsed_ms: Optional[int] = None
        self._velocity = Vector3D(0.0, 0.0, 0.0)
        self._had_horizontal_velocity = False
        self._curve_angle = 0.0

    @property
    def state(self) -> BallSampleState:
        return BallSampleState.NO_SAMPLE if self._last_timestamp is None else BallSampleState.SAMPLED

    @property
    def velocity(self) -> Vector3D:
        return self._velocity

    @property
    def curve_angle(self) -> float:
        return self._curve_angle

    @property
    def had_horizontal_velocity(self) -> bool:
        return self._had_horizontal_velocity

    @property
    def last_position(self) -> Optional[Vector3D]:
        return self._last_position

    @property
    def last_timestamp(self) -> Optional[int]:
        return self._last_timestamp

    @property
    def last_elapsed_ms(self) -> Optional[int]:
        """Time between the last two samples with distinct timestamps, None if the last update held the velocity."""
        return self._last_elapsed_ms

    def update(self, position: Vector3D, timestamp: int) -> Vector3D:
        """Feed a new ball position (mm) sampled at timestamp (ms) and return the estimated velocity (mm/s).

        The first sample yields zero velocity. A sample with the same timestamp as the
        previous one keeps the previous velocity. Timestamps must not decrease.
        """
        self._last_elapsed_ms = None
        if self._last_timestamp is not None and timestamp != self._last_timestamp:
            elapsed_ms = timestamp - self._last_timestamp
            self._velocity = (position - self._last_position) * MS_PER_S / elapsed_ms
            self._last_elapsed_ms = elapsed_ms
            self._update_curve_angle(elapsed_ms)

        self._last_position = position
        self._last_timestamp = timestamp
        self._had_horizontal_velocity = not self._velocity.horizontal_is_zero()
        return self._velocity

    def reset(self):
        """Forget all samples, e.g. after the ball was placed somewhere else."""
        self._last_position = None
        self._last_timestamp = None
        self._last_elapsed_ms = None
        self._velocity = Vector3D(0.0, 0.0, 0.0)
        self._had_horizontal_velocity = False
        self._curve_angle = 0.0

    def _update_curve_angle(self, elapsed_ms: int):
        if self._velocity.horizontal_is_zero():
            self._curve_angle = 0.0
        elif not self._had_horizontal_velocity:
            stddev = CURVE_STDDEV_PER_SECOND * elapsed_ms / MS_PER_S
            self._curve_angle = float(self._rng.normal(0.0, stddev))
            logger.debug("Ball started rolling, curve angle %.5f rad", self._curve_angle)


def apply_friction(velocity: Vector2D, friction: float, step_length_ms: float) -> Vector2D:
    """Reduce the speed of velocity by friction * step length, never reversing its direction.

    Args:
        velocity (Vector2D): Horizontal velocity.
        friction (float): Deceleration in units of velocity per second. Must be >= 0.
        step_length_ms (float): Duration of the step in milliseconds.

    Returns:
        Vector2D: The decelerated velocity, exactly zero if the ball came to rest.
    """
    if friction < 0:
        raise ValueError(f"Friction must be non-negative, got {friction}.")
    speed = velocity.mag()
    new_speed = speed - friction * step_length_ms / MS_PER_S
    if new_speed <= 0.0:
        return Vector2D(0.0, 0.0)
    return velocity * (new_speed / speed)
