import math
from unittest.mock import MagicMock

import numpy as np
import pytest

from simrobot_core.entities.data.vector import Vector2D, Vector3D
from simrobot_core.simulator.ball_dynamics import (
    BallDynamicsModel,
    BallSampleState,
    apply_friction,
)


def _fixed_rng(value: float) -> MagicMock:
    rng = MagicMock(spec=np.random.Generator)
    rng.normal.return_value = value
    return rng


# ===========================================================================
# velocity estimation
# ===========================================================================


class TestVelocity:
    def test_first_sample_has_zero_velocity(self):
        model = BallDynamicsModel(np.random.default_rng(0))
        assert model.state == BallSampleState.NO_SAMPLE

        velocity = model.update(Vector3D(500, 200, 50), 1000)

        assert velocity == Vector3D(0, 0, 0)
        assert model.state == BallSampleState.SAMPLED
        assert model.last_elapsed_ms is None

    def test_100mm_in_100ms_is_1000mm_per_s(self):
        model = BallDynamicsModel(np.random.default_rng(0))
        model.update(Vector3D(0, 0, 0), 1000)

        velocity = model.update(Vector3D(100, 0, 0), 1100)

        assert velocity.x == pytest.approx(1000)
        assert velocity.y == pytest.approx(0)
        assert velocity.z == pytest.approx(0)
        assert model.last_elapsed_ms == 100

    def test_same_timestamp_keeps_previous_velocity(self):
        model = BallDynamicsModel(np.random.default_rng(0))
        model.update(Vector3D(0, 0, 0), 1000)
        first = model.update(Vector3D(100, 50, 0), 1100)

        second = model.update(Vector3D(250, 80, 0), 1100)

        assert second == first
        assert all(math.isfinite(c) for c in second)
        assert model.last_elapsed_ms is None

    def test_same_timestamp_on_second_sample_keeps_zero(self):
        model = BallDynamicsModel(np.random.default_rng(0))
        model.update(Vector3D(0, 0, 0), 1000)
        velocity = model.update(Vector3D(100, 0, 0), 1000)
        assert velocity == Vector3D(0, 0, 0)

    def test_velocity_uses_last_sample_only(self):
        model = BallDynamicsModel(np.random.default_rng(0))
        model.update(Vector3D(0, 0, 0), 0)
        model.update(Vector3D(100, 0, 0), 100)
        velocity = model.update(Vector3D(100, 300, 0), 200)
        assert velocity.x == pytest.approx(0)
        assert velocity.y == pytest.approx(3000)

    def test_reset_forgets_samples(self):
        model = BallDynamicsModel(_fixed_rng(0.02))
        model.update(Vector3D(0, 0, 0), 0)
        model.update(Vector3D(100, 0, 0), 100)

        model.reset()

        assert model.state == BallSampleState.NO_SAMPLE
        assert model.velocity == Vector3D(0, 0, 0)
        assert model.curve_angle == 0.0
        assert not model.had_horizontal_velocity


# ===========================================================================
# curve angle
# ===========================================================================


class TestCurveAngle:
    def test_drawn_when_ball_starts_moving(self):
        rng = _fixed_rng(0.004)
        model = BallDynamicsModel(rng)
        model.update(Vector3D(0, 0, 50), 0)

        model.update(Vector3D(10, 0, 50), 200)

        assert model.curve_angle == 0.004
        rng.normal.assert_called_once()
        loc, scale = rng.normal.call_args.args
        assert loc == 0.0
        assert scale == pytest.approx(0.015 * 0.2)

    def test_stable_while_ball_keeps_moving(self):
        rng = _fixed_rng(0.004)
        model = BallDynamicsModel(rng)
        model.update(Vector3D(0, 0, 0), 0)
        model.update(Vector3D(10, 0, 0), 10)
        angle = model.curve_angle

        rng.normal.return_value = -0.5
        for i in range(2, 10):
            model.update(Vector3D(10 * i, 0, 0), 10 * i)
            assert model.curve_angle == angle
        rng.normal.assert_called_once()

    def test_reset_to_zero_when_ball_stops(self):
        model = BallDynamicsModel(_fixed_rng(0.01))
        model.update(Vector3D(0, 0, 0), 0)
        model.update(Vector3D(10, 0, 0), 10)
        assert model.curve_angle != 0.0

        model.update(Vector3D(10, 0, 0), 20)

        assert model.curve_angle == 0.0
        assert not model.had_horizontal_velocity

    def test_redrawn_after_ball_restarts(self):
        rng = _fixed_rng(0.01)
        model = BallDynamicsModel(rng)
        model.update(Vector3D(0, 0, 0), 0)
        model.update(Vector3D(10, 0, 0), 10)
        model.update(Vector3D(10, 0, 0), 20)
        rng.normal.return_value = -0.02

        model.update(Vector3D(10, 5, 0), 30)

        assert model.curve_angle == -0.02
        assert rng.normal.call_count == 2

    def test_vertical_motion_does_not_draw(self):
        rng = _fixed_rng(0.01)
        model = BallDynamicsModel(rng)
        model.update(Vector3D(0, 0, 50), 0)
        model.update(Vector3D(0, 0, 80), 10)
        assert model.curve_angle == 0.0
        rng.normal.assert_not_called()

    def test_seeded_generators_agree(self):
        angles = []
        for _ in range(2):
            model = BallDynamicsModel(np.random.default_rng(1234))
            model.update(Vector3D(0, 0, 0), 0)
            model.update(Vector3D(50, 10, 0), 500)
            angles.append(model.curve_angle)
        assert angles[0] == angles[1]
        assert angles[0] != 0.0


# ===========================================================================
# friction
# ===========================================================================


class TestFriction:
    def test_reduces_speed_keeping_direction(self):
        velocity = Vector2D(3.0, 4.0)

        slowed = apply_friction(velocity, friction=10.0, step_length_ms=100)

        assert slowed.mag() == pytest.approx(4.0)
        assert slowed.norm() == velocity.norm()

    def test_stops_exactly_at_zero_without_reversing(self):
        slowed = apply_friction(Vector2D(0.3, 0.0), friction=10.0, step_length_ms=100)
        assert slowed.x == 0.0 and slowed.y == 0.0

    def test_resting_ball_stays_at_rest(self):
        assert apply_friction(Vector2D(0, 0), friction=0.0, step_length_ms=10) == Vector2D(0, 0)

    def test_zero_friction_keeps_velocity(self):
        assert apply_friction(Vector2D(1, -2), friction=0.0, step_length_ms=10) == Vector2D(1, -2)

    @pytest.mark.parametrize(
        "friction, speed",
        [(0.1, 3.0), (0.49, 1.0), (5.0, 8.0), (100.0, 0.01)],
    )
    def test_repeated_steps_never_increase_speed_and_end_at_zero(self, friction, speed):
        velocity = Vector2D(speed, 0.0).rotate(0.7)
        previous = velocity.mag()
        for _ in range(100000):
            velocity = apply_friction(velocity, friction, step_length_ms=10)
            assert velocity.mag() <= previous
            previous = velocity.mag()
            if previous == 0.0:
                break
        assert velocity.x == 0.0 and velocity.y == 0.0

    def test_negative_friction_rejected(self):
        with pytest.raises(ValueError):
            apply_friction(Vector2D(1, 0), friction=-0.1, step_length_ms=10)
