import abc
import logging
from typing import Optional, Tuple

from simrobot_core.config.enums import EngineVariant
from simrobot_core.config.settings import MM_PER_M, PLANAR_BALL_HEIGHT, UPRIGHT_MIN_COS
from simrobot_core.entities.data.pose import Pose2D
from simrobot_core.entities.data.vector import Vector2D, Vector3D
from simrobot_core.global_utils.math_utils import (
    euler_to_rotation_matrix,
    yaw_from_rotation_matrix,
)
from simrobot_core.simulator.ball_dynamics import apply_friction

logger = logging.getLogger(__name__)


class AbstractPhysicsEngine:
    """Template for reading and placing bodies of one physics engine variant.

    Public methods work in millimetres and radians, engine bodies in metres.
    """

    variant: EngineVariant

    def get_position(self, body) -> Vector2D:
        """Position of the body on the ground plane in mm."""
        return self.get_position_3d(body).to_2d()

    def get_position_3d(self, body) -> Vector3D:
        """Position of the body in mm. Engines without height report z = 0."""
        return Vector3D(self._get_raw_position_3d(body)) * MM_PER_M

    def get_ball_position(self, body) -> Vector3D:
        """Position of the ball in mm, including the height the engine models for it."""
        return self.get_position_3d(body)

    def move_body(self, body, position: Vector3D, rotation: Optional[Vector3D] = None) -> None:
        """Places a body.

        Args:
            body: The engine body to move.
            position (Vector3D): Target position in mm.
            rotation (Vector3D): Target XYZ Euler angles in radians, None keeps the current rotation.
        """
        self._do_move(body, position / MM_PER_M, rotation)

    def reset_dynamics(self, body) -> None:
        """Stops all motion of the body."""
        body.reset_dynamics()

    ### Below methods are implemented in the specific engines ####

    @abc.abstractmethod
    def get_pose(self, body) -> Tuple[Pose2D, bool]:
        """Pose of the body on the ground plane (mm, rad) and whether it stands upright."""
        ...

    @abc.abstractmethod
    def curve_ball(self, body, angle: float) -> None:
        """Rotates the horizontal velocity of the ball body in-plane by angle (rad)."""
        ...

    @abc.abstractmethod
    def apply_ball_friction(self, body, friction: float, step_length_ms: float) -> None:
        """Decelerates the ball body by friction (m/s^2) over one step."""
        ...

    @abc.abstractmethod
    def _get_raw_position_3d(self, body) -> Tuple[float, float, float]:
        """Position in metres as reported by the engine."""
        ...

    @abc.abstractmethod
    def _do_move(self, body, position_m: Vector3D, rotation: Optional[Vector3D]) -> None:
        """Moves the body to a position given in metres."""
        ...

    ### End of abstract methods ###


class VolumetricEngine(AbstractPhysicsEngine):
    """Full 3D rigid-body engine. Bodies expose a 3x3 rotation matrix."""

    variant = EngineVariant.VOLUMETRIC

    def get_pose(self, body) -> Tuple[Pose2D, bool]:
        rotation = body.get_rotation()
        pose = Pose2D(
            rotation=yaw_from_rotation_matrix(rotation),
            translation=self.get_position(body),
        )
        return pose, rotation[2][2] >= UPRIGHT_MIN_COS

    def curve_ball(self, body, angle: float) -> None:
        # Rolling of the ball is modelled by the engine itself.
        pass

    def apply_ball_friction(self, body, friction: float, step_length_ms: float) -> None:
        pass

    def _get_raw_position_3d(self, body) -> Tuple[float, float, float]:
        x, y, z = body.get_position()[:3]
        return x, y, z

    def _do_move(self, body, position_m: Vector3D, rotation: Optional[Vector3D]) -> None:
        if rotation is None:
            body.move(list(position_m))
        else:
            body.move(list(position_m), euler_to_rotation_matrix(list(rotation)).tolist())


class PlanarEngine(AbstractPhysicsEngine):
    """2D engine. Bodies expose a scalar heading and have no height."""

    variant = EngineVariant.PLANAR

    def get_ball_position(self, body) -> Vector3D:
        return self.get_position_3d(body).with_z(PLANAR_BALL_HEIGHT)

    def get_pose(self, body) -> Tuple[Pose2D, bool]:
        pose = Pose2D(
            rotation=float(body.get_rotation()),
            translation=self.get_position(body),
        )
        return pose, True

    def curve_ball(self, body, angle: float) -> None:
        velocity = Vector2D(list(body.get_velocity())[:2])
        body.set_velocity(list(velocity.rotate(angle)))

    def apply_ball_friction(self, body, friction: float, step_length_ms: float) -> None:
        velocity = Vector2D(list(body.get_velocity())[:2])
        body.set_velocity(list(apply_friction(velocity, friction, step_length_ms)))

    def _get_raw_position_3d(self, body) -> Tuple[float, float, float]:
        x, y = body.get_position()[:2]
        return x, y, 0.0

    def _do_move(self, body, position_m: Vector3D, rotation: Optional[Vector3D]) -> None:
        body.move([position_m.x, position_m.y], None if rotation is None else rotation.z)


_ENGINES = {
    EngineVariant.VOLUMETRIC: VolumetricEngine,
    EngineVariant.PLANAR: PlanarEngine,
}


def make_engine(variant: EngineVariant) -> AbstractPhysicsEngine:
    """Creates the accessor for the engine variant of a run."""
    if variant not in _ENGINES:
        raise ValueError(f"Unsupported engine variant: {variant}")
    logger.info("Using %s physics engine", variant.value)
    return _ENGINES[variant]()
