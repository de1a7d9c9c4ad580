from typing import TypeVar, Union

from simrobot_core.entities.data.pose import Pose2D
from simrobot_core.entities.data.vector import Vector2D, Vector3D
from simrobot_core.global_utils.math_utils import heading_plus_pi

V = TypeVar("V", Vector2D, Vector3D)


class FrameNormalizer:
    """Maps between the engine frame of one team and the canonical global frame.

    The first team sees the field mirrored: its x and y axes point the other way and
    headings are off by pi. Heights and the second team are left alone. The mapping
    is its own inverse, so the same methods convert canonical quantities back into
    the engine frame (e.g. for placing robots and the ball). Positions map back
    exactly; headings do for |heading| >= pi/2 and otherwise to within 2.2e-16 rad
    (see heading_plus_pi).
    """

    def __init__(self, first_team: bool):
        self._mirrored = first_team

    @property
    def mirrored(self) -> bool:
        return self._mirrored

    def position(self, p: V) -> V:
        if not self._mirrored:
            return p
        if isinstance(p, Vector3D):
            return Vector3D(-p.x, -p.y, p.z)
        return -p

    def rotation(self, angle: float) -> float:
        if not self._mirrored:
            return angle
        return heading_plus_pi(angle)

    def euler(self, rot: Vector3D) -> Vector3D:
        """XYZ Euler angles, only the rotation about z is affected."""
        if not self._mirrored:
            return rot
        return Vector3D(rot.x, rot.y, heading_plus_pi(rot.z))

    def pose(self, pose: Pose2D) -> Pose2D:
        if not self._mirrored:
            return pose
        return pose.rotated_by_pi()

    def __call__(self, value: Union[Vector2D, Vector3D, Pose2D]):
        if isinstance(value, Pose2D):
            return self.pose(value)
        return self.position(value)
