from dataclasses import dataclass, field
from typing import List

from simrobot_core.entities.data.pose import Pose2D
from simrobot_core.entities.data.vector import Vector3D
from simrobot_core.global_utils.mapping_utils import team_relative_number

# position data: millimetres
# velocity data: millimetres per second
# orientation: radians


@dataclass(frozen=True)
class TeamAssignment:
    first_team: bool
    robot_number: int
    robots_per_team: int

    @property
    def team_relative_number(self) -> int:
        return team_relative_number(self.robot_number, self.robots_per_team)


@dataclass
class BallState:
    position: Vector3D
    velocity: Vector3D


@dataclass
class PlayerSnapshot:
    number: int
    pose: Pose2D
    upright: bool


@dataclass
class WorldSnapshot:
    """Ground truth of the scene as seen from one robot, in the canonical global frame."""

    own_pose: Pose2D = field(default_factory=Pose2D)
    own_team_players: List[PlayerSnapshot] = field(default_factory=list)
    opponent_team_players: List[PlayerSnapshot] = field(default_factory=list)
    balls: List[BallState] = field(default_factory=list)

    @property
    def ball(self) -> BallState | None:
        return self.balls[0] if self.balls else None
