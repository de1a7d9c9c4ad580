import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from simrobot_core.entities.data.vector import Vector2D
from simrobot_core.simulator.exceptions import SetupPoseLookupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupPose:
    """
    The pose from which a robot enters the pitch.

    Args:
        player_number (int): The player number of the robot, starting with 1.
        position (Vector2D): Global field position (mm) at which the robot is placed.
        turned_towards (Vector2D): Global field position (mm) the robot is looking at.
    """

    player_number: int
    position: Vector2D
    turned_towards: Vector2D


@dataclass(frozen=True)
class SetupPoses:
    """A list of setup poses, not ordered by player number."""

    poses: List[SetupPose] = field(default_factory=list)

    def get_pose_of_robot(self, number: int) -> SetupPose:
        """Find the setup pose for the given player number.

        If the list has only one entry, this entry is returned no matter which number
        the robot has (used for demos and tests).

        Raises:
            SetupPoseLookupError: if there is no entry for the number and more than one entry is configured.
        """
        for pose in self.poses:
            if pose.player_number == number:
                return pose
        if len(self.poses) == 1:
            logger.warning(
                "No setup pose for player %d, using the only configured pose (player %d)",
                number,
                self.poses[0].player_number,
            )
            return self.poses[0]
        raise SetupPoseLookupError(f"No setup pose configured for player {number} among {len(self.poses)} poses.")

    @classmethod
    def from_list(cls, entries: Iterable[dict]) -> "SetupPoses":
        """Build from plain mappings with keys player_number, position and turned_towards."""
        return cls(
            poses=[
                SetupPose(
                    player_number=int(e["player_number"]),
                    position=Vector2D(e["position"]),
                    turned_towards=Vector2D(e["turned_towards"]),
                )
                for e in entries
            ]
        )
