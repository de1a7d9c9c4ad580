import logging
import re
from dataclasses import dataclass
from typing import Any, Tuple

from simrobot_core.config.settings import EXTRAS_GROUP, NAME_SEPARATOR, ROBOTS_GROUP
from simrobot_core.simulator.backend import SceneBackend, SimObject
from simrobot_core.simulator.exceptions import RobotNumberError, SceneResolutionError

logger = logging.getLogger(__name__)

_NUMBER_SUFFIX = re.compile(r"(\d+)$")


@dataclass(frozen=True)
class LocatedRobot:
    number: int
    body: Any


@dataclass(frozen=True)
class RobotRoster:
    """The other robots of the scene, split by the team their number belongs to."""

    first_team: Tuple[LocatedRobot, ...]
    second_team: Tuple[LocatedRobot, ...]

    def __len__(self):
        return len(self.first_team) + len(self.second_team)


def parse_robot_number(full_name: str) -> int:
    """Robot number encoded at the end of a hierarchical body name.

    "RoboCup.robots.robot23" -> 23

    Raises:
        RobotNumberError: if the last name token does not end in digits.
    """
    token = full_name.rsplit(NAME_SEPARATOR, 1)[-1]
    match = _NUMBER_SUFFIX.search(token)
    if match is None:
        raise RobotNumberError(f"Cannot parse a robot number from body name '{full_name}'.")
    return int(match.group(1))


def get_number(obj: SimObject) -> int:
    return parse_robot_number(obj.full_name)


def locate_robots(scene: SceneBackend, own_number: int, robots_per_team: int) -> RobotRoster:
    """Collects all robots of the robots and extras groups except the one with own_number.

    Robots numbered up to robots_per_team go to the first team, all others to the second.

    Raises:
        SceneResolutionError: if one of the groups does not exist in the scene.
        RobotNumberError: if a body name carries no robot number.
    """
    first_team = []
    second_team = []
    for group_name in (ROBOTS_GROUP, EXTRAS_GROUP):
        group = scene.resolve_object(group_name)
        if group is None:
            raise SceneResolutionError(f"Scene has no object group '{group_name}'.")
        for body in scene.get_children(group):
            number = get_number(body)
            if number == own_number:
                continue
            if number <= robots_per_team:
                first_team.append(LocatedRobot(number, body))
            else:
                second_team.append(LocatedRobot(number, body))

    logger.debug(
        "Robot %d located %d first team and %d second team robots",
        own_number,
        len(first_team),
        len(second_team),
    )
    return RobotRoster(first_team=tuple(first_team), second_team=tuple(second_team))
