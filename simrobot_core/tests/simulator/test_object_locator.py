import pytest

from simrobot_core.config.settings import EXTRAS_GROUP, ROBOTS_GROUP
from simrobot_core.simulator.exceptions import RobotNumberError, SceneResolutionError
from simrobot_core.simulator.object_locator import locate_robots, parse_robot_number
from simrobot_core.tests.common.fake_backend import FakeScene, FakeVolumetricBody

ROBOTS_PER_TEAM = 20


def _robots(*numbers, group=ROBOTS_GROUP):
    return [FakeVolumetricBody(f"{group}.robot{n}") for n in numbers]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("RoboCup.robots.robot1", 1),
        ("RoboCup.robots.robot23", 23),
        ("RoboCup.extras.robot40", 40),
        ("robot7", 7),
    ],
)
def test_parse_robot_number(name, expected):
    assert parse_robot_number(name) == expected


@pytest.mark.parametrize("name", ["RoboCup.robots.robot", "RoboCup.robots.ball", "RoboCup.robots.robot3x", ""])
def test_unparsable_name_raises(name):
    with pytest.raises(RobotNumberError, match="robot number"):
        parse_robot_number(name)


def test_partition_excludes_self_and_splits_by_number():
    scene = FakeScene(robots=_robots(1, 2, 3, 21, 22), extras=_robots(5, 25, group=EXTRAS_GROUP))

    roster = locate_robots(scene, own_number=2, robots_per_team=ROBOTS_PER_TEAM)

    assert [r.number for r in roster.first_team] == [1, 3, 5]
    assert [r.number for r in roster.second_team] == [21, 22, 25]
    assert len(roster) == 6


def test_partition_is_complete_and_disjoint():
    numbers = [1, 4, 20, 21, 24, 40]
    scene = FakeScene(robots=_robots(*numbers))

    for own in numbers:
        roster = locate_robots(scene, own_number=own, robots_per_team=ROBOTS_PER_TEAM)
        first = {r.number for r in roster.first_team}
        second = {r.number for r in roster.second_team}
        assert own not in first | second
        assert first.isdisjoint(second)
        assert first | second == set(numbers) - {own}
        assert all(n <= ROBOTS_PER_TEAM for n in first)
        assert all(n > ROBOTS_PER_TEAM for n in second)


def test_roster_keeps_body_handles():
    bodies = _robots(3, 23)
    roster = locate_robots(FakeScene(robots=bodies), own_number=1, robots_per_team=ROBOTS_PER_TEAM)
    assert roster.first_team[0].body is bodies[0]
    assert roster.second_team[0].body is bodies[1]


@pytest.mark.parametrize("missing", [ROBOTS_GROUP, EXTRAS_GROUP])
def test_missing_group_is_fatal(missing):
    groups = [g for g in (ROBOTS_GROUP, EXTRAS_GROUP) if g != missing]
    scene = FakeScene(robots=_robots(1), groups=groups)
    with pytest.raises(SceneResolutionError, match=missing):
        locate_robots(scene, own_number=1, robots_per_team=ROBOTS_PER_TEAM)


def test_malformed_body_name_is_fatal():
    scene = FakeScene(robots=[FakeVolumetricBody("RoboCup.robots.goalpost")])
    with pytest.raises(RobotNumberError, match="goalpost"):
        locate_robots(scene, own_number=1, robots_per_team=ROBOTS_PER_TEAM)
