import logging
from typing import Optional, Tuple

from simrobot_core.entities.data.pose import Pose2D
from simrobot_core.entities.data.vector import Vector2D, Vector3D
from simrobot_core.entities.world_state import (
    BallState,
    PlayerSnapshot,
    TeamAssignment,
    WorldSnapshot,
)
from simrobot_core.global_utils.mapping_utils import map_teams_to_own_opponent
from simrobot_core.simulator.backend import SimObject
from simrobot_core.simulator.ball_dynamics import BallDynamicsModel
from simrobot_core.simulator.frame_normalizer import FrameNormalizer
from simrobot_core.simulator.object_locator import get_number, locate_robots
from simrobot_core.simulator.simulation_run import SimulationRun

logger = logging.getLogger(__name__)


class SimulatedRobot:
    """Ground truth access for one simulated robot.

    Everything reported is in millimetres and radians in the canonical global frame.
    The other robots of the scene are looked up once on construction.

    Args:
        run (SimulationRun): The run the robot belongs to.
        robot (SimObject): Engine body of this robot. Its name must end in the robot number.
    """

    def __init__(self, run: SimulationRun, robot: SimObject):
        assert robot is not None
        self._run = run
        self._robot = robot

        number = get_number(robot)
        self._team = TeamAssignment(
            first_team=number <= run.robots_per_team,
            robot_number=number,
            robots_per_team=run.robots_per_team,
        )
        self._normalizer = FrameNormalizer(self._team.first_team)
        self._roster = locate_robots(run.scene, number, run.robots_per_team)
        self._ball_model = BallDynamicsModel(run.rng)

    @property
    def team(self) -> TeamAssignment:
        return self._team

    @property
    def first_team(self) -> bool:
        return self._team.first_team

    @property
    def robot_number(self) -> int:
        return self._team.robot_number

    @property
    def ball_model(self) -> BallDynamicsModel:
        return self._ball_model

    def get_world_state(self) -> WorldSnapshot:
        """Builds a fresh snapshot of the ball, this robot and all other robots."""
        world_state = WorldSnapshot()

        ball = self._run.ball
        if ball is not None:
            world_state.balls.append(self._get_ball_state(ball))

        world_state.own_pose, _ = self.get_robot_pose()

        engine = self._run.engine
        first_team_players, second_team_players = map_teams_to_own_opponent(
            self.first_team,
            world_state.own_team_players,
            world_state.opponent_team_players,
        )
        for located in self._roster.first_team:
            pose, upright = engine.get_pose(located.body)
            first_team_players.append(
                PlayerSnapshot(number=located.number, pose=self._normalizer.pose(pose), upright=upright)
            )
        for located in self._roster.second_team:
            pose, upright = engine.get_pose(located.body)
            second_team_players.append(
                PlayerSnapshot(
                    number=located.number - self._run.robots_per_team,
                    pose=self._normalizer.pose(pose),
                    upright=upright,
                )
            )
        return world_state

    def _get_ball_state(self, ball: SimObject) -> BallState:
        engine = self._run.engine
        position = self._normalizer.position(engine.get_ball_position(ball))
        velocity = self._ball_model.update(position, self._run.now_ms())
        if self._ball_model.last_elapsed_ms is not None:
            engine.curve_ball(ball, self._ball_model.curve_angle)
        return BallState(position=position, velocity=velocity)

    def get_robot_pose(self) -> Tuple[Pose2D, bool]:
        """Own pose in the canonical frame and whether the robot stands upright."""
        pose, upright = self._run.engine.get_pose(self._robot)
        return self._normalizer.pose(pose), upright

    def get_odometry_data(self, robot_pose: Pose2D) -> Pose2D:
        """Odometry pose of the robot, which always faces the opponent goal when entering from its own half."""
        return robot_pose.rotated_by_pi() if self.first_team else robot_pose

    def move_robot(
        self,
        pos: Vector3D,
        rot: Vector3D,
        change_rotation: bool = True,
        reset_dynamics: bool = True,
    ) -> None:
        """Places this robot in the engine frame.

        Args:
            pos (Vector3D): Position in mm.
            rot (Vector3D): XYZ Euler angles in radians.
            change_rotation (bool): Apply rot, otherwise the current rotation is kept.
            reset_dynamics (bool): Stop all motion of the robot after placing it.
        """
        engine = self._run.engine
        engine.move_body(self._robot, pos, rot if change_rotation else None)
        if reset_dynamics:
            engine.reset_dynamics(self._robot)

    def move_robot_per_team(
        self,
        pos: Vector3D,
        rot: Vector3D,
        change_rotation: bool = True,
        reset_dynamics: bool = True,
    ) -> None:
        """Places this robot, with pos and rot given in the canonical frame."""
        self.move_robot(
            self._normalizer.position(pos),
            self._normalizer.euler(rot),
            change_rotation,
            reset_dynamics,
        )

    def move_ball(self, pos: Vector3D, reset_dynamics: bool = True) -> None:
        """Places the ball in the engine frame, pos in mm. Does nothing if the run has no ball.

        With reset_dynamics the ball is stopped and this robot's ball model forgets its
        samples, so the jump does not show up as velocity.
        """
        ball = self._run.ball
        if ball is None:
            logger.debug("Robot %d cannot move the ball, the run has none", self.robot_number)
            return
        engine = self._run.engine
        engine.move_body(ball, pos)
        if reset_dynamics:
            engine.reset_dynamics(ball)
            self._ball_model.reset()

    def move_ball_per_team(self, pos: Vector3D, reset_dynamics: bool = True) -> None:
        """Places the ball, with pos given in the canonical frame."""
        self.move_ball(self._normalizer.position(pos), reset_dynamics)

    def get_absolute_ball_position(self) -> Optional[Vector2D]:
        """Ball position in the engine frame (mm), None if the run has no ball."""
        ball = self._run.ball
        if ball is None:
            return None
        return self._run.engine.get_position(ball)

    def apply_ball_friction(self, friction: Optional[float] = None) -> None:
        """Decelerates the ball by friction (m/s^2) over one simulation step. Only the planar engine needs this.

        Without friction the run's configured ball friction is used.
        """
        ball = self._run.ball
        if ball is None:
            return
        if friction is None:
            friction = self._run.ball_friction
        self._run.engine.apply_ball_friction(ball, friction, self._run.step_length_ms)

    @staticmethod
    def is_first_team(obj: SimObject, robots_per_team: int) -> bool:
        return get_number(obj) <= robots_per_team

    @staticmethod
    def get_number(obj: SimObject) -> int:
        return get_number(obj)
