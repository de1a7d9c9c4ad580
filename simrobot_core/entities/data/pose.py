from dataclasses import dataclass, field

from simrobot_core.entities.data.vector import Vector2D
from simrobot_core.global_utils.math_utils import heading_plus_pi, normalise_heading

# translation: millimetres
# rotation: radians


@dataclass(frozen=True)
class Pose2D:
    rotation: float = 0.0
    translation: Vector2D = field(default_factory=lambda: Vector2D(0.0, 0.0))

    def __add__(self, other: "Pose2D") -> "Pose2D":
        """Concatenate other onto this pose, i.e. express other (given relative to self) in self's parent frame."""
        return Pose2D(
            rotation=normalise_heading(self.rotation + other.rotation),
            translation=self.translation + other.translation.rotate(self.rotation),
        )

    def rotated_by_pi(self) -> "Pose2D":
        """Equivalent to Pose2D(pi) + self, computed without trigonometric round-off."""
        return Pose2D(
            rotation=heading_plus_pi(self.rotation),
            translation=-self.translation,
        )

    @property
    def x(self) -> float:
        return self.translation.x

    @property
    def y(self) -> float:
        return self.translation.y
