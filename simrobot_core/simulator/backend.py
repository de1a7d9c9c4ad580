"""Interfaces of the external simulation backend.

The scene graph and the physics engine are provided by the host simulator. Only the
accessors listed here are used; bodies are borrowed and never created or freed.
Engine bodies work in metres and radians.
"""

from typing import Optional, Protocol, Sequence


class SimObject(Protocol):
    full_name: str  # hierarchical, e.g. "RoboCup.robots.robot3"


class VolumetricBody(SimObject, Protocol):
    def get_position(self) -> Sequence[float]:
        """x, y, z in metres."""
        ...

    def get_rotation(self) -> Sequence[Sequence[float]]:
        """3x3 rotation matrix, rows first."""
        ...

    def get_velocity(self) -> Sequence[float]:
        """Linear velocity x, y, z in metres per second."""
        ...

    def set_velocity(self, velocity: Sequence[float]) -> None: ...

    def move(self, position: Sequence[float], rotation: Optional[Sequence[Sequence[float]]] = None) -> None: ...

    def reset_dynamics(self) -> None: ...


class PlanarBody(SimObject, Protocol):
    def get_position(self) -> Sequence[float]:
        """x, y in metres."""
        ...

    def get_rotation(self) -> float:
        """Heading in radians."""
        ...

    def get_velocity(self) -> Sequence[float]:
        """Linear velocity x, y in metres per second."""
        ...

    def set_velocity(self, velocity: Sequence[float]) -> None: ...

    def move(self, position: Sequence[float], rotation: Optional[float] = None) -> None: ...

    def reset_dynamics(self) -> None: ...


class SceneBackend(Protocol):
    def resolve_object(self, name: str) -> Optional[SimObject]:
        """Look up an object by its hierarchical name, None if it does not exist."""
        ...

    def get_children(self, group: SimObject) -> Sequence[SimObject]: ...
