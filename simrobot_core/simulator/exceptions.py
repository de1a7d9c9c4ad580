class SceneResolutionError(LookupError):
    """An object group the world state depends on is missing from the scene."""


class RobotNumberError(ValueError):
    """A body name does not end in a robot number."""


class SetupPoseLookupError(AssertionError):
    """No setup pose is configured for a player and there is no single-entry fallback."""
