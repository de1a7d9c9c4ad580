from typing import Sequence, Tuple

import numpy as np


def rotate_vector(vx: float, vy: float, theta: float) -> Tuple[float, float]:
    """Rotates a 2D vector counter-clockwise by a given angle.

    Args:
        vx (float): The x-component of the vector.
        vy (float): The y-component of the vector.
        theta (float): The angle in radians to rotate the vector by.

    Returns:
        Tuple[float, float]: The x and y components of the rotated vector.

    The function uses a 2D rotation matrix, where:
        - `vx_rot` = vx * cos(theta) - vy * sin(theta)
        - `vy_rot` = vx * sin(theta) + vy * cos(theta)
    """
    vx_rot = vx * np.cos(theta) - vy * np.sin(theta)
    vy_rot = vx * np.sin(theta) + vy * np.cos(theta)
    return float(vx_rot), float(vy_rot)


def normalise_heading(angle: float) -> float:
    """Normalize an angle to the range [-π, π) radians, where 0 faces along positive x-axis.

    Parameters
    ----------
    angle : float
        The angle in radians to be normalized. The input angle can be any real number.

    Returns
    -------
    float
        The normalized angle in the range [-π, π) radians.
    """
    return float((angle + np.pi) % (2 * np.pi) - np.pi)


def euler_to_rotation_matrix(rot: Sequence[float]) -> np.ndarray:
    """Build a 3x3 rotation matrix from XYZ Euler angles (radians), applied as Rz @ Ry @ Rx."""
    rx, ry, rz = rot
    cx, sx = np.cos(rx), np.sin(rx)
    cy, sy = np.cos(ry), np.sin(ry)
    cz, sz = np.cos(rz), np.sin(rz)
    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rot_z = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rot_z @ rot_y @ rot_x


def yaw_from_rotation_matrix(rotation: Sequence[Sequence[float]]) -> float:
    """Heading of the body's x-axis projected onto the ground plane."""
    r = np.asarray(rotation, dtype=float)
    return float(np.arctan2(r[1, 0], r[0, 0]))


def heading_plus_pi(angle: float) -> float:
    """Turn a heading by pi, keeping the result in [-π, π).

    Applying it twice gives back a normalised heading exactly when |angle| >= π/2 and
    to within half an ulp of π (about 2.2e-16 rad) otherwise.
    """
    if not -np.pi <= angle < np.pi:
        angle = normalise_heading(angle)
    shifted = angle - np.pi if angle >= 0.0 else angle + np.pi
    return float(shifted) if shifted < np.pi else float(-np.pi)
