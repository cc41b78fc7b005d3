from typing import Tuple, Union
import numpy as np

from .types.motion_types import AxisConfig

ArrayLike = Union[float, np.ndarray]


def to_axis_coordinates(x: ArrayLike, y: ArrayLike, axis: AxisConfig) -> Tuple[ArrayLike, ArrayLike]:
    """
    Map video pixel coordinates into the frame of a user-placed axis.
    Translates to the axis origin, then rotates by -rotation_angle.
    Works on scalars or numpy arrays.
    """
    dx = np.asarray(x, dtype=float) - axis.origin_x
    dy = np.asarray(y, dtype=float) - axis.origin_y
    cos = np.cos(-axis.rotation_angle)
    sin = np.sin(-axis.rotation_angle)
    ax = dx * cos - dy * sin
    ay = dx * sin + dy * cos
    if np.ndim(ax) == 0:
        return float(ax), float(ay)
    return ax, ay


def from_axis_coordinates(x: ArrayLike, y: ArrayLike, axis: AxisConfig) -> Tuple[ArrayLike, ArrayLike]:
    """Inverse of to_axis_coordinates."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    cos = np.cos(axis.rotation_angle)
    sin = np.sin(axis.rotation_angle)
    vx = x * cos - y * sin + axis.origin_x
    vy = x * sin + y * cos + axis.origin_y
    if np.ndim(vx) == 0:
        return float(vx), float(vy)
    return vx, vy
