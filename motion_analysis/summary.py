"""
Summary statistics over tracked positions.

Combines every tracked entity into one record: total path length, mean and
peak speed, and mean acceleration magnitude.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .kinematics import _sorted_positions, finite_difference, group_by_entity
from .params import DEFAULT_FPS
from .types.motion_types import MotionSummary, PositionSample, Scale

logger = logging.getLogger(__name__)


def total_distance(samples: Sequence[PositionSample], scale: Optional[Scale] = None,
                   fps: float = DEFAULT_FPS) -> float:
    """
    Path length summed over entities: Euclidean distance between consecutive
    frame-sorted samples of each entity. Meters when a Scale is given.
    """
    distance = 0.0
    for entity_samples in group_by_entity(samples).values():
        if len(entity_samples) < 2:
            continue
        _, xs, ys = _sorted_positions(entity_samples, None, fps)
        distance += float(np.sum(np.hypot(np.diff(xs), np.diff(ys))))
    if scale is not None:
        distance /= scale.pixels_per_meter
    return distance


def _entity_motion(entity_samples, fps):
    """Per-sample speed and acceleration magnitude for one entity, in pixel units."""
    time, xs, ys = _sorted_positions(entity_samples, None, fps)
    vx = finite_difference(time, xs)
    vy = finite_difference(time, ys)
    ax = finite_difference(time, vx)
    ay = finite_difference(time, vy)
    return np.hypot(vx, vy), np.hypot(ax, ay)


def compute_statistics(samples: Sequence[PositionSample], scale: Optional[Scale] = None,
                       fps: float = DEFAULT_FPS) -> MotionSummary:
    """
    Aggregate tracked positions of all entities into a MotionSummary.

    Speeds and accelerations are taken per sample with the same forward/backward
    differencing as the kinematics series, applied to the 2D vector. Entities
    with a single sample carry no motion and are left out of the averages.
    The averages are unweighted by time step.
    """
    if len(samples) == 0:
        return MotionSummary()

    speeds = []
    accelerations = []
    for entity_id, entity_samples in group_by_entity(samples).items():
        if len(entity_samples) < 2:
            logger.debug(f"Entity {entity_id!r} has a single sample; excluded from averages")
            continue
        speed, accel = _entity_motion(entity_samples, fps)
        speeds.append(speed)
        accelerations.append(accel)

    distance = total_distance(samples, scale, fps)
    if not speeds:
        return MotionSummary(total_distance=distance)

    speeds = np.concatenate(speeds)
    accelerations = np.concatenate(accelerations)
    if scale is not None:
        speeds = speeds / scale.pixels_per_meter
        accelerations = accelerations / scale.pixels_per_meter

    return MotionSummary(
        total_distance=distance,
        average_velocity=float(np.mean(speeds)),
        max_velocity=float(np.max(speeds)),
        average_acceleration=float(np.mean(accelerations)),
    )
