import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from .coordinates import to_axis_coordinates
from .params import DEFAULT_FPS
from .types.motion_types import (
    AxisConfig,
    DerivedSample,
    EntityKinematics,
    PositionSample,
    Scale,
)

logger = logging.getLogger(__name__)

AXES = ("x", "y")


def finite_difference(time: np.ndarray, values: np.ndarray) -> np.ndarray:
    """
    Rate of change of `values` over `time`, one value per input sample.

    Every sample but the last uses the forward difference against its successor;
    the last sample uses the backward difference against its predecessor.
    Middle samples are deliberately not central differences.
    A zero time step yields 0 instead of a division.
    Inputs must already be sorted by time.
    """
    time = np.asarray(time, dtype=float)
    values = np.asarray(values, dtype=float)
    if len(time) != len(values):
        raise ValueError("Time and value arrays must have the same length")
    n = len(time)
    if n == 0:
        return np.zeros(0)
    if n == 1:
        return np.zeros(1)

    dt = np.diff(time)
    dv = np.diff(values)
    if np.any(dt == 0):
        logger.debug(f"{int(np.sum(dt == 0))} zero time step(s); using 0 for those rates")
    rate = np.where(dt != 0, dv / np.where(dt != 0, dt, 1.0), 0.0)
    # forward differences for 0..n-2, backward difference for n-1
    return np.append(rate, rate[-1])


def _sorted_positions(samples: Sequence[PositionSample], axis: Optional[AxisConfig],
                      fps: float):
    """Stable-sort samples by frame and return (time, x, y) arrays."""
    order = sorted(range(len(samples)), key=lambda i: samples[i].frame)
    frames = np.array([samples[i].frame for i in order], dtype=float)
    xs = np.array([samples[i].x for i in order], dtype=float)
    ys = np.array([samples[i].y for i in order], dtype=float)
    if axis is not None:
        xs, ys = to_axis_coordinates(xs, ys, axis)
    return frames / fps, xs, ys


def _check_axis_selector(axis_selector: str) -> None:
    if axis_selector not in AXES:
        raise ValueError(f"axis_selector must be 'x' or 'y', got {axis_selector!r}")


def _to_series(time: np.ndarray, values: np.ndarray) -> List[DerivedSample]:
    return [DerivedSample(time=float(t), value=float(v)) for t, v in zip(time, values)]


def _velocity_arrays(samples, axis_selector, axis, fps):
    time, xs, ys = _sorted_positions(samples, axis, fps)
    position = xs if axis_selector == "x" else ys
    return time, finite_difference(time, position)


def derive(samples: Sequence[PositionSample], axis_selector: str,
           scale: Optional[Scale] = None, axis: Optional[AxisConfig] = None,
           fps: float = DEFAULT_FPS) -> List[DerivedSample]:
    """
    Velocity series for one entity along the selected axis ('x' or 'y').

    Samples may arrive in any order; they are stable-sorted by frame first.
    Returns px/s, or m/s when a Scale is given. With an AxisConfig the
    positions are expressed in the user axis frame before differencing.
    """
    _check_axis_selector(axis_selector)
    if len(samples) == 0:
        return []
    time, velocity = _velocity_arrays(samples, axis_selector, axis, fps)
    if scale is not None:
        velocity = velocity / scale.pixels_per_meter
    return _to_series(time, velocity)


def derive_acceleration(samples: Sequence[PositionSample], axis_selector: str,
                        scale: Optional[Scale] = None, axis: Optional[AxisConfig] = None,
                        fps: float = DEFAULT_FPS) -> List[DerivedSample]:
    """
    Acceleration series for one entity: the velocity series differentiated again
    with the same forward/backward policy, ordered by time.
    """
    _check_axis_selector(axis_selector)
    if len(samples) == 0:
        return []
    time, velocity = _velocity_arrays(samples, axis_selector, axis, fps)
    order = np.argsort(time, kind='stable')
    time = time[order]
    acceleration = finite_difference(time, velocity[order])
    if scale is not None:
        acceleration = acceleration / scale.pixels_per_meter
    return _to_series(time, acceleration)


def group_by_entity(samples: Sequence[PositionSample]) -> Dict[str, List[PositionSample]]:
    """Partition samples by entity id, preserving first-seen entity order."""
    groups: Dict[str, List[PositionSample]] = {}
    for sample in samples:
        groups.setdefault(sample.entity_id, []).append(sample)
    return groups


def derive_entity_kinematics(samples: Sequence[PositionSample],
                             scale: Optional[Scale] = None,
                             axis: Optional[AxisConfig] = None,
                             fps: float = DEFAULT_FPS) -> List[EntityKinematics]:
    """
    Velocity and acceleration series for every tracked entity, keyed by axis.
    """
    results = []
    for entity_id, entity_samples in group_by_entity(samples).items():
        kin = EntityKinematics(entity_id=entity_id)
        for axis_selector in AXES:
            kin.velocity[axis_selector] = derive(entity_samples, axis_selector, scale, axis, fps)
            kin.acceleration[axis_selector] = derive_acceleration(
                entity_samples, axis_selector, scale, axis, fps)
        results.append(kin)
    return results


def estimate_velocity(time: np.ndarray, position: np.ndarray) -> np.ndarray:
    """
    Velocity from a position array sampled at `time`, same length as the input.
    Array counterpart of `derive` for callers that already hold sorted arrays.
    """
    if len(time) != len(position):
        raise ValueError("Time and position arrays must have the same length")
    return finite_difference(time, position)
