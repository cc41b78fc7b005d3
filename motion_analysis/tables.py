from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .coordinates import to_axis_coordinates
from .params import DEFAULT_FPS
from .types.motion_types import AxisConfig, EntityKinematics, PositionSample, Scale

__all__ = [
    "tracking_table",
    "tracking_csv",
    "kinematics_table",
]

_PIXEL_DECIMALS = 2
_METER_DECIMALS = 6


def tracking_table(samples: Sequence[PositionSample], scale: Optional[Scale] = None,
                   axis: Optional[AxisConfig] = None, fps: float = DEFAULT_FPS) -> pd.DataFrame:
    """
    One row per sample, in input order, with time and the position in every
    available unit: pixels, user-axis pixels, meters and user-axis meters.
    """
    df = pd.DataFrame({
        "trackingObjectId": [s.entity_id for s in samples],
        "frame": np.array([s.frame for s in samples], dtype=int),
        "time (seconds)": np.array([s.frame for s in samples], dtype=float) / fps,
        "x (pixels)": np.array([s.x for s in samples], dtype=float),
        "y (pixels)": np.array([s.y for s in samples], dtype=float),
    })

    if axis is not None:
        ax, ay = to_axis_coordinates(df["x (pixels)"].to_numpy(), df["y (pixels)"].to_numpy(), axis)
        df["x (axis)"] = ax
        df["y (axis)"] = ay

    if scale is not None:
        df["x (meters)"] = df["x (pixels)"] / scale.pixels_per_meter
        df["y (meters)"] = df["y (pixels)"] / scale.pixels_per_meter
        if axis is not None:
            df["x (axis meters)"] = df["x (axis)"] / scale.pixels_per_meter
            df["y (axis meters)"] = df["y (axis)"] / scale.pixels_per_meter

    return df


def tracking_csv(samples: Sequence[PositionSample], scale: Optional[Scale] = None,
                 axis: Optional[AxisConfig] = None, fps: float = DEFAULT_FPS) -> str:
    """
    CSV text of tracking_table: time and meters to 6 decimals, pixel columns to 2.
    Writing it anywhere is left to the caller.
    """
    df = tracking_table(samples, scale, axis, fps)
    for col in df.columns:
        if col in ("trackingObjectId", "frame"):
            continue
        decimals = _METER_DECIMALS if ("meters" in col or "seconds" in col) else _PIXEL_DECIMALS
        df[col] = df[col].map(lambda v, d=decimals: f"{v:.{d}f}")
    return df.to_csv(index=False, lineterminator="\n").rstrip("\n")


def kinematics_table(kinematics: Sequence[EntityKinematics]) -> pd.DataFrame:
    """
    Long-format table of derived series: one row per entity and sample time with
    velocity and acceleration along both axes.
    """
    columns = ["entity_id", "time", "velocity_x", "velocity_y", "acceleration_x", "acceleration_y"]
    rows = []
    for kin in kinematics:
        vx = kin.velocity.get("x", [])
        vy = kin.velocity.get("y", [])
        ax = kin.acceleration.get("x", [])
        ay = kin.acceleration.get("y", [])
        for i, sample in enumerate(vx):
            rows.append({
                "entity_id": kin.entity_id,
                "time": sample.time,
                "velocity_x": sample.value,
                "velocity_y": vy[i].value if i < len(vy) else np.nan,
                "acceleration_x": ax[i].value if i < len(ax) else np.nan,
                "acceleration_y": ay[i].value if i < len(ay) else np.nan,
            })
    return pd.DataFrame(rows, columns=columns)
