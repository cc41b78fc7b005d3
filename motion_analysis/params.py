"""
params.py - Configuration parameters for motion analysis

This module defines the MotionParams class which bundles the settings shared by
the kinematics, statistics and axis-tick computations for one video.
"""

import json
import logging
import math

import numpy as np

from .types.motion_types import AxisConfig, Scale

logger = logging.getLogger(__name__)

DEFAULT_FPS = 30.0
DEFAULT_TICK_COUNT = 6
PIVOT_TOLERANCE = 1e-12


class MotionParams:
    """
    Configuration parameters for motion analysis of one tracked video.

    Holds the frame rate used to turn frame indices into seconds, the optional
    pixel-to-meter calibration, the optional user axis and the defaults used
    when planning chart axes and solving regression systems.
    """

    def __init__(self,
                 # Timing
                 fps=DEFAULT_FPS,

                 # Calibration
                 pixels_per_meter=None,

                 # User axis
                 axis_origin=None,
                 axis_rotation=0.0,

                 # Chart axes
                 target_tick_count=DEFAULT_TICK_COUNT,

                 # Regression
                 pivot_tolerance=PIVOT_TOLERANCE):
        """
        Initialize motion analysis parameters.

        Parameters
        ----------
        fps : float
            Video frame rate; time = frame / fps
        pixels_per_meter : float or None
            Calibration factor; None keeps every quantity in pixels
        axis_origin : tuple or None
            (x, y) pixel position of the user axis origin; None disables the axis
        axis_rotation : float
            Rotation of the user axis in radians
        target_tick_count : int
            Preferred number of ticks per chart axis
        pivot_tolerance : float
            Pivot magnitude below which a regression system is treated as singular
        """
        self.fps = fps
        self.pixels_per_meter = pixels_per_meter
        self.axis_origin = tuple(axis_origin) if axis_origin is not None else None
        self.axis_rotation = axis_rotation
        self.target_tick_count = target_tick_count
        self.pivot_tolerance = pivot_tolerance

    def update(self, **kwargs):
        """
        Update parameters with new values.

        Raises
        ------
        ValueError
            If an invalid parameter name is provided
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                raise ValueError(f"Invalid parameter: {key}")
        return self

    def copy(self):
        """Create a copy of the current parameters."""
        return MotionParams(**self.__dict__)

    def get_scale(self):
        """Return the Scale for these parameters, or None when uncalibrated."""
        if self.pixels_per_meter is None:
            return None
        return Scale(pixels_per_meter=float(self.pixels_per_meter))

    def get_axis(self):
        """Return the AxisConfig for these parameters, or None when no axis is set."""
        if self.axis_origin is None:
            return None
        return AxisConfig(origin_x=float(self.axis_origin[0]),
                          origin_y=float(self.axis_origin[1]),
                          rotation_angle=float(self.axis_rotation))

    def validate_params(self):
        """
        Validate parameter values.

        Raises
        ------
        ValueError
            If any parameter values are invalid
        """
        if not (isinstance(self.fps, (int, float)) and math.isfinite(self.fps) and self.fps > 0):
            raise ValueError("fps must be a finite number > 0")

        if self.pixels_per_meter is not None and not self.pixels_per_meter > 0:
            raise ValueError("pixels_per_meter must be > 0 or None")

        if self.axis_origin is not None and len(self.axis_origin) != 2:
            raise ValueError("axis_origin must be an (x, y) pair or None")

        if not math.isfinite(self.axis_rotation):
            raise ValueError("axis_rotation must be finite")

        if int(self.target_tick_count) != self.target_tick_count or self.target_tick_count < 2:
            raise ValueError("target_tick_count must be an integer >= 2")

        if self.pivot_tolerance <= 0:
            raise ValueError("pivot_tolerance must be > 0")

        logger.debug("Motion parameters validated")
        return self

    def to_dict(self):
        """Parameters as a JSON-friendly dictionary."""
        params_dict = {}
        for key, value in self.__dict__.items():
            if isinstance(value, np.ndarray):
                params_dict[key] = value.tolist()
            elif isinstance(value, (np.integer, np.floating)):
                params_dict[key] = value.item()
            elif isinstance(value, tuple):
                params_dict[key] = list(value)
            else:
                params_dict[key] = value
        return params_dict

    def summary(self):
        """
        Formatted multi-line summary of all parameters.
        """
        lines = [
            "Motion Analysis Parameters Summary",
            "=" * 50,
            f"  Frame rate: {self.fps} fps",
            f"  Scale: {self.pixels_per_meter if self.pixels_per_meter else 'Disabled'} px/m",
            f"  Axis origin: {self.axis_origin if self.axis_origin is not None else 'Disabled'}",
            f"  Axis rotation: {self.axis_rotation} rad",
            f"  Target tick count: {self.target_tick_count}",
            f"  Pivot tolerance: {self.pivot_tolerance:g}",
            "=" * 50,
        ]
        return "\n".join(lines)

    def save_to_file(self, filename):
        """
        Save parameters to a JSON file.

        Parameters
        ----------
        filename : str
            Output filename
        """
        with open(filename, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Parameters saved to {filename}")

    @classmethod
    def load_from_file(cls, filename):
        """
        Load parameters from a JSON file.

        Parameters
        ----------
        filename : str
            Input filename

        Returns
        -------
        MotionParams
            Loaded parameters
        """
        with open(filename, 'r') as f:
            params_dict = json.load(f)

        return cls(**params_dict)

    def __repr__(self):
        return f"MotionParams({', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())})"


# Default parameter presets for common capture setups
PRESETS = {
    'webcam': MotionParams(fps=30.0),

    'smartphone_60fps': MotionParams(fps=60.0),

    'slow_motion': MotionParams(fps=240.0),

    'film': MotionParams(fps=24.0),
}
