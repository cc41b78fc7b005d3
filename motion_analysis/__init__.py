# Public API re-exports for motion analysis

from .types import (
    PositionSample,
    Scale,
    AxisConfig,
    DerivedSample,
    PointXY,
    ModelFamily,
    FittedModel,
    TickPlan,
    MotionSummary,
    EntityKinematics,
)

from .params import MotionParams, PRESETS, DEFAULT_FPS

from .coordinates import to_axis_coordinates, from_axis_coordinates

from .kinematics import (
    derive,
    derive_acceleration,
    derive_entity_kinematics,
    group_by_entity,
    finite_difference,
    estimate_velocity,
)

from .summary import compute_statistics, total_distance

from .linalg import solve_linear_system

from .regression import (
    fit_model,
    fit_all_models,
    best_fit_model,
    format_equation,
)

from .families import evaluate_model

from .ticks import plan_ticks, plan_series_ticks, nice_step

from .tables import tracking_table, tracking_csv, kinematics_table

__version__ = "0.1.0"

__all__ = [
    # Types
    "PositionSample",
    "Scale",
    "AxisConfig",
    "DerivedSample",
    "PointXY",
    "ModelFamily",
    "FittedModel",
    "TickPlan",
    "MotionSummary",
    "EntityKinematics",
    # Params
    "MotionParams",
    "PRESETS",
    "DEFAULT_FPS",
    # Coordinates
    "to_axis_coordinates",
    "from_axis_coordinates",
    # Kinematics/Statistics
    "derive",
    "derive_acceleration",
    "derive_entity_kinematics",
    "group_by_entity",
    "finite_difference",
    "estimate_velocity",
    "compute_statistics",
    "total_distance",
    # Regression
    "solve_linear_system",
    "fit_model",
    "fit_all_models",
    "best_fit_model",
    "evaluate_model",
    "format_equation",
    # Ticks
    "plan_ticks",
    "plan_series_ticks",
    "nice_step",
    # Tables
    "tracking_table",
    "tracking_csv",
    "kinematics_table",
]
