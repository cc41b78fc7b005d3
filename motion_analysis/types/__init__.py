from .motion_types import (
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

__all__ = [
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
]
