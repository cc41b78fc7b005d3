from dataclasses import dataclass, field
import math
from typing import Dict, List, Optional, Tuple, Union
import numpy as np

from ..families import ModelFamily, evaluate_model


@dataclass(frozen=True)
class PositionSample:
    frame: int
    x: float
    y: float
    entity_id: str  # tracked object the click belongs to


@dataclass(frozen=True)
class Scale:
    pixels_per_meter: float

    def __post_init__(self):
        if not self.pixels_per_meter > 0:
            raise ValueError("pixels_per_meter must be > 0")

    @classmethod
    def from_reference(cls, start: Tuple[float, float], end: Tuple[float, float],
                       distance_meters: float) -> "Scale":
        """
        Build a scale from a reference line drawn on the video whose real-world
        length is known.
        """
        if not distance_meters > 0:
            raise ValueError("distance_meters must be > 0")
        pixel_length = math.hypot(end[0] - start[0], end[1] - start[1])
        if pixel_length == 0:
            raise ValueError("Reference line has zero pixel length")
        return cls(pixels_per_meter=pixel_length / distance_meters)


@dataclass(frozen=True)
class AxisConfig:
    origin_x: float
    origin_y: float
    rotation_angle: float = 0.0  # radians


@dataclass(frozen=True)
class DerivedSample:
    time: float  # seconds
    value: float


@dataclass(frozen=True)
class PointXY:
    x: float
    y: float


@dataclass(frozen=True)
class FittedModel:
    family: ModelFamily
    coefficients: Tuple[float, ...]
    r2: Optional[float]  # None when every y is identical
    equation_text: str

    def evaluate(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        return evaluate_model(self.family, self.coefficients, x)


@dataclass(frozen=True)
class TickPlan:
    ticks: List[float]
    domain: Tuple[float, float]


@dataclass(frozen=True)
class MotionSummary:
    total_distance: float = 0.0
    average_velocity: float = 0.0
    max_velocity: float = 0.0
    average_acceleration: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "totalDistance": self.total_distance,
            "averageVelocity": self.average_velocity,
            "maxVelocity": self.max_velocity,
            "averageAcceleration": self.average_acceleration,
        }


@dataclass
class EntityKinematics:
    entity_id: str
    velocity: Dict[str, List[DerivedSample]] = field(default_factory=dict)  # keyed by "x" / "y"
    acceleration: Dict[str, List[DerivedSample]] = field(default_factory=dict)
