"""Nice tick marks and padded domains for chart axes."""

import logging
import math
import sys
from typing import Iterable

import numpy as np

from .params import DEFAULT_TICK_COUNT
from .types.motion_types import TickPlan

logger = logging.getLogger(__name__)

TICK_DECIMALS = 10


def nice_step(raw_step: float) -> float:
    """Round a step up to 1, 2, 5 or 10 times a power of ten."""
    magnitude = 10 ** math.floor(math.log10(raw_step))
    normalized = raw_step / magnitude
    if normalized <= 1:
        return magnitude
    if normalized <= 2:
        return 2 * magnitude
    if normalized <= 5:
        return 5 * magnitude
    return 10 * magnitude


def _padding(value_range: float, tight: bool) -> float:
    if not tight:
        return value_range * 0.05
    if value_range < 1:
        return value_range * 0.05
    if value_range < 10:
        return min(value_range * 0.03, 0.5)
    return min(value_range * 0.02, 2)


def _degenerate_plan(value: float, tight: bool) -> TickPlan:
    single = value if math.isfinite(value) else 0.0
    if tight:
        padding = abs(single) * 0.1 or 0.01
    else:
        padding = 0.1
    return TickPlan(ticks=[single], domain=(single - padding, single + padding))


def _span_plan(min_value: float, max_value: float) -> TickPlan:
    # bounds too far apart for a stepped grid to stay finite
    logger.debug(f"Range [{min_value}, {max_value}] overflows; ticks at the bounds")
    return TickPlan(ticks=[min_value, max_value], domain=(min_value, max_value))


def plan_ticks(min_value: float, max_value: float,
               target_tick_count: int = DEFAULT_TICK_COUNT,
               tight_padding: bool = False) -> TickPlan:
    """
    Evenly spaced, human-friendly ticks covering [min_value, max_value].

    Loose mode pads the range by 5% before snapping the bounds to the step.
    Tight mode pads less, refuses steps more than twice the raw step and limits
    how far the domain may extend past the data.
    """
    if target_tick_count < 2:
        raise ValueError("target_tick_count must be >= 2")

    if min_value == max_value or not math.isfinite(min_value) or not math.isfinite(max_value):
        logger.debug(f"Degenerate range [{min_value}, {max_value}]; single tick")
        return _degenerate_plan(min_value if math.isfinite(min_value) else max_value,
                                tight_padding)

    if min_value > max_value:
        min_value, max_value = max_value, min_value

    value_range = max_value - min_value
    if not math.isfinite(value_range):
        return _span_plan(min_value, max_value)
    padding = _padding(value_range, tight_padding)

    raw_step = value_range / (target_tick_count - 1)
    if raw_step < sys.float_info.min:
        # subnormal step, no usable power of ten
        return _degenerate_plan(min_value, tight_padding)
    step = nice_step(raw_step)

    if tight_padding and step > raw_step * 2:
        smaller_magnitude = 10 ** math.floor(math.log10(raw_step)) / 10
        if smaller_magnitude > 0:
            step = smaller_magnitude * 5

    lower = (min_value - padding) / step
    upper = (max_value + padding) / step
    if not (math.isfinite(lower) and math.isfinite(upper)):
        return _span_plan(min_value, max_value)
    nice_min = math.floor(lower) * step
    nice_max = math.ceil(upper) * step

    if tight_padding:
        max_expansion = max(value_range * 0.15, step * 2)
        if nice_min < min_value - max_expansion:
            nice_min = math.floor((min_value - max_expansion) / step) * step
        if nice_max > max_value + max_expansion:
            nice_max = math.ceil((max_value + max_expansion) / step) * step

    if not math.isfinite(nice_max - nice_min):
        return _span_plan(min_value, max_value)
    count = int(round((nice_max - nice_min) / step)) + 1
    ticks = [round(nice_min + i * step, TICK_DECIMALS) for i in range(count)]
    return TickPlan(ticks=ticks, domain=(nice_min, nice_max))


def plan_series_ticks(values: Iterable[float],
                      target_tick_count: int = DEFAULT_TICK_COUNT,
                      tight_padding: bool = False) -> TickPlan:
    """Tick plan for the finite values of a series; a [0, 1] placeholder when there are none."""
    arr = np.asarray(list(values), dtype=float)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return TickPlan(ticks=[0.0], domain=(0.0, 1.0))
    return plan_ticks(float(arr.min()), float(arr.max()), target_tick_count, tight_padding)
