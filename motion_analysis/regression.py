"""
Least-squares curve fitting over a closed set of model families.

Standard families are fitted through the normal equations
(Phi^T Phi) c = Phi^T y; the exponential family is fitted linearly in log
space and scored in y space. Fits that overflow, fall outside a family's
domain or hit a singular system yield None rather than a model.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np

from .families import FAMILIES, Basis, evaluate_model
from .linalg import solve_linear_system
from .params import PIVOT_TOLERANCE
from .types.motion_types import FittedModel, ModelFamily, PointXY

logger = logging.getLogger(__name__)


def _as_arrays(points) -> Tuple[np.ndarray, np.ndarray]:
    """Accept PointXY objects, (x, y) pairs or an (N, 2) array."""
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float).reshape(-1, 2)
        return arr[:, 0].copy(), arr[:, 1].copy()
    xs, ys = [], []
    for p in points:
        if isinstance(p, PointXY):
            xs.append(p.x)
            ys.append(p.y)
        else:
            px, py = p
            xs.append(px)
            ys.append(py)
    return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)


def design_matrix(x: np.ndarray, basis: Sequence[Basis]) -> np.ndarray:
    """Columns are the basis functions evaluated at x."""
    x = np.asarray(x, dtype=float)
    return np.column_stack([fn(x) for fn in basis])


def _least_squares(x, y, basis, tol) -> Optional[np.ndarray]:
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        phi = design_matrix(x, basis)
        normal = phi.T @ phi
        rhs = phi.T @ y
    if not (np.all(np.isfinite(normal)) and np.all(np.isfinite(rhs))):
        logger.debug("Normal equations overflowed")
        return None
    beta = solve_linear_system(normal, rhs, tol)
    if beta is None or not np.all(np.isfinite(beta)):
        return None
    return beta


def r_squared(y: np.ndarray, predicted: np.ndarray) -> Optional[float]:
    """
    Coefficient of determination. None when every y is identical, since the
    total variance is zero and R^2 is undefined.
    """
    y = np.asarray(y, dtype=float)
    if np.all(y == y[0]):
        return None
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    ss_res = float(np.sum((y - predicted) ** 2))
    return 1.0 - ss_res / ss_tot


def _format_coefficient(value: float) -> str:
    # + 0.0 turns -0.0 into 0.0
    return f"{round(float(value), 5) + 0.0:.5f}"


def format_equation(family: Union[ModelFamily, str], coefficients: Sequence[float]) -> str:
    family = ModelFamily(family)
    entry = FAMILIES[family]
    return entry.template.format(*(_format_coefficient(c) for c in coefficients))


def fit_model(points, family: Union[ModelFamily, str],
              tol: float = PIVOT_TOLERANCE) -> Optional[FittedModel]:
    """
    Fit `family` to the points by least squares.

    Returns None when there are fewer than two points, when the points fall
    outside the family's domain, when the normal equations are singular
    (a pivot below `tol`) or when the fit does not stay finite.
    An unknown family name raises ValueError.
    """
    family = ModelFamily(family)
    x, y = _as_arrays(points)

    if x.size < 2:
        logger.debug(f"{family.value}: need at least 2 points, got {x.size}")
        return None
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        logger.debug(f"{family.value}: non-finite coordinates")
        return None

    entry = FAMILIES[family]
    if entry.domain is not None and not entry.domain(x, y):
        logger.debug(f"{family.value}: {entry.domain_message}")
        return None

    target = np.log(y) if family is ModelFamily.EXPONENTIAL else y
    beta = _least_squares(x, target, entry.basis, tol)
    if beta is None:
        logger.debug(f"{family.value}: singular or overflowing system")
        return None

    if family is ModelFamily.EXPONENTIAL:
        with np.errstate(over="ignore"):
            coefficients = (float(np.exp(beta[0])), float(beta[1]))
    else:
        coefficients = tuple(float(c) for c in beta)

    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        predicted = evaluate_model(family, coefficients, x)
    if not (np.all(np.isfinite(coefficients)) and np.all(np.isfinite(predicted))):
        logger.debug(f"{family.value}: fitted values are not finite")
        return None

    return FittedModel(
        family=family,
        coefficients=coefficients,
        r2=r_squared(y, predicted),
        equation_text=format_equation(family, coefficients),
    )


def fit_all_models(points, tol: float = PIVOT_TOLERANCE) -> Dict[ModelFamily, Optional[FittedModel]]:
    """Fit every family; families that cannot be fitted map to None."""
    x, y = _as_arrays(points)
    pts = np.column_stack([x, y]) if x.size else np.zeros((0, 2))
    return {family: fit_model(pts, family, tol) for family in ModelFamily}


def best_fit_model(points, tol: float = PIVOT_TOLERANCE) -> Optional[FittedModel]:
    """
    Fitted model with the highest R^2 across all families. Models without an
    R^2 rank below any scored model; ties keep family declaration order.
    """
    best = None
    for model in fit_all_models(points, tol).values():
        if model is None:
            continue
        if best is None:
            best = model
        elif model.r2 is not None and (best.r2 is None or model.r2 > best.r2):
            best = model
    return best
