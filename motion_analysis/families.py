"""
Model families for curve fitting and their stateless evaluators.

Each family is a row in a lookup table: its basis functions, an optional
domain predicate and an equation template. Nothing here depends on the record
types, so both the types package and the regression engine can import it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

import numpy as np

Basis = Callable[[np.ndarray], np.ndarray]


class ModelFamily(str, Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    EXPONENTIAL = "exponential"
    INVERSE_SQUARE = "inverseSquare"
    SQUARE_ROOT = "squareRoot"


@dataclass(frozen=True)
class FamilyEntry:
    basis: Tuple[Basis, ...]
    template: str
    domain: Optional[Callable[[np.ndarray, np.ndarray], bool]] = None
    domain_message: str = ""


def _one(x):
    return np.ones_like(x)


def _identity(x):
    return x


def _square(x):
    return x * x


def _cube(x):
    return x * x * x


def _sqrt(x):
    return np.sqrt(x)


def _inverse_square(x):
    return 1.0 / (x * x)


FAMILIES: Dict[ModelFamily, FamilyEntry] = {
    ModelFamily.LINEAR: FamilyEntry(
        basis=(_one, _identity),
        template="y = {0} + {1}x",
    ),
    ModelFamily.QUADRATIC: FamilyEntry(
        basis=(_one, _identity, _square),
        template="y = {0} + {1}x + {2}x²",
    ),
    ModelFamily.CUBIC: FamilyEntry(
        basis=(_one, _identity, _square, _cube),
        template="y = {0} + {1}x + {2}x² + {3}x³",
    ),
    ModelFamily.SQUARE_ROOT: FamilyEntry(
        basis=(_one, _sqrt),
        template="y = {0} + {1}√x",
        domain=lambda x, y: bool(np.all(x >= 0)),
        domain_message="squareRoot requires x >= 0",
    ),
    ModelFamily.INVERSE_SQUARE: FamilyEntry(
        basis=(_one, _inverse_square),
        template="y = {0} + {1}/x²",
        domain=lambda x, y: bool(np.all(x != 0)),
        domain_message="inverseSquare requires x != 0",
    ),
    # ln(y) = ln(a) + b*x
    ModelFamily.EXPONENTIAL: FamilyEntry(
        basis=(_one, _identity),
        template="y = {0}·e^({1}x)",
        domain=lambda x, y: bool(np.all(y > 0)),
        domain_message="exponential requires y > 0",
    ),
}


def evaluate_model(family: Union[ModelFamily, str], coefficients: Sequence[float],
                   x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Evaluate a fitted family at x (scalar or array) from its coefficients."""
    family = ModelFamily(family)
    xs = np.asarray(x, dtype=float)
    if family is ModelFamily.EXPONENTIAL:
        a, b = coefficients
        result = a * np.exp(b * xs)
    else:
        basis = FAMILIES[family].basis
        result = sum(c * fn(xs) for c, fn in zip(coefficients, basis))
    if np.ndim(result) == 0:
        return float(result)
    return result
