"""Request / response layer between a front end and the fitting code.

A front end collects the raw text and the degree settings into a `FitRequest`,
calls `train`, and renders the `FitResponse`. Nothing here keeps state
between calls.
"""

import numbers
from dataclasses import dataclass
from typing import Literal

from polyfinder.errors import InsufficientDataError
from polyfinder.formula import format_formula
from polyfinder.models import PolynomialModel
from polyfinder.points import Point, parse_points
from polyfinder.selection import CRITERIA, MAX_DEGREE, Criterion, find_best_fit

DEFAULT_DEGREE = 2
DEFAULT_METHOD: Criterion = "BIC"


@dataclass(frozen=True)
class FitRequest:
    data: str
    degree: int = DEFAULT_DEGREE
    auto: bool = True
    method: Criterion = DEFAULT_METHOD


@dataclass(frozen=True)
class FitResponse:
    points: tuple[Point, ...]
    degree: int
    coefficients: tuple[float, ...]
    auto: bool
    method: Criterion | None
    formula: str

    @property
    def model(self) -> PolynomialModel:
        return PolynomialModel.from_coefficients(self.coefficients)


def train(request: FitRequest, verbose: Literal[0, 1, 2] = 0) -> FitResponse:
    """Parse the request data and fit a polynomial.

    Raises `ParseError`, `InsufficientDataError`, `SingularMatrixError`
    (fixed degree) or `NoModelFoundError` (auto). No partial result is
    returned on failure.
    """
    points = parse_points(request.data)

    if request.auto:
        if request.method not in CRITERIA:
            raise ValueError(f"Unsupported method: {request.method}")
        if len(points) < 2:
            raise InsufficientDataError(
                "Please provide at least 2 data points for auto mode.",
                required=2,
                available=len(points),
            )
        result = find_best_fit(points, request.method, verbose=verbose)
        degree, coefficients = result.degree, result.coefficients
        method = request.method
    else:
        degree = request.degree
        if isinstance(degree, bool) or not isinstance(degree, numbers.Integral):
            raise ValueError(f"Degree must be an integer, not {degree!r}")
        degree = int(degree)
        if not 1 <= degree <= MAX_DEGREE:
            raise ValueError(f"Degree must be between 1 and {MAX_DEGREE}: {degree}")
        if len(points) < degree + 1:
            raise InsufficientDataError(
                f"Please provide at least {degree + 1} data points "
                f"for a degree {degree} polynomial.",
                required=degree + 1,
                available=len(points),
            )
        model = PolynomialModel(points, degree, verbose=verbose >= 1)
        coefficients = model.coefficients
        method = None

    return FitResponse(
        points=tuple(points),
        degree=degree,
        coefficients=tuple(coefficients),
        auto=request.auto,
        method=method,
        formula=format_formula(coefficients),
    )


def predict(response: FitResponse, x: float) -> float | None:
    """Predicted y at x, None when undefined (nan or inf)."""
    return response.model.predict_value(x)


def format_prediction(value: float | None) -> str:
    if value is None:
        return "undefined"
    return f"{value:.4f}"
