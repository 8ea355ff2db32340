import math
import numbers

import polars as pl

from polyfinder.errors import SingularMatrixError
from polyfinder.formula import format_formula
from polyfinder.linalg import solve_linear_system
from polyfinder.points import Point


class PolynomialModel:
    """Polynomial regression in one variable"""

    def __init__(
        self,
        points: list[Point],
        degree: int = 1,
        verbose=False,
    ) -> None:
        self.points = tuple(points)
        self.coefficients = tuple(
            polynomial_regression(self.points, degree, verbose=verbose)
        )
        self.degree = len(self.coefficients) - 1

        if verbose:
            print(f"coefficients: {list(self.coefficients)}, rss: {self.rss}")

    @classmethod
    def from_coefficients(cls, coefficients) -> "PolynomialModel":
        """Model with known coefficients, no training data."""
        model = cls.__new__(cls)
        model.coefficients = tuple(float(c) for c in coefficients)
        model.degree = max(len(model.coefficients) - 1, 0)
        model.points = ()
        return model

    def __str__(self) -> str:
        lines = [
            f"Polynomial model (degree: {self.degree})",
            f"{len(self.points)} samples",
            format_formula(self.coefficients),
        ]
        return "\n".join(lines)

    def __call__(self, x: float) -> float:
        return evaluate_polynomial(self.coefficients, x)

    def predict_value(self, x: float) -> float | None:
        """Evaluate at x, None if the result is not finite."""
        y = self(x)
        return y if math.isfinite(y) else None

    @property
    def yhat(self) -> list[float]:
        """Prediction of training data"""
        return [self(p.x) for p in self.points]

    @property
    def rss(self) -> float:
        """Residual sum of squares on training data"""
        return residual_sum_of_squares(self.points, self.coefficients)

    def predict(self, samples: pl.DataFrame, x: str = "x") -> pl.DataFrame:
        """Predict new samples, adds a `y_pred` column."""
        y_pred = [
            None if v is None else self.predict_value(v)
            for v in samples[x].cast(pl.Float64)
        ]
        return samples.with_columns(y_pred=pl.Series(y_pred, dtype=pl.Float64))


def design_matrix(xs: list[float], degree: int) -> list[list[float]]:
    """Powers of x up to a degree (including constant).
    ## parameters
    - xs (list[float]): sample positions, length N
    - degree (int): maximum power d
    ## returns
    - X (list[list[float]]): shape (N, d + 1), X[i][j] = xs[i] ** j
    """
    # x ** 0 is 1 also for x == 0
    return [[_power(x, j) for j in range(degree + 1)] for x in xs]


def normal_equations(
    points: list[Point], degree: int
) -> tuple[list[list[float]], list[float]]:
    """Gram matrix XtX and right hand side XtY for least squares."""
    X = design_matrix([p.x for p in points], degree)
    y = [p.y for p in points]
    n = degree + 1

    XtX = [[sum(row[i] * row[j] for row in X) for j in range(n)] for i in range(n)]
    XtY = [sum(row[i] * yi for row, yi in zip(X, y)) for i in range(n)]
    return XtX, XtY


def polynomial_regression(
    points: list[Point], degree: int, verbose=False
) -> list[float]:
    """Least squares polynomial coefficients, lowest power first.

    ## parameters
    - points (list[Point]): at least `degree + 1` samples
    - degree (int): polynomial degree
    - verbose (bool): print system size

    ## returns
    - coefficients (list[float]): [a0, a1, ..., a_degree]

    Raises `SingularMatrixError` if the normal equations are singular,
    which includes having fewer than `degree + 1` points.
    """
    if isinstance(degree, bool) or not isinstance(degree, numbers.Integral):
        raise ValueError(f"Degree must be an integer, not {degree!r}")
    degree = int(degree)
    if degree < 0:
        raise ValueError(f"Degree must be non-negative: {degree}")
    if len(points) < degree + 1:
        # rank of XtX is at most the number of points
        raise SingularMatrixError(
            f"Under-determined system: {len(points)} points "
            f"for {degree + 1} coefficients."
        )

    if verbose:
        print(f"{len(points)} samples\n{degree + 1} coefficients")

    XtX, XtY = normal_equations(points, degree)
    return solve_linear_system(XtX, XtY)


def _power(x: float, i: int) -> float:
    try:
        return x**i
    except OverflowError:
        # float power raises instead of giving inf
        return math.copysign(math.inf, x) ** i


def evaluate_polynomial(coefficients, x: float) -> float:
    """Sum of c[i] * x ** i. May be nan or inf for extreme inputs."""
    x = float(x)
    result = 0.0
    for i, c in enumerate(coefficients):
        # a zero term stays zero, also where x ** i overflows
        if c == 0:
            continue
        result += c * _power(x, i)
    return result


def residual_sum_of_squares(points: list[Point], coefficients) -> float:
    """Sum of squared residuals, inf when a square overflows."""
    total = 0.0
    for p in points:
        r = p.y - evaluate_polynomial(coefficients, p.x)
        total += r * r
    return total
