import math
from dataclasses import dataclass, field
from timeit import default_timer
from typing import Literal

import polars as pl
from tqdm import tqdm

from polyfinder.errors import InsufficientDataError, NoModelFoundError, SingularMatrixError
from polyfinder.models import PolynomialModel, polynomial_regression, residual_sum_of_squares
from polyfinder.points import Point

Criterion = Literal["AIC", "BIC"]
CRITERIA = ("AIC", "BIC")

MAX_DEGREE = 20
# below this a fit counts as exact, and log(rss) is avoided
PERFECT_FIT_RSS = 1e-10

SWEEP_SCHEMA = {
    "degree": pl.Int32,
    "rss": pl.Float64,
    "score": pl.Float64,
    "runtime": pl.Float64,
    "error": pl.String,
}


@dataclass(frozen=True)
class FitResult:
    """A fitted polynomial and how it was chosen.

    - degree, coefficients: the model, coefficients lowest power first
    - method: criterion used, None for a fit at a fixed degree
    - score: criterion value of the chosen degree (-inf for an exact fit)
    - rss: residual sum of squares of the chosen degree
    - sweep: one row per candidate degree (see `SWEEP_SCHEMA`)
    """

    degree: int
    coefficients: tuple[float, ...]
    method: Criterion | None = None
    score: float | None = None
    rss: float = math.nan
    sweep: pl.DataFrame | None = field(default=None, compare=False)

    @property
    def model(self) -> PolynomialModel:
        return PolynomialModel.from_coefficients(self.coefficients)


def candidate_degrees(n_points: int, max_degree: int = MAX_DEGREE) -> range:
    """Degrees tried for n points: 1 to min(max_degree, n - 1)."""
    return range(1, min(max_degree, n_points - 1) + 1)


def information_criterion(rss: float, n: int, k: int, method: Criterion) -> float:
    """AIC or BIC of a least squares fit (up to a constant).

    ## parameters
    - rss (float): residual sum of squares, > 0
    - n (int): number of samples
    - k (int): number of parameters
    - method: "AIC" (2 per parameter) or "BIC" (log(n) per parameter)
    """
    if method == "AIC":
        penalty = 2 * k
    elif method == "BIC":
        penalty = k * math.log(n)
    else:
        raise ValueError(f"Unsupported method: {method}")

    return n * math.log(rss / n) + penalty


def find_best_fit(
    points: list[Point],
    method: Criterion = "BIC",
    max_degree: int = MAX_DEGREE,
    verbose: Literal[0, 1, 2] = 0,
) -> FitResult:
    """Fit all candidate degrees and keep the one with the lowest criterion.

    ## parameters
    - points (list[Point]): at least 2 samples
    - method: "BIC" (conservative) or "AIC" (sensitive)
    - max_degree (int): highest degree to try
    - verbose (int): amount of status information printed

    ## returns
    - result (FitResult): best degree, with the full sweep attached.

    Degrees where the normal equations are singular are skipped. An exact
    fit (rss <= PERFECT_FIT_RSS) scores -inf and wins, but only when it is
    the first usable degree; later exact fits are ignored. Ties go to the
    lower degree.
    """
    if method not in CRITERIA:
        raise ValueError(f"Unsupported method: {method}")

    n = len(points)
    degrees = candidate_degrees(n, max_degree)
    if len(degrees) == 0:
        raise InsufficientDataError(
            "Not enough data points to find a best-fit polynomial "
            "(requires at least 2).",
            required=2,
            available=n,
        )

    best_score = math.inf
    best: tuple[int, list[float], float] | None = None
    rows = []

    if verbose >= 1:
        degrees = tqdm(degrees)

    for degree in degrees:
        t_start = default_timer()
        try:
            coefficients = polynomial_regression(points, degree)
        except SingularMatrixError as e:
            rows.append((degree, None, None, default_timer() - t_start, str(e)))
            if verbose >= 1:
                print(f"Skipping degree {degree}: {e}")
            continue

        rss = residual_sum_of_squares(points, coefficients)

        if rss <= PERFECT_FIT_RSS:
            score = -math.inf
            # exact fits count only before any other degree is accepted
            if best is None:
                best_score = score
                best = (degree, coefficients, rss)
        else:
            score = information_criterion(rss, n, degree + 1, method)
            if score < best_score:
                best_score = score
                best = (degree, coefficients, rss)

        rows.append((degree, rss, score, default_timer() - t_start, None))
        if verbose >= 2:
            print(f"degree {degree}: rss {rss:.4g}, {method} {score:.4g}")

    sweep = pl.DataFrame(rows, schema=SWEEP_SCHEMA, orient="row")

    if best is None:
        raise NoModelFoundError()

    degree, coefficients, rss = best
    if verbose >= 1:
        print(f"Best degree: {degree} ({method} {best_score:.4g})")

    return FitResult(
        degree=degree,
        coefficients=tuple(coefficients),
        method=method,
        score=best_score,
        rss=rss,
        sweep=sweep,
    )
