"""
Utilities

- chart data for plotting a fitted model
- random example data
"""

import numpy as np
import polars as pl

from polyfinder.models import PolynomialModel
from polyfinder.points import Point, format_points

CHART_SCHEMA = {"x": pl.Float64, "y": pl.Float64, "y_pred": pl.Float64}


def chart_data(
    points: list[Point],
    model: PolynomialModel,
    steps: int = 100,
) -> pl.DataFrame:
    """Samples for drawing data and model in one chart.

    ## Parameters
    - points (list[Point]): original data
    - model (PolynomialModel): fitted model
    - steps (int): intervals of the even grid between min and max x

    ## Returns
    - chart (DataFrame): columns `x`, `y` (original, null between data points)
      and `y_pred` (null where undefined), sorted by x.
    """
    if not points:
        return pl.DataFrame(schema=CHART_SCHEMA)

    xs = {p.x for p in points}
    x_min, x_max = min(xs), max(xs)
    if x_max > x_min:
        xs.update(np.linspace(x_min, x_max, steps + 1).tolist())

    # later duplicates of an x win
    original = {p.x: p.y for p in points}
    rows = [(x, original.get(x), model.predict_value(x)) for x in sorted(xs)]

    return pl.DataFrame(rows, schema=CHART_SCHEMA, orient="row")


def random_points(
    seed: int | None = None,
    x_range: tuple[float, float] = (-10.0, 10.0),
) -> list[Point]:
    """Noisy samples of a random polynomial with 4 to 6 real roots.

    One root is drawn per equal section of `x_range`, so the curve has a
    clear non-linear shape. The polynomial is scaled to a y-range of 40-60
    and 15 % uniform noise is added to 40-59 samples.
    """
    rng = np.random.default_rng(seed)
    x_min, x_max = x_range

    n_roots = int(rng.integers(4, 7))
    section = (x_max - x_min) / n_roots
    roots = x_min + section * (np.arange(n_roots) + rng.random(n_roots))

    probe = np.linspace(x_min, x_max, 100)
    max_abs = np.abs(np.prod(probe[:, None] - roots, axis=1)).max()

    y_range = 40 + 20 * rng.random()
    scale = y_range / max_abs if max_abs > 0 else 1.0
    noise = 0.15 * y_range

    n_points = int(rng.integers(40, 60))
    x = x_min + (x_max - x_min) * rng.random(n_points)
    y = scale * np.prod(x[:, None] - roots, axis=1)
    y += (rng.random(n_points) - 0.5) * 2 * noise

    order = np.argsort(x)
    return [Point(float(a), float(b)) for a, b in zip(x[order], y[order])]


def random_points_text(seed: int | None = None) -> str:
    """`random_points` as `x,y` lines with 2 decimals."""
    return format_points(random_points(seed), decimals=2)
