"""Data points and the plain text format they arrive in.

The text format has one point per line, written as `x,y`.
"""

import math
from dataclasses import dataclass

import polars as pl

from polyfinder.errors import ParseError


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def _parse_number(s: str) -> float | None:
    try:
        value = float(s.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_points(text: str) -> list[Point]:
    """Read `x,y` lines into points.

    ## parameters
    - text (str): one point per line. Fields after the second are ignored.

    ## returns
    - points (list[Point]): in input order, empty for blank text.

    Raises `ParseError` on the first line without two numbers.
    """
    text = text.strip()
    if not text:
        return []

    points = []
    for i, line in enumerate(text.split("\n"), start=1):
        fields = line.split(",")
        if len(fields) < 2:
            raise ParseError(i, line)
        x = _parse_number(fields[0])
        y = _parse_number(fields[1])
        if x is None or y is None:
            raise ParseError(i, line)
        points.append(Point(x, y))

    return points


def format_points(points: list[Point], decimals: int = 2) -> str:
    """Write points as `x,y` lines."""
    return "\n".join(f"{p.x:.{decimals}f},{p.y:.{decimals}f}" for p in points)


def points_from_frame(frame: pl.DataFrame, x: str = "x", y: str = "y") -> list[Point]:
    """Points from two columns of a DataFrame."""
    missing = {x, y} - set(frame.columns)
    if missing:
        raise ValueError(f"Missing columns: {sorted(missing)}")

    cols = frame.select(pl.col(x).cast(pl.Float64), pl.col(y).cast(pl.Float64))
    if cols.null_count().sum_horizontal().item() > 0:
        raise ValueError("Null values in point columns")

    return [Point(px, py) for px, py in cols.iter_rows()]


def points_to_frame(points: list[Point]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "x": [p.x for p in points],
            "y": [p.y for p in points],
        },
        schema={"x": pl.Float64, "y": pl.Float64},
    )
