"""Errors raised when fitting polynomials.

All of them are `ValueError`s, so callers that only care about bad input can
catch that.
"""


class PolyFinderError(ValueError):
    """Base class for fitting errors."""


class ParseError(PolyFinderError):
    """A data line could not be read as an `x,y` pair."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f'Invalid data format. Each line must be "x,y". '
            f"(line {line_number}: {line!r})"
        )


class SingularMatrixError(PolyFinderError):
    """The normal equations can not be solved at this degree."""

    def __init__(
        self,
        message: str | None = None,
        pivot_column: int | None = None,
        pivot: float | None = None,
    ) -> None:
        self.pivot_column = pivot_column
        self.pivot = pivot
        if message is None:
            message = (
                "Matrix is singular. Cannot solve. "
                "Try a lower polynomial degree or different data."
            )
        super().__init__(message)


class InsufficientDataError(PolyFinderError):
    """Too few points for the requested fit."""

    def __init__(self, message: str, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(message)


class NoModelFoundError(PolyFinderError):
    """Every candidate degree failed during automatic selection."""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "Could not determine a best-fit model for the given data."
        super().__init__(message)
