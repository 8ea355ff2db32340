from polyfinder.errors import (
    InsufficientDataError,
    NoModelFoundError,
    ParseError,
    PolyFinderError,
    SingularMatrixError,
)
from polyfinder.formula import format_formula
from polyfinder.linalg import solve_linear_system
from polyfinder.models import PolynomialModel, evaluate_polynomial, polynomial_regression
from polyfinder.points import Point, parse_points
from polyfinder.selection import FitResult, find_best_fit
from polyfinder.service import FitRequest, FitResponse, predict, train
