import math
import unittest

import numpy as np

from polyfinder.errors import (
    InsufficientDataError,
    NoModelFoundError,
    ParseError,
    SingularMatrixError,
)
from polyfinder.service import FitRequest, format_prediction, predict, train

NEAR_LINEAR = "1,2\n2,4\n3,6\n4,8.1\n5,9.9"


class TestTrainAuto(unittest.TestCase):
    def test_auto_aic(self):
        response = train(FitRequest(NEAR_LINEAR, auto=True, method="AIC"))

        self.assertTrue(response.auto)
        self.assertEqual(response.method, "AIC")
        self.assertLessEqual(response.degree, 3)
        self.assertEqual(len(response.coefficients), response.degree + 1)
        self.assertEqual(len(response.points), 5)
        self.assertTrue(response.formula.startswith("f(x) = "))

    def test_auto_needs_two_points(self):
        with self.assertRaises(InsufficientDataError) as cm:
            train(FitRequest("1,2", auto=True))
        self.assertEqual(
            str(cm.exception), "Please provide at least 2 data points for auto mode."
        )

    def test_auto_no_model(self):
        with self.assertRaises(NoModelFoundError):
            train(FitRequest("1,1\n1,2\n1,3", auto=True))

    def test_large_x(self):
        data = "\n".join(
            f"{1e16 * (1 + i / 10)!r},{3e16 * (1 + i / 10) + (-1) ** i * 1e15!r}"
            for i in range(25)
        )
        response = train(FitRequest(data, auto=True, method="AIC"))
        self.assertEqual(len(response.points), 25)
        self.assertTrue(1 <= response.degree <= 20)

    def test_unknown_method(self):
        with self.assertRaises(ValueError):
            train(FitRequest(NEAR_LINEAR, auto=True, method="CV"))


class TestTrainFixed(unittest.TestCase):
    def test_quadratic(self):
        data = "\n".join(f"{x},{x**2 - 2 * x + 3}" for x in range(-3, 4))
        response = train(FitRequest(data, degree=2, auto=False))

        self.assertFalse(response.auto)
        self.assertIsNone(response.method)
        self.assertEqual(response.degree, 2)
        np.testing.assert_allclose(response.coefficients, [3, -2, 1], atol=1e-9)
        self.assertEqual(response.formula, "f(x) = x^2 - 2x + 3")

    def test_numpy_integer_degree(self):
        response = train(FitRequest(NEAR_LINEAR, degree=np.int64(2), auto=False))
        self.assertEqual(response.degree, 2)
        self.assertIs(type(response.degree), int)
        self.assertEqual(len(response.coefficients), 3)

    def test_too_few_points(self):
        with self.assertRaises(InsufficientDataError) as cm:
            train(FitRequest("1,2\n2,3", degree=2, auto=False))
        self.assertEqual(
            str(cm.exception),
            "Please provide at least 3 data points for a degree 2 polynomial.",
        )

    def test_singular(self):
        with self.assertRaises(SingularMatrixError):
            train(FitRequest("1,1\n1,2\n2,3", degree=2, auto=False))

    def test_degree_range(self):
        for degree in (0, 21):
            with self.assertRaises(ValueError):
                train(FitRequest(NEAR_LINEAR, degree=degree, auto=False))

    def test_parse_error(self):
        with self.assertRaises(ParseError):
            train(FitRequest("1,2\nthree,4", degree=1, auto=False))

    def test_empty(self):
        with self.assertRaises(InsufficientDataError):
            train(FitRequest("", degree=1, auto=False))


class TestPredict(unittest.TestCase):
    def setUp(self) -> None:
        self.response = train(FitRequest("0,1\n1,3\n2,5", degree=1, auto=False))

    def test_predict(self):
        self.assertAlmostEqual(predict(self.response, 10), 21)

    def test_undefined(self):
        response = train(FitRequest("0,1\n1,2\n2,5", degree=2, auto=False))
        self.assertIsNone(predict(response, 1e300))

    def test_format(self):
        self.assertEqual(format_prediction(21.0), "21.0000")
        self.assertEqual(format_prediction(-1 / 3), "-0.3333")
        self.assertEqual(format_prediction(None), "undefined")

    def test_model(self):
        model = self.response.model
        self.assertTrue(math.isclose(model(0.5), 2.0))


if __name__ == "__main__":
    unittest.main()
