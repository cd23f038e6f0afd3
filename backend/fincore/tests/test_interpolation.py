from __future__ import annotations

import unittest

import numpy as np

from fincore.errors import ErrorKind, MinimalSizeViolation, NonIncreasingAxis, OutOfRange
from fincore.interpolation import CubicSplineInterpolation, Interpolation, LinearInterpolation


class TestInterpolationAxis(unittest.TestCase):
    def test_single_point_is_rejected(self) -> None:
        for cls in (LinearInterpolation, CubicSplineInterpolation):
            with self.assertRaises(MinimalSizeViolation) as ctx:
                cls({1.0: 5.0})
            self.assertEqual(ctx.exception.kind, ErrorKind.MINIMAL_SIZE_VIOLATION)

        with self.assertRaises(MinimalSizeViolation):
            LinearInterpolation({})

    def test_decreasing_axis_is_rejected(self) -> None:
        for cls in (LinearInterpolation, CubicSplineInterpolation):
            with self.assertRaises(NonIncreasingAxis) as ctx:
                cls({2.0: 1.0, 1.0: 2.0})
            self.assertEqual(ctx.exception.kind, ErrorKind.NON_INCREASING_AXIS)

    def test_duplicate_keys_in_pair_list_are_rejected(self) -> None:
        with self.assertRaises(NonIncreasingAxis):
            LinearInterpolation([(0.0, 1.0), (1.0, 2.0), (1.0, 3.0)])

    def test_non_finite_keys_are_rejected(self) -> None:
        for bad in (float("nan"), float("inf")):
            for cls in (LinearInterpolation, CubicSplineInterpolation):
                with self.subTest(cls=cls.__name__, bad=bad):
                    with self.assertRaises(NonIncreasingAxis):
                        cls([(0.0, 0.0), (bad, 1.0), (2.0, 2.0)])

        with self.assertRaises(NonIncreasingAxis):
            LinearInterpolation([(float("-inf"), 0.0), (1.0, 1.0)])

    def test_axis_accessors(self) -> None:
        interp = LinearInterpolation([(0, 1), (2, 3), (5, 4)])

        self.assertEqual(interp.x_values, (0.0, 2.0, 5.0))
        self.assertEqual(interp.y_values, (1.0, 3.0, 4.0))
        self.assertEqual(interp.x_min, 0.0)
        self.assertEqual(interp.x_max, 5.0)

    def test_base_class_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            Interpolation({0.0: 0.0, 1.0: 1.0})


class TestLinearInterpolation(unittest.TestCase):
    def test_two_point_line(self) -> None:
        interp = LinearInterpolation({0.0: 0.0, 10.0: 10.0})

        self.assertEqual(interp.evaluate(5.0), 5.0)
        self.assertEqual(interp.evaluate(10.0), 10.0)
        self.assertEqual(interp.evaluate(0.0), 0.0)
        self.assertEqual(interp(2.5), 2.5)

    def test_out_of_range(self) -> None:
        interp = LinearInterpolation({0.0: 0.0, 10.0: 10.0})

        with self.assertRaises(OutOfRange) as ctx:
            interp.evaluate(11.0)
        self.assertEqual(ctx.exception.kind, ErrorKind.OUT_OF_RANGE)

        with self.assertRaises(OutOfRange):
            interp.evaluate(-0.001)

    def test_nan_is_out_of_range(self) -> None:
        interp = LinearInterpolation({0.0: 0.0, 1.0: 1.0})
        with self.assertRaises(OutOfRange):
            interp.evaluate(float("nan"))

    def test_pillars_are_exact_and_segments_linear(self) -> None:
        interp = LinearInterpolation({0.25: 0.010, 1.0: 0.020, 5.0: 0.030})

        self.assertEqual(interp.evaluate(0.25), 0.010)
        self.assertEqual(interp.evaluate(1.0), 0.020)
        self.assertEqual(interp.evaluate(5.0), 0.030)
        self.assertAlmostEqual(interp.evaluate(3.0), 0.025, places=15)
        self.assertAlmostEqual(interp.evaluate(0.625), 0.015, places=15)

    def test_evaluate_many(self) -> None:
        interp = LinearInterpolation({0.0: 0.0, 10.0: 10.0})
        out = interp.evaluate_many([0.0, 2.5, 10.0])

        self.assertIsInstance(out, np.ndarray)
        np.testing.assert_allclose(out, [0.0, 2.5, 10.0])

        with self.assertRaises(OutOfRange):
            interp.evaluate_many([1.0, 12.0])


class TestCubicSplineInterpolation(unittest.TestCase):
    POINTS = {0.0: 0.0, 1.0: 1.0, 2.0: 0.0, 3.0: 1.0}

    def test_passes_through_every_knot(self) -> None:
        spline = CubicSplineInterpolation(self.POINTS)
        for x, y in self.POINTS.items():
            self.assertEqual(spline.evaluate(x), y)

    def test_x_max_returns_last_value_exactly(self) -> None:
        spline = CubicSplineInterpolation({0.0: 0.3, 0.7: 1.1, 2.9: -0.4})
        self.assertEqual(spline.evaluate(2.9), -0.4)

    def test_coefficients_match_natural_spline_solution(self) -> None:
        spline = CubicSplineInterpolation(self.POINTS)
        expected = [
            (0.0, 5.0 / 3.0, 0.0, -2.0 / 3.0),
            (1.0, -1.0 / 3.0, -2.0, 4.0 / 3.0),
            (0.0, -1.0 / 3.0, 2.0, -2.0 / 3.0),
        ]

        for got, want in zip(spline.coefficients, expected):
            for g, w in zip(got, want):
                self.assertAlmostEqual(g, w, places=12)

    def test_values_between_knots(self) -> None:
        spline = CubicSplineInterpolation(self.POINTS)

        self.assertAlmostEqual(spline.evaluate(0.5), 0.75, places=12)
        self.assertAlmostEqual(spline.evaluate(1.5), 0.5, places=12)
        self.assertAlmostEqual(spline.evaluate(2.5), 0.25, places=12)

    def test_natural_boundary_and_continuity(self) -> None:
        spline = CubicSplineInterpolation({0.0: 1.0, 0.5: 1.8, 2.0: 0.7, 3.5: 2.2, 6.0: 1.5})
        coeffs = spline.coefficients
        xs = spline.x_values

        # S''(x_0) = 2 c_0 = 0 and S''(x_n) = 2 c_{n-1} + 6 d_{n-1} h_{n-1} = 0
        self.assertAlmostEqual(coeffs[0][2], 0.0, places=12)
        a, b, c, d = coeffs[-1]
        h = xs[-1] - xs[-2]
        self.assertAlmostEqual(2.0 * c + 6.0 * d * h, 0.0, places=12)

        for i in range(len(coeffs) - 1):
            a, b, c, d = coeffs[i]
            h = xs[i + 1] - xs[i]
            a1, b1, c1, _ = coeffs[i + 1]
            self.assertAlmostEqual(a + b * h + c * h**2 + d * h**3, a1, places=12)
            self.assertAlmostEqual(b + 2 * c * h + 3 * d * h**2, b1, places=12)
            self.assertAlmostEqual(2 * c + 6 * d * h, 2 * c1, places=12)

    def test_two_points_reduce_to_a_line(self) -> None:
        spline = CubicSplineInterpolation({0.0: 0.0, 10.0: 10.0})
        self.assertAlmostEqual(spline.evaluate(5.0), 5.0, places=12)
        self.assertAlmostEqual(spline.evaluate(7.5), 7.5, places=12)

    def test_out_of_range(self) -> None:
        spline = CubicSplineInterpolation(self.POINTS)
        with self.assertRaises(OutOfRange):
            spline.evaluate(3.0001)
        with self.assertRaises(OutOfRange):
            spline.evaluate(-1.0)
        with self.assertRaises(OutOfRange):
            spline.evaluate(float("nan"))


if __name__ == "__main__":
    unittest.main()
