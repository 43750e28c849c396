"""
Tests for explicit conversion between angle types.
"""

import math
import unittest

import numpy as np

from anglekit import (
    AngleUnit,
    BasicAngle,
    Degree,
    DegreeUnit,
    Gradian,
    Radian,
    angle_cast,
    asin,
)


class BinaryDegreeUnit(AngleUnit):
    SEMICIRCLE = 128


BinaryDegree = BasicAngle[float, BinaryDegreeUnit]
IntDegree = BasicAngle[int, DegreeUnit]


class TestAngleCast(unittest.TestCase):
    """Test angle_cast between built-in and custom units."""

    def test_from_degrees(self):
        """Test converting half a turn in degrees."""
        deg_180 = Degree(180)
        self.assertAlmostEqual(angle_cast(Radian, deg_180).magnitude, math.pi, places=14)
        self.assertAlmostEqual(angle_cast(Gradian, deg_180).magnitude, 200, places=12)

    def test_from_radians(self):
        """Test converting a quarter turn in radians."""
        rad_05 = Radian(math.pi / 2)
        self.assertAlmostEqual(angle_cast(Degree, rad_05).magnitude, 90, places=12)
        self.assertAlmostEqual(angle_cast(Gradian, rad_05).magnitude, 100, places=12)

    def test_from_gradians(self):
        """Test converting a full turn in gradians."""
        grad_400 = Gradian(400)
        self.assertAlmostEqual(angle_cast(Radian, grad_400).magnitude, 2 * math.pi, places=14)
        self.assertAlmostEqual(angle_cast(Degree, grad_400).magnitude, 360, places=12)

    def test_degrees_to_gradians(self):
        """Test a right angle in gradians."""
        self.assertAlmostEqual(angle_cast(Gradian, Degree(90)).magnitude, 100, places=12)

    def test_result_type(self):
        """Test that the result has the requested type."""
        self.assertIsInstance(angle_cast(Radian, Degree(1)), Radian)
        self.assertIsInstance(angle_cast(IntDegree, Radian(1)).magnitude, int)

    def test_no_normalization(self):
        """Test that conversion is a pure rescale."""
        self.assertAlmostEqual(angle_cast(Degree, Radian(4 * math.pi)).magnitude, 720, places=10)
        self.assertAlmostEqual(angle_cast(Gradian, Degree(-450)).magnitude, -500, places=10)

    def test_integer_target_truncates(self):
        """Test narrowing to an integer storage type."""
        self.assertEqual(angle_cast(IntDegree, Radian(1.0)).magnitude, 57)
        self.assertEqual(angle_cast(IntDegree, Radian(-1.0)).magnitude, -57)

    def test_custom_unit(self):
        """Test a custom unit interoperates with built-ins."""
        self.assertAlmostEqual(angle_cast(BinaryDegree, Degree(90)).magnitude, 64, places=12)
        self.assertAlmostEqual(angle_cast(Degree, BinaryDegree(256)).magnitude, 360, places=12)

    def test_chain(self):
        """Test converting the result of an inverse function."""
        radians = asin(1)
        degrees = angle_cast(Degree, radians)
        gradians = angle_cast(Gradian, degrees)
        self.assertAlmostEqual(degrees.magnitude, 90, places=12)
        self.assertAlmostEqual(gradians.magnitude, 100, places=12)

    def test_round_trip(self):
        """Test converting there and back reproduces the magnitude."""
        rng = np.random.default_rng(3)
        values = rng.uniform(-1e3, 1e3, size=200)
        angle_types = (Degree, Radian, Gradian, BinaryDegree)
        for source in angle_types:
            for target in angle_types:
                for value in values:
                    original = source(float(value))
                    back = angle_cast(source, angle_cast(target, original))
                    self.assertTrue(
                        math.isclose(back.magnitude, original.magnitude, rel_tol=1e-12, abs_tol=1e-12),
                        f"{source.__name__} -> {target.__name__} -> {source.__name__}: {value}",
                    )

    def test_invalid_target_rejected(self):
        """Test that the target must be a specialized angle type."""
        with self.assertRaises(TypeError):
            angle_cast(float, Degree(1))
        with self.assertRaises(TypeError):
            angle_cast(BasicAngle, Degree(1))
        with self.assertRaises(TypeError):
            angle_cast(Degree, 1.0)


if __name__ == "__main__":
    unittest.main()
