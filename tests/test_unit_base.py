"""
Tests for angle unit descriptors.
"""

import math
import unittest

from anglekit.exceptions import InvalidUnitError
from anglekit.unit import (
    AngleUnit,
    DegreeUnit,
    GradianUnit,
    RadianUnit,
    SemicircleUnit,
    check_unit,
)


class TestBuiltinUnits(unittest.TestCase):
    """Test the built-in unit descriptors."""

    def test_semicircles(self):
        """Test the semicircle constant of each built-in unit."""
        self.assertEqual(DegreeUnit.SEMICIRCLE, 180.0)
        self.assertEqual(RadianUnit.SEMICIRCLE, math.pi)
        self.assertEqual(GradianUnit.SEMICIRCLE, 200.0)

    def test_symbols(self):
        """Test display symbols."""
        self.assertEqual(DegreeUnit.SYMBOL, "°")
        self.assertEqual(RadianUnit.SYMBOL, "rad")
        self.assertEqual(GradianUnit.SYMBOL, "grad")

    def test_descriptors_cannot_be_instantiated(self):
        """Test that unit descriptors are pure tags."""
        with self.assertRaises(TypeError):
            DegreeUnit()


class TestCustomUnits(unittest.TestCase):
    """Test user-defined unit descriptors."""

    def test_valid_custom_unit(self):
        """Test defining a unit with an integer semicircle."""

        class BinaryDegreeUnit(AngleUnit):
            SEMICIRCLE = 128

        self.assertIs(check_unit(BinaryDegreeUnit), BinaryDegreeUnit)

    def test_non_positive_semicircle_rejected(self):
        """Test that zero and negative semicircles fail at class definition."""
        with self.assertRaises(InvalidUnitError):

            class ZeroUnit(AngleUnit):
                SEMICIRCLE = 0

        with self.assertRaises(InvalidUnitError):

            class NegativeUnit(AngleUnit):
                SEMICIRCLE = -180

    def test_non_finite_semicircle_rejected(self):
        """Test that nan and infinity are not usable semicircles."""
        with self.assertRaises(InvalidUnitError):

            class NanUnit(AngleUnit):
                SEMICIRCLE = math.nan

        with self.assertRaises(InvalidUnitError):

            class InfiniteUnit(AngleUnit):
                SEMICIRCLE = math.inf

    def test_non_numeric_semicircle_rejected(self):
        """Test that strings and booleans are not usable semicircles."""
        with self.assertRaises(InvalidUnitError):

            class TextUnit(AngleUnit):
                SEMICIRCLE = "180"

        with self.assertRaises(InvalidUnitError):

            class BoolUnit(AngleUnit):
                SEMICIRCLE = True

    def test_invalid_unit_error_is_value_error(self):
        """Test that InvalidUnitError can be caught as ValueError."""
        with self.assertRaises(ValueError):
            check_unit(type("Empty", (), {}))

    def test_intermediate_base_without_semicircle(self):
        """Test that abstract intermediate descriptors are allowed."""

        class NauticalUnit(AngleUnit):
            SYMBOL = "pt"

        class PointUnit(NauticalUnit):
            SEMICIRCLE = 16

        self.assertEqual(PointUnit.SEMICIRCLE, 16)
        with self.assertRaises(InvalidUnitError):
            check_unit(NauticalUnit)

    def test_duck_typed_unit(self):
        """Test that any class with a positive SEMICIRCLE qualifies."""

        class PlainUnit:
            SEMICIRCLE = 0.5

        self.assertIsInstance(PlainUnit, SemicircleUnit)
        self.assertIs(check_unit(PlainUnit), PlainUnit)


if __name__ == "__main__":
    unittest.main()
