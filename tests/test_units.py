"""
Tests for the measurement unit families.
"""

import unittest

from stuvgeo.errors import UnknownUnit
from stuvgeo.unit import (
    DISTANCE_UNITS,
    Degree,
    Foot,
    Hour,
    Kilometer,
    Meter,
    Mile,
    Millisecond,
    NauticalMile,
    Radian,
    distance_unit,
)


class TestDistanceUnits(unittest.TestCase):
    """Test the length family and its symbol table."""

    def test_si_storage(self):
        """Test that distances are stored in metres."""
        self.assertEqual(float(Kilometer(1.5)), 1500.0)
        self.assertEqual(Meter(1500).to(Kilometer), 1.5)

    def test_symbol_table(self):
        """Test that every documented symbol is in the table."""
        self.assertEqual(
            set(DISTANCE_UNITS),
            {"m", "km", "cm", "mm", "mi", "sm", "ft", "in", "yd"},
        )
        self.assertIs(distance_unit("ft"), Foot)
        self.assertIs(distance_unit("sm"), NauticalMile)

    def test_unknown_symbol(self):
        """Test that an unknown symbol raises UnknownUnit."""
        with self.assertRaises(UnknownUnit):
            distance_unit("zz")
        with self.assertRaises(UnknownUnit):
            distance_unit(None)

    def test_mile_factor(self):
        """Test statute mile conversion."""
        self.assertAlmostEqual(Meter(1609.344).to(Mile), 1.0)

    def test_addition_keeps_left_unit(self):
        """Test adding distances of different units."""
        total = Kilometer(1) + Meter(500)
        self.assertIsInstance(total, Kilometer)
        self.assertEqual(float(total), 1500.0)
        self.assertEqual(str(total), "1.5 km")

    def test_sum_of_distances(self):
        """Test that sum() works from its integer start value."""
        total = sum([Meter(1), Meter(2), Meter(3.5)])
        self.assertEqual(float(total), 6.5)


class TestUnitFamilies(unittest.TestCase):
    """Test cross-family protection and the other families."""

    def test_cross_family_conversion_rejected(self):
        """Test that a distance cannot become an angle."""
        with self.assertRaises(TypeError):
            Meter(1).to(Degree)

    def test_degree_to_radian(self):
        """Test angle conversion."""
        self.assertAlmostEqual(Degree(90).to(Radian), 1.5707963267948966)

    def test_milliseconds_to_hours(self):
        """Test time conversion from JavaScript timestamps."""
        self.assertAlmostEqual(Millisecond(3_600_000).to(Hour), 1.0)


if __name__ == '__main__':
    unittest.main()
