"""
Tests for the distance engine.
"""

import math
import unittest
from unittest import mock

from pyproj import Geod

from stuvgeo import GeodesyContext
from stuvgeo.errors import InvalidFormat, NonConvergentError, UnknownUnit
from stuvgeo.geo import (
    Converged,
    NonConvergent,
    compute_destination_point,
    convert_unit,
    distance_geodesic,
    distance_haversine_like,
    distance_vincenty,
    vincenty_inverse,
)

LIZARD_POINT = {"lat": 50.06639, "lng": -5.71433}
JOHN_O_GROATS = {"lat": 58.64389, "lng": -3.07}

ROSSIO = {"latitude": 40.681565, "longitude": -7.927381}
MARZOVELOS = {"latitude": 40.704472, "longitude": -7.949354}

EQUATOR_ORIGIN = {"lat": 0, "lng": 0}
EQUATOR_ONE_DEGREE = {"lat": 0, "lng": 1}


class TestVincenty(unittest.TestCase):
    """Test the Vincenty inverse solution."""

    def test_identity(self):
        """Test that a point is at distance 0 from itself."""
        self.assertEqual(distance_vincenty(ROSSIO, ROSSIO), 0.0)
        self.assertEqual(vincenty_inverse(ROSSIO, ROSSIO), Converged(0.0))

    def test_identity_ignores_elevation(self):
        """Test that coincident points are 0 apart whatever their elevation."""
        low = {"lat": 10, "lng": 10, "alt": 0}
        high = {"lat": 10, "lng": 10, "alt": 500}
        self.assertEqual(distance_vincenty(low, high), 0.0)

    def test_symmetry(self):
        """Test that swapping the points gives the same distance."""
        pairs = [
            (LIZARD_POINT, JOHN_O_GROATS),
            (ROSSIO, MARZOVELOS),
            (EQUATOR_ORIGIN, {"lat": -33.9, "lng": 151.2}),
        ]
        for a, b in pairs:
            self.assertEqual(distance_vincenty(a, b), distance_vincenty(b, a))

    def test_equator_one_degree(self):
        """Test one degree of longitude on the equator."""
        self.assertEqual(distance_vincenty(EQUATOR_ORIGIN, EQUATOR_ONE_DEGREE), 111319.0)
        self.assertAlmostEqual(
            distance_vincenty(EQUATOR_ORIGIN, EQUATOR_ONE_DEGREE, precision=3),
            111319.491,
            delta=0.0015,
        )

    def test_lizard_point_to_john_o_groats(self):
        """Test a long meridional line against Karney's solution."""
        distance = distance_vincenty(LIZARD_POINT, JOHN_O_GROATS)
        _, _, expected = Geod(ellps="WGS84").inv(
            LIZARD_POINT["lng"], LIZARD_POINT["lat"], JOHN_O_GROATS["lng"], JOHN_O_GROATS["lat"]
        )
        self.assertAlmostEqual(distance, expected, delta=1.0)
        self.assertGreater(distance, 969_000)
        self.assertLess(distance, 971_000)

    def test_whole_metres_by_default(self):
        """Test that the default result is an integral number of metres."""
        distance = distance_vincenty(ROSSIO, MARZOVELOS)
        self.assertEqual(distance, math.floor(distance))
        self.assertGreater(distance, 0)

    def test_accuracy_buckets(self):
        """Test that the result is a multiple of the accuracy."""
        exact = distance_vincenty(LIZARD_POINT, JOHN_O_GROATS)
        coarse = distance_vincenty(LIZARD_POINT, JOHN_O_GROATS, accuracy=100)
        self.assertEqual(coarse % 100, 0)
        self.assertLessEqual(abs(coarse - exact), 50)

    def test_sub_metre_accuracy_means_one(self):
        """Test that accuracy below 1 behaves as 1."""
        self.assertEqual(
            distance_vincenty(ROSSIO, MARZOVELOS, accuracy=0.1),
            distance_vincenty(ROSSIO, MARZOVELOS),
        )

    def test_elevation_composition(self):
        """Test the Pythagorean combination with the elevation difference."""
        start = {"lat": 0, "lng": 0, "alt": 0}
        end = {"lat": 0, "lng": 0.001, "alt": 100}
        self.assertEqual(distance_vincenty(start, end), 150.0)
        self.assertEqual(distance_vincenty(start, {"lat": 0, "lng": 0.001}), 111.0)

    def test_non_convergence(self):
        """Test the NonConvergent value when the iteration budget runs out."""
        start, end = {"lat": 10, "lng": 10}, {"lat": 40, "lng": 60}
        with mock.patch("stuvgeo.geo.distance.VINCENTY_MAX_ITERATIONS", 1):
            result = vincenty_inverse(start, end)
            self.assertIsInstance(result, NonConvergent)
            self.assertEqual(result.iterations, 1)
            self.assertTrue(math.isnan(distance_vincenty(start, end)))
            with self.assertRaises(NonConvergentError):
                result.unwrap()

    def test_invalid_point(self):
        """Test that an unreadable point raises InvalidFormat."""
        with self.assertRaises(InvalidFormat):
            distance_vincenty({"x": 1}, ROSSIO)


class TestContext(unittest.TestCase):
    """Test last_distance bookkeeping."""

    def test_last_distance_recorded(self):
        """Test that a computed distance feeds convert_unit."""
        ctx = GeodesyContext()
        distance_vincenty(EQUATOR_ORIGIN, EQUATOR_ONE_DEGREE, context=ctx)
        self.assertEqual(ctx.last_distance, 111319.0)
        self.assertEqual(convert_unit("km", context=ctx), 111.319)
        self.assertEqual(convert_unit("mi", context=ctx), 69.1704)

    def test_fresh_context_is_zero(self):
        """Test convert_unit on a context that never measured anything."""
        self.assertEqual(convert_unit("km", context=GeodesyContext()), 0.0)

    def test_non_convergence_keeps_last_distance(self):
        """Test that a failed measurement leaves last_distance alone."""
        ctx = GeodesyContext()
        distance_vincenty(EQUATOR_ORIGIN, EQUATOR_ONE_DEGREE, context=ctx)
        with mock.patch("stuvgeo.geo.distance.VINCENTY_MAX_ITERATIONS", 1):
            distance_vincenty({"lat": 10, "lng": 10}, {"lat": 40, "lng": 60}, context=ctx)
        self.assertEqual(ctx.last_distance, 111319.0)

    def test_contexts_are_independent(self):
        """Test that two contexts do not share state."""
        first, second = GeodesyContext(), GeodesyContext()
        distance_vincenty(EQUATOR_ORIGIN, EQUATOR_ONE_DEGREE, context=first)
        self.assertIsNone(second.last_distance)


class TestConvertUnit(unittest.TestCase):
    """Test conversion from metres."""

    def test_units(self):
        """Test a handful of target units."""
        self.assertEqual(convert_unit("km", 1500), 1.5)
        self.assertEqual(convert_unit("mi", 1609.344), 1.0)
        self.assertEqual(convert_unit("sm", 1852.216), 1.0)
        self.assertEqual(convert_unit("ft", 1), 3.2808)
        self.assertEqual(convert_unit("m", 12.34567), 12.3457)

    def test_decimals(self):
        """Test explicit, zero and default decimal places."""
        self.assertEqual(convert_unit("km", 1234, decimals=2), 1.23)
        self.assertEqual(convert_unit("km", 1500, decimals=0), 2.0)
        self.assertEqual(convert_unit("km", 1234.5678, decimals=None), 1.2346)

    def test_unknown_unit(self):
        """Test that an unknown unit raises UnknownUnit."""
        with self.assertRaises(UnknownUnit):
            convert_unit("zz", 1500)

    def test_missing_distance_without_context(self):
        """Test that the stateless form needs a distance."""
        with self.assertRaises(ValueError):
            convert_unit("km")

    def test_nan_passes_through(self):
        """Test that NaN distances stay NaN."""
        self.assertTrue(math.isnan(convert_unit("km", math.nan)))


class TestOtherDistances(unittest.TestCase):
    """Test the spherical and pyproj distances."""

    def test_haversine_like_equator(self):
        """Test one degree on the equator on the sphere."""
        self.assertEqual(distance_haversine_like(EQUATOR_ORIGIN, EQUATOR_ONE_DEGREE), 111319)

    def test_haversine_like_identity(self):
        """Test that identical points are 0 apart."""
        self.assertEqual(distance_haversine_like(ROSSIO, ROSSIO), 0)

    def test_haversine_like_close_to_vincenty(self):
        """Test that the sphere stays within half a percent of the ellipsoid."""
        sphere = distance_haversine_like(LIZARD_POINT, JOHN_O_GROATS)
        ellipsoid = distance_vincenty(LIZARD_POINT, JOHN_O_GROATS)
        self.assertLess(abs(sphere - ellipsoid) / ellipsoid, 0.005)

    def test_geodesic_matches_vincenty(self):
        """Test Karney's distance against Vincenty."""
        self.assertAlmostEqual(
            distance_geodesic(ROSSIO, MARZOVELOS),
            distance_vincenty(ROSSIO, MARZOVELOS, precision=3),
            delta=0.01,
        )

    def test_geodesic_antipodes(self):
        """Test that Karney's method handles antipodal points."""
        distance = distance_geodesic({"lat": 0, "lng": 0}, {"lat": 0, "lng": 180})
        self.assertAlmostEqual(distance, 20003931.459, delta=1.0)


class TestDestinationPoint(unittest.TestCase):
    """Test the direct problem."""

    def test_due_east_on_equator(self):
        """Test travelling one degree east along the equator."""
        point = compute_destination_point(EQUATOR_ORIGIN, 111319.49, 90)
        self.assertAlmostEqual(point.latitude, 0.0, places=9)
        self.assertAlmostEqual(point.longitude, 1.0, places=6)

    def test_round_trip(self):
        """Test that the destination lies at the requested distance."""
        point = compute_destination_point(ROSSIO, 2500, 37)
        self.assertAlmostEqual(distance_vincenty(ROSSIO, point, precision=3), 2500, delta=0.01)

    def test_elevation_carried(self):
        """Test that the start elevation is kept."""
        point = compute_destination_point({"lat": 1, "lng": 1, "alt": 250}, 1000, 0)
        self.assertEqual(point.elevation, 250.0)


if __name__ == '__main__':
    unittest.main()
