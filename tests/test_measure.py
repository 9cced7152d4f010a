"""
Tests for measures: arithmetic, comparison and conversion.
"""

import copy
import unittest
from fractions import Fraction

import measurekit
from measurekit.dimension import Dimension
from measurekit.errors import IncommensurableError, NoSuitableUnitError
from measurekit.measure import Measure, metric_for
from measurekit.metric import Metric
from measurekit.system import LOCALES, System
from measurekit.unit import Unit


class MeasureTestCase(unittest.TestCase):
    """Registers a few units of length, time, area and counts."""

    def setUp(self):
        Dimension.register("Length")
        Dimension.register("Time")
        Dimension.register("Area", "A", {"L": 2})
        self.si = System.register("SI")
        self.us = System.register("US Customary", "US")
        self.meter = Unit.register("meter", "SI", "L", abbreviation="m")
        self.km = Unit.register("kilometer", "SI", "L", abbreviation="km", reference_units={self.meter: 1}, reference_factor=1000)
        self.yard = Unit.register("yard", "US", "L", abbreviation="yd", reference_units={self.meter: 1}, reference_factor=0.9144)
        self.foot = Unit.register("foot", "US", "L", abbreviation="ft", reference_units={self.yard: 1}, reference_factor=Fraction(1, 3))
        self.inch = Unit.register("inch", "US", "L", abbreviation="in", reference_units={self.foot: 1}, reference_factor=Fraction(1, 12))
        self.mile = Unit.register("mile", "US", "L", abbreviation="mi", reference_units={self.yard: 1}, reference_factor=1760)
        self.second = Unit.register("second", "SI", "T", abbreviation="s")
        self.square_meter = Unit.register("square meter", "SI", "A", abbreviation="m2", reference_units={self.meter: 2})
        self.each = Unit.register("each", "US", None, abbreviation="ea")
        self.dozen = Unit.register("dozen", "US", None, abbreviation="dz", reference_units={self.each: 1}, reference_factor=12)

    def tearDown(self):
        measurekit.reset()


class TestMeasureBasics(MeasureTestCase):
    """Test construction and metadata."""

    def test_is_a_float(self):
        """Test a measure behaves as its value."""
        depth = Measure(15.25, self.foot)
        self.assertIsInstance(depth, float)
        self.assertEqual(float(depth), 15.25)
        self.assertIs(depth.unit, self.foot)

    def test_default_metric(self):
        """Test the metric defaults to the registered metric of the dimension."""
        self.assertIsNone(Measure(1, self.foot).metric.name)
        self.assertIn(self.mile, Measure(1, self.foot).metric)
        length = Metric.register("length", "L")
        self.assertIs(Measure(1, self.foot).metric, length)
        self.assertIs(metric_for(self.foot, "length"), length)

    def test_immutable(self):
        """Test attributes cannot be reassigned."""
        depth = Measure(15.25, self.foot)
        with self.assertRaises(AttributeError):
            depth.unit = self.meter

    def test_copy(self):
        """Test copies keep value, unit and metric."""
        depth = Measure(15.25, self.foot)
        duplicate = copy.copy(depth)
        self.assertEqual(duplicate, depth)
        self.assertIs(duplicate.unit, self.foot)
        self.assertIs(duplicate.metric, depth.metric)

    def test_native(self):
        """Test counts are integers and other measures floats."""
        self.assertEqual(Measure(3.0, self.each).native, 3)
        self.assertIsInstance(Measure(3.0, self.each).native, int)
        self.assertIsInstance(Measure(3, self.foot).native, float)

    def test_repr_and_format(self):
        """Test the debugging and format() representations."""
        self.assertEqual(repr(Measure(15.25, self.foot)), "<Measure 15.25 ft (<Unit L:US:foot>)>")
        self.assertEqual(f"{Measure(15.25, self.foot):.1f}", "15.2")
        self.assertEqual(f"{Measure(12, self.each)}", "12 ea")


class TestMeasureConversion(MeasureTestCase):
    """Test conversions and unit selection on measures."""

    def test_convert(self):
        """Test conversion keeps the metric."""
        inches = Measure(15.25, self.foot).convert(self.inch)
        self.assertAlmostEqual(inches, 183)
        self.assertIs(inches.unit, self.inch)
        self.assertEqual(Measure(2, self.dozen).convert(self.each).native, 24)

    def test_convert_incommensurable(self):
        """Test conversion across dimensions fails."""
        with self.assertRaises(IncommensurableError):
            Measure(1, self.meter).convert(self.second)

    def test_base(self):
        """Test conversion to the single base unit."""
        self.assertEqual(Measure(2, self.km).base(), Measure(2000, self.meter))
        self.assertAlmostEqual(Measure(1, self.inch).base(), 0.0254)
        with self.assertRaises(IncommensurableError):
            Measure(1, self.square_meter).base()

    def test_change_system(self):
        """Test the SI counterpart of a mile is kilometers."""
        distance = Measure(1, self.mile).change_system("SI")
        self.assertIs(distance.unit, self.km)
        self.assertAlmostEqual(distance, 1.609344)

    def test_change_system_without_units(self):
        """Test failing and falling back."""
        System.register("British Imperial", "Imp")
        with self.assertRaises(NoSuitableUnitError):
            Measure(1, self.yard).change_system("Imp")
        self.assertIs(Measure(1, self.yard).change_system("Imp", fallback=True).unit, self.yard)

    def test_localize_auto_created_locale(self):
        """Test localizing to a locale created from the default."""
        LOCALES.default.systems = [self.us, self.si]
        distance = Measure(5, self.km).localize("CA")
        self.assertIs(distance.unit, self.mile)
        self.assertAlmostEqual(distance, 3.10686, places=5)
        self.assertIn("CA", LOCALES)

    def test_preferred(self):
        """Test the most human-scale unit of the metric."""
        self.assertIs(Measure(36, self.inch).preferred().unit, self.yard)
        self.assertIs(Measure(0, self.km).preferred().unit, self.km)


class TestMeasureArithmetic(MeasureTestCase):
    """Test arithmetic and comparisons."""

    def test_add_converts_other_measure(self):
        """Test the result is in the left operand's unit."""
        total = Measure(15, self.foot) + Measure(4, self.inch)
        self.assertIs(total.unit, self.foot)
        self.assertAlmostEqual(total, 15 + 1 / 3)

    def test_add_and_subtract_numbers(self):
        """Test plain numbers are taken in the measure's unit."""
        self.assertEqual(1 + Measure(2, self.foot), Measure(3, self.foot))
        self.assertIs((Measure(2, self.foot) + 1).unit, self.foot)
        self.assertEqual(10 - Measure(4, self.foot), Measure(6, self.foot))
        self.assertEqual(Measure(1, self.km) - Measure(250, self.meter), Measure(0.75, self.km))

    def test_add_incommensurable(self):
        """Test adding across dimensions fails."""
        with self.assertRaises(IncommensurableError):
            Measure(1, self.meter) + Measure(1, self.second)

    def test_scale(self):
        """Test scalar multiplication and division keep the unit."""
        self.assertEqual(Measure(2, self.foot) * 3, Measure(6, self.foot))
        self.assertEqual(3 * Measure(2, self.foot), Measure(6, self.foot))
        self.assertEqual(Measure(6, self.foot) / 4, Measure(1.5, self.foot))
        self.assertIs((-Measure(2, self.foot)).unit, self.foot)
        self.assertEqual(abs(Measure(-2, self.foot)), Measure(2, self.foot))
        with self.assertRaises(TypeError):
            Measure(2, self.foot) * Measure(2, self.foot)

    def test_equality(self):
        """Test equality converts commensurable measures."""
        self.assertEqual(Measure(1, self.km), Measure(1000, self.meter))
        self.assertNotEqual(Measure(1, self.km), Measure(1, self.meter))
        self.assertNotEqual(Measure(1, self.meter), Measure(1, self.second))
        self.assertNotEqual(Measure(2, self.meter), 2)
        self.assertNotEqual(2.0, Measure(2, self.meter))

    def test_hash_agrees_with_equality(self):
        """Test equal measures in different units hash alike."""
        km = Measure(1, self.km)
        meters = Measure(1000, self.meter)
        self.assertEqual(hash(km), hash(meters))
        self.assertEqual(len({km, meters}), 1)
        self.assertEqual({km: "range"}[meters], "range")
        self.assertEqual(len({Measure(1, self.meter), Measure(1, self.second)}), 2)

    def test_ordering(self):
        """Test ordering converts commensurable measures."""
        self.assertGreater(Measure(1, self.km), Measure(999, self.meter))
        self.assertLess(Measure(1, self.foot), Measure(1, self.yard))
        self.assertLessEqual(Measure(1, self.mile), Measure(1761, self.yard))
        self.assertEqual(max([Measure(1, self.km), Measure(1200, self.meter)]).unit, self.meter)
        with self.assertRaises(IncommensurableError):
            Measure(1, self.meter) < Measure(1, self.second)


if __name__ == "__main__":
    unittest.main()
