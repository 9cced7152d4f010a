"""
Tests for the context-carrying unit builder.
"""

import unittest
from fractions import Fraction

import measurekit
from measurekit.config.builder import BuilderContext, Configurator
from measurekit.dimension import Dimension
from measurekit.errors import CollisionError, InvalidConfigurationError
from measurekit.metric import Metric
from measurekit.system import System
from measurekit.unit import UNITS


class TestConfigurator(unittest.TestCase):
    """Test scoping and registration through the builder."""

    def setUp(self):
        self.length = Dimension.register("Length")
        Dimension.register("Area", "A", {"L": 2})
        self.si = System.register("SI")
        self.us = System.register("US Customary", "US")

    def tearDown(self):
        measurekit.reset()

    def test_scoping_returns_new_configurators(self):
        """Test the receiver's context is never modified."""
        root = Configurator()
        length = root.dimension("L")
        si = length.system("SI")
        self.assertEqual(root.context, BuilderContext())
        self.assertEqual(length.context, BuilderContext(self.length))
        self.assertEqual(si.context, BuilderContext(self.length, self.si))

    def test_base_and_derive(self):
        """Test derived units reference the context unit."""
        si = Configurator().dimension("L").system("SI")
        meter = si.base("meter", "m")
        km = meter.derive("kilometer", "km", 1000)
        self.assertIs(UNITS["L", "SI", "m"], meter.unit)
        self.assertEqual(dict(km.unit.reference_units), {meter.unit: 1})
        self.assertEqual(km.unit.convert(meter.unit), 1000)
        self.assertIs(meter.context.unit, meter.unit)

    def test_siblings_do_not_leak(self):
        """Test sibling declarations share only their common parent."""
        meter = Configurator().dimension("L").system("SI").base("meter", "m")
        cm = meter.derive("centimeter", "cm", Fraction(1, 100))
        mm = meter.derive("millimeter", "mm", Fraction(1, 1000))
        self.assertEqual(dict(mm.unit.reference_units), {meter.unit: 1})
        self.assertEqual(cm.unit.convert(mm.unit), 10)

    def test_alias(self):
        """Test an alias is equivalent to its context unit."""
        meter = Configurator().dimension("L").system("SI").base("meter", "m")
        metre = meter.alias("metre")
        self.assertTrue(metre.unit.equivalent(meter.unit))
        self.assertNotEqual(metre.unit, meter.unit)

    def test_reference_and_combine(self):
        """Test references across systems and composite units."""
        length = Configurator().dimension("L")
        meter = length.system("SI").base("meter", "m")
        yard = length.system("US").reference("yard", "yd", meter.unit, 0.9144)
        square_yard = Configurator().dimension("A").system("US").combine("square yard", "yd2", {yard.unit: 2})
        scaled = square_yard.combine("double square yard", None, {yard.unit: 2}, reference_factor=2)
        self.assertIs(square_yard.unit.system, self.us)
        self.assertAlmostEqual(square_yard.unit.factor, 0.9144**2)
        self.assertAlmostEqual(scaled.unit.convert(square_yard.unit), 2)

    def test_options_pass_through(self):
        """Test detector and preference options reach the unit."""
        foot = Configurator().dimension("L").system("US").base("foot", "ft", detector=r"\A(foot|feet|ft)\Z", preference=2)
        self.assertTrue(foot.unit.match("feet"))
        self.assertEqual(foot.unit.preference, 2)

    def test_derive_without_unit(self):
        """Test deriving needs a unit in context."""
        with self.assertRaises(InvalidConfigurationError):
            Configurator().dimension("L").system("SI").derive("kilometer", "km", 1000)

    def test_collision(self):
        """Test registering twice through the builder collides."""
        si = Configurator().dimension("L").system("SI")
        si.base("meter", "m")
        with self.assertRaises(CollisionError):
            si.base("meter")

    def test_prefer(self):
        """Test preferring the context unit in a metric."""
        Metric.register("length", "L")
        meter = Configurator().dimension("L").system("SI").base("meter", "m")
        self.assertIs(meter.prefer("length", precision=2), meter)
        self.assertEqual(measurekit.METRICS["length"].preferences(meter.unit), {"precision": 2})
        with self.assertRaises(InvalidConfigurationError):
            Configurator().prefer("length")

    def test_repr(self):
        """Test the context appears in the representation."""
        self.assertEqual(repr(Configurator().dimension("L").system("SI")), "<Configurator Length:SI:<nil>>")


if __name__ == "__main__":
    unittest.main()
