"""
Tests for dimensions and the shared registry behaviour.
"""

import unittest

import measurekit
from measurekit.dimension import DIMENSIONS, Dimension, resolve_dimension
from measurekit.errors import CollisionError, InvalidConfigurationError, UnknownEntryError


class TestFundamentalDimension(unittest.TestCase):
    """Test fundamental dimensions."""

    def tearDown(self):
        measurekit.reset()

    def test_symbol_defaults_to_initial(self):
        """Test the symbol is the upper-cased first letter of the name."""
        length = Dimension.register("length")
        self.assertEqual(length.symbol, "L")
        self.assertTrue(length.fundamental)
        self.assertEqual(dict(length.exponents), {})

    def test_lookup_by_name_and_symbol(self):
        """Test a dimension is registered under both name and symbol."""
        temperature = Dimension.register("Temperature", "Θ")
        self.assertIs(DIMENSIONS["Temperature"], temperature)
        self.assertIs(DIMENSIONS["Θ"], temperature)
        self.assertIs(resolve_dimension("Θ"), temperature)
        self.assertIsNone(resolve_dimension(None))
        self.assertIsNone(DIMENSIONS.get(None))

    def test_unknown_dimension(self):
        """Test unknown keys raise a KeyError subclass."""
        with self.assertRaises(UnknownEntryError):
            DIMENSIONS["Q"]
        with self.assertRaises(KeyError):
            resolve_dimension("Charge")

    def test_collision_on_name_or_symbol(self):
        """Test names and symbols share one namespace."""
        Dimension.register("Length")
        with self.assertRaises(CollisionError):
            Dimension.register("Length", "Len")
        with self.assertRaises(CollisionError):
            Dimension.register("Luminosity", "L")
        self.assertEqual(len(DIMENSIONS), 1)

    def test_fundamental_equality_by_name(self):
        """Test fundamental dimensions compare by name."""
        self.assertEqual(Dimension("Mass"), Dimension("Mass", "m"))
        self.assertNotEqual(Dimension("Mass"), Dimension("Time"))

    def test_immutable(self):
        """Test attributes cannot be reassigned."""
        mass = Dimension("Mass")
        with self.assertRaises(AttributeError):
            mass.name = "Weight"


class TestCompositeDimension(unittest.TestCase):
    """Test dimensions defined by exponents."""

    def setUp(self):
        self.mass = Dimension.register("Mass")
        self.length = Dimension.register("Length")
        self.time = Dimension.register("Time")

    def tearDown(self):
        measurekit.reset()

    def test_exponents_by_symbol(self):
        """Test exponent keys may be given as registered symbols."""
        velocity = Dimension.register("Velocity", "Vel", {"L": 1, "T": -1})
        self.assertFalse(velocity.fundamental)
        self.assertEqual(dict(velocity.exponents), {self.length: 1, self.time: -1})

    def test_zero_exponents_dropped(self):
        """Test zero exponents do not appear in the mapping."""
        distance = Dimension("Distance", "D", {self.length: 1, self.time: 0})
        self.assertEqual(dict(distance.exponents), {self.length: 1})

    def test_value_equality(self):
        """Test differently named composites with equal exponents are equal."""
        torque = Dimension("Torque", "τ", {self.mass: 1, self.length: 2, self.time: -2})
        energy = Dimension("Energy", "E", {"M": 1, "L": 2, "T": -2})
        self.assertEqual(torque, energy)
        self.assertEqual(hash(torque), hash(energy))
        self.assertEqual(len({torque, energy}), 1)

    def test_composite_differs_from_fundamental(self):
        """Test a composite over one dimension is not the fundamental itself."""
        distance = Dimension("Distance", "D", {self.length: 1})
        self.assertNotEqual(distance, self.length)

    def test_non_fundamental_key_rejected(self):
        """Test exponents must refer to fundamental dimensions."""
        area = Dimension.register("Area", "A", {self.length: 2})
        with self.assertRaises(InvalidConfigurationError):
            Dimension("Volume", "V", {area: 1, self.length: 1})

    def test_non_integer_exponent_rejected(self):
        """Test exponents must be integers."""
        with self.assertRaises(InvalidConfigurationError):
            Dimension("Odd", "O", {self.length: 1.5})
        with self.assertRaises(InvalidConfigurationError):
            Dimension("Odd", "O", {self.length: True})

    def test_reset_clears_registry(self):
        """Test reset empties the registry."""
        self.assertEqual(len(DIMENSIONS), 3)
        DIMENSIONS.reset()
        self.assertEqual(len(DIMENSIONS), 0)
        self.assertNotIn("L", DIMENSIONS)


if __name__ == "__main__":
    unittest.main()
