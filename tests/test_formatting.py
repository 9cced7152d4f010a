"""
Tests for rendering measures with templates.
"""

import unittest

import measurekit
from measurekit.config.catalog import load_standard_catalog
from measurekit.measure import Measure, count_specifiers, parse, render, substitute_unit
from measurekit.metric import Metric
from measurekit.unit import UNITS


class TestTemplateHelpers(unittest.TestCase):
    """Test unit substitution and specifier counting."""

    def setUp(self):
        load_standard_catalog()
        self.foot = UNITS["L", "US", "ft"]

    def tearDown(self):
        measurekit.reset()

    def test_substitute_abbreviation_and_name(self):
        """Test %U and %#U."""
        self.assertEqual(substitute_unit("%s%U", self.foot), "%sft")
        self.assertEqual(substitute_unit("%s %#U", self.foot), "%s foot")

    def test_substitute_width(self):
        """Test width and precision modifiers."""
        self.assertEqual(substitute_unit("[%-4U]", self.foot), "[ft  ]")
        self.assertEqual(substitute_unit("[%#6.2U]", self.foot), "[    fo]")

    def test_literal_percent_kept(self):
        """Test %% is not a unit specifier."""
        self.assertEqual(substitute_unit("%%U %U", self.foot), "%%U ft")

    def test_unit_without_abbreviation(self):
        """Test the name stands in for a missing abbreviation."""
        self.assertEqual(substitute_unit("%s %U", UNITS["L", "US", "furlong"]), "%s furlong")

    def test_count_specifiers(self):
        """Test %% is not counted."""
        self.assertEqual(count_specifiers("%4.2f (ft)\t%%\t<%10.7fft>"), 2)
        self.assertEqual(count_specifiers("%d%% of %s"), 2)
        self.assertEqual(count_specifiers("no value"), 0)


class TestRender(unittest.TestCase):
    """Test rendering of parsed measures."""

    def setUp(self):
        load_standard_catalog()

    def tearDown(self):
        measurekit.reset()

    def test_default_template(self):
        """Test the unit's own format applies by default."""
        self.assertEqual(str(parse("1.85 miles", "length", "BA")), "1.85nm")
        self.assertEqual(str(parse("3 pairs", "count")), "3 pr")

    def test_numeric_template(self):
        """Test a numeric specifier with the unit's abbreviation."""
        length = parse("15ft3in", "length", locale="US")
        self.assertEqual(length.render("%4.2f (%U)"), "15.25 (ft)")
        self.assertEqual(render(length, "%.3f %#U"), "15.250 foot")

    def test_value_repeated(self):
        """Test every numeric specifier receives the value."""
        length = parse("15ft4in", "length", locale="US")
        self.assertEqual(length.render("%4.2f (%U)\t%%\t<%10.7f%U>"), "15.33 (ft)\t%\t<15.3333333ft>")

    def test_precision_rounds_first(self):
        """Test the metric's precision rounds before formatting."""
        navigation = Metric("navigation", "L")
        navigation.prefer(UNITS["L", "BA", "nm"], precision=2)
        distance = Measure(1.8599, UNITS["L", "BA", "nm"], navigation)
        self.assertEqual(distance.render("%.4f%U"), "1.8600nm")
        self.assertEqual(distance.render("%s"), "1.86")

    def test_metric_format(self):
        """Test the metric's format and precision for a unit."""
        area = parse("1 acre", "forestry").convert(UNITS["A", "SI", "ha"])
        self.assertAlmostEqual(area, 0.40468564224)
        self.assertEqual(str(area), "0.4047ha")

    def test_percent_in_label(self):
        """Test a percent sign in a unit label is printed literally."""
        percent = Measure(12, measurekit.Unit("percent", "SI", None, abbreviation="%"))
        self.assertEqual(str(percent), "12 %")


if __name__ == "__main__":
    unittest.main()
