"""Standard catalog of dimensions, systems, units, locales and metrics.

load_standard_catalog() declares a practical set of units: SI, US customary,
British Imperial, British Admiralty and internationally used (universal) units
for length, mass, time, area, volume, velocity, force, energy, power, pressure,
temperature, electrical quantities and counts. It registers into the
process-wide stores, so call measurekit.reset() before loading it again.

Definitions follow the usual references: the international yard (0.9144 m,
1959), the avoirdupois pound (453.59237 g), the international nautical mile
(1852 m), the Admiralty mile (1852.216 m), the US liquid gallon (231 in3), the
Imperial fluid ounce (28.4130625 ml) and the mechanical horsepower
(33000 ft-lbf/min). Float factors are measured definitions; rational factors
are exact by construction.
"""

from __future__ import annotations

import logging
from fractions import Fraction

from ..dimension import DIMENSIONS, Dimension
from ..metric import Metric
from ..system import LOCALES, SYSTEMS, System
from ..unit import UNITS
from .builder import Configurator

logger = logging.getLogger(__name__)


def _dimensions() -> None:
    for name, symbol in [
        ("Mass", None),
        ("Length", None),
        ("Time", None),
        ("Electric Current", "I"),
        ("Temperature", "Θ"),
        ("Luminous Intensity", "Iv"),
    ]:
        Dimension.register(name, symbol)
    M, L, T, I = (DIMENSIONS[s] for s in ("M", "L", "T", "I"))
    for name, symbol, exponents in [
        ("Electric Charge", "Q", {I: 1, T: 1}),
        ("Frequency", "f", {T: -1}),
        ("Area", "A", {L: 2}),
        ("Volume", "V", {L: 3}),
        ("Velocity", "Vel", {L: 1, T: -1}),
        ("Acceleration", "Acc", {L: 1, T: -2}),
        ("Force", "F", {M: 1, L: 1, T: -2}),
        ("Pressure", "Press", {M: 1, L: -1, T: -2}),
        ("Torque", "τ", {M: 1, L: 2, T: -2}),
        ("Energy", "E", {M: 1, L: 2, T: -2}),
        ("Power", "P", {M: 1, L: 2, T: -3}),
        ("Voltage", "emf", {M: 1, L: 2, I: -1, T: -3}),
    ]:
        Dimension.register(name, symbol, exponents)


def _systems() -> None:
    for name, abbreviation in [
        ("SI - International System (kg, tonne, m)", "SI"),
        ("Universal", "U"),
        ("US Customary (lbs, ton, ft)", "US"),
        ("US Customary Troy (oz)", "USt"),
        ("British Imperial (lbs, ton, ft)", "Imp"),
        ("British Admiralty", "BA"),
    ]:
        System.register(name, abbreviation)


def _length(c: Configurator) -> None:
    length = c.dimension("L")
    meter = length.system("SI").base("meter", "m", detector=r"\A(met(er|re)s?|m)\Z")
    meter.derive("decimeter", "dm", Fraction(1, 10), detector=r"\A(decimet(er|re)s?|dm)\Z", preference=-3)
    meter.derive("centimeter", "cm", Fraction(1, 100), detector=r"\A(centimet(er|re)s?|cm)\Z")
    meter.derive("millimeter", "mm", Fraction(1, 1000), detector=r"\A(millimet(er|re)s?|mm)\Z")
    meter.derive("decameter", "dam", 10, detector=r"\A(de(c|k)amet(er|re)s?|dam)\Z", preference=-3)
    meter.derive("kilometer", "km", 1000, detector=r"\A(kilomet(er|re)s?|km)\Z")

    length.system("U").reference("nautical mile", "M", meter.unit, 1852, detector=r"\A(nautical miles?|nm|nmi|M)\Z")

    for system in ("US", "Imp"):
        yard = length.system(system).reference("yard", "yd", meter.unit, 0.9144, detector=r"\A(yards?|yds?)\Z")
        foot = yard.derive("foot", "ft", Fraction(1, 3), detector=r"\A(foot|feet|ft|')\Z")
        foot.derive("inch", "in", Fraction(1, 12), detector=r"\A(inch|inches|in|\")\Z")
        furlong = yard.derive("furlong", None, 220, detector=r"\A(furlongs?)\Z")
        furlong.derive("mile", "mi", 8, detector=r"\A(miles?|mi)\Z")

    # The Admiralty mile is one minute of arc of latitude, not the international nautical mile.
    mile = length.system("BA").reference("mile", "nm", meter.unit, 1852.216, detector=r"\A((nautical )?miles?|nm|nmi)\Z")
    mile.derive("league", None, 3, detector=r"\A(leagues?)\Z")
    cable = mile.derive("cable", None, Fraction(1, 10), detector=r"\A(cables?|cbls?)\Z")
    fathom = cable.derive("fathom", "fm", Fraction(1, 100), detector=r"\A(fathoms?|fms?)\Z")
    yard = fathom.derive("yard", "yd", Fraction(1, 2), detector=r"\A(yards?|yds?)\Z")
    foot = yard.derive("foot", "ft", Fraction(1, 3), detector=r"\A(foot|feet|ft|')\Z")
    foot.derive("inch", "in", Fraction(1, 12), detector=r"\A(inch|inches|in|\")\Z")


def _mass(c: Configurator) -> None:
    mass = c.dimension("M")
    kilogram = mass.system("SI").base("kilogram", "kg", detector=r"\A(kilograms?|kg)\Z")
    kilogram.derive("tonne", "t", 1000, detector=r"\A(tonnes?)\Z")
    gram = kilogram.derive("gram", "g", Fraction(1, 1000), detector=r"\A(grams?|g)\Z")

    pound = mass.system("US").reference("pound", "lb", gram.unit, 453.59237, detector=r"\A(pounds?|lbs?|#)\Z")
    pound.derive("hundredweight", "cwt", 100, detector=r"\A(hundredweights?|cwt)\Z").derive(
        "ton", "t", 20, detector=r"\A(tons?|t)\Z"
    )
    pound.derive("ounce", "oz", Fraction(1, 16), detector=r"\A(ounces?|ozs?)\Z")
    grain = pound.derive("grain", "gr", Fraction(1, 7000), detector=r"\A(grains?|gr)\Z")
    grain.derive("dram", "dr", 27 + Fraction(11, 32), detector=r"\A(drams?|dr)\Z")

    pound = mass.system("Imp").reference("pound", "lb", gram.unit, 453.59237, detector=r"\A(pounds?|lbs?|#)\Z")
    pound.derive("grain", "gr", Fraction(1, 7000), detector=r"\A(grains?|gr)\Z")
    pound.derive("drachm", "dr", Fraction(1, 256), detector=r"\A(drachms?|dr)\Z")
    pound.derive("ounce", "oz", Fraction(1, 16), detector=r"\A(ounces?|ozs?)\Z")
    pound.derive("stone", None, 14, detector=r"\A(stones?)\Z")
    pound.derive("quarter", None, 28, detector=r"\A(quarters?)\Z")
    pound.derive("hundredweight", "cwt", 112, detector=r"\A(hundredweights?|cwt)\Z")
    pound.derive("ton", "t", 2240, detector=r"\A(tons?|t)\Z")


def _time(c: Configurator) -> None:
    second = c.dimension("T").system("SI").base("second", "s", detector=r"\A(seconds?|s)\Z")
    minute = second.derive("minute", "m", 60, detector=r"\A(minutes?|m)\Z")
    hour = minute.derive("hour", "h", 60, detector=r"\A(hours?|h)\Z")
    day = hour.derive("day", "d", 24, detector=r"\A(days?)\Z")
    day.derive("week", "w", 7, detector=r"\A(weeks?|wks?)\Z").derive("fortnight", None, 2, detector=r"\A(fortnights?)\Z")
    day.derive("year", "yr", 365 + Fraction(1, 4), detector=r"\A(years?|yrs?)\Z")


def _area_and_volume(c: Configurator) -> None:
    si_m = UNITS["L", "SI", "meter"]
    area = c.dimension("A")
    square_meter = area.system("SI").combine("square meter", "m2", {si_m: 2}, detector=r"\A(sq(uare|\.)?\s+met(er|re)s?|m2)\Z")
    square_meter.derive("hectare", "ha", 10000, detector=r"\A(hectares?|ha)\Z")

    us_area = area.system("US")
    square_yard = us_area.combine("square yard", "yd2", {UNITS["L", "US", "yard"]: 2}, detector=r"\A(sq(uare|\.)?\s+y(ar)?ds?|yd2)\Z")
    square_yard.derive("acre", None, 4840, detector=r"\A(acres?)\Z")
    square_mile = us_area.combine("square mile", None, {UNITS["L", "US", "mile"]: 2}, detector=r"\A(sq(uare|\.)?\s+mi(le)?s?|mi(le)?2)\Z")
    square_mile.alias("section", None, detector=r"\Asections?\Z").derive("township", "twp", 36, detector=r"\Atownships?\Z")
    us_area.combine("square foot", "ft2", {UNITS["L", "US", "ft"]: 2}, detector=r"\A(sq(uare|\.)?\s+f(oo|ee)?t|ft2)\Z")
    us_area.combine("square inch", "in2", {UNITS["L", "US", "in"]: 2}, detector=r"\A(sq(uare|\.)?\s+in(ch(es)?)?|in2)\Z")

    volume = c.dimension("V")
    cubic_meter = volume.system("SI").combine("cubic meter", "m3", {si_m: 3}, detector=r"\A(cubic\s+met(er|re)s?|m3)\Z", preference=-3)
    cubic_decimeter = cubic_meter.derive("cubic decimeter", "dm3", Fraction(1, 1000), detector=r"\A(cubic\s+decimet(er|re)s?|dm3)\Z", preference=-4)
    liter = cubic_decimeter.alias("liter", "l", detector=r"\A(lit(er|re)s?|l|L)\Z")
    milliliter = liter.derive("milliliter", "ml", Fraction(1, 1000), detector=r"\A(millilit(er|re)s?|ml|mL)\Z")

    ounce = volume.system("Imp").reference("ounce", "fl oz", milliliter.unit, 28.4130625, detector=r"\A((fluid\s+)?ounces?|oz)\Z")
    gill = ounce.derive("gill", "gi", 5, detector=r"\A(gills?|gis?)\Z")
    pint = gill.derive("cup", "cp", 2, detector=r"\A(cups?|cps?)\Z").derive("pint", "pt", 2, detector=r"\A(pints?|pts?)\Z")
    pint.derive("quart", "qt", 2, detector=r"\A(quarts?|qts?)\Z").derive("gallon", "gal", 4, detector=r"\A(gallons?|gal)\Z")

    cubic_inch = volume.system("US").combine("cubic inch", "in3", {UNITS["L", "US", "inch"]: 3}, detector=r"\A(cubic\s+in(ch(es)?)?|in3)\Z")
    unit = cubic_inch.derive("gallon", "gal", 231, detector=r"\A(gallons?|gal)\Z")
    for name, abbreviation, factor, detector in [
        ("quart", "qt", Fraction(1, 4), r"\A(quarts?|qts?)\Z"),
        ("pint", "pt", Fraction(1, 2), r"\A(pints?|pts?)\Z"),
        ("cup", None, Fraction(1, 2), r"\Acups?\Z"),
        ("gill", "gi", Fraction(1, 2), r"\A(gills?|gis?)\Z"),
        ("fluid ounce", "fl oz", Fraction(1, 4), r"\A((fluid\s+)?ounces?|oz)\Z"),
        ("dram", "dr", Fraction(1, 8), r"\A((fluid\s+)?dra(ch)?ms?|(fl\s+)?drs?)\Z"),
        ("minim", "♏", Fraction(1, 60), None),
    ]:
        unit = unit.derive(name, abbreviation, factor, detector=detector)


def _mechanics(c: Configurator) -> None:
    s, minute, hour = (UNITS["T", "SI", t] for t in ("s", "minute", "hour"))
    m = UNITS["L", "SI", "m"]

    c.dimension("f").system("SI").combine("hertz", "Hz", {s: -1}).derive("revolution per minute", "RPM", Fraction(1, 60))

    velocity = c.dimension("Vel")
    velocity.system("SI").combine("meter per second", "m/s", {m: 1, s: -1}).derive("kilometer per hour", "km/h", Fraction(1000, 3600))
    velocity.system("US").combine("mile per hour", "mph", {UNITS["L", "US", "mile"]: 1, hour: -1}, detector=r"\A(miles? per hour|mph)\Z")
    velocity.system("U").combine("knot", "kt", {UNITS["L", "U", "M"]: 1, hour: -1}, detector=r"\A(knots?|kn|kts?)\Z")

    force = c.dimension("F")
    newton = force.system("SI").combine("newton", "N", {UNITS["M", "SI", "kg"]: 1, m: 1, s: -2})
    # The pound-force depends on standard gravity (32.17405 ft/s2).
    pound_force = force.system("US").combine(
        "pound",
        "lbf",
        {UNITS["M", "US", "lb"]: 1, UNITS["L", "US", "ft"]: 1, s: -2},
        reference_factor=32.17405,
        detector=r"\A(lb|lbf|pounds?-force)\Z",
    )

    energy = c.dimension("E")
    joule = energy.system("SI").combine("joule", "J", {newton.unit: 1, m: 1})
    foot_pound = energy.system("US").combine("foot-pound", "ft-lbf", {pound_force.unit: 1, UNITS["L", "US", "ft"]: 1})

    power = c.dimension("P")
    watt = power.system("SI").combine("watt", "W", {joule.unit: 1, s: -1}, detector=r"\A(watts?|W)\Z")
    watt.derive("kilowatt", "kW", 1000, detector=r"\A(kilowatts?|kW)\Z")
    power.system("US").combine("horsepower", "hp", {foot_pound.unit: 1, minute: -1}, reference_factor=33000, detector=r"\A(horsepower|hp)\Z")

    pressure = c.dimension("Press")
    pressure.system("SI").combine("pascal", "Pa", {newton.unit: 1, UNITS["A", "SI", "m2"]: -1}, detector=r"\A(pascals?|Pa)\Z")
    pressure.system("US").combine("pound per square inch", "psi", {pound_force.unit: 1, UNITS["A", "US", "in2"]: -1}, detector=r"\A(psi)\Z")


def _electromagnetism_and_others(c: Configurator) -> None:
    s = UNITS["T", "SI", "s"]
    c.dimension("Iv").system("SI").base("candela", "cd")
    kelvin = c.dimension("Θ").system("SI").base("Kelvin", "K")
    c.dimension("Θ").system("US").reference("Rankine", "°R", kelvin.unit, Fraction(5, 9), detector=r"\A(°Ra?|degrees Rankine)\Z")

    ampere = c.dimension("I").system("SI").base("Ampere", "A", detector=r"\A(amp(ere)?s?|A)\Z")
    c.dimension("Q").system("SI").combine("coulomb", "C", {ampere.unit: 1, s: 1}, detector=r"\A(coulombs?|C)\Z")
    volt = c.dimension("emf").system("SI").combine(
        "Volt", "V", {UNITS["P", "SI", "W"]: 1, ampere.unit: -1}, detector=r"\A(volts?|V)\Z"
    )
    volt.derive("millivolt", "mV", Fraction(1, 1000))
    volt.derive("kilovolt", "kV", 1000)

    counts = c.dimension(None)
    counts.system("SI").base("mole", "mol")
    each = counts.system("US").base("each", "ea", detector=r"\Aea(ch)?\Z")
    each.derive("pair", "pr", 2, detector=r"\A(pr|pairs?)\Z")
    each.derive("dozen", "dz", 12, detector=r"\A(dz|dozens?)\Z").derive("gross", None, 12)
    each.derive("score", None, 20)


def _locales() -> None:
    si, u, us, ust, imp = (SYSTEMS[s] for s in ("SI", "U", "US", "USt", "Imp"))
    LOCALES.default.systems = [si, u, us, imp]
    LOCALES.register("US", [us, ust, u, si, imp])
    LOCALES.register("GB", [imp, si, u, us])


def _metrics() -> None:
    Metric.register("length", "L")
    Metric.register("mechanical power", "P")
    Metric.register("speed", "Vel")
    Metric.register("count", None)
    displacement = Metric.register("engine displacement", "V")
    displacement.prefer(UNITS["V", "SI", "liter"], preference=4)
    displacement.prefer(UNITS["V", "US", "in3"], preference=3)
    forestry = Metric.register("forestry", "A")
    forestry.prefer(UNITS["A", "SI", "hectare"], precision=4, format="%s%U")
    forestry.prefer(UNITS["A", "US", "acre"])


def load_standard_catalog() -> None:
    """Register the standard dimensions, systems, units, locales and metrics.

    Raises:
        CollisionError: If any of the entries is already registered.
    """
    _dimensions()
    _systems()
    c = Configurator()
    _length(c)
    _mass(c)
    _time(c)
    _area_and_volume(c)
    _mechanics(c)
    _electromagnetism_and_others(c)
    _locales()
    _metrics()
    logger.info("Loaded standard catalog: %d dimensions, %d systems, %d units", len(DIMENSIONS), len(SYSTEMS), len(UNITS))
