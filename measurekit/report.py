"""Terminal reports of registered units and metrics, rendered with rich.

Functions:
    unit_table: Table of units with their base signature and factor.
    metric_table: Table of a metric's visible units and options.
    conversion_panel: Panel showing a measure in every unit of its metric.
    print_units: Print unit_table to a console.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .dimension import resolve_dimension
from .measure import Measure
from .metric import Metric, resolve_metric
from .unit import UNITS, Unit

CONSOLE = Console()


def _signature(unit: Unit) -> str:
    parts = []
    for base, exponent in unit.base_signature.items():
        parts.append(base.label if exponent == 1 else f"{base.label}^{exponent}")
    return " ".join(parts)


def _system(unit: Unit) -> str:
    return "<nil>" if unit.system is None else unit.system.label


def unit_table(units: Iterable[Unit] | None = None, title: str = "Units") -> Table:
    """Build a table describing units (all registered units by default)."""
    table = Table(title=title)
    table.add_column("Dimension")
    table.add_column("System")
    table.add_column("Name", style="bold")
    table.add_column("Abbr.")
    table.add_column("Base")
    table.add_column("Factor", justify="right")
    for unit in UNITS if units is None else units:
        table.add_row(
            "-" if unit.dimension is None else unit.dimension.symbol,
            _system(unit),
            unit.name,
            unit.abbreviation or "",
            _signature(unit),
            f"{float(unit.factor):.6g}",
        )
    return table


def metric_table(metric: Metric | str | None) -> Table:
    """Build a table of a metric's visible units, most preferred first."""
    metric = resolve_metric(metric)
    table = Table(title=f"Metric {metric}")
    table.add_column("Unit", style="bold")
    table.add_column("System")
    table.add_column("Preference", justify="right")
    table.add_column("Precision", justify="right")
    table.add_column("Format")
    for unit in metric.units:
        options = metric.preferences(unit)
        table.add_row(
            unit.name,
            _system(unit),
            f"{metric.preference(unit):g}",
            str(options.get("precision", "")),
            options.get("format", unit.format),
        )
    return table


def conversion_panel(measure: Measure) -> Panel:
    """Panel listing a measure converted into every compatible unit of its metric."""
    t = Table.grid(padding=(0, 2))
    for unit in measure.metric.units:
        if unit.shares_base(measure.unit):
            t.add_row(f"[b]{unit.name}[/b] ({_system(unit)}): ", str(measure.convert(unit)))
    return Panel(t, title=str(measure), padding=(1, 2))


def print_units(dimension=None, console: Console | None = None) -> None:
    """Print the registered units, optionally only those of one dimension."""
    units = None if dimension is None else UNITS.for_dimension(resolve_dimension(dimension))
    (console or CONSOLE).print(unit_table(units))
