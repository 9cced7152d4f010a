"""Tunable constants for best-fit unit selection.

The selection heuristics in measurekit.metric.selection combine a
magnitude-fit term with the configured preference of each candidate unit.
With the default values and no preferences configured, 1 in converts to cm,
1 ft and 1 yd to m, 1 mi to km, and 100000 m prefers km unless meter carries
a preference above 3.

The localize weight is an exchange rate: with the default of 1.0, one point
of preference outweighs one order of magnitude of misfit, so a configured
preference can override the human-scale choice outright (a metric that
prefers meter at 3.01 shows 100000 m in meters). Catalog preferences such
as -3 on decimeter rely on this to keep rarely used units out of the way.
A weight well below 1 turns preference into a tiebreak between units of
similar magnitude only.

Classes:
    SelectionSettings: Frozen set of selection constants.

Module Attributes:
    DEFAULT_SELECTION: Settings used when a caller does not pass its own.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionSettings:
    """Constants for the unit selection heuristics.

    Attributes:
        oom_decay: k in exp(-k * |oom delta|) for system changes.
        fit_weight: Weight of the magnitude-fit term for system changes.
        preference_weight: Weight of unit preference for system changes.
        localize_preference_weight: Orders of magnitude one point of
            preference is worth when localizing a value.
    """

    oom_decay: float = 1.0
    fit_weight: float = 1.0
    preference_weight: float = 0.1
    localize_preference_weight: float = 1.0


DEFAULT_SELECTION = SelectionSettings()
