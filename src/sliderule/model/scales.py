"""
Scale Marks
===========
Tick positions, tiers and labels of the slide rule scales.

Why is this file needed?
------------------------
1. Geometry: A slide rule multiplies by adding lengths, so every tick sits at
   log10 of its nominal value. The generators below compute these positions
   as fractions of one scale length (0..1).
2. Graduation: Real rules subdivide the left end of a scale more densely than
   the right end. The per-decade schedules reproduce that density.

Scale families:
    C/D: one decade, 1..10.
    A/B: two decades (1..100) folded into the same length (square-root mapping).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import StrEnum
from functools import lru_cache
from typing import Optional


class MarkTier(StrEnum):
    """Graduation level of a tick. Governs stroke length only."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    QUATERNARY = "quaternary"


@dataclass(frozen=True)
class Mark:
    """
    A single tick of a scale.

    Attributes:
        tier: Graduation level.
        value: Position along the scale as a fraction of the scale length.
        label: Text drawn next to the tick, None for unlabeled ticks.
        mirrored: True when the tick hangs above its baseline instead of below.
    """
    tier: MarkTier
    value: float
    label: Optional[str] = None
    mirrored: bool = False

    def mirror(self) -> Mark:
        return replace(self, mirrored=not self.mirrored)


@dataclass(frozen=True)
class _Subdivision:
    """Subdivision schedule of the interval [i, i + 1) of one decade."""
    count: int  # sub-ticks j = 1..count
    step: float  # nominal distance between sub-ticks
    secondary_every: int
    tertiary_every: int
    fill: bool = True  # emit quaternary ticks for the remaining j
    label_secondary: bool = False


_LINEAR_SCHEDULE: dict[int, _Subdivision] = {
    1: _Subdivision(99, 0.01, secondary_every=10, tertiary_every=5, label_secondary=True),
    2: _Subdivision(49, 0.02, secondary_every=25, tertiary_every=5),
    3: _Subdivision(49, 0.02, secondary_every=25, tertiary_every=5),
    **{i: _Subdivision(19, 0.05, secondary_every=10, tertiary_every=2) for i in range(4, 10)},
}

_SQUARE_ROOT_SCHEDULE: dict[int, _Subdivision] = {
    1: _Subdivision(49, 0.02, secondary_every=25, tertiary_every=5),
    **{i: _Subdivision(19, 0.05, secondary_every=10, tertiary_every=2) for i in range(2, 5)},
    **{i: _Subdivision(19, 0.05, secondary_every=10, tertiary_every=2, fill=False) for i in range(5, 10)},
}


def _primary_label(i: int) -> str:
    # The scales are cyclic: the right index reads 1 again
    return "1" if i == 10 else str(i)


def _sub_tier(j: int, schedule: _Subdivision) -> Optional[MarkTier]:
    if j % schedule.secondary_every == 0:
        return MarkTier.SECONDARY
    if j % schedule.tertiary_every == 0:
        return MarkTier.TERTIARY
    if schedule.fill:
        return MarkTier.QUATERNARY
    return None


def generate_linear_log_scale() -> tuple[Mark, ...]:
    """
    Generate the marks of the C/D scale.

    Returns:
        Marks ordered by integer decade, each primary followed by its
        subdivisions, and the π mark last.
    """
    marks: list[Mark] = []

    for i in range(1, 11):
        marks.append(Mark(MarkTier.PRIMARY, math.log10(i), _primary_label(i)))

        schedule = _LINEAR_SCHEDULE.get(i)
        if schedule is None:
            continue

        for j in range(1, schedule.count + 1):
            tier = _sub_tier(j, schedule)
            if tier is None:
                continue
            label = None
            if tier is MarkTier.SECONDARY and schedule.label_secondary:
                label = str(j // schedule.secondary_every)
            marks.append(Mark(tier, math.log10(i + schedule.step * j), label))

    marks.append(Mark(MarkTier.SECONDARY, math.log10(math.pi), "π"))
    return tuple(marks)


def generate_square_root_log_scale() -> tuple[Mark, ...]:
    """
    Generate the marks of the A/B scale.

    The upper decade (10..100) is folded on top of the lower one, so every
    subdivision tick comes as a lower/upper pair of the same tier. Only the
    primaries carry labels.
    """
    marks: list[Mark] = []

    for i in range(1, 11):
        label = _primary_label(i)
        marks.append(Mark(MarkTier.PRIMARY, math.log10(math.sqrt(i)), label))
        if i != 1:
            marks.append(Mark(MarkTier.PRIMARY, math.log10(math.sqrt(10 * i)), label))

        schedule = _SQUARE_ROOT_SCHEDULE.get(i)
        if schedule is None:
            continue

        for j in range(1, schedule.count + 1):
            tier = _sub_tier(j, schedule)
            if tier is None:
                continue
            nominal = i + schedule.step * j
            marks.append(Mark(tier, math.log10(math.sqrt(nominal))))
            marks.append(Mark(tier, math.log10(math.sqrt(10 * nominal))))

    return tuple(marks)


@lru_cache(maxsize=None)
def linear_log_marks() -> tuple[Mark, ...]:
    """Memoized C/D marks."""
    return generate_linear_log_scale()


@lru_cache(maxsize=None)
def square_root_log_marks() -> tuple[Mark, ...]:
    """Memoized A/B marks."""
    return generate_square_root_log_scale()


# ------------------------------------------------------------------------------
# Readings
# ------------------------------------------------------------------------------

def linear_reading(fraction: float) -> Optional[float]:
    """Value of the C/D scale at ``fraction``, None when off the scale."""
    if not 0.0 <= fraction <= 1.0:
        return None
    return 10.0 ** fraction


def square_root_reading(fraction: float) -> Optional[float]:
    """Value of the A/B scale at ``fraction``, None when off the scale."""
    if not 0.0 <= fraction <= 1.0:
        return None
    return 100.0 ** fraction
