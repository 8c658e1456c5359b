"""
Core interval primitives.

These are the invariants everything else composes on:
- QualityType: The five kinds of quality (perfect, major, minor, augmented, diminished)
- Quality: Quality type plus multiplicity, with inversion
- Interval: Diatonic/chromatic/octave triple, with derived quality and semitones
- Quality constructors: perfect, major, minor, augmented, diminished, ...
"""

from chuk_intervals.core.interval import (
    Interval,
    augmented,
    diatonic_to_chromatic,
    diminished,
    doubly_augmented,
    doubly_diminished,
    major,
    minor,
    new,
    perfect,
    quality_interval,
)
from chuk_intervals.core.quality import (
    Quality,
    QualityType,
    diff_quality,
    is_perfect,
    quality_diff,
)

__all__ = [
    # Quality
    "QualityType",
    "Quality",
    "is_perfect",
    "quality_diff",
    "diff_quality",
    # Interval
    "Interval",
    "diatonic_to_chromatic",
    "new",
    "quality_interval",
    # Quality constructors
    "perfect",
    "major",
    "minor",
    "augmented",
    "doubly_augmented",
    "diminished",
    "doubly_diminished",
]
