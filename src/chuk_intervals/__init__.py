"""
CHUK Intervals - diatonic/chromatic interval arithmetic.

Intervals are held as (octaves, diatonic, chromatic) triples so that
spelling survives: an augmented fourth and a diminished fifth are both
six semitones, but they are different intervals.
"""

from chuk_intervals.constants import (
    ELEVENTH,
    FIFTH,
    FIFTHEENTH,
    FOURTEENTH,
    FOURTH,
    NINTH,
    OCTAVE,
    SECOND,
    SEVENTH,
    SIXTH,
    TENTH,
    THIRD,
    THIRTEENTH,
    TWELFTH,
    UNISON,
    IntervalSize,
)
from chuk_intervals.core import (
    Interval,
    Quality,
    QualityType,
    augmented,
    diatonic_to_chromatic,
    diff_quality,
    diminished,
    doubly_augmented,
    doubly_diminished,
    is_perfect,
    major,
    minor,
    new,
    perfect,
    quality_diff,
    quality_interval,
)
from chuk_intervals.models import IntervalModel, QualityModel

__all__ = [
    # Core
    "Interval",
    "Quality",
    "QualityType",
    "diatonic_to_chromatic",
    "is_perfect",
    "quality_diff",
    "diff_quality",
    "new",
    "quality_interval",
    "perfect",
    "major",
    "minor",
    "augmented",
    "doubly_augmented",
    "diminished",
    "doubly_diminished",
    # Sizes
    "IntervalSize",
    "UNISON",
    "SECOND",
    "THIRD",
    "FOURTH",
    "FIFTH",
    "SIXTH",
    "SEVENTH",
    "OCTAVE",
    "NINTH",
    "TENTH",
    "ELEVENTH",
    "TWELFTH",
    "THIRTEENTH",
    "FOURTEENTH",
    "FIFTHEENTH",
    # Models
    "IntervalModel",
    "QualityModel",
]
