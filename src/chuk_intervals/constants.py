"""
Constants and enums for the interval engine.

No magic numbers - use enums and named tables for constrained values.
"""

from enum import IntEnum


class IntervalSize(IntEnum):
    """
    Numeric interval sizes (1-based, as musicians count them).

    A third spans three scale steps counting both ends, so THIRD == 3.
    """

    UNISON = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7
    OCTAVE = 8
    NINTH = 9
    TENTH = 10
    ELEVENTH = 11
    TWELFTH = 12
    THIRTEENTH = 13
    FOURTEENTH = 14
    FIFTHEENTH = 15  # spelling kept for compatibility with existing callers


# Module-level names for readability at call sites: major(THIRD), perfect(FIFTH)
UNISON = IntervalSize.UNISON
SECOND = IntervalSize.SECOND
THIRD = IntervalSize.THIRD
FOURTH = IntervalSize.FOURTH
FIFTH = IntervalSize.FIFTH
SIXTH = IntervalSize.SIXTH
SEVENTH = IntervalSize.SEVENTH
OCTAVE = IntervalSize.OCTAVE
NINTH = IntervalSize.NINTH
TENTH = IntervalSize.TENTH
ELEVENTH = IntervalSize.ELEVENTH
TWELFTH = IntervalSize.TWELFTH
THIRTEENTH = IntervalSize.THIRTEENTH
FOURTEENTH = IntervalSize.FOURTEENTH
FIFTHEENTH = IntervalSize.FIFTHEENTH

# Scale steps per octave and semitones per octave
DIATONIC_STEPS = 7
SEMITONES_PER_OCTAVE = 12

# Semitone offset of each diatonic step (0-6) on an unaltered major scale
DIATONIC_TO_CHROMATIC: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Diatonic steps measured on the perfect axis: unison, fourth, fifth
PERFECT_STEPS: frozenset[int] = frozenset({0, 3, 4})


class ErrorMessages:
    """Standardized error messages."""

    DIATONIC_OUT_OF_RANGE = "Diatonic step out of range: {diatonic}. Must be 0-6."
    INVALID_QUALITY_TYPE = "Invalid quality type: {type!r}."
    INVALID_QUALITY_SIZE = "Invalid quality size: {size}. Must be >= 0."
    INVALID_ALTERED_SIZE = "Invalid quality size: {size} for {type}. Must be >= 1."
    INVALID_SIZE = "Invalid interval size: {size}. Must be >= 1."
