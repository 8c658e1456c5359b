"""
Interval primitives - Interval and its constructors.

An interval is held as three coordinates:
- octaves: whole octaves of displacement (negative = measured downward)
- diatonic: scale step within the octave (0 = unison ... 6 = seventh)
- chromatic: semitones from the tonic, not normalized

Quality is derived on demand from diatonic and chromatic, never stored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from chuk_intervals.constants import (
    DIATONIC_STEPS,
    DIATONIC_TO_CHROMATIC,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
    IntervalSize,
)
from chuk_intervals.core.quality import (
    Quality,
    QualityType,
    diff_quality,
    is_perfect,
    quality_diff,
)

logger = logging.getLogger(__name__)


def diatonic_to_chromatic(diatonic: int) -> int:
    """
    Get the natural chromatic value of a diatonic step.

    This is the semitone offset of the step on an unaltered major scale.

    Raises:
        ValueError: If the step is outside 0-6
    """
    if not 0 <= diatonic < len(DIATONIC_TO_CHROMATIC):
        raise ValueError(ErrorMessages.DIATONIC_OUT_OF_RANGE.format(diatonic=diatonic))
    return DIATONIC_TO_CHROMATIC[diatonic]


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Distance between pitches, held diatonically and chromatically.

    Major and minor thirds share a diatonic step but differ chromatically;
    an augmented fourth and a diminished fifth share a semitone count but
    differ diatonically. Both distinctions survive here.

    Immutable and hashable.

    Examples:
        major(THIRD) = Interval(octaves=0, diatonic=2, chromatic=4)
        perfect(OCTAVE) = Interval(octaves=1, diatonic=0, chromatic=0)
    """

    octaves: int
    diatonic: int  # 0-6
    chromatic: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __post_init__(self) -> None:
        if not 0 <= self.diatonic < DIATONIC_STEPS:
            raise ValueError(ErrorMessages.DIATONIC_OUT_OF_RANGE.format(diatonic=self.diatonic))

    @property
    def diff(self) -> int:
        """Chromatic offset from the natural value of the diatonic step."""
        return self.chromatic - diatonic_to_chromatic(self.diatonic)

    @property
    def semitones(self) -> int:
        """Total semitone distance."""
        return self.octaves * SEMITONES_PER_OCTAVE + self.chromatic

    @property
    def number(self) -> int:
        """Numeric size (1 = unison, 3 = third, 8 = octave, ...)."""
        return self.octaves * DIATONIC_STEPS + self.diatonic + 1

    @property
    def quality(self) -> Quality:
        """
        Derive the quality of this interval.

        Downward intervals (negative octaves) report the quality as seen
        from the other direction, so a downward major third is minor.
        """
        quality = diff_quality(is_perfect(self.diatonic), self.diff)
        if self.octaves < 0:
            return quality.invert()
        return quality

    @property
    def shorthand(self) -> str:
        """Short name like 'M3', 'P5', 'A4', 'dd5'."""
        return f"{self.quality.symbol}{self.number}"

    def has_quality_type(self, quality_type: QualityType) -> bool:
        """Check whether this interval's quality is of the given type."""
        return self.quality.type == quality_type

    def add_interval(self, other: Interval) -> Interval:
        """
        Stack another interval on top of this one.

        Diatonic steps that pass the seventh carry into octaves. When they
        do, the chromatic sum wraps within an octave; otherwise it
        accumulates unreduced.

        M3 + m3 -> P5
        P5 + P4 -> P8
        """
        diatonics = self.diatonic + other.diatonic
        diatonic_octaves, diatonic = divmod(diatonics, DIATONIC_STEPS)

        octaves = self.octaves + other.octaves + diatonic_octaves
        chromatic = self.chromatic + other.chromatic
        if diatonic_octaves > 0:
            wrapped = chromatic % SEMITONES_PER_OCTAVE
            logger.debug(
                f"Diatonic carry of {diatonic_octaves}; chromatic {chromatic} wrapped to {wrapped}"
            )
            chromatic = wrapped

        return Interval(octaves, diatonic, chromatic)

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add_interval(other)

    def __str__(self) -> str:
        return f"(octaves: {self.octaves}, diatonic: {self.diatonic}, chromatic: {self.chromatic})"


def new(size: int, offset: int) -> Interval:
    """
    Build an interval from a numeric size and a raw chromatic offset.

    The offset is added to the natural chromatic value of the step,
    bypassing quality inference. Use this for qualities beyond the named
    constructors, e.g. new(FOURTH, 3) for a triply augmented fourth.

    Sizes below 1 floor into negative octaves: new(0, 0) is a seventh
    one octave down.

    Args:
        size: Numeric interval size (1 = unison, 3 = third, ...)
        offset: Semitones above (or below) the natural chromatic value

    Returns:
        The interval
    """
    octaves, diatonic = divmod(size - 1, DIATONIC_STEPS)
    chromatic = diatonic_to_chromatic(diatonic) + offset
    return Interval(octaves, diatonic, chromatic)


def quality_interval(quality: Quality) -> Callable[[int], Interval]:
    """
    Make a constructor for intervals of a fixed quality.

    The constructor is named after the quality (perfect, doubly_augmented)
    and only accepts sizes of 1 or more.

    Returns:
        A function from numeric size to interval
    """

    def build(size: int) -> Interval:
        if size < 1:
            raise ValueError(ErrorMessages.INVALID_SIZE.format(size=size))
        diatonic = (size - 1) % DIATONIC_STEPS
        return new(size, quality_diff(is_perfect(diatonic), quality))

    name = str(quality).replace(" ", "_")
    build.__name__ = name
    build.__qualname__ = name
    build.__doc__ = f"Build an interval of quality '{quality}' from a numeric size."
    return build


perfect = quality_interval(Quality(QualityType.PERFECT))
major = quality_interval(Quality(QualityType.MAJOR))
minor = quality_interval(Quality(QualityType.MINOR))
augmented = quality_interval(Quality(QualityType.AUGMENTED, 1))
doubly_augmented = quality_interval(Quality(QualityType.AUGMENTED, 2))
diminished = quality_interval(Quality(QualityType.DIMINISHED, 1))
doubly_diminished = quality_interval(Quality(QualityType.DIMINISHED, 2))


# Initialize class constants after constructors are defined
Interval.UNISON = perfect(IntervalSize.UNISON)
Interval.MINOR_SECOND = minor(IntervalSize.SECOND)
Interval.MAJOR_SECOND = major(IntervalSize.SECOND)
Interval.MINOR_THIRD = minor(IntervalSize.THIRD)
Interval.MAJOR_THIRD = major(IntervalSize.THIRD)
Interval.PERFECT_FOURTH = perfect(IntervalSize.FOURTH)
Interval.AUGMENTED_FOURTH = augmented(IntervalSize.FOURTH)
Interval.DIMINISHED_FIFTH = diminished(IntervalSize.FIFTH)
Interval.PERFECT_FIFTH = perfect(IntervalSize.FIFTH)
Interval.MINOR_SIXTH = minor(IntervalSize.SIXTH)
Interval.MAJOR_SIXTH = major(IntervalSize.SIXTH)
Interval.MINOR_SEVENTH = minor(IntervalSize.SEVENTH)
Interval.MAJOR_SEVENTH = major(IntervalSize.SEVENTH)
Interval.OCTAVE = perfect(IntervalSize.OCTAVE)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.A4 = Interval.AUGMENTED_FOURTH
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
