"""
Quality primitives - QualityType and Quality.

A quality classifies how far an interval deviates from its natural
(major-scale) chromatic value. Perfect-eligible steps (unison, fourth,
fifth) sit on the perfect axis; the rest sit on the major/minor axis.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chuk_intervals.constants import PERFECT_STEPS, ErrorMessages

# Multiplier words for stacked augmented/diminished qualities
_MULTIPLIERS: dict[int, str] = {
    1: "",
    2: "doubly ",
    3: "triply ",
}


class QualityType(IntEnum):
    """The five kinds of interval quality."""

    PERFECT = 0
    MAJOR = 1
    MINOR = 2
    AUGMENTED = 3
    DIMINISHED = 4


@dataclass(frozen=True, slots=True)
class Quality:
    """
    An interval quality: a type plus a size.

    Size only matters for augmented and diminished qualities, where
    1 = single, 2 = doubly, 3 = triply, and so on. Perfect, major and
    minor qualities carry size 0.

    Examples:
        Quality(QualityType.MAJOR) = major
        Quality(QualityType.AUGMENTED, 2) = doubly augmented
    """

    type: QualityType
    size: int = 0

    def __post_init__(self) -> None:
        try:
            quality_type = QualityType(self.type)
        except ValueError:
            raise ValueError(ErrorMessages.INVALID_QUALITY_TYPE.format(type=self.type)) from None
        object.__setattr__(self, "type", quality_type)
        if self.size < 0:
            raise ValueError(ErrorMessages.INVALID_QUALITY_SIZE.format(size=self.size))
        if quality_type in (QualityType.AUGMENTED, QualityType.DIMINISHED) and self.size < 1:
            raise ValueError(
                ErrorMessages.INVALID_ALTERED_SIZE.format(
                    size=self.size, type=quality_type.name.lower()
                )
            )

    def invert(self) -> Quality:
        """
        Get the quality as seen from the other direction.

        Perfect stays perfect, major <-> minor, augmented <-> diminished.
        Size is preserved.
        """
        if self.type == QualityType.PERFECT:
            return self
        elif self.type == QualityType.MAJOR:
            return Quality(QualityType.MINOR, self.size)
        elif self.type == QualityType.MINOR:
            return Quality(QualityType.MAJOR, self.size)
        elif self.type == QualityType.AUGMENTED:
            return Quality(QualityType.DIMINISHED, self.size)
        elif self.type == QualityType.DIMINISHED:
            return Quality(QualityType.AUGMENTED, self.size)
        raise ValueError(ErrorMessages.INVALID_QUALITY_TYPE.format(type=self.type))

    @property
    def symbol(self) -> str:
        """Shorthand prefix: P, M, m, A, AA, d, dd, ..."""
        if self.type == QualityType.PERFECT:
            return "P"
        elif self.type == QualityType.MAJOR:
            return "M"
        elif self.type == QualityType.MINOR:
            return "m"
        elif self.type == QualityType.AUGMENTED:
            return "A" * self.size
        return "d" * self.size

    def __str__(self) -> str:
        name = self.type.name.lower()
        if self.type in (QualityType.AUGMENTED, QualityType.DIMINISHED):
            prefix = _MULTIPLIERS.get(self.size, f"{self.size}x ")
            return f"{prefix}{name}"
        return name

    def __repr__(self) -> str:
        if self.size == 0:
            return f"Quality(QualityType.{self.type.name})"
        return f"Quality(QualityType.{self.type.name}, {self.size})"


def is_perfect(diatonic: int) -> bool:
    """Check whether a diatonic step (0-6) sits on the perfect axis."""
    return diatonic in PERFECT_STEPS


def quality_diff(perfect: bool, quality: Quality) -> int:
    """
    Get the chromatic offset implied by a quality.

    The offset is measured from the natural chromatic value of the step.
    Diminished imperfect intervals sit one semitone below minor, so they
    are shifted one further than diminished perfect intervals.

    Args:
        perfect: Whether the diatonic step is perfect-eligible
        quality: The requested quality

    Returns:
        Semitones to add to the natural chromatic value
    """
    if quality.type in (QualityType.PERFECT, QualityType.MAJOR):
        return 0
    elif quality.type == QualityType.MINOR:
        return -1
    elif quality.type == QualityType.AUGMENTED:
        return quality.size
    elif quality.type == QualityType.DIMINISHED:
        if perfect:
            return -quality.size
        return -(quality.size + 1)
    raise ValueError(ErrorMessages.INVALID_QUALITY_TYPE.format(type=quality.type))


def diff_quality(perfect: bool, diff: int) -> Quality:
    """
    Classify a chromatic offset as a quality.

    Exact inverse of quality_diff.

    Args:
        perfect: Whether the diatonic step is perfect-eligible
        diff: Chromatic value minus the natural chromatic value

    Returns:
        The matching quality
    """
    if perfect:
        if diff == 0:
            return Quality(QualityType.PERFECT)
        elif diff > 0:
            return Quality(QualityType.AUGMENTED, diff)
        return Quality(QualityType.DIMINISHED, -diff)

    if diff == 0:
        return Quality(QualityType.MAJOR)
    elif diff == -1:
        return Quality(QualityType.MINOR)
    elif diff > 0:
        return Quality(QualityType.AUGMENTED, diff)
    return Quality(QualityType.DIMINISHED, -(diff + 1))
