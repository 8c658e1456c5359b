"""
Interval models - the serialization layer.

Pydantic schemas for moving intervals and qualities across a JSON/dict
boundary. The core value types stay plain dataclasses; these models
validate input and convert back to them.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, computed_field, field_serializer, field_validator

from chuk_intervals.core.interval import Interval
from chuk_intervals.core.quality import Quality, QualityType

logger = logging.getLogger(__name__)


class QualityModel(BaseModel):
    """
    Serialized interval quality.

    The type is written by name ("major", "augmented") and accepted by
    name or by enum value.
    """

    quality_type: QualityType = Field(..., alias="type", description="Quality type")
    size: int = Field(0, ge=0, description="Augmented/diminished multiplicity (1 = single)")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("quality_type", mode="before")
    @classmethod
    def parse_type(cls, v: object) -> object:
        """Accept quality type names in any case."""
        if isinstance(v, str):
            try:
                return QualityType[v.upper()]
            except KeyError:
                raise ValueError(f"Unknown quality type: {v}") from None
        return v

    @field_serializer("quality_type")
    def serialize_type(self, v: QualityType) -> str:
        return v.name.lower()

    @classmethod
    def from_quality(cls, quality: Quality) -> QualityModel:
        """Create a model from a Quality value."""
        return cls(quality_type=quality.type, size=quality.size)

    def to_quality(self) -> Quality:
        """Convert back to a Quality value."""
        return Quality(self.quality_type, self.size)


class IntervalModel(BaseModel):
    """
    Serialized interval.

    Only the three raw coordinates are read back. Semitones and quality
    are derived fields included in dumps for inspection.
    """

    octaves: int = Field(0, description="Whole octaves of displacement (negative = downward)")
    diatonic: int = Field(..., ge=0, le=6, description="Scale step within the octave (0-6)")
    chromatic: int = Field(..., description="Semitones from the tonic")

    model_config = {"frozen": True, "extra": "ignore"}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def semitones(self) -> int:
        """Total semitone distance."""
        return self._build().semitones

    @computed_field  # type: ignore[prop-decorator]
    @property
    def quality(self) -> QualityModel:
        """Derived quality."""
        return QualityModel.from_quality(self._build().quality)

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalModel:
        """Create a model from an Interval value."""
        return cls(
            octaves=interval.octaves,
            diatonic=interval.diatonic,
            chromatic=interval.chromatic,
        )

    def _build(self) -> Interval:
        return Interval(self.octaves, self.diatonic, self.chromatic)

    def to_interval(self) -> Interval:
        """Convert back to an Interval value."""
        interval = self._build()
        logger.debug(f"Loaded interval {interval}")
        return interval
