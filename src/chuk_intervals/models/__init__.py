"""
Pydantic models for the interval engine.

This module provides:
- IntervalModel: Serialized interval (octaves, diatonic, chromatic)
- QualityModel: Serialized quality (type, size)
"""

from chuk_intervals.models.interval import IntervalModel, QualityModel

__all__ = [
    "IntervalModel",
    "QualityModel",
]
