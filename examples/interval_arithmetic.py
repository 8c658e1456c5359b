#!/usr/bin/env python3
"""
Example: Interval arithmetic and quality inference.

This demonstrates building intervals by quality, stacking them, and
reading back their semitones, quality and serialized form.

Usage:
    python examples/interval_arithmetic.py
"""

from chuk_intervals import (
    FIFTH,
    FOURTH,
    SEVENTH,
    SIXTH,
    THIRD,
    Interval,
    IntervalModel,
    augmented,
    diminished,
    major,
    minor,
    new,
    perfect,
)


def main() -> None:
    """Print a tour of the interval engine."""
    # Example 1: Named intervals
    print("Named intervals:")
    named = [major(THIRD), minor(THIRD), perfect(FIFTH), augmented(FOURTH), diminished(FIFTH)]
    for interval in named:
        print(f"  {interval.shorthand:>4}  {interval.semitones:>2} semitones  {interval}")

    # Example 2: Stacking thirds into a seventh chord
    print("\nStacking a dominant seventh from the root:")
    stack = [major(THIRD), minor(THIRD), minor(THIRD)]
    current = Interval.UNISON
    for step in stack:
        current = current + step
        print(f"  + {step.shorthand:<3} -> {current.shorthand} ({current.quality})")
    assert current == minor(SEVENTH)

    # Example 3: Crossing the octave
    print("\nCrossing the octave:")
    result = major(SIXTH) + major(THIRD)
    print(f"  M6 + M3 -> {result.shorthand} {result}")

    # Example 4: Beyond the named constructors
    print("\nTriply augmented fourth:")
    wide = new(FOURTH, 3)
    print(f"  {wide.shorthand} ({wide.quality}), {wide.semitones} semitones")

    # Example 5: Downward intervals report the inverse quality
    print("\nDownward major third:")
    down = Interval(-1, 2, 4)
    print(f"  {down} reads as {down.quality}")

    # Example 6: Serialization
    print("\nSerialized:")
    print(f"  {IntervalModel.from_interval(perfect(FIFTH)).model_dump_json(by_alias=True)}")


if __name__ == "__main__":
    main()
