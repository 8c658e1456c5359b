"""
Tests for interval qualities.

Tests cover:
- QualityType and Quality (construction, validation, inversion)
- Perfect-axis membership
- Quality to offset and offset to quality mappings
"""

import pytest

from chuk_intervals import Quality, QualityType, diff_quality, is_perfect, quality_diff

ALL_QUALITIES = [
    Quality(QualityType.PERFECT),
    Quality(QualityType.MAJOR),
    Quality(QualityType.MINOR),
    Quality(QualityType.AUGMENTED, 1),
    Quality(QualityType.AUGMENTED, 2),
    Quality(QualityType.AUGMENTED, 3),
    Quality(QualityType.DIMINISHED, 1),
    Quality(QualityType.DIMINISHED, 2),
]


class TestQuality:
    """Tests for Quality value type."""

    def test_defaults_to_size_zero(self) -> None:
        """Size defaults to zero."""
        assert Quality(QualityType.MAJOR).size == 0

    def test_coerces_int_type(self) -> None:
        """Raw ints are coerced to QualityType."""
        quality = Quality(3, 1)
        assert quality.type is QualityType.AUGMENTED
        assert quality == Quality(QualityType.AUGMENTED, 1)

    def test_invalid_type(self) -> None:
        """Unknown quality types raise error."""
        with pytest.raises(ValueError, match="Invalid quality type"):
            Quality(7)

    def test_negative_size(self) -> None:
        """Negative sizes raise error."""
        with pytest.raises(ValueError, match="Invalid quality size"):
            Quality(QualityType.DIMINISHED, -1)

    @pytest.mark.parametrize("altered", [QualityType.AUGMENTED, QualityType.DIMINISHED])
    def test_altered_needs_size(self, altered: QualityType) -> None:
        """Augmented and diminished qualities need a size of at least one."""
        with pytest.raises(ValueError, match="Must be >= 1"):
            Quality(altered)
        with pytest.raises(ValueError, match="Must be >= 1"):
            Quality(altered, 0)

    def test_hashable(self) -> None:
        """Qualities are hashable for use in sets."""
        qualities = {
            Quality(QualityType.MAJOR),
            Quality(QualityType.MAJOR),
            Quality(QualityType.MINOR),
        }
        assert len(qualities) == 2

    def test_str(self) -> None:
        """Human-readable names."""
        assert str(Quality(QualityType.PERFECT)) == "perfect"
        assert str(Quality(QualityType.MINOR)) == "minor"
        assert str(Quality(QualityType.AUGMENTED, 1)) == "augmented"
        assert str(Quality(QualityType.AUGMENTED, 2)) == "doubly augmented"
        assert str(Quality(QualityType.DIMINISHED, 3)) == "triply diminished"
        assert str(Quality(QualityType.DIMINISHED, 4)) == "4x diminished"

    def test_symbol(self) -> None:
        """Shorthand prefixes."""
        assert Quality(QualityType.PERFECT).symbol == "P"
        assert Quality(QualityType.MAJOR).symbol == "M"
        assert Quality(QualityType.MINOR).symbol == "m"
        assert Quality(QualityType.AUGMENTED, 2).symbol == "AA"
        assert Quality(QualityType.DIMINISHED, 1).symbol == "d"

    def test_repr(self) -> None:
        """Repr shows size only when it matters."""
        assert repr(Quality(QualityType.MAJOR)) == "Quality(QualityType.MAJOR)"
        assert repr(Quality(QualityType.AUGMENTED, 2)) == "Quality(QualityType.AUGMENTED, 2)"


class TestInvert:
    """Tests for Quality.invert."""

    def test_perfect_stays_perfect(self) -> None:
        """Perfect inverts to itself."""
        assert Quality(QualityType.PERFECT).invert() == Quality(QualityType.PERFECT)

    def test_major_minor_swap(self) -> None:
        """Major and minor swap."""
        assert Quality(QualityType.MAJOR).invert() == Quality(QualityType.MINOR)
        assert Quality(QualityType.MINOR).invert() == Quality(QualityType.MAJOR)

    def test_augmented_diminished_swap_keeps_size(self) -> None:
        """Augmented and diminished swap, size preserved."""
        assert Quality(QualityType.AUGMENTED, 2).invert() == Quality(QualityType.DIMINISHED, 2)
        assert Quality(QualityType.DIMINISHED, 1).invert() == Quality(QualityType.AUGMENTED, 1)

    @pytest.mark.parametrize("quality", ALL_QUALITIES, ids=str)
    def test_self_inverse(self, quality: Quality) -> None:
        """Inverting twice gives the original quality."""
        assert quality.invert().invert() == quality


class TestIsPerfect:
    """Tests for perfect-axis membership."""

    def test_perfect_steps(self) -> None:
        """Unison, fourth and fifth are perfect-eligible."""
        assert [step for step in range(7) if is_perfect(step)] == [0, 3, 4]

    def test_imperfect_steps(self) -> None:
        """Second, third, sixth and seventh are not."""
        assert not any(is_perfect(step) for step in (1, 2, 5, 6))


class TestQualityDiff:
    """Tests for quality to offset mapping."""

    def test_perfect_and_major_are_natural(self) -> None:
        """Perfect and major add no offset."""
        assert quality_diff(True, Quality(QualityType.PERFECT)) == 0
        assert quality_diff(False, Quality(QualityType.MAJOR)) == 0

    def test_minor(self) -> None:
        """Minor is one semitone below major."""
        assert quality_diff(False, Quality(QualityType.MINOR)) == -1

    def test_augmented(self) -> None:
        """Augmented adds its size on either axis."""
        assert quality_diff(True, Quality(QualityType.AUGMENTED, 1)) == 1
        assert quality_diff(False, Quality(QualityType.AUGMENTED, 2)) == 2

    def test_diminished_perfect_axis(self) -> None:
        """Diminished perfect intervals subtract their size."""
        assert quality_diff(True, Quality(QualityType.DIMINISHED, 1)) == -1
        assert quality_diff(True, Quality(QualityType.DIMINISHED, 2)) == -2

    def test_diminished_imperfect_axis(self) -> None:
        """Diminished imperfect intervals sit one below minor."""
        assert quality_diff(False, Quality(QualityType.DIMINISHED, 1)) == -2
        assert quality_diff(False, Quality(QualityType.DIMINISHED, 2)) == -3


class TestDiffQuality:
    """Tests for offset to quality mapping."""

    @pytest.mark.parametrize(
        "diff,expected",
        [
            (0, Quality(QualityType.PERFECT)),
            (1, Quality(QualityType.AUGMENTED, 1)),
            (2, Quality(QualityType.AUGMENTED, 2)),
            (-1, Quality(QualityType.DIMINISHED, 1)),
            (-2, Quality(QualityType.DIMINISHED, 2)),
        ],
    )
    def test_perfect_axis(self, diff: int, expected: Quality) -> None:
        """Offsets on the perfect axis."""
        assert diff_quality(True, diff) == expected

    @pytest.mark.parametrize(
        "diff,expected",
        [
            (0, Quality(QualityType.MAJOR)),
            (-1, Quality(QualityType.MINOR)),
            (1, Quality(QualityType.AUGMENTED, 1)),
            (2, Quality(QualityType.AUGMENTED, 2)),
            (-2, Quality(QualityType.DIMINISHED, 1)),
            (-3, Quality(QualityType.DIMINISHED, 2)),
        ],
    )
    def test_imperfect_axis(self, diff: int, expected: Quality) -> None:
        """Offsets on the major/minor axis."""
        assert diff_quality(False, diff) == expected

    @pytest.mark.parametrize("perfect", [True, False])
    @pytest.mark.parametrize("diff", range(-5, 6))
    def test_inverse_of_quality_diff(self, perfect: bool, diff: int) -> None:
        """Classifying an offset then computing its offset gives it back."""
        assert quality_diff(perfect, diff_quality(perfect, diff)) == diff
