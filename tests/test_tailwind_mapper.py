"""像素值 → Tailwind 类名映射测试"""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from utils.tailwind_mapper import (
    FONT_SIZE_SCALE,
    RADIUS_SCALE,
    SPACING_SCALE,
    UtilityScale,
    find_closest_index,
    font_size_to_tailwind,
    map_to_scale,
    map_with_tolerance,
    radius_to_tailwind,
    spacing_to_tailwind,
)

BUILTIN_SCALES = [SPACING_SCALE, FONT_SIZE_SCALE, RADIUS_SCALE]

finite_px = st.floats(min_value=-20000, max_value=20000, allow_nan=False, allow_infinity=False)


class TestUtilityScale:
    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            UtilityScale(raw_values=(0, 4), labels=("0",))

    def test_empty_scale_rejected(self):
        with pytest.raises(ValueError):
            UtilityScale(raw_values=(), labels=())

    def test_descending_values_rejected(self):
        with pytest.raises(ValueError):
            UtilityScale(raw_values=(8, 4), labels=("a", "b"))

    def test_builtin_scales_are_consistent(self):
        for scale in BUILTIN_SCALES:
            assert len(scale.raw_values) == len(scale.labels)
            assert list(scale.raw_values) == sorted(scale.raw_values)

    def test_spacing_unit_is_four_pixels(self):
        assert SPACING_SCALE.value_of("4") == 16
        assert SPACING_SCALE.value_of("0.5") == 2
        assert SPACING_SCALE.value_of("96") == 384


class TestFindClosestIndex:
    def test_exact_hits(self):
        for scale in BUILTIN_SCALES:
            for idx, value in enumerate(scale.raw_values):
                assert find_closest_index(value, scale) == idx

    def test_clamps_below_and_above(self):
        assert find_closest_index(-50, FONT_SIZE_SCALE) == 0
        assert find_closest_index(10_000, FONT_SIZE_SCALE) == len(FONT_SIZE_SCALE.raw_values) - 1

    def test_tie_resolves_to_lower_index(self):
        # 19px 与 18px / 20px 等距
        assert FONT_SIZE_SCALE.labels[find_closest_index(19, FONT_SIZE_SCALE)] == "lg"
        # 3px 与 2px / 4px 等距
        assert RADIUS_SCALE.labels[find_closest_index(3, RADIUS_SCALE)] == "sm"

    @given(value=finite_px)
    def test_result_is_a_nearest_value(self, value):
        for scale in BUILTIN_SCALES:
            idx = find_closest_index(value, scale)
            best = abs(scale.raw_values[idx] - value)
            assert all(best <= abs(v - value) for v in scale.raw_values)
            # 等距时不会选到更大的下标
            assert all(abs(v - value) > best for v in scale.raw_values[:idx])


class TestMapToScale:
    def test_spacing_examples(self):
        assert spacing_to_tailwind(16) == "4"
        assert spacing_to_tailwind(17) == "4"
        assert spacing_to_tailwind(0) == "0"

    def test_zero_has_no_sign(self):
        assert spacing_to_tailwind(0.0) == "0"
        assert spacing_to_tailwind(-0.0) == "0"

    def test_negative_values_get_minus_prefix(self):
        assert spacing_to_tailwind(-16) == "-4"
        assert spacing_to_tailwind(-10) == "-2.5"

    @given(value=st.floats(min_value=0.001, max_value=20000, allow_nan=False))
    def test_negative_mirrors_positive(self, value):
        assert map_to_scale(-value, SPACING_SCALE) == "-" + map_to_scale(value, SPACING_SCALE)

    def test_font_size(self):
        assert font_size_to_tailwind(16) == "text-base"
        assert font_size_to_tailwind(19) == "text-lg"
        assert font_size_to_tailwind(200) == "text-9xl"

    def test_radius(self):
        assert radius_to_tailwind(4) == "rounded"
        assert radius_to_tailwind(8) == "rounded-lg"
        assert radius_to_tailwind(0) == "rounded-none"
        assert radius_to_tailwind(500) == "rounded-3xl"

    def test_negative_radius_treated_as_zero(self):
        assert radius_to_tailwind(-4) == "rounded-none"
        assert radius_to_tailwind(-8) == "rounded-none"

    def test_radius_full_threshold(self):
        assert radius_to_tailwind(1000) == "rounded-full"
        assert radius_to_tailwind(9999) == "rounded-full"
        assert radius_to_tailwind(50, full_threshold=40) == "rounded-full"


class TestMapWithTolerance:
    def test_within_default_tolerance(self):
        assert map_with_tolerance(17, SPACING_SCALE) == "4"
        assert map_with_tolerance(19, FONT_SIZE_SCALE) == "lg"

    def test_outside_default_tolerance(self):
        # 最近值 24px，默认容差 12px
        assert map_with_tolerance(500, RADIUS_SCALE) is None

    def test_explicit_tolerance(self):
        assert map_with_tolerance(17, SPACING_SCALE, tolerance=0.5) is None
        assert map_with_tolerance(17, SPACING_SCALE, tolerance=1) == "4"

    def test_negative_value(self):
        assert map_with_tolerance(-16, SPACING_SCALE) == "-4"

    @given(value=finite_px, tolerance=st.floats(min_value=0, max_value=100, allow_nan=False))
    def test_result_respects_tolerance(self, value, tolerance):
        label = map_with_tolerance(value, SPACING_SCALE, tolerance=tolerance)
        if label is not None:
            matched = SPACING_SCALE.value_of(label.lstrip("-"))
            assert abs(matched - abs(value)) <= tolerance
            assert label.startswith("-") == (value < 0)
