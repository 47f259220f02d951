"""Tests for the numeric and comparison utilities."""

from collections import OrderedDict
from types import MappingProxyType

import numpy as np
import pytest

from ctrlkit.utils.math_utils import (
    apply_deadband,
    does_map_contain,
    is_numbers_equal,
    is_vector_equal,
    map_to_range,
    math_sign,
    matrix_apply_deadband,
    wrap_range,
)


class TestIsNumbersEqual:
    def test_same_value_is_equal(self) -> None:
        for a in [0.0, -3.5, 1e-12, 1e12]:
            assert is_numbers_equal(a, a, 1e-6)
            assert is_numbers_equal(a, a, 0.0)

    def test_tolerance_is_inclusive(self) -> None:
        assert is_numbers_equal(1.0, 1.5, 0.5)
        assert is_numbers_equal(3, 5, 2)

    def test_outside_tolerance(self) -> None:
        tol = 1e-3
        assert not is_numbers_equal(1.0, 1.0 + 2 * tol + 1e-9, tol)
        assert not is_numbers_equal(-1.0, 1.0, 1.0)

    def test_negative_tolerance_never_matches(self) -> None:
        assert not is_numbers_equal(2.0, 2.0, -1e-9)


class TestIsVectorEqual:
    def test_same_sequence(self) -> None:
        a = [1, 2, 3]
        assert is_vector_equal(a, a)
        assert is_vector_equal(a, list(a))
        assert is_vector_equal([], [])

    def test_length_mismatch(self) -> None:
        a = [1.0, 2.0]
        assert not is_vector_equal(a, a + [3.0])

    def test_element_mismatch(self) -> None:
        assert not is_vector_equal(["a", "b"], ["a", "c"])

    def test_no_tolerance_applied(self) -> None:
        assert not is_vector_equal([0.1 + 0.2], [0.3])

    def test_numpy_vectors(self) -> None:
        assert is_vector_equal(np.arange(4), np.arange(4))
        assert not is_vector_equal(np.arange(4), np.arange(1, 5))

    def test_nan_is_not_equal(self) -> None:
        assert not is_vector_equal([float("nan")], [float("nan")])


class TestWrapRange:
    def test_below_range(self) -> None:
        assert wrap_range(-5, 0, 10) == 0

    def test_above_range(self) -> None:
        assert wrap_range(15, 0, 10) == 10

    def test_inside_range(self) -> None:
        assert wrap_range(5, 0, 10) == 5

    def test_bounds_are_inclusive(self) -> None:
        assert wrap_range(0.0, 0.0, 1.0) == 0.0
        assert wrap_range(1.0, 0.0, 1.0) == 1.0

    def test_degenerate_range(self) -> None:
        assert wrap_range(3.0, 2.0, 2.0) == 2.0

    def test_inverted_range_asserts(self) -> None:
        with pytest.raises(AssertionError):
            wrap_range(1.0, 2.0, 0.0)


class TestApplyDeadband:
    def test_inside_band_is_zero(self) -> None:
        assert apply_deadband(0.05, 0.1) == 0
        assert apply_deadband(-0.05, 0.1) == 0

    def test_outside_band_unchanged(self) -> None:
        assert apply_deadband(0.5, 0.1) == 0.5
        assert apply_deadband(-0.5, 0.1) == -0.5

    def test_band_edge_is_kept(self) -> None:
        assert apply_deadband(0.1, 0.1) == 0.1
        assert apply_deadband(-0.1, 0.1) == -0.1

    def test_keeps_input_type(self) -> None:
        result = apply_deadband(np.float32(0.01), np.float32(0.1))
        assert result == 0
        assert isinstance(result, np.float32)
        assert isinstance(apply_deadband(1, 2), int)

    def test_idempotent(self) -> None:
        band = 0.2
        for x in np.linspace(-1.0, 1.0, 41):
            once = apply_deadband(x, band)
            assert apply_deadband(once, band) == once

    def test_zero_band_keeps_everything(self) -> None:
        assert apply_deadband(1e-9, 0.0) == 1e-9

    def test_clamped_after_deadband(self) -> None:
        assert apply_deadband(5.0, 0.1, -1.0, 1.0) == 1.0
        assert apply_deadband(-5.0, 0.1, -1.0, 1.0) == -1.0
        assert apply_deadband(0.5, 0.1, -1.0, 1.0) == 0.5

    def test_deadband_applied_before_clamp(self) -> None:
        # 0.05 falls in the band first, then 0 is clamped up to the lower bound
        assert apply_deadband(0.05, 0.1, 0.2, 1.0) == 0.2

    def test_single_bound_raises(self) -> None:
        with pytest.raises(ValueError, match="together"):
            apply_deadband(0.5, 0.1, min_value=0.0)


class TestMatrixApplyDeadband:
    def test_in_place(self) -> None:
        m = np.array([[0.05, -0.5], [0.2, -0.01]])
        result = matrix_apply_deadband(m, 0.1)
        assert result is None
        np.testing.assert_array_equal(m, np.array([[0.0, -0.5], [0.2, 0.0]]))

    def test_matches_scalar_deadband(self) -> None:
        rng = np.random.default_rng(0)
        m = rng.uniform(-1.0, 1.0, size=(4, 3))
        expected = np.array([[apply_deadband(v, 0.3) for v in row] for row in m])
        matrix_apply_deadband(m, 0.3)
        np.testing.assert_array_equal(m, expected)

    def test_column_major_layout(self) -> None:
        m = np.asfortranarray([[0.05, 1.0], [2.0, -0.05]])
        matrix_apply_deadband(m, 0.1)
        np.testing.assert_array_equal(m, np.array([[0.0, 1.0], [2.0, 0.0]]))


class TestMathSign:
    def test_signs(self) -> None:
        assert math_sign(-3) == -1
        assert math_sign(0) == 0
        assert math_sign(7) == 1

    def test_floats(self) -> None:
        assert math_sign(-0.0) == 0
        assert math_sign(1e-300) == 1
        assert math_sign(np.float32(-2.5)) == -1

    def test_returns_int(self) -> None:
        assert type(math_sign(2.5)) is int


class TestDoesMapContain:
    def test_dict(self) -> None:
        d = {"kp": 1.0, "kd": 0.1}
        assert does_map_contain(d, "kp")
        assert not does_map_contain(d, "ki")
        assert d == {"kp": 1.0, "kd": 0.1}

    def test_ordered_and_readonly_mappings(self) -> None:
        assert does_map_contain(OrderedDict([(1, "a")]), 1)
        assert not does_map_contain(MappingProxyType({1: "a"}), 2)


class TestMapToRange:
    def test_midpoint(self) -> None:
        assert map_to_range(5, 0, 10, 0, 100) == 50

    def test_inverted_output(self) -> None:
        assert map_to_range(0.25, 0.0, 1.0, 1.0, -1.0) == pytest.approx(0.5)

    def test_extrapolates(self) -> None:
        assert map_to_range(20.0, 0.0, 10.0, 0.0, 1.0) == pytest.approx(2.0)

    def test_array_input(self) -> None:
        out = map_to_range(np.array([0.0, 0.5, 1.0]), 0.0, 1.0, -1.0, 1.0)
        np.testing.assert_allclose(out, [-1.0, 0.0, 1.0])

    def test_empty_input_range(self) -> None:
        assert np.isinf(map_to_range(1.0, 2.0, 2.0, 0.0, 1.0))
        assert np.isnan(map_to_range(2.0, 2.0, 2.0, 0.0, 1.0))
