"""Numeric and comparison utilities shared by the robot control code.

Provides tolerance-based equality, range clamping, deadband filtering, sign
extraction, container membership and linear range mapping. Every function is
pure except ``matrix_apply_deadband``, which filters an array in place.
"""

from typing import Any, Hashable, Mapping, Optional, Sequence, TypeVar

import numpy as np
import numpy.typing as npt

T = TypeVar("T", int, float, np.floating, np.integer)


def is_numbers_equal(a: T, b: T, tol: T) -> bool:
    """Check whether two numbers are equal within an absolute tolerance.

    Args:
        a: First value.
        b: Second value.
        tol: Inclusive tolerance. Not validated; a negative tolerance never matches.

    Returns:
        bool: True if ``|a - b| <= tol``.
    """
    return abs(a - b) <= tol


def is_vector_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Check whether two sequences are equal element by element.

    Elements are compared with ``==``, no tolerance is applied.

    Args:
        a: First sequence.
        b: Second sequence.

    Returns:
        bool: True if both have the same length and all elements compare equal.
    """
    if len(a) != len(b):
        return False
    for i in range(len(a)):
        if a[i] != b[i]:
            return False
    return True


def wrap_range(target: T, min_value: T, max_value: T) -> T:
    """Clamp a value into the inclusive range [min_value, max_value].

    Args:
        target: The input value.
        min_value: Lower bound of the range.
        max_value: Upper bound of the range, must not be below ``min_value``.

    Returns:
        The clamped value.
    """
    assert min_value <= max_value, f"Invalid range [{min_value}, {max_value}]"
    result = target
    if result < min_value:
        result = min_value
    if max_value < result:
        result = max_value
    return result


def apply_deadband(
    x: T,
    band: T,
    min_value: Optional[T] = None,
    max_value: Optional[T] = None,
) -> T:
    """Zero out a value that lies inside a symmetric band around zero.

    When both bounds are given, the result is clamped into [min_value, max_value]
    after the deadband is applied.

    Args:
        x: The input value.
        band: Half width of the deadband. Values in (-band, band) become zero.
        min_value: Optional lower bound for the output.
        max_value: Optional upper bound for the output.

    Returns:
        The filtered (and optionally clamped) value.

    Raises:
        ValueError: If only one of ``min_value`` and ``max_value`` is given.
    """
    if (min_value is None) != (max_value is None):
        raise ValueError("min_value and max_value must be given together")

    if x < band and x > -band:
        x = type(x)(0)

    if min_value is None:
        return x

    return min(max(x, min_value), max_value)


def matrix_apply_deadband(matrix: npt.NDArray[Any], band: float) -> None:
    """Apply the deadband to every element of an array, in place.

    Args:
        matrix: The array to filter. Modified in place.
        band: Half width of the deadband.
    """
    mask = (matrix < band) & (matrix > -band)
    matrix[mask] = 0


def math_sign(val: T) -> int:
    """Get the sign of a number.

    Args:
        val: The input value.

    Returns:
        int: 1 for positive, -1 for negative and 0 for zero (or NaN).
    """
    return int(val > 0) - int(val < 0)


def does_map_contain(container: Mapping[Hashable, Any], key: Hashable) -> bool:
    """Check whether a mapping contains the given key.

    Args:
        container: The mapping to query. Not modified.
        key: The key to look for.

    Returns:
        bool: True if ``key`` is present.
    """
    return key in container


def map_to_range(
    x: npt.ArrayLike,
    input_min: float,
    input_max: float,
    output_min: float,
    output_max: float,
):
    """Linearly map a value from [input_min, input_max] to [output_min, output_max].

    Values outside the input range are extrapolated, not clamped. An empty input
    range (``input_min == input_max``) gives inf or nan rather than raising.

    Args:
        x: The value (or array of values) to map.
        input_min: Start of the input range.
        input_max: End of the input range.
        output_min: Start of the output range.
        output_max: End of the output range.

    Returns:
        np.float64 | np.ndarray: The mapped value.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return output_min + np.subtract(x, input_min) * (
            output_max - output_min
        ) / np.subtract(input_max, input_min, dtype=np.float64)
