"""Conversion utilities between numbers, strings and matrices.

Covers float formatting and parsing, bracketed matrix literals such as
``"[1, 0, 0, 1]"`` used in parameter files, printf-style formatting and size
checks for nested lists.
"""

import math
from typing import Any, Sequence, Type, Union

import numpy as np
import numpy.typing as npt

FloatLike = Union[float, np.floating]
FloatType = Union[Type[float], Type[np.float64], Type[np.float32]]

_FLOAT_TYPES = (float, np.float64, np.float32)


class MatrixParseError(ValueError):
    """Raised when a matrix literal does not match the expected layout."""


def number_to_string(number: FloatLike) -> str:
    """Convert a floating point number to a string.

    Uses the general ``%g`` format, so very small or very large magnitudes switch
    to scientific notation instead of being truncated.

    Args:
        number: A floating point value.

    Returns:
        str: The formatted number.

    Raises:
        TypeError: If ``number`` is not a floating point value.
    """
    if not isinstance(number, (float, np.floating)):
        raise TypeError(
            f"number_to_string must use a floating point type, got {type(number).__name__}"
        )
    return "%g" % number


def bool_to_string(b: bool) -> str:
    """Convert a boolean to ``"true"`` or ``"false"``."""
    return "true" if b else "false"


def string_to_number(text: str, dtype: FloatType = float) -> FloatLike:
    """Convert a string to a double or single precision float.

    Args:
        text: The text to parse. Surrounding whitespace is ignored.
        dtype: ``float`` or ``np.float64`` for double precision, ``np.float32`` for single.

    Returns:
        The parsed value as ``dtype``.

    Raises:
        TypeError: If ``dtype`` is not a supported float type.
        ValueError: If ``text`` is not a valid number or is out of range for ``dtype``.
    """
    if not any(dtype is t for t in _FLOAT_TYPES):
        raise TypeError(f"string_to_number only works for double/float, got {dtype}")

    value = float(text)
    spelled_inf = text.strip().lstrip("+-").lower() in ("inf", "infinity")
    if math.isinf(value) and not spelled_inf:
        raise ValueError(f"{text!r} is out of range for double")
    if dtype is float:
        return value

    try:
        with np.errstate(over="raise"):
            result = dtype(value)
    except FloatingPointError as e:
        raise ValueError(f"{text!r} is out of range for {dtype.__name__}") from e
    if np.isinf(result) and not spelled_inf:
        raise ValueError(f"{text!r} is out of range for {dtype.__name__}")
    return result


def string_to_matrix(
    text: str, rows: int, cols: int, dtype: FloatType = float
) -> npt.NDArray[np.floating]:
    """Parse a bracketed, comma separated matrix literal written in row-major order.

    The literal must hold exactly ``rows * cols`` numbers, e.g. ``"[1, 2, 3, 4]"``
    for a 2x2 matrix. Spaces are allowed around the brackets and the numbers.

    Args:
        text: The matrix literal.
        rows: Number of rows of the result.
        cols: Number of columns of the result.
        dtype: Element type, see ``string_to_number``.

    Returns:
        np.ndarray: An array of shape (rows, cols).

    Raises:
        ValueError: If ``rows`` or ``cols`` is not positive.
        MatrixParseError: If the text is not a literal of ``rows * cols`` numbers.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Matrix shape must be positive, got ({rows}, {cols})")

    values = []
    count = rows * cols
    end = len(text)
    pos = 0

    # skip-space
    while pos < end and text[pos] == " ":
        pos += 1

    # expect-open-bracket
    if pos >= end or text[pos] != "[":
        raise MatrixParseError("string_to_matrix didn't find open bracket")
    pos += 1

    for i in range(count):
        while pos < end and text[pos] == " ":
            pos += 1

        # scan-number
        start = pos
        while pos < end and text[pos] not in ",]":
            pos += 1
        if pos >= end:
            raise MatrixParseError(
                f"Unexpected end of matrix literal after {i} of {count} values"
            )

        token = text[start:pos]
        if not token.strip():
            raise MatrixParseError(f"Empty value at position {start}")
        try:
            values.append(string_to_number(token, dtype))
        except ValueError as e:
            raise MatrixParseError(f"Invalid value {token!r} at position {start}") from e

        # expect-separator
        last = i == count - 1
        if text[pos] == "]" and not last:
            raise MatrixParseError(f"Expected {count} values, got {i + 1}")
        if text[pos] == "," and last:
            raise MatrixParseError(f"Expected {count} values, got more")
        pos += 1

    if text[pos:].strip(" "):
        raise MatrixParseError(f"Unexpected trailing characters {text[pos:]!r}")

    return np.array(values, dtype=dtype).reshape(rows, cols)


def string_format(fmt: str, *args: Any) -> str:
    """Format a string printf style.

    Uses Python's ``%`` operator. Unlike C's snprintf, surplus arguments are an
    error rather than being ignored, so ``string_format("%d", 1, 2)`` raises.

    Args:
        fmt: The format string, e.g. ``"%d-%d"``.
        *args: Values for the conversion specifiers.

    Returns:
        str: The formatted string.

    Raises:
        RuntimeError: If the arguments do not match the format.
    """
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as e:
        raise RuntimeError("Error during formatting.") from e


def check_2d_array_size(arr: Sequence[Sequence[Any]], rows: int, cols: int) -> bool:
    """Check that a nested sequence has exactly ``rows`` rows of ``cols`` items each."""
    if len(arr) != rows:
        return False
    for row in arr:
        if len(row) != cols:
            return False
    return True


def matrix_to_string(matrix: npt.ArrayLike) -> str:
    """Convert a vector or matrix to an aligned, human readable string.

    Each element is formatted with ``%g`` and right aligned to the widest element.
    A 1D input is printed as a column vector.

    Args:
        matrix: A 1D or 2D array.

    Returns:
        str: One line per row, elements separated by a space.
    """
    array = np.asarray(matrix)
    if array.ndim == 1:
        array = array[:, None]
    elif array.ndim != 2:
        raise ValueError(f"Expected a 1D or 2D array, got {array.ndim} dimensions")

    cells = [["%g" % value for value in row] for row in array]
    width = max((len(cell) for row in cells for cell in row), default=0)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)
