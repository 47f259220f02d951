"""Utility modules for ctrlkit.

This package contains:
- Numeric and comparison helpers (math_utils)
- Number, string and matrix conversions (convert_utils)
- YAML parameter loading (param_utils)
"""

from ctrlkit.utils.convert_utils import (
    MatrixParseError,
    bool_to_string,
    check_2d_array_size,
    matrix_to_string,
    number_to_string,
    string_format,
    string_to_matrix,
    string_to_number,
)
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

__all__ = [
    "MatrixParseError",
    "apply_deadband",
    "bool_to_string",
    "check_2d_array_size",
    "does_map_contain",
    "is_numbers_equal",
    "is_vector_equal",
    "map_to_range",
    "math_sign",
    "matrix_apply_deadband",
    "matrix_to_string",
    "number_to_string",
    "string_format",
    "string_to_matrix",
    "string_to_number",
    "wrap_range",
]
