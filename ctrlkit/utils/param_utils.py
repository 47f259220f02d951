"""Loading and decoding of YAML parameter files for the control code.

Parameter files hold gains, limits and matrices. Matrices can be written as YAML
nested lists or as bracketed literals like ``"[1, 0, 0, 1]"``. A base file can be
layered with override files, e.g. a robot specific file on top of the defaults.
"""

import os
from typing import Any, Dict

import numpy as np
import numpy.typing as npt
import yaml

from ctrlkit.utils.convert_utils import (
    FloatType,
    check_2d_array_size,
    string_to_matrix,
    string_to_number,
)


def deep_update(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into ``base``.

    Nested dictionaries are merged key by key, any other value is replaced.

    Args:
        base: The dictionary to update. Modified in place.
        override: The values to merge in.

    Returns:
        Dict[str, Any]: The updated ``base``.
    """
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            deep_update(base[k], v)
        else:
            base[k] = v
    return base


def load_params(path: str, *override_paths: str) -> Dict[str, Any]:
    """Load a YAML parameter file and merge optional override files on top.

    Override files that do not exist are skipped.

    Args:
        path: Path to the base parameter file.
        *override_paths: Paths to override files, applied in order.

    Returns:
        Dict[str, Any]: The merged parameters.

    Raises:
        FileNotFoundError: If the base file does not exist.
        ValueError: If a file does not contain a mapping at the top level.
    """
    with open(path, "r") as f:
        params = _as_mapping(yaml.safe_load(f), path)

    for override_path in override_paths:
        if not os.path.exists(override_path):
            continue
        with open(override_path, "r") as f:
            deep_update(params, _as_mapping(yaml.safe_load(f), override_path))

    return params


def _as_mapping(data: Any, path: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def get_param(params: Dict[str, Any], key: str) -> Any:
    """Look up a parameter by dotted path, e.g. ``"gait.swing_height"``.

    Raises:
        KeyError: If any part of the path is missing.
    """
    value: Any = params
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            raise KeyError(f"Parameter '{key}' not found")
        value = value[part]
    return value


def get_scalar_param(params: Dict[str, Any], key: str, dtype: FloatType = float):
    """Read a floating point parameter, written as a number or a numeric string.

    Args:
        params: The loaded parameters.
        key: Dotted path of the parameter.
        dtype: Float type of the result, see ``string_to_number``.

    Returns:
        The parameter value as ``dtype``.

    Raises:
        KeyError: If the parameter is missing.
        ValueError: If the value is not a number.
    """
    value = get_param(params, key)
    if isinstance(value, bool):
        raise ValueError(f"Parameter '{key}' must be a number, got a boolean")
    if isinstance(value, (int, float)):
        value = repr(value)
    if not isinstance(value, str):
        raise ValueError(
            f"Parameter '{key}' must be a number, got {type(value).__name__}"
        )
    return string_to_number(value, dtype)


def get_bool_param(params: Dict[str, Any], key: str) -> bool:
    """Read a boolean parameter. Only YAML booleans are accepted."""
    value = get_param(params, key)
    if not isinstance(value, bool):
        raise ValueError(
            f"Parameter '{key}' must be a boolean, got {type(value).__name__}"
        )
    return value


def get_matrix_param(
    params: Dict[str, Any], key: str, rows: int, cols: int, dtype: FloatType = float
) -> npt.NDArray[np.floating]:
    """Read a matrix parameter of a fixed shape.

    Args:
        params: The loaded parameters.
        key: Dotted path of the parameter.
        rows: Expected number of rows.
        cols: Expected number of columns.
        dtype: Element type of the result.

    Returns:
        np.ndarray: An array of shape (rows, cols).

    Raises:
        KeyError: If the parameter is missing.
        ValueError: If the value is neither a matrix literal nor a nested list of
            the expected shape. Malformed literals raise ``MatrixParseError``.
    """
    value = get_param(params, key)
    if isinstance(value, str):
        return string_to_matrix(value, rows, cols, dtype)

    if (
        not isinstance(value, list)
        or not all(isinstance(row, list) for row in value)
        or any(isinstance(v, list) for row in value for v in row)
    ):
        raise ValueError(f"Parameter '{key}' must be a matrix literal or nested list")
    if not check_2d_array_size(value, rows, cols):
        raise ValueError(f"Parameter '{key}' must have shape ({rows}, {cols})")
    return np.array(value, dtype=dtype)


def get_vector_param(
    params: Dict[str, Any], key: str, size: int, dtype: FloatType = float
) -> npt.NDArray[np.floating]:
    """Read a vector parameter of a fixed size from a literal or a flat list."""
    value = get_param(params, key)
    if isinstance(value, str):
        return string_to_matrix(value, 1, size, dtype).reshape(size)

    if (
        not isinstance(value, list)
        or any(isinstance(v, list) for v in value)
        or not check_2d_array_size([value], 1, size)
    ):
        raise ValueError(f"Parameter '{key}' must be a list of {size} values")
    return np.array(value, dtype=dtype)
