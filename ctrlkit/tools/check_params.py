"""Check a YAML parameter file by decoding the requested matrices and vectors.

Example:
    python -m ctrlkit.tools.check_params params/default.yml \\
        --override params/robot.yml --matrix kp 3x3 --vector joint_offsets 12
"""

import argparse
from typing import List, Optional, Tuple

from ctrlkit.utils.convert_utils import bool_to_string, matrix_to_string
from ctrlkit.utils.param_utils import (
    get_matrix_param,
    get_vector_param,
    load_params,
)


def parse_shape(shape: str) -> Tuple[int, int]:
    """Parse a shape written as ``ROWSxCOLS``, e.g. ``3x3``."""
    parts = shape.lower().split("x")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise argparse.ArgumentTypeError(f"Invalid shape '{shape}', expected ROWSxCOLS")
    return int(parts[0]), int(parts[1])


def main(argv: Optional[List[str]] = None):
    """Load the parameter files and print the decoded values."""
    parser = argparse.ArgumentParser(description="Check a parameter file.")
    parser.add_argument("config", type=str, help="Path to the base parameter file.")
    parser.add_argument(
        "--override",
        type=str,
        nargs="+",
        default=[],
        help="Override files merged on top of the base file, in order.",
    )
    parser.add_argument(
        "--matrix",
        type=str,
        nargs=2,
        action="append",
        default=[],
        metavar=("KEY", "SHAPE"),
        help="A matrix parameter to decode, with its shape as ROWSxCOLS.",
    )
    parser.add_argument(
        "--vector",
        type=str,
        nargs=2,
        action="append",
        default=[],
        metavar=("KEY", "SIZE"),
        help="A vector parameter to decode, with its size.",
    )
    args = parser.parse_args(argv)

    try:
        matrices = [(key, *parse_shape(shape)) for key, shape in args.matrix]
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    vectors = []
    for key, size in args.vector:
        if not size.isdigit():
            parser.error(f"Invalid size '{size}' for vector '{key}'")
        vectors.append((key, int(size)))

    params = load_params(args.config, *args.override)
    print(f"Loaded {len(params)} parameters from {args.config}")
    for key, value in params.items():
        if isinstance(value, bool):
            value = bool_to_string(value)
        print(f"  {key}: {value}")

    for key, rows, cols in matrices:
        matrix = get_matrix_param(params, key, rows, cols)
        print(f"{key} ({rows}x{cols}):")
        print(matrix_to_string(matrix))

    for key, size in vectors:
        vector = get_vector_param(params, key, size)
        print(f"{key} ({size}):")
        print(matrix_to_string(vector))


if __name__ == "__main__":
    main()
