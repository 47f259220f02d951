"""ctrlkit: shared helpers for robot control code.

This package provides:
- Numeric and comparison utilities (tolerance equality, clamping, deadband, sign)
- Conversions between numbers, strings and matrices
- Loading of YAML parameter files with matrix literals

All numeric and conversion helpers are pure functions without global state.
"""
