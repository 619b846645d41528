################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for array-like construction input."""

from __future__ import annotations

from typing import Any

import numpy as np

from oasis_linalg.math_utils.linalg_errors import InvalidInputError


def as_float_array(values: Any, name: str) -> np.ndarray:
    """Return values as a float64 array, rejecting non-numeric input."""
    try:
        array: np.ndarray = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must contain only numbers") from exc
    return array


def flatten_coefficients(values: Any, count: int, name: str) -> np.ndarray:
    """Return the first ``count`` row-major coefficients of array-like input.

    Nested input is flattened in row-major order. Extra elements beyond
    ``count`` are ignored. Non-finite values are passed through unchanged.
    """
    array: np.ndarray = as_float_array(values, name).ravel()
    if array.size < count:
        raise InvalidInputError(
            f"{name} must have at least {count} elements, got {array.size}"
        )
    return array[:count]


def reshape_matrix(values: Any, shape: tuple[int, int], name: str) -> np.ndarray:
    """Return a matrix with exactly the target shape."""
    array: np.ndarray = as_float_array(values, name)
    if array.shape != shape:
        raise InvalidInputError(f"{name} must have shape {shape}")
    return array


def reshape_vector(values: Any, size: int, name: str) -> np.ndarray:
    """Return a vector with exactly ``size`` elements."""
    array: np.ndarray = as_float_array(values, name)
    if array.shape != (size,):
        raise InvalidInputError(f"{name} must have shape ({size},)")
    return array
