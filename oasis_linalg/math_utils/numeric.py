################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Scalar helpers shared by the vector and matrix operations."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np


def is_real(value: Any) -> bool:
    """Return True for real scalars, including numpy floating types.

    Booleans are excluded even though ``bool`` registers as ``numbers.Real``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def has_real_fields(value: Any, names: tuple[str, ...]) -> bool:
    """Return True when every named attribute exists and holds a real."""
    for name in names:
        if not hasattr(value, name):
            return False
        if not is_real(getattr(value, name)):
            return False
    return True


def reciprocal(value: float) -> float:
    """Return 1 / value, yielding inf or NaN instead of raising on zero."""
    with np.errstate(divide="ignore", invalid="ignore"):
        result: np.float64 = np.divide(np.float64(1.0), np.float64(value))
    return float(result)
