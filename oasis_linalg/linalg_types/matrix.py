################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix value types.

Coefficients are named by column letter and row subscript: ``vx`` is the
entry in column ``v`` (the second column) and row ``x`` (the first row).
Fields are declared in row-major order.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from oasis_linalg.linalg_types.vector import coerce_float_fields


@dataclass(frozen=True)
class Matrix2:
    """Immutable 2x2 matrix with columns u, v and rows x, y."""

    ux: float
    vx: float
    uy: float
    vy: float

    def __post_init__(self) -> None:
        """Coerce coefficients to float."""
        coerce_float_fields(self)

    def to_array(self) -> np.ndarray:
        """Return the matrix as a float64 array of shape (2, 2)."""
        return np.array(
            [
                [self.ux, self.vx],
                [self.uy, self.vy],
            ],
            dtype=np.float64,
        )


@dataclass(frozen=True)
class Matrix3:
    """Immutable 3x3 matrix with columns u, v, w and rows x, y, z."""

    ux: float
    vx: float
    wx: float
    uy: float
    vy: float
    wy: float
    uz: float
    vz: float
    wz: float

    def __post_init__(self) -> None:
        """Coerce coefficients to float."""
        coerce_float_fields(self)

    def to_array(self) -> np.ndarray:
        """Return the matrix as a float64 array of shape (3, 3)."""
        return np.array(
            [
                [self.ux, self.vx, self.wx],
                [self.uy, self.vy, self.wy],
                [self.uz, self.vz, self.wz],
            ],
            dtype=np.float64,
        )
