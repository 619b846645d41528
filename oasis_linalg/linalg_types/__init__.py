################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Value types for 2D/3D vectors and 2x2/3x3 matrices."""

from __future__ import annotations

from oasis_linalg.linalg_types.matrix import Matrix2
from oasis_linalg.linalg_types.matrix import Matrix3
from oasis_linalg.linalg_types.vector import Vector2
from oasis_linalg.linalg_types.vector import Vector3


__all__ = [
    "Matrix2",
    "Matrix3",
    "Vector2",
    "Vector3",
]
