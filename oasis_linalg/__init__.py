################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Small 2D/3D vector and 2x2/3x3 matrix toolkit."""

from oasis_linalg.config import LinalgParams
from oasis_linalg.config import LinalgParamsError
from oasis_linalg.linalg_types import Matrix2
from oasis_linalg.linalg_types import Matrix3
from oasis_linalg.linalg_types import Vector2
from oasis_linalg.linalg_types import Vector3
from oasis_linalg.math_utils import InvalidInputError
from oasis_linalg.math_utils import LinalgError
from oasis_linalg.math_utils import Mat2
from oasis_linalg.math_utils import Mat3
from oasis_linalg.math_utils import NotInvertibleError
from oasis_linalg.math_utils import Vec2
from oasis_linalg.math_utils import Vec3


__all__ = [
    "InvalidInputError",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Mat2",
    "Mat3",
    "Matrix2",
    "Matrix3",
    "NotInvertibleError",
    "Vec2",
    "Vec3",
    "Vector2",
    "Vector3",
]
