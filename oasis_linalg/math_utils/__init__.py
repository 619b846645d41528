################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Vector and matrix operations."""

from oasis_linalg.math_utils.linalg_errors import InvalidInputError
from oasis_linalg.math_utils.linalg_errors import LinalgError
from oasis_linalg.math_utils.linalg_errors import NotInvertibleError
from oasis_linalg.math_utils.mat2 import Mat2
from oasis_linalg.math_utils.mat3 import Mat3
from oasis_linalg.math_utils.vec import Vec2
from oasis_linalg.math_utils.vec import Vec3


__all__ = [
    "InvalidInputError",
    "LinalgError",
    "Mat2",
    "Mat3",
    "NotInvertibleError",
    "Vec2",
    "Vec3",
]
