################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Matrix utilities for 2x2 matrices.

Coefficient ``ab`` lies in column ``a`` (u or v) and row ``b`` (x or y):

    | ux  vx |
    | uy  vy |
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional

import numpy as np

from oasis_linalg.config.linalg_params import CLOSE_ATOL
from oasis_linalg.config.linalg_params import CLOSE_RTOL
from oasis_linalg.config.linalg_params import DEFAULT_PARAMS
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.linalg_types.matrix import Matrix2
from oasis_linalg.linalg_types.vector import Vector2
from oasis_linalg.math_utils.linalg_errors import InvalidInputError
from oasis_linalg.math_utils.linalg_errors import NotInvertibleError
from oasis_linalg.math_utils.numeric import has_real_fields
from oasis_linalg.math_utils.numeric import is_real
from oasis_linalg.math_utils.numeric import reciprocal
from oasis_linalg.math_utils.validation import flatten_coefficients
from oasis_linalg.math_utils.validation import reshape_matrix
from oasis_linalg.math_utils.vec import Vec2


_LOG: logging.Logger = logging.getLogger(__name__)


class Mat2:
    """Matrix utilities for 2x2 matrices."""

    IDENTITY: Matrix2 = Matrix2(ux=1.0, vx=0.0, uy=0.0, vy=1.0)

    @staticmethod
    def is_matrix2(value: Any) -> bool:
        """Return True when all four coefficients are present and real."""
        return has_real_fields(value, ("ux", "vx", "uy", "vy"))

    @staticmethod
    def from_sequence(values: Any) -> Matrix2:
        """Return a matrix from row-major coefficients ``[ux, vx, uy, vy]``.

        Raises:
            InvalidInputError: If fewer than four numbers are supplied
        """
        coeffs: np.ndarray = flatten_coefficients(values, 4, "values")
        return Matrix2(*coeffs)

    @staticmethod
    def from_columns(u: Any, v: Any) -> Matrix2:
        """Return the matrix whose columns are ``u`` and ``v``."""
        return Matrix2(ux=u.x, vx=v.x, uy=u.y, vy=v.y)

    @staticmethod
    def from_array(values: Any) -> Matrix2:
        """Return a matrix from an array-like of shape (2, 2)."""
        array: np.ndarray = reshape_matrix(values, (2, 2), "values")
        return Matrix2(*array.ravel())

    @staticmethod
    def new(u: Any, v: Optional[Any] = None) -> Matrix2:
        """Construct a matrix from two column vectors or a coefficient list.

        Raises:
            InvalidInputError: If the arguments match neither form
        """
        if Vec2.is_vector2(u):
            if v is None or not Vec2.is_vector2(v):
                raise InvalidInputError("Both column vectors are required")
            return Mat2.from_columns(u, v)
        if v is not None:
            raise InvalidInputError("Invalid input values for matrix construction")
        return Mat2.from_sequence(u)

    @staticmethod
    def to_array(m: Any) -> np.ndarray:
        """Return a float64 array of shape (2, 2)."""
        return np.array([[m.ux, m.vx], [m.uy, m.vy]], dtype=np.float64)

    @staticmethod
    def col1(m: Any) -> Vector2:
        return Vector2(m.ux, m.uy)

    @staticmethod
    def col2(m: Any) -> Vector2:
        return Vector2(m.vx, m.vy)

    @staticmethod
    def row1(m: Any) -> Vector2:
        return Vector2(m.ux, m.vx)

    @staticmethod
    def row2(m: Any) -> Vector2:
        return Vector2(m.uy, m.vy)

    @staticmethod
    def mul_scalar(m: Any, s: float) -> Matrix2:
        """Return the matrix with every coefficient scaled by ``s``."""
        return Matrix2(ux=m.ux * s, vx=m.vx * s, uy=m.uy * s, vy=m.vy * s)

    @staticmethod
    def mul_vector(m: Any, v: Any) -> Vector2:
        """Return the matrix/vector product ``m * v``."""
        return Vector2(
            Vec2.dot(Mat2.row1(m), v),
            Vec2.dot(Mat2.row2(m), v),
        )

    @staticmethod
    def mul_matrix(m: Any, n: Any) -> Matrix2:
        """Return the matrix product ``m * n``."""
        r1: Vector2 = Mat2.row1(m)
        r2: Vector2 = Mat2.row2(m)
        c1: Vector2 = Mat2.col1(n)
        c2: Vector2 = Mat2.col2(n)
        return Matrix2(
            ux=Vec2.dot(r1, c1),
            vx=Vec2.dot(r1, c2),
            uy=Vec2.dot(r2, c1),
            vy=Vec2.dot(r2, c2),
        )

    @staticmethod
    def mul(m: Any, t: Any) -> Any:
        """Multiply a matrix by a matrix, a vector or a scalar.

        The operand kind is resolved structurally, matrices first.

        Raises:
            TypeError: If ``t`` is none of the supported operand kinds
        """
        if Mat2.is_matrix2(t):
            return Mat2.mul_matrix(m, t)
        if Vec2.is_vector2(t):
            return Mat2.mul_vector(m, t)
        if is_real(t):
            return Mat2.mul_scalar(m, t)
        raise TypeError(f"Cannot multiply Matrix2 by {type(t).__name__}")

    @staticmethod
    def trace(m: Any) -> float:
        return m.ux + m.vy

    @staticmethod
    def determinant(m: Any) -> float:
        return m.ux * m.vy - m.vx * m.uy

    @staticmethod
    def transpose(m: Any) -> Matrix2:
        return Matrix2(ux=m.ux, vx=m.uy, uy=m.vx, vy=m.vy)

    @staticmethod
    def cofactor(m: Any) -> Matrix2:
        """Return the signed minor matrix."""
        return Matrix2(ux=m.vy, vx=-m.uy, uy=-m.vx, vy=m.ux)

    @staticmethod
    def adjugate(m: Any) -> Matrix2:
        """Return the adjugate, the transpose of the cofactor matrix."""
        return Matrix2(ux=m.vy, vx=-m.vx, uy=-m.uy, vy=m.ux)

    @staticmethod
    def inverse(m: Any, params: Optional[LinalgParams] = None) -> Matrix2:
        """Return the inverse as the adjugate over the determinant.

        Only a determinant of exactly zero is rejected unless
        ``params.singular_det_tol`` widens the band. Near-singular matrices
        produce large coefficients.

        Raises:
            NotInvertibleError: If the determinant is zero
        """
        tol: float = (params or DEFAULT_PARAMS).singular_det_tol
        det: float = Mat2.determinant(m)
        if abs(det) <= tol:
            _LOG.debug("Rejecting inverse of singular 2x2 matrix, det=%s", det)
            raise NotInvertibleError("Matrix is not invertible")
        return Mat2.mul_scalar(Mat2.adjugate(m), reciprocal(det))

    @staticmethod
    def equals(m: Any, n: Any) -> bool:
        """Return True when all coefficients compare exactly equal."""
        return bool(np.array_equal(Mat2.to_array(m), Mat2.to_array(n)))

    @staticmethod
    def is_close(
        m: Any,
        n: Any,
        atol: float = CLOSE_ATOL,
        rtol: float = CLOSE_RTOL,
    ) -> bool:
        """Return True when all coefficients agree within tolerance."""
        return bool(
            np.allclose(Mat2.to_array(m), Mat2.to_array(n), atol=atol, rtol=rtol)
        )
