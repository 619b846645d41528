################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Matrix utilities for 3x3 matrices.

Coefficient ``ab`` lies in column ``a`` (u, v or w) and row ``b`` (x, y or
z):

    | ux  vx  wx |
    | uy  vy  wy |
    | uz  vz  wz |
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
from oasis_linalg.linalg_types.matrix import Matrix3
from oasis_linalg.linalg_types.vector import Vector3
from oasis_linalg.math_utils.linalg_errors import InvalidInputError
from oasis_linalg.math_utils.linalg_errors import NotInvertibleError
from oasis_linalg.math_utils.numeric import has_real_fields
from oasis_linalg.math_utils.numeric import is_real
from oasis_linalg.math_utils.numeric import reciprocal
from oasis_linalg.math_utils.validation import flatten_coefficients
from oasis_linalg.math_utils.validation import reshape_matrix
from oasis_linalg.math_utils.vec import Vec3


_LOG: logging.Logger = logging.getLogger(__name__)


class Mat3:
    """Matrix utilities for 3x3 matrices."""

    IDENTITY: Matrix3 = Matrix3(
        ux=1.0,
        vx=0.0,
        wx=0.0,
        uy=0.0,
        vy=1.0,
        wy=0.0,
        uz=0.0,
        vz=0.0,
        wz=1.0,
    )

    @staticmethod
    def is_matrix3(value: Any) -> bool:
        """Return True when all nine coefficients are present and real."""
        return has_real_fields(
            value, ("ux", "vx", "wx", "uy", "vy", "wy", "uz", "vz", "wz")
        )

    @staticmethod
    def from_sequence(values: Any) -> Matrix3:
        """Return a matrix from nine row-major coefficients.

        Raises:
            InvalidInputError: If fewer than nine numbers are supplied
        """
        coeffs: np.ndarray = flatten_coefficients(values, 9, "values")
        return Matrix3(*coeffs)

    @staticmethod
    def from_columns(u: Any, v: Any, w: Any) -> Matrix3:
        """Return the matrix whose columns are ``u``, ``v`` and ``w``."""
        return Matrix3(
            ux=u.x,
            vx=v.x,
            wx=w.x,
            uy=u.y,
            vy=v.y,
            wy=w.y,
            uz=u.z,
            vz=v.z,
            wz=w.z,
        )

    @staticmethod
    def from_array(values: Any) -> Matrix3:
        """Return a matrix from an array-like of shape (3, 3)."""
        array: np.ndarray = reshape_matrix(values, (3, 3), "values")
        return Matrix3(*array.ravel())

    @staticmethod
    def new(u: Any, v: Optional[Any] = None, w: Optional[Any] = None) -> Matrix3:
        """Construct a matrix from three column vectors or a coefficient list.

        Raises:
            InvalidInputError: If the arguments match neither form
        """
        if Vec3.is_vector3(u):
            if not (Vec3.is_vector3(v) and Vec3.is_vector3(w)):
                raise InvalidInputError("All three column vectors are required")
            return Mat3.from_columns(u, v, w)
        if v is not None or w is not None:
            raise InvalidInputError("Invalid input values for matrix construction")
        return Mat3.from_sequence(u)

    @staticmethod
    def to_array(m: Any) -> np.ndarray:
        """Return a float64 array of shape (3, 3)."""
        return np.array(
            [
                [m.ux, m.vx, m.wx],
                [m.uy, m.vy, m.wy],
                [m.uz, m.vz, m.wz],
            ],
            dtype=np.float64,
        )

    @staticmethod
    def col1(m: Any) -> Vector3:
        return Vector3(m.ux, m.uy, m.uz)

    @staticmethod
    def col2(m: Any) -> Vector3:
        return Vector3(m.vx, m.vy, m.vz)

    @staticmethod
    def col3(m: Any) -> Vector3:
        return Vector3(m.wx, m.wy, m.wz)

    @staticmethod
    def row1(m: Any) -> Vector3:
        return Vector3(m.ux, m.vx, m.wx)

    @staticmethod
    def row2(m: Any) -> Vector3:
        return Vector3(m.uy, m.vy, m.wy)

    @staticmethod
    def row3(m: Any) -> Vector3:
        return Vector3(m.uz, m.vz, m.wz)

    @staticmethod
    def mul_scalar(m: Any, s: float) -> Matrix3:
        """Return the matrix with every coefficient scaled by ``s``."""
        return Matrix3(
            ux=m.ux * s,
            vx=m.vx * s,
            wx=m.wx * s,
            uy=m.uy * s,
            vy=m.vy * s,
            wy=m.wy * s,
            uz=m.uz * s,
            vz=m.vz * s,
            wz=m.wz * s,
        )

    @staticmethod
    def mul_vector(m: Any, v: Any) -> Vector3:
        """Return the matrix/vector product ``m * v``."""
        return Vector3(
            Vec3.dot(Mat3.row1(m), v),
            Vec3.dot(Mat3.row2(m), v),
            Vec3.dot(Mat3.row3(m), v),
        )

    @staticmethod
    def mul_matrix(m: Any, n: Any) -> Matrix3:
        """Return the matrix product ``m * n``."""
        r1: Vector3 = Mat3.row1(m)
        r2: Vector3 = Mat3.row2(m)
        r3: Vector3 = Mat3.row3(m)
        c1: Vector3 = Mat3.col1(n)
        c2: Vector3 = Mat3.col2(n)
        c3: Vector3 = Mat3.col3(n)
        return Matrix3(
            ux=Vec3.dot(r1, c1),
            vx=Vec3.dot(r1, c2),
            wx=Vec3.dot(r1, c3),
            uy=Vec3.dot(r2, c1),
            vy=Vec3.dot(r2, c2),
            wy=Vec3.dot(r2, c3),
            uz=Vec3.dot(r3, c1),
            vz=Vec3.dot(r3, c2),
            wz=Vec3.dot(r3, c3),
        )

    @staticmethod
    def mul(m: Any, t: Any) -> Any:
        """Multiply a matrix by a matrix, a vector or a scalar.

        The operand kind is resolved structurally, matrices first.

        Raises:
            TypeError: If ``t`` is none of the supported operand kinds
        """
        if Mat3.is_matrix3(t):
            return Mat3.mul_matrix(m, t)
        if Vec3.is_vector3(t):
            return Mat3.mul_vector(m, t)
        if is_real(t):
            return Mat3.mul_scalar(m, t)
        raise TypeError(f"Cannot multiply Matrix3 by {type(t).__name__}")

    @staticmethod
    def trace(m: Any) -> float:
        return m.ux + m.vy + m.wz

    @staticmethod
    def determinant(m: Any) -> float:
        """Return the determinant by 3x3 cofactor expansion."""
        return (
            m.ux * m.vy * m.wz
            + m.uy * m.vz * m.wx
            + m.uz * m.vx * m.wy
            - m.wx * m.vy * m.uz
            - m.wy * m.vz * m.ux
            - m.wz * m.vx * m.uy
        )

    @staticmethod
    def transpose(m: Any) -> Matrix3:
        return Matrix3(
            ux=m.ux,
            vx=m.uy,
            wx=m.uz,
            uy=m.vx,
            vy=m.vy,
            wy=m.vz,
            uz=m.wx,
            vz=m.wy,
            wz=m.wz,
        )

    @staticmethod
    def cofactor(m: Any) -> Matrix3:
        """Return the signed minor matrix.

        Each entry is ``(-1)^(i+j)`` times the determinant of the 2x2
        submatrix left after deleting row i and column j.
        """
        return Matrix3(
            ux=m.vy * m.wz - m.wy * m.vz,
            vx=m.wy * m.uz - m.uy * m.wz,
            wx=m.uy * m.vz - m.vy * m.uz,
            uy=m.wx * m.vz - m.vx * m.wz,
            vy=m.ux * m.wz - m.wx * m.uz,
            wy=m.vx * m.uz - m.ux * m.vz,
            uz=m.vx * m.wy - m.wx * m.vy,
            vz=m.wx * m.uy - m.ux * m.wy,
            wz=m.ux * m.vy - m.vx * m.uy,
        )

    @staticmethod
    def adjugate(m: Any) -> Matrix3:
        """Return the adjugate, the transpose of the cofactor matrix."""
        return Mat3.transpose(Mat3.cofactor(m))

    @staticmethod
    def inverse(m: Any, params: Optional[LinalgParams] = None) -> Matrix3:
        """Return the inverse as the adjugate over the determinant.

        Only a determinant of exactly zero is rejected unless
        ``params.singular_det_tol`` widens the band. Near-singular matrices
        produce large coefficients.

        Raises:
            NotInvertibleError: If the determinant is zero
        """
        tol: float = (params or DEFAULT_PARAMS).singular_det_tol
        det: float = Mat3.determinant(m)
        if abs(det) <= tol:
            _LOG.debug("Rejecting inverse of singular 3x3 matrix, det=%s", det)
            raise NotInvertibleError("Matrix is not invertible")
        return Mat3.mul_scalar(Mat3.adjugate(m), reciprocal(det))

    @staticmethod
    def build_tnb(n: Any, params: Optional[LinalgParams] = None) -> Matrix3:
        """Build a tangent/normal/binormal basis around a normal vector.

        The tangent is the horizontal direction ``(n.z, 0, -n.x)``,
        normalized, and the binormal is ``n x tangent``. When ``n`` is the
        vertical axis that tangent vanishes, so the configured fallback
        (west by default) is used instead.

        Args:
            n: Normal vector, typically unit length
            params: Pole tolerance and fallback tangent; defaults when None

        Returns:
            Matrix with columns (tangent, normal, binormal)
        """
        settings: LinalgParams = params or DEFAULT_PARAMS
        u: Vector3
        if abs(abs(n.y) - 1.0) <= settings.pole_tol:
            _LOG.debug("Normal %s lies on the vertical axis, using fallback", n)
            fallback: Vector3 = Vec3.from_array(settings.pole_fallback)
            # Remove the component along n so the basis stays orthonormal
            u = Vec3.normalize(
                Vec3.sub(fallback, Vec3.scale(n, Vec3.dot(fallback, n)))
            )
        else:
            u = Vec3.normalize(Vector3(n.z, 0.0, -n.x))
        w: Vector3 = Vec3.cross(n, u)
        return Mat3.from_columns(u, n, w)

    @staticmethod
    def equals(m: Any, n: Any) -> bool:
        """Return True when all coefficients compare exactly equal."""
        return bool(np.array_equal(Mat3.to_array(m), Mat3.to_array(n)))

    @staticmethod
    def is_close(
        m: Any,
        n: Any,
        atol: float = CLOSE_ATOL,
        rtol: float = CLOSE_RTOL,
    ) -> bool:
        """Return True when all coefficients agree within tolerance."""
        return bool(
            np.allclose(Mat3.to_array(m), Mat3.to_array(n), atol=atol, rtol=rtol)
        )
