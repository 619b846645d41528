################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for 2x2 matrix utilities."""

from __future__ import annotations

import dataclasses
import logging
from types import SimpleNamespace

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.linalg_types.matrix import Matrix2
from oasis_linalg.linalg_types.vector import Vector2
from oasis_linalg.math_utils.linalg_errors import InvalidInputError
from oasis_linalg.math_utils.linalg_errors import LinalgError
from oasis_linalg.math_utils.linalg_errors import NotInvertibleError
from oasis_linalg.math_utils.mat2 import Mat2


def _random_matrix2(rng: np.random.Generator) -> Matrix2:
    values: NDArray[np.float64] = rng.uniform(-5.0, 5.0, size=4)
    return Mat2.from_sequence(values)


def test_from_sequence_row_major() -> None:
    """Flat input should be read as [ux, vx, uy, vy]."""
    mat: Matrix2 = Mat2.from_sequence([1, 2, 3, 4])
    assert mat == Matrix2(ux=1.0, vx=2.0, uy=3.0, vy=4.0)


def test_from_sequence_accepts_arrays_and_extra_elements() -> None:
    """Nested, numpy and over-long input should all be accepted."""
    expected: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.from_sequence([[1, 2], [3, 4]]) == expected
    assert Mat2.from_sequence(np.array([1.0, 2.0, 3.0, 4.0])) == expected
    assert Mat2.from_sequence((1, 2, 3, 4, 5, 6)) == expected


@pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0, 3.0]])
def test_from_sequence_too_short(values: list[float]) -> None:
    """Fewer than four coefficients should raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        Mat2.from_sequence(values)


def test_from_sequence_non_numeric() -> None:
    """Non-numeric coefficients should raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        Mat2.from_sequence(["a", "b", "c", "d"])


def test_invalid_input_is_value_error() -> None:
    """Construction errors stay catchable as ValueError."""
    with pytest.raises(ValueError):
        Mat2.from_sequence([])
    assert issubclass(InvalidInputError, LinalgError)


def test_from_columns() -> None:
    """Vectors should become the matrix columns."""
    mat: Matrix2 = Mat2.from_columns(Vector2(1.0, 3.0), Vector2(2.0, 4.0))
    assert mat == Matrix2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.col1(mat) == Vector2(1.0, 3.0)
    assert Mat2.col2(mat) == Vector2(2.0, 4.0)


def test_from_array_shape_checked() -> None:
    """2x2 array input must have exactly that shape."""
    arr: NDArray[np.float64] = np.array([[1.0, 2.0], [3.0, 4.0]])
    assert Mat2.from_array(arr) == Matrix2(1.0, 2.0, 3.0, 4.0)
    assert np.array_equal(Mat2.to_array(Mat2.from_array(arr)), arr)
    with pytest.raises(InvalidInputError):
        Mat2.from_array([1.0, 2.0, 3.0, 4.0])


def test_new_dispatch() -> None:
    """new() should accept either form and reject anything else."""
    expected: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.new([1, 2, 3, 4]) == expected
    assert Mat2.new(Vector2(1.0, 3.0), Vector2(2.0, 4.0)) == expected
    with pytest.raises(InvalidInputError):
        Mat2.new(Vector2(1.0, 3.0))
    with pytest.raises(InvalidInputError):
        Mat2.new([1, 2, 3, 4], [5, 6])
    with pytest.raises(InvalidInputError):
        Mat2.new(5.0)


def test_is_matrix2() -> None:
    """Predicate should check for the four named coefficients."""
    assert Mat2.is_matrix2(Mat2.IDENTITY)
    assert Mat2.is_matrix2(SimpleNamespace(ux=1, vx=0, uy=0, vy=1))
    assert not Mat2.is_matrix2(SimpleNamespace(ux=1, vx=0, uy=0))
    assert not Mat2.is_matrix2(Vector2(1.0, 2.0))
    assert not Mat2.is_matrix2([1.0, 0.0, 0.0, 1.0])


def test_rows_and_columns() -> None:
    """Row and column extraction should follow the naming convention."""
    mat: Matrix2 = Matrix2(ux=1.0, vx=2.0, uy=3.0, vy=4.0)
    assert Mat2.row1(mat) == Vector2(1.0, 2.0)
    assert Mat2.row2(mat) == Vector2(3.0, 4.0)
    assert Mat2.col1(mat) == Vector2(1.0, 3.0)
    assert Mat2.col2(mat) == Vector2(2.0, 4.0)


def test_mul_dispatch() -> None:
    """mul() should pick matrix, vector or scalar multiplication."""
    mat: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.mul(mat, 2.0) == Matrix2(2.0, 4.0, 6.0, 8.0)
    assert Mat2.mul(mat, 3) == Mat2.mul_scalar(mat, 3.0)
    assert Mat2.mul(mat, Vector2(1.0, 1.0)) == Vector2(3.0, 7.0)
    assert Mat2.mul(mat, Mat2.IDENTITY) == mat
    with pytest.raises(TypeError):
        Mat2.mul(mat, "2")


def test_mul_matches_numpy() -> None:
    """Products should agree with numpy's matmul."""
    rng: np.random.Generator = np.random.default_rng(2)
    for _ in range(10):
        m: Matrix2 = _random_matrix2(rng)
        n: Matrix2 = _random_matrix2(rng)
        v: Vector2 = Vector2(*rng.uniform(-5.0, 5.0, size=2))
        product: Matrix2 = Mat2.mul_matrix(m, n)
        assert np.allclose(Mat2.to_array(product), m.to_array() @ n.to_array())
        applied: Vector2 = Mat2.mul_vector(m, v)
        assert np.allclose(applied.to_array(), m.to_array() @ v.to_array())


def test_mul_is_associative() -> None:
    """(m n) p should match m (n p) within tolerance."""
    rng: np.random.Generator = np.random.default_rng(3)
    for _ in range(10):
        m: Matrix2 = _random_matrix2(rng)
        n: Matrix2 = _random_matrix2(rng)
        p: Matrix2 = _random_matrix2(rng)
        left: Matrix2 = Mat2.mul(Mat2.mul(m, n), p)
        right: Matrix2 = Mat2.mul(m, Mat2.mul(n, p))
        assert Mat2.is_close(left, right)


def test_mul_is_not_commutative() -> None:
    """Swapping operands generally changes the product."""
    m: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    n: Matrix2 = Matrix2(0.0, 1.0, 1.0, 0.0)
    assert Mat2.mul(m, n) != Mat2.mul(n, m)


def test_identity_trace_and_determinant() -> None:
    """Identity has trace 2 and determinant 1."""
    assert Mat2.trace(Mat2.IDENTITY) == 2.0
    assert Mat2.determinant(Mat2.IDENTITY) == 1.0


def test_identity_is_immutable() -> None:
    """The shared identity constant cannot be modified."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Mat2.IDENTITY.ux = 2.0  # type: ignore[misc]


def test_determinant_and_trace() -> None:
    """Determinant is ux*vy - vx*uy and trace is ux + vy."""
    mat: Matrix2 = Mat2.from_sequence([1, 2, 3, 4])
    assert Mat2.determinant(mat) == -2.0
    assert Mat2.trace(mat) == 5.0


def test_transpose_twice_is_identity() -> None:
    """Transposition is an exact involution."""
    rng: np.random.Generator = np.random.default_rng(4)
    mat: Matrix2 = _random_matrix2(rng)
    assert Mat2.transpose(Mat2.transpose(mat)) == mat
    assert Mat2.transpose(Matrix2(1, 2, 3, 4)) == Matrix2(1, 3, 2, 4)


def test_cofactor_and_adjugate() -> None:
    """Cofactor and adjugate should follow the 2x2 formulas."""
    mat: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.cofactor(mat) == Matrix2(ux=4.0, vx=-3.0, uy=-2.0, vy=1.0)
    assert Mat2.adjugate(mat) == Matrix2(ux=4.0, vx=-2.0, uy=-3.0, vy=1.0)
    assert Mat2.adjugate(mat) == Mat2.transpose(Mat2.cofactor(mat))


def test_inverse_known_value() -> None:
    """Inverse of [1, 2, 3, 4] is [-2, 1, 1.5, -0.5]."""
    mat: Matrix2 = Mat2.from_sequence([1, 2, 3, 4])
    inv: Matrix2 = Mat2.inverse(mat)
    assert inv == Matrix2(ux=-2.0, vx=1.0, uy=1.5, vy=-0.5)
    assert Mat2.is_close(Mat2.mul(mat, inv), Mat2.IDENTITY)


def test_inverse_random_round_trip() -> None:
    """m * inverse(m) should be the identity within tolerance."""
    rng: np.random.Generator = np.random.default_rng(5)
    for _ in range(20):
        mat: Matrix2 = _random_matrix2(rng)
        if abs(Mat2.determinant(mat)) < 1e-3:
            continue
        inv: Matrix2 = Mat2.inverse(mat)
        assert Mat2.is_close(Mat2.mul(mat, inv), Mat2.IDENTITY)
        assert np.allclose(Mat2.to_array(inv), np.linalg.inv(mat.to_array()))


@pytest.mark.parametrize(
    "values",
    [[0.0, 0.0, 0.0, 0.0], [1.0, 2.0, 1.0, 2.0], [1.0, 2.0, 2.0, 4.0]],
)
def test_inverse_singular_raises(values: list[float]) -> None:
    """A zero determinant should raise NotInvertibleError."""
    with pytest.raises(NotInvertibleError):
        Mat2.inverse(Mat2.from_sequence(values))


def test_mul_rejects_boolean_scalar() -> None:
    """Booleans are not accepted as scalar operands."""
    m: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(TypeError):
        Mat2.mul(m, True)


def test_zero_matrix_never_inverts_with_defaults() -> None:
    """The all-zero matrix is rejected by the default parameters."""
    with pytest.raises(NotInvertibleError):
        Mat2.inverse(Matrix2(0.0, 0.0, 0.0, 0.0), LinalgParams())


def test_inverse_singular_logs(caplog: pytest.LogCaptureFixture) -> None:
    """Rejected inversions should be logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="oasis_linalg.math_utils.mat2"):
        with pytest.raises(NotInvertibleError):
            Mat2.inverse(Matrix2(0.0, 0.0, 0.0, 0.0))
    assert "singular" in caplog.text


def test_inverse_near_singular_not_rejected() -> None:
    """Tiny non-zero determinants pass the exact-zero check."""
    mat: Matrix2 = Matrix2(1.0, 1.0, 1.0, 1.0 + 1e-12)
    assert Mat2.determinant(mat) != 0.0
    inv: Matrix2 = Mat2.inverse(mat)
    assert abs(inv.ux) > 1e11


def test_inverse_tolerance_opt_in() -> None:
    """A configured tolerance rejects near-singular matrices."""
    mat: Matrix2 = Matrix2(1.0, 1.0, 1.0, 1.0 + 1e-12)
    params: LinalgParams = LinalgParams(singular_det_tol=1e-9)
    with pytest.raises(NotInvertibleError):
        Mat2.inverse(mat, params)
    assert Mat2.inverse(Mat2.IDENTITY, params) == Mat2.IDENTITY


def test_equals_and_is_close() -> None:
    """Exact and tolerant comparison helpers."""
    mat: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0)
    near: Matrix2 = Matrix2(1.0, 2.0, 3.0, 4.0 + 1e-12)
    assert Mat2.equals(mat, SimpleNamespace(ux=1, vx=2, uy=3, vy=4))
    assert not Mat2.equals(mat, near)
    assert Mat2.is_close(mat, near)
    assert not Mat2.is_close(mat, Matrix2(1.0, 2.0, 3.0, 4.1))
