################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Vector utilities for 2D and 3D vectors.

Inputs are duck-typed: any object exposing real ``x``, ``y`` (and ``z``)
attributes is accepted. Results are always fresh ``Vector2``/``Vector3``
values. NaN and infinite components are not validated and propagate.
"""

from __future__ import annotations

import math
from typing import Any
from typing import Optional

import numpy as np

from oasis_linalg.config.linalg_params import CLOSE_ATOL
from oasis_linalg.config.linalg_params import CLOSE_RTOL
from oasis_linalg.linalg_types.vector import Vector2
from oasis_linalg.linalg_types.vector import Vector3
from oasis_linalg.math_utils.numeric import has_real_fields
from oasis_linalg.math_utils.numeric import reciprocal
from oasis_linalg.math_utils.validation import reshape_vector


class Vec2:
    """Vector utilities for 2D vectors."""

    @staticmethod
    def is_vector2(value: Any) -> bool:
        """Return True when the value exposes real x and y attributes."""
        return has_real_fields(value, ("x", "y"))

    @staticmethod
    def from_scalar(s: float) -> Vector2:
        """Return a vector with every component set to ``s``."""
        return Vector2(s, s)

    @staticmethod
    def new(x: float, y: Optional[float] = None) -> Vector2:
        """Return a vector from components; a missing ``y`` repeats ``x``."""
        return Vector2(x, x if y is None else y)

    @staticmethod
    def from_array(values: Any) -> Vector2:
        """Return a vector from an array-like of shape (2,)."""
        array: np.ndarray = reshape_vector(values, 2, "values")
        return Vector2(array[0], array[1])

    @staticmethod
    def to_array(v: Any) -> np.ndarray:
        """Return a float64 array of shape (2,)."""
        return np.array([v.x, v.y], dtype=np.float64)

    @staticmethod
    def add(a: Any, b: Any) -> Vector2:
        return Vector2(a.x + b.x, a.y + b.y)

    @staticmethod
    def sub(a: Any, b: Any) -> Vector2:
        return Vector2(a.x - b.x, a.y - b.y)

    @staticmethod
    def scale(v: Any, s: float) -> Vector2:
        return Vector2(v.x * s, v.y * s)

    @staticmethod
    def negate(v: Any) -> Vector2:
        return Vector2(-v.x, -v.y)

    @staticmethod
    def dot(a: Any, b: Any) -> float:
        """Return the dot product of two vectors."""
        return a.x * b.x + a.y * b.y

    @staticmethod
    def length_squared(v: Any) -> float:
        return Vec2.dot(v, v)

    @staticmethod
    def length(v: Any) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(Vec2.dot(v, v))

    @staticmethod
    def normalize(v: Any) -> Vector2:
        """Return ``v`` scaled to unit length.

        A zero-length input yields NaN components rather than raising.
        """
        return Vec2.scale(v, reciprocal(Vec2.length(v)))

    @staticmethod
    def equals(a: Any, b: Any) -> bool:
        """Return True when all components compare exactly equal."""
        return a.x == b.x and a.y == b.y

    @staticmethod
    def is_close(
        a: Any,
        b: Any,
        atol: float = CLOSE_ATOL,
        rtol: float = CLOSE_RTOL,
    ) -> bool:
        """Return True when all components agree within tolerance."""
        return bool(
            np.allclose(Vec2.to_array(a), Vec2.to_array(b), atol=atol, rtol=rtol)
        )


class Vec3:
    """Vector utilities for 3D vectors."""

    @staticmethod
    def is_vector3(value: Any) -> bool:
        """Return True when the value exposes real x, y and z attributes."""
        return has_real_fields(value, ("x", "y", "z"))

    @staticmethod
    def from_scalar(s: float) -> Vector3:
        """Return a vector with every component set to ``s``."""
        return Vector3(s, s, s)

    @staticmethod
    def new(
        x: float,
        y: Optional[float] = None,
        z: Optional[float] = None,
    ) -> Vector3:
        """Return a vector from components; missing ones repeat ``x``."""
        return Vector3(x, x if y is None else y, x if z is None else z)

    @staticmethod
    def from_array(values: Any) -> Vector3:
        """Return a vector from an array-like of shape (3,)."""
        array: np.ndarray = reshape_vector(values, 3, "values")
        return Vector3(array[0], array[1], array[2])

    @staticmethod
    def to_array(v: Any) -> np.ndarray:
        """Return a float64 array of shape (3,)."""
        return np.array([v.x, v.y, v.z], dtype=np.float64)

    @staticmethod
    def add(a: Any, b: Any) -> Vector3:
        return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)

    @staticmethod
    def sub(a: Any, b: Any) -> Vector3:
        return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)

    @staticmethod
    def scale(v: Any, s: float) -> Vector3:
        return Vector3(v.x * s, v.y * s, v.z * s)

    @staticmethod
    def negate(v: Any) -> Vector3:
        return Vector3(-v.x, -v.y, -v.z)

    @staticmethod
    def dot(a: Any, b: Any) -> float:
        """Return the dot product of two vectors."""
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Any, b: Any) -> Vector3:
        """Return the right-handed cross product ``a x b``."""
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def length_squared(v: Any) -> float:
        return Vec3.dot(v, v)

    @staticmethod
    def length(v: Any) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(Vec3.dot(v, v))

    @staticmethod
    def normalize(v: Any) -> Vector3:
        """Return ``v`` scaled to unit length.

        A zero-length input yields NaN components rather than raising.
        """
        return Vec3.scale(v, reciprocal(Vec3.length(v)))

    @staticmethod
    def equals(a: Any, b: Any) -> bool:
        """Return True when all components compare exactly equal."""
        return a.x == b.x and a.y == b.y and a.z == b.z

    @staticmethod
    def is_close(
        a: Any,
        b: Any,
        atol: float = CLOSE_ATOL,
        rtol: float = CLOSE_RTOL,
    ) -> bool:
        """Return True when all components agree within tolerance."""
        return bool(
            np.allclose(Vec3.to_array(a), Vec3.to_array(b), atol=atol, rtol=rtol)
        )
