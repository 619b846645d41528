################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration for the linear-algebra helpers."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

import numpy as np


# Largest |det| treated as singular by inverse (0.0 means exact zero only)
SINGULAR_DET_TOL: float = 0.0

# Largest ||n.y| - 1| treated as a pole by build_tnb (0.0 means exact only)
POLE_TOL: float = 0.0

# Tangent used by build_tnb when the normal is the vertical axis (west)
POLE_FALLBACK: np.ndarray = np.array([-1.0, 0.0, 0.0], dtype=np.float64)

# Absolute tolerance for approximate equality checks
CLOSE_ATOL: float = 1e-9
# Relative tolerance for approximate equality checks
CLOSE_RTOL: float = 0.0

# Allowed deviation of the pole fallback from unit length
UNIT_NORM_TOL: float = 1e-9


class LinalgParamsError(Exception):
    """Raised when linear-algebra parameter validation fails."""


def _as_float_array(value: Any, name: str) -> np.ndarray:
    """Copy a value into a read-only float64 numpy array with shape (3,)."""
    try:
        array: np.ndarray = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise LinalgParamsError(f"{name} must be numeric") from exc
    if array.shape != (3,):
        raise LinalgParamsError(f"{name} must have shape (3,)")
    array.flags.writeable = False
    return array


def _require_non_negative(value: float, name: str) -> None:
    """Require a finite non-negative value."""
    if not np.isfinite(value) or value < 0.0:
        raise LinalgParamsError(f"{name} must be finite and non-negative")


@dataclass(frozen=True, eq=False)
class LinalgParams:
    """Tolerances and fallbacks used by inversion and basis construction."""

    # Largest |det| treated as singular
    singular_det_tol: float = SINGULAR_DET_TOL
    # Largest ||n.y| - 1| treated as a pole
    pole_tol: float = POLE_TOL
    # Fallback tangent for the pole case
    pole_fallback: np.ndarray = field(default_factory=lambda: POLE_FALLBACK.copy())

    def __post_init__(self) -> None:
        """Coerce the fallback tangent and validate every field."""
        object.__setattr__(
            self,
            "pole_fallback",
            _as_float_array(self.pole_fallback, "pole_fallback"),
        )
        self.validate()

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameters."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> LinalgParams:
        """Return validated parameters with overrides applied to defaults."""
        known: set[str] = {item.name for item in fields(cls)}
        unknown: list[str] = sorted(set(values) - known)
        if unknown:
            raise LinalgParamsError(f"Unknown parameters: {', '.join(unknown)}")

        return cls(**dict(values))

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_non_negative(self.singular_det_tol, "singular_det_tol")
        _require_non_negative(self.pole_tol, "pole_tol")

        if self.pole_tol >= 1.0:
            raise LinalgParamsError("pole_tol must be less than 1")

        if not np.all(np.isfinite(self.pole_fallback)):
            raise LinalgParamsError("pole_fallback must be finite")
        norm: float = float(np.linalg.norm(self.pole_fallback))
        if abs(norm - 1.0) > UNIT_NORM_TOL:
            raise LinalgParamsError("pole_fallback must be unit length")
        if self.pole_fallback[1] != 0.0:
            raise LinalgParamsError("pole_fallback must be horizontal (y == 0)")

    def __eq__(self, other: object) -> bool:
        """Compare tolerances and the fallback tangent by value."""
        if not isinstance(other, LinalgParams):
            return NotImplemented
        return (
            self.singular_det_tol == other.singular_det_tol
            and self.pole_tol == other.pole_tol
            and bool(np.array_equal(self.pole_fallback, other.pole_fallback))
        )

    def replace(self, **overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a dict representation with plain Python values."""
        result: dict[str, Any] = {}
        for item in fields(self):
            value: Any = getattr(self, item.name)
            if isinstance(value, np.ndarray):
                value = value.tolist()
            result[item.name] = value
        return result


DEFAULT_PARAMS: LinalgParams = LinalgParams.defaults()
