################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Vector value types."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""

    x: float
    y: float

    def __post_init__(self) -> None:
        """Coerce components to float."""
        coerce_float_fields(self)

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Coerce components to float."""
        coerce_float_fields(self)

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


def coerce_float_fields(value: object) -> None:
    """Replace every dataclass field on a frozen instance with its float."""
    for item in fields(value):  # type: ignore[arg-type]
        object.__setattr__(value, item.name, float(getattr(value, item.name)))
