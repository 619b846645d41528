################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error types raised by the linear-algebra helpers."""

from __future__ import annotations


class LinalgError(ValueError):
    """Base class for linear-algebra failures."""


class InvalidInputError(LinalgError):
    """Raised when construction input is malformed."""


class NotInvertibleError(LinalgError):
    """Raised when inverting a matrix with a zero determinant."""
