################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the linear-algebra helpers."""

from oasis_linalg.config.linalg_params import DEFAULT_PARAMS
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError


__all__ = [
    "DEFAULT_PARAMS",
    "LinalgParams",
    "LinalgParamsError",
]
