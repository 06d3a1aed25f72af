# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the determinant engine and the Cramer solvers
"""


class CramerError(ValueError):
    """Base class for every failure surfaced by a solve call."""


class ShapeError(CramerError):
    """Matrix is not square, augmented matrix has the wrong column
    count, or the constants vector does not match the matrix."""


class SingularSystemError(CramerError):
    """The coefficient determinant is zero, so there is no unique solution."""

    def __init__(self, det: float = 0.0):
        self.det = det
        super().__init__(
            "no unique solution: the system is inconsistent or has "
            f"infinitely many solutions (det = {det})"
        )
