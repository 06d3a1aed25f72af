# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
cramer
======

Solve small dense linear systems A x = b with Cramer's rule, on top of
a recursive cofactor-expansion determinant.

Public API
~~~~~~~~~~
- Determinants
    - `determinant`, `minor`, `replace_column`
- Validation
    - `is_square_matrix`, `is_augmented_matrix`, `split_augmented`
- Linear systems
    - `cramer_solve`, `cramer_solve_concurrent`
- Errors
    - `CramerError`, `ShapeError`, `SingularSystemError`

Cofactor expansion costs O(n!), so this is only meant for n below ~12.

Example
-------
>>> import cramer
>>> cramer.cramer_solve([[2, 1], [1, 3]], [3, 5])
array([0.8, 1.4])
"""

from importlib.metadata import version as _pkg_version

from .errors import CramerError, ShapeError, SingularSystemError
from .io import format_solution, read_system
from .matrix_functions import determinant, minor, replace_column
from .solver import cramer_solve, cramer_solve_concurrent
from .validation import is_augmented_matrix, is_square_matrix, split_augmented

__all__ = [
    "determinant",
    "minor",
    "replace_column",
    "is_square_matrix",
    "is_augmented_matrix",
    "split_augmented",
    "cramer_solve",
    "cramer_solve_concurrent",
    "read_system",
    "format_solution",
    "CramerError",
    "ShapeError",
    "SingularSystemError",
]

try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# Library code never configures logging, the CLI does that on --verbose.
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
