# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12


def random_nonsingular(n, low=-1.0, high=1.0, seed=None) -> np.ndarray:
    """
    Build a dense n by n matrix A = L U with L unit lower-triangular
    and U upper-triangular with a non-zero diagonal, so det(A) is the
    product of U's diagonal and never zero.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    L = np.tril(rng.uniform(low, high, size=(n, n)), k=-1) + np.eye(n)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    # keep the diagonal away from zero
    diag = rng.uniform(1.0, max(high, 2.0), size=n) * rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(L @ U)
