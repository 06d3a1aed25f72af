# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from cramer.benchmark import run_benchmark


def test_run_benchmark_table():
    df = run_benchmark(sizes=(2, 3), repeats=1)
    assert list(df.columns) == ["kernel", "size", "sec", "residual"]
    assert len(df) == 6
    assert set(df["kernel"]) == {"numpy", "cramer", "cramer-threads"}
    assert (df["sec"] >= 0).all()
    assert (df["residual"] < 1e-8).all()
