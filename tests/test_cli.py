# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest

from cramer.cli import main


@pytest.fixture
def system_file(tmp_path):
    path = tmp_path / "matrix1.txt"
    path.write_text("2 1 3\n1 3 5\n")
    return path


@pytest.mark.parametrize("flags", [[], ["--concurrent"]])
def test_cli_solves(system_file, capsys, flags):
    assert main([str(system_file), *flags]) == 0
    out = capsys.readouterr().out
    assert "Main determinant (detA): 5.00" in out
    assert "x1 = 0.80" in out
    assert "x2 = 1.40" in out
    assert "Elapsed time" in out


def test_cli_precision(system_file, capsys):
    assert main([str(system_file), "--precision", "4"]) == 0
    assert "x2 = 1.4000" in capsys.readouterr().out


def test_cli_singular(tmp_path, capsys):
    path = tmp_path / "singular.txt"
    path.write_text("1 2 3\n2 4 6\n")
    assert main([str(path)]) == 1
    assert "no unique solution" in capsys.readouterr().out


def test_cli_bad_shape(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("1 2 3 4 5\n1 2 3 4 5\n1 2 3 4 5\n")
    assert main([str(path)]) == 2
    assert "Error reading" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert "Error reading" in capsys.readouterr().err


def test_cli_concurrent_processes(system_file, capsys):
    assert main([str(system_file), "--concurrent", "--processes"]) == 0
    assert "x2 = 1.40" in capsys.readouterr().out


def test_cli_processes_requires_concurrent(system_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(system_file), "--processes"])
    assert exc.value.code == 2
    assert "--processes requires --concurrent" in capsys.readouterr().err


def test_cli_negative_tol_rejected(system_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(system_file), "--tol", "-1"])
    assert exc.value.code == 2
    assert "must be non-negative" in capsys.readouterr().err


def test_cli_tol_flags_near_singular(tmp_path, capsys):
    path = tmp_path / "near.txt"
    path.write_text("1 2 3\n1 2.0000000001 3\n")
    assert main([str(path)]) == 0
    assert main([str(path), "--tol", "1e-8"]) == 1
    assert "no unique solution" in capsys.readouterr().out
