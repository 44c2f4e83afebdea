# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest

pd = pytest.importorskip("pandas")
pytest.importorskip("tabulate")

from cofactor import benchmark_cofactor  # noqa: E402


def test_benchmark_table(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(benchmark_cofactor, "sizes", [(3, 1.0), (5, 0.5)])
    monkeypatch.setattr(benchmark_cofactor, "REPEATS", 1)
    benchmark_cofactor.main()

    df = pd.read_csv(tmp_path / "bench_results.csv")
    assert list(df["size"]) == ["3x3", "5x5"]
    assert df["seq==par"].all()
    assert (df["exact-numpy"] == 0).all()
    assert "speedup" in capsys.readouterr().out
