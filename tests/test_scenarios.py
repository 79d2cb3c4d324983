"""
Tests for the demo scenarios, the charts and the CLI.
"""

import pytest
import numpy as np

import main
from exact_pricing import config
from exact_pricing.black_scholes import price
from exact_pricing.option import OptionParameters
from exact_pricing.scenarios import greeks_table, mesh_table, parity_table, pricing_table
from exact_pricing.visualization import plot_mesh_matplotlib, plot_mesh_plotly


class TestTables:

    def test_pricing_table(self):
        df = pricing_table()
        assert len(df) == len(config.PRICING_BATCHES)
        assert df.loc[0, "call"] == pytest.approx(2.1334, abs=1e-4)
        assert df.loc[0, "put"] == pytest.approx(5.8463, abs=1e-4)
        assert (df["parity_gap"].abs() < 1e-9).all()

    def test_pricing_table_other_class(self):
        df = pricing_table([(100.0, 100.0, 1.0, 0.05, 0.2)], underlying_class="futures")
        assert (df["parity_gap"].abs() < 1e-9).all()

    def test_parity_table(self):
        df = parity_table()
        assert (df["call_error"].abs() < 1e-9).all()
        assert (df["parity_difference"].abs() < 1e-9).all()

    def test_mesh_table_defaults(self):
        df = mesh_table()
        assert list(df.columns) == ["underlying", "price", "delta", "gamma"]
        np.testing.assert_array_equal(df["underlying"], [99.0, 100.0, 101.0])
        put = OptionParameters(**config.MESH_OPTION)
        assert df.loc[1, "price"] == pytest.approx(price(put))
        assert (df["delta"] <= 0).all()

    def test_mesh_table_custom(self, hull_call):
        df = mesh_table(hull_call, [50.0, 60.0, 70.0])
        assert df["price"].is_monotonic_increasing
        assert df["delta"].is_monotonic_increasing

    def test_greeks_table(self, futures_call):
        df = greeks_table(futures_call, bumps=[1.0, 0.1, 0.01])
        assert len(df) == 3
        assert df.loc[2, "delta_error"] < 1e-4
        assert df.loc[1, "gamma_error"] < 1e-4
        # truncation error falls with h until rounding takes over
        assert df.loc[1, "delta_error"] < df.loc[0, "delta_error"]


class TestCharts:

    def test_png_written(self, tmp_path, hull_call):
        table = mesh_table(hull_call, np.linspace(40, 80, 21))
        path = plot_mesh_matplotlib(table, strike=65.0, output_path=str(tmp_path / "g.png"))
        assert (tmp_path / "g.png").exists()
        assert path.endswith("g.png")

    def test_html_written(self, tmp_path, hull_call):
        table = mesh_table(hull_call, np.linspace(40, 80, 21))
        plot_mesh_plotly(table, strike=65.0, output_path=str(tmp_path / "g.html"))
        assert (tmp_path / "g.html").stat().st_size > 0


class TestCli:

    def test_single_scenario(self, capsys):
        main.main(["--scenario", "pricing"])
        out = capsys.readouterr().out
        assert "call" in out
        assert "2.133" in out

    def test_bad_mesh_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["--scenario", "mesh", "--mesh-step", "0"])
        assert exc.value.code == 1
        assert "ERROR" in capsys.readouterr().err

    def test_csv(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "OUTPUT_DIR", tmp_path)
        main.main(["--scenario", "greeks", "--bump", "0.5", "--csv"])
        assert (tmp_path / "greeks.csv").exists()
