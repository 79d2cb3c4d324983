#!/usr/bin/env python3
"""
main.py — Run the European option pricing demos.

Usage:
    python main.py                                  # every scenario
    python main.py --scenario mesh --mesh-start 90 --mesh-end 110 --plot
    python main.py --scenario greeks --bump 0.5 --csv
"""

import argparse
import logging
import sys

import pandas as pd

from exact_pricing import config
from exact_pricing.exceptions import PricingError
from exact_pricing.mesh import create_mesh
from exact_pricing.option import OptionParameters
from exact_pricing.scenarios import greeks_table, mesh_table, parity_table, pricing_table
from exact_pricing.visualization import plot_mesh_matplotlib, plot_mesh_plotly

logger = logging.getLogger("exact_pricing")

SCENARIOS = ["pricing", "parity", "mesh", "greeks"]


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Price European options and their greeks.")
    p.add_argument("--scenario", choices=["all"] + SCENARIOS, default="all")
    p.add_argument("--mesh-start", type=float, default=config.MESH_START)
    p.add_argument("--mesh-end", type=float, default=config.MESH_END)
    p.add_argument("--mesh-step", type=float, default=config.MESH_STEP)
    p.add_argument("--bump", type=float, action="append", default=None,
                   help="finite-difference step h (repeatable)")
    p.add_argument("--plot", action="store_true", help="write price/greeks charts")
    p.add_argument("--no-html", action="store_true")
    p.add_argument("--csv", action="store_true", help="save each table to output/")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def run_scenario(name: str, args) -> pd.DataFrame:
    if name == "pricing":
        return pricing_table()
    if name == "parity":
        return parity_table()
    if name == "mesh":
        mesh = create_mesh(args.mesh_start, args.mesh_end, args.mesh_step)
        return mesh_table(mesh=mesh)
    return greeks_table(bumps=args.bump)


def make_charts(no_html: bool) -> None:
    params = OptionParameters(**config.MESH_OPTION)
    half = config.PLOT_MESH_WIDTH / 2
    mesh = create_mesh(max(params.K - half, config.PLOT_MESH_STEP),
                       params.K + half, config.PLOT_MESH_STEP)
    table = mesh_table(params, mesh)
    title = (f"{params.option_kind.value.title()} K={params.K:g} "
             f"T={params.T:g}y σ={params.sigma:.0%}")

    print(f"       -> {plot_mesh_matplotlib(table, strike=params.K, title=title)}")
    if not no_html:
        print(f"       -> {plot_mesh_plotly(table, strike=params.K, title=title)}")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    names = SCENARIOS if args.scenario == "all" else [args.scenario]

    print(f"\n{'='*60}")
    print(f"  European Option Pricer (generalized Black-Scholes)")
    print(f"  Scenarios: {', '.join(names)}")
    print(f"{'='*60}\n")

    pd.set_option("display.float_format", lambda x: f"{x:.6f}")
    pd.set_option("display.width", 160)

    try:
        for i, name in enumerate(names, start=1):
            print(f"[{i}/{len(names)}] {name}")
            table = run_scenario(name, args)
            print(table.to_string(index=False))
            print()
            if args.csv:
                config.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
                path = config.OUTPUT_DIR / f"{name}.csv"
                table.to_csv(path, index=False)
                logger.info("Saved %s", path)

        if args.plot:
            print("Generating charts...")
            make_charts(args.no_html)
    except PricingError as e:
        print(f"\n  ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
