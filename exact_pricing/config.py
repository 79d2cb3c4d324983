"""
Global configuration for the pricing demos and charts.

Keeps all magic numbers in one place. Override via CLI args in main.py
or by editing this file directly for persistent changes.
"""

from pathlib import Path


# ── paths ────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
OUTPUT_DIR = PROJECT_ROOT / "output"


# ── reference contract ───────────────────────────────────────────────────
# Hull's textbook example: call ~ 2.1334, put ~ 5.8463
REFERENCE_OPTION = dict(
    underlying_price=60.0,
    strike_price=65.0,
    time_to_maturity=0.25,
    risk_free_rate=0.08,
    volatility=0.30,
    underlying_class="stock",
)


# ── pricing batches ──────────────────────────────────────────────────────
# (S, K, T, r, sigma), all on a non-dividend stock
PRICING_BATCHES = [
    (60.0, 65.0, 0.25, 0.08, 0.30),
    (100.0, 100.0, 1.0, 0.0, 0.20),
    (5.0, 10.0, 1.0, 0.12, 0.50),
    (100.0, 100.0, 30.0, 0.08, 0.30),   # very long dated
]


# ── mesh sweep ───────────────────────────────────────────────────────────
MESH_OPTION = dict(
    underlying_price=100.0,
    strike_price=100.0,
    time_to_maturity=30.0,
    risk_free_rate=0.08,
    volatility=0.30,
    option_kind="put",
    underlying_class="stock",
)
MESH_START = 99.0
MESH_END = 101.0
MESH_STEP = 1.0


# ── greeks vs finite differences ─────────────────────────────────────────
GREEKS_OPTION = dict(
    underlying_price=105.0,
    strike_price=100.0,
    time_to_maturity=0.5,
    risk_free_rate=0.10,
    volatility=0.36,
    option_kind="call",
    underlying_class="futures",
)
DELTA_BUMP = 0.01               # h for the central first difference
GAMMA_BUMP = 0.1                # h for the second difference; smaller h loses digits to cancellation
GREEKS_BUMPS = [1.0, 0.5, 0.1, 0.01, 0.001]


# ── visualization ────────────────────────────────────────────────────────
DARK_BG = "#0c0c16"
GRID_COLOR_ALPHA = 0.12
DPI = 200                       # matplotlib export resolution
FIG_WIDTH_2D = 12
FIG_HEIGHT_2D = 9
PLOT_MESH_WIDTH = 40.0          # underlying range around strike for charts
PLOT_MESH_STEP = 0.5

# one color per panel: price, delta, gamma
SERIES_COLORS = ["#4d96ff", "#6bcb77", "#ff6b6b"]
