"""
Visualization module: price, delta and gamma against the underlying.

Two backends:
    - matplotlib: high-resolution static PNG
    - plotly: interactive HTML with zoom and hover tooltips

Both take the DataFrame produced by scenarios.mesh_table and share the
dark theme defined in config.
"""

from pathlib import Path

import pandas as pd

import matplotlib
matplotlib.use("Agg")  # non-interactive backend for server/CI environments
import matplotlib.pyplot as plt

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from . import config


_PANELS = [
    ("price", "Option price"),
    ("delta", "Delta (∂V/∂S)"),
    ("gamma", "Gamma (∂²V/∂S²)"),
]


def _default_path(name: str) -> Path:
    config.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    return config.OUTPUT_DIR / name


# ════════════════════════════════════════════════════════════════════════
#  MATPLOTLIB — PRICE / GREEKS (static PNG)
# ════════════════════════════════════════════════════════════════════════

def plot_mesh_matplotlib(
    table: pd.DataFrame,
    strike: float = None,
    title: str = "Option sensitivity",
    output_path: str = None,
) -> str:
    """
    Render price, delta and gamma vs underlying as a three-panel PNG.

    Parameters
    ----------
    table : DataFrame with columns [underlying, price, delta, gamma]
    strike : if given, drawn as a dashed vertical line
    title : figure title
    output_path : where to save the PNG (default: config.OUTPUT_DIR / "mesh_greeks.png")

    Returns
    -------
    str : path of the written file
    """
    if output_path is None:
        output_path = str(_default_path("mesh_greeks.png"))

    fig, axes = plt.subplots(3, 1, sharex=True,
                             figsize=(config.FIG_WIDTH_2D, config.FIG_HEIGHT_2D))
    fig.patch.set_facecolor(config.DARK_BG)

    for ax, (column, label), color in zip(axes, _PANELS, config.SERIES_COLORS):
        ax.set_facecolor(config.DARK_BG)
        ax.plot(table["underlying"], table[column], color=color, linewidth=2.2)
        if strike is not None:
            ax.axvline(strike, color="white", alpha=0.35, linestyle="--", linewidth=1)
        ax.set_ylabel(label, fontsize=11, color="white")
        ax.tick_params(colors="white", labelsize=9)
        ax.grid(True, alpha=config.GRID_COLOR_ALPHA, color="white")
        for spine in ax.spines.values():
            spine.set_color("#333355")

    axes[-1].set_xlabel("Underlying (S)", fontsize=12, color="white")
    axes[0].set_title(title, fontsize=16, fontweight="bold", color="white")

    plt.tight_layout()
    plt.savefig(output_path, dpi=config.DPI, bbox_inches="tight",
                facecolor=config.DARK_BG, edgecolor="none")
    plt.close(fig)
    return output_path


# ════════════════════════════════════════════════════════════════════════
#  PLOTLY — PRICE / GREEKS (interactive HTML)
# ════════════════════════════════════════════════════════════════════════

def plot_mesh_plotly(
    table: pd.DataFrame,
    strike: float = None,
    title: str = "Option sensitivity",
    output_path: str = None,
) -> str:
    """Render price, delta and gamma vs underlying as interactive HTML."""
    if output_path is None:
        output_path = str(_default_path("mesh_greeks.html"))

    fig = make_subplots(rows=3, cols=1, shared_xaxes=True, vertical_spacing=0.06,
                        subplot_titles=[label for _, label in _PANELS])

    for i, ((column, label), color) in enumerate(zip(_PANELS, config.SERIES_COLORS), start=1):
        fig.add_trace(go.Scatter(
            x=table["underlying"], y=table[column],
            mode="lines", name=label,
            line=dict(color=color, width=2.5),
            hovertemplate="S=%{x:.2f}  " + column + "=%{y:.6f}<extra></extra>",
        ), row=i, col=1)

    if strike is not None:
        fig.add_vline(
            x=strike, line_dash="dash", line_color="rgba(255,255,255,0.4)",
            annotation_text=f"K = {strike:g}",
            annotation_font=dict(color="rgba(255,255,255,0.7)", size=12),
        )

    grid = f"rgba(200,200,200,{config.GRID_COLOR_ALPHA})"
    fig.update_xaxes(gridcolor=grid, tickfont=dict(size=11, color="#ccc"))
    fig.update_yaxes(gridcolor=grid, tickfont=dict(size=11, color="#ccc"))
    fig.update_xaxes(title_text="Underlying (S)", row=3, col=1)

    fig.update_layout(
        title=dict(text=f"<b>{title}</b>", font=dict(size=20, color="white"), x=0.5),
        plot_bgcolor=config.DARK_BG,
        paper_bgcolor=config.DARK_BG,
        font=dict(color="white"),
        showlegend=False,
        width=1000, height=850,
        margin=dict(l=60, r=30, t=80, b=50),
    )

    fig.write_html(output_path)
    return output_path
