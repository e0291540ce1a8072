from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from matplotlib.ticker import PercentFormatter

from likert.config import FIGSIZE
from likert.data.reshape import SignedSeries
from likert.reporting.adapters import to_plot_frame

LABEL_MIN_FRACTION = 0.05


def _category_colors(signed: SignedSeries) -> Dict[str, str]:
    q = signed.questions[0]
    return {seg.category: seg.color for seg in signed.negative[q] + signed.positive[q]}


def _draw_segment(ax, y, widths, left, color, bar_height: float, annotate: bool):
    bars = ax.barh(y, widths, left=left, height=bar_height, color=color, edgecolor="white", linewidth=0.5)
    if annotate:
        labels = [f"{abs(w):.0%}" if abs(w) >= LABEL_MIN_FRACTION else "" for w in widths]
        ax.bar_label(bars, labels=labels, label_type="center", fontsize=8)
    return bars


def _draw_offset(ax, frame, categories: Sequence[str], colors, y, bar_height, annotate) -> None:
    left = frame["offset"].to_numpy(dtype=float).copy()
    for c in categories:
        widths = frame[c].to_numpy(dtype=float)
        _draw_segment(ax, y, widths, left, colors[c], bar_height, annotate)
        left = left + widths


def _draw_signed(ax, frame, questions: Sequence[str], y, bar_height, annotate) -> None:
    for side in ("negative", "positive"):
        part = frame.loc[frame["side"] == side]
        base = np.zeros(len(questions))
        for order in sorted(part["order"].unique()):
            seg = part.loc[part["order"] == order].set_index("question").reindex(questions)
            widths = seg["fraction"].fillna(0.0).to_numpy(dtype=float)
            _draw_segment(ax, y, widths, base, seg["color"].iloc[0], bar_height, annotate)
            base = base + widths


def format_diverging_axis(ax) -> None:
    """Shared zero baseline and a percent axis bounded to [-100%, 100%]."""

    ax.set_xlim(-1.0, 1.0)
    ax.xaxis.set_major_formatter(PercentFormatter(xmax=1.0, decimals=0))
    ax.axvline(0.0, color="black", linewidth=0.8)
    ax.grid(axis="x", linestyle=":", linewidth=0.5, alpha=0.7)
    ax.set_axisbelow(True)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)


def plot_diverging(
    signed: SignedSeries,
    *,
    style: str = "offset",
    ax=None,
    title: Optional[str] = None,
    bar_height: float = 0.6,
    annotate: bool = True,
):
    """Render a horizontal diverging stacked bar chart, one bar per question.

    Returns (fig, ax). The legend lists every scale category once, in scale order.
    """

    questions = signed.questions
    if not questions:
        raise ValueError("Nothing to plot: the signed series has no questions.")

    frame = to_plot_frame(signed, style)
    categories = list(signed.scale.categories)
    colors = _category_colors(signed)

    if ax is None:
        fig, ax = plt.subplots(figsize=FIGSIZE)
    else:
        fig = ax.figure

    y = np.arange(len(questions))
    if style == "offset":
        _draw_offset(ax, frame, categories, colors, y, bar_height, annotate)
    else:
        _draw_signed(ax, frame, questions, y, bar_height, annotate)

    ax.set_yticks(y)
    ax.set_yticklabels(questions)
    ax.invert_yaxis()
    format_diverging_axis(ax)
    ax.set_xlabel("Share of responses")
    if title:
        ax.set_title(title)

    handles = [Patch(facecolor=colors[c], label=c) for c in categories]
    ax.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, -0.12),
        ncol=len(categories),
        frameon=False,
        fontsize=8,
    )
    fig.tight_layout()
    return fig, ax
