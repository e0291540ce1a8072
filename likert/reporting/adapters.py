"""Plot-ready tables built from a SignedSeries.

Two layouts are supported, selected by tag:

- "offset": one wide row per question with whole fractions in scale order and
  an `offset` column (minus the negative mass). Drawing the categories as a
  single left-to-right stack starting at `offset` centers the neutral band
  on zero.
- "signed": one long row per (question, side, segment). Negative-side
  fractions are negated and each side stacks outward from zero in `order`.
"""
from __future__ import annotations

from typing import Callable, Dict

import pandas as pd

from likert.data.reshape import SignedSeries

SIGNED_COLUMNS = ["question", "category", "side", "order", "fraction", "color"]


def to_offset_frame(signed: SignedSeries) -> pd.DataFrame:
    scale = signed.scale
    rows = []
    for q in signed.questions:
        neg = signed.negative[q]
        pos = signed.positive[q]
        row = {c: 0.0 for c in scale.categories}
        for seg in neg + pos:
            row[seg.category] += seg.fraction
        row["offset"] = -sum(seg.fraction for seg in neg)
        rows.append({"question": q, **row})

    out = pd.DataFrame(rows, columns=["question"] + list(scale.categories) + ["offset"])
    return out.set_index("question")


def to_signed_frame(signed: SignedSeries) -> pd.DataFrame:
    rows = []
    for q in signed.questions:
        for side, segments, sign in (("negative", signed.negative[q], -1.0), ("positive", signed.positive[q], 1.0)):
            for order, seg in enumerate(segments):
                rows.append(
                    {
                        "question": q,
                        "category": seg.category,
                        "side": side,
                        "order": order,
                        "fraction": sign * seg.fraction,
                        "color": seg.color,
                    }
                )
    return pd.DataFrame(rows, columns=SIGNED_COLUMNS)


ADAPTERS: Dict[str, Callable[[SignedSeries], pd.DataFrame]] = {
    "offset": to_offset_frame,
    "signed": to_signed_frame,
}


def to_plot_frame(signed: SignedSeries, style: str) -> pd.DataFrame:
    try:
        adapter = ADAPTERS[style]
    except KeyError:
        raise ValueError(f"Unknown chart style {style!r}; expected one of {sorted(ADAPTERS)}") from None
    return adapter(signed)
