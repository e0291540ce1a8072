from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

import pandas as pd

from likert.data.scale import LikertScale
from likert.data.validate import assert_fractions_sum_to_one, assert_required_columns
from likert.errors import EmptyQuestionError, UnknownCategoryError
from likert.reporting.palette import validate_palette

logger = logging.getLogger(__name__)


class Segment(NamedTuple):
    category: str
    fraction: float
    color: str


@dataclass(frozen=True, eq=False)
class AggregatedSeries:
    """Share of valid responses per (question, scale point).

    `fractions` has one row per question and one column per scale category in
    scale order; each row sums to 1. `n` holds the denominator per question
    (respondent count, or total weight when weights were used).
    """

    scale: LikertScale
    fractions: pd.DataFrame
    n: pd.Series

    @property
    def questions(self) -> List[str]:
        return self.fractions.index.tolist()

    def fraction(self, question: str, category: str) -> float:
        return float(self.fractions.at[question, category])


@dataclass(frozen=True)
class SignedSeries:
    """Per-question segments split across the zero axis.

    Both sides are ordered nearest-to-neutral first, so stacking them outward
    from zero in sequence gives the diverging layout. Negative fractions are
    stored as positive magnitudes.
    """

    scale: LikertScale
    negative: Dict[str, Tuple[Segment, ...]]
    positive: Dict[str, Tuple[Segment, ...]]

    @property
    def questions(self) -> List[str]:
        return list(self.negative.keys())

    def totals(self) -> pd.DataFrame:
        rows = []
        for q in self.questions:
            rows.append(
                {
                    "question": q,
                    "negative": sum(s.fraction for s in self.negative[q]),
                    "positive": sum(s.fraction for s in self.positive[q]),
                }
            )
        return pd.DataFrame(rows, columns=["question", "negative", "positive"]).set_index("question")


def aggregate_responses(
    df: pd.DataFrame,
    questions: Sequence[str],
    scale: LikertScale,
    *,
    weights: Optional[str] = None,
    drop_empty: bool = False,
) -> AggregatedSeries:
    """Fraction of non-missing responses on each scale point, per question.

    Values must already be scale labels (see coding.recode_likert for raw
    exports). Missing answers are excluded from the denominator. With
    `weights`, rows lacking a weight are excluded too and shares are weighted.
    """

    questions = list(questions)
    assert_required_columns(df, questions + ([weights] if weights else []))
    categories = list(scale.categories)
    w = df[weights].astype(float) if weights else None

    rows = {}
    n = {}
    for q in questions:
        s = df[q]
        mask = s.notna()
        if w is not None:
            mask &= w.notna()
        valid = s.loc[mask].astype(object)

        unexpected = [v for v in pd.unique(valid) if v not in scale]
        if unexpected:
            raise UnknownCategoryError(q, unexpected, categories)

        if w is None:
            counts = valid.value_counts().reindex(categories, fill_value=0).astype(float)
        else:
            counts = w.loc[mask].groupby(valid).sum().reindex(categories, fill_value=0.0)

        total = float(counts.sum())
        if total <= 0:
            if drop_empty:
                logger.warning("Dropping question %r: no valid responses.", q)
                continue
            raise EmptyQuestionError(q)

        rows[q] = (counts / total).to_numpy(dtype=float)
        n[q] = total

    fractions = pd.DataFrame.from_dict(rows, orient="index", columns=categories)
    fractions.index.name = "question"
    fractions.columns.name = "category"
    assert_fractions_sum_to_one(fractions)
    return AggregatedSeries(scale=scale, fractions=fractions, n=pd.Series(n, name="n", dtype=float))


def split_signed(aggregated: AggregatedSeries, palette: Sequence[str]) -> SignedSeries:
    """Partition each question's fractions into negative and positive sides.

    A neutral midpoint contributes half its mass to each side. Colors are taken
    from `palette` by scale position, so the negative side walks the palette in
    reverse while the positive side walks it forward.
    """

    scale = aggregated.scale
    validate_palette(palette, scale)

    negative: Dict[str, Tuple[Segment, ...]] = {}
    positive: Dict[str, Tuple[Segment, ...]] = {}
    for q, row in aggregated.fractions.iterrows():
        neg: List[Segment] = []
        pos: List[Segment] = []
        if scale.has_midpoint:
            half = float(row[scale.neutral]) / 2.0
            color = palette[scale.midpoint_index]
            neg.append(Segment(scale.neutral, half, color))
            pos.append(Segment(scale.neutral, half, color))
        for c in scale.negative_categories:
            neg.append(Segment(c, float(row[c]), palette[scale.position(c)]))
        for c in scale.positive_categories:
            pos.append(Segment(c, float(row[c]), palette[scale.position(c)]))
        negative[q] = tuple(neg)
        positive[q] = tuple(pos)

    return SignedSeries(scale=scale, negative=negative, positive=positive)


def reshape_for_diverging(
    df: pd.DataFrame,
    questions: Sequence[str],
    scale: LikertScale,
    palette: Sequence[str],
    *,
    weights: Optional[str] = None,
    drop_empty: bool = False,
) -> SignedSeries:
    aggregated = aggregate_responses(df, questions, scale, weights=weights, drop_empty=drop_empty)
    return split_signed(aggregated, palette)
