from typing import Iterable

import numpy as np


def assert_required_columns(df, required: Iterable[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def assert_fractions_sum_to_one(fractions, *, atol: float = 1e-9) -> None:
    """Check that every row of a question x category fraction table sums to 1."""

    totals = np.asarray(fractions.sum(axis=1), dtype=float)
    bad = [q for q, t in zip(fractions.index, totals) if not np.isclose(t, 1.0, rtol=0.0, atol=atol)]
    if bad:
        raise ValueError(f"Fractions do not sum to 1.0 for questions: {bad}")
