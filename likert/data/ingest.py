from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from likert.config import (
    RANDOM_SEED,
    SAMPLE_MISSING_RATE,
    SAMPLE_N_RESPONDENTS,
    SAMPLE_QUESTIONS,
)
from likert.data.scale import LikertScale

logger = logging.getLogger(__name__)


def load_responses(path: Path, nrows: Optional[int] = None) -> pd.DataFrame:
    """Load a one-row-per-respondent response table (csv, xlsx or parquet)."""

    path = Path(path)
    suffix = path.suffix.lower()
    logger.info("Loading responses from %s", path)
    if suffix == ".csv":
        return pd.read_csv(path, nrows=nrows)
    if suffix == ".xlsx":
        return pd.read_excel(path, nrows=nrows)
    if suffix == ".parquet":
        df = pd.read_parquet(path)
        return df.head(nrows).copy() if nrows is not None else df
    raise ValueError(f"Unsupported response file type: {path.name} (expected .csv, .xlsx or .parquet)")


def make_sample_responses(
    scale: LikertScale,
    *,
    questions: Sequence[str] = SAMPLE_QUESTIONS,
    n_respondents: int = SAMPLE_N_RESPONDENTS,
    missing_rate: float = SAMPLE_MISSING_RATE,
    seed: int = RANDOM_SEED,
) -> pd.DataFrame:
    """Build a deterministic synthetic survey with a weight column.

    Each question gets its own lean, drawn from a Dirichlet around a tilted
    profile so the chart shows a mix of mostly-positive and mostly-negative items.
    """

    if n_respondents <= 0:
        raise ValueError("n_respondents must be a positive integer.")

    rng = np.random.default_rng(seed)
    k = len(scale)
    positions = np.arange(k) - (k - 1) / 2.0

    data = {}
    for q in questions:
        tilt = rng.normal(0.0, 0.6)
        profile = np.exp(tilt * positions)
        probs = rng.dirichlet(profile * 8.0)
        answers = rng.choice(np.array(scale.categories, dtype=object), size=n_respondents, p=probs)
        skipped = rng.random(n_respondents) < missing_rate
        answers[skipped] = None
        data[q] = answers

    df = pd.DataFrame(data)
    df["weight"] = np.round(rng.uniform(0.5, 1.5, size=n_respondents), 4)
    return df
