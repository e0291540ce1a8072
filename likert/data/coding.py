from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from likert.config import MISSING_CODES, MISSING_LABELS
from likert.data.scale import LikertScale
from likert.errors import UnknownCategoryError


_NORMALIZE_RE = re.compile(r"[^0-9a-zA-Z]+")


class _Unexpected:
    def __repr__(self) -> str:
        return "<unexpected>"


_UNEXPECTED = _Unexpected()


def _normalize_name(name: str) -> str:
    return _NORMALIZE_RE.sub("_", name).strip("_").lower()


def _normalize_label(value: str) -> str:
    return " ".join(value.split()).casefold()


def normalize_column_names(df: pd.DataFrame) -> Dict[str, str]:
    """Return a normalized-name -> exact-name mapping for df columns.

    This does not modify the DataFrame. It exists to support resilient lookups
    of question columns whose casing/spacing/punctuation differs between exports.
    """

    mapping: Dict[str, str] = {}
    collisions: Dict[str, list[str]] = {}

    for col in df.columns.astype(str).tolist():
        norm = _normalize_name(col)
        if norm in mapping and mapping[norm] != col:
            collisions.setdefault(norm, sorted({mapping[norm], col}))
        mapping[norm] = col

    if collisions:
        raise ValueError(f"Normalized column name collisions: {collisions}")

    return mapping


def resolve_questions(df: pd.DataFrame, questions: Iterable[str]) -> List[str]:
    """Map requested question labels to exact column names in df."""

    columns = set(df.columns.astype(str).tolist())
    normalized = None
    resolved: List[str] = []
    missing: List[str] = []

    for q in questions:
        if q in columns:
            resolved.append(q)
            continue
        if normalized is None:
            normalized = normalize_column_names(df)
        exact = normalized.get(_normalize_name(q))
        if exact is None:
            missing.append(q)
        else:
            resolved.append(exact)

    if missing:
        raise ValueError(f"Questions not found in response table: {missing}")
    return resolved


def _as_int_code(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def recode_likert(
    series: pd.Series,
    scale: LikertScale,
    *,
    missing_values: Tuple = MISSING_CODES,
    missing_labels: Tuple = MISSING_LABELS,
    numeric_codes: bool = True,
) -> pd.Series:
    """Recode raw survey answers to an ordered categorical over the scale.

    - labels match the scale after whitespace collapsing and case folding
    - integer codes 1..len(scale) map to scale positions when numeric_codes=True
    - missing_values / missing_labels map to NA
    - NaN stays NA

    Raises UnknownCategoryError if unexpected non-missing values are observed.
    """

    by_label = {_normalize_label(str(c)): c for c in scale.categories}
    skip_labels = {_normalize_label(v) for v in missing_labels}
    skip_codes = set(missing_values)

    def _to_label(v):
        if pd.isna(v):
            return np.nan
        if v in scale:
            return scale.categories[scale.position(v)]
        if isinstance(v, str):
            key = _normalize_label(v)
            if key in by_label:
                return by_label[key]
            if key in skip_labels:
                return np.nan
        code = _as_int_code(v)
        if code is not None:
            if numeric_codes and 1 <= code <= len(scale):
                return scale.categories[code - 1]
            if code in skip_codes:
                return np.nan
        return _UNEXPECTED

    raw = series.astype(object)
    mapped = raw.map(_to_label)
    is_unexpected = mapped.map(lambda v: v is _UNEXPECTED).astype(bool)
    if is_unexpected.any():
        unexpected = raw.loc[is_unexpected].unique()
        raise UnknownCategoryError(str(series.name), unexpected, scale.categories)

    dtype = pd.CategoricalDtype(categories=list(scale.categories), ordered=True)
    return mapped.astype(object).astype(dtype)


def summarize_missingness(df: pd.DataFrame, columns: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """Return per-column missingness summary in stable column order."""

    cols = list(columns) if columns is not None else df.columns.astype(str).tolist()
    n = len(df)
    rows = []
    for col in cols:
        n_missing = int(df[col].isna().sum())
        missing_rate = round(n_missing / n, 6) if n else np.nan
        rows.append({"column": col, "n": n, "n_missing": n_missing, "missing_rate": missing_rate})
    return pd.DataFrame(rows)
