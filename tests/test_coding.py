import numpy as np
import pandas as pd
import pytest

from likert.config import AGREE_4, AGREE_5
from likert.data.coding import (
    normalize_column_names,
    recode_likert,
    resolve_questions,
    summarize_missingness,
)
from likert.data.scale import LikertScale
from likert.errors import UnknownCategoryError


def test_recode_matches_labels_loosely(scale5):
    s = pd.Series(["  strongly   AGREE ", "Disagree", None, "no answer"], name="q1")
    out = recode_likert(s, scale5)

    assert out.tolist()[:2] == ["Strongly agree", "Disagree"]
    assert out.isna().tolist() == [False, False, True, True]
    assert isinstance(out.dtype, pd.CategoricalDtype)
    assert out.dtype.ordered
    assert list(out.dtype.categories) == AGREE_5


def test_recode_numeric_codes_and_special_missing(scale5):
    s = pd.Series([1, 5, 3.0, "2", 9, np.nan], name="q1")
    out = recode_likert(s, scale5)

    assert out.iloc[:4].tolist() == ["Strongly disagree", "Strongly agree", AGREE_5[2], "Disagree"]
    assert out.iloc[4:].isna().all()


def test_recode_rejects_out_of_scale_values(scale4):
    s = pd.Series([1, 5, "Neutral"], name="q7")
    with pytest.raises(UnknownCategoryError) as excinfo:
        recode_likert(s, scale4)

    assert excinfo.value.question == "q7"
    assert sorted(map(str, excinfo.value.values)) == ["5", "Neutral"]


def test_recode_without_numeric_codes_rejects_integers(scale5):
    with pytest.raises(UnknownCategoryError):
        recode_likert(pd.Series([1, 2], name="q1"), scale5, numeric_codes=False)


def test_normalize_column_names_and_collisions():
    df = pd.DataFrame(columns=["Q1: Enjoy work", "weight"])
    assert normalize_column_names(df) == {"q1_enjoy_work": "Q1: Enjoy work", "weight": "weight"}

    clash = pd.DataFrame(columns=["Q 1", "q_1"])
    with pytest.raises(ValueError, match="collisions"):
        normalize_column_names(clash)


def test_resolve_questions_exact_then_normalized():
    df = pd.DataFrame(columns=["Q1: Enjoy work", "Q2 Workload"])
    assert resolve_questions(df, ["Q2 Workload", "q1 enjoy work"]) == ["Q2 Workload", "Q1: Enjoy work"]

    with pytest.raises(ValueError, match="Questions not found"):
        resolve_questions(df, ["Q3"])


def test_summarize_missingness():
    df = pd.DataFrame({"a": [1, None, 3, None], "b": [1, 2, 3, 4]})
    out = summarize_missingness(df, ["a"])

    assert out.to_dict(orient="records") == [{"column": "a", "n": 4, "n_missing": 2, "missing_rate": 0.5}]
    assert summarize_missingness(df)["column"].tolist() == ["a", "b"]


def test_recode_numeric_label_scale_keeps_labels():
    scale = LikertScale([1, 2, 3, 4, 5])
    out = recode_likert(pd.Series([1, 5.0, "3", 9, None], name="q1"), scale)

    assert out.iloc[:3].tolist() == [1, 5, 3]
    assert out.iloc[3:].isna().all()
    assert list(out.dtype.categories) == [1, 2, 3, 4, 5]
