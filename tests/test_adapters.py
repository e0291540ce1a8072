import pandas as pd
import pytest

from likert.config import AGREE_4, AGREE_5
from likert.data.reshape import reshape_for_diverging
from likert.reporting.adapters import SIGNED_COLUMNS, to_offset_frame, to_plot_frame, to_signed_frame


SD, D, N, A, SA = AGREE_5


@pytest.fixture
def signed5(scale5, palette5):
    df = pd.DataFrame(
        {
            "q1": [SD] * 2 + [D] * 3 + [A] * 4 + [SA] * 1,
            "q2": [N] * 2 + [A] * 2 + [None] * 6,
        }
    )
    return reshape_for_diverging(df, ["q1", "q2"], scale5, palette5)


def test_offset_frame_starts_bars_at_minus_negative_mass(signed5):
    frame = to_offset_frame(signed5)

    assert frame.index.tolist() == ["q1", "q2"]
    assert frame.columns.tolist() == AGREE_5 + ["offset"]
    assert frame.loc["q1", "offset"] == pytest.approx(-0.5)
    assert frame.loc["q2", "offset"] == pytest.approx(-0.25)
    assert frame.loc["q2", N] == pytest.approx(0.5)
    assert frame[AGREE_5].sum(axis=1).tolist() == pytest.approx([1.0, 1.0])


def test_signed_frame_negates_left_side(signed5):
    frame = to_signed_frame(signed5)

    assert frame.columns.tolist() == SIGNED_COLUMNS
    assert len(frame) == 2 * 6
    left = frame.loc[frame["side"] == "negative"]
    right = frame.loc[frame["side"] == "positive"]
    assert (left["fraction"] <= 0).all()
    assert (right["fraction"] >= 0).all()

    q1_left = left.loc[left["question"] == "q1"].sort_values("order")
    assert q1_left["category"].tolist() == [N, D, SD]
    assert q1_left["fraction"].tolist() == pytest.approx([0.0, -0.3, -0.2])
    assert q1_left["color"].tolist() == ["c2", "c1", "c0"]
    assert frame["fraction"].abs().groupby(frame["question"]).sum().tolist() == pytest.approx([1.0, 1.0])


def test_even_scale_signed_frame_has_no_neutral_rows(scale4, palette4):
    df = pd.DataFrame({"q1": AGREE_4})
    frame = to_signed_frame(reshape_for_diverging(df, ["q1"], scale4, palette4))

    assert len(frame) == 4
    assert frame.loc[frame["side"] == "negative", "category"].tolist() == ["Disagree", "Strongly disagree"]


def test_to_plot_frame_dispatches_on_style(signed5):
    pd.testing.assert_frame_equal(to_plot_frame(signed5, "offset"), to_offset_frame(signed5))
    pd.testing.assert_frame_equal(to_plot_frame(signed5, "signed"), to_signed_frame(signed5))
    with pytest.raises(ValueError, match="Unknown chart style"):
        to_plot_frame(signed5, "radial")
