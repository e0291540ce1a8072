import matplotlib

matplotlib.use("Agg")

import pytest

from likert.config import AGREE_4, AGREE_5
from likert.data.scale import LikertScale




@pytest.fixture
def scale5() -> LikertScale:
    return LikertScale(AGREE_5)


@pytest.fixture
def scale4() -> LikertScale:
    return LikertScale(AGREE_4)


@pytest.fixture
def palette5():
    return ["c0", "c1", "c2", "c3", "c4"]


@pytest.fixture
def palette4():
    return ["c0", "c1", "c2", "c3"]
