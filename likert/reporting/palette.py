from __future__ import annotations

from typing import List, Sequence

import numpy as np
import matplotlib
from matplotlib.colors import to_hex

from likert.config import DEFAULT_CMAP


def diverging_palette(n: int, cmap: str = DEFAULT_CMAP) -> List[str]:
    """Sample n hex colors from a diverging colormap, most negative first.

    The extremes of the colormap are trimmed so the darkest segments still
    carry readable labels. With RdBu the negative end is red.
    """

    if n < 1:
        raise ValueError("Palette size must be a positive integer.")
    colormap = matplotlib.colormaps[cmap]
    if n == 1:
        return [to_hex(colormap(0.5))]
    return [to_hex(colormap(x)) for x in np.linspace(0.1, 0.9, n)]


def validate_palette(palette: Sequence[str], scale) -> None:
    if len(palette) != len(scale):
        raise ValueError(
            f"Palette has {len(palette)} colors but the scale has {len(scale)} categories; "
            "supply exactly one color per scale point."
        )
