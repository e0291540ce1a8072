from pathlib import Path

from likert.config import FIGURE_DPI


def save_figure(fig, path: Path, dpi: int = FIGURE_DPI) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    return path
