from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Sequence, Tuple

from likert.errors import DegenerateScaleError


@dataclass(frozen=True)
class LikertScale:
    """Ordered response labels, most negative first.

    An odd-length scale always has a neutral midpoint: if `neutral` is not
    given the center label is used. An even-length scale has none, and
    asking for one raises DegenerateScaleError.
    """

    categories: Tuple[Hashable, ...]
    neutral: Optional[Hashable] = None

    def __init__(self, categories: Sequence[Hashable], neutral=None):
        cats = tuple(categories)
        if len(cats) < 2:
            raise DegenerateScaleError(f"A Likert scale needs at least two categories; got {list(cats)}.")
        dupes = sorted({str(c) for c in cats if cats.count(c) > 1})
        if dupes:
            raise DegenerateScaleError(f"Duplicate scale categories: {dupes}")

        if isinstance(neutral, (list, tuple, set, frozenset)):
            labels = list(neutral)
            if len(labels) != 1:
                raise DegenerateScaleError(
                    f"Exactly one neutral category is supported; got {labels}. "
                    "Recode neutral-like answers to a single label or treat them as missing."
                )
            neutral = labels[0]

        if neutral is None and len(cats) % 2 == 1:
            neutral = cats[len(cats) // 2]

        if neutral is not None:
            if neutral not in cats:
                raise DegenerateScaleError(f"Neutral category {neutral!r} is not in the scale {list(cats)}.")
            if len(cats) % 2 == 0:
                raise DegenerateScaleError(
                    f"An even-length scale has no midpoint; cannot use {neutral!r} as neutral."
                )
            if cats.index(neutral) != len(cats) // 2:
                raise DegenerateScaleError(
                    f"Neutral category {neutral!r} must sit at the center of the scale {list(cats)}."
                )

        object.__setattr__(self, "categories", cats)
        object.__setattr__(self, "neutral", neutral)

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self):
        return iter(self.categories)

    def __contains__(self, label) -> bool:
        return label in self.categories

    @property
    def has_midpoint(self) -> bool:
        return self.neutral is not None

    @property
    def midpoint_index(self) -> Optional[int]:
        return len(self.categories) // 2 if self.has_midpoint else None

    @property
    def negative_categories(self) -> Tuple[Hashable, ...]:
        """Categories strictly below the midpoint, nearest to neutral first."""
        return tuple(reversed(self.categories[: len(self.categories) // 2]))

    @property
    def positive_categories(self) -> Tuple[Hashable, ...]:
        """Categories strictly above the midpoint, nearest to neutral first."""
        start = len(self.categories) // 2 + (1 if self.has_midpoint else 0)
        return self.categories[start:]

    def position(self, label) -> int:
        return self.categories.index(label)
