class LikertError(ValueError):
    """Base class for survey data and scale problems."""


class EmptyQuestionError(LikertError):
    """A question has no valid (non-missing) responses to aggregate."""

    def __init__(self, question: str):
        self.question = question
        super().__init__(
            f"Question {question!r} has zero non-missing responses. "
            "Exclude it from the chart or supply more data."
        )


class DegenerateScaleError(LikertError):
    """The configured scale cannot be split into two sides."""


class UnknownCategoryError(LikertError):
    """A response value is not a member of the declared scale."""

    def __init__(self, question: str, values, categories):
        self.question = question
        self.values = list(values)
        super().__init__(
            f"Unexpected responses in {question!r}. "
            f"Observed unexpected values: {sorted(map(str, self.values))}; "
            f"expected one of {list(categories)}."
        )
