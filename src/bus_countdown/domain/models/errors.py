"""Errors raised when a request admits no interpretation."""


class InvalidRequest(ValueError):
    """The current combination of constraints admits no interpretation at all."""


class EmptyCandidateSet(InvalidRequest):
    """One of the three candidate sets became empty."""

    def __init__(self, dimension: str) -> None:
        """Initialize with the name of the emptied dimension ("routes", "directions" or "stops")."""
        self.dimension = dimension
        super().__init__(f"no valid {dimension} for this request")
