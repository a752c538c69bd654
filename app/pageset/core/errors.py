from __future__ import annotations


class InvalidConfiguration(ValueError):
    """A PaginationSet was constructed with values that cannot paginate."""

    def __init__(self, field: str, value: int, requirement: str) -> None:
        super().__init__(f"{field} must be {requirement}, got {value}")
        self.field = field
        self.value = value
