"""
Result Types

Models returned to callers of the navigation API.
"""

from pydantic import BaseModel, Field


class ListingLine(BaseModel):
    """
    One rendered row of a listing.

    Attributes:
        name: Child name as addressed in a path
        text: Summary text (the bare name for grouping nodes)
        kind: Entity kind, None for grouping nodes
        error: Set when the row could not be rendered
    """

    name: str
    text: str
    kind: str | None = None
    error: str | None = Field(default=None, description="Why the summary is unavailable")

    @property
    def is_group(self) -> bool:
        return self.kind is None and self.error is None

    def as_tuple(self) -> tuple[str, str]:
        return (self.name, self.text)
