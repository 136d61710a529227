"""Domain value objects for post listings.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class PostSortField(str, Enum):
    """Field a post listing is sorted by."""

    DATE = "date"
    TITLE = "title"
    AUTHOR = "author"

    @classmethod
    def parse(cls, value: str | None) -> "PostSortField":
        """Parse a client-supplied sort field, falling back to date."""
        try:
            return cls(value)
        except ValueError:
            return cls.DATE


class SortOrder(str, Enum):
    """Direction of a post listing sort."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """Parse a client-supplied order; anything but ``asc`` is descending."""
        return cls.ASC if value == cls.ASC.value else cls.DESC
