"""Catalog identifier value object."""

import re

from podcastdir.utils.errors import InvalidIdError

_NUMERIC_ID = re.compile(r"^[0-9]+$")


class PodcastId:
    """Validated, normalized iTunes collection id.

    Instances are immutable and compare by value, so they can be used
    as dictionary keys and inside frozen models.

    Example:
        >>> PodcastId.create("  1535809341 ").value
        '1535809341'
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        object.__setattr__(self, "_value", value)

    @classmethod
    def create(cls, value: "str | int | PodcastId") -> "PodcastId":
        """Validate raw input and build a PodcastId.

        Args:
            value: Raw id as string or number

        Returns:
            PodcastId holding the trimmed digits

        Raises:
            InvalidIdError: If the value is empty or not purely numeric
        """
        if isinstance(value, PodcastId):
            return value

        raw = str(value).strip()
        if not raw:
            raise InvalidIdError("PodcastId cannot be empty")
        if not _NUMERIC_ID.match(raw):
            raise InvalidIdError("PodcastId must be numeric")

        return cls(raw)

    @property
    def value(self) -> str:
        return self._value

    def get_value(self) -> str:
        return self._value

    def equals(self, other: "PodcastId") -> bool:
        return self == other

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("PodcastId is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PodcastId):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PodcastId({self._value!r})"
