"""Tests for the PodcastId value object."""

import pytest

from podcastdir.catalog.ids import PodcastId
from podcastdir.utils.errors import InvalidIdError


class TestPodcastId:
    """Tests for PodcastId.create and equality."""

    @pytest.mark.parametrize("raw", [123456, "123456", "  123456  "])
    def test_create_normalizes(self, raw) -> None:
        """Numbers and padded strings normalize to the bare digits."""
        assert PodcastId.create(raw).value == "123456"
        assert PodcastId.create(raw).get_value() == "123456"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_create_rejects_empty(self, raw: str) -> None:
        """Empty and whitespace-only ids are rejected."""
        with pytest.raises(InvalidIdError, match="cannot be empty"):
            PodcastId.create(raw)

    @pytest.mark.parametrize("raw", ["abc123", "12 34", "-1", "1.5"])
    def test_create_rejects_non_numeric(self, raw: str) -> None:
        """Anything but digits is rejected."""
        with pytest.raises(InvalidIdError, match="must be numeric"):
            PodcastId.create(raw)

    @pytest.mark.parametrize("raw", ["١٢٣", "１２３", "۱۲۳"])
    def test_create_rejects_non_ascii_digits(self, raw: str) -> None:
        """Only ASCII 0-9 count as digits."""
        with pytest.raises(InvalidIdError, match="must be numeric"):
            PodcastId.create(raw)

    def test_invalid_id_is_value_error(self) -> None:
        """InvalidIdError can be caught as ValueError."""
        with pytest.raises(ValueError):
            PodcastId.create("x")

    def test_create_is_idempotent(self) -> None:
        """Re-creating from an id's value yields an equal id."""
        first = PodcastId.create(" 42 ")
        again = PodcastId.create(first.get_value())

        assert again == first
        assert again.equals(first)
        assert PodcastId.create(first) is first

    def test_equality_and_hash(self) -> None:
        """Ids compare and hash by value."""
        assert PodcastId.create("1") == PodcastId.create(1)
        assert PodcastId.create("1") != PodcastId.create("2")
        assert len({PodcastId.create("1"), PodcastId.create(" 1")}) == 1
        assert PodcastId.create("1") != "1"

    def test_immutable(self) -> None:
        """Attributes cannot be reassigned."""
        pid = PodcastId.create("1")
        with pytest.raises(AttributeError):
            pid._value = "2"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(PodcastId.create("77")) == "77"
        assert repr(PodcastId.create("77")) == "PodcastId('77')"
