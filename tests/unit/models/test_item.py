"""Unit tests for Script Filter item models."""

import dataclasses

import pytest
from mdscriptfilter.models.item import (
    FILE_ICON,
    FILE_SKIPCHECK,
    DisplayItem,
    Icon,
    NoResultsItem,
    ScriptFilterOutput,
)


@pytest.fixture
def item() -> DisplayItem:
    """A fully populated item."""
    return DisplayItem(
        uid="/Users/me/a.txt",
        title="a.txt",
        subtitle="~/a.txt",
        match="/Users/me/a.txt",
        icon=Icon(path="/Users/me/a.txt", type=FILE_ICON),
        arg="/Users/me/a.txt",
    )


class TestIcon:
    """Tests for Icon dataclass."""

    def test_with_type(self) -> None:
        """Type is emitted when present."""
        assert Icon(path="/a", type=FILE_ICON).to_dict() == {"path": "/a", "type": "fileicon"}

    def test_without_type(self) -> None:
        """Absent type means live preview."""
        assert Icon(path="/a").to_dict() == {"path": "/a"}


class TestDisplayItem:
    """Tests for DisplayItem dataclass."""

    def test_type_defaults_to_skipcheck(self, item: DisplayItem) -> None:
        """Items skip the launcher's existence check."""
        assert item.type == FILE_SKIPCHECK == "file:skipcheck"

    def test_to_dict_key_order(self, item: DisplayItem) -> None:
        """Keys follow the Script Filter schema order."""
        assert list(item.to_dict()) == ["uid", "title", "subtitle", "type", "match", "icon", "arg"]

    def test_to_dict_drops_absent(self, item: DisplayItem) -> None:
        """Absent subtitle and match are left out."""
        bare = dataclasses.replace(item, subtitle=None, match=None)
        assert list(bare.to_dict()) == ["uid", "title", "type", "icon", "arg"]

    def test_is_immutable(self, item: DisplayItem) -> None:
        """Items cannot be modified after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.title = "b.txt"  # type: ignore[misc]


class TestNoResultsItem:
    """Tests for NoResultsItem dataclass."""

    def test_without_icon(self) -> None:
        """Default placeholder has no icon."""
        assert NoResultsItem().to_dict() == {
            "title": "No Results",
            "subtitle": "No matches found for your query",
            "valid": False,
        }

    def test_with_icon(self) -> None:
        """Icon path is wrapped in an icon object."""
        assert NoResultsItem(icon_path="icon.png").to_dict()["icon"] == {"path": "icon.png"}


class TestScriptFilterOutput:
    """Tests for ScriptFilterOutput dataclass."""

    def test_to_dict(self, item: DisplayItem) -> None:
        """Items are wrapped under a single key."""
        data = ScriptFilterOutput(items=(item,)).to_dict()
        assert list(data) == ["items"]
        assert data["items"] == [item.to_dict()]

    def test_is_empty_result(self, item: DisplayItem) -> None:
        """Only the placeholder document counts as empty."""
        assert ScriptFilterOutput(items=(NoResultsItem(),)).is_empty_result is True
        assert ScriptFilterOutput(items=(item,)).is_empty_result is False
