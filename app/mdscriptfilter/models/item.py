"""Script Filter item models.

This module defines the records Alfred renders as result rows. Optional
fields are None when absent; ``to_dict`` drops them entirely because the
launcher treats an explicit null differently from a missing key.
"""

from dataclasses import dataclass, field
from typing import Any

# Alfred item type: a file whose existence check is skipped
FILE_SKIPCHECK = "file:skipcheck"

# Icon type: show the Finder icon of the file instead of a preview
FILE_ICON = "fileicon"

NO_RESULTS_TITLE = "No Results"
NO_RESULTS_SUBTITLE = "No matches found for your query"


@dataclass(frozen=True, slots=True)
class Icon:
    """Icon of a result row.

    Attributes:
        path: File whose icon or preview is shown.
        type: FILE_ICON, or None to let the launcher render a live preview.
    """

    path: str
    type: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"path": self.path}
        if self.type is not None:
            result["type"] = self.type
        return result


@dataclass(frozen=True, slots=True)
class DisplayItem:
    """One result row for a matched file.

    Attributes:
        uid: Stable identity, the absolute path.
        title: Last path component.
        subtitle: Home-abbreviated path, or None when hidden.
        type: Always FILE_SKIPCHECK; results come from a live search.
        match: Full path for launcher-side filtering, or None.
        icon: Icon pointing at the file itself.
        arg: Value passed on when the row is actioned, the absolute path.
    """

    uid: str
    title: str
    icon: Icon
    arg: str
    subtitle: str | None = field(default=None)
    match: str | None = field(default=None)
    type: str = field(default=FILE_SKIPCHECK)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"uid": self.uid, "title": self.title}
        if self.subtitle is not None:
            result["subtitle"] = self.subtitle
        result["type"] = self.type
        if self.match is not None:
            result["match"] = self.match
        result["icon"] = self.icon.to_dict()
        result["arg"] = self.arg
        return result


@dataclass(frozen=True, slots=True)
class NoResultsItem:
    """Non-actionable placeholder row shown when nothing matched.

    Attributes:
        icon_path: Bundled placeholder image, or None to omit the icon.
    """

    icon_path: str | None = field(default=None)
    title: str = field(default=NO_RESULTS_TITLE)
    subtitle: str = field(default=NO_RESULTS_SUBTITLE)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "title": self.title,
            "subtitle": self.subtitle,
            "valid": False,
        }
        if self.icon_path is not None:
            result["icon"] = {"path": self.icon_path}
        return result


@dataclass(frozen=True, slots=True)
class ScriptFilterOutput:
    """Complete document emitted on stdout.

    Attributes:
        items: Result rows, or a single NoResultsItem.
    """

    items: tuple[DisplayItem | NoResultsItem, ...]

    @property
    def is_empty_result(self) -> bool:
        """Check if this document is the no-results placeholder."""
        return len(self.items) == 1 and isinstance(self.items[0], NoResultsItem)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"items": [item.to_dict() for item in self.items]}
