"""Conversion of matched paths into Script Filter items."""

import logging
import os
from collections.abc import Callable, Set

from mdscriptfilter.backends.base import ClassificationError
from mdscriptfilter.models.item import FILE_ICON, DisplayItem, Icon

logger = logging.getLogger(__name__)

Classifier = Callable[[str], str]


def abbreviate_home(path: str, home: str) -> str:
    """Replace a leading home directory with "~".

    Only whole path components match, so "/Users/meow" is left alone
    when home is "/Users/me".

    Args:
        path: Absolute path.
        home: Home directory.

    Returns:
        The abbreviated path, or the path unchanged.
    """
    home = home.rstrip("/")
    if not home:
        return path
    if path == home:
        return "~"
    if path.startswith(home + "/"):
        return "~" + path[len(home) :]
    return path


def icon_type_for(
    path: str,
    display_images: bool,
    classifier: Classifier,
    image_formats: Set[str],
) -> str | None:
    """Decide whether the launcher shows a preview or the file icon.

    Args:
        path: File path.
        display_images: Whether previews are wanted at all.
        classifier: Returns the content type of a path.
        image_formats: Content types that can be previewed.

    Returns:
        None for a live preview, FILE_ICON otherwise.
    """
    if not display_images:
        return FILE_ICON

    try:
        content_type = classifier(path)
    except ClassificationError as e:
        logger.debug("Falling back to file icon: %s", e)
        return FILE_ICON

    if content_type in image_formats:
        return None
    return FILE_ICON


def build_item(
    path: str,
    *,
    hide_subtitle: bool,
    match_path: bool,
    display_images: bool,
    classifier: Classifier,
    image_formats: Set[str],
    home: str,
) -> DisplayItem:
    """Build the result row for one matched file.

    The classifier is only called when display_images is set.

    Args:
        path: Absolute path of the match.
        hide_subtitle: Omit the subtitle.
        match_path: Let the launcher filter on the full path.
        display_images: Show previews for image formats.
        classifier: Returns the content type of a path.
        image_formats: Content types that can be previewed.
        home: Home directory used for "~" abbreviation.

    Returns:
        Immutable DisplayItem.
    """
    return DisplayItem(
        uid=path,
        title=os.path.basename(path.rstrip("/")) or path,
        subtitle=None if hide_subtitle else abbreviate_home(path, home),
        match=path if match_path else None,
        icon=Icon(
            path=path,
            type=icon_type_for(path, display_images, classifier, image_formats),
        ),
        arg=path,
    )
