"""Path exclusion by prefix.

Matching is a plain string prefix test, not path-segment aware: an
exclusion of "/Users/me/Lib" also hides "/Users/me/Library2". Existing
workflows rely on this, so it is kept as is.
"""

from collections.abc import Iterable

ExclusionSet = frozenset[str]


def build_exclusion_set(
    negative_scopes: Iterable[str],
    exclude_library: bool = False,
    library_dirs: Iterable[str] = (),
) -> ExclusionSet:
    """Collect the prefixes that remove a path from the results.

    Args:
        negative_scopes: User-supplied paths to exclude.
        exclude_library: Whether to add the user Library directories.
        library_dirs: The user Library directories.

    Returns:
        Frozen set of path prefixes.
    """
    prefixes = set(negative_scopes)
    if exclude_library:
        prefixes.update(library_dirs)
    return frozenset(prefixes)


def is_excluded(path: str, exclusions: Iterable[str]) -> bool:
    """Check if a path starts with any excluded prefix.

    Args:
        path: Candidate path.
        exclusions: Path prefixes.

    Returns:
        True if some prefix matches, False otherwise (always for no prefixes).
    """
    return any(path.startswith(prefix) for prefix in exclusions)
