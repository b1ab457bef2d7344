"""Unit tests for prefix exclusion."""

import pytest
from mdscriptfilter.core.exclusion import build_exclusion_set, is_excluded


class TestIsExcluded:
    """Tests for is_excluded function."""

    def test_empty_set_never_excludes(self) -> None:
        """No prefixes means nothing is excluded."""
        assert is_excluded("/Users/me/a.txt", frozenset()) is False
        assert is_excluded("", frozenset()) is False

    def test_path_is_its_own_prefix(self) -> None:
        """A path listed in the set is excluded."""
        assert is_excluded("/Users/me/a.txt", {"/Users/me/a.txt"}) is True

    def test_descendant_is_excluded(self) -> None:
        """Paths below an excluded folder are excluded."""
        assert is_excluded("/Users/me/Library/x.txt", {"/Users/me/Library"}) is True

    def test_unrelated_path_is_kept(self) -> None:
        """Paths without a matching prefix are kept."""
        assert is_excluded("/Users/me/Desktop/a.txt", {"/Users/me/Library"}) is False

    def test_prefix_match_is_not_segment_aware(self) -> None:
        """A partial folder name still matches as a string prefix."""
        assert is_excluded("/Users/me/Library2/x.txt", {"/Users/me/Lib"}) is True

    def test_any_member_matches(self) -> None:
        """One matching prefix out of many is enough."""
        exclusions = {"/Volumes", "/Users/me/Downloads", "/tmp"}
        assert is_excluded("/Users/me/Downloads/file.zip", exclusions) is True

    @pytest.mark.parametrize(
        ("path", "prefix", "expected"),
        [
            ("/a/b/c", "/a", True),
            ("/a/b/c", "/a/b/c/d", False),
            ("/a/b/c", "/b", False),
            ("/a/b/c", "", True),
        ],
    )
    def test_matches_str_startswith(self, path: str, prefix: str, expected: bool) -> None:
        """Result agrees with a literal string prefix test."""
        assert is_excluded(path, {prefix}) is expected


class TestBuildExclusionSet:
    """Tests for build_exclusion_set function."""

    def test_negative_scopes_only(self) -> None:
        """Library directories are ignored unless requested."""
        result = build_exclusion_set(["/tmp"], exclude_library=False, library_dirs=["/Users/me/Library"])
        assert result == frozenset({"/tmp"})

    def test_library_added_when_requested(self) -> None:
        """exclude_library unions the library directories."""
        result = build_exclusion_set(["/tmp"], exclude_library=True, library_dirs=["/Users/me/Library"])
        assert result == frozenset({"/tmp", "/Users/me/Library"})

    def test_empty_inputs(self) -> None:
        """No scopes and no library gives an empty set."""
        assert build_exclusion_set([]) == frozenset()

    def test_result_is_frozen(self) -> None:
        """Exclusion set is read-only."""
        assert isinstance(build_exclusion_set(["/tmp"]), frozenset)
