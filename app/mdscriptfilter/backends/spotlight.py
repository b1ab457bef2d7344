"""Spotlight search backend implementation.

Queries the macOS metadata index with the mdfind and mdls command line
tools.
"""

import logging
import math
import os
import subprocess
from pathlib import Path

from mdscriptfilter.backends.base import (
    BackendUnavailableError,
    ClassificationError,
    InvalidPredicateError,
    ScopeError,
    SearchBackend,
    SearchBackendError,
    SearchTimeoutError,
)
from mdscriptfilter.models.search import SearchRequest, SearchResult
from mdscriptfilter.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# Attribute holding the file name; sorted locally without calling mdls
FS_NAME_KEY = "kMDItemFSName"
CONTENT_TYPE_KEY = "kMDItemContentType"

# mdls prints this for attributes a file does not have
_MDLS_NULL = "(null)"

# mdfind writes this to stderr (and may still exit 0) for bad predicates
_QUERY_FAILED = "Failed to create query"

# Keep mdls argument lists well below ARG_MAX
_MDLS_BATCH_SIZE = 256

SortValue = tuple[int, int, float, str]


class SpotlightBackend(SearchBackend):
    """Backend for the Spotlight metadata index.

    Uses `mdfind -0 -onlyin <scope>... <predicate>` for the query. mdfind
    without -live performs the initial gathering pass and exits, so the
    process exit is the completion signal. Ordering is applied afterwards:
    file names are sorted directly, every other key is read with `mdls`.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize the backend.

        Args:
            timeout: Seconds to wait for each metadata command, or None to wait
                until it finishes.
        """
        self._timeout = timeout

    def is_available(self) -> bool:
        """Check if mdfind and mdls are available."""
        return command_exists("mdfind") and command_exists("mdls")

    def search(self, request: SearchRequest) -> SearchResult:
        """Run a Spotlight query to completion.

        Args:
            request: Predicate, scopes, and ordering.

        Returns:
            SearchResult with paths in the requested order.

        Raises:
            BackendUnavailableError: If mdfind is missing or cannot be started.
            ScopeError: If a scope is not an accessible directory.
            InvalidPredicateError: If mdfind rejects the predicate.
            SearchTimeoutError: If the configured timeout elapses.
        """
        if not self.is_available():
            msg = "Spotlight (mdfind) is not available on this system"
            raise BackendUnavailableError(msg)

        for scope in request.scopes:
            self._check_scope(scope)

        args = ["mdfind", "-0"]
        for scope in request.scopes:
            args.extend(["-onlyin", scope])
        args.append(request.predicate)

        logger.debug("Running %s", args)
        result = self._run(args)

        if not result.success or _QUERY_FAILED in result.stderr:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            msg = f"mdfind rejected the query {request.predicate!r}: {detail}"
            raise InvalidPredicateError(msg)

        paths = [path for path in result.stdout.split("\0") if path.strip()]
        logger.debug("mdfind returned %d paths", len(paths))

        ordered = self._sort(paths, request.sort_key, request.ascending)
        return SearchResult(paths=tuple(ordered))

    def classify(self, path: str) -> str:
        """Read the content type of a file from its metadata.

        Args:
            path: Absolute path to the file.

        Returns:
            Uniform type identifier such as "public.png".

        Raises:
            ClassificationError: If mdls fails or the file has no content type.
        """
        try:
            result = self._run(["mdls", "-raw", "-name", CONTENT_TYPE_KEY, path])
        except SearchBackendError as e:
            raise ClassificationError(f"Cannot classify {path}: {e}") from e

        content_type = result.stdout.strip()
        if not result.success or not content_type or content_type == _MDLS_NULL:
            msg = f"No content type for {path}"
            raise ClassificationError(msg)
        return content_type

    def _run(self, args: list[str]) -> CommandResult:
        """Run a metadata command, translating process errors.

        Args:
            args: Command and arguments.

        Returns:
            CommandResult of the finished command.

        Raises:
            SearchTimeoutError: If the command exceeds the timeout.
            BackendUnavailableError: If the command cannot be started.
        """
        try:
            return run_command(args, timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"{args[0]} did not finish within {self._timeout} seconds"
            raise SearchTimeoutError(msg) from e
        except OSError as e:
            msg = f"Cannot run {args[0]}: {e}"
            raise BackendUnavailableError(msg) from e

    def _check_scope(self, scope: str) -> None:
        """Ensure a scope is a readable directory.

        Args:
            scope: Directory path.

        Raises:
            ScopeError: If the directory is missing or not readable.
        """
        path = Path(scope)
        if not path.is_dir():
            msg = f"Scope directory does not exist: {scope}"
            raise ScopeError(msg)
        if not os.access(path, os.R_OK | os.X_OK):
            msg = f"Scope directory is not accessible: {scope}"
            raise ScopeError(msg)

    def _sort(self, paths: list[str], sort_key: str, ascending: bool) -> list[str]:
        """Order paths by a metadata attribute.

        Missing values sort before present ones in ascending order (and
        after them in descending order). Equal values keep mdfind's order.

        Args:
            paths: Paths in mdfind order.
            sort_key: Metadata attribute name.
            ascending: Sort direction.

        Returns:
            New list of paths in the requested order.
        """
        if not paths:
            return []

        if sort_key == FS_NAME_KEY:
            keys: list[SortValue] = [_text_sort_value(os.path.basename(path)) for path in paths]
        else:
            keys = [_sort_value(value) for value in self._read_attribute(paths, sort_key)]

        keyed = list(zip(keys, paths, strict=True))
        keyed.sort(key=lambda pair: pair[0], reverse=not ascending)
        return [path for _, path in keyed]

    def _read_attribute(self, paths: list[str], key: str) -> list[str | None]:
        """Read one attribute for many files.

        Paths are passed to mdls in batches. When a batch fails (usually a
        file removed since the query ran) its files are read one at a time.

        Args:
            paths: Absolute paths.
            key: Metadata attribute name.

        Returns:
            Raw attribute value per path, None where absent or unreadable.
        """
        values: list[str | None] = []
        for start in range(0, len(paths), _MDLS_BATCH_SIZE):
            batch = paths[start : start + _MDLS_BATCH_SIZE]
            result = self._run(["mdls", "-raw", "-name", key, *batch])
            raw = result.stdout.split("\0")
            if len(raw) == len(batch) + 1 and raw[-1] == "":
                raw.pop()

            if result.success and len(raw) == len(batch):
                values.extend(_null_to_none(value) for value in raw)
                continue

            logger.debug("mdls batch read of %s failed, reading files one by one", key)
            for path in batch:
                single = self._run(["mdls", "-raw", "-name", key, path])
                values.append(_null_to_none(single.stdout) if single.success else None)

        return values


def _null_to_none(value: str) -> str | None:
    """Map the mdls null marker to None."""
    if value == _MDLS_NULL or value == "":
        return None
    return value


def _sort_value(value: str | None) -> SortValue:
    """Build a comparable key from a raw attribute value.

    Finite numbers compare numerically and sort before text; "nan" and
    "inf" compare as text. Absent values sort before everything else.
    """
    if value is None:
        return (0, 0, 0.0, "")
    try:
        number = float(value)
    except ValueError:
        return _text_sort_value(value)
    if not math.isfinite(number):
        return _text_sort_value(value)
    return (1, 0, number, "")


def _text_sort_value(value: str) -> SortValue:
    """Build a key that compares a value as literal text."""
    return (1, 1, 0.0, value)
