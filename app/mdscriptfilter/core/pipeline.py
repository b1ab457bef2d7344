"""Result pipeline: search, filter, build, serialize.

The pipeline runs once per process. It moves strictly forward through
its states; only the search can fail, and a failure leaves the pipeline
in FAILED without producing any output.
"""

import logging
from collections.abc import Iterable, Set
from dataclasses import dataclass, field
from enum import Enum

from mdscriptfilter.backends.base import SearchBackend, SearchBackendError
from mdscriptfilter.core.config import DEFAULT_PLACEHOLDER_ICON
from mdscriptfilter.core.exclusion import build_exclusion_set, is_excluded
from mdscriptfilter.core.items import build_item
from mdscriptfilter.core.serializer import serialize
from mdscriptfilter.models.item import DisplayItem, NoResultsItem, ScriptFilterOutput
from mdscriptfilter.models.search import SearchRequest, SearchResult

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Stages of a pipeline run."""

    IDLE = "idle"
    SEARCHING = "searching"
    FILTERING = "filtering"
    BUILDING = "building"
    SERIALIZING = "serializing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Options controlling exclusion and item rendering.

    Attributes:
        negative_scopes: Path prefixes removed from the results.
        exclude_library: Also remove the user Library directories.
        hide_subtitle: Omit subtitles.
        match_path: Emit the full path as the match field.
        display_images: Preview images and PDFs instead of file icons.
    """

    negative_scopes: tuple[str, ...] = field(default=())
    exclude_library: bool = field(default=False)
    hide_subtitle: bool = field(default=False)
    match_path: bool = field(default=False)
    display_images: bool = field(default=False)


class ResultPipeline:
    """Turns one search request into a Script Filter JSON document.

    Example:
        >>> pipeline = ResultPipeline(SpotlightBackend(), image_formats=formats, home="/Users/me")
        >>> text = pipeline.run(request, DisplayOptions(hide_subtitle=True))
    """

    def __init__(
        self,
        backend: SearchBackend,
        *,
        image_formats: Set[str],
        home: str,
        library_dirs: Iterable[str] = (),
        placeholder_icon: str = DEFAULT_PLACEHOLDER_ICON,
    ) -> None:
        """Initialize the pipeline.

        Args:
            backend: Search backend to query.
            image_formats: Content types that can be previewed.
            home: Home directory for "~" abbreviation.
            library_dirs: User Library directories for exclude_library.
            placeholder_icon: Icon of the no-results item in image mode.
        """
        self._backend = backend
        self._image_formats = image_formats
        self._home = home
        self._library_dirs = tuple(library_dirs)
        self._placeholder_icon = placeholder_icon
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        """Current stage of the run."""
        return self._state

    def _enter(self, state: PipelineState) -> None:
        logger.debug("Pipeline %s -> %s", self._state.value, state.value)
        self._state = state

    def run(self, request: SearchRequest, options: DisplayOptions) -> str:
        """Execute the whole pipeline.

        Args:
            request: Query, scopes, and ordering.
            options: Exclusion and display options.

        Returns:
            JSON text of the result list or the no-results placeholder.

        Raises:
            SearchBackendError: If the search fails. No output is produced.
            RuntimeError: If the pipeline has already run.
        """
        if self._state is not PipelineState.IDLE:
            msg = f"Pipeline already ran (state: {self._state.value})"
            raise RuntimeError(msg)

        self._enter(PipelineState.SEARCHING)
        try:
            result = self._backend.search(request)
        except SearchBackendError:
            self._enter(PipelineState.FAILED)
            raise

        self._enter(PipelineState.FILTERING)
        paths = self.filter(result, options)

        self._enter(PipelineState.BUILDING)
        output = self.build(paths, options)
        if output.is_empty_result:
            logger.debug("No items left, emitting placeholder")

        self._enter(PipelineState.SERIALIZING)
        text = serialize(output)

        self._enter(PipelineState.DONE)
        return text

    def filter(self, result: SearchResult, options: DisplayOptions) -> list[str]:
        """Drop excluded paths, keeping the backend's order.

        Args:
            result: Paths returned by the backend.
            options: Provides negative scopes and the library flag.

        Returns:
            Surviving paths.
        """
        exclusions = build_exclusion_set(
            options.negative_scopes,
            exclude_library=options.exclude_library,
            library_dirs=self._library_dirs,
        )
        kept = [path for path in result.paths if not is_excluded(path, exclusions)]
        logger.debug("Excluded %d of %d paths", len(result) - len(kept), len(result))
        return kept

    def build(self, paths: list[str], options: DisplayOptions) -> ScriptFilterOutput:
        """Build the output document for the surviving paths.

        Args:
            paths: Filtered paths in result order.
            options: Display options.

        Returns:
            ScriptFilterOutput with one item per path, or the placeholder.
        """
        items: list[DisplayItem] = [
            build_item(
                path,
                hide_subtitle=options.hide_subtitle,
                match_path=options.match_path,
                display_images=options.display_images,
                classifier=self._backend.classify,
                image_formats=self._image_formats,
                home=self._home,
            )
            for path in paths
        ]

        if not items:
            icon_path = self._placeholder_icon if options.display_images else None
            return ScriptFilterOutput(items=(NoResultsItem(icon_path=icon_path),))
        return ScriptFilterOutput(items=tuple(items))
