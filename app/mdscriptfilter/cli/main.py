"""Main CLI application entry point.

Defines the Typer application: one command that runs a Spotlight query
and prints Alfred Script Filter JSON.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from mdscriptfilter import __version__
from mdscriptfilter.backends.base import SearchBackendError
from mdscriptfilter.backends.spotlight import SpotlightBackend
from mdscriptfilter.core.config import ConfigError, load_config, load_image_formats
from mdscriptfilter.core.paths import get_home_dir, get_library_dirs
from mdscriptfilter.core.pipeline import DisplayOptions, ResultPipeline
from mdscriptfilter.models.search import SearchRequest
from mdscriptfilter.utils.formatting import print_error

logger = logging.getLogger(__name__)

_EPILOG = """\
Query predicates use the mdfind query syntax.

To find PDF files:
  mdscriptfilter 'kMDItemContentType == "com.adobe.pdf"'

Text files with the word "imagination" (case-insensitive) somewhere in the content:
  mdscriptfilter 'kMDItemContentType == "public.plain-text" && kMDItemTextContent == "*imagination*"c'

All screenshots on the Desktop and its folders, sorted by the most recently added:
  mdscriptfilter 'kMDItemIsScreenCapture == 1' --positive-scope ~/Desktop --sort-key kMDItemDateAdded

See Apple's File Metadata Query Expression Syntax and common metadata attribute keys documentation.
"""

app = typer.Typer(
    name="mdscriptfilter",
    help="Search Spotlight database and output result as Script Filter (or Grid View) JSON for Alfred.",
    epilog=_EPILOG,
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mdscriptfilter version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout carries only the JSON document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.command()
def main(
    query: Annotated[
        str,
        typer.Argument(help="The query predicate for the search, in mdfind query syntax."),
    ],
    positive_scope: Annotated[
        list[str] | None,
        typer.Option(
            "--positive-scope",
            help="Restrict search to folder. Can be used multiple times.",
        ),
    ] = None,
    negative_scope: Annotated[
        list[str] | None,
        typer.Option(
            "--negative-scope",
            help="Exclude folder from results. Can be used multiple times.",
        ),
    ] = None,
    exclude_library: Annotated[
        bool,
        typer.Option("--exclude-library", help="Exclude user Library folder from results."),
    ] = False,
    sort_key: Annotated[
        str | None,
        typer.Option(
            "--sort-key",
            help="Metadata field to use for sorting. [default: kMDItemFSName]",
            show_default=False,
        ),
    ] = None,
    sort_ascending: Annotated[
        bool,
        typer.Option("--sort-ascending", help="Sort in ascending order."),
    ] = False,
    display_images: Annotated[
        bool,
        typer.Option("--display-images", help="Preview images and PDFs for Grid View."),
    ] = False,
    hide_subtitle: Annotated[
        bool,
        typer.Option("--hide-subtitle", help="Do not show subtitles."),
    ] = False,
    match_path: Annotated[
        bool,
        typer.Option("--match-path", help="Use full path for filtering."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Config file to use instead of ~/.config/mdscriptfilter/config.toml.",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Search Spotlight database and output result as Script Filter (or Grid View) JSON for Alfred."""
    _configure_logging(verbose)

    try:
        config = load_config(config_path)
        image_formats = load_image_formats(config) if display_images else frozenset()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    request = SearchRequest(
        predicate=query,
        scopes=tuple(positive_scope or [get_home_dir()]),
        sort_key=sort_key or config.sort_key,
        ascending=sort_ascending,
    )
    logger.debug("Search request: %r", request)
    options = DisplayOptions(
        negative_scopes=tuple(negative_scope or []),
        exclude_library=exclude_library,
        hide_subtitle=hide_subtitle,
        match_path=match_path,
        display_images=display_images,
    )
    pipeline = ResultPipeline(
        SpotlightBackend(timeout=config.search_timeout),
        image_formats=image_formats,
        home=get_home_dir(),
        library_dirs=get_library_dirs(),
        placeholder_icon=config.placeholder_icon,
    )

    try:
        text = pipeline.run(request, options)
    except SearchBackendError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(text)


if __name__ == "__main__":
    app()
