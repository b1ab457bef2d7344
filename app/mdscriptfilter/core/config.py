"""Configuration loading for mdscriptfilter.

Settings live in an optional TOML file at
~/.config/mdscriptfilter/config.toml. Every field has a default, so a
missing file is not an error. The set of previewable image formats is
bundled with the package and may be extended from the config file.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mdscriptfilter.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_SORT_KEY = "kMDItemFSName"
DEFAULT_PLACEHOLDER_ICON = "icon.png"


class FilterConfig(BaseModel):
    """User settings for the Script Filter.

    Attributes:
        sort_key: Metadata attribute used for sorting when --sort-key is not given.
        placeholder_icon: Icon path shown on the "No Results" item in image mode.
        search_timeout: Seconds to wait for the search, or None to wait indefinitely.
        extra_image_formats: Content types to preview in addition to the bundled set.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sort_key: Annotated[
        str,
        Field(min_length=1, description="Default metadata sort key"),
    ] = DEFAULT_SORT_KEY
    placeholder_icon: Annotated[
        str,
        Field(min_length=1, description="Icon for the empty-result item"),
    ] = DEFAULT_PLACEHOLDER_ICON
    search_timeout: Annotated[
        float | None,
        Field(gt=0, description="Search timeout in seconds (None = unbounded)"),
    ] = None
    extra_image_formats: Annotated[
        list[str],
        Field(description="Additional previewable content types"),
    ] = []


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FilterConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FilterConfig. Defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return FilterConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = FilterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def get_bundled_formats_path() -> Path:
    """Get the bundled image format list path.

    Returns:
        Path to the bundled data/image_formats.toml
    """
    return resources.files("mdscriptfilter.data").joinpath("image_formats.toml")  # type: ignore[return-value]


def load_image_formats(config: FilterConfig | None = None) -> frozenset[str]:
    """Load the set of content types that can be previewed.

    Args:
        config: Settings whose extra_image_formats extend the bundled list.

    Returns:
        Frozen set of content type identifiers.

    Raises:
        ConfigError: If the bundled list is missing or malformed.
    """
    path = get_bundled_formats_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        msg = f"Could not load bundled image formats ({e}). Installation may be corrupted."
        raise ConfigError(msg) from e

    formats: object = data.get("formats", [])
    if not isinstance(formats, list):
        msg = f"Invalid 'formats' section in {path}"
        raise ConfigError(msg)

    result = {str(fmt) for fmt in formats}
    if config is not None:
        result.update(config.extra_image_formats)
    return frozenset(result)
