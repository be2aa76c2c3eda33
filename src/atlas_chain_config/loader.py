from __future__ import annotations

import json
import logging
import os
from importlib import resources
from pathlib import Path

from . import constants as const
from .errors import ChainConfigError, RegistryLoadError
from .registry import ChainConfigRegistry

logger = logging.getLogger(__name__)

# Module-level cached baseline registry (immutable; safe to share)
_DEFAULT_REGISTRY: ChainConfigRegistry | None = None


def _parse(text: str, *, source: str) -> ChainConfigRegistry:
    try:
        document: object = json.loads(text)
    except json.JSONDecodeError as e:
        raise RegistryLoadError(source, "not valid JSON") from e

    try:
        registry = ChainConfigRegistry.from_json(document)
    except ChainConfigError as e:
        raise RegistryLoadError(source, str(e)) from e

    logger.info(
        "Loaded chain config from %s: %d networks, %d entries",
        source,
        len(registry.network_ids()),
        len(registry),
    )
    return registry


def load_registry(path: str | os.PathLike[str]) -> ChainConfigRegistry:
    """
    Load a registry from a chain config JSON file.

    Raises RegistryLoadError if the file cannot be read or decoded; an unreadable
    file never yields an empty registry.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise RegistryLoadError(source, e.strerror or type(e).__name__) from e
    return _parse(text, source=source)


def load_bundled_registry() -> ChainConfigRegistry:
    """Load the chain config shipped with the package."""
    source = f"{const.DATA_PACKAGE}/{const.DATA_FILE_NAME}"
    try:
        text = (
            resources.files(const.DATA_PACKAGE)
            .joinpath(const.DATA_FILE_NAME)
            .read_text(encoding="utf-8")
        )
    except (OSError, ModuleNotFoundError) as e:
        raise RegistryLoadError(source, str(e)) from e
    return _parse(text, source=source)


def get_default_registry() -> ChainConfigRegistry:
    """
    Get the cached baseline registry.

    Loaded on first use from the file named by the ATLAS_CHAIN_CONFIG_PATH
    environment variable, or from the bundled chain config otherwise.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        override = os.environ.get(const.CONFIG_PATH_ENV_VAR)
        _DEFAULT_REGISTRY = (
            load_registry(override) if override else load_bundled_registry()
        )
    return _DEFAULT_REGISTRY


def reset_default_registry() -> None:
    """Drop the cached baseline so the next access reloads it."""
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = None
