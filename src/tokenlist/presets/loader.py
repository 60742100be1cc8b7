"""
Preset loader - discovers and loads attribute presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (a directory of ``<name>.yaml`` files)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from tokenlist.constants import PRESETS_DIR_ENV
from tokenlist.models.preset import AttributePreset, PresetMetadata

logger = logging.getLogger(__name__)


class PresetLoader:
    """
    Discovers and loads attribute presets.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the preset loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, AttributePreset | None] = {}

    def list_presets(self) -> list[PresetMetadata]:
        """
        List all available presets.

        Returns presets from both library and project, with project
        presets taking precedence.
        """
        presets: dict[str, PresetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                preset = self._load_preset_file(path)
                if preset:
                    presets[preset.name] = PresetMetadata.from_preset(preset)

        return list(presets.values())

    def get_preset(self, name: str) -> AttributePreset | None:
        """
        Get a preset by attribute name.

        Project presets take precedence over library presets.

        Args:
            name: Attribute name

        Returns:
            AttributePreset if found, None otherwise
        """
        # Misses are cached too, until clear_cache()
        if name in self._cache:
            return self._cache[name]

        preset = None
        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                preset = self._load_preset_file(path)
                if preset:
                    break

        self._cache[name] = preset
        return preset

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()

    def _load_preset_file(self, path: Path) -> AttributePreset | None:
        """Load a preset from a YAML file, skipping unreadable files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            preset = AttributePreset.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping preset file %s: %s", path, e)
            return None

        if preset.name != path.stem:
            logger.warning(
                "Skipping preset file %s: name %r does not match file name", path, preset.name
            )
            return None

        logger.debug("Loaded preset %r from %s", preset.name, path)
        return preset


@lru_cache(maxsize=1)
def get_default_loader() -> PresetLoader:
    """
    Process-wide preset loader.

    Uses the built-in library, plus the project directory named by the
    TOKENLIST_PRESETS_DIR environment variable when it is set.
    """
    project_dir = os.getenv(PRESETS_DIR_ENV)
    return PresetLoader(project_path=Path(project_dir) if project_dir else None)
