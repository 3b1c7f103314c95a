"""Formatter preset registry — loads named option sets from YAML.

- One or more *.yaml files in definitions/, each with a top-level
  ``presets:`` list
- Lazy loading with _loaded guard
- In-memory dict keyed by preset key
- Global singleton via get_preset_registry()
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from src.config import get_presets_dir
from src.formatter.schemas import FormatterOptions, FormatterPreset

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"


class PresetRegistry:
    """Registry of formatter presets loaded from YAML files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = get_presets_dir() or DEFINITIONS_DIR
        self.definitions_dir = definitions_dir
        self._presets: dict[str, FormatterPreset] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all presets. Invalid entries are logged and skipped."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Preset definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for yaml_file in sorted(self.definitions_dir.glob("*.yaml")):
            try:
                with open(yaml_file) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.error(f"Failed to read presets from {yaml_file}: {e}")
                continue

            entries = data.get("presets") if isinstance(data, dict) else None
            if not isinstance(entries, list):
                logger.error(
                    f"Failed to read presets from {yaml_file}: "
                    f"expected a top-level 'presets' list"
                )
                continue

            for preset_data in entries:
                try:
                    preset = FormatterPreset.model_validate(preset_data)
                    # Reject presets whose options the formatter would refuse
                    FormatterOptions.model_validate(preset.options)
                except Exception as e:
                    logger.error(f"Failed to load preset from {yaml_file}: {e}")
                    continue
                self._presets[preset.key] = preset
                logger.debug(f"Loaded formatter preset: {preset.key}")

        self._loaded = True
        logger.info(f"Loaded {len(self._presets)} formatter presets")

    def get(self, key: str) -> Optional[FormatterPreset]:
        """Get a preset by key."""
        self.load()
        return self._presets.get(key)

    def list_all(self, tag: Optional[str] = None) -> list[FormatterPreset]:
        """List presets sorted by key, optionally filtered by tag."""
        self.load()
        presets = sorted(self._presets.values(), key=lambda p: p.key)
        if tag:
            presets = [p for p in presets if tag in p.tags]
        return presets

    def list_keys(self) -> list[str]:
        self.load()
        return sorted(self._presets.keys())

    def count(self) -> int:
        self.load()
        return len(self._presets)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._presets.clear()
        self.load()


# Global registry instance
_registry: Optional[PresetRegistry] = None


def get_preset_registry() -> PresetRegistry:
    """Get the global preset registry instance."""
    global _registry
    if _registry is None:
        _registry = PresetRegistry()
        _registry.load()
    return _registry
