"""
Configuration Loader.

Reads a YAML file into a ScreenerConfig. A named profile is another YAML
file under `profiles/` next to the main file; its values are merged over
the main file key by key before validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from profile_screener.config.models import ScreenerConfig

PROFILES_DIRNAME = "profiles"


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Return base updated with overlay; nested mappings merge recursively."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """YAML-backed source of ScreenerConfig objects."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory that relative config paths resolve against
        """
        self._base_path = Path(base_path) if base_path is not None else Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ScreenerConfig:
        """
        Read, merge and validate a configuration file.

        Args:
            config_path: YAML file, absolute or relative to base_path
            profile: Optional profile merged from profiles/<name>.yaml next
                     to the config file

        Raises:
            FileNotFoundError: If the file or the profile is missing
            ValueError: If a YAML document is not a mapping
            ValidationError: If a value is out of range
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        raw = self._read(path)
        if profile:
            profile_path = path.parent / PROFILES_DIRNAME / f"{profile}.yaml"
            if not profile_path.is_file():
                raise FileNotFoundError(f"Profile not found: {profile}")
            raw = deep_merge(raw, self._read(profile_path))

        return self.load_from_dict(raw)

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> ScreenerConfig:
        return ScreenerConfig.model_validate(dict(config_dict))

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        text = path.read_text(encoding="utf-8")
        document = yaml.safe_load(text)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(f"Config root must be a mapping: {path}")
        return document


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ScreenerConfig:
    """Shortcut for ConfigLoader(base_path).load(config_path, profile)."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
