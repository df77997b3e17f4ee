"""Configuration model and loaders for clipimport.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ImportConfig`: normalized runtime settings for an import run.
- `ConfigLoader`: static construction helpers for `ImportConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import parse_count, parse_toggle, setting_text
from .text.language import DEFAULT_SAMPLE_SIZE

_DEFAULT_MIN_IMPORT_CHARS = 10
_DEFAULT_OUTPUT_FORMAT = "summary"
_SUPPORTED_OUTPUT_FORMATS = frozenset({"summary", "json"})


@dataclass(slots=True)
class ImportConfig:
    """Runtime configuration for one import run.

    Attributes:
        language_sample_size: Leading tokens inspected by language detection.
        min_import_chars: Trimmed length a text must exceed to count as
            substantial content; `0` warns only on empty input.
        use_sample_content: Replace the provided text with placeholder content.
        output_format: CLI output rendering, `summary` or `json`.
    """

    language_sample_size: int = DEFAULT_SAMPLE_SIZE
    min_import_chars: int = _DEFAULT_MIN_IMPORT_CHARS
    use_sample_content: bool = False
    output_format: str = _DEFAULT_OUTPUT_FORMAT

    def validate(self) -> None:
        """Validate configuration values before an import run."""

        if self.language_sample_size < 1:
            raise ValueError("`language_sample_size` must be a positive integer.")
        if self.min_import_chars < 0:
            raise ValueError("`min_import_chars` must be a non-negative integer.")
        if self.output_format not in _SUPPORTED_OUTPUT_FORMATS:
            supported = ", ".join(sorted(_SUPPORTED_OUTPUT_FORMATS))
            raise ValueError(
                f"Unsupported `output_format` value `{self.output_format}`; "
                f"supported: {supported}."
            )


class ConfigLoader:
    """Factory methods for creating `ImportConfig` from external sources."""

    _ENV_KEYS = {
        "language_sample_size": "CLIPIMPORT_LANGUAGE_SAMPLE_SIZE",
        "min_import_chars": "CLIPIMPORT_MIN_IMPORT_CHARS",
        "use_sample_content": "CLIPIMPORT_USE_SAMPLE_CONTENT",
        "output_format": "CLIPIMPORT_OUTPUT_FORMAT",
    }

    @staticmethod
    def from_yaml(path: Path) -> ImportConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._ENV_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"YAML `{path}` includes unsupported key(s): {key_list}.")

        return ConfigLoader._build_config(
            {field: (payload.get(field), field) for field in ConfigLoader._ENV_KEYS}
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ImportConfig:
        """Create a validated config from `CLIPIMPORT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        return ConfigLoader._build_config(
            {
                field: (env_map.get(env_key), env_key)
                for field, env_key in ConfigLoader._ENV_KEYS.items()
            }
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config(settings: Mapping[str, tuple[object, str]]) -> ImportConfig:
        """Build a validated config from `field -> (raw value, source label)` pairs.

        Blank values leave the field at its default.
        """

        config = ImportConfig()

        raw, label = settings["language_sample_size"]
        if setting_text(raw) is not None:
            config.language_sample_size = parse_count(raw, label)

        raw, label = settings["min_import_chars"]
        if setting_text(raw) is not None:
            config.min_import_chars = parse_count(raw, label, minimum=0)

        raw, label = settings["use_sample_content"]
        if setting_text(raw) is not None:
            config.use_sample_content = parse_toggle(raw, label)

        raw, _ = settings["output_format"]
        output_format = setting_text(raw)
        if output_format is not None:
            config.output_format = output_format.lower()

        config.validate()
        return config
