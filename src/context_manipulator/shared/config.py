"""Configuration classes for the context manipulator.

This module provides the configuration object read by the command-line tool
and by callers that want to persist a context choice alongside their own
settings.
"""

import codecs
import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional

from .errors import ManipulationError

MODES = ("encode", "filter")
STRING_FIELDS = (
    "default_context",
    "mode",
    "input_encoding",
    "output_encoding",
    "logging_level",
)
LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ManipulationError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ManipulationConfig:
    """Settings for a manipulation run.

    Immutable and therefore safe to share between threads. Use ``override``
    to derive a modified copy.
    """

    default_context: str = "html_content"
    mode: str = "encode"
    input_encoding: str = "utf-8"
    output_encoding: str = "utf-8"
    logging_level: str = "WARNING"
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        for field_name in STRING_FIELDS:
            self._require_string(field_name, getattr(self, field_name))
        if self.correlation_id is not None:
            self._require_string("correlation_id", self.correlation_id)

        self._validate_context()

        if self.mode not in MODES:
            raise ConfigValidationError(
                f"mode must be one of {', '.join(MODES)}, got {self.mode!r}",
                field_name="mode",
                suggestions=list(MODES),
            )

        for field_name in ("input_encoding", "output_encoding"):
            encoding = getattr(self, field_name)
            try:
                codecs.lookup(encoding)
            except LookupError as e:
                raise ConfigValidationError(
                    f"{field_name} names an unknown codec: {encoding!r}",
                    field_name=field_name,
                    suggestions=["utf-8", "utf-16", "latin-1"],
                ) from e

        if self.logging_level.upper() not in LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {', '.join(LOGGING_LEVELS)}",
                field_name="logging_level",
                suggestions=list(LOGGING_LEVELS),
            )

    @staticmethod
    def _require_string(field_name: str, value: Any) -> None:
        if not isinstance(value, str):
            raise ConfigValidationError(
                f"{field_name} must be a string, got {type(value).__name__}",
                field_name=field_name,
            )

    def _validate_context(self) -> None:
        # Imported here; the registry itself depends on the shared layer
        from context_manipulator.api.registry import ManipulationType

        try:
            ManipulationType.from_name(self.default_context)
        except ValueError as e:
            raise ConfigValidationError(
                str(e),
                field_name="default_context",
                suggestions=[context.value for context in ManipulationType],
            ) from e

    @property
    def context(self) -> Any:
        """``ManipulationType`` named by ``default_context``."""
        from context_manipulator.api.registry import ManipulationType

        return ManipulationType.from_name(self.default_context)

    def override(self, **kwargs: Any) -> "ManipulationConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ManipulationConfig()
            >>> config.override(default_context="json_value").default_context
            'json_value'
        """
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ManipulationConfig":
        """Create configuration from dictionary.

        Keys that are not configuration fields are ignored.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_json(cls, json_str: str) -> "ManipulationConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)
