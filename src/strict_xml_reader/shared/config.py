"""Configuration for the strict XML reader.

A :class:`ReaderConfig` selects the parse engine that builds the tree the
reader navigates, and the limits applied before parsing. Configurations are
immutable; use :meth:`ReaderConfig.override` to derive a modified copy.
"""

import json
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class ParseEngine(Enum):
    """Parse engines able to produce the tree the reader consumes."""

    EXPAT = "expat"  # xml.dom.minidom; keeps CDATA and comments distinct
    LXML = "lxml"    # lxml.etree; CDATA is folded into text by libxml2


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable settings for reading XML documents."""

    engine: ParseEngine = ParseEngine.EXPAT
    max_input_size_bytes: Optional[int] = None
    allow_external_entities: bool = False
    correlation_id: Optional[str] = None

    # Metadata
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if not isinstance(self.engine, ParseEngine):
            raise ConfigValidationError(
                f"engine must be a ParseEngine, not {self.engine!r}",
                field_name="engine",
                suggestions=[engine.name for engine in ParseEngine],
            )
        if self.max_input_size_bytes is not None and self.max_input_size_bytes <= 0:
            raise ConfigValidationError(
                "max_input_size_bytes must be > 0 or None",
                field_name="max_input_size_bytes",
            )
        if self.allow_external_entities and self.engine is not ParseEngine.LXML:
            raise ConfigValidationError(
                "allow_external_entities is only supported by the lxml engine",
                field_name="allow_external_entities",
                suggestions=["Use engine=ParseEngine.LXML"],
            )

    def override(self, **kwargs: Any) -> "ReaderConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ReaderConfig()
            >>> config.override(engine=ParseEngine.LXML).engine
            <ParseEngine.LXML: 'lxml'>
        """
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            result[config_field.name] = value.name if isinstance(value, Enum) else value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReaderConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than silently dropped.
        """
        known = {config_field.name for config_field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                suggestions=sorted(known),
            )

        values = dict(data)
        engine = values.get("engine")
        if isinstance(engine, str):
            try:
                values["engine"] = ParseEngine[engine.upper()]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown parse engine {engine!r}",
                    field_name="engine",
                    suggestions=[member.name for member in ParseEngine],
                ) from e
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "ReaderConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def default(cls) -> "ReaderConfig":
        """Create the default preset: expat engine, no size limit."""
        return cls(name="default")

    @classmethod
    def lxml(cls) -> "ReaderConfig":
        """Create a preset reading through lxml's hardened parser."""
        return cls(engine=ParseEngine.LXML, name="lxml")
