"""Configuration schema definitions using Pydantic for validation.

Configuration can come from a TOML/JSON file or string (see
``mvsgraph.config.loader``); command-line flags override loaded values.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

EXPORT_FORMATS = ("json", "dot", "html")


class GoConfig(BaseModel):
    """Settings for invoking the go tool.

    Attributes:
        binary: Go executable name or path.
        timeout: Timeout for ``go mod graph`` (seconds).
        workdir: Module directory to run in; defaults to the current one.
    """

    binary: str = "go"
    timeout: int = Field(default=120, ge=1, le=3600)
    workdir: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("binary")
    @classmethod
    def validate_binary(cls, v: str) -> str:
        """Reject empty executable names."""
        if not v.strip():
            raise ValueError("go binary must be a non-empty string")
        return v


class ExportConfig(BaseModel):
    """Settings for exporting the computed graph.

    Attributes:
        format: Output format (json, dot or html).
        output: Output file path; defaults to ``dependency_tree.<format>``.
        title: Page title used by the HTML exporter.
        open_browser: Write HTML to a temporary file and open it.
    """

    format: str = "html"
    output: Optional[str] = None
    title: str = "Dependency Tree"
    open_browser: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate that the export format is supported."""
        fmt = v.lower()
        if fmt not in EXPORT_FORMATS:
            raise ValueError(
                f"Invalid export format '{v}'. Valid formats: {', '.join(EXPORT_FORMATS)}"
            )
        return fmt

    def default_output(self) -> str:
        """Return the output path, falling back to ``dependency_tree.<format>``."""
        return self.output or f"dependency_tree.{self.format}"


class MVSGraphConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        root: Explicit root module path; inferred from input when unset.
        go_mod: Path to go.mod used to read the root module path.
        go: Go tool settings.
        export: Export settings.
    """

    root: Optional[str] = None
    go_mod: Optional[str] = None
    go: GoConfig = Field(default_factory=GoConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "MVSGraphConfig":
        """Return configuration with built-in defaults."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MVSGraphConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
