"""Configuration loader with layered parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging.config import get_logger
from ..state.reducer import ExtraFields, ResponsiveStateReducer, create_responsive_state_reducer
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

logger = get_logger(__name__)

CONFIG_FILENAME = "responsive.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """Load the YAML configuration file, or {} when there is none."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Cannot parse {self.config_file}: {e}",
                source=str(self.config_file),
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{self.config_file} must contain a mapping",
                source=str(self.config_file),
                context={"type": type(file_config).__name__},
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with layered precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Configuration file
        3. Defaults (lowest priority)

        A `breakpoints` mapping replaces the lower layers' breakpoints as a
        whole; `options` are merged key by key.

        Raises:
            ConfigurationError: If the merged configuration fails validation
        """
        config: dict[str, Any] = {
            "breakpoints": dict(self.defaults.breakpoints),
            "options": {
                "infinity": self.defaults.options.infinity,
                "initial_media_type": self.defaults.options.initial_media_type,
            },
        }

        for layer in (self.load_file_config(), overrides or {}):
            if "breakpoints" in layer:
                config["breakpoints"] = layer["breakpoints"]
            if "options" in layer:
                options = layer["options"]
                config["options"] = {**config["options"], **options} if isinstance(options, dict) else options

        errors = ConfigValidator.validate_config(config)
        if errors:
            logger.warning(
                "Invalid responsive configuration",
                source=str(self.config_file),
                errors=[f"{error.field}: {error.message}" for error in errors],
            )
            raise ConfigurationError(
                f"Invalid responsive configuration ({len(errors)} errors)",
                errors=errors,
                source=str(self.config_file),
            )

        return config

    def create_reducer(
        self,
        overrides: Optional[dict[str, Any]] = None,
        extra_fields: Optional[ExtraFields] = None
    ) -> ResponsiveStateReducer:
        """Create a reducer from the merged configuration."""
        config = self.merge_config(overrides)
        options = config["options"]
        return create_responsive_state_reducer(
            config["breakpoints"],
            initial_media_type=options.get("initial_media_type"),
            infinity=options.get("infinity", "infinity"),
            extra_fields=extra_fields,
        )
