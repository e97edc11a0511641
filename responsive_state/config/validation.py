"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

KNOWN_OPTIONS = {"infinity", "initial_media_type"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates breakpoint configuration."""

    @staticmethod
    def validate_breakpoints(breakpoints: Any, infinity: str = "infinity") -> list[ValidationError]:
        """Validate a breakpoint mapping."""
        errors = []

        if not isinstance(breakpoints, dict):
            return [ValidationError(
                field="breakpoints",
                message="Must be a mapping of name to width",
                value=breakpoints
            )]

        for name, value in breakpoints.items():
            field_name = f"breakpoints.{name}"

            if not isinstance(name, str) or not name:
                errors.append(ValidationError(
                    field=field_name,
                    message="Breakpoint name must be a non-empty string",
                    value=name
                ))
                continue

            # The unbounded breakpoint is added by the reducer
            if name == infinity:
                errors.append(ValidationError(
                    field=field_name,
                    message=f"'{infinity}' is reserved for the unbounded breakpoint",
                    value=value
                ))
                continue

            if isinstance(value, bool):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a width or a media query string",
                    value=value
                ))
            elif isinstance(value, (int, float)):
                if math.isnan(value) or math.isinf(value) or value < 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Width must be a finite non-negative number",
                        value=value
                    ))
            elif not isinstance(value, str):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a width or a media query string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_options(options: Any) -> list[ValidationError]:
        """Validate reducer options."""
        errors = []

        if not isinstance(options, dict):
            return [ValidationError(
                field="options",
                message="Must be a mapping",
                value=options
            )]

        for name in options:
            if name not in KNOWN_OPTIONS:
                errors.append(ValidationError(
                    field=f"options.{name}",
                    message="Unknown option",
                    value=options[name]
                ))

        if "infinity" in options:
            value = options["infinity"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="options.infinity",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "initial_media_type" in options:
            value = options["initial_media_type"]
            if value is not None and not isinstance(value, str):
                errors.append(ValidationError(
                    field="options.initial_media_type",
                    message="Must be a string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        options = config.get("options", {})
        errors.extend(ConfigValidator.validate_options(options))

        infinity = options.get("infinity", "infinity") if isinstance(options, dict) else "infinity"
        if "breakpoints" in config:
            errors.extend(ConfigValidator.validate_breakpoints(config["breakpoints"], infinity))

        return errors
