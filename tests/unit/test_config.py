"""Unit tests for configuration management."""

import math
from pathlib import Path

import pytest

from responsive_state.config.defaults import get_default_config
from responsive_state.config.loader import ConfigLoader
from responsive_state.config.validation import ConfigValidator
from responsive_state.errors import ConfigurationError


def write_config(directory: Path, text: str) -> Path:
    path = directory / "responsive.yaml"
    path.write_text(text)
    return path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.breakpoints == {"extraSmall": 480, "small": 768, "medium": 992, "large": 1200}
        assert config.options.infinity == "infinity"
        assert config.options.initial_media_type is None


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_missing_file_uses_defaults(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["breakpoints"]["small"] == 768
        assert config["options"] == {"infinity": "infinity", "initial_media_type": None}

    def test_file_overrides_defaults(self, tmp_path) -> None:
        write_config(tmp_path, "breakpoints:\n  phone: 600\n  tablet: 1024\noptions:\n  infinity: desktop\n")
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["breakpoints"] == {"phone": 600, "tablet": 1024}
        assert config["options"]["infinity"] == "desktop"
        assert config["options"]["initial_media_type"] is None

    def test_overrides_win(self, tmp_path) -> None:
        write_config(tmp_path, "breakpoints:\n  phone: 600\noptions:\n  infinity: desktop\n")
        config = ConfigLoader.create(tmp_path).merge_config({
            "options": {"initial_media_type": "phone"},
        })

        assert config["breakpoints"] == {"phone": 600}
        assert config["options"] == {"infinity": "desktop", "initial_media_type": "phone"}

    def test_empty_file(self, tmp_path) -> None:
        write_config(tmp_path, "")
        assert ConfigLoader.create(tmp_path).load_file_config() == {}

    def test_invalid_yaml(self, tmp_path) -> None:
        write_config(tmp_path, "breakpoints: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_file_config()
        assert exc_info.value.source.endswith("responsive.yaml")

    def test_non_mapping_file(self, tmp_path) -> None:
        write_config(tmp_path, "- 480\n- 768\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_file_config()
        assert exc_info.value.context == {"type": "list"}

    def test_invalid_values_raise(self, tmp_path) -> None:
        write_config(tmp_path, "breakpoints:\n  phone: -1\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).merge_config()

        assert [error.field for error in exc_info.value.errors] == ["breakpoints.phone"]

    def test_create_reducer(self, tmp_path) -> None:
        write_config(tmp_path, "breakpoints:\n  phone: 600\noptions:\n  infinity: desktop\n")
        reducer = ConfigLoader.create(tmp_path).create_reducer(
            extra_fields=lambda state: {"source": "file"},
        )
        state = reducer(None, {"type": "@@INIT"})

        assert state["mediaType"] == "desktop"
        assert state["breakpoints"] == {"phone": 600, "desktop": math.inf}
        assert state["source"] == "file"

    def test_empty_breakpoints_in_file(self, tmp_path) -> None:
        write_config(tmp_path, "breakpoints: {}\n")
        reducer = ConfigLoader.create(tmp_path).create_reducer()
        state = reducer(None, {"type": "@@INIT"})

        assert state["breakpoints"] == {"infinity": math.inf}

    def test_shipped_config_is_valid(self) -> None:
        config = ConfigLoader.create().merge_config()
        assert "small" in config["breakpoints"]


class TestConfigValidator:
    """Test suite for configuration validator."""

    def test_valid_breakpoints(self) -> None:
        errors = ConfigValidator.validate_breakpoints({"small": 768, "print": "print", "half": 10.5})
        assert errors == []

    @pytest.mark.parametrize("value", [-1, float("nan"), math.inf, True, None, [480]])
    def test_invalid_widths(self, value) -> None:
        errors = ConfigValidator.validate_breakpoints({"small": value})
        assert len(errors) == 1
        assert errors[0].field == "breakpoints.small"

    def test_reserved_infinity_name(self) -> None:
        errors = ConfigValidator.validate_breakpoints({"infinity": 5000})
        assert errors[0].message == "'infinity' is reserved for the unbounded breakpoint"

    def test_reserved_custom_infinity_name(self) -> None:
        errors = ConfigValidator.validate_config({
            "breakpoints": {"huge": 5000},
            "options": {"infinity": "huge"},
        })
        assert [error.field for error in errors] == ["breakpoints.huge"]

    def test_breakpoints_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_breakpoints([480, 768])
        assert errors[0].field == "breakpoints"

    def test_non_string_name(self) -> None:
        errors = ConfigValidator.validate_breakpoints({480: 480})
        assert errors[0].message == "Breakpoint name must be a non-empty string"

    def test_invalid_options(self) -> None:
        errors = ConfigValidator.validate_options({
            "infinity": "",
            "initial_media_type": 3,
            "colour": "red",
        })
        assert sorted(error.field for error in errors) == [
            "options.colour", "options.infinity", "options.initial_media_type"
        ]

    def test_options_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"options": "fast"})
        assert errors[0].field == "options"
