"""Tests for config loader."""

import pytest
from pathlib import Path

from sparselabel.core.config import Config, ParserOptions


class TestConfig:
    """Tests for Config loader."""

    def setup_method(self):
        """Reset singleton before each test."""
        Config.reset()

    def test_load_config(self, tmp_path):
        """Should load YAML config file."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
parser:
  line_format: sparse
  comment_marker: "%"
  label_index: 3
""")

        # Act
        config = Config.load(str(config_file))

        # Assert
        assert config.get("parser.comment_marker") == "%"
        assert config.get("parser.label_index") == 3

    def test_get_default_value(self, tmp_path):
        """Should return default when key not found."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text("key: value")
        config = Config.load(str(config_file))

        # Act
        result = config.get("nonexistent.key", "default")

        # Assert
        assert result == "default"

    def test_empty_file_gives_empty_config(self, tmp_path):
        """Should treat an empty YAML document as no settings."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        # Act
        config = Config.load(str(config_file))

        # Assert
        assert config.get("parser") is None
        assert config.get_section("parser") == {}

    def test_environment_override(self, tmp_path):
        """Should merge environment config over base."""
        # Arrange
        config_dir = tmp_path / "config"
        (config_dir / "environments").mkdir(parents=True)
        (config_dir / "parser.yaml").write_text("""
parser:
  comment_marker: "#"
  label_index: 1
""")
        (config_dir / "environments" / "dev.yaml").write_text("""
parser:
  label_index: 4
""")

        # Act
        config = Config.load(str(config_dir / "parser.yaml"), env="dev")

        # Assert
        assert config.get("parser.label_index") == 4  # Overridden
        assert config.get("parser.comment_marker") == "#"  # Preserved

    def test_environment_override_ignores_working_directory(self, tmp_path, monkeypatch):
        """Should find the override beside the config file, not under the cwd."""
        # Arrange
        config_dir = tmp_path / "settings"
        (config_dir / "environments").mkdir(parents=True)
        (config_dir / "parser.yaml").write_text("parser:\n  label_index: 1\n")
        (config_dir / "environments" / "prod.yaml").write_text("parser:\n  label_index: 2\n")
        elsewhere = tmp_path / "elsewhere"
        (elsewhere / "config" / "environments").mkdir(parents=True)
        (elsewhere / "config" / "environments" / "prod.yaml").write_text("parser:\n  label_index: 9\n")
        monkeypatch.chdir(elsewhere)

        # Act
        config = Config.load(str(config_dir / "parser.yaml"), env="prod")

        # Assert
        assert config.get("parser.label_index") == 2

    def test_missing_environment_keeps_base(self, tmp_path):
        """Should keep base values when no override file exists."""
        # Arrange
        config_file = tmp_path / "parser.yaml"
        config_file.write_text("parser:\n  label_index: 1\n")

        # Act
        config = Config.load(str(config_file), env="staging")

        # Assert
        assert config.get("parser.label_index") == 1

    def test_singleton_pattern(self, tmp_path):
        """Should return same instance on multiple loads."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text("key: value")

        # Act
        config1 = Config.load(str(config_file))
        config2 = Config.load(str(config_file))

        # Assert
        assert config1 is config2

    def test_file_not_found(self):
        """Should raise error when config file missing."""
        # Act & Assert
        with pytest.raises(FileNotFoundError):
            Config.load("/nonexistent/path/config.yaml")

    def test_shipped_config_loads(self):
        """Should load the bundled parser config."""
        # Arrange
        config_path = Path(__file__).parents[2] / "config" / "parser.yaml"

        # Act
        config = Config.load(str(config_path))

        # Assert
        assert config.get("parser.line_format") == "sparse"
        assert config.get("parser.label_index") is None


class TestParserOptions:
    """Tests for ParserOptions."""

    def setup_method(self):
        Config.reset()

    def test_defaults(self):
        """Should default to '#' comments and no label column."""
        options = ParserOptions()

        assert options.comment_marker == "#"
        assert options.label_index is None
        assert options.line_format == "sparse"
        assert options.encoding == "utf-8"

    def test_from_config(self, tmp_path):
        """Should read the parser section."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
parser:
  comment_marker: "%"
  label_index: "2"
""")
        config = Config.load(str(config_file))

        # Act
        options = ParserOptions.from_config(config)

        # Assert
        assert options.comment_marker == "%"
        assert options.label_index == 2
        assert options.line_format == "sparse"

    def test_from_config_missing_section(self, tmp_path):
        """Should fall back to defaults without a parser section."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text("other: 1")
        config = Config.load(str(config_file))

        # Act
        options = ParserOptions.from_config(config)

        # Assert
        assert options == ParserOptions()
