"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from bibscan.config import ParserConfig, get_config_paths, load_config


class TestParserConfig:
    """Test the config struct."""

    def test_defaults(self) -> None:
        config = ParserConfig()

        assert config.predefined_months is True
        assert config.lowercase_tags is False

    def test_from_dict(self) -> None:
        config = ParserConfig.from_dict({"lowercase_tags": True})

        assert config.lowercase_tags is True
        assert config.predefined_months is True

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid configuration"):
            ParserConfig.from_dict({"colour": "blue"})

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            ParserConfig.from_dict({"lowercase_tags": "sometimes"})

    def test_from_file(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"predefined_months": False}))

        assert ParserConfig.from_file(path) == ParserConfig(predefined_months=False)

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ParserConfig.from_file(path) == ParserConfig()

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ParserConfig.from_file(path)

    def test_non_mapping(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            ParserConfig.from_file(path)


class TestLoadConfig:
    """Test merging of files and environment."""

    def test_paths(self, tmp_path) -> None:
        paths = get_config_paths()

        assert paths[0] == tmp_path / "xdg" / "bibscan" / "config.yaml"
        assert paths[1:] == [Path(".bibscan.yaml"), Path("bibscan.yaml")]

    def test_no_files(self) -> None:
        assert load_config() == ParserConfig()

    def test_later_files_win(self, tmp_path) -> None:
        user_dir = tmp_path / "xdg" / "bibscan"
        user_dir.mkdir(parents=True)
        (user_dir / "config.yaml").write_text(
            "lowercase_tags: true\npredefined_months: false\n"
        )
        (tmp_path / "bibscan.yaml").write_text("predefined_months: true\n")

        config = load_config()

        assert config.lowercase_tags is True
        assert config.predefined_months is True

    def test_explicit_path_after_defaults(self, tmp_path) -> None:
        (tmp_path / ".bibscan.yaml").write_text("lowercase_tags: true\n")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("lowercase_tags: false\n")

        assert load_config(explicit).lowercase_tags is False

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_env_truthy(self, monkeypatch, value) -> None:
        monkeypatch.setenv("BIBSCAN_LOWERCASE_TAGS", value)

        assert load_config().lowercase_tags is True

    def test_env_overrides_files(self, monkeypatch, tmp_path) -> None:
        (tmp_path / "bibscan.yaml").write_text("predefined_months: true\n")
        monkeypatch.setenv("BIBSCAN_PREDEFINED_MONTHS", "0")

        assert load_config().predefined_months is False
