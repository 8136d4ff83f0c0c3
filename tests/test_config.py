"""Tests for configuration loading."""

import pytest

from event_fields.config import GeneratorConfig, load_config
from event_fields.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test in an empty directory with no EVENT_FIELDS_* variables."""
    monkeypatch.chdir(tmp_path)
    for key in ("OVERRIDE_ANNOTATION", "INCLUDE_PATTERNS", "EXCLUDE_PATTERNS", "VERBOSITY", "STRICT"):
        monkeypatch.delenv(f"EVENT_FIELDS_{key}", raising=False)
    return tmp_path


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.override_annotation == ""
        assert not config.overrides_enabled
        assert config.include_patterns == ["*"]
        assert config.exclude_patterns == []
        assert config.verbosity == "normal"
        assert config.strict is False

    def test_invalid_verbosity(self):
        with pytest.raises(InvalidConfigError):
            GeneratorConfig(verbosity="loud")

    def test_patterns_must_be_list(self):
        with pytest.raises(InvalidConfigError):
            GeneratorConfig(include_patterns="*.java")

    def test_annotation_whitespace_rejected(self):
        with pytest.raises(InvalidConfigError):
            GeneratorConfig(override_annotation=" org.example.Fields")


class TestLoadConfig:
    def test_no_sources(self):
        assert load_config() == GeneratorConfig()

    def test_project_file(self, isolated_cwd):
        (isolated_cwd / "event-fields.toml").write_text(
            'override_annotation = "org.example.Fields"\nexclude_patterns = ["*/internal/*"]\n'
        )
        config = load_config()
        assert config.override_annotation == "org.example.Fields"
        assert config.exclude_patterns == ["*/internal/*"]

    def test_pyproject_table(self, isolated_cwd):
        (isolated_cwd / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[tool.event-fields]\nstrict = true\n'
        )
        assert load_config().strict is True

    def test_pyproject_without_table(self, isolated_cwd):
        (isolated_cwd / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert load_config() == GeneratorConfig()

    def test_explicit_file_over_project(self, isolated_cwd):
        (isolated_cwd / "event-fields.toml").write_text('override_annotation = "a.A"\n')
        explicit = isolated_cwd / "custom.toml"
        explicit.write_text('override_annotation = "b.B"\n')
        assert load_config(config_file=explicit).override_annotation == "b.B"

    def test_env_over_file(self, isolated_cwd, monkeypatch):
        (isolated_cwd / "event-fields.toml").write_text('override_annotation = "a.A"\n')
        monkeypatch.setenv("EVENT_FIELDS_OVERRIDE_ANNOTATION", "c.C")
        monkeypatch.setenv("EVENT_FIELDS_INCLUDE_PATTERNS", "src/*, api/*")
        monkeypatch.setenv("EVENT_FIELDS_STRICT", "yes")
        config = load_config()
        assert config.override_annotation == "c.C"
        assert config.include_patterns == ["src/*", "api/*"]
        assert config.strict is True

    def test_invalid_env_bool(self, monkeypatch):
        monkeypatch.setenv("EVENT_FIELDS_STRICT", "maybe")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("EVENT_FIELDS_OVERRIDE_ANNOTATION", "c.C")
        config = load_config(override_annotation="d.D", verbose=True)
        assert config.override_annotation == "d.D"
        assert config.verbosity == "verbose"

    def test_none_overrides_ignored(self):
        assert load_config(override_annotation=None).override_annotation == ""

    def test_quiet_flag(self):
        assert load_config(quiet=True).verbosity == "quiet"

    def test_missing_file(self, isolated_cwd):
        with pytest.raises(ConfigurationError):
            load_config(config_file=isolated_cwd / "missing.toml")

    def test_invalid_toml(self, isolated_cwd):
        bad = isolated_cwd / "bad.toml"
        bad.write_text("override_annotation = \n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=bad)

    def test_unknown_key(self, isolated_cwd):
        bad = isolated_cwd / "bad.toml"
        bad.write_text('unknown_key = 1\n')
        with pytest.raises(ConfigurationError):
            load_config(config_file=bad)
