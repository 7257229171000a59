"""Tests for RdfJsonLdConfig"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to the path so we can import rdfjsonld
sys.path.insert(0, str(Path(__file__).parent.parent))

from rdfjsonld.config.config_loader import RdfJsonLdConfig, ConfigurationError, reload_config
from rdfjsonld.model.jsonld_model import ProcessorOptions


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Keep environment overrides from leaking into tests."""
    for name in ("RDFJSONLD_USE_RDF_TYPE", "RDFJSONLD_USE_NATIVE_TYPES", "RDFJSONLD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path, content: str) -> str:
    path = tmp_path / "rdfjsonld-config.yaml"
    path.write_text(content, encoding="utf-8")
    return str(path)


class TestRdfJsonLdConfig:
    """Configuration loading and validation."""

    def test_defaults_without_file(self):
        config = RdfJsonLdConfig()

        assert config.get_processor_options() == ProcessorOptions()
        assert config.get_log_level() == "INFO"

    def test_load_file(self, tmp_path):
        path = write_config(tmp_path, """
processor:
  use_native_types: true
  indent: 4
app:
  log_level: debug
""")
        config = RdfJsonLdConfig(path)
        options = config.get_processor_options()

        assert options.use_native_types is True
        assert options.use_rdf_type is False
        assert options.indent == 4
        assert config.get_log_level() == "DEBUG"
        assert config.config_path == str(Path(path).absolute())

    def test_empty_file_uses_defaults(self, tmp_path):
        config = RdfJsonLdConfig(write_config(tmp_path, ""))
        assert config.get_processor_options() == ProcessorOptions()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            RdfJsonLdConfig(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigurationError):
            RdfJsonLdConfig(write_config(tmp_path, "processor: [unclosed"))

    def test_non_mapping_root(self, tmp_path):
        with pytest.raises(ConfigurationError):
            RdfJsonLdConfig(write_config(tmp_path, "- just\n- a list\n"))

    def test_unknown_processor_key(self, tmp_path):
        config = RdfJsonLdConfig(write_config(tmp_path, "processor:\n  compact: true\n"))
        with pytest.raises(ConfigurationError):
            config.validate_config()

    def test_invalid_log_level(self, tmp_path):
        config = RdfJsonLdConfig(write_config(tmp_path, "app:\n  log_level: LOUD\n"))
        with pytest.raises(ConfigurationError):
            config.validate_config()

    def test_environment_overrides(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "processor:\n  use_native_types: false\n")
        monkeypatch.setenv("RDFJSONLD_USE_NATIVE_TYPES", "true")
        monkeypatch.setenv("RDFJSONLD_USE_RDF_TYPE", "1")
        monkeypatch.setenv("RDFJSONLD_LOG_LEVEL", "warning")

        config = RdfJsonLdConfig(path)
        options = config.get_processor_options()

        assert options.use_native_types is True
        assert options.use_rdf_type is True
        assert config.get_log_level() == "WARNING"

    def test_reload_config(self, tmp_path):
        path = write_config(tmp_path, "processor:\n  use_rdf_type: true\n")

        config = reload_config(path)
        assert config.get_processor_options().use_rdf_type is True
