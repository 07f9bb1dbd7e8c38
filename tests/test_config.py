"""Tests for TOML format configuration."""

import tempfile
from pathlib import Path

import pytest
from stof_github import ConfigError
from stof_github import InMemoryDocument
from stof_github import load_format_configs
from stof_github import register_formats


def test_load_format_configs():
    """Test loading entries with and without optional fields."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "pyproject.toml"
        config_path.write_text("""
[[tool.stof-github.formats]]
owner = "dev-formata-io"
repo = "stof"

[[tool.stof-github.formats]]
owner = "dev-formata-io"
repo = "stof"
id = "formata"
headers = { Authorization = "Bearer token", Accept = "text/plain" }
""")

        configs = load_format_configs(config_path)

        assert [c.format_identifier for c in configs] == ["github:stof", "github:formata"]
        assert configs[0].headers["Accept"] == "application/vnd.github.raw+json"
        assert configs[1].headers["Authorization"] == "Bearer token"
        assert configs[1].headers["Accept"] == "text/plain"
        assert configs[1].headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_load_format_configs_missing_section(tmp_path):
    config_path = tmp_path / "pyproject.toml"
    config_path.write_text("[project]\nname = 'doc'\n")

    assert load_format_configs(config_path) == []


def test_load_format_configs_missing_file():
    with pytest.raises(FileNotFoundError):
        load_format_configs(Path("/nonexistent/stof-github.toml"))


def test_load_format_configs_missing_repo(tmp_path):
    config_path = tmp_path / "formats.toml"
    config_path.write_text("""
[[tool.stof-github.formats]]
owner = "dev-formata-io"
""")

    with pytest.raises(ConfigError, match="Invalid format entry #0") as exc_info:
        load_format_configs(config_path)

    assert exc_info.value.context["index"] == 0


def test_load_format_configs_bad_headers(tmp_path):
    config_path = tmp_path / "formats.toml"
    config_path.write_text("""
[[tool.stof-github.formats]]
owner = "o"
repo = "r"
headers = { Retries = 3 }
""")

    with pytest.raises(ConfigError):
        load_format_configs(config_path)


def test_load_format_configs_not_an_array(tmp_path):
    config_path = tmp_path / "formats.toml"
    config_path.write_text("""
[tool.stof-github.formats]
owner = "o"
""")

    with pytest.raises(ConfigError, match="must be an array of tables"):
        load_format_configs(config_path)


def test_register_formats(tmp_path, session):
    config_path = tmp_path / "formats.toml"
    config_path.write_text("""
[[tool.stof-github.formats]]
owner = "o"
repo = "a"

[[tool.stof-github.formats]]
owner = "o"
repo = "b"
id = "beta"
""")
    doc = InMemoryDocument()

    formats = register_formats(doc, load_format_configs(config_path), session=session)

    assert [f.format_identifier() for f in formats] == ["github:a", "github:beta"]
    assert doc.formats.identifiers() == ["github:a", "github:beta"]
    assert all(f.session is session for f in formats)
