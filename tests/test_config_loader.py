"""Tests for the project config loader."""

import json

import pytest

from common.fs import MapFileSystem, OSFileSystem
from config_loader import (
    ConfigError,
    expand_file_path,
    expand_files,
    load_config,
    load_config_or_default,
)
from specifier.resolvers import new_default_resolver
from specifier.service import ResolutionService

YAML_CONFIG = """
cdn: esm.sh
files:
  - npm:@rhds/tokens/json/rhds.tokens.json
  - path: tokens/*.json
    prefix: local
    groupMarkers: [_, DEFAULT]
  - ./extra.json
"""


class TestLoadConfig:
    """Discovery and parsing of .config/design-tokens.*"""

    def setup_method(self):
        """Set up test fixtures."""
        self.fs = MapFileSystem()

    def test_yaml(self):
        self.fs.add_file("/proj/.config/design-tokens.yaml", YAML_CONFIG)

        cfg = load_config(self.fs, "/proj")

        assert cfg.cdn == "esm.sh"
        assert cfg.jsr is None
        assert cfg.source == "/proj/.config/design-tokens.yaml"
        assert cfg.files == [
            "npm:@rhds/tokens/json/rhds.tokens.json",
            "tokens/*.json",
            "./extra.json",
        ]

    def test_json(self):
        self.fs.add_file("/proj/.config/design-tokens.json", json.dumps({"files": ["a.json"], "jsr": "stub"}))

        cfg = load_config(self.fs, "/proj")

        assert cfg.files == ["a.json"]
        assert cfg.jsr == "stub"

    def test_yaml_preferred_over_yml_and_json(self):
        self.fs.add_file("/proj/.config/design-tokens.yaml", "cdn: unpkg")
        self.fs.add_file("/proj/.config/design-tokens.yml", "cdn: jspm")
        self.fs.add_file("/proj/.config/design-tokens.json", '{"cdn": "esm.run"}')

        assert load_config(self.fs, "/proj").cdn == "unpkg"

    def test_missing_returns_none(self):
        assert load_config(self.fs, "/proj") is None

    def test_empty_yaml_is_default(self):
        self.fs.add_file("/proj/.config/design-tokens.yml", "")

        cfg = load_config(self.fs, "/proj")

        assert cfg.files == []
        assert cfg.cdn is None

    def test_invalid_yaml(self):
        self.fs.add_file("/proj/.config/design-tokens.yaml", "files: [unclosed")

        with pytest.raises(ConfigError):
            load_config(self.fs, "/proj")

    def test_invalid_entry(self):
        self.fs.add_file("/proj/.config/design-tokens.yaml", "files:\n  - 42\n")

        with pytest.raises(ConfigError):
            load_config(self.fs, "/proj")

    def test_or_default(self):
        self.fs.add_file("/proj/.config/design-tokens.json", "{not json")

        cfg = load_config_or_default(self.fs, "/proj")

        assert cfg.files == []
        assert load_config_or_default(MapFileSystem(), "/proj").files == []


class TestUnreadableConfig:
    """Read failures surface as ConfigError."""

    def test_directory_in_place_of_file(self, tmp_path):
        (tmp_path / ".config" / "design-tokens.yaml").mkdir(parents=True)

        with pytest.raises(ConfigError):
            load_config(OSFileSystem(), str(tmp_path))
        assert load_config_or_default(OSFileSystem(), str(tmp_path)).files == []

    def test_invalid_utf8(self, tmp_path):
        (tmp_path / ".config").mkdir()
        (tmp_path / ".config" / "design-tokens.json").write_bytes(b'{"files": ["\xff\xfe"]}')

        with pytest.raises(ConfigError):
            load_config(OSFileSystem(), str(tmp_path))
        assert load_config_or_default(OSFileSystem(), str(tmp_path)).files == []


class TestExpandFiles:
    """Glob expansion and package passthrough."""

    def setup_method(self):
        """Set up test fixtures."""
        self.fs = MapFileSystem()
        self.fs.add_file("/proj/.config/design-tokens.yaml", YAML_CONFIG)
        self.fs.add_file("/proj/tokens/b.json")
        self.fs.add_file("/proj/tokens/a.json")
        self.fs.add_file("/proj/tokens/readme.md")

    def test_expand(self):
        cfg = load_config(self.fs, "/proj")

        assert expand_files(cfg, self.fs, "/proj") == [
            "npm:@rhds/tokens/json/rhds.tokens.json",
            "/proj/tokens/a.json",
            "/proj/tokens/b.json",
            "/proj/extra.json",
        ]

    def test_package_specifiers_pass_through(self):
        assert expand_file_path(self.fs, "/proj", "jsr:@std/tokens/mod.json") == ["jsr:@std/tokens/mod.json"]

    def test_absolute_path_kept(self):
        assert expand_file_path(self.fs, "/proj", "/elsewhere/t.json") == ["/elsewhere/t.json"]

    def test_single_star_skips_subdirectories(self):
        self.fs.add_file("/proj/tokens/nested/c.json")

        assert expand_file_path(self.fs, "/proj", "tokens/*.json") == [
            "/proj/tokens/a.json",
            "/proj/tokens/b.json",
        ]

    def test_recursive_glob(self):
        self.fs.add_file("/proj/tokens/nested/c.json")

        assert expand_file_path(self.fs, "/proj", "tokens/**/*.json") == [
            "/proj/tokens/a.json",
            "/proj/tokens/b.json",
            "/proj/tokens/nested/c.json",
        ]

    def test_glob_without_matches(self):
        assert expand_file_path(self.fs, "/proj", "missing/*.json") == []

    def test_matches_host_filesystem(self, tmp_path):
        (tmp_path / "tokens" / "nested").mkdir(parents=True)
        (tmp_path / "tokens" / "a.json").write_text("{}", encoding="utf-8")
        (tmp_path / "tokens" / "nested" / "c.json").write_text("{}", encoding="utf-8")
        root = str(tmp_path)

        on_disk = expand_file_path(OSFileSystem(), root, "tokens/*.json")

        assert on_disk == [str(tmp_path / "tokens" / "a.json")]


class TestResolveConfigFiles:
    """Expanded entries fed through the resolution service."""

    def test_resolve(self):
        fs = MapFileSystem()
        fs.add_file("/proj/.config/design-tokens.yaml", YAML_CONFIG)
        fs.add_file("/proj/node_modules/@rhds/tokens/json/rhds.tokens.json")
        fs.add_file("/proj/tokens/a.json")
        cfg = load_config(fs, "/proj")
        service = ResolutionService(new_default_resolver(fs, "/proj"))

        results = service.resolve_all(expand_files(cfg, fs, "/proj"))

        assert [r.path for r in results] == [
            "/proj/node_modules/@rhds/tokens/json/rhds.tokens.json",
            "/proj/tokens/a.json",
            "/proj/extra.json",
        ]
        assert results[0].specifier == "npm:@rhds/tokens/json/rhds.tokens.json"

    def test_missing_package_reported(self):
        fs = MapFileSystem()
        fs.add_file("/proj/.config/design-tokens.yaml", YAML_CONFIG)
        cfg = load_config(fs, "/proj")
        service = ResolutionService(new_default_resolver(fs, "/proj"))

        results = service.resolve_all(expand_files(cfg, fs, "/proj"))

        assert not results[0].ok
        assert "package not found" in results[0].error
