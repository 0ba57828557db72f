"""Tests for batch resolution with errors as values."""

from common.fs import MapFileSystem
from specifier.cdn import CDN
from specifier.resolvers import new_default_resolver
from specifier.service import ResolutionService


class TestResolutionService:
    """ResolutionService never raises ResolutionError."""

    def setup_method(self):
        """Set up test fixtures."""
        fs = MapFileSystem()
        fs.add_file("/project/node_modules/@rhds/tokens/json/rhds.tokens.json")
        self.resolver = new_default_resolver(fs, "/project")

    def test_success(self):
        result = ResolutionService(self.resolver).resolve("npm:@rhds/tokens/json/rhds.tokens.json")

        assert result.ok
        assert result.kind == "npm"
        assert result.path == "/project/node_modules/@rhds/tokens/json/rhds.tokens.json"
        assert result.error is None
        assert result.cdn_url is None

    def test_failure_is_reported(self):
        result = ResolutionService(self.resolver).resolve("npm:missing/tokens.json")

        assert not result.ok
        assert result.path is None
        assert result.kind == "npm"
        assert "package not found" in result.error

    def test_traversal_is_reported(self):
        result = ResolutionService(self.resolver).resolve("npm:pkg/../../etc/passwd")

        assert not result.ok
        assert "path traversal" in result.error

    def test_cdn_url_added_for_packages(self):
        svc = ResolutionService(self.resolver, CDN.ESM_SH)

        npm = svc.resolve("npm:missing/tokens.json")
        local = svc.resolve("./tokens.json")

        assert npm.cdn_url == "https://esm.sh/missing/tokens.json"
        assert local.cdn_url is None
        assert local.path == "./tokens.json"

    def test_resolve_all_one_result_per_input(self):
        specs = ["./a.json", "npm:missing/x.json", "./a.json", "npm:@rhds/tokens/json/rhds.tokens.json"]

        results = ResolutionService(self.resolver).resolve_all(specs)

        assert [r.specifier for r in results] == specs
        assert [r.ok for r in results] == [True, False, True, True]
