"""
Tests for the aliaspath command line interface.

This module tests:
- resolve, glob, paths, url and rel commands
- Group options (--root, --alias, --config, --base-url, --no-real-path)
- Exit codes for misses and invalid input
"""

import pytest
from click.testing import CliRunner

from aliaspath.cli import main


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def site(root, touch):
    """Root with theme/ and vendor/ directories holding assets."""
    touch(root / "theme" / "app.js")
    touch(root / "vendor" / "app.js")
    touch(root / "vendor" / "lib.js")
    touch(root / "vendor" / "style.css")
    return root


def _base_args(site):
    return [
        "--root", site.as_posix(),
        "--alias", f"assets={(site / 'theme').as_posix()}",
        "--alias", f"assets={(site / 'vendor').as_posix()}",
    ]


# =============================================================================
# Command Tests
# =============================================================================

class TestCommands:
    """Tests for each subcommand."""

    def test_resolve(self, runner, site):
        """Test that the first registered directory wins."""
        result = runner.invoke(main, _base_args(site) + ["resolve", "assets:app.js"])

        assert result.exit_code == 0
        assert result.output.strip() == (site / "theme" / "app.js").as_posix()

    def test_resolve_falls_through(self, runner, site):
        """Test that later directories are searched."""
        result = runner.invoke(main, _base_args(site) + ["resolve", "assets:lib.js"])

        assert result.exit_code == 0
        assert result.output.strip() == (site / "vendor" / "lib.js").as_posix()

    def test_resolve_not_found(self, runner, site):
        """Test the exit code for a miss."""
        result = runner.invoke(main, _base_args(site) + ["resolve", "assets:missing.js"])

        assert result.exit_code == 1
        assert "Not found: assets:missing.js" in result.output

    def test_paths(self, runner, site):
        result = runner.invoke(main, _base_args(site) + ["paths", "assets"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            (site / "theme").as_posix(),
            (site / "vendor").as_posix(),
        ]

    def test_glob_searches_first_directory(self, runner, site):
        result = runner.invoke(main, _base_args(site) + ["glob", "assets:*.js"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [(site / "theme" / "app.js").as_posix()]

    def test_glob_relative(self, runner, site):
        args = ["--root", site.as_posix(), "--alias", f"lib={(site / 'vendor').as_posix()}"]
        result = runner.invoke(main, args + ["glob", "--relative", "lib:*.{css,js}"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "vendor/style.css",
            "vendor/app.js",
            "vendor/lib.js",
        ]

    def test_url_relative(self, runner, site):
        result = runner.invoke(main, _base_args(site) + ["url", "--relative", "assets:lib.js?v=2"])

        assert result.exit_code == 0
        assert result.output.strip() == "/vendor/lib.js?v=2"

    def test_url_with_base_url(self, runner, site):
        args = ["--base-url", "https://example.com/"] + _base_args(site)
        result = runner.invoke(main, args + ["url", "assets:app.js"])

        assert result.exit_code == 0
        assert result.output.strip() == "https://example.com/theme/app.js"

    def test_rel(self, runner, site):
        result = runner.invoke(main, _base_args(site) + ["rel", "assets:lib.js"])

        assert result.exit_code == 0
        assert result.output.strip() == "vendor/lib.js"


# =============================================================================
# Option Tests
# =============================================================================

class TestOptions:
    """Tests for group options and error handling."""

    def test_config_manifest(self, runner, site):
        """Test aliases loaded from a YAML manifest."""
        manifest = site / "aliases.yaml"
        manifest.write_text(
            "root: .\n"
            "aliases:\n"
            f"  assets: {(site / 'vendor').as_posix()}\n",
            encoding="utf-8",
        )

        result = runner.invoke(main, ["--config", str(manifest), "rel", "assets:style.css"])

        assert result.exit_code == 0
        assert result.output.strip() == "vendor/style.css"

    def test_command_line_aliases_follow_manifest(self, runner, site):
        """Test that --alias directories are appended after manifest ones."""
        manifest = site / "aliases.yaml"
        manifest.write_text(
            f"root: .\naliases:\n  assets: {(site / 'vendor').as_posix()}\n",
            encoding="utf-8",
        )
        args = ["--config", str(manifest), "--alias", f"assets={(site / 'theme').as_posix()}"]

        result = runner.invoke(main, args + ["resolve", "assets:app.js"])

        assert result.output.strip() == (site / "vendor" / "app.js").as_posix()

    def test_no_real_path_keeps_missing_directories(self, runner, site):
        args = ["--root", site.as_posix(), "--alias", f"assets={(site / 'nowhere').as_posix()}"]

        real = runner.invoke(main, args + ["paths", "assets"])
        normalized = runner.invoke(main, ["--no-real-path"] + args + ["paths", "assets"])

        assert real.output.strip() == ""
        assert normalized.output.strip() == (site / "nowhere").as_posix()

    def test_malformed_alias_option(self, runner, site):
        result = runner.invoke(main, ["--root", site.as_posix(), "--alias", "assets", "paths", "assets"])

        assert result.exit_code == 2
        assert "NAME=PATH" in result.output

    def test_invalid_alias_name(self, runner, site):
        args = ["--root", site.as_posix(), "--alias", f"a={site.as_posix()}"]

        result = runner.invoke(main, args + ["paths", "a"])

        assert result.exit_code == 1
        assert "INVALID_ALIAS" in result.output

    def test_missing_root(self, runner, site):
        result = runner.invoke(main, ["--root", (site / "missing").as_posix(), "paths", "root"])

        assert result.exit_code == 1
        assert "ROOT_NOT_FOUND" in result.output

    def test_missing_manifest(self, runner, site):
        result = runner.invoke(main, ["--config", (site / "missing.yaml").as_posix(), "paths", "root"])

        assert result.exit_code == 1
        assert "CONFIGURATION_ERROR" in result.output
