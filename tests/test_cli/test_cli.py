"""Tests for the tailmerge CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tailmerge import __version__
from tailmerge.cli.main import cli

VENDOR = "../vendor/tailmerge.css"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def stylesheet(tmp_path: Path) -> Path:
    path = tmp_path / "app.css"
    path.write_text('@import "tailwindcss";\n\nbody { margin: 0; }\n', encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """A configuration location that does not exist yet (defaults apply)."""
    return tmp_path / "tailmerge.json"


def _write_config(path: Path, **values: object) -> Path:
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


def _invoke(runner: CliRunner, config_path: Path, *args: str):
    return runner.invoke(cli, ["--config", str(config_path), *args])


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("add-import", "add-theme", "validate", "config"):
            assert name in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# add-import
# ---------------------------------------------------------------------------


class TestAddImportCommand:
    def test_adds_and_writes(
        self, runner: CliRunner, config_path: Path, stylesheet: Path
    ) -> None:
        result = _invoke(runner, config_path, "add-import", VENDOR, "-s", str(stylesheet))
        assert result.exit_code == 0
        assert f"Added: {VENDOR}" in result.output
        assert stylesheet.read_text(encoding="utf-8") == (
            f'@import "tailwindcss";\n@import "{VENDOR}";\nbody {{ margin: 0; }}'
        )

    def test_defaults_from_config(
        self, runner: CliRunner, tmp_path: Path, stylesheet: Path
    ) -> None:
        cfg = _write_config(
            tmp_path / "tailmerge.json",
            stylesheet=str(stylesheet),
            import_path="../vendor/components.css",
        )
        result = _invoke(runner, cfg, "add-import")
        assert result.exit_code == 0
        assert '@import "../vendor/components.css";' in stylesheet.read_text(encoding="utf-8")

    def test_already_present_leaves_file(
        self, runner: CliRunner, config_path: Path, stylesheet: Path
    ) -> None:
        original = stylesheet.read_text(encoding="utf-8")
        result = _invoke(
            runner, config_path, "add-import", "tailwindcss", "-s", str(stylesheet)
        )
        assert result.exit_code == 0
        assert "Already present" in result.output
        assert stylesheet.read_text(encoding="utf-8") == original

    def test_dry_run(self, runner: CliRunner, config_path: Path, stylesheet: Path) -> None:
        original = stylesheet.read_text(encoding="utf-8")
        result = _invoke(
            runner, config_path, "add-import", VENDOR, "-s", str(stylesheet), "--dry-run"
        )
        assert result.exit_code == 0
        assert f'@import "{VENDOR}";' in result.output
        assert stylesheet.read_text(encoding="utf-8") == original

    def test_missing_stylesheet(
        self, runner: CliRunner, config_path: Path, tmp_path: Path
    ) -> None:
        result = _invoke(
            runner, config_path, "add-import", VENDOR, "-s", str(tmp_path / "nope.css")
        )
        assert result.exit_code == 1
        assert "Cannot read stylesheet" in result.output
        assert not isinstance(result.exception, FileNotFoundError)

    def test_non_utf8_stylesheet(
        self, runner: CliRunner, config_path: Path, tmp_path: Path
    ) -> None:
        path = tmp_path / "binary.css"
        path.write_bytes(b"\xff\xfe@import")
        result = _invoke(runner, config_path, "add-import", VENDOR, "-s", str(path))
        assert result.exit_code == 1
        assert "Cannot read stylesheet" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)


# ---------------------------------------------------------------------------
# add-theme
# ---------------------------------------------------------------------------


class TestAddThemeCommand:
    def test_adds_import_and_theme(
        self, runner: CliRunner, config_path: Path, stylesheet: Path, tmp_path: Path
    ) -> None:
        theme = tmp_path / "theme.css"
        theme.write_text("@theme {\n  --color-primary: blue;\n}\n", encoding="utf-8")
        result = _invoke(
            runner, config_path, "add-theme", str(theme), "-s", str(stylesheet), "-i", VENDOR
        )
        assert result.exit_code == 0
        text = stylesheet.read_text(encoding="utf-8")
        assert text.index(VENDOR) < text.index("@theme")
        assert text.endswith("--color-primary: blue;\n}\n")

    def test_import_path_defaults_from_config(
        self, runner: CliRunner, tmp_path: Path, stylesheet: Path
    ) -> None:
        theme = tmp_path / "theme.css"
        theme.write_text("@theme { --a: 1; }", encoding="utf-8")
        cfg = _write_config(
            tmp_path / "tailmerge.json",
            stylesheet=str(stylesheet),
            import_path="../vendor/kit.css",
        )
        result = _invoke(runner, cfg, "add-theme", str(theme))
        assert result.exit_code == 0
        assert '@import "../vendor/kit.css";' in stylesheet.read_text(encoding="utf-8")

    def test_missing_theme_file(
        self, runner: CliRunner, config_path: Path, stylesheet: Path, tmp_path: Path
    ) -> None:
        result = _invoke(
            runner, config_path, "add-theme", str(tmp_path / "none.css"), "-s", str(stylesheet)
        )
        assert result.exit_code == 1
        assert "Cannot read theme file" in result.output

    def test_non_utf8_theme_file(
        self, runner: CliRunner, config_path: Path, stylesheet: Path, tmp_path: Path
    ) -> None:
        theme = tmp_path / "theme.css"
        theme.write_bytes(b"\xff\xfe@theme {}")
        result = _invoke(runner, config_path, "add-theme", str(theme), "-s", str(stylesheet))
        assert result.exit_code == 1
        assert "Cannot read theme file" in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid(self, runner: CliRunner, config_path: Path, stylesheet: Path) -> None:
        result = _invoke(runner, config_path, "validate", str(stylesheet))
        assert result.exit_code == 0
        assert "OK: app.css is valid" in result.output

    def test_wrong_order(self, runner: CliRunner, config_path: Path, tmp_path: Path) -> None:
        path = tmp_path / "bad.css"
        path.write_text('@import "x.css";\n@import "tailwindcss";\n', encoding="utf-8")
        result = _invoke(runner, config_path, "validate", str(path))
        assert result.exit_code == 1
        assert "ERROR [line 1]: @import 'tailwindcss' should come before" in result.output
        assert "Summary: 1 error(s), 0 warning(s)" in result.output

    def test_warnings_only(self, runner: CliRunner, config_path: Path, tmp_path: Path) -> None:
        path = tmp_path / "themes.css"
        path.write_text("@theme { --a: 1; }\n@theme { --b: 2; }\n", encoding="utf-8")
        result = _invoke(runner, config_path, "validate", str(path))
        assert result.exit_code == 0
        assert "WARNING" in result.output

    def test_stylesheet_and_base_package_from_config(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "app.css"
        path.write_text('@import "reset.css";\n@import "bootstrap";\n', encoding="utf-8")
        cfg = _write_config(
            tmp_path / "tailmerge.json", stylesheet=str(path), base_package="bootstrap"
        )
        result = _invoke(runner, cfg, "validate")
        assert result.exit_code == 1
        assert "@import 'bootstrap' should come before" in result.output

    def test_base_package_option_overrides_config(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "app.css"
        path.write_text('@import "reset.css";\n@import "bootstrap";\n', encoding="utf-8")
        cfg = _write_config(tmp_path / "tailmerge.json", base_package="bootstrap")
        result = _invoke(runner, cfg, "validate", str(path), "--base-package", "tailwindcss")
        assert result.exit_code == 0

    def test_non_utf8_stylesheet(
        self, runner: CliRunner, config_path: Path, tmp_path: Path
    ) -> None:
        path = tmp_path / "binary.css"
        path.write_bytes(b"\xff\xfe")
        result = _invoke(runner, config_path, "validate", str(path))
        assert result.exit_code == 1
        assert "Cannot read stylesheet" in result.output


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_init_creates_file(self, runner: CliRunner, config_path: Path) -> None:
        result = _invoke(runner, config_path, "config", "init")
        assert result.exit_code == 0
        assert "Created configuration file" in result.output
        data = json.loads(config_path.read_text(encoding="utf-8"))
        assert data["css_merge_strategy"] == "merge"

    def test_init_refuses_overwrite(self, runner: CliRunner, config_path: Path) -> None:
        config_path.write_text("{}", encoding="utf-8")
        result = _invoke(runner, config_path, "config", "init")
        assert result.exit_code == 0
        assert "already exists" in result.output
        assert config_path.read_text(encoding="utf-8") == "{}"

    def test_init_force(self, runner: CliRunner, config_path: Path) -> None:
        config_path.write_text("{}", encoding="utf-8")
        result = _invoke(runner, config_path, "config", "init", "--force")
        assert result.exit_code == 0
        assert "Overwrote" in result.output
        assert "css_overrides" in config_path.read_text(encoding="utf-8")

    def test_show_defaults(self, runner: CliRunner, config_path: Path) -> None:
        result = _invoke(runner, config_path, "config", "show")
        assert result.exit_code == 0
        assert "(not created)" in result.output
        assert "Strategy: merge" in result.output
        assert "Base package: tailwindcss" in result.output
        assert "(none)" in result.output

    def test_validate_reports_issues(self, runner: CliRunner, config_path: Path) -> None:
        _write_config(config_path, css_merge_strategy="replace")
        result = _invoke(runner, config_path, "config", "validate")
        assert result.exit_code == 1
        assert "custom_css_path must be provided" in result.output

    def test_validate_malformed_file(self, runner: CliRunner, config_path: Path) -> None:
        config_path.write_text("{oops", encoding="utf-8")
        result = _invoke(runner, config_path, "config", "validate")
        assert result.exit_code == 1
        assert "Cannot load configuration" in result.output

    @pytest.mark.parametrize("command", ["show", "validate", "regenerate"])
    def test_overrides_not_an_object(
        self, runner: CliRunner, config_path: Path, command: str
    ) -> None:
        config_path.write_text('{"css_overrides": null}', encoding="utf-8")
        result = _invoke(runner, config_path, "config", command)
        assert result.exit_code == 1
        assert "'css_overrides' must be an object" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_regenerate_applies_overrides(self, runner: CliRunner, tmp_path: Path) -> None:
        vendor = tmp_path / "vendor" / "tailmerge.css"
        vendor.parent.mkdir()
        vendor.write_text("@theme {\n  --color-primary: #000;\n}\n", encoding="utf-8")
        cfg = _write_config(
            tmp_path / "tailmerge.json",
            vendor_css=str(vendor),
            css_overrides={"--color-primary": "teal"},
        )
        result = _invoke(runner, cfg, "config", "regenerate")
        assert result.exit_code == 0
        assert vendor.read_text(encoding="utf-8") == "@theme {\n  --color-primary: teal;\n}\n"

    def test_regenerate_unwritable_target(self, runner: CliRunner, tmp_path: Path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        cfg = _write_config(
            tmp_path / "tailmerge.json", vendor_css=str(blocker / "tailmerge.css")
        )
        result = _invoke(runner, cfg, "config", "regenerate")
        assert result.exit_code == 1
        assert "Cannot write vendor CSS" in result.output
