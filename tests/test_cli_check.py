"""Tests for the check CLI command."""

import sys
from pathlib import Path

import pytest

from license_checker.__main__ import cli, main


@pytest.fixture
def clean_project(project: Path, write_file, write_config, mit_header: str) -> Path:
    write_config({"paths": [{"exclude": ["docs/**"]}], "licenses": ["MIT"]})
    write_file(project / "src/a.c", mit_header)
    write_file(project / "src/b.c", mit_header)
    write_file(project / "docs/guide.md", "no header\n")
    return project


def test_check_clean_project(clean_project: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["check", "--dir", str(clean_project)])
    assert result.exit_code == 0
    assert "Scanning 2 files..." in result.output
    assert "No license issues found" in result.output


def test_check_reports_failures(clean_project: Path, write_file, cli_runner) -> None:
    write_file(clean_project / "src/missing-license.cpp", "int main() {}\n")

    result = cli_runner.invoke(cli, ["check", "--dir", str(clean_project)])

    assert result.exit_code == 1
    assert "Scanning 3 files..." in result.output
    assert "1 errors:\n* src/missing-license.cpp has no license\n" in result.output
    assert "No license issues found" not in result.output


def test_check_unsupported_license(
    clean_project: Path, write_file, apache_header: str, cli_runner
) -> None:
    write_file(clean_project / "src/c.c", apache_header)

    result = cli_runner.invoke(cli, ["check", "--dir", str(clean_project), "--workers", "2"])

    assert result.exit_code == 1
    assert "* src/c.c uses unsupported license 'Apache-2.0'" in result.output


def test_check_missing_config(project: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["check", "--dir", str(project)])
    assert result.exit_code != 0
    assert "Failed to load config file" in result.output


def test_check_invalid_json(project: Path, cli_runner) -> None:
    (project / "license-checker.cfg").write_text("{not json", encoding="utf-8")
    result = cli_runner.invoke(cli, ["check", "--dir", str(project)])
    assert result.exit_code != 0
    assert "invalid JSON format" in result.output


def test_check_custom_config_name(
    project: Path, write_file, write_config, mit_header: str, cli_runner
) -> None:
    write_config({"licenses": ["MIT"]}, name="licenses.json")
    write_file(project / "a.c", mit_header)

    result = cli_runner.invoke(
        cli, ["check", "--dir", str(project), "--config-name", "licenses.json"]
    )

    assert result.exit_code == 0
    assert "Scanning 1 files..." in result.output


def test_check_nested_config_name_is_not_scanned(
    project: Path, write_file, mit_header: str, cli_runner
) -> None:
    write_file(project / "tools/lc.json", '{"licenses": ["MIT"]}')
    write_file(project / "a.c", mit_header)

    result = cli_runner.invoke(
        cli, ["check", "--dir", str(project), "--config-name", "tools/lc.json"]
    )

    assert result.exit_code == 0
    assert "Scanning 1 files..." in result.output


def test_check_rejects_zero_workers(clean_project: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["check", "--dir", str(clean_project), "--workers", "0"])
    assert result.exit_code == 2


def test_check_verbose_flag(clean_project: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["-v", "check", "--dir", str(clean_project)])
    assert result.exit_code == 0


def test_main_returns_two_on_config_error(project: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "argv", ["license-checker", "check", "--dir", str(project)])
    assert main() == 2


def test_main_returns_one_on_violations(
    project: Path, write_file, write_config, monkeypatch
) -> None:
    write_config({"licenses": ["MIT"]})
    write_file(project / "a.c", "no header\n")
    monkeypatch.setattr(sys, "argv", ["license-checker", "check", "--dir", str(project)])
    assert main() == 1


def test_main_returns_zero_on_success(clean_project: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "argv", ["license-checker", "check", "--dir", str(clean_project)])
    assert main() == 0
