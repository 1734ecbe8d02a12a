import sys
import json
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from license_checker.detection.base import LicenseDetector  # noqa: E402
from license_checker.models import LicenseMatch  # noqa: E402


MIT_HEADER = (
    "// Copyright (c) 2020 The Authors\n"
    "//\n"
    "// Permission is hereby granted, free of charge, to any person obtaining a copy\n"
    "// of this software and associated documentation files (the \"Software\"), to deal\n"
    "// in the Software without restriction.\n"
)

APACHE_HEADER = (
    "// Copyright 2020 Google LLC\n"
    "//\n"
    "// Licensed under the Apache License, Version 2.0 (the \"License\");\n"
    "// you may not use this file except in compliance with the License.\n"
)


class TagDetector(LicenseDetector):
    """Reports every ``LICENSE=<id>`` token in the content."""

    def detect(self, content: bytes) -> list[LicenseMatch]:
        text = content.decode("utf-8")
        matches: list[LicenseMatch] = []
        start = text.find("LICENSE=")
        while start != -1:
            end = start + len("LICENSE=")
            while end < len(text) and not text[end].isspace():
                end += 1
            matches.append(LicenseMatch(text[start + len("LICENSE="):end], start, end))
            start = text.find("LICENSE=", end)
        return matches


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    def _write(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(project: Path) -> Callable[[Any], Path]:
    def _write(payload: Any, name: str = "license-checker.cfg") -> Path:
        path = project / name
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def tag_detector() -> TagDetector:
    return TagDetector()


@pytest.fixture
def mit_header() -> str:
    return MIT_HEADER


@pytest.fixture
def apache_header() -> str:
    return APACHE_HEADER


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
