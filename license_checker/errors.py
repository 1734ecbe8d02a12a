from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from license_checker.models import CheckReport


class LicenseCheckerError(Exception):
    """Base user-facing application error."""


class ConfigLoadError(LicenseCheckerError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to load config file ({detail}): {path}")


class MissingConfigFileError(ConfigLoadError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, detail="file not found")


class InvalidJsonFormatError(ConfigLoadError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(path=path, detail=f"invalid JSON format, {detail}")


class InvalidConfigSchemaError(ConfigLoadError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(path=path, detail=f"invalid config schema, {detail}")


class RuleDefinitionError(LicenseCheckerError):
    """A path rule could not be compiled."""


class PatternSyntaxError(RuleDefinitionError):
    def __init__(self, pattern: str, detail: str, location: str | None = None) -> None:
        self.pattern = pattern
        self.detail = detail
        self.location = location
        message = f"Invalid path pattern '{pattern}' ({detail})"
        if location:
            message = f"{message} at {location}"
        super().__init__(message)


class RuleConflictError(RuleDefinitionError):
    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Rule cannot contain both include and exclude at {location}")


class TraversalError(LicenseCheckerError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to gather files ({detail}): {path}")


class LicenseViolationsError(LicenseCheckerError):
    def __init__(self, report: CheckReport) -> None:
        self.report = report
        super().__init__(report.format_failures())
