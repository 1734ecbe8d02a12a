from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from license_checker.constants import CONFIG_FILENAME, GIT_DIRNAME
from license_checker.rules.models import RuleSet


class ScanStatus(str, Enum):
    OK = "ok"
    NO_LICENSE_DETECTED = "no-license-detected"
    LICENSE_NOT_PERMITTED = "license-not-permitted"
    READ_FAILURE = "read-failure"


@dataclass(frozen=True)
class WalkOptions:
    config_filename: str = CONFIG_FILENAME
    metadata_dirname: str = GIT_DIRNAME


@dataclass(frozen=True)
class ConfigRecord:
    rules: RuleSet = field(default_factory=RuleSet)
    licenses: frozenset[str] = frozenset()


@dataclass(frozen=True)
class LicenseMatch:
    license_id: str
    start: int
    end: int


@dataclass(frozen=True)
class ScanResult:
    path: str
    status: ScanStatus
    license_id: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def ok(cls, path: str) -> "ScanResult":
        return cls(path=path, status=ScanStatus.OK)

    @property
    def failed(self) -> bool:
        return self.status != ScanStatus.OK

    @property
    def message(self) -> str:
        if self.status == ScanStatus.NO_LICENSE_DETECTED:
            return f"{self.path} has no license"
        if self.status == ScanStatus.LICENSE_NOT_PERMITTED:
            return f"{self.path} uses unsupported license '{self.license_id}'"
        if self.status == ScanStatus.READ_FAILURE:
            return f"Failed to read file '{self.path}': {self.detail}"
        return f"{self.path} ok"


@dataclass
class ConfigOutcome:
    index: int
    files: list[str]
    results: list[ScanResult]

    @property
    def failures(self) -> list[ScanResult]:
        return [result for result in self.results if result.failed]


@dataclass
class CheckReport:
    root: str
    outcomes: list[ConfigOutcome] = field(default_factory=list)

    @property
    def failures(self) -> list[ScanResult]:
        for outcome in self.outcomes:
            failures = outcome.failures
            if failures:
                return failures
        return []

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def scanned(self) -> int:
        return sum(len(outcome.files) for outcome in self.outcomes)

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ScanStatus}
        for outcome in self.outcomes:
            for result in outcome.results:
                counts[result.status.value] += 1
        counts["configs"] = len(self.outcomes)
        counts["files"] = self.scanned
        counts["errors"] = len(self.failures)
        return counts

    def format_failures(self) -> str:
        failures = self.failures
        lines = [f"{len(failures)} errors:"]
        lines.extend(f"* {result.message}" for result in failures)
        return "\n".join(lines) + "\n"
