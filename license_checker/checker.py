import logging
from pathlib import Path
from typing import Callable, Optional

from license_checker.detection import HeaderLicenseDetector, LicenseDetector
from license_checker.errors import LicenseViolationsError
from license_checker.models import CheckReport, ConfigOutcome, ConfigRecord, WalkOptions
from license_checker.repositories.config import ConfigRepository
from license_checker.scanner import ScanOrchestrator
from license_checker.walker import FileWalker

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class LicenseChecker:
    """Runs every configuration record of a project in declaration order.

    The first record that produces failures stops the run.
    """

    def __init__(
        self,
        options: Optional[WalkOptions] = None,
        detector: Optional[LicenseDetector] = None,
        workers: Optional[int] = None,
        on_scan_start: Optional[ProgressCallback] = None,
    ) -> None:
        self.options = options or WalkOptions()
        self.walker = FileWalker(self.options)
        self.scanner = ScanOrchestrator(detector or HeaderLicenseDetector(), workers=workers)
        self.on_scan_start = on_scan_start

    def load_configs(self, root: Path) -> list[ConfigRecord]:
        return ConfigRepository(root, options=self.options).load_records()

    def run_config(self, root: Path, index: int, config: ConfigRecord) -> ConfigOutcome:
        files = self.walker.walk(root, config.rules)
        if self.on_scan_start is not None:
            self.on_scan_start(index, len(files))
        results = self.scanner.run(root, files, config.licenses)
        return ConfigOutcome(index=index, files=files, results=results)

    def run(self, root: Path) -> CheckReport:
        root = root.resolve()
        configs = self.load_configs(root)
        report = CheckReport(root=str(root))
        for index, config in enumerate(configs):
            outcome = self.run_config(root, index, config)
            report.outcomes.append(outcome)
            if outcome.failures:
                logger.debug(
                    "Config %d reported %d failure(s); skipping the remaining configs",
                    index,
                    len(outcome.failures),
                )
                break
        return report

    def check(self, root: Path) -> CheckReport:
        report = self.run(root)
        if not report.ok:
            raise LicenseViolationsError(report)
        return report


def check(root: Path, options: Optional[WalkOptions] = None) -> CheckReport:
    return LicenseChecker(options=options).check(root)
