import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import AbstractSet, Optional, Sequence

from license_checker.detection.base import LicenseDetector
from license_checker.models import ScanResult, ScanStatus

logger = logging.getLogger(__name__)


def default_worker_count() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


class ScanOrchestrator:
    """Scans selected files on a bounded thread pool.

    Results come back in input order regardless of completion order.
    """

    def __init__(self, detector: LicenseDetector, workers: Optional[int] = None) -> None:
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.detector = detector
        self.workers = workers or default_worker_count()

    def examine(self, root: Path, path: str, licenses: AbstractSet[str]) -> ScanResult:
        try:
            body = (root / path).read_bytes()
        except OSError as exc:
            logger.debug("Failed to read %s: %s", path, exc)
            return ScanResult(
                path=path, status=ScanStatus.READ_FAILURE, detail=exc.strerror or str(exc)
            )

        matches = self.detector.detect(body)
        if not matches:
            return ScanResult(path=path, status=ScanStatus.NO_LICENSE_DETECTED)
        for match in matches:
            if match.license_id not in licenses:
                return ScanResult(
                    path=path,
                    status=ScanStatus.LICENSE_NOT_PERMITTED,
                    license_id=match.license_id,
                )
        return ScanResult.ok(path)

    def run(
        self, root: Path, files: Sequence[str], licenses: AbstractSet[str]
    ) -> list[ScanResult]:
        if not files:
            return []
        workers = min(self.workers, len(files))
        logger.debug("Scanning %d file(s) with %d worker(s)", len(files), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda path: self.examine(root, path, licenses), files))
        return results
