"""Checks that project files carry permitted license headers.

Configuration lives in ``license-checker.cfg`` at the project root.
"""

from license_checker.checker import LicenseChecker, check
from license_checker.models import CheckReport, ConfigRecord, ScanResult, ScanStatus, WalkOptions

__version__ = "0.1.0"

__all__ = [
    "CheckReport",
    "ConfigRecord",
    "LicenseChecker",
    "ScanResult",
    "ScanStatus",
    "WalkOptions",
    "check",
]
