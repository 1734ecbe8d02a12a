from license_checker.detection.base import LicenseDetector
from license_checker.detection.header import HeaderLicenseDetector

__all__ = ["HeaderLicenseDetector", "LicenseDetector"]
