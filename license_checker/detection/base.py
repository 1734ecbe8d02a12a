from abc import ABC, abstractmethod

from license_checker.models import LicenseMatch


class LicenseDetector(ABC):
    @abstractmethod
    def detect(self, content: bytes) -> list[LicenseMatch]:
        """Return every license match found in ``content``; empty when none."""
        raise NotImplementedError
