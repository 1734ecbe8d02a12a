from license_checker.repositories.config import ConfigRepository

__all__ = ["ConfigRepository"]
