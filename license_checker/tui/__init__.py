from license_checker.tui.renderers import CheckConsoleUI

__all__ = ["CheckConsoleUI"]
