from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from license_checker.models import CheckReport, ConfigRecord
from license_checker.tui.enums import UIStyle
from license_checker.tui.tables import FilesTable, ReportTable


def section(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))


class CheckConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_scan_start(self, count: int) -> None:
        self.console.print(f"Scanning {count} files...", highlight=False)

    def render_report(self, report: CheckReport) -> None:
        failures = report.failures
        self.console.print(
            section(
                "license check",
                ReportTable.summary_block(report),
                style=UIStyle.GREEN.value if not failures else UIStyle.RED.value,
            )
        )
        if not failures:
            self.console.print("No license issues found", highlight=False)
            return

        outcome = report.outcomes[-1]
        self.console.print(
            section(
                "failures",
                ReportTable.failures_table(failures),
                style=UIStyle.RED.value,
                subtitle=f"config {outcome.index}",
            )
        )

    def render_files(self, index: int, config: ConfigRecord, files: list[str]) -> None:
        licenses = ", ".join(sorted(config.licenses)) or "(none)"
        if not files:
            self.console.print(
                section(
                    f"config {index}",
                    Text("No files selected."),
                    style=UIStyle.YELLOW.value,
                    subtitle=f"licenses: {licenses}",
                )
            )
            return
        self.console.print(
            section(
                f"config {index}",
                FilesTable.files_table(files),
                style=UIStyle.CYAN.value,
                subtitle=f"licenses: {licenses}",
            )
        )
