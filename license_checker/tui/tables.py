from rich.table import Column, Table
from rich.text import Text

from license_checker.models import CheckReport, ScanResult, ScanStatus
from license_checker.tui.enums import SCAN_STATUS_STYLE, UIStyle
from license_checker.utils import compact_home_path


class ReportTable:
    @staticmethod
    def summary_block(report: CheckReport):
        counts = report.summary()
        chips = [
            f"{status.value}={counts[status.value]}"
            for status in ScanStatus
            if counts[status.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Root", Text(compact_home_path(report.root)))
        table.add_row("Configs", str(len(report.outcomes)))
        table.add_row("Files", str(report.scanned))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def failures_table(failures: list[ScanResult]) -> Table:
        table = Table(
            Column(header="Status", width=22),
            Column(header="File", overflow="fold"),
            Column(header="License", width=24, overflow="ellipsis"),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for result in failures:
            style = SCAN_STATUS_STYLE.get(result.status, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{result.status.value}[/{style}]",
                Text(result.path),
                Text(result.license_id or ""),
                Text(result.detail or ""),
            )
        return table


class FilesTable:
    @staticmethod
    def files_table(files: list[str]) -> Table:
        table = Table(
            Column(header="#", width=6, justify="right"),
            Column(header="File", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for position, path in enumerate(files, start=1):
            table.add_row(str(position), Text(path))
        return table
