import logging
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from license_checker.checker import LicenseChecker
from license_checker.constants import CONFIG_FILENAME
from license_checker.errors import LicenseCheckerError
from license_checker.models import WalkOptions
from license_checker.tui import CheckConsoleUI


def _dir_option() -> Callable:
    return click.option(
        "--dir",
        "directory",
        type=click.Path(file_okay=False, path_type=Path),
        default=".",
        show_default=True,
        help="Project root directory to scan.",
    )


def _config_name_option() -> Callable:
    return click.option(
        "--config-name",
        default=CONFIG_FILENAME,
        show_default=True,
        help="Configuration filename, relative to the project root.",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostic details to stderr.")
def cli(verbose: bool) -> None:
    """Check that project files carry permitted license headers."""
    _configure_logging(verbose)


@cli.command(help="Scan project files and report license violations.")
@_dir_option()
@_config_name_option()
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of files scanned concurrently.",
)
def check(directory: Path, config_name: str, workers: Optional[int]) -> None:
    ui = CheckConsoleUI(Console())
    checker = LicenseChecker(
        options=WalkOptions(config_filename=config_name),
        workers=workers,
        on_scan_start=lambda _index, count: ui.render_scan_start(count),
    )

    try:
        report = checker.run(directory)
    except LicenseCheckerError as exc:
        raise click.ClickException(str(exc))

    ui.render_report(report)

    if not report.ok:
        click.echo(report.format_failures(), err=True, nl=False)
        raise click.exceptions.Exit(1)


@cli.command(help="List the files each configuration selects, without scanning them.")
@_dir_option()
@_config_name_option()
@click.option(
    "--config-index",
    type=click.IntRange(min=0),
    default=None,
    help="Only list files for the configuration at this position.",
)
def files(directory: Path, config_name: str, config_index: Optional[int]) -> None:
    ui = CheckConsoleUI(Console())
    checker = LicenseChecker(options=WalkOptions(config_filename=config_name))
    root = directory.resolve()

    try:
        configs = checker.load_configs(root)
        if config_index is not None and config_index >= len(configs):
            raise click.ClickException(
                f"Config index {config_index} out of range ({len(configs)} configs)"
            )
        for index, config in enumerate(configs):
            if config_index is not None and index != config_index:
                continue
            ui.render_files(index, config, checker.walker.walk(root, config.rules))
    except LicenseCheckerError as exc:
        raise click.ClickException(str(exc))


def main() -> int:
    try:
        # Outside standalone mode click returns the exit code of an Exit.
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
