"""Human-readable rendering of package reports."""

from rich.table import Table

from pluginwatch.core.checker import PluginStatusChecker
from pluginwatch.core.report import PackageReport
from pluginwatch.hooks.handlers import (
    incompatible_reason,
    plugin_warning,
    stale_reason,
    unavailable_reason,
)


def report_warnings(checker: PluginStatusChecker, report: PackageReport) -> list[str]:
    """Return one warning line per failed predicate, plus registry errors."""
    ref = report.ref
    if report.available is False:
        # The remaining predicates follow from the plugin being gone
        return [plugin_warning(ref, unavailable_reason(checker))]

    warnings: list[str] = []
    if report.actively_maintained is False:
        warnings.append(plugin_warning(ref, stale_reason(checker)))
    if report.compatible_with_recent is False:
        warnings.append(plugin_warning(ref, incompatible_reason(checker)))
    for error in report.errors:
        warnings.append(f"Could not verify {ref.name}: {error}")
    return warnings


def _cell(value: bool | None) -> str:
    if value is None:
        return "[dim]?[/dim]"
    if value:
        return "[green]yes[/green]"
    return "[red]no[/red]"


def render_report_table(reports: list[PackageReport]) -> Table:
    """Build a Rich table with one row per tracked package."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("plugin", style="cyan", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("listed", no_wrap=True)
    table.add_column("maintained", no_wrap=True)
    table.add_column("tested", no_wrap=True)

    for report in reports:
        if not report.tracked:
            continue
        table.add_row(
            report.ref.name,
            report.ref.version or "-",
            _cell(report.available),
            _cell(report.actively_maintained),
            _cell(report.compatible_with_recent),
        )
    return table
