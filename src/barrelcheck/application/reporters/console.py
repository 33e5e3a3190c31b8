"""Console reporter: ValidationResult → rich formatted text."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from barrelcheck.application.reporters._base import BaseReporter
from barrelcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from barrelcheck.domain.model.validation_result import ValidationResult

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_files: List scanned module files.
        show_exports: List extracted export targets.
        color: Emit ANSI styles. False for plain text (logs, tests).
        width: Console width in columns.
    """

    show_files: bool = False
    show_exports: bool = False
    color: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: rich rule, summary, findings table, verdict."""

    def __init__(
        self,
        output: TextIO | None = None,
        config: ConsoleConfig | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        super().__init__(output)
        self._config = config or ConsoleConfig()

    def report(self, result: ValidationResult) -> None:
        """Write rendered result to the output stream."""
        self._output.write(self.render(result))

    def render(self, result: ValidationResult) -> str:
        """Format validation result as rich formatted string.

        Args:
            result: Validation result to format.

        Returns:
            Formatted string, with ANSI styles when color is enabled.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, result)

        if self._config.show_files and result.files:
            self._render_names(console, "MODULE FILES", result.files)
        if self._config.show_exports and result.exports:
            self._render_names(console, "EXPORTS", result.exports)
        if result.findings:
            self._render_findings(console, result)

        self._render_verdict(console, result)
        return output.getvalue()

    def _render_header(self, console: Console, result: ValidationResult) -> None:
        """Render rule and summary line."""
        console.print()
        console.rule("[bold]EXPORT SURFACE[/bold]")
        console.print()
        console.print(
            f"[bold]Files:[/bold] {len(result.files)}  "
            f"[bold]Exports:[/bold] {len(result.exports)}  "
            f"[bold]Errors:[/bold] {result.error_count}  "
            f"[bold]Warnings:[/bold] {result.warning_count}",
            highlight=False,
        )
        for name, value in result.metadata.items():
            console.print(f"[dim]{escape(name)}[/dim] {escape(value)}", highlight=False)
        console.print()

    def _render_names(self, console: Console, title: str, names: tuple[str, ...]) -> None:
        """Render a titled list of paths."""
        console.print(f"[bold]{title}[/bold] ({len(names)})")
        for name in names:
            console.print(f"  {name}", highlight=False, markup=False)
        console.print()

    def _render_findings(self, console: Console, result: ValidationResult) -> None:
        """Render findings table."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Severity")
        table.add_column("Category", style="dim")
        table.add_column("Message")

        for finding in result.findings:
            style = _SEVERITY_STYLE[finding.severity]
            table.add_row(
                f"[{style}]{finding.severity.name}[/{style}]",
                finding.category.name,
                escape(finding.message),
            )

        console.print(table)
        console.print()

    def _render_verdict(self, console: Console, result: ValidationResult) -> None:
        """Render PASSED/FAILED line."""
        if result.valid:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print("[bold red]FAILED[/bold red]")
