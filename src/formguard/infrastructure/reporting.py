"""
Console reporting of violations and form errors.

Renders tables with rich; useful in CLIs, management commands and tests.
"""

from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from formguard.domain.models import ConstraintViolation


def _short_repr(value: Any, limit: int = 40) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[: limit - 3] + "..."


class ConsoleViolationReporter:
    """
    Prints violations as a table.

    Args:
        console: Target console (a new stdout console if None)
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(
        self,
        violations: Iterable[ConstraintViolation],
        title: str = "Constraint violations",
    ) -> int:
        """
        Print violations.

        Returns:
            Number of violations printed
        """
        violations = list(violations)
        if not violations:
            self.console.print("[bold green]No constraint violations[/bold green]")
            return 0

        table = Table(title=title, title_style="bold red")
        table.add_column("Property path", style="cyan")
        table.add_column("Message")
        table.add_column("Invalid value", style="dim")
        for violation in violations:
            table.add_row(
                escape(violation.property_path or "(root)"),
                escape(violation.message),
                escape(_short_repr(violation.invalid_value)),
            )
        self.console.print(table)
        return len(violations)

    def report_form(self, form: Any) -> int:
        """
        Print the errors attached to a bound form and its fields.

        Args:
            form: A FieldGroup (usually a Form)

        Returns:
            Number of errors printed
        """
        errors = list(form.iter_errors())
        if not errors:
            self.console.print(
                f"[bold green]Form '{form.key}' has no errors[/bold green]"
            )
            return 0

        table = Table(title=f"Errors in form '{form.key}'", title_style="bold red")
        table.add_column("Field", style="cyan")
        table.add_column("Message")
        for field_name, error in errors:
            table.add_row(escape(field_name), escape(error.message))
        self.console.print(table)
        return len(errors)
