import io
import json
import typer
from typing import Any, List, Tuple
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from registrar.core.naming import canonical_name
from registrar.utils.diagnostics import RegistryDiagnostic
from registrar.utils.logging import error_console

class OutputFormatter:
    """
    Handles output formatting for the CLI.
    Keeps system messages (stderr) apart from data (stdout).
    """

    @staticmethod
    def log(message: str, severity: str = "info") -> None:
        """
        Print system messages to stderr with color coding.
        """
        style = "white"
        prefix = "[SYSTEM]"

        if severity == "warning":
            style = "yellow"
        elif severity == "error":
            style = "red"
        elif severity == "critical":
            style = "bold red"
        elif severity == "success":
            style = "green"

        error_console.print(f"[{style}]{prefix} {escape(message)}[/{style}]", highlight=False)

    @staticmethod
    def print_diagnostics(diagnostics: List[RegistryDiagnostic]) -> None:
        """
        Prints a table of registry diagnostics to stderr.
        """
        if not diagnostics:
            return

        table = Table(title="Registrar Diagnostics", border_style="red", header_style="bold red")
        table.add_column("Severity", style="bold")
        table.add_column("Code")
        table.add_column("Message")
        table.add_column("Restriction")
        table.add_column("Name")

        for diag in diagnostics:
            color = "red"
            if diag.severity == "warning":
                color = "yellow"
            elif diag.severity == "critical":
                color = "bold red"

            table.add_row(
                f"[{color}]{diag.severity.upper()}[/{color}]",
                diag.error_code,
                escape(diag.message),
                escape(diag.restriction),
                escape(diag.name),
            )

        error_console.print(table)
        error_console.print() # spacing

    @staticmethod
    def print_implementations(restriction: type, implementations: List[type]) -> None:
        """Print the implementations of a restriction type as a table on stdout."""
        title = f"Implementations of {canonical_name(restriction)}"
        table = Table(title=title, min_width=len(title))
        table.add_column("#", justify="right")
        table.add_column("Class")
        table.add_column("Module")

        for index, impl in enumerate(implementations, start=1):
            table.add_row(str(index), impl.__qualname__, impl.__module__)

        typer.echo(_render(table))

    @staticmethod
    def print_aliases(restriction: type, aliases: List[Tuple[str, str]]) -> None:
        title = f"Aliases of {canonical_name(restriction)}"
        table = Table(title=title, min_width=len(title))
        table.add_column("Alias")
        table.add_column("Canonical Name")

        for alias, target in aliases:
            table.add_row(escape(alias), escape(target))

        typer.echo(_render(table))

    @staticmethod
    def print_data(data: Any) -> None:
        """
        Print a result to stdout.
        Classes are printed by canonical name.
        """
        if isinstance(data, str):
            typer.echo(data)
            return

        def json_serializer(obj):
            if isinstance(obj, BaseModel):
                return obj.model_dump(mode='json')
            if isinstance(obj, type):
                return canonical_name(obj)
            return str(obj)

        try:
            output = json.dumps(data, indent=2, default=json_serializer)
            typer.echo(output)
        except TypeError as e:
            OutputFormatter.log(f"JSON Serialization failed: {e}", severity="error")
            typer.echo(str(data))


def _render(table: Table) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=120).print(table)
    return buffer.getvalue().rstrip()
