"""Minimal Rich output primitives for the plain console mode.

Provides the shared :class:`rich.console.Console` and the message helpers
used by the console chooser and the CLI. Rendering only; no prompts and no
business logic live here.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from autorun.catalog import IntegrationCatalog
from autorun.i18n import translate

console: Console = Console()


def ui_rule(title: str) -> None:
    r"""Render a horizontal rule with ``title`` as caption."""
    console.print(Rule(title, style="bold blue"))


def ui_info(message: str) -> None:
    r"""Display an informational message in cyan."""
    console.print(f"[cyan]{escape(message)}[/cyan]", highlight=False)


def ui_warning(message: str) -> None:
    r"""Display a warning message."""
    console.print(f"[yellow]⚠ {escape(message)}[/yellow]", highlight=False)


def ui_error(message: str) -> None:
    r"""Display an error message in bold red."""
    console.print(f"[bold red]✗ {escape(message)}[/bold red]", highlight=False)


def integrations_table(catalog: IntegrationCatalog) -> Table:
    r"""Build the numbered integrations table.

    Parameters
    ----------
    catalog : IntegrationCatalog
        Integrations in display order; row ``n`` is catalog entry ``n - 1``.

    Returns
    -------
    Table
        One row per integration plus a final ``0`` row for closing.

    Examples
    --------
    >>> from autorun.catalog import DEFAULT_CATALOG
    >>> integrations_table(DEFAULT_CATALOG).row_count
    5
    """
    table = Table(show_header=True, header_style="bold blue")
    table.add_column("#", style="bold")
    table.add_column(translate("column_integration"))
    table.add_column(translate("column_description"))
    for index, descriptor in enumerate(catalog, start=1):
        table.add_row(str(index), descriptor.label, descriptor.description)
    table.add_row("0", translate("close"), "")
    return table


__all__ = [
    "console",
    "integrations_table",
    "ui_error",
    "ui_info",
    "ui_rule",
    "ui_warning",
]
