"""Integrations help dialog: pick a scripting integration to insert.

Single Responsibility Principle:
    Presents an injected :class:`~autorun.catalog.IntegrationCatalog` as a
    modal list and resolves the "open dialog" operation exactly once with a
    :data:`~autorun.ui.results.DialogResult`. No catalog filtering, caching
    or mutation happens here.

Variants
--------
``IntegrationsHelpDialog`` (flat, default)
    Selecting a row closes the dialog with ``Selected(example)``; Close or
    escape closes it with ``Cancelled()``.
``ExpandableIntegrationsHelpDialog``
    Selecting a row toggles an inline, monospace example block; the dialog
    is only closed by Close or escape, always with ``Cancelled()``.

Examples
--------
>>> from autorun.catalog import DEFAULT_CATALOG
>>> dialog = build_dialog(DEFAULT_CATALOG, "flat")
>>> type(dialog).__name__
'IntegrationsHelpDialog'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from rich.syntax import Syntax
from textual import events, on
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Button, Label, ListItem, ListView, Static

from autorun.catalog import IntegrationCatalog, IntegrationDescriptor
from autorun.config import (
    DIALOG_VARIANT_EXPANDABLE,
    DIALOG_VARIANT_FLAT,
    DIALOG_VARIANTS,
    EXAMPLE_LEXER,
)
from autorun.exceptions import ConfigurationError
from autorun.i18n import translate
from autorun.ui.results import Cancelled, DialogResult, Selected

if TYPE_CHECKING:
    from textual.app import App, ComposeResult

logger = logging.getLogger(__name__)

_DIALOG_CSS = """
{name} {{
    align: center middle;
}}
{name} > #integrations-dialog {{
    width: 90;
    max-width: 95%;
    height: auto;
    max-height: 90%;
    border: thick $accent;
    background: $surface;
    padding: 1 2;
}}
{name} #integrations-title {{ text-style: bold; width: 100%; margin-bottom: 1; }}
{name} #integrations-hint {{ color: $text-muted; }}
{name} #integrations-empty {{ color: $warning; margin: 1 0; }}
{name} #integrations-actions {{ height: auto; align: right middle; margin-top: 1; }}
{name} .integration-description {{ color: $text-muted; }}
"""


class _HelpDialogBase(ModalScreen[DialogResult]):
    """Shared wiring: title, close control and single resolution."""

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "close", "Close"),
    ]

    def __init__(
        self,
        catalog: IntegrationCatalog,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.catalog = catalog
        self._resolved = False

    @property
    def resolved(self) -> bool:
        return self._resolved

    def _hint_key(self) -> str:
        return "integrations_hint"

    def compose_rows(self) -> ComposeResult:
        """Yield the row widgets between the hint and the Close button."""
        yield from ()

    def compose(self) -> ComposeResult:
        with Vertical(id="integrations-dialog"):
            yield Label(translate("integrations_title"), id="integrations-title")
            if len(self.catalog):
                yield Label(translate(self._hint_key()), id="integrations-hint")
            else:
                yield Label(translate("integrations_empty"), id="integrations-empty")
            yield from self.compose_rows()
            with Horizontal(id="integrations-actions"):
                yield Button(translate("close"), id="close")

    def on_mount(self) -> None:
        logger.debug(
            "Opened %s with %d integrations", type(self).__name__, len(self.catalog)
        )

    @on(Button.Pressed, "#close")
    def _close_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_close()

    def action_close(self) -> None:
        self.resolve(Cancelled())

    def resolve(self, result: DialogResult) -> None:
        """Dismiss the dialog with ``result`` unless it already resolved."""
        if self._resolved:
            logger.debug("Ignoring %r; dialog already resolved", result)
            return
        self._resolved = True
        logger.info("Integrations help resolved with %s", type(result).__name__)
        self.dismiss(result)


class IntegrationListItem(ListItem):
    """Flat row: ``"<id> — <title>"`` over the description."""

    def __init__(self, descriptor: IntegrationDescriptor) -> None:
        super().__init__(classes="integration-item")
        self.descriptor = descriptor

    def compose(self) -> ComposeResult:
        yield Label(self.descriptor.label, markup=False, classes="integration-label")
        yield Label(
            self.descriptor.description,
            markup=False,
            classes="integration-description",
        )


class IntegrationsHelpDialog(_HelpDialogBase):
    r"""Modal list where picking a row returns its example.

    Parameters
    ----------
    catalog : IntegrationCatalog
        Integrations to present, in display order.

    Notes
    -----
    States: Open, then exactly one of Closed-Selected(example) or
    Closed-Cancelled. Both are terminal; later events are ignored.
    """

    DEFAULT_CSS: ClassVar[str] = _DIALOG_CSS.format(name="IntegrationsHelpDialog") + """
    IntegrationsHelpDialog #integrations-list { height: auto; max-height: 24; }
    IntegrationsHelpDialog .integration-item { padding: 0 1; height: auto; }
    """

    def compose_rows(self) -> ComposeResult:
        yield ListView(
            *[IntegrationListItem(descriptor) for descriptor in self.catalog],
            id="integrations-list",
        )

    @on(ListView.Selected, "#integrations-list")
    def _row_selected(self, event: ListView.Selected) -> None:
        event.stop()
        item = event.item
        if isinstance(item, IntegrationListItem):
            self.resolve(Selected(item.descriptor.example))


class ExampleCode(Static):
    """Monospace, syntax-highlighted example snippet."""

    def __init__(self, example: str) -> None:
        syntax = Syntax(example, EXAMPLE_LEXER, word_wrap=True)
        super().__init__(syntax, classes="integration-example-code")
        self.syntax = syntax


class IntegrationExample(Vertical):
    """Example block of an expanded row; clicks here never toggle the row."""

    def on_click(self, event: events.Click) -> None:
        event.stop()


class IntegrationRow(Vertical, can_focus=True):
    """Expandable row; the example block shows only while expanded."""

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("enter", "toggle", "Show example", show=False),
        Binding("space", "toggle", "Show example", show=False),
    ]
    DEFAULT_CSS: ClassVar[str] = """
    IntegrationRow { height: auto; padding: 0 1; margin-bottom: 1; }
    IntegrationRow:focus { background: $boost; }
    IntegrationRow > .integration-example { display: none; height: auto; margin-top: 1; }
    IntegrationRow.-expanded > .integration-example { display: block; }
    IntegrationRow .integration-example-label { text-style: bold italic; }
    """

    expanded: reactive[bool] = reactive(False)

    class Toggled(Message):
        """Posted whenever the row flips between collapsed and expanded."""

        def __init__(self, row: IntegrationRow, expanded: bool) -> None:
            super().__init__()
            self.row = row
            self.expanded = expanded

    def __init__(self, descriptor: IntegrationDescriptor) -> None:
        super().__init__(classes="integration-row")
        self.descriptor = descriptor

    def compose(self) -> ComposeResult:
        yield Label(self.descriptor.label, markup=False, classes="integration-label")
        yield Label(
            self.descriptor.description,
            markup=False,
            classes="integration-description",
        )
        with IntegrationExample(classes="integration-example"):
            yield Label(translate("example_label"), classes="integration-example-label")
            yield ExampleCode(self.descriptor.example)

    def watch_expanded(self, expanded: bool) -> None:
        self.set_class(expanded, "-expanded")

    def toggle(self) -> None:
        self.expanded = not self.expanded
        self.post_message(self.Toggled(self, self.expanded))

    def action_toggle(self) -> None:
        self.toggle()

    def on_click(self) -> None:
        self.toggle()


class ExpandableIntegrationsHelpDialog(_HelpDialogBase):
    r"""Modal list whose rows reveal their example in place.

    Parameters
    ----------
    catalog : IntegrationCatalog
        Integrations to present, in display order.

    Notes
    -----
    Every row starts collapsed. Toggling a row never closes the dialog;
    only the Close control (or escape) does, resolving with ``Cancelled()``.
    """

    DEFAULT_CSS: ClassVar[str] = _DIALOG_CSS.format(
        name="ExpandableIntegrationsHelpDialog"
    ) + """
    ExpandableIntegrationsHelpDialog #integrations-rows { height: auto; max-height: 30; }
    """

    def _hint_key(self) -> str:
        return "integrations_expand_hint"

    def compose_rows(self) -> ComposeResult:
        with VerticalScroll(id="integrations-rows"):
            for descriptor in self.catalog:
                yield IntegrationRow(descriptor)

    def on_integration_row_toggled(self, event: IntegrationRow.Toggled) -> None:
        logger.debug(
            "Integration %s %s",
            event.row.descriptor.id,
            "expanded" if event.expanded else "collapsed",
        )


def build_dialog(
    catalog: IntegrationCatalog, variant: str = DIALOG_VARIANT_FLAT
) -> _HelpDialogBase:
    r"""Create the dialog screen for ``variant``.

    Parameters
    ----------
    catalog : IntegrationCatalog
        Integrations to present.
    variant : str, optional
        ``"flat"`` (default) or ``"expandable"``.

    Returns
    -------
    ModalScreen[DialogResult]

    Raises
    ------
    ConfigurationError
        If ``variant`` is unknown.
    """
    if variant == DIALOG_VARIANT_FLAT:
        return IntegrationsHelpDialog(catalog)
    if variant == DIALOG_VARIANT_EXPANDABLE:
        return ExpandableIntegrationsHelpDialog(catalog)
    raise ConfigurationError(
        f"Unknown dialog variant: {variant!r}",
        context={"supported": list(DIALOG_VARIANTS)},
    )


def open_integrations_help(
    app: App[object],
    catalog: IntegrationCatalog,
    callback: Callable[[DialogResult | None], None],
    variant: str = DIALOG_VARIANT_FLAT,
) -> _HelpDialogBase:
    """Push the integrations help dialog and route its result to ``callback``."""
    dialog = build_dialog(catalog, variant)
    app.push_screen(dialog, callback=callback)
    return dialog


__all__ = [
    "ExampleCode",
    "ExpandableIntegrationsHelpDialog",
    "IntegrationExample",
    "IntegrationListItem",
    "IntegrationRow",
    "IntegrationsHelpDialog",
    "build_dialog",
    "open_integrations_help",
]
