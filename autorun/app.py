"""Textual script editor wiring the empty state and the integrations help.

The app starts on an empty state inviting the user to create a script. Once
the editor is shown, ``F2`` opens the integrations help dialog; a picked
example is inserted at the cursor, replacing any selection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.app import App
from textual.binding import Binding
from textual.widgets import Footer, Static, TextArea

from autorun.catalog import DEFAULT_CATALOG, IntegrationCatalog
from autorun.config import DIALOG_VARIANT
from autorun.editor import apply_dialog_result, location_to_offset, offset_to_location
from autorun.i18n import translate
from autorun.ui.empty_state import EmptyStateAction, EmptyStatePanel
from autorun.ui.integrations_help import open_integrations_help
from autorun.ui.results import DialogResult, Selected

if TYPE_CHECKING:
    from textual.app import ComposeResult

logger = logging.getLogger(__name__)

SCRIPT_ICON: str = "📜"


class ScriptEditorApp(App[None]):
    """Minimal script editor hosting the integrations help dialog.

    Parameters
    ----------
    catalog : IntegrationCatalog, optional
        Integrations offered by the help dialog.
    variant : str, optional
        Dialog variant, ``"flat"`` or ``"expandable"``.
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("f2", "integrations", "Integrations"),
        Binding("ctrl+n", "new_script", "New script"),
        Binding("ctrl+q", "quit", "Quit"),
    ]
    CSS: ClassVar[str] = """
    #header { background: $accent; color: black; padding: 1 2; }
    #editor { display: none; height: 1fr; }
    #empty-state { height: 1fr; }
    """

    def __init__(
        self,
        catalog: IntegrationCatalog = DEFAULT_CATALOG,
        variant: str = DIALOG_VARIANT,
    ) -> None:
        super().__init__()
        self.catalog = catalog
        self.variant = variant
        self.last_result: DialogResult | None = None

    def compose(self) -> ComposeResult:
        yield Static(translate("app_title"), id="header")
        yield EmptyStatePanel(
            SCRIPT_ICON,
            translate("no_scripts_title"),
            translate("no_scripts_subtitle"),
            EmptyStateAction(self.action_new_script, translate("new_script")),
            id="empty-state",
        )
        yield TextArea(id="editor")
        yield Footer()

    @property
    def editor(self) -> TextArea:
        return self.query_one("#editor", TextArea)

    @property
    def has_script(self) -> bool:
        return self.editor.display

    def action_new_script(self) -> None:
        self.query_one("#empty-state", EmptyStatePanel).display = False
        self.editor.display = True
        self.editor.focus()

    def action_integrations(self) -> None:
        open_integrations_help(self, self.catalog, self.insert_result, self.variant)

    def insert_result(self, result: DialogResult | None) -> None:
        """Insert a picked example at the editor cursor."""
        self.last_result = result
        if not isinstance(result, Selected):
            self.notify(translate("nothing_selected"))
            return
        if not self.has_script:
            self.action_new_script()
        editor = self.editor
        text = editor.text
        start, end = sorted(location_to_offset(text, location) for location in editor.selection)
        updated, cursor = apply_dialog_result(text, result, (start, end))
        if cursor is None:
            return
        # replace() records an undoable edit; load_text() would drop the history
        editor.replace(
            result.example,
            offset_to_location(text, start),
            offset_to_location(text, end),
        )
        editor.move_cursor(offset_to_location(updated, cursor))
        logger.info("Inserted %d characters at offset %d", len(result.example), start)
