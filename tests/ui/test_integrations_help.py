"""Tests for `autorun/ui/integrations_help.py`.

The dialogs are pushed onto a headless Textual app; results delivered to
the ``push_screen`` callback are collected on the host.
"""

import pytest
from rich.syntax import Syntax
from textual.app import App
from textual.widgets import Button, ListView

from autorun.catalog import DEFAULT_CATALOG, IntegrationCatalog
from autorun.exceptions import ConfigurationError
from autorun.ui.integrations_help import (
    ExampleCode,
    ExpandableIntegrationsHelpDialog,
    IntegrationListItem,
    IntegrationRow,
    IntegrationsHelpDialog,
    _HelpDialogBase,
    build_dialog,
)
from autorun.ui.results import Cancelled, Selected


class DialogHost(App[None]):
    """Push ``dialog`` on mount and record every result it resolves with."""

    def __init__(self, dialog):
        super().__init__()
        self.dialog = dialog
        self.results = []

    def on_mount(self):
        self.push_screen(self.dialog, callback=self.results.append)


def test_flat_dialog_lists_rows_in_catalog_order(run_async, abc_catalog):
    dialog = IntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            return [item.descriptor.id for item in dialog.query(IntegrationListItem)]

    assert run_async(scenario) == ["alpha", "beta", "gamma"]


@pytest.mark.parametrize("index", [0, 1, 2])
def test_selecting_row_resolves_with_its_example(run_async, abc_catalog, index):
    dialog = IntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            list_view = dialog.query_one("#integrations-list", ListView)
            list_view.index = index
            list_view.action_select_cursor()
            await pilot.pause()
            return list(app.results), app.screen is dialog

    results, still_open = run_async(scenario)
    assert results == [Selected(abc_catalog[index].example)]
    assert still_open is False


def test_http_scenario_row_text_and_result(run_async, http_catalog):
    dialog = IntegrationsHelpDialog(http_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            items = list(dialog.query(IntegrationListItem))
            labels = [(i.descriptor.label, i.descriptor.description) for i in items]
            list_view = dialog.query_one("#integrations-list", ListView)
            list_view.focus()
            list_view.index = 0
            await pilot.press("enter")
            await pilot.pause()
            return labels, list(app.results)

    labels, results = run_async(scenario)
    assert labels == [("http — HTTP Client", "Make web requests")]
    assert results == [Selected("http.get(url)")]


def test_close_button_cancels(run_async, abc_catalog):
    dialog = IntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            dialog.query_one("#close", Button).press()
            await pilot.pause()
            return list(app.results)

    assert run_async(scenario) == [Cancelled()]


def test_escape_cancels(run_async, abc_catalog):
    dialog = IntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            return list(app.results)

    assert run_async(scenario) == [Cancelled()]


def test_dialog_resolves_at_most_once(run_async, abc_catalog):
    dialog = IntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            dialog.resolve(Selected("alpha()"))
            dialog.resolve(Cancelled())
            await pilot.pause()
            return list(app.results), dialog.resolved

    results, resolved = run_async(scenario)
    assert results == [Selected("alpha()")]
    assert resolved is True


def test_empty_catalog_renders_no_rows(run_async):
    dialog = IntegrationsHelpDialog(IntegrationCatalog())

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test() as pilot:
            await pilot.pause()
            rows = len(dialog.query(IntegrationListItem))
            hint = len(dialog.query("#integrations-empty"))
            dialog.query_one("#integrations-list", ListView).action_select_cursor()
            await pilot.pause()
            still_open = app.screen is dialog
            await pilot.press("escape")
            await pilot.pause()
            return rows, hint, still_open, list(app.results)

    rows, hint, still_open, results = run_async(scenario)
    assert rows == 0
    assert hint == 1
    assert still_open is True
    assert results == [Cancelled()]


def test_expandable_rows_toggle_without_closing(run_async, abc_catalog):
    dialog = ExpandableIntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            rows = list(dialog.query(IntegrationRow))
            initial = [row.expanded for row in rows]
            rows[1].toggle()
            await pilot.pause()
            once = (rows[1].expanded, rows[1].has_class("-expanded"), rows[0].expanded)
            rows[1].toggle()
            await pilot.pause()
            twice = (rows[1].expanded, rows[1].has_class("-expanded"))
            open_after_toggles = app.screen is dialog
            results_after_toggles = list(app.results)
            await pilot.press("escape")
            await pilot.pause()
            return (
                [row.descriptor.id for row in rows],
                initial,
                once,
                twice,
                open_after_toggles,
                results_after_toggles,
                list(app.results),
            )

    ids, initial, once, twice, still_open, mid_results, final = run_async(scenario)
    assert ids == ["alpha", "beta", "gamma"]
    assert initial == [False, False, False]
    assert once == (True, True, False)
    assert twice == (False, False)
    assert still_open is True
    assert mid_results == []
    assert final == [Cancelled()]


def test_expandable_row_toggles_from_keyboard(run_async, abc_catalog):
    dialog = ExpandableIntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            row = list(dialog.query(IntegrationRow))[2]
            row.focus()
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            expanded = row.expanded
            dialog.query_one("#close", Button).press()
            await pilot.pause()
            return expanded, list(app.results)

    expanded, results = run_async(scenario)
    assert expanded is True
    assert results == [Cancelled()]


def test_build_dialog_variants():
    assert isinstance(build_dialog(DEFAULT_CATALOG), IntegrationsHelpDialog)
    assert isinstance(
        build_dialog(DEFAULT_CATALOG, "expandable"), ExpandableIntegrationsHelpDialog
    )
    with pytest.raises(ConfigurationError):
        build_dialog(DEFAULT_CATALOG, "tabs")


def test_expanded_row_reveals_example_block(run_async, http_catalog):
    dialog = ExpandableIntegrationsHelpDialog(http_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            row = dialog.query_one(IntegrationRow)
            block = row.query_one(".integration-example")
            code = row.query_one(ExampleCode)
            before = (block.display, block.region.height, "Example" in app.export_screenshot())
            row.toggle()
            await pilot.pause()
            after = (block.display, block.region.height > 0, "Example" in app.export_screenshot())
            return before, after, code.syntax

    before, after, syntax = run_async(scenario)
    assert before == (False, 0, False)
    assert after == (True, True, True)
    assert isinstance(syntax, Syntax)
    assert syntax.code == "http.get(url)"


def test_click_inside_example_keeps_row_expanded(run_async, abc_catalog):
    dialog = ExpandableIntegrationsHelpDialog(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test(size=(100, 50)) as pilot:
            await pilot.pause()
            rows = list(dialog.query(IntegrationRow))
            rows[0].toggle()
            await pilot.pause()
            await pilot.click(rows[0].query_one(ExampleCode))
            await pilot.pause()
            after_code_click = [row.expanded for row in rows]
            await pilot.click(rows[0].query_one(".integration-label"))
            await pilot.pause()
            after_label_click = [row.expanded for row in rows]
            return after_code_click, after_label_click

    after_code_click, after_label_click = run_async(scenario)
    assert after_code_click == [True, False, False]
    assert after_label_click == [False, False, False]


def test_base_dialog_has_no_rows_but_still_closes(run_async, abc_catalog):
    dialog = _HelpDialogBase(abc_catalog)

    async def scenario():
        app = DialogHost(dialog)
        async with app.run_test() as pilot:
            await pilot.pause()
            rows = len(dialog.query(IntegrationRow)) + len(dialog.query(ListView))
            await pilot.press("escape")
            await pilot.pause()
            return rows, list(app.results)

    assert run_async(scenario) == (0, [Cancelled()])
