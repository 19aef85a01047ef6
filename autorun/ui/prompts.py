"""Prompt helpers and the plain console integration chooser.

The console chooser is the non-Textual rendition of the integrations help
dialog: it prints the catalog as a numbered Rich table and reads a choice.
It resolves with the same :data:`~autorun.ui.results.DialogResult` as the
modal dialog, and bounds re-prompting by
``autorun.config.INTERACTIVE_MAX_INVALID_ATTEMPTS``.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable

import questionary

from autorun import config
from autorun.catalog import IntegrationCatalog
from autorun.exceptions import UserInputError
from autorun.i18n import translate
from autorun.ui.console import console, integrations_table, ui_rule, ui_warning
from autorun.ui.empty_state import render_empty_state
from autorun.ui.results import Cancelled, DialogResult, Selected

logger = logging.getLogger(__name__)

EMPTY_CATALOG_ICON: str = "🧩"


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def ask_text(prompt: str, default: str | None = None) -> str:
    r"""Prompt the user for a line of text.

    Uses questionary on an interactive terminal and plain ``input()``
    otherwise (pipes, tests).

    Parameters
    ----------
    prompt : str
        The user-facing prompt string.
    default : str or None, optional
        Value returned when the answer is empty or input is unavailable.

    Returns
    -------
    str
        The stripped answer, or ``default`` (``""`` when ``None``).
    """
    fallback = default or ""
    if _stdin_is_tty() and not os.environ.get("PYTEST_CURRENT_TEST"):
        answer = questionary.text(prompt, default=fallback).ask()
        return (answer or "").strip() or fallback
    try:
        return input(prompt).strip() or fallback
    except (EOFError, OSError):
        return fallback


def choose_integration(
    catalog: IntegrationCatalog,
    ask: Callable[[str], str] = ask_text,
    max_attempts: int | None = None,
) -> DialogResult:
    r"""Let the user pick an integration on the plain console.

    Parameters
    ----------
    catalog : IntegrationCatalog
        Integrations to offer, numbered from 1 in catalog order.
    ask : Callable[[str], str], optional
        Prompt function; defaults to :func:`ask_text`.
    max_attempts : int | None, optional
        Invalid answers tolerated before giving up. Defaults to
        ``config.INTERACTIVE_MAX_INVALID_ATTEMPTS``.

    Returns
    -------
    DialogResult
        ``Selected(example)`` for a row number or integration id,
        ``Cancelled()`` for ``0`` or an empty answer, and immediately for an
        empty catalog, after printing an empty-state panel.

    Raises
    ------
    UserInputError
        When the number of invalid answers reaches ``max_attempts``.

    Examples
    --------
    >>> from autorun.catalog import DEFAULT_CATALOG
    >>> choose_integration(DEFAULT_CATALOG, ask=lambda _p: "3")  # doctest: +SKIP
    Selected(example='return icp_message("Hello from Lua")')
    """
    limit = config.INTERACTIVE_MAX_INVALID_ATTEMPTS if max_attempts is None else max_attempts
    ui_rule(translate("integrations_title"))
    if not len(catalog):
        console.print(
            render_empty_state(
                EMPTY_CATALOG_ICON,
                translate("integrations_empty"),
                translate("integrations_empty_subtitle"),
            )
        )
        return Cancelled()
    console.print(integrations_table(catalog))
    attempts = 0
    while True:
        choice = (ask(translate("choose_integration")) or "").strip()
        if choice in ("", "0"):
            return Cancelled()
        if choice.isdigit() and 1 <= int(choice) <= len(catalog):
            return Selected(catalog[int(choice) - 1].example)
        descriptor = catalog.get(choice)
        if descriptor is not None:
            return Selected(descriptor.example)
        attempts += 1
        logger.debug("Invalid integration choice %r (%d/%d)", choice, attempts, limit)
        ui_warning(translate("invalid_choice"))
        if attempts >= limit:
            raise UserInputError(
                "Exceeded maximum invalid selections in integrations chooser",
                context={"attempts": attempts, "max_attempts": limit},
            )


__all__ = ["ask_text", "choose_integration"]
