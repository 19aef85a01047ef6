"""Internationalization helpers for the terminal UI.

Provide translation strings and utilities to select and apply the current
UI language. Widgets call ``translate`` at compose time so a language change
takes effect for every dialog or panel created afterwards.

Typical usage::

    from autorun.i18n import translate, set_language

"""

from __future__ import annotations

from autorun.config import LANG as _DEFAULT_LANG
from autorun.config import SUPPORTED_LANGS
from autorun.exceptions import ConfigurationError

LANG: str = _DEFAULT_LANG
TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "integrations_title": "Available integrations",
        "integrations_empty": "No integrations available.",
        "integrations_empty_subtitle": "Pass --catalog with a JSON file to add some.",
        "integrations_hint": "Select an integration to insert its example.",
        "integrations_expand_hint": "Select an integration to show its example.",
        "example_label": "Example",
        "close": "Close",
        "choose_integration": "Pick an integration (0 to close)",
        "invalid_choice": "Invalid choice, please try again.",
        "column_integration": "Integration",
        "column_description": "Description",
        "nothing_selected": "No integration selected.",
        "no_scripts_title": "No scripts yet",
        "no_scripts_subtitle": "Create one to get started",
        "new_script": "New script",
        "app_title": "Script editor",
    },
    "sv": {
        "integrations_title": "Tillgängliga integrationer",
        "integrations_empty": "Inga integrationer tillgängliga.",
        "integrations_empty_subtitle": "Ange --catalog med en JSON-fil för att lägga till några.",
        "integrations_hint": "Välj en integration för att infoga dess exempel.",
        "integrations_expand_hint": "Välj en integration för att visa dess exempel.",
        "example_label": "Exempel",
        "close": "Stäng",
        "choose_integration": "Välj en integration (0 för att stänga)",
        "invalid_choice": "Ogiltigt val, försök igen.",
        "column_integration": "Integration",
        "column_description": "Beskrivning",
        "nothing_selected": "Ingen integration vald.",
        "no_scripts_title": "Inga skript ännu",
        "no_scripts_subtitle": "Skapa ett för att komma igång",
        "new_script": "Nytt skript",
        "app_title": "Skriptredigerare",
    },
}


def translate(key: str) -> str:
    r"""Translate a UI key to the current language.

    Parameters
    ----------
    key : str
        The string key for the UI text.

    Returns
    -------
    str
        The translated string, or the key itself when no translation exists.

    Examples
    --------
    >>> translate("close")
    'Close'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    return TEXTS.get(LANG, TEXTS["en"]).get(key, key)


_ = translate


def set_language(lang: str) -> None:
    r"""Set the module-level UI language.

    Parameters
    ----------
    lang : str
        One of the supported language codes (``"en"``, ``"sv"``).

    Raises
    ------
    ConfigurationError
        If ``lang`` is not supported.
    """
    if lang not in SUPPORTED_LANGS:
        raise ConfigurationError(
            f"Unsupported language: {lang!r}",
            context={"supported": list(SUPPORTED_LANGS)},
        )
    globals()["LANG"] = lang


__all__ = ["LANG", "TEXTS", "set_language", "translate"]
