"""Command line entry point.

Usage::

    autorun-tui [--lang en|sv] [--variant flat|expandable] [--catalog PATH]
                [--plain] [--log-level LEVEL]

Without ``--plain`` the Textual script editor starts. With ``--plain`` the
integrations are listed on the console and the picked example is printed.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from autorun.catalog import DEFAULT_CATALOG, IntegrationCatalog, load_catalog
from autorun.config import (
    DIALOG_VARIANTS,
    LOG_LEVELS,
    SUPPORTED_LANGS,
    Settings,
    load_settings,
)
from autorun.exceptions import AppError
from autorun.i18n import set_language, translate
from autorun.logging_setup import configure_logging
from autorun.ui.console import console, ui_error, ui_info
from autorun.ui.prompts import choose_integration
from autorun.ui.results import Selected

logger = logging.getLogger(__name__)


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line args.

    Parameters
    ----------
    argv : list[str] | None
        Optional argv to parse. When ``None`` the real CLI args are used.

    Returns
    -------
    argparse.Namespace
        Fields ``lang``, ``variant``, ``catalog``, ``plain`` and ``log_level``;
        unset options are ``None`` so settings from the environment apply.
    """
    parser = argparse.ArgumentParser(
        prog="autorun-tui", description="Script editor with integrations help"
    )
    parser.add_argument("--lang", choices=SUPPORTED_LANGS, default=None)
    parser.add_argument("--variant", choices=DIALOG_VARIANTS, default=None)
    parser.add_argument("--catalog", type=Path, default=None, help="JSON catalog file")
    parser.add_argument(
        "--plain", action="store_true", help="Use the console chooser instead of the TUI"
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Overlay explicit CLI options on environment-derived settings."""
    settings = load_settings()
    overrides: dict[str, object] = {}
    if args.lang:
        overrides["lang"] = args.lang
    if args.variant:
        overrides["dialog_variant"] = args.variant
    if args.catalog is not None:
        overrides["catalog_path"] = args.catalog
    if args.log_level:
        overrides["log_level"] = args.log_level
    return replace(settings, **overrides)


def resolve_catalog(settings: Settings) -> IntegrationCatalog:
    if settings.catalog_path is None:
        return DEFAULT_CATALOG
    return load_catalog(settings.catalog_path)


def run_plain(catalog: IntegrationCatalog) -> None:
    result = choose_integration(catalog)
    if isinstance(result, Selected):
        console.print(result.example, markup=False, highlight=False)
    else:
        ui_info(translate("nothing_selected"))


def main(argv: list[str] | None = None) -> int:
    r"""Run the application.

    Returns
    -------
    int
        ``0`` on success, ``1`` when an :class:`AppError` stopped the run.
    """
    args = parse_cli_args(argv)
    try:
        settings = resolve_settings(args)
        configure_logging(settings.log_level)
        set_language(settings.lang)
        catalog = resolve_catalog(settings)
        if args.plain:
            run_plain(catalog)
        else:
            from autorun.app import ScriptEditorApp

            ScriptEditorApp(catalog, settings.dialog_variant).run()
    except AppError as exc:
        logger.error("Run failed: %s", exc, extra={"error": exc.to_dict()})
        ui_error(str(exc))
        return 1
    return 0


__all__ = ["main", "parse_cli_args", "resolve_catalog", "resolve_settings", "run_plain"]
