"""Global configuration constants for the project.

Defines paths, logging defaults and UI constants used across the
integration catalog, the Textual widgets and the console fallback.
``load_settings`` layers an optional ``.env`` file and ``AUTORUN_*``
environment variables on top of these defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from autorun.exceptions import ConfigurationError

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "autorun"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Logging
LOG_FILENAME: str = "autorun_tui.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "INFO"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# UI defaults
LANG: str = "en"
SUPPORTED_LANGS: tuple[str, ...] = ("en", "sv")
DIALOG_VARIANT_FLAT: str = "flat"
DIALOG_VARIANT_EXPANDABLE: str = "expandable"
DIALOG_VARIANTS: tuple[str, ...] = (DIALOG_VARIANT_FLAT, DIALOG_VARIANT_EXPANDABLE)
DIALOG_VARIANT: str = DIALOG_VARIANT_FLAT
EMPTY_STATE_DOT_COUNT: int = 3
EXAMPLE_LEXER: str = "lua"

# Console chooser guard
INTERACTIVE_MAX_INVALID_ATTEMPTS: int = 3


@dataclass(frozen=True)
class Settings:
    r"""Resolved runtime settings.

    Attributes
    ----------
    lang : str
        UI language code.
    dialog_variant : str
        Either ``"flat"`` or ``"expandable"``.
    catalog_path : Path | None
        Optional JSON catalog replacing the built-in one.
    log_level : str
        Root logging level name.
    """

    lang: str = LANG
    dialog_variant: str = DIALOG_VARIANT
    catalog_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env_file: Path | None = None) -> Settings:
    r"""Build :class:`Settings` from ``.env`` and ``AUTORUN_*`` variables.

    Parameters
    ----------
    env_file : Path | None, optional
        Explicit ``.env`` path. Defaults to ``PROJECT_ROOT / ".env"`` which is
        only read when present.

    Returns
    -------
    Settings
        Validated settings.

    Raises
    ------
    ConfigurationError
        If the language, dialog variant or log level is not supported.

    Examples
    --------
    >>> load_settings(env_file=Path("/nonexistent/.env")).dialog_variant in DIALOG_VARIANTS
    True
    """
    env_path = env_file if env_file is not None else PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)

    lang = (os.getenv("AUTORUN_LANG") or LANG).strip().lower()
    if lang not in SUPPORTED_LANGS:
        raise ConfigurationError(
            f"Unsupported language: {lang!r}",
            context={"supported": list(SUPPORTED_LANGS)},
        )
    variant = (os.getenv("AUTORUN_DIALOG_VARIANT") or DIALOG_VARIANT).strip().lower()
    if variant not in DIALOG_VARIANTS:
        raise ConfigurationError(
            f"Unsupported dialog variant: {variant!r}",
            context={"supported": list(DIALOG_VARIANTS)},
        )
    level = (os.getenv("AUTORUN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unsupported log level: {level!r}")
    raw_catalog = os.getenv("AUTORUN_CATALOG", "").strip()
    return Settings(
        lang=lang,
        dialog_variant=variant,
        catalog_path=Path(raw_catalog) if raw_catalog else None,
        log_level=level,
    )
