"""Terminal UI components for the script editor.

Re-exports the widgets, the dialog screens and the console chooser under one
namespace, e.g. ``from autorun.ui import EmptyStatePanel, IntegrationsHelpDialog``.
"""

from __future__ import annotations

from .empty_state import EmptyStateAction, EmptyStatePanel, render_empty_state
from .integrations_help import (
    ExpandableIntegrationsHelpDialog,
    IntegrationsHelpDialog,
    build_dialog,
    open_integrations_help,
)
from .prompts import ask_text, choose_integration
from .results import Cancelled, DialogResult, Selected

__all__ = [
    "Cancelled",
    "DialogResult",
    "EmptyStateAction",
    "EmptyStatePanel",
    "ExpandableIntegrationsHelpDialog",
    "IntegrationsHelpDialog",
    "Selected",
    "ask_text",
    "build_dialog",
    "choose_integration",
    "open_integrations_help",
    "render_empty_state",
]
