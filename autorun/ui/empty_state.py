"""Empty state placeholder shown when a collection has nothing to list.

Single Responsibility:
    Renders an icon, a title, a subtitle, an optional call-to-action and a
    row of decorative dots. The panel owns no state; its only output is the
    caller-supplied action callback, invoked once per activation.

The action is a single optional :class:`EmptyStateAction` carrying both the
callback and its label, so a label without a callback (or the reverse)
cannot be expressed. :meth:`EmptyStatePanel.from_parts` adapts callers that
still hold the two values separately.

Two renderings are provided: the Textual widget :class:`EmptyStatePanel`
and the Rich renderable returned by :func:`render_empty_state` for the plain
console.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from textual import on
from textual.containers import Center, Vertical
from textual.message import Message
from textual.widgets import Button, Static

from autorun.config import EMPTY_STATE_DOT_COUNT

if TYPE_CHECKING:
    from textual.app import ComposeResult

DOT: str = "●"


@dataclass(frozen=True)
class EmptyStateAction:
    r"""Call-to-action offered by an empty state.

    Attributes
    ----------
    callback : Callable[[], None]
        Zero-argument function invoked when the action is activated.
    label : str
        Button text.
    """

    callback: Callable[[], None]
    label: str


def build_dots(count: int = EMPTY_STATE_DOT_COUNT) -> Text:
    r"""Return the decorative indicator row.

    The middle dot is emphasised; the others are dimmed.

    Parameters
    ----------
    count : int, optional
        Number of dots. Non-positive counts yield an empty text.

    Returns
    -------
    Text

    Examples
    --------
    >>> build_dots(3).plain
    '● ● ●'
    """
    dots = Text(justify="center")
    middle = count // 2
    for index in range(max(count, 0)):
        if index:
            dots.append(" ")
        dots.append(DOT, style="bold" if index == middle else "dim")
    return dots


class EmptyStatePanel(Vertical):
    """Placeholder panel with an optional single call-to-action.

    Parameters
    ----------
    icon : str
        Symbol shown above the title (an emoji or short glyph).
    title : str
        Headline text.
    subtitle : str
        Secondary text.
    action : EmptyStateAction | None, optional
        When given, an action button is rendered; otherwise it is omitted.

    Examples
    --------
    >>> panel = EmptyStatePanel("📜", "No scripts yet", "Create one to get started")
    >>> panel.action is None
    True
    """

    DEFAULT_CLASSES = "empty-state"
    DEFAULT_CSS: ClassVar[str] = """
    EmptyStatePanel {
        height: auto;
        width: 100%;
        align: center middle;
        padding: 2 4;
    }
    EmptyStatePanel > .empty-state-icon { text-align: center; width: 100%; }
    EmptyStatePanel > .empty-state-title { text-align: center; width: 100%; text-style: bold; }
    EmptyStatePanel > .empty-state-subtitle { text-align: center; width: 100%; color: $text-muted; }
    EmptyStatePanel > .empty-state-dots { text-align: center; width: 100%; color: $accent; margin-top: 1; }
    EmptyStatePanel Center { margin-top: 1; height: auto; }
    """

    class ActionInvoked(Message):
        """Posted after the action callback ran."""

        def __init__(self, panel: EmptyStatePanel) -> None:
            super().__init__()
            self.panel = panel

    def __init__(
        self,
        icon: str,
        title: str,
        subtitle: str,
        action: EmptyStateAction | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.icon = icon
        self.title_text = title
        self.subtitle_text = subtitle
        self.action = action

    @classmethod
    def from_parts(
        cls,
        icon: str,
        title: str,
        subtitle: str,
        callback: Callable[[], None] | None = None,
        label: str | None = None,
        **kwargs: str | None,
    ) -> EmptyStatePanel:
        """Build a panel from separately held callback and label.

        An action is created only when both are supplied.
        """
        action = (
            EmptyStateAction(callback, label)
            if callback is not None and label is not None
            else None
        )
        return cls(icon, title, subtitle, action, **kwargs)

    @property
    def has_action(self) -> bool:
        return self.action is not None

    def compose(self) -> ComposeResult:
        yield Static(self.icon, markup=False, classes="empty-state-icon")
        yield Static(self.title_text, markup=False, classes="empty-state-title")
        yield Static(self.subtitle_text, markup=False, classes="empty-state-subtitle")
        if self.action is not None:
            with Center():
                yield Button(self.action.label, variant="primary", id="empty-action")
        yield Static(build_dots(), classes="empty-state-dots")

    @on(Button.Pressed, "#empty-action")
    def _activate(self, event: Button.Pressed) -> None:
        event.stop()
        if self.action is None:
            return
        self.action.callback()
        self.app.bell()
        self.post_message(self.ActionInvoked(self))


def render_empty_state(
    icon: str,
    title: str,
    subtitle: str,
    action: EmptyStateAction | None = None,
) -> Panel:
    r"""Render the empty state as a Rich panel for the plain console.

    Parameters
    ----------
    icon, title, subtitle : str
        Display texts, as for :class:`EmptyStatePanel`.
    action : EmptyStateAction | None, optional
        When present, its label is shown as a hint line. The console has no
        activatable control; callers prompt for the action themselves.

    Returns
    -------
    Panel
        Centered composition of all parts.

    Examples
    --------
    >>> from rich.console import Console
    >>> import io
    >>> console = Console(record=True, width=60, file=io.StringIO())
    >>> console.print(render_empty_state("*", "No scripts yet", "Create one"))
    >>> "No scripts yet" in console.export_text()
    True
    """
    parts: list[Text] = [
        Text(icon, justify="center"),
        Text(title, style="bold", justify="center"),
        Text(subtitle, style="dim", justify="center"),
    ]
    if action is not None:
        parts.append(Text(f"[ {action.label} ]", style="bold cyan", justify="center"))
    parts.append(build_dots())
    return Panel(Align.center(Group(*parts)), border_style="blue")


__all__ = [
    "EmptyStateAction",
    "EmptyStatePanel",
    "build_dots",
    "render_empty_state",
]
