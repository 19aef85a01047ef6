"""Result types returned by the integrations help dialog.

Opening the dialog resolves exactly once, either with the example text of
the picked integration or with no value.

Examples
--------
>>> bool(Selected("return 1")), bool(Cancelled())
(True, False)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Selected:
    """The user picked an integration; ``example`` is its snippet."""

    example: str

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Cancelled:
    """The dialog was closed without picking anything."""

    def __bool__(self) -> bool:
        return False


DialogResult = Union[Selected, Cancelled]

__all__ = ["Cancelled", "DialogResult", "Selected"]
