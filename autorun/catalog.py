"""Integration catalog: descriptors, validation and loading.

An integration is a named, pre-authored Lua example that helps a user write
automation scripts. The catalog is an ordered, immutable collection of such
descriptors with unique ids. It is passed explicitly to the UI components
that display it; ``DEFAULT_CATALOG`` holds the integrations exposed by the
script runner.

Examples
--------
>>> from autorun.catalog import DEFAULT_CATALOG
>>> DEFAULT_CATALOG.ids()
('icp_call', 'icp_batch', 'icp_message', 'icp_ui_list')
>>> DEFAULT_CATALOG.get("icp_message").title
'Message'
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, overload

from autorun.exceptions import DataValidationError

logger = logging.getLogger(__name__)

LABEL_SEPARATOR: str = " — "
_FIELDS: tuple[str, ...] = ("id", "title", "description", "example")


@dataclass(frozen=True)
class IntegrationDescriptor:
    r"""A single integration offered to script authors.

    Attributes
    ----------
    id : str
        Stable key, unique within a catalog (e.g. ``"icp_call"``).
    title : str
        Short human label.
    description : str
        One-line summary.
    example : str
        Minimal Lua snippet returned when the integration is picked.
    """

    id: str
    title: str
    description: str
    example: str

    @property
    def label(self) -> str:
        """Row title shown in lists: ``"<id> — <title>"``."""
        return f"{self.id}{LABEL_SEPARATOR}{self.title}"

    @classmethod
    def from_mapping(cls, data: Any, *, index: int = 0) -> IntegrationDescriptor:
        r"""Build a descriptor from a JSON-like mapping.

        Parameters
        ----------
        data : Any
            Mapping holding the four string fields.
        index : int, optional
            Position in the source list, used for error context.

        Returns
        -------
        IntegrationDescriptor

        Raises
        ------
        DataValidationError
            If ``data`` is not a mapping or a field is missing or not a string.
        """
        if not isinstance(data, dict):
            raise DataValidationError(
                "Catalog entry must be an object",
                context={"index": index, "type": type(data).__name__},
            )
        values: dict[str, str] = {}
        for field in _FIELDS:
            value = data.get(field)
            if not isinstance(value, str):
                raise DataValidationError(
                    f"Catalog entry field {field!r} must be a string",
                    context={"index": index, "field": field},
                )
            values[field] = value
        return cls(**values)


class IntegrationCatalog:
    r"""Ordered, immutable sequence of :class:`IntegrationDescriptor`.

    Parameters
    ----------
    items : Iterable[IntegrationDescriptor], optional
        Descriptors in display order. Consumed once and frozen into a tuple.

    Raises
    ------
    DataValidationError
        If an item is not a descriptor, an id is empty or ids repeat.

    Notes
    -----
    Order is the display order. The catalog offers no mutation API; the UI
    layer reads it without caching or filtering.

    Examples
    --------
    >>> c = IntegrationCatalog([IntegrationDescriptor("a", "A", "d", "x")])
    >>> len(c), c[0].label
    (1, 'a — A')
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[IntegrationDescriptor] = ()) -> None:
        frozen = tuple(items)
        seen: set[str] = set()
        for index, item in enumerate(frozen):
            if not isinstance(item, IntegrationDescriptor):
                raise DataValidationError(
                    "Catalog items must be IntegrationDescriptor instances",
                    context={"index": index, "type": type(item).__name__},
                )
            if not isinstance(item.id, str) or not item.id.strip():
                raise DataValidationError(
                    "Integration id must be a non-empty string",
                    context={"index": index},
                )
            if item.id in seen:
                raise DataValidationError(
                    f"Duplicate integration id: {item.id!r}",
                    context={"index": index, "id": item.id},
                )
            seen.add(item.id)
        self._items: tuple[IntegrationDescriptor, ...] = frozen

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[IntegrationDescriptor]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> IntegrationDescriptor: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[IntegrationDescriptor, ...]: ...

    def __getitem__(
        self, index: int | slice
    ) -> IntegrationDescriptor | tuple[IntegrationDescriptor, ...]:
        return self._items[index]

    def __contains__(self, integration_id: object) -> bool:
        return any(item.id == integration_id for item in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegrationCatalog):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"IntegrationCatalog({list(self.ids())!r})"

    def ids(self) -> tuple[str, ...]:
        """Return integration ids in catalog order."""
        return tuple(item.id for item in self._items)

    def get(self, integration_id: str) -> IntegrationDescriptor | None:
        """Return the descriptor with ``integration_id`` or ``None``."""
        for item in self._items:
            if item.id == integration_id:
                return item
        return None


def load_catalog(path: Path) -> IntegrationCatalog:
    r"""Load an :class:`IntegrationCatalog` from a JSON file.

    The file holds a list of objects with ``id``, ``title``, ``description``
    and ``example`` string fields; list order is catalog order.

    Parameters
    ----------
    path : Path
        JSON file to read.

    Returns
    -------
    IntegrationCatalog

    Raises
    ------
    DataValidationError
        If the file is missing, unreadable, not JSON, not a list, or an
        entry is malformed or duplicated.

    Examples
    --------
    >>> import json, tempfile, pathlib
    >>> p = pathlib.Path(tempfile.mkdtemp()) / "c.json"
    >>> _ = p.write_text(json.dumps([{"id": "http", "title": "HTTP Client",
    ...     "description": "Make web requests", "example": "http.get(url)"}]))
    >>> load_catalog(p).ids()
    ('http',)
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataValidationError(
            "Cannot read integration catalog", context={"path": str(path)}
        ) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataValidationError(
            "Integration catalog is not valid JSON",
            context={"path": str(path), "line": exc.lineno},
        ) from exc
    if not isinstance(data, list):
        raise DataValidationError(
            "Integration catalog must be a JSON list", context={"path": str(path)}
        )
    catalog = IntegrationCatalog(
        IntegrationDescriptor.from_mapping(entry, index=i) for i, entry in enumerate(data)
    )
    logger.info("Loaded %d integrations from %s", len(catalog), path)
    return catalog


DEFAULT_CATALOG: IntegrationCatalog = IntegrationCatalog(
    [
        IntegrationDescriptor(
            id="icp_call",
            title="Canister call",
            description=(
                "Perform a single canister method call. Supports anonymous or "
                "authenticated calls. Returns the raw JSON result."
            ),
            example=(
                "return icp_call({\n"
                '  canister_id = "aaaaa-aa",\n'
                '  method = "greet",\n'
                "  kind = 0, -- 0=query, 1=update, 2=composite\n"
                '  args = "(".."World"..")"\n'
                "})"
            ),
        ),
        IntegrationDescriptor(
            id="icp_batch",
            title="Batch calls",
            description=(
                "Execute multiple canister calls and return a map of label→result. "
                "Each item can include canister_id, method, kind, args, host, "
                "private_key_b64."
            ),
            example=(
                'local a = { label = "gov", canister_id = "rrkah-fqaaa-aaaaa-aaaaq-cai", '
                'method = "get_pending_proposals", kind = 0, args = "()" }\n'
                'local b = { label = "ledger", canister_id = "ryjl3-tyaaa-aaaaa-aaaba-cai", '
                'method = "query_blocks", kind = 0, '
                'args = "{".."start"..":0,".."length"..":10}" }\n'
                "return icp_batch({ a, b })"
            ),
        ),
        IntegrationDescriptor(
            id="icp_message",
            title="Message",
            description=(
                "Return a simple message to the UI layer. Useful for debugging or "
                "informing the user."
            ),
            example='return icp_message("Hello from Lua")',
        ),
        IntegrationDescriptor(
            id="icp_ui_list",
            title="UI: List with buttons",
            description=(
                "Describe a minimal UI list that the app renders. Items are shown "
                "with optional buttons that can trigger actions (e.g. icp_call)."
            ),
            example=(
                "return icp_ui_list({\n"
                '  items = { { title = "Item A" }, { title = "Item B" } },\n'
                '  buttons = { { title = "Refresh", action = { action = "batch", '
                "calls = {} } } }\n"
                "})"
            ),
        ),
    ]
)

__all__ = [
    "DEFAULT_CATALOG",
    "IntegrationCatalog",
    "IntegrationDescriptor",
    "LABEL_SEPARATOR",
    "load_catalog",
]
