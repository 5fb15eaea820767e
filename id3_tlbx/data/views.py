"""Lazy, composable cursors over categorical tables.

A view never copies row storage. ``select`` and ``drop`` wrap the current view and
filter or relabel rows on the fly, so a chain of derived views always reads from the
rows owned by a single :class:`BaseView`.

Example:
    >>> view = BaseView.from_rows([["outlook", "play"], ["sunny", "no"], ["rain", "yes"]])
    >>> sunny = view.select("outlook", "sunny")
    >>> sunny.reset()
    >>> sunny.next()
    ['sunny', 'no']
    >>> sunny.drop("outlook").columns()
    ['', 'play']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

import pandas as pd

from id3_tlbx.exceptions import ColumnNotFoundError, TableLoadError


HIDDEN = ""
"""Placeholder name of a column hidden by :meth:`TableView.drop`."""


def find_column(columns: Sequence[str], name: str) -> int:
    """Return the position of ``name`` in ``columns``.

    Hidden columns carry the empty name and can never be looked up.

    Raises:
        ColumnNotFoundError: If ``name`` is not a visible column.
    """
    if name != HIDDEN:
        for i, column in enumerate(columns):
            if column == name:
                return i
    raise ColumnNotFoundError(name, list(columns))


class TableView(ABC):
    """Cursor over rows of string fields with a visible column set.

    Subclasses implement :meth:`columns`, :meth:`reset` and :meth:`next`. Filtering and
    column hiding are shared and always return a new view wrapping ``self``.

    A single view instance keeps one cursor position and must not be iterated by two
    readers at once; derive a fresh view (or call :meth:`reset`) per reader instead.
    """

    @abstractmethod
    def columns(self) -> list[str]:
        """Return the column names visible to this view, hidden columns as ``""``."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Move the cursor to just before the first data row."""
        ...

    @abstractmethod
    def next(self) -> list[str] | None:
        """Return the next matching row, or ``None`` once the view is exhausted."""
        ...

    def select(self, column: str, value: str) -> SelectView:
        """Return a view yielding only rows whose ``column`` field equals ``value``.

        Raises:
            ColumnNotFoundError: If ``column`` is not visible in this view.
        """
        return SelectView(self, find_column(self.columns(), column), value)

    def drop(self, column: str) -> DropView:
        """Return a view with ``column`` hidden from :meth:`columns`.

        Raises:
            ColumnNotFoundError: If ``column`` is not visible in this view.
        """
        return DropView(self, find_column(self.columns(), column))

    def __iter__(self) -> Iterator[list[str]]:
        self.reset()
        while (row := self.next()) is not None:
            yield row

    def to_frame(self) -> pd.DataFrame:
        """Materialize the rows of this view with its visible columns only."""
        columns = self.columns()
        keep = [i for i, name in enumerate(columns) if name != HIDDEN]
        return pd.DataFrame(
            [[row[i] for i in keep] for row in self],
            columns=[columns[i] for i in keep],
            dtype=str,
        )


class BaseView(TableView):
    """Root view owning the materialized rows.

    Args:
        header: Ordered, unique, non-empty column names.
        rows: Data rows, each with exactly ``len(header)`` fields.

    Raises:
        TableLoadError: If the header or any row is malformed.
    """

    def __init__(self, header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        header = [str(name) for name in header]
        if not header:
            raise TableLoadError("table has no header row")
        if any(name == HIDDEN for name in header):
            raise TableLoadError(f"header contains a blank column name: {header}")
        duplicates = sorted({name for name in header if header.count(name) > 1})
        if duplicates:
            raise TableLoadError(f"header contains duplicate column names: {duplicates}")

        self._header = header
        self._rows: list[list[str]] = []
        for line, row in enumerate(rows, start=2):
            if len(row) != len(header):
                raise TableLoadError(
                    f"row {line} has {len(row)} fields, expected {len(header)} ({header})",
                )
            self._rows.append([str(field) for field in row])
        self._next = 0

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[str]]) -> BaseView:
        """Build a view from CSV-reader style data where row 0 is the header."""
        if not data:
            raise TableLoadError("table has no header row")
        return cls(data[0], data[1:])

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> BaseView:
        """Build a view from a DataFrame, casting every value to ``str``."""
        return cls(df.columns.astype(str).tolist(), df.astype(str).to_numpy().tolist())

    def __len__(self) -> int:
        return len(self._rows)

    def columns(self) -> list[str]:
        return list(self._header)

    def reset(self) -> None:
        self._next = 0

    def next(self) -> list[str] | None:
        if self._next >= len(self._rows):
            return None
        row = self._rows[self._next]
        self._next += 1
        return row

    def __repr__(self) -> str:
        return f"BaseView(columns={self._header}, n_rows={len(self._rows)})"


class SelectView(TableView):
    """View yielding the parent's rows whose field at ``index`` equals ``value``."""

    def __init__(self, parent: TableView, index: int, value: str) -> None:
        self._parent = parent
        self._index = index
        self._value = value

    def columns(self) -> list[str]:
        return self._parent.columns()

    def reset(self) -> None:
        self._parent.reset()

    def next(self) -> list[str] | None:
        while (row := self._parent.next()) is not None:
            if row[self._index] == self._value:
                return row
        return None

    def __repr__(self) -> str:
        return f"SelectView(index={self._index}, value={self._value!r}, parent={self._parent!r})"


class DropView(TableView):
    """View exposing the parent's rows with the column at ``index`` hidden.

    Rows pass through untouched; only the column names are patched, so positional
    field access stays valid however many drops deep a view is.
    """

    def __init__(self, parent: TableView, index: int) -> None:
        self._parent = parent
        self._index = index

    def columns(self) -> list[str]:
        columns = self._parent.columns()
        columns[self._index] = HIDDEN
        return columns

    def reset(self) -> None:
        self._parent.reset()

    def next(self) -> list[str] | None:
        return self._parent.next()

    def __repr__(self) -> str:
        return f"DropView(index={self._index}, parent={self._parent!r})"


__all__ = ["HIDDEN", "BaseView", "DropView", "SelectView", "TableView", "find_column"]
