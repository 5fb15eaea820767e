"""Base column definitions and metadata structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import pandas as pd


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a categorical dataset column.

    Attributes:
        pretty_name: Human-readable name for use in plots and reports.
        categories: Values the column may take, in display order. Empty means any value.
    """

    pretty_name: str
    categories: tuple[str, ...] = ()


class BaseColumn(StrEnum):
    """Base class for dataset column enums.

    All derived column enums must define a TARGET member naming the class column
    and implement :meth:`metadata`.
    """

    TARGET: str

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement metadata() method")

    @classmethod
    def attribute_columns(cls) -> list[str]:
        """Get all column names except the target, in declaration order."""
        return [str(col) for col in cls if col != cls.TARGET]

    @property
    def pretty_name(self) -> str:
        """Get the human-readable name for plots and reports."""
        return self.metadata().pretty_name

    @property
    def categories(self) -> tuple[str, ...]:
        """Get the allowed categorical values of this column."""
        return self.metadata().categories

    def unexpected_values(self, values: pd.Series) -> list[str]:
        """Return the distinct values of ``values`` outside :attr:`categories`, in first-seen order."""
        if not self.categories:
            return []
        return [v for v in values.drop_duplicates() if v not in self.categories]
