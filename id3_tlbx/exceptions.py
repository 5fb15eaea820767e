"""Error types raised by the ID3 toolbox."""


class ID3Error(Exception):
    """Base class for all toolbox errors."""


class ColumnNotFoundError(ID3Error, LookupError):
    """A column name is not visible in the view or header it was looked up in."""

    def __init__(self, column: str, columns: list[str] | None = None) -> None:
        self.column = column
        self.columns = list(columns) if columns is not None else None
        msg = f"column '{column}' not found"
        if self.columns is not None:
            visible = [c for c in self.columns if c]
            msg += f" (visible columns: {visible})"
        super().__init__(msg)


class UnrecognizedCategoryError(ID3Error, LookupError):
    """The tree has no rule for a value that was not seen during training."""

    def __init__(self, column: str, value: str) -> None:
        self.column = column
        self.value = value
        super().__init__(f"no rule for value '{value}' in column '{column}'")


class EmptyDatasetError(ID3Error, ValueError):
    """Learning was attempted on a view without data rows."""


class ExhaustedAttributesError(ID3Error):
    """No attribute column is left to split an impure partition on."""


class TableLoadError(ID3Error, ValueError):
    """Tabular input is malformed (ragged rows, bad header, parse errors)."""


class TreeEncodeError(ID3Error, ValueError):
    """A decision tree cannot be represented in the persisted format."""


class TreeDecodeError(ID3Error, ValueError):
    """A persisted decision tree could not be decoded."""


__all__ = [
    "ColumnNotFoundError",
    "EmptyDatasetError",
    "ExhaustedAttributesError",
    "ID3Error",
    "TableLoadError",
    "TreeDecodeError",
    "TreeEncodeError",
    "UnrecognizedCategoryError",
]
