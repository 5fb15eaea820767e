"""Base dataset class for all categorical dataset implementations."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import pandas as pd

from id3_tlbx.exceptions import TableLoadError


if TYPE_CHECKING:
    from id3_tlbx.analysis.evaluation import EvaluationResult
    from id3_tlbx.analysis.learner import ID3Learner
    from id3_tlbx.analysis.tree import Decision

from .base_columns import BaseColumn
from .views import BaseView


logger = logging.getLogger(__name__)


class BaseDataset(ABC):
    """Abstract base class for categorical datasets used throughout the toolbox.

    Every value is held as a string; the learner treats all columns as categorical.
    """

    Col: type[BaseColumn] | None = None

    def __init__(self, df: pd.DataFrame | None = None, class_column: str | None = None) -> None:
        """Initialize the base dataset.

        Args:
            df: Pre-loaded DataFrame of string values (optional)
            class_column: Target column; defaults to ``Col.TARGET``
        """
        self._df: pd.DataFrame | None = df
        self._class_column = class_column

    @classmethod
    @abstractmethod
    def from_csv(cls, *args: object, **kwargs: object) -> "BaseDataset":
        """Load dataset from CSV file.

        Returns:
            Dataset instance with loaded data
        """
        ...

    @staticmethod
    def read_csv(csv_path: str | Path) -> pd.DataFrame:
        """Read a CSV file as a table of strings, keeping the header exactly as written.

        Raises:
            TableLoadError: If the file cannot be parsed, has ragged rows or a bad header.
        """
        csv_path = Path(csv_path)
        logger.info("Loading CSV table", extra={"csv_path": str(csv_path)})
        try:
            raw = pd.read_csv(csv_path, header=None, dtype=str, keep_default_na=False, engine="python")
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise TableLoadError(f"Could not parse '{csv_path}': {exc}") from exc

        if raw.isna().to_numpy().any():
            ragged = (raw.index[raw.isna().any(axis=1)] + 1).tolist()
            raise TableLoadError(f"'{csv_path}' has rows with missing fields at lines {ragged}")

        header = raw.iloc[0].tolist()
        # BaseView validates the header (blank and duplicate names)
        view = BaseView(header, raw.iloc[1:].to_numpy().tolist())
        df = pd.DataFrame(raw.iloc[1:].to_numpy(), columns=view.columns(), dtype=str)
        logger.debug("Loaded %d rows with columns %s", len(df), view.columns())
        return df

    @property
    def df(self) -> pd.DataFrame:
        """Get the DataFrame of string values.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def class_column(self) -> str:
        """Get the target column the tree is learned for.

        Raises:
            ValueError: If neither an explicit class column nor ``Col.TARGET`` is available
        """
        if self._class_column is not None:
            return self._class_column
        if self.Col is not None:
            return str(self.Col.TARGET)
        raise ValueError("No class column configured for this dataset.")

    def view(self, columns: Iterable[str] | None = None, include_class: bool = True) -> BaseView:
        """Build a base table view over the selected columns (defaults to all).

        Args:
            columns: Columns to include, in view order
            include_class: Append the class column if ``columns`` lacks it
        """
        selected = list(columns) if columns is not None else self.df.columns.to_list()
        if include_class and self.class_column not in selected:
            selected.append(self.class_column)
        missing = [col for col in selected if col not in self.df.columns]
        if missing:
            raise KeyError(f"Columns {missing} not in dataset. Available: {self.df.columns.to_list()}")
        return BaseView.from_frame(self.df.loc[:, selected])

    def get_pretty_name(self, column_name: str) -> str:
        """Convert column name to pretty name for visualization."""
        if self.Col is None:
            return column_name.replace("_", " ").title()
        try:
            col_enum = self.Col(column_name)
        except ValueError:
            return column_name.replace("_", " ").title()
        else:
            return str(col_enum.pretty_name)

    def make_id3_learner(
        self,
        columns: Iterable[str] | None = None,
        class_column: str | None = None,
        on_exhausted: Literal["majority", "raise"] = "majority",
    ) -> "ID3Learner":
        """Instantiate an ID3 learner configured for this dataset.

        Args:
            columns: Attribute columns to learn from (defaults to every column but the class column)
            class_column: Target column (defaults to the dataset's class column)
            on_exhausted: Policy for inconsistent partitions, see :func:`~id3_tlbx.analysis.learner.learn`

        Returns:
            ID3Learner instance
        """
        from id3_tlbx.analysis.learner import ID3Learner, LearnerConfig

        class_column = class_column or self.class_column
        candidates = list(columns) if columns is not None else self.df.columns.to_list()
        attributes = [col for col in candidates if col != class_column]
        view = self.view(columns=[*attributes, class_column], include_class=False)
        return ID3Learner(
            view,
            LearnerConfig(class_column=class_column, on_exhausted=on_exhausted),
            pretty_by_col={col: self.get_pretty_name(col) for col in view.columns()},
        )

    def classify(self, tree: "Decision") -> pd.Series:
        """Classify every row of this dataset with ``tree``."""
        from id3_tlbx.analysis.tree import classify_frame

        return classify_frame(tree, self.df)

    def evaluate(self, tree: "Decision") -> "EvaluationResult":
        """Compare the predictions of ``tree`` against this dataset's class column."""
        from id3_tlbx.analysis.evaluation import evaluate_tree

        return evaluate_tree(tree, self.df, self.class_column)
