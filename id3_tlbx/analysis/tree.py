"""Decision tree model and top-down classification."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from id3_tlbx.data.views import find_column
from id3_tlbx.exceptions import UnrecognizedCategoryError


@dataclass(frozen=True)
class Leaf:
    """Terminal outcome holding a class label."""

    label: str


@dataclass(frozen=True)
class Case:
    """A distinct value of the decision column and what follows from it."""

    value: str
    outcome: Leaf | Decision

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.outcome, Leaf)

    @property
    def label(self) -> str | None:
        """Class label of a leaf case, ``None`` for a nested decision."""
        return self.outcome.label if isinstance(self.outcome, Leaf) else None

    @property
    def decision(self) -> Decision | None:
        """Nested decision of a branch case, ``None`` for a leaf."""
        return self.outcome if isinstance(self.outcome, Decision) else None


@dataclass(frozen=True)
class Decision:
    """Split on a single column with one case per distinct training value.

    Attributes:
        column: Name of the column tested at this node.
        cases: Cases in decreasing likelihood of their value in the training data.
    """

    column: str
    cases: tuple[Case, ...]

    def __post_init__(self) -> None:
        if not self.cases:
            raise ValueError(f"decision on column '{self.column}' must have at least one case")
        object.__setattr__(self, "cases", tuple(self.cases))

    def case_for(self, value: str) -> Case:
        """Return the case matching ``value``.

        Raises:
            UnrecognizedCategoryError: If ``value`` was not seen during training.
        """
        for case in self.cases:
            if case.value == value:
                return case
        raise UnrecognizedCategoryError(self.column, value)

    def classify(self, row: Sequence[str], columns: Sequence[str]) -> str:
        """Classify a single row; see :func:`classify`."""
        return classify(self, row, columns)

    def decide(self, data: Sequence[Sequence[str]]) -> list[str]:
        """Classify every data row of ``data`` after its header row."""
        return classify_rows(self, data)

    def columns_used(self) -> set[str]:
        """Return the set of columns tested anywhere in the tree."""
        used = {self.column}
        for case in self.cases:
            if case.decision is not None:
                used |= case.decision.columns_used()
        return used

    def depth(self) -> int:
        """Return the number of decisions on the longest root-to-leaf path."""
        return 1 + max((case.decision.depth() for case in self.cases if case.decision is not None), default=0)

    def n_leaves(self) -> int:
        return sum(1 if case.decision is None else case.decision.n_leaves() for case in self.cases)

    def to_text(self, indent: str = "    ") -> str:
        """Render the tree as indented ``column = value -> label`` lines."""
        lines: list[str] = []
        self._render(lines, indent, level=0)
        return "\n".join(lines)

    def _render(self, lines: list[str], indent: str, level: int) -> None:
        for case in self.cases:
            prefix = indent * level + f"{self.column} = {case.value}"
            if case.decision is None:
                lines.append(f"{prefix} -> {case.label}")
            else:
                lines.append(f"{prefix}:")
                case.decision._render(lines, indent, level + 1)


def classify(tree: Decision, row: Sequence[str], columns: Sequence[str]) -> str:
    """Classify ``row`` by walking the tree from the root.

    Args:
        tree: Root decision.
        row: Field values, positionally aligned with ``columns``.
        columns: Column names of ``row``; only the columns tested by the tree need to
            be present.

    Raises:
        ColumnNotFoundError: If a tested column is missing from ``columns``.
        UnrecognizedCategoryError: If the row carries a value unseen during training.
    """
    decision = tree
    while True:
        value = row[find_column(columns, decision.column)]
        case = decision.case_for(value)
        if case.decision is None:
            return case.label
        decision = case.decision


def classify_rows(tree: Decision, data: Sequence[Sequence[str]]) -> list[str]:
    """Classify every row of ``data`` after the header row ``data[0]``, in order."""
    if not data:
        return []
    columns = list(data[0])
    return [classify(tree, row, columns) for row in data[1:]]


def classify_frame(tree: Decision, df: pd.DataFrame) -> pd.Series:
    """Classify every row of ``df``; the returned series shares its index."""
    columns = df.columns.astype(str).tolist()
    labels = [classify(tree, row, columns) for row in df.astype(str).to_numpy().tolist()]
    return pd.Series(labels, index=df.index, name="prediction", dtype=object)


__all__ = ["Case", "Decision", "Leaf", "classify", "classify_frame", "classify_rows"]
