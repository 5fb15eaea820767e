"""ID3 decision tree induction over table views."""

import logging
from dataclasses import dataclass
from typing import Literal, Self

import pandas as pd

from id3_tlbx.data.views import TableView, find_column
from id3_tlbx.exceptions import EmptyDatasetError, ExhaustedAttributesError

from .base_analyser import BaseAnalyser
from .entropy import distribution_entropy, information_gains, likelihood, to_distribution, total_entropy, value_counts
from .tree import Case, Decision, Leaf


logger = logging.getLogger(__name__)

ExhaustedPolicy = Literal["majority", "raise"]

_GAIN_FLOOR = -1.0
"""Running maximum the attribute scan starts from; every real gain exceeds it."""


def select_attribute(gains: dict[str, float]) -> str | None:
    """Return the column with strictly maximum gain, first column winning ties.

    Returns ``None`` when ``gains`` is empty.
    """
    best_gain = _GAIN_FLOOR
    best_column = None
    for column, gain in gains.items():
        if gain > best_gain:
            best_gain = gain
            best_column = column
    return best_column


def learn(
    view: TableView,
    class_column: str,
    *,
    on_exhausted: ExhaustedPolicy = "majority",
) -> Decision:
    """Learn a decision tree for ``class_column`` from the rows of ``view``.

    Args:
        view: Training data. Hidden columns are never split on.
        class_column: Name of the target column.
        on_exhausted: What to do with an impure partition once no attribute is left to
            split on (inconsistent training data): ``"majority"`` ends it in a leaf
            with its most likely class, ``"raise"`` raises
            :class:`ExhaustedAttributesError`.

    Returns:
        Root decision of the learned tree.

    Raises:
        ColumnNotFoundError: If ``class_column`` is not visible in ``view``.
        EmptyDatasetError: If ``view`` has no rows.
        ExhaustedAttributesError: If ``view`` has no attribute column at all.
    """
    _check_policy(on_exhausted)
    _, gains = _root_statistics(view, class_column)
    return _learn_root(view, class_column, on_exhausted, gains)


def _check_policy(on_exhausted: str) -> None:
    if on_exhausted not in ("majority", "raise"):
        raise ValueError(f"Invalid on_exhausted='{on_exhausted}'. Use 'majority' or 'raise'.")


def _root_statistics(view: TableView, class_column: str) -> tuple[dict[str, int], dict[str, float]]:
    """Return the class counts and the root information gains of ``view``."""
    counts = value_counts(view, class_column)
    if not counts:
        raise EmptyDatasetError("cannot learn from an empty dataset")
    return counts, information_gains(view, class_column)


def _learn_root(
    view: TableView,
    class_column: str,
    on_exhausted: ExhaustedPolicy,
    gains: dict[str, float],
) -> Decision:
    decision = _learn(view, class_column, on_exhausted, path=(), gains=gains)
    if decision is None:
        raise ExhaustedAttributesError(f"no attribute columns besides '{class_column}' to split on")
    return decision


def _learn(
    view: TableView,
    class_column: str,
    on_exhausted: ExhaustedPolicy,
    path: tuple[tuple[str, str], ...],
    gains: dict[str, float] | None = None,
) -> Decision | None:
    if gains is None:
        gains = information_gains(view, class_column)
    column = select_attribute(gains)
    if column is None:
        return None

    cases = []
    for d in likelihood(view, column):
        subview = view.select(column, d.value)
        cases.append(Case(d.value, _outcome(subview, column, class_column, on_exhausted, (*path, (column, d.value)))))
    return Decision(column, tuple(cases))


def _outcome(
    subview: TableView,
    column: str,
    class_column: str,
    on_exhausted: ExhaustedPolicy,
    path: tuple[tuple[str, str], ...],
) -> Leaf | Decision:
    if total_entropy(subview, class_column) == 0.0:
        subview.reset()
        row = subview.next()
        return Leaf(row[find_column(subview.columns(), class_column)])

    decision = _learn(subview.drop(column), class_column, on_exhausted, path)
    if decision is not None:
        return decision

    where = ", ".join(f"{c}={v}" for c, v in path)
    if on_exhausted == "raise":
        raise ExhaustedAttributesError(f"partition {where} is impure but has no attribute left to split on")
    return Leaf(likelihood(subview, class_column)[0].value)


@dataclass(frozen=True)
class LearnerConfig:
    """Settings for :class:`ID3Learner`.

    Attributes:
        class_column: Name of the target column.
        on_exhausted: Policy for impure partitions without attributes left, see :func:`learn`.
    """

    class_column: str
    on_exhausted: ExhaustedPolicy = "majority"


@dataclass(frozen=True)
class DecisionTreeResult:
    """Learned tree packaged with training statistics for reporting and plotting.

    Attributes:
        tree: Root decision of the learned tree.
        class_column: Target column the tree predicts.
        root_gains: Information gain of every attribute at the root, in column order.
        class_distribution: Probability of each class value in the training data.
        n_rows: Number of training rows.
        pretty_by_col: Mapping from column names to display labels.
    """

    tree: Decision
    class_column: str
    root_gains: pd.Series
    class_distribution: pd.Series
    n_rows: int
    pretty_by_col: dict[str, str]

    @property
    def root_column(self) -> str:
        return self.tree.column

    def plot_information_gain(self, **kwargs: object):
        """Plot the root information gains using the plotting helper."""
        from id3_tlbx.plotting.tree_plots import plot_information_gain  # noqa: PLC0415

        return plot_information_gain(self, **kwargs)

    def plot_class_distribution(self, **kwargs: object):
        """Plot the training class distribution."""
        from id3_tlbx.plotting.tree_plots import plot_class_distribution  # noqa: PLC0415

        return plot_class_distribution(self, **kwargs)


class ID3Learner(BaseAnalyser):
    """Analyzer wrapping :func:`learn` in the ``fit()`` / ``result()`` workflow.

    Example:
        >>> from id3_tlbx.data import WeatherDataset
        >>> ds = WeatherDataset.from_csv()
        >>> res = ds.make_id3_learner().fit().result()
        >>> res.root_column
        'outlook'
        >>> _ = res.plot_information_gain()
    """

    def __init__(
        self,
        view: TableView,
        config: LearnerConfig,
        pretty_by_col: dict[str, str] | None = None,
    ) -> None:
        """Initialize the learner with a training view and its configuration."""
        self._view = view
        self.config = config
        self._pretty_by_col = pretty_by_col or {}
        self._result: DecisionTreeResult | None = None

    def fit(self) -> Self:
        """Learn the tree and collect the root statistics."""
        class_column = self.config.class_column
        _check_policy(self.config.on_exhausted)
        counts, gains = _root_statistics(self._view, class_column)
        distribution = to_distribution(counts)
        n_rows = sum(counts.values())
        logger.info(
            "Learning decision tree for '%s' from %d rows (class entropy %.4f)",
            class_column,
            n_rows,
            distribution_entropy(distribution),
        )

        tree = _learn_root(self._view, class_column, self.config.on_exhausted, gains)
        for column, gain in gains.items():
            logger.debug("Root information gain of '%s': %.4f", column, gain)
        logger.info(
            "Learned tree rooted at '%s' (depth %d, %d leaves)",
            tree.column,
            tree.depth(),
            tree.n_leaves(),
        )

        self._result = DecisionTreeResult(
            tree=tree,
            class_column=class_column,
            root_gains=pd.Series(gains, name="information_gain", dtype=float),
            class_distribution=pd.Series(
                {d.value: d.probability for d in distribution},
                name="probability",
                dtype=float,
            ),
            n_rows=n_rows,
            pretty_by_col=dict(self._pretty_by_col),
        )
        return self

    def result(self) -> DecisionTreeResult:
        """Return the learned tree and its statistics.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result


__all__ = ["DecisionTreeResult", "ID3Learner", "LearnerConfig", "learn", "select_attribute"]
