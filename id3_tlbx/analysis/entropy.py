"""Empirical distributions and Shannon entropy over table views.

All quantities are in bits. See [Wikipedia :: Information gain in decision trees](https://en.wikipedia.org/wiki/Information_gain_(decision_tree))
for the underlying theory.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from id3_tlbx.data.views import HIDDEN, TableView, find_column


@dataclass(frozen=True)
class Distinct:
    """A distinct column value and the fraction of rows carrying it."""

    value: str
    probability: float


def value_counts(view: TableView, column: str) -> dict[str, int]:
    """Count the rows carrying each distinct value of ``column``, in first-seen order.

    The view is reset and consumed in one forward pass.

    Raises:
        ColumnNotFoundError: If ``column`` is not visible in ``view``.
    """
    i = find_column(view.columns(), column)
    counts: dict[str, int] = {}
    for row in view:
        counts[row[i]] = counts.get(row[i], 0) + 1
    return counts


def to_distribution(counts: dict[str, int]) -> list[Distinct]:
    """Turn :func:`value_counts` output into probabilities sorted by decreasing probability."""
    total = sum(counts.values())
    distinct = [Distinct(value=value, probability=count / total) for value, count in counts.items()]
    # sorted() is stable, which keeps ties in first-seen order
    return sorted(distinct, key=lambda d: d.probability, reverse=True)


def likelihood(view: TableView, column: str) -> list[Distinct]:
    """Return the probability of each distinct value of ``column`` in ``view``.

    Values are sorted by decreasing probability; equal probabilities keep first-seen
    order. An empty view yields an empty list.

    Raises:
        ColumnNotFoundError: If ``column`` is not visible in ``view``.
    """
    return to_distribution(value_counts(view, column))


def entropy(p: float) -> float:
    """Return the Shannon term ``-p * log2(p)``, defined as 0 for ``p`` of 0 or 1."""
    if p == 0 or p == 1:
        return 0.0
    return float(-p * np.log2(p))


def distribution_entropy(distribution: Sequence[Distinct]) -> float:
    """Return the entropy of a distribution computed by :func:`likelihood`."""
    return sum((entropy(d.probability) for d in distribution), 0.0)


def total_entropy(view: TableView, class_column: str) -> float:
    """Return the entropy of the class column over the rows of ``view``.

    The result is exactly 0 when every row shares one class value.
    """
    return distribution_entropy(likelihood(view, class_column))


def average_entropy(view: TableView, attribute_column: str, class_column: str) -> float:
    r"""Return the expected class entropy after splitting on ``attribute_column``.

    :math:`\sum_v P(a=v) \cdot H(\text{class} \mid a=v)`

    Raises:
        ColumnNotFoundError: If either column is not visible in ``view``.
    """
    find_column(view.columns(), class_column)
    return sum(
        (
            d.probability * total_entropy(view.select(attribute_column, d.value), class_column)
            for d in likelihood(view, attribute_column)
        ),
        0.0,
    )


def information_gains(view: TableView, class_column: str) -> dict[str, float]:
    """Return the information gain of every attribute column, in column order.

    Attribute columns are the visible columns other than ``class_column``.
    """
    h = total_entropy(view, class_column)
    return {
        column: h - average_entropy(view, column, class_column)
        for column in view.columns()
        if column not in (HIDDEN, class_column)
    }


__all__ = [
    "Distinct",
    "average_entropy",
    "distribution_entropy",
    "entropy",
    "information_gains",
    "likelihood",
    "to_distribution",
    "total_entropy",
    "value_counts",
]
