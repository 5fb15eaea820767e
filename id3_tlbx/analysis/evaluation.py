"""Accuracy of a decision tree on labelled data."""

from dataclasses import dataclass

import pandas as pd
from sklearn.metrics import accuracy_score, confusion_matrix

from id3_tlbx.exceptions import ColumnNotFoundError

from .tree import Decision, classify_frame


@dataclass(frozen=True)
class EvaluationResult:
    """Classification quality of a tree on a labelled table.

    Attributes:
        accuracy: Fraction of rows whose predicted class equals the true class.
        confusion: Confusion matrix; rows are true classes, columns predicted classes.
        predictions: Predicted class per row, indexed like the evaluated frame.
        n_rows: Number of evaluated rows.
    """

    accuracy: float
    confusion: pd.DataFrame
    predictions: pd.Series
    n_rows: int


def evaluate_tree(tree: Decision, df: pd.DataFrame, class_column: str) -> EvaluationResult:
    """Classify every row of ``df`` and compare against ``df[class_column]``.

    Raises:
        ColumnNotFoundError: If ``class_column`` or a tested column is missing.
        UnrecognizedCategoryError: If a row carries a value unseen during training.
        ValueError: If ``df`` has no rows.
    """
    if class_column not in df.columns:
        raise ColumnNotFoundError(class_column, df.columns.astype(str).tolist())
    if df.empty:
        raise ValueError("Cannot evaluate a tree on an empty table.")

    truth = df[class_column].astype(str)
    predictions = classify_frame(tree, df)
    labels = sorted(set(truth) | set(predictions))

    return EvaluationResult(
        accuracy=float(accuracy_score(truth, predictions)),
        confusion=pd.DataFrame(
            confusion_matrix(truth, predictions, labels=labels),
            index=pd.Index(labels, name="true"),
            columns=pd.Index(labels, name="predicted"),
        ),
        predictions=predictions,
        n_rows=len(df),
    )


__all__ = ["EvaluationResult", "evaluate_tree"]
