"""Analysis modules: entropy statistics, ID3 learning, classification and evaluation."""

from .entropy import (
    Distinct,
    average_entropy,
    distribution_entropy,
    entropy,
    information_gains,
    likelihood,
    to_distribution,
    total_entropy,
    value_counts,
)
from .evaluation import EvaluationResult, evaluate_tree
from .learner import DecisionTreeResult, ID3Learner, LearnerConfig, learn, select_attribute
from .serialization import from_json, load_tree, save_tree, to_json, tree_from_dict, tree_to_dict
from .tree import Case, Decision, Leaf, classify, classify_frame, classify_rows


__all__ = [
    "Case",
    "Decision",
    "DecisionTreeResult",
    "Distinct",
    "EvaluationResult",
    "ID3Learner",
    "Leaf",
    "LearnerConfig",
    "average_entropy",
    "classify",
    "classify_frame",
    "classify_rows",
    "distribution_entropy",
    "entropy",
    "evaluate_tree",
    "from_json",
    "information_gains",
    "learn",
    "likelihood",
    "load_tree",
    "save_tree",
    "select_attribute",
    "to_distribution",
    "to_json",
    "total_entropy",
    "tree_from_dict",
    "tree_to_dict",
    "value_counts",
]
