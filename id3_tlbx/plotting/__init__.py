"""Plotting utilities for decision tree learning."""

from .tree_plots import plot_class_distribution, plot_information_gain


__all__ = [
    "plot_class_distribution",
    "plot_information_gain",
]
