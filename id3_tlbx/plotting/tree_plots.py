"""Decision tree learning visualization functions."""

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from id3_tlbx.analysis.learner import DecisionTreeResult
from id3_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def plot_information_gain(
    result: DecisionTreeResult,
    ax: Axes | None = None,
    figsize: tuple[int, int] = (8, 5),
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> Figure:
    """Plot the information gain of every attribute at the root of the tree.

    The column the tree splits on first is highlighted.

    Args:
        result: DecisionTreeResult from ID3Learner.
        ax: Optional axes to draw into; a new figure is created otherwise.
        figsize: Figure size when a new figure is created.
        config: Plotting style.
    """
    if result.root_gains.empty:
        raise ValueError("DecisionTreeResult contains no root information gains.")

    gains = (
        result.root_gains.rename_axis("column")
        .reset_index()
        .assign(pretty_column=lambda d: d["column"].map(lambda c: result.pretty_by_col.get(c, c)))
    )
    palette = {
        row.pretty_column: config.highlight_color if row.column == result.root_column else config.base_color
        for row in gains.itertuples()
    }

    with config.apply():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.figure
        sns.barplot(
            data=gains,
            x="information_gain",
            y="pretty_column",
            hue="pretty_column",
            palette=palette,
            saturation=1,
            legend=False,
            ax=ax,
        )
        target = result.pretty_by_col.get(result.class_column, result.class_column)
        ax.set_title(f"Root Information Gain for '{target}'")
        ax.set_xlabel("Information Gain (bits)")
        ax.set_ylabel("")
        fig.tight_layout()

    return fig


def plot_class_distribution(
    result: DecisionTreeResult,
    figsize: tuple[int, int] = (6, 4),
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> Figure:
    """Plot the probability of each class value in the training data."""
    dist = pd.DataFrame({"class": result.class_distribution.index, "probability": result.class_distribution.to_numpy()})

    with config.apply():
        fig, ax = plt.subplots(figsize=figsize)
        sns.barplot(data=dist, x="class", y="probability", color=config.base_color, ax=ax)
        ax.set_ylim(0, 1)
        ax.set_title(f"Class Distribution (n={result.n_rows})")
        ax.set_xlabel(result.pretty_by_col.get(result.class_column, result.class_column))
        ax.set_ylabel("Probability")
        fig.tight_layout()

    return fig
