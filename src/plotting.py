"""Visualization of the lifespan distribution."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy.stats import gaussian_kde


def plot_lifespan_distribution(
    lived_days: pd.Series,
    output_path: Path | None = None,
    bins: int = 10,
):
    """
    Plot a histogram of days lived with a kernel density curve on top.

    The histogram is normalized to a density so both layers share the y-axis.

    Args:
        lived_days: Unrounded days lived, one value per person
        output_path: Where to save the image. If None, displays interactively.
        bins: Number of histogram bins

    Returns:
        The matplotlib Figure.
    """
    values = pd.Series(lived_days, dtype=float).dropna().to_numpy()
    if len(values) < 2:
        raise ValueError("Need at least two values to estimate a density")

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.hist(
        values,
        bins=bins,
        density=True,
        color="lightblue",
        edgecolor="black",
        alpha=0.7,
        label="Presidents",
    )

    kde = gaussian_kde(values, bw_method="scott")
    x = np.linspace(values.min(), values.max(), 500)
    ax.plot(x, kde(x), color="darkblue", linewidth=2, label="Density estimate")

    ax.set_title(f"Distribution of Days Lived ({len(values)} presidents)")
    ax.set_xlabel("Days lived")
    ax.set_ylabel("Density")
    ax.legend()
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        print(f"Plot saved to {output_path}")
    else:
        plt.show()

    return fig
