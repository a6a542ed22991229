"""
PR and ROC curve figures.

Each panel shows the curve over the submitted ranks as a solid line and the
random-fill tail as a dashed line, together with the expectation of a
random ranking (horizontal line at G/P for PR, the diagonal for ROC).
"""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt

from grnscore.stats.auc import AreaUnderCurves
from grnscore.stats.curves import Curve, PerformanceCurves
from grnscore.viz.core import Figure
from grnscore.viz.styles import Palette, configure_style

__all__ = ['plot_curves']


def plot_curves(
    curves: PerformanceCurves,
    auc: AreaUnderCurves,
    pr: bool = True,
    roc: bool = True,
    title: Optional[str] = None,
    palette: str | Palette = "default",
) -> Figure:
    """
    Plot the requested curves side by side.

    Parameters
    ----------
    curves : PerformanceCurves
        Output of compute_curves().
    auc : AreaUnderCurves
        Output of compute_auc(), used for legend labels and baselines.
    pr, roc : bool
        Which panels to draw (at least one).
    title : str, optional
        Figure title (usually the prediction name).
    palette : str or Palette
        Color palette.

    Returns
    -------
    Figure
    """
    if not (pr or roc):
        raise ValueError("at least one of pr or roc must be requested")

    colors = configure_style("paper", palette=palette)
    panels = [name for name, wanted in (("PR", pr), ("ROC", roc)) if wanted]
    fig, axes = plt.subplots(1, len(panels), figsize=(4.2 * len(panels), 4), squeeze=False)

    for ax, name in zip(axes[0], panels):
        if name == "PR":
            _draw_curve(ax, curves.pr, curves.n_predicted, colors, f"AUPR = {auc.aupr:.3f}")
            ax.axhline(auc.aupr_random, color=colors.random, linestyle=":",
                       label=f"random = {auc.aupr_random:.3f}")
            ax.set_xlabel("Recall")
            ax.set_ylabel("Precision")
        else:
            _draw_curve(ax, curves.roc, curves.n_predicted, colors, f"AUROC = {auc.auroc:.3f}")
            ax.plot([0, 1], [0, 1], color=colors.random, linestyle=":",
                    label=f"random = {auc.auroc_random:.1f}")
            ax.set_xlabel("False positive rate")
            ax.set_ylabel("True positive rate")
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1.02)
        ax.set_title(name)
        ax.legend(loc="best")

    if title:
        fig.suptitle(title)

    return Figure(
        fig=fig,
        title=title or "Prediction performance",
        description="Precision-recall and ROC curves over the full edge universe",
        metadata={
            **auc.to_dict(),
            "n_predicted": curves.n_predicted,
            "n_possible_edges": curves.n_possible_edges,
        },
    )


def _draw_curve(ax, curve: Curve, n_predicted: int, colors: Palette, label: str) -> None:
    head = slice(0, n_predicted)
    # tail starts at the last predicted point so the two segments join
    tail = slice(max(n_predicted - 1, 0), len(curve))

    if n_predicted > 0:
        ax.plot(curve.x[head], curve.y[head], color=colors.prediction, label=label)
    if n_predicted < len(curve):
        ax.plot(curve.x[tail], curve.y[tail], color=colors.extrapolated, linestyle="--",
                label="extrapolated" if n_predicted > 0 else label)
