"""
Visualization of evaluation results.

Examples
--------
>>> from grnscore.viz import plot_curves
>>> fig = plot_curves(curves, auc, title="my_prediction")
>>> fig.save("results/my_prediction_curves.png")
"""

from grnscore.viz.core import Figure
from grnscore.viz.styles import Palette, PALETTES, configure_style
from grnscore.viz.curves import plot_curves

__all__ = [
    "Figure",
    "Palette",
    "PALETTES",
    "configure_style",
    "plot_curves",
]
