"""
Colors and rc settings for PR/ROC figures.

Conventions
-----------
- Submitted ranks: solid line in the palette's prediction color
- Random-fill tail: dashed line in a lighter shade of the same hue
- Random expectation: dotted gray line
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import matplotlib.pyplot as plt
import seaborn as sns


@dataclass(frozen=True)
class Palette:
    """
    Line colors for one figure.

    Attributes
    ----------
    prediction : str
        Curve over the submitted ranks
    extrapolated : str
        Curve over the random-fill tail
    random : str
        Baseline of a random ranking
    """
    prediction: str = "#2563eb"
    extrapolated: str = "#93c5fd"
    random: str = "#6b7280"


PALETTES = {
    "default": Palette(),
    "colorblind": Palette(prediction="#0077bb", extrapolated="#33bbee", random="#999999"),
    "print": Palette(prediction="#1a1a1a", extrapolated="#808080", random="#b3b3b3"),
}

# Per-context sizes; fonts are multiplied by font_scale
_CONTEXT_PARAMS = {
    "paper": {"font.size": 9, "axes.titlesize": 10, "axes.labelsize": 9,
              "legend.fontsize": 8, "lines.linewidth": 1.2, "savefig.dpi": 300},
    "notebook": {"font.size": 11, "axes.titlesize": 12, "axes.labelsize": 11,
                 "legend.fontsize": 10, "lines.linewidth": 1.6, "savefig.dpi": 150},
}
_FONT_KEYS = ("font.size", "axes.titlesize", "axes.labelsize", "legend.fontsize")


def configure_style(
    style: Literal["paper", "notebook"] = "paper",
    palette: str | Palette = "default",
    font_scale: float = 1.0,
) -> Palette:
    """
    Apply the seaborn theme and rc settings, and resolve the palette.

    Parameters
    ----------
    style : {"paper", "notebook"}
        Size preset. Unknown values fall back to "paper".
    palette : str or Palette
        Palette name from PALETTES (unknown names give the default) or an
        explicit Palette.
    font_scale : float
        Multiplier for all font sizes.

    Returns
    -------
    Palette
    """
    if not isinstance(palette, Palette):
        palette = PALETTES.get(palette, PALETTES["default"])

    context = style if style in _CONTEXT_PARAMS else "paper"
    sns.set_theme(style="ticks", context=context, font_scale=font_scale)

    params = dict(_CONTEXT_PARAMS[context])
    for key in _FONT_KEYS:
        params[key] *= font_scale
    params.update({
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": True,
        "grid.alpha": 0.3,
        "legend.frameon": False,
    })
    plt.rcParams.update(params)

    return palette
