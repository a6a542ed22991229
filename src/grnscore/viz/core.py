"""
Figure container for evaluation plots.

Plot functions return a Figure rather than a bare matplotlib figure so that
the caller gets the AUC values and run parameters along with the drawing.
The title and description are embedded in PNG/PDF/SVG metadata on save.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import matplotlib.figure
import matplotlib.pyplot as plt

SUPPORTED_FORMATS = ("png", "pdf", "svg")


@dataclass
class Figure:
    """
    A rendered evaluation figure.

    Attributes
    ----------
    fig : matplotlib.figure.Figure
        Rendered figure
    title : str
        Short title (usually the prediction name)
    description : str
        What the panels show
    metadata : dict
        AUC values, universe size and a ``created_at`` timestamp

    Examples
    --------
    >>> figure = plot_curves(curves, auc, title="my_prediction")
    >>> figure.save("results/my_prediction_curves.png")
    >>> figure.close()
    """
    fig: matplotlib.figure.Figure
    title: str
    description: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.metadata.setdefault("created_at", datetime.now().isoformat(timespec="seconds"))

    def save(self, path: Path | str, format: Optional[str] = None, dpi: int = 300) -> Path:
        """
        Write the figure to `path`.

        The format comes from `format`, else from the file extension, else
        PNG. Parent directories are created.
        """
        path = Path(path)
        fmt = (format or path.suffix.lstrip(".")).lower()
        if fmt not in SUPPORTED_FORMATS:
            fmt = "png"

        path.parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(
            path,
            format=fmt,
            dpi=dpi,
            bbox_inches="tight",
            metadata=self._file_metadata(fmt),
        )
        return path

    def close(self) -> None:
        plt.close(self.fig)

    def _file_metadata(self, fmt: str) -> Dict[str, str]:
        # the PDF backend has no Description key
        if fmt == "pdf":
            return {"Title": self.title, "Subject": self.description}
        return {"Title": self.title, "Description": self.description}
