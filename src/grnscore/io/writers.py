"""
Writers and text reports for evaluation results.

Output Files:
    {prefix}_PR.txt    recall<TAB>precision, one line per universe rank
    {prefix}_ROC.txt   fpr<TAB>tpr, one line per universe rank
    {prefix}_AUC.txt   AUPR, AUROC and AUPR_random, one per line

Curve files end with a blank line. All files are written atomically.

Examples:
    >>> from pathlib import Path
    >>> from grnscore.io.writers import write_curve, write_auc_summary
    >>> write_curve(curves.pr, Path("results/my_prediction_PR.txt"))
    >>> write_auc_summary(auc, Path("results/my_prediction_AUC.txt"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from grnscore.stats.auc import AreaUnderCurves
from grnscore.stats.curves import Curve
from grnscore.stats.motifs import MotifAnalysis
from grnscore.utils.fileio import atomic_write_text

__all__ = [
    'default_prefix',
    'format_curve',
    'write_curve',
    'format_auc_summary',
    'write_auc_summary',
    'format_auc_report',
    'format_motif_report',
    'write_motif_report',
]

logger = logging.getLogger(__name__)


def default_prefix(prediction_path: Union[str, Path]) -> str:
    """Prediction file name without directory and extension."""
    return Path(prediction_path).stem


def format_curve(curve: Curve) -> str:
    """One ``x<TAB>y`` line per rank followed by a blank line."""
    lines = [f"{x!r}\t{y!r}" for x, y in curve.points()]
    return "\n".join(lines) + "\n\n"


def write_curve(curve: Curve, path: Union[str, Path]) -> Path:
    """Write a PR or ROC curve file."""
    path = Path(path)
    logger.info(f"Writing file: {path}")
    atomic_write_text(path, format_curve(curve))
    return path


def format_auc_summary(auc: AreaUnderCurves) -> str:
    return (
        f"AUPR\t{auc.aupr!r}\n"
        f"AUROC\t{auc.auroc!r}\n"
        f"AUPR_random\t{auc.aupr_random!r}\n"
    )


def write_auc_summary(auc: AreaUnderCurves, path: Union[str, Path]) -> Path:
    """Write the three-line AUC summary file."""
    path = Path(path)
    logger.info(f"Writing file: {path}")
    atomic_write_text(path, format_auc_summary(auc))
    return path


def format_auc_report(auc: AreaUnderCurves, pr: bool = True, roc: bool = True) -> str:
    """Console report of the requested areas and their random expectation."""
    lines = ["", "AREA UNDER CURVE"]
    if pr:
        lines.append(f"AUPR:\t{auc.aupr}")
    if roc:
        lines.append(f"AUROC:\t{auc.auroc}")
    lines += ["", "EXPECTED PERFORMANCE OF RANDOM PREDICTION"]
    if pr:
        lines.append(f"AUPR:\t{auc.aupr_random}")
    if roc:
        lines.append(f"AUROC:\t{auc.auroc_random}")
    lines.append("")
    return "\n".join(lines)


def format_motif_report(analysis: MotifAnalysis) -> str:
    """
    Observed vs expected transitive and co-regulation errors.

    Fractions are relative to the number of false positives in the
    prediction; they read 'nan' when there are no false positives.
    """
    header = "             \tTotal\tFraction of false positives"
    lines = [
        "",
        "SYSTEMATIC PREDICTION ERRORS",
        header,
        f"Transitive   \t{analysis.observed.n_transitive}\t{analysis.transitive_fraction}",
        f"Co-regulation\t{analysis.observed.n_coregulation}\t{analysis.coregulation_fraction}",
        "",
        "EXPECTED ERRORS IN RANDOMIZED PREDICTION WITH SAME NUMBER OF TRUE AND FALSE POSITIVES",
        header,
        f"Transitive   \t{analysis.expected_transitive}\t{analysis.expected_transitive_fraction}",
        f"Co-regulation\t{analysis.expected_coregulation}\t{analysis.expected_coregulation_fraction}",
        "",
    ]
    return "\n".join(lines)


def write_motif_report(analysis: MotifAnalysis, path: Union[str, Path]) -> Path:
    path = Path(path)
    logger.info(f"Writing file: {path}")
    atomic_write_text(path, format_motif_report(analysis))
    return path
