"""
I/O module for network files and evaluation outputs.

Key Functions:
    - load_gold_standard: Read a 2/3-column gold standard into a GoldStandard
    - load_prediction: Read a ranked 3-column prediction into a PredictionList
    - write_curve: Write a PR or ROC curve file
    - write_auc_summary: Write AUPR / AUROC / AUPR_random
    - format_motif_report: Text report of systematic prediction errors

Examples:
    >>> from grnscore.io import load_gold_standard, load_prediction
    >>> gold = load_gold_standard("gold.tsv")
    >>> predictions = load_prediction("prediction.txt", gold)
"""

from grnscore.io.parsers import read_records, load_gold_standard, load_prediction
from grnscore.io.writers import (
    default_prefix,
    format_auc_report,
    format_motif_report,
    write_auc_summary,
    write_curve,
    write_motif_report,
)

__all__ = [
    'read_records',
    'load_gold_standard',
    'load_prediction',
    'default_prefix',
    'format_auc_report',
    'format_motif_report',
    'write_auc_summary',
    'write_curve',
    'write_motif_report',
]
