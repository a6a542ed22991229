"""
grnscore evaluation command - score a ranked network prediction.

Computes PR/ROC curves and their areas, or analyzes systematic prediction
errors (transitive and co-regulation edges). The two modes are exclusive:
PR/ROC curves should be computed over complete rankings, whereas prediction
errors should be analyzed after applying a confidence cutoff.

Usage:
    grnscore --pred prediction.txt --gold gold.tsv
    grnscore --pred prediction.txt --gold gold.tsv --PR --plot
    grnscore --pred top100.txt --gold gold.tsv --motifs
"""

import argparse
import logging
from pathlib import Path

from grnscore.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the evaluation options on `parser`."""
    # Input/output
    parser.add_argument("--pred", type=Path, default=None,
                        help="File with ranked list of predicted edges")
    parser.add_argument("--gold", type=Path, default=None,
                        help="File with list of gold standard (true) edges")
    parser.add_argument("--output-dir", "-o", type=Path, default=None,
                        help="Directory for output files (default: current directory)")
    parser.add_argument("--prefix", type=str, default=None,
                        help="Output file prefix (default: prediction file name without extension)")

    # Metrics
    parser.add_argument("--PR", action="store_true", dest="PR",
                        help="Compute precision-recall (PR) curve and area under the curve (AUPR)")
    parser.add_argument("--ROC", action="store_true", dest="ROC",
                        help="Compute receiver operating characteristic (ROC) curve and area under the curve (AUROC)")
    parser.add_argument("--motifs", action="store_true",
                        help="Analyze systematic prediction errors (transitive/indirect and co-regulation edges)")
    parser.add_argument("--motifs-output", type=Path, default=None,
                        help="Also write the motif report to this file")

    # Options
    parser.add_argument("--sort-by-score", action="store_true",
                        help="Re-rank predictions by descending score (ties keep file order)")
    parser.add_argument("--plot", action="store_true",
                        help="Save a figure of the requested curves ({prefix}_curves.png)")
    parser.add_argument("--json", type=Path, default=None,
                        help="Write a machine-readable summary of the results to this file")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML or JSON config file (explicit flags take precedence)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")


def resolve_modes(args: argparse.Namespace) -> argparse.Namespace:
    """
    Check required inputs and settle which analyses to run.

    Without --PR, --ROC or --motifs both curves are computed. --motifs cannot
    be combined with --PR or --ROC.

    Raises:
        ConfigurationError: Missing --pred/--gold or incompatible flags
    """
    if args.pred is None:
        raise ConfigurationError("Missing argument '--pred <file>'")
    if args.gold is None:
        raise ConfigurationError("Missing argument '--gold <file>'")

    if (args.PR or args.ROC) and args.motifs:
        raise ConfigurationError(
            "You cannot compute PR/ROC curves and analyze prediction errors at the same time. "
            "(PR/ROC should be computed over complete lists, whereas prediction errors "
            "should be analyzed after applying a cutoff)"
        )

    if not (args.PR or args.ROC or args.motifs):
        args.PR = True
        args.ROC = True

    return args


def run_evaluate(args: argparse.Namespace) -> int:
    """Execute the evaluation. Errors propagate to the caller."""
    from grnscore.io import (
        default_prefix,
        format_auc_report,
        format_motif_report,
        load_gold_standard,
        load_prediction,
        write_auc_summary,
        write_curve,
        write_motif_report,
    )
    from grnscore.stats import analyze_errors, compute_auc, compute_curves
    from grnscore.utils import atomic_write_json

    output_dir = args.output_dir or Path(".")
    prefix = args.prefix or default_prefix(args.pred)

    gold = load_gold_standard(args.gold)
    predictions = load_prediction(args.pred, gold, sort_by_score=args.sort_by_score)

    summary = {
        "prediction": str(args.pred),
        "gold_standard": {**gold.summary(), "file": str(args.gold)},
        "n_read": predictions.n_read,
        "n_retained": len(predictions),
        "n_dropped": predictions.n_dropped,
    }

    if args.PR or args.ROC:
        curves = compute_curves(gold, predictions)
        auc = compute_auc(curves)
        print(format_auc_report(auc, pr=args.PR, roc=args.ROC))

        if args.PR:
            write_curve(curves.pr, output_dir / f"{prefix}_PR.txt")
        if args.ROC:
            write_curve(curves.roc, output_dir / f"{prefix}_ROC.txt")
        write_auc_summary(auc, output_dir / f"{prefix}_AUC.txt")

        if args.plot:
            from grnscore.viz import plot_curves

            figure = plot_curves(curves, auc, pr=args.PR, roc=args.ROC, title=prefix)
            path = figure.save(output_dir / f"{prefix}_curves.png")
            figure.close()
            logger.info(f"Saved figure to {path}")

        summary["auc"] = auc.to_dict()
        summary["n_extrapolated"] = curves.n_extrapolated
    elif args.plot:
        logger.warning("--plot only applies to PR/ROC curves; ignored with --motifs")

    if args.motifs:
        analysis = analyze_errors(gold, predictions)
        print(format_motif_report(analysis))
        if args.motifs_output is not None:
            write_motif_report(analysis, args.motifs_output)
        summary["motifs"] = analysis.to_dict()

    if args.json is not None:
        atomic_write_json(args.json, summary)
        logger.info(f"Wrote summary to {args.json}")

    print("Done!")
    return 0
