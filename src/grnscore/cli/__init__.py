"""
grnscore CLI - Score a ranked gene regulatory network prediction against a gold standard.

    grnscore --pred <file> --gold <file> [--PR] [--ROC] [--motifs] [OPTIONS]

This is the process boundary: evaluation errors are reported here and turned
into a non-zero exit status.
"""

import argparse
import logging
import sys
from typing import List, Optional

from grnscore import __version__
from grnscore.exceptions import EvaluationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    from grnscore.cli import evaluate

    parser = argparse.ArgumentParser(
        prog="grnscore",
        description="Score a ranked list of predicted regulatory edges against a gold standard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input formats (tab-separated):
  --pred   regulator  target  score     (ranked, most confident first)
  --gold   regulator  target [1]        (two or three columns)

Outputs (PR/ROC mode):
  {prefix}_PR.txt, {prefix}_ROC.txt, {prefix}_AUC.txt

Examples:
  grnscore --pred DREAM4_size10_1.txt --gold DREAM4_GoldStandard_Size10_1.tsv
  grnscore --pred prediction.txt --gold gold.tsv --PR --plot -o results/
  grnscore --pred top100.txt --gold gold.tsv --motifs
        """
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    evaluate.add_arguments(parser)
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point for grnscore."""
    from grnscore.cli.config import load_config, merge_config_with_args, validate_config
    from grnscore.cli.evaluate import resolve_modes, run_evaluate

    cli_args = sys.argv[1:] if args is None else list(args)
    parser = build_parser()
    parsed_args = parser.parse_args(cli_args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if parsed_args.config is not None:
            config = load_config(parsed_args.config)
            validate_config(config)
            parsed_args = merge_config_with_args(config, parsed_args, cli_args)

        resolve_modes(parsed_args)
        return run_evaluate(parsed_args)
    except EvaluationError as e:
        logger.error(str(e))
        logger.debug("Traceback:", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
