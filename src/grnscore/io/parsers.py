"""
Readers for tab-delimited network files.

Gold standard (2 or 3 columns, uniform across the file):
    G1<TAB>G2
    G1<TAB>G3<TAB>1

Prediction (exactly 3 columns, most confident edge first):
    G1<TAB>G3<TAB>0.981
    G2<TAB>G1<TAB>0.604

Engineering Design:
    - Files are read with the csv module (tab delimiter, no quoting) into
      Records carrying their physical line numbers.
    - Blank lines are skipped; every other line is one record.
    - All semantic validation (column counts, literals, universe filtering)
      happens in grnscore.core so that it can be tested without files.
    - Missing or unreadable files raise InputError; nothing here exits.

Examples:
    >>> from pathlib import Path
    >>> from grnscore.io.parsers import load_gold_standard, load_prediction
    >>> gold = load_gold_standard(Path("DREAM4_GoldStandard_InSilico_Size10_1.tsv"))
    >>> predictions = load_prediction(Path("my_prediction.txt"), gold)
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Union

from grnscore.core.edges import PredictionList
from grnscore.core.network import GoldStandard
from grnscore.core.records import Record
from grnscore.exceptions import InputError

__all__ = ['read_records', 'load_gold_standard', 'load_prediction']

logger = logging.getLogger(__name__)

DELIMITER = '\t'


def read_records(path: Union[str, Path], delimiter: str = DELIMITER) -> List[Record]:
    """
    Read a delimited file into Records, skipping blank lines.

    Args:
        path: File to read
        delimiter: Column separator (default: tab)

    Returns:
        Records in file order, each with its 1-based line number

    Raises:
        InputError: If the path does not exist, is not a file, or cannot be
            decoded/read
    """
    path = Path(path)

    if not path.exists():
        raise InputError(f"File not found: {path}")
    if not path.is_file():
        raise InputError(f"Path is not a file: {path}")

    logger.info(f"Reading file: {path}")

    records = []
    try:
        with open(path, 'r', newline='', encoding='utf-8') as handle:
            reader = csv.reader(handle, delimiter=delimiter, quoting=csv.QUOTE_NONE)
            for fields in reader:
                if not fields or (len(fields) == 1 and not fields[0].strip()):
                    continue
                records.append(Record(reader.line_num, tuple(fields)))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise InputError(f"Failed to read {path}: {e}") from e

    return records


def load_gold_standard(path: Union[str, Path]) -> GoldStandard:
    """
    Load the gold-standard network from a 2- or 3-column file.

    Raises:
        InputError: If the file is missing or unreadable
        ParseError: If the content is empty or malformed
    """
    path = Path(path)
    return GoldStandard.from_records(read_records(path), source=str(path))


def load_prediction(
    path: Union[str, Path],
    gold: GoldStandard,
    sort_by_score: bool = False,
) -> PredictionList:
    """
    Load a ranked prediction, keeping only edges in the gold-standard universe.

    Args:
        path: 3-column prediction file, most confident edge first
        gold: Gold standard defining the universe
        sort_by_score: Re-rank by descending score (stable for ties)

    Raises:
        InputError: If the file is missing or unreadable
        ParseError: If the content is empty or malformed
    """
    path = Path(path)
    return PredictionList.from_records(
        read_records(path), gold, sort_by_score=sort_by_score, source=str(path)
    )
