"""
Delimited input records.

A Record is one non-blank line of a tab-delimited input file, already split
into fields. Keeping the physical line number next to the fields lets the
graph builders report the exact location of a malformed line without knowing
anything about files.

Builders in grnscore.core accept either Record objects or plain sequences of
strings; plain sequences are numbered from 1 in iteration order.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple, Union

__all__ = ['Record', 'RecordLike', 'numbered']


class Record(NamedTuple):
    """One split line of a delimited file."""
    line_number: int
    fields: Tuple[str, ...]

    @property
    def n_columns(self) -> int:
        return len(self.fields)


RecordLike = Union[Record, Sequence[str]]


def numbered(records: Iterable[RecordLike]) -> Iterator[Record]:
    """Yield Records, numbering plain field sequences by position."""
    for position, record in enumerate(records, start=1):
        if isinstance(record, Record):
            yield record
        else:
            yield Record(position, tuple(record))
