"""Output CSV writer for flattened rows."""

import csv
import logging
from dataclasses import astuple
from typing import List

from .errors import OutputPathError
from .flatten import COLUMNS, FlatRow

log = logging.getLogger(__name__)


def _cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render(row: FlatRow) -> List[str]:
    """Row cells in COLUMNS order: None -> "", bools -> true/false."""
    return [_cell(v) for v in astuple(row)]


class RecordWriter:
    """Append-only CSV sink.

    The header goes out as soon as the file is opened and every row is
    flushed on write, so an aborted run still leaves a readable prefix.
    """

    def __init__(self, path):
        self.path = path
        self.rows_written = 0
        try:
            self._fh = open(path, "w", newline="", encoding="utf-8")
        except OSError as e:
            raise OutputPathError(f"cannot open output {path}: {e.strerror or e}") from e
        self._csv = csv.writer(self._fh, lineterminator="\n")
        self._write(COLUMNS)

    def _write(self, cells: List[str]) -> None:
        try:
            self._csv.writerow(cells)
            self._fh.flush()
        except OSError as e:
            raise OutputPathError(f"cannot write to {self.path}: {e.strerror or e}") from e

    def write(self, row: FlatRow) -> None:
        self._write(render(row))
        self.rows_written += 1

    def close(self) -> None:
        if self._fh.closed:
            return
        try:
            self._fh.close()
        except OSError as e:
            raise OutputPathError(f"cannot close {self.path}: {e.strerror or e}") from e
        log.debug("closed %s after %d rows", self.path, self.rows_written)

    def __enter__(self) -> "RecordWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
