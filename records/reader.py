"""Input CSV reader: one (name, domain) record per row."""

import csv
import logging
from dataclasses import dataclass
from typing import Iterator

from .errors import InputPathError, MalformedInputError

log = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "domain")


@dataclass
class InputRecord:
    name: str
    domain: str


class RecordReader:
    """Lazily yields InputRecord values from a CSV with `name` and `domain` columns.

    The file is opened on construction so a bad path fails before any work
    is done; rows are only parsed while iterating, and only once.
    """

    def __init__(self, path):
        self.path = path
        try:
            # utf-8-sig swallows the BOM spreadsheet exports like to add
            self._fh = open(path, newline="", encoding="utf-8-sig")
        except OSError as e:
            raise InputPathError(f"cannot open input {path}: {e.strerror or e}") from e
        self._records = self._parse()

    def __iter__(self) -> Iterator[InputRecord]:
        return self._records

    def _parse(self) -> Iterator[InputRecord]:
        reader = csv.reader(self._fh)
        header = None
        index = {}
        row_no = 0
        try:
            for row in reader:
                if not row:
                    continue
                if header is None:
                    header = [h.strip() for h in row]
                    index = {c: header.index(c) for c in REQUIRED_COLUMNS if c in header}
                    log.debug("input header: %s", header)
                    continue

                row_no += 1
                missing = [c for c in REQUIRED_COLUMNS if c not in index]
                if missing:
                    raise MalformedInputError(
                        f"missing column(s) {', '.join(missing)} in header {header}",
                        row=row_no,
                    )
                if len(row) != len(header):
                    raise MalformedInputError(
                        f"expected {len(header)} fields, found {len(row)}", row=row_no
                    )
                yield InputRecord(name=row[index["name"]], domain=row[index["domain"]])
        except csv.Error as e:
            raise MalformedInputError(str(e), row=row_no + 1) from e
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"not valid UTF-8: {e}", row=row_no + 1) from e

    def close(self) -> None:
        self._fh.close()

    def __enter__(self) -> "RecordReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
