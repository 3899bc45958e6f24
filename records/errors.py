"""Exceptions raised while reading input or writing output files."""

from apis.errors import HunterExportError


class InputPathError(HunterExportError):
    pass


class OutputPathError(HunterExportError):
    pass


class MalformedInputError(HunterExportError):
    """An input row does not match the header; `row` is the 1-based data row."""

    def __init__(self, message: str, row: int):
        super().__init__(f"row {row}: {message}")
        self.row = row
