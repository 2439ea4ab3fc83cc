from __future__ import annotations


class GtfsError(Exception):
    """Base exception for GTFS feed handling."""


class GtfsLoadError(GtfsError):
    """Raised when the feed cannot be loaded; startup must not continue."""


class GtfsParseError(GtfsLoadError):
    """A present table file could not be read or parsed."""

    def __init__(self, file_name: str, detail: str, line: int | None = None) -> None:
        self.file_name = file_name
        self.detail = detail
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"Error parsing {file_name}{where}: {detail}")


class StoreSealedError(GtfsError):
    """Raised on any write to a record store after loading finished."""
