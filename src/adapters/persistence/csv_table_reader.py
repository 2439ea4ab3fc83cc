from __future__ import annotations

import csv
from pathlib import Path

from src.domain.exceptions import GtfsParseError


def read_table(path: Path) -> list[dict[str, str]]:
    """Parse a GTFS .txt table into header-keyed rows, in file order.

    I/O and parse failures both surface as `GtfsParseError`. A row longer
    than the header is malformed; short rows are padded with "".
    """

    rows: list[dict[str, str]] = []
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as fp:
            reader = csv.DictReader(fp, restval="", strict=True)
            for row in reader:
                if None in row:
                    raise GtfsParseError(
                        path.name,
                        f"expected {len(reader.fieldnames or ())} fields, "
                        f"got {len(reader.fieldnames or ()) + len(row[None])}",
                        line=reader.line_num,
                    )
                rows.append(row)
    except csv.Error as exc:
        raise GtfsParseError(path.name, str(exc), line=reader.line_num) from exc
    except UnicodeDecodeError as exc:
        raise GtfsParseError(path.name, f"invalid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise GtfsParseError(path.name, exc.strerror or str(exc)) from exc
    return rows
