from __future__ import annotations

import csv
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from oui.errors import ParseError, TableUnavailable
from oui.log import get_logger
from oui.models import OuiRecord

logger = get_logger("lookup")

DELIMITER = ";"
ENCODING = "utf-8"


def _decoded_lines(handle: BinaryIO, path: Path) -> Iterator[str]:
    for number, raw in enumerate(handle, start=1):
        try:
            yield raw.decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{path}, line {number}: undecodable bytes") from exc


def find_record(table_path: Union[str, Path], oui: str) -> Optional[OuiRecord]:
    """Scan ``table_path`` in file order and return the first row keyed by ``oui``."""
    path = Path(table_path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise TableUnavailable(f"cannot open reference table {path}: {exc.strerror or exc}") from exc

    logger.debug("scanning %s for %s", path, oui)
    scanned = 0
    with handle:
        reader = csv.reader(_decoded_lines(handle, path), delimiter=DELIMITER, strict=True)
        try:
            for row in reader:
                if not row:
                    continue
                scanned += 1
                if row[0] == oui:
                    logger.debug("matched %s after %d rows", oui, scanned)
                    vendor = row[1] if len(row) > 1 else None
                    return OuiRecord(oui=row[0], vendor=vendor)
        except csv.Error as exc:
            raise ParseError(f"{path}, line {reader.line_num}: {exc}") from exc
        except OSError as exc:
            raise TableUnavailable(f"cannot read reference table {path}: {exc.strerror or exc}") from exc

    logger.debug("no match for %s in %d rows", oui, scanned)
    return None


def lookup(table_path: Union[str, Path], oui: str) -> Optional[str]:
    record = find_record(table_path, oui)
    if record is None:
        return None
    return record.display_vendor
