"""
Loading of the lab record document.

The record collection is read once at application start from a JSON
document which keeps the records as a list under the ``LabRecords``
key::

    {
        "LabRecords": [
            {"Name": "RBC", "Value": 4.7, "Unit": "10^6/uL", ...},
            ...
        ]
    }

``load_lab_records`` returns the records as an immutable tuple in
document order.  Any problem reading or validating the document is
reported as ``DataSourceError`` so that the application refuses to
start with a broken data set.
"""

import json
import logging
from pathlib import Path
from typing import Any, Tuple

from pydantic import ValidationError

from ..schemas.lab_record import LabRecord

logger = logging.getLogger(__name__)

RECORDS_KEY = "LabRecords"


class DataSourceError(Exception):
    """Raised when the lab record document cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load lab records from {path}: {reason}")
        self.path = path
        self.reason = reason


def load_lab_records(path: str) -> Tuple[LabRecord, ...]:
    """Read and validate the lab records stored in ``path``.

    A document without a ``LabRecords`` key (or with ``null`` under
    it) yields an empty tuple.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DataSourceError(path, e.strerror or str(e)) from e
    try:
        document: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataSourceError(path, f"invalid JSON ({e})") from e

    if not isinstance(document, dict):
        raise DataSourceError(path, "top level must be a JSON object")

    entries = document.get(RECORDS_KEY)
    if entries is None:
        logger.warning("No '%s' section found in %s; serving no records", RECORDS_KEY, path)
        return ()
    if not isinstance(entries, list):
        raise DataSourceError(path, f"'{RECORDS_KEY}' must be a list")

    records = []
    for index, entry in enumerate(entries):
        try:
            records.append(LabRecord.model_validate(entry))
        except ValidationError as e:
            raise DataSourceError(path, f"entry {index} is invalid: {e}") from e
    return tuple(records)
