"""
Service layer for lab records.

``LabRecordService`` answers the read queries of the API over the
record collection loaded at startup.  The collection is kept as a
tuple and never modified, so a single instance can be shared by all
request handlers without locking.

Name filtering is an exact match that ignores case: ``rbc`` matches
records named ``RBC`` but ``RB`` matches nothing.
"""

import logging
from typing import Iterable, List, Optional

from lab_records_api.app.schemas.lab_record import LabRecord

logger = logging.getLogger(__name__)


class MissingParameterError(ValueError):
    """Raised when a required filter value is absent or empty."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing required query parameter '{parameter}'")
        self.parameter = parameter


class LabRecordService:
    """Read‑only queries over an immutable sequence of lab records."""

    def __init__(self, records: Iterable[LabRecord]) -> None:
        self._records = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> List[LabRecord]:
        """Return every record in load order."""
        return list(self._records)

    def list_distinct_names(self) -> List[str]:
        """Return each record name once, in order of first occurrence.

        Names are compared as exact strings here, so ``RBC`` and
        ``rbc`` are listed separately.
        """
        return list(dict.fromkeys(record.name for record in self._records))

    def filter_by_name(self, name: Optional[str]) -> List[LabRecord]:
        """Return the records whose name equals ``name`` ignoring case.

        An unknown name gives an empty list.  Raises
        ``MissingParameterError`` when ``name`` is ``None`` or empty.
        """
        if not name:
            raise MissingParameterError("LabName")
        wanted = name.casefold()
        matches = [record for record in self._records if record.name.casefold() == wanted]
        logger.debug("Filter by name %r matched %d record(s)", name, len(matches))
        return matches

    def filter_by_name_query(self, name: Optional[str]) -> List[LabRecord]:
        """Filter by ``name`` when one is given, otherwise list everything."""
        if not name:
            return self.list_all()
        return self.filter_by_name(name)
