# -*- coding: utf-8 -*-
"""
I/O helpers for loading the ride catalog.

The catalog is a caret-delimited text file with a single header line:

    description^cost^time
    new enchanted world^12^37.5
    ...

Rules:
- The header line is discarded.
- Every data line must have exactly 3 fields; any other count aborts the
  whole load with SchemaError.
- Lines whose cost or time do not parse as numbers are skipped, as are lines
  carrying invalid values (empty description, cost that truncates to <= 0).
- Cost is parsed as a real number and truncated to whole dollars.
- Bytes that are not valid UTF-8 are replaced (U+FFFD), not fatal.

Each accepted line maps to business_objects.rides.RideItem.
"""

from __future__ import annotations
import csv
import logging
from typing import Optional, Sequence

from src.business_objects.errors import CatalogReadError, SchemaError
from src.business_objects.rides import RideItem, RideVector

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "^"
FIELD_COUNT = 3


def _parse_row(fields: Sequence[str]) -> Optional[RideItem]:
    description, cost_field, time_field = fields
    try:
        cost = int(float(cost_field))
        time = float(time_field)
        return RideItem(description=description, cost=cost, time=time)
    except (ValueError, OverflowError):
        # StateValidationError is a ValueError, so invalid values land here too.
        return None


def read_rides_csv(path: str) -> RideVector:
    """
    Load all valid rides from a caret-delimited catalog file.

    Parameters
    ----------
    path : str
        Location of the catalog.

    Returns
    -------
    RideVector
        Rides in file order; may be empty.

    Raises
    ------
    CatalogReadError
        If the file cannot be opened or read.
    SchemaError
        If any data line does not have exactly 3 fields, or cannot be split
        into fields at all (e.g. a field over the csv field size limit).
    """
    rides: RideVector = []
    skipped = 0
    try:
        # Undecodable bytes become U+FFFD; such rows still load.
        f = open(path, "r", newline="", encoding="utf-8", errors="replace")
    except OSError as e:
        raise CatalogReadError(f"{path}: failed to open ride catalog: {e}") from e

    with f:
        reader = csv.reader(f, delimiter=FIELD_DELIMITER, quoting=csv.QUOTE_NONE)
        try:
            for fields in reader:
                line_number = reader.line_num
                if line_number == 1:
                    continue
                if len(fields) != FIELD_COUNT:
                    raise SchemaError(
                        f"{path}:{line_number}: invalid field count; "
                        f"want {FIELD_COUNT} but got {len(fields)}: {FIELD_DELIMITER.join(fields)!r}"
                    )
                ride = _parse_row(fields)
                if ride is None:
                    logger.debug("%s:%d: skipping unparsable ride %r", path, line_number, fields)
                    skipped += 1
                    continue
                rides.append(ride)
        except csv.Error as e:
            raise SchemaError(f"{path}:{reader.line_num}: malformed ride line: {e}") from e
        except OSError as e:
            raise CatalogReadError(f"{path}: failed to read ride catalog: {e}") from e

    logger.info("Loaded %d rides from %s (%d skipped)", len(rides), path, skipped)
    return rides
