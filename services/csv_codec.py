# services/csv_codec.py
"""
CSV import/export of the full record set.

One row per stored mark; every text column is quoted:

    "Habit ID","Habit Name","Month","Day","Status"
    "3f2a9c0d1b7e","Read daily","2025-03",5,"done"

Import is a wholesale replacement: the caller swaps its snapshot for the one
returned, after asking the user.
"""
import csv
import io
import logging
from typing import Dict, List, Tuple

import pandas as pd

from core.constants import CSV_COLUMNS, MAX_IMPORT_DAY, MONTH_KEY_PATTERN
from core.errors import FormatError, NoValidRowsError, RowError
from core.models import Habit, ImportResult, Mark, Snapshot

logger = logging.getLogger(__name__)

def export_rows(snapshot: Snapshot) -> List[Tuple[str, str, str, int, str]]:
    rows = []
    for habit in snapshot.habits:
        for mk in sorted(snapshot.records):
            days = snapshot.records[mk].get(habit.id) or {}
            for day in sorted(days):
                mark = days[day]
                if mark is Mark.UNSET:
                    continue
                rows.append((habit.id, habit.name, mk, int(day), mark.value))
    return rows

def export_csv(snapshot: Snapshot) -> str:
    df = pd.DataFrame(export_rows(snapshot), columns=CSV_COLUMNS)
    df["Day"] = df["Day"].astype(int)
    return df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")

def _parse_row(row: List[str]) -> Tuple[str, str, str, int, Mark]:
    fields = [f.strip() for f in row[:len(CSV_COLUMNS)]]
    if len(fields) < len(CSV_COLUMNS) or not all(fields):
        raise RowError("missing field")
    hid, name, mk, day_raw, status = fields
    mark = Mark.from_token(status)
    if mark is None:
        raise RowError(f"bad status {status!r}")
    if not MONTH_KEY_PATTERN.match(mk):
        raise RowError(f"bad month {mk!r}")
    if not (day_raw.isascii() and day_raw.isdigit()):
        raise RowError(f"bad day {day_raw!r}")
    day = int(day_raw)
    if not 1 <= day <= MAX_IMPORT_DAY:
        raise RowError(f"day out of range: {day}")
    return hid, name, mk, day, mark

def import_csv(text: str) -> ImportResult:
    if text.startswith("\ufeff"):
        text = text[1:]
    try:
        # blank lines come back as empty lists; comma-only lines are kept as bad rows
        rows = [r for r in csv.reader(io.StringIO(text)) if r]
    except csv.Error as e:
        raise FormatError(f"Could not read the CSV file: {e}") from e
    if len(rows) < 2:
        raise FormatError("The CSV file needs a header row and at least one data row.")
    if len(rows[0]) < len(CSV_COLUMNS):
        raise FormatError(f"Invalid CSV header. Expected columns: {', '.join(CSV_COLUMNS)}.")

    habits: Dict[str, Habit] = {}
    snapshot = Snapshot()
    valid = invalid = 0
    for lineno, row in enumerate(rows[1:], start=2):
        try:
            hid, name, mk, day, mark = _parse_row(row)
        except RowError as e:
            invalid += 1
            logger.debug("skipping CSV row %d: %s", lineno, e)
            continue
        if hid not in habits:
            habits[hid] = Habit(id=hid, name=name)
        snapshot.records.setdefault(mk, {}).setdefault(hid, {})[day] = mark
        valid += 1

    if not valid:
        raise NoValidRowsError("No valid rows found in the CSV file.")
    snapshot.habits = list(habits.values())
    logger.info("parsed CSV import: %d valid rows, %d skipped", valid, invalid)
    return ImportResult(snapshot=snapshot, valid_rows=valid, invalid_rows=invalid)
