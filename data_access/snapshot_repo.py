# data_access/snapshot_repo.py
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from core.constants import MONTH_KEY_PATTERN
from core.models import Habit, Mark, RecordStore, Snapshot

logger = logging.getLogger(__name__)

_OWN_KEYS = ("habits", "records")

def _load_habits(raw: Any) -> List[Habit]:
    habits, seen = [], set()
    for h in raw if isinstance(raw, list) else []:
        if not isinstance(h, dict):
            continue
        hid, name = h.get("id"), h.get("name")
        if not isinstance(hid, str) or not hid or hid in seen:
            continue
        if not isinstance(name, str) or not name.strip():
            continue
        seen.add(hid)
        habits.append(Habit(id=hid, name=name))
    return habits

def _load_records(raw: Any, habit_ids: set) -> RecordStore:
    records: RecordStore = {}
    for mk, month in (raw.items() if isinstance(raw, dict) else []):
        if not isinstance(month, dict) or not MONTH_KEY_PATTERN.match(str(mk)):
            continue
        for hid, days in month.items():
            if hid not in habit_ids or not isinstance(days, dict):
                continue
            for day_raw, token in days.items():
                mark = Mark.from_token(token)
                try:
                    day = int(day_raw)
                except (TypeError, ValueError):
                    continue
                if mark is None or day < 1:
                    continue
                records.setdefault(str(mk), {}).setdefault(hid, {})[day] = mark
    return records

def load_snapshot(blob: Optional[Union[str, bytes]]) -> Snapshot:
    """Decode a persisted blob. Absent or corrupt input gives an empty snapshot."""
    if not blob:
        return Snapshot()
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        logger.warning("corrupt snapshot blob, starting empty: %s", e)
        return Snapshot()
    if not isinstance(data, dict):
        logger.warning("snapshot blob is not an object, starting empty")
        return Snapshot()

    habits = _load_habits(data.get("habits"))
    records = _load_records(data.get("records"), {h.id for h in habits})
    extras = {k: v for k, v in data.items() if k not in _OWN_KEYS}
    return Snapshot(habits=habits, records=records, extras=extras)

def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    records = {
        mk: {
            hid: {str(day): mark.value for day, mark in days.items() if mark is not Mark.UNSET}
            for hid, days in month.items()
        }
        for mk, month in snapshot.records.items()
    }
    return {
        **snapshot.extras,
        "habits": [{"id": h.id, "name": h.name} for h in snapshot.habits],
        "records": records,
    }

def serialize_snapshot(snapshot: Snapshot) -> str:
    return json.dumps(snapshot_to_dict(snapshot), ensure_ascii=False, indent=2)

def read_store(path: Union[str, Path]) -> Optional[Snapshot]:
    """Snapshot saved at ``path``, or None when nothing has been saved yet."""
    p = Path(path)
    if not p.exists():
        return None
    try:
        blob = p.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("could not read %s, starting empty: %s", p, e)
        return Snapshot()
    return load_snapshot(blob)

def write_store(path: Union[str, Path], snapshot: Snapshot) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_name(p.name + ".tmp")
    tmp.write_text(serialize_snapshot(snapshot) + "\n", encoding="utf-8")
    os.replace(tmp, p)
