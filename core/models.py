# core/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

class Mark(Enum):
    DONE = "done"
    MISSED = "missed"
    UNSET = None  # never stored; absence of an entry

    @classmethod
    def from_token(cls, token: Any) -> Optional["Mark"]:
        """Stored/serialized token -> Mark; anything but "done"/"missed" gives None."""
        if token == cls.DONE.value:
            return cls.DONE
        if token == cls.MISSED.value:
            return cls.MISSED
        return None

HabitId = str
MonthKey = str
DayMarks = Dict[int, Mark]
MonthRecords = Dict[HabitId, DayMarks]
RecordStore = Dict[MonthKey, MonthRecords]

@dataclass
class Habit:
    id: HabitId
    name: str

@dataclass
class Snapshot:
    habits: List[Habit] = field(default_factory=list)
    records: RecordStore = field(default_factory=dict)
    # blob fields owned by the UI (preferences); preserved, never interpreted
    extras: Dict[str, Any] = field(default_factory=dict)

    def habit_ids(self) -> List[HabitId]:
        return [h.id for h in self.habits]

@dataclass
class CompletionRate:
    done: int
    missed: int
    total_marked: int
    pct: int

@dataclass
class HabitSummary:
    current_streak: int
    is_broken: bool

@dataclass
class ImportResult:
    snapshot: Snapshot
    valid_rows: int
    invalid_rows: int
