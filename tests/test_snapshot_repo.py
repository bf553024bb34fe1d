import json

import pytest

from core.models import Habit, Mark, Snapshot
from data_access.snapshot_repo import load_snapshot, read_store, serialize_snapshot, write_store
from services.streak_service import habit_summary


def _snap():
    return Snapshot(
        habits=[Habit("a1", "Read"), Habit("b2", "Run")],
        records={"2025-03": {"a1": {5: Mark.DONE, 6: Mark.MISSED}}},
        extras={"layout": "compact", "theme": {"accent": "amber"}},
    )


@pytest.mark.parametrize("blob", [None, "", "{not json", "[1, 2]", b"\xff\xfe"])
def test_absent_or_corrupt_blob_gives_empty_snapshot(blob):
    snap = load_snapshot(blob)
    assert snap.habits == []
    assert snap.records == {}


def test_serialize_then_load_keeps_everything():
    snap = load_snapshot(serialize_snapshot(_snap()))
    assert snap == _snap()


def test_blob_shape():
    data = json.loads(serialize_snapshot(_snap()))
    assert data["habits"] == [{"id": "a1", "name": "Read"}, {"id": "b2", "name": "Run"}]
    assert data["records"] == {"2025-03": {"a1": {"5": "done", "6": "missed"}}}
    assert data["layout"] == "compact"


def test_load_drops_malformed_and_dangling_entries():
    blob = json.dumps({
        "habits": [{"id": "a1", "name": "Read"}, {"id": "", "name": "x"}, {"id": "c3", "name": " "}, "junk"],
        "records": {
            "2025-03": {
                "a1": {"1": "done", "2": "unset", "x": "done", "3": "missed"},
                "ghost": {"1": "done"},
            },
            "2025-04": "junk",
        },
    })
    snap = load_snapshot(blob)
    assert snap.habits == [Habit("a1", "Read")]
    assert snap.records == {"2025-03": {"a1": {1: Mark.DONE, 3: Mark.MISSED}}}


def test_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "habits.json"
    assert read_store(path) is None
    write_store(path, _snap())
    assert read_store(path) == _snap()
    assert not (tmp_path / "nested" / "habits.json.tmp").exists()


def test_corrupt_store_file_reads_as_empty(tmp_path):
    path = tmp_path / "habits.json"
    path.write_text("{oops", encoding="utf-8")
    assert read_store(path) == Snapshot()


def test_load_drops_month_keys_that_are_not_year_month():
    blob = json.dumps({
        "habits": [{"id": "a1", "name": "Read"}],
        "records": {"10000-01": {"a1": {"1": "missed"}}, "2025,03": {"a1": {"1": "done"}},
                    "2025-03": {"a1": {"2": "done"}}},
    })
    snap = load_snapshot(blob)
    assert snap.records == {"2025-03": {"a1": {2: Mark.DONE}}}
    assert habit_summary("a1", snap.records).current_streak == 1
