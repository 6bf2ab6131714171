import json

import pytest

from database.connection import ShotMemoryHandle
from database.db_manager import ShotMemoryManager
from database.document_store import InMemoryDocumentStore
from models import ShotRecord


@pytest.fixture
def documents():
    return InMemoryDocumentStore()


@pytest.fixture
def manager(documents):
    return ShotMemoryManager(documents)


def _seed(manager, shot_id="s1", **fields):
    data = {"id": shot_id, "courseId": "pebble", "holeNumber": 5, "shotType": "approach"}
    data.update(fields)
    assert manager.append_shot(data) == shot_id


# ================================================================
# Manager operations
# ================================================================

def test_append_shot_assigns_id_and_upload_time(manager):
    shot_id = manager.append_shot({"courseId": "pebble", "holeNumber": 1})
    assert shot_id

    stored = manager.get_all_shots()[0]
    assert stored.id == shot_id
    assert stored.uploaded_at is not None


def test_append_shot_rejects_malformed_input(manager):
    assert manager.append_shot({"courseId": "pebble"}) is None
    assert manager.get_all_shots() == []


def test_append_shot_reports_storage_failure(manager, documents):
    documents.fail_writes = True
    assert manager.append_shot(ShotRecord(course_id="pebble", hole_number=1)) is None


def test_relevant_shots_and_narrative(manager):
    for i in range(3):
        _seed(
            manager,
            f"s{i}",
            recommendation={"club": "7 iron"},
            userFeedback="helpful",
            timestamp=f"2025-06-0{i + 1}T09:00:00Z",
        )
    _seed(manager, "other-hole", holeNumber=6)

    relevant = manager.find_relevant_shots("pebble", 5, "approach", "7 iron")
    assert [s.id for s in relevant] == ["s2", "s1", "s0"]

    narrative = manager.generate_insight_narrative(relevant)
    assert "Hole 5" in narrative and "7 iron" in narrative
    assert manager.insights_for("pebble", 5) == narrative


def test_queries_trim_course_id(manager):
    _seed(manager, "s1", courseId=" pebble ")

    assert [s.id for s in manager.find_relevant_shots(" pebble ", 5)] == ["s1"]
    assert manager.get_course_intelligence(" pebble ").most_played_holes == [5]


def test_course_intelligence_empty_and_missing_id(manager):
    assert manager.get_course_intelligence("pebble").is_empty
    assert manager.get_course_intelligence(None).is_empty


def test_course_intelligence_reads_store(manager):
    _seed(manager, "s1", userFeedback="off")
    _seed(manager, "s2", userFeedback="off")
    insights = manager.get_course_intelligence("pebble")

    assert insights.most_played_holes == [5]
    assert insights.tricky_holes[0].avg_over_par == "2.0"


def test_health_check(documents):
    assert ShotMemoryManager(documents).health_check()
    assert not ShotMemoryManager(InMemoryDocumentStore(b"{oops")).health_check()


# ================================================================
# Process-wide handle
# ================================================================

def test_handle_initializes_lazily_from_env(tmp_path, monkeypatch):
    path = tmp_path / "shots.json"
    monkeypatch.setenv("SHOT_MEMORY_PATH", str(path))
    handle = ShotMemoryHandle()

    manager = handle.manager
    assert handle.manager is manager
    assert manager.append_shot({"courseId": "pebble", "holeNumber": 2})
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 1

    handle.close()
    assert handle.manager is not manager
