import pytest

from database.db_manager import ShotMemoryManager
from database.document_store import InMemoryDocumentStore


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
# Feedback updater
# ================================================================

def test_feedback_updates_existing_shot(manager):
    _seed(manager)
    assert manager.submit_feedback("s1", "pebble", 5, "7 iron", "helpful") is True

    shots = manager.get_all_shots()
    assert len(shots) == 1
    assert shots[0].user_feedback == "helpful"
    assert shots[0].feedback_timestamp is not None


def test_feedback_for_unknown_shot_is_silent_success(manager, documents):
    _seed(manager)
    before = documents.load()

    assert manager.submit_feedback("nonexistent", "pebble", 5, "7 iron", "off") is True

    assert documents.load() == before
    assert len(manager.get_all_shots()) == 1
    assert manager.get_all_shots()[0].user_feedback is None


def test_feedback_without_shot_creates_feedback_only_record(manager):
    assert manager.submit_feedback(None, "pebble", 12, "pitching wedge", "off") is True

    shots = manager.get_all_shots()
    assert len(shots) == 1
    record = shots[0]
    assert record.course_id == "pebble"
    assert record.hole_number == 12
    assert record.club_used == "pitching wedge"
    assert record.user_feedback == "off"
    assert record.recommendation is None
    assert record.shot_context is None
    assert record.is_feedback_only


def test_feedback_storage_failure_returns_false(manager, documents):
    documents.fail_writes = True
    assert manager.submit_feedback(None, "pebble", 1, "driver", "helpful") is False


def test_feedback_with_bad_verdict_is_ignored(manager, documents):
    _seed(manager)
    writes = documents.save_count

    assert manager.submit_feedback("s1", "pebble", 5, "7 iron", "amazing") is True
    assert documents.save_count == writes


def test_feedback_only_record_without_course_is_ignored(manager):
    assert manager.submit_feedback(None, None, 3, "driver", "helpful") is True
    assert manager.get_all_shots() == []

