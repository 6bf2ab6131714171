"""Shot history API endpoints."""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from database.db_manager import ShotMemoryManager
from api.dependencies import get_manager
from api.schemas import AppendShotResponse, RelevantShotsResponse
from models import ShotRecord, ShotType

router = APIRouter()


@router.post("", response_model=AppendShotResponse)
def append_shot(record: ShotRecord, manager: ShotMemoryManager = Depends(get_manager)):
    shot_id = manager.append_shot(record)
    return AppendShotResponse(id=shot_id, stored=shot_id is not None)


@router.get("", response_model=List[ShotRecord])
def get_all_shots(manager: ShotMemoryManager = Depends(get_manager)):
    return manager.get_all_shots()


@router.get("/relevant", response_model=RelevantShotsResponse)
def get_relevant_shots(
    course_id: str = Query(..., alias="courseId", min_length=1),
    hole: int = Query(..., ge=1),
    shot_type: Optional[ShotType] = Query(None, alias="shotType"),
    club: Optional[str] = Query(None),
    manager: ShotMemoryManager = Depends(get_manager),
):
    shots = manager.find_relevant_shots(
        course_id, hole, shot_type.value if shot_type else None, club
    )
    return RelevantShotsResponse(
        shots=shots,
        insights=manager.generate_insight_narrative(shots),
    )
