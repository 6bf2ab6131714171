"""Course intelligence endpoint."""

from fastapi import APIRouter, Depends

from database.db_manager import ShotMemoryManager
from api.dependencies import get_manager
from models import CourseInsights

router = APIRouter()


@router.get("/{course_id}/intelligence", response_model=CourseInsights)
def get_course_intelligence(course_id: str, manager: ShotMemoryManager = Depends(get_manager)):
    return manager.get_course_intelligence(course_id)
