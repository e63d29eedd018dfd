from fastapi import APIRouter
from learnledger.core.config import get_settings
from learnledger.api.routes import users, courses, enrollments, materials

api_router = APIRouter()

# Materials paths live under /courses/{course_id}/materials; register them first
api_router.include_router(materials.router, tags=["materials"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
api_router.include_router(enrollments.router, prefix="/enrollments", tags=["enrollments"])

# Debug routes only available when DEBUG=true
settings = get_settings()
if settings.debug:
    from learnledger.api.routes import debug
    api_router.include_router(debug.router, prefix="/debug", tags=["debug"])
