from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from learnledger.api.http_errors import database_http_error
from learnledger.core.database import get_db
from learnledger.models.course import Course
from learnledger.models.enrollment import Enrollment
from learnledger.models.user import User
from learnledger.services import ledger_store

router = APIRouter()


@router.get("/ledger_state")
def ledger_state(db: Session = Depends(get_db)):
    """Counter and row totals, for checking the ledger against its invariants."""
    try:
        last_course_id = ledger_store.get_last_course_id(db)
        course_count = db.query(Course).count()
        overfilled = db.query(Course).filter(Course.current_enrollments > Course.max_capacity).count()
        return {
            "last_course_id": last_course_id,
            "users": db.query(User).count(),
            "courses": course_count,
            "enrollments": db.query(Enrollment).count(),
            "counter_consistent": last_course_id == course_count,
            "overfilled_courses": overfilled,
        }
    except SQLAlchemyError as e:
        raise database_http_error(e)
