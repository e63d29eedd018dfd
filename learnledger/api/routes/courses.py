from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from learnledger.api.http_errors import database_http_error, ledger_http_error
from learnledger.core.auth import require_principal
from learnledger.core.database import get_db
from learnledger.core.errors import LedgerError
from learnledger.schemas.course import CourseCreate, CourseCreated, CourseResponse, LastCourseIdResponse
from learnledger.services import ledger_store

router = APIRouter()


@router.post("/", response_model=CourseCreated, status_code=status.HTTP_201_CREATED)
def create_course(
    course: CourseCreate,
    caller: str = Depends(require_principal),
    db: Session = Depends(get_db),
):
    """Create a course taught by the caller. Instructors and admins only."""
    try:
        course_id = ledger_store.create_course(
            db,
            caller,
            course.title,
            course.description,
            course.max_capacity,
            course.start_date,
            course.end_date,
        )
    except LedgerError as e:
        raise ledger_http_error(e)
    except SQLAlchemyError as e:
        raise database_http_error(e)
    return CourseCreated(course_id=course_id)


# Declared before /{course_id} so the literal path wins
@router.get("/last-id", response_model=LastCourseIdResponse)
def get_last_course_id(db: Session = Depends(get_db)):
    """Id of the most recently created course (0 when none exist)."""
    return LastCourseIdResponse(last_course_id=ledger_store.get_last_course_id(db))


@router.get("/{course_id}", response_model=CourseResponse)
def get_course_details(course_id: int, db: Session = Depends(get_db)):
    """Get a course by ID."""
    course = ledger_store.get_course_details(db, course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course


@router.post("/{course_id}/deactivate", response_model=CourseResponse)
def deactivate_course(
    course_id: int,
    caller: str = Depends(require_principal),
    db: Session = Depends(get_db),
):
    """
    Deactivate a course.
    - Admin: Can deactivate any course
    - Instructor: Can only deactivate courses they teach
    """
    try:
        ledger_store.deactivate_course(db, caller, course_id)
    except LedgerError as e:
        raise ledger_http_error(e)
    except SQLAlchemyError as e:
        raise database_http_error(e)
    return ledger_store.get_course_details(db, course_id)
