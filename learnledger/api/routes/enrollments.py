from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from learnledger.api.http_errors import database_http_error, ledger_http_error
from learnledger.core.auth import require_block_height, require_principal
from learnledger.core.database import get_db
from learnledger.core.errors import LedgerError
from learnledger.schemas.enrollment import EnrollmentResponse, ProgressUpdate
from learnledger.services import ledger_store

router = APIRouter()


@router.post("/{course_id}", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def enroll_in_course(
    course_id: int,
    caller: str = Depends(require_principal),
    block_height: int = Depends(require_block_height),
    db: Session = Depends(get_db),
):
    """Enroll the caller in a course."""
    try:
        ledger_store.enroll_in_course(db, caller, course_id, block_height)
    except LedgerError as e:
        raise ledger_http_error(e)
    except SQLAlchemyError as e:
        raise database_http_error(e)
    return ledger_store.get_enrollment_details(db, course_id, caller)


@router.put("/{course_id}/progress", response_model=EnrollmentResponse)
def update_course_progress(
    course_id: int,
    update: ProgressUpdate,
    caller: str = Depends(require_principal),
    db: Session = Depends(get_db),
):
    """Update the caller's progress (0-100) in a course they are enrolled in."""
    try:
        ledger_store.update_course_progress(db, caller, course_id, update.progress)
    except LedgerError as e:
        raise ledger_http_error(e)
    except SQLAlchemyError as e:
        raise database_http_error(e)
    return ledger_store.get_enrollment_details(db, course_id, caller)


@router.get("/{course_id}/{student}", response_model=EnrollmentResponse)
def get_enrollment_details(course_id: int, student: str, db: Session = Depends(get_db)):
    """Get a student's enrollment in a course."""
    enrollment = ledger_store.get_enrollment_details(db, course_id, student)
    if not enrollment:
        raise HTTPException(status_code=404, detail="Enrollment not found")
    return enrollment
