"""
Ledger state store: users, courses, enrollments and course materials.

Every entry point takes the session, the caller principal and (where a record
is stamped) the current block height as explicit arguments. Each call runs
all of its checks before its first write and commits once, so a rejected call
leaves the ledger untouched. Check order differs between entry points and
decides which error a malformed call gets back; keep it as written.
"""

import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from learnledger.core.errors import ErrorCode, LedgerError
from learnledger.models.course import Course
from learnledger.models.course_material import CourseMaterial, MaterialType
from learnledger.models.enrollment import Enrollment
from learnledger.models.ledger_state import LEDGER_STATE_ID, LedgerState, MaterialCounter
from learnledger.models.user import User, UserRole

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 50
MAX_EMAIL_LENGTH = 100
MAX_ROLE_LENGTH = 10
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_CONTENT_URL_LENGTH = 500
MAX_MATERIAL_TYPE_LENGTH = 20
MAX_PROGRESS = 100

VALID_ROLES = {role.value for role in UserRole}
COURSE_CREATOR_ROLES = {UserRole.instructor, UserRole.admin}
VALID_MATERIAL_TYPES = {material_type.value for material_type in MaterialType}


# --- Helpers ---

def _reject(code: ErrorCode, message: str) -> LedgerError:
    logger.warning(f"Rejected: {code.name} - {message}")
    return LedgerError(code, message)


def _valid_text(value, max_length: int) -> bool:
    return isinstance(value, str) and 0 < len(value) <= max_length


def _valid_uint(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Ledger commit failed, transaction rolled back")
        raise


def _get_user(db: Session, principal: str) -> Optional[User]:
    return db.query(User).filter(User.principal == principal).first()


def _get_course(db: Session, course_id: int) -> Optional[Course]:
    return db.query(Course).filter(Course.id == course_id).first()


def _get_enrollment(db: Session, course_id: int, student: str) -> Optional[Enrollment]:
    return db.query(Enrollment).filter(
        Enrollment.course_id == course_id,
        Enrollment.student == student,
    ).first()


def _get_material_counter(db: Session, course_id: int) -> Optional[MaterialCounter]:
    return db.query(MaterialCounter).filter(MaterialCounter.course_id == course_id).first()


def _ledger_state(db: Session) -> LedgerState:
    """Return the counter row, creating it inside the current transaction on first use."""
    state = db.query(LedgerState).filter(LedgerState.id == LEDGER_STATE_ID).first()
    if state is None:
        state = LedgerState(id=LEDGER_STATE_ID, last_course_id=0)
        db.add(state)
    return state


# --- Entry points ---

def register_user(db: Session, caller: str, name: str, email: str, role: str, block_height: int) -> bool:
    """Register the caller as a user.

    Raises:
        LedgerError: ALREADY_EXISTS if the caller is registered,
            INVALID_INPUT on a bad name, email or role.
    """
    if _get_user(db, caller) is not None:
        raise _reject(ErrorCode.ALREADY_EXISTS, f"User {caller} already registered")

    if not _valid_text(name, MAX_NAME_LENGTH):
        raise _reject(ErrorCode.INVALID_INPUT, "Name must be 1-50 characters")
    if not _valid_text(email, MAX_EMAIL_LENGTH):
        raise _reject(ErrorCode.INVALID_INPUT, "Email must be 1-100 characters")
    if not _valid_text(role, MAX_ROLE_LENGTH) or role not in VALID_ROLES:
        raise _reject(ErrorCode.INVALID_INPUT, f"Invalid role: {role!r}")

    db.add(User(
        principal=caller,
        name=name,
        email=email,
        role=UserRole(role),
        created_at=block_height,
    ))
    _commit(db)
    logger.info(f"Registered user {caller} as {role} at block {block_height}")
    return True


def create_course(
    db: Session,
    caller: str,
    title: str,
    description: str,
    max_capacity: int,
    start_date: int,
    end_date: int,
) -> int:
    """Create a course taught by the caller and return its id.

    Only instructors and admins may create courses.
    """
    user = _get_user(db, caller)
    if user is None or user.role not in COURSE_CREATOR_ROLES:
        raise _reject(ErrorCode.UNAUTHORIZED, f"{caller} may not create courses")

    if not _valid_text(title, MAX_TITLE_LENGTH):
        raise _reject(ErrorCode.INVALID_INPUT, "Title must be 1-100 characters")
    if not _valid_text(description, MAX_DESCRIPTION_LENGTH):
        raise _reject(ErrorCode.INVALID_INPUT, "Description must be 1-500 characters")
    if not _valid_uint(max_capacity) or max_capacity == 0:
        raise _reject(ErrorCode.INVALID_INPUT, "Max capacity must be greater than 0")
    if not (_valid_uint(start_date) and _valid_uint(end_date)) or start_date >= end_date:
        raise _reject(ErrorCode.INVALID_INPUT, "Start date must be before end date")

    state = _ledger_state(db)
    course_id = state.last_course_id + 1

    db.add(Course(
        id=course_id,
        title=title,
        description=description,
        instructor=caller,
        max_capacity=max_capacity,
        current_enrollments=0,
        start_date=start_date,
        end_date=end_date,
        is_active=True,
    ))
    db.add(MaterialCounter(course_id=course_id, last_material_id=0))
    state.last_course_id = course_id
    _commit(db)
    logger.info(f"Course {course_id} created by {caller} (capacity {max_capacity})")
    return course_id


def enroll_in_course(db: Session, caller: str, course_id: int, block_height: int) -> bool:
    """Enroll the caller in an active course with free capacity.

    The seat is taken with a single conditional UPDATE so concurrent callers
    can never push current_enrollments past max_capacity.
    """
    course = _get_course(db, course_id)
    if course is None:
        raise _reject(ErrorCode.NOT_FOUND, f"Course {course_id} not found")
    if _get_user(db, caller) is None:
        raise _reject(ErrorCode.UNAUTHORIZED, f"{caller} is not a registered user")
    if not course.is_active:
        raise _reject(ErrorCode.COURSE_NOT_STARTED, f"Course {course_id} is not active")
    if course.current_enrollments >= course.max_capacity:
        raise _reject(ErrorCode.COURSE_FULL, f"Course {course_id} is full")
    if _get_enrollment(db, course_id, caller) is not None:
        raise _reject(ErrorCode.ALREADY_ENROLLED, f"{caller} already enrolled in course {course_id}")

    try:
        result = db.execute(
            update(Course)
            .where(
                Course.id == course_id,
                Course.is_active.is_(True),
                Course.current_enrollments < Course.max_capacity,
            )
            .values(current_enrollments=Course.current_enrollments + 1)
            .execution_options(synchronize_session=False)
        )
    except SQLAlchemyError:
        db.rollback()
        raise
    if result.rowcount == 0:
        # Another transaction took the last seat (or closed the course) since the read above
        db.rollback()
        db.refresh(course)
        if not course.is_active:
            raise _reject(ErrorCode.COURSE_NOT_STARTED, f"Course {course_id} is not active")
        raise _reject(ErrorCode.COURSE_FULL, f"Course {course_id} is full")

    db.add(Enrollment(
        course_id=course_id,
        student=caller,
        enrollment_date=block_height,
        progress=0,
        completed=False,
    ))
    try:
        _commit(db)
    except IntegrityError:
        # Concurrent enrollment of the same pair; _commit already rolled back the seat
        raise _reject(ErrorCode.ALREADY_ENROLLED, f"{caller} already enrolled in course {course_id}")
    logger.info(f"{caller} enrolled in course {course_id} at block {block_height}")
    return True


def add_course_material(
    db: Session,
    caller: str,
    course_id: int,
    title: str,
    content_url: str,
    material_type: str,
) -> int:
    """Attach a material to a course and return its per-course id.

    The caller must be a registered user and the course's own instructor.
    Input shape is checked between those two authorization checks.
    """
    course = _get_course(db, course_id)
    if course is None:
        raise _reject(ErrorCode.NOT_FOUND, f"Course {course_id} not found")
    if _get_user(db, caller) is None:
        raise _reject(ErrorCode.UNAUTHORIZED, f"{caller} is not a registered user")

    if not _valid_text(title, MAX_TITLE_LENGTH):
        raise _reject(ErrorCode.INVALID_INPUT, "Title must be 1-100 characters")
    if not _valid_text(content_url, MAX_CONTENT_URL_LENGTH):
        raise _reject(ErrorCode.INVALID_INPUT, "Content URL must be 1-500 characters")
    if not _valid_text(material_type, MAX_MATERIAL_TYPE_LENGTH) or material_type not in VALID_MATERIAL_TYPES:
        raise _reject(ErrorCode.INVALID_INPUT, f"Invalid material type: {material_type!r}")

    if course.instructor != caller:
        raise _reject(ErrorCode.UNAUTHORIZED, f"{caller} is not the instructor of course {course_id}")

    counter = _get_material_counter(db, course_id)
    if counter is None:
        counter = MaterialCounter(course_id=course_id, last_material_id=0)
        db.add(counter)
    material_id = counter.last_material_id + 1

    db.add(CourseMaterial(
        course_id=course_id,
        material_id=material_id,
        title=title,
        content_url=content_url,
        material_type=MaterialType(material_type),
    ))
    counter.last_material_id = material_id
    _commit(db)
    logger.info(f"Material {material_id} ({material_type}) added to course {course_id}")
    return material_id


def update_course_progress(db: Session, caller: str, course_id: int, progress: int) -> bool:
    """Record the caller's progress in a course. Progress of 100 marks it completed."""
    enrollment = _get_enrollment(db, course_id, caller)
    if enrollment is None:
        raise _reject(ErrorCode.NOT_FOUND, f"{caller} is not enrolled in course {course_id}")
    course = _get_course(db, course_id)
    if course is None:
        raise _reject(ErrorCode.NOT_FOUND, f"Course {course_id} not found")
    if not course.is_active:
        raise _reject(ErrorCode.COURSE_NOT_STARTED, f"Course {course_id} is not active")
    if not _valid_uint(progress) or progress > MAX_PROGRESS:
        raise _reject(ErrorCode.INVALID_INPUT, "Progress must be between 0 and 100")

    enrollment.progress = progress
    enrollment.completed = progress >= MAX_PROGRESS
    _commit(db)
    logger.info(f"{caller} progress in course {course_id} set to {progress}")
    return True


def deactivate_course(db: Session, caller: str, course_id: int) -> bool:
    """Mark a course inactive. Allowed for the course's instructor and for admins.

    There is no way back: an inactive course refuses new enrollments and
    progress updates.
    """
    course = _get_course(db, course_id)
    if course is None:
        raise _reject(ErrorCode.NOT_FOUND, f"Course {course_id} not found")
    user = _get_user(db, caller)
    if user is None:
        raise _reject(ErrorCode.UNAUTHORIZED, f"{caller} is not a registered user")
    if course.instructor != caller and user.role != UserRole.admin:
        raise _reject(ErrorCode.UNAUTHORIZED, f"{caller} may not deactivate course {course_id}")

    course.is_active = False
    _commit(db)
    logger.info(f"Course {course_id} deactivated by {caller}")
    return True


# --- Read-only accessors ---

def get_user_info(db: Session, principal: str) -> Optional[User]:
    return _get_user(db, principal)


def get_course_details(db: Session, course_id: int) -> Optional[Course]:
    return _get_course(db, course_id)


def get_enrollment_details(db: Session, course_id: int, student: str) -> Optional[Enrollment]:
    return _get_enrollment(db, course_id, student)


def get_course_material(db: Session, course_id: int, material_id: int) -> Optional[CourseMaterial]:
    return db.query(CourseMaterial).filter(
        CourseMaterial.course_id == course_id,
        CourseMaterial.material_id == material_id,
    ).first()


def get_course_materials_count(db: Session, course_id: int) -> Optional[int]:
    """Number of materials ever added to a course, or None for an unknown course."""
    counter = _get_material_counter(db, course_id)
    if counter is None:
        return None
    return counter.last_material_id


def get_last_course_id(db: Session) -> int:
    state = db.query(LedgerState).filter(LedgerState.id == LEDGER_STATE_ID).first()
    return state.last_course_id if state else 0


def list_course_materials(db: Session, course_id: int) -> List[CourseMaterial]:
    return (
        db.query(CourseMaterial)
        .filter(CourseMaterial.course_id == course_id)
        .order_by(CourseMaterial.material_id)
        .all()
    )
