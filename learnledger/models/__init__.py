# Import all models here so Base.metadata is complete for create_all
from learnledger.models.user import User, UserRole
from learnledger.models.course import Course
from learnledger.models.enrollment import Enrollment
from learnledger.models.course_material import CourseMaterial, MaterialType
from learnledger.models.ledger_state import LedgerState, MaterialCounter

__all__ = [
    "User",
    "UserRole",
    "Course",
    "Enrollment",
    "CourseMaterial",
    "MaterialType",
    # Counters
    "LedgerState",
    "MaterialCounter",
]
