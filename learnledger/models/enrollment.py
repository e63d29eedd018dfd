from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from learnledger.core.database import Base


class Enrollment(Base):
    """Tracks a student's enrollment and progress in a course."""
    __tablename__ = "enrollments"

    course_id = Column(Integer, ForeignKey("courses.id"), primary_key=True)
    student = Column(String(128), ForeignKey("users.principal"), primary_key=True, index=True)
    enrollment_date = Column(Integer, nullable=False)  # Block height at enrollment
    progress = Column(Integer, nullable=False, default=0)
    completed = Column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship("User", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")

    __table_args__ = (
        CheckConstraint("progress >= 0 AND progress <= 100", name="ck_enrollments_progress"),
    )
