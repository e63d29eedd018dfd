from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from learnledger.core.database import Base


class Course(Base):
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("current_enrollments <= max_capacity", name="ck_courses_capacity"),
        CheckConstraint("start_date < end_date", name="ck_courses_dates"),
    )

    # Assigned from LedgerState.last_course_id, never autoincremented
    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    instructor = Column(String(128), ForeignKey("users.principal"), nullable=False, index=True)
    max_capacity = Column(Integer, nullable=False)
    current_enrollments = Column(Integer, nullable=False, default=0)
    start_date = Column(Integer, nullable=False)  # Block heights
    end_date = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships (records are never deleted, so no cascades)
    instructor_user = relationship("User", back_populates="courses")
    enrollments = relationship("Enrollment", back_populates="course")
    materials = relationship("CourseMaterial", back_populates="course", order_by="CourseMaterial.material_id")
    material_counter = relationship("MaterialCounter", back_populates="course", uselist=False)
