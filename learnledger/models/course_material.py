"""Course material model."""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship
import enum
from learnledger.core.database import Base


class MaterialType(str, enum.Enum):
    video = "video"
    pdf = "pdf"
    text = "text"
    quiz = "quiz"


class CourseMaterial(Base):
    """
    A piece of content attached to a course.
    Material ids are scoped per course and start at 1.
    """
    __tablename__ = "course_materials"

    course_id = Column(Integer, ForeignKey("courses.id"), primary_key=True)
    material_id = Column(Integer, primary_key=True, autoincrement=False)

    title = Column(String(100), nullable=False)
    content_url = Column(String(500), nullable=False)
    material_type = Column(SAEnum(MaterialType, name="material_type"), nullable=False)

    # Relationships
    course = relationship("Course", back_populates="materials")
