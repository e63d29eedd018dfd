from sqlalchemy import Column, Integer, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship
import enum
from learnledger.core.database import Base


class UserRole(str, enum.Enum):
    student = "student"
    instructor = "instructor"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    principal = Column(String(128), primary_key=True)  # Caller identity supplied by the host
    name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
    role = Column(SAEnum(UserRole, name="user_role"), nullable=False)
    created_at = Column(Integer, nullable=False)  # Block height at registration

    # Relationships
    courses = relationship("Course", back_populates="instructor_user")
    enrollments = relationship("Enrollment", back_populates="user")
