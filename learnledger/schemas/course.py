from pydantic import BaseModel, Field
from learnledger.schemas.base import BaseSchema


# Request schemas (no from_attributes needed)
class CourseCreate(BaseModel):
    title: str
    description: str
    max_capacity: int = Field(ge=0)
    start_date: int = Field(ge=0)
    end_date: int = Field(ge=0)


class CourseCreated(BaseModel):
    course_id: int


class LastCourseIdResponse(BaseModel):
    last_course_id: int


# Response schemas (need from_attributes for ORM)
class CourseResponse(BaseSchema):
    id: int
    title: str
    description: str
    instructor: str
    max_capacity: int
    current_enrollments: int
    start_date: int
    end_date: int
    is_active: bool
