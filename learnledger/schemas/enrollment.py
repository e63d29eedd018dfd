from pydantic import BaseModel, Field
from learnledger.schemas.base import BaseSchema


class ProgressUpdate(BaseModel):
    progress: int = Field(ge=0)


class EnrollmentResponse(BaseSchema):
    course_id: int
    student: str
    enrollment_date: int
    progress: int
    completed: bool
