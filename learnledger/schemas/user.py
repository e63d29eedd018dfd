from pydantic import BaseModel
from learnledger.schemas.base import BaseSchema
from learnledger.models.user import UserRole


# Request schemas (shape checks are left to the ledger store)
class UserRegister(BaseModel):
    name: str
    email: str
    role: str


# Response schemas
class UserResponse(BaseSchema):
    principal: str
    name: str
    email: str
    role: UserRole
    created_at: int
