from typing import List
from pydantic import BaseModel
from learnledger.schemas.base import BaseSchema
from learnledger.models.course_material import MaterialType


class MaterialCreate(BaseModel):
    title: str
    content_url: str
    material_type: str


class MaterialCreated(BaseModel):
    material_id: int


class MaterialResponse(BaseSchema):
    course_id: int
    material_id: int
    title: str
    content_url: str
    material_type: MaterialType


class MaterialListResponse(BaseModel):
    materials: List[MaterialResponse]
    total: int


class MaterialCountResponse(BaseModel):
    course_id: int
    count: int
