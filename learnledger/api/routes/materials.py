"""API routes for course materials."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from learnledger.api.http_errors import database_http_error, ledger_http_error
from learnledger.core.auth import require_principal
from learnledger.core.database import get_db
from learnledger.core.errors import LedgerError
from learnledger.schemas.material import (
    MaterialCountResponse,
    MaterialCreate,
    MaterialCreated,
    MaterialListResponse,
    MaterialResponse,
)
from learnledger.services import ledger_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/courses/{course_id}/materials", response_model=MaterialCreated, status_code=status.HTTP_201_CREATED)
def add_course_material(
    course_id: int,
    material: MaterialCreate,
    caller: str = Depends(require_principal),
    db: Session = Depends(get_db),
):
    """
    Add a material to a course.

    - Only the course's instructor may add materials
    - material_type is one of video, pdf, text, quiz
    """
    try:
        material_id = ledger_store.add_course_material(
            db,
            caller,
            course_id,
            material.title,
            material.content_url,
            material.material_type,
        )
    except LedgerError as e:
        raise ledger_http_error(e)
    except SQLAlchemyError as e:
        raise database_http_error(e)
    return MaterialCreated(material_id=material_id)


@router.get("/courses/{course_id}/materials", response_model=MaterialListResponse)
def list_course_materials(course_id: int, db: Session = Depends(get_db)):
    """List all materials for a course, ordered by material id."""
    if not ledger_store.get_course_details(db, course_id):
        raise HTTPException(status_code=404, detail="Course not found")

    materials = ledger_store.list_course_materials(db, course_id)
    return MaterialListResponse(
        materials=[MaterialResponse.model_validate(m) for m in materials],
        total=len(materials),
    )


@router.get("/courses/{course_id}/materials/count", response_model=MaterialCountResponse)
def get_course_materials_count(course_id: int, db: Session = Depends(get_db)):
    count = ledger_store.get_course_materials_count(db, course_id)
    if count is None:
        raise HTTPException(status_code=404, detail="Course not found")
    return MaterialCountResponse(course_id=course_id, count=count)


@router.get("/courses/{course_id}/materials/{material_id}", response_model=MaterialResponse)
def get_course_material(course_id: int, material_id: int, db: Session = Depends(get_db)):
    material = ledger_store.get_course_material(db, course_id, material_id)
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")
    return material
