from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from learnledger.api.http_errors import database_http_error, ledger_http_error
from learnledger.core.auth import require_block_height, require_principal
from learnledger.core.database import get_db
from learnledger.core.errors import LedgerError
from learnledger.schemas.user import UserRegister, UserResponse
from learnledger.services import ledger_store

router = APIRouter()


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user: UserRegister,
    caller: str = Depends(require_principal),
    block_height: int = Depends(require_block_height),
    db: Session = Depends(get_db),
):
    """Register the calling principal as a student, instructor or admin."""
    try:
        ledger_store.register_user(db, caller, user.name, user.email, user.role, block_height)
    except LedgerError as e:
        raise ledger_http_error(e)
    except SQLAlchemyError as e:
        raise database_http_error(e)
    return ledger_store.get_user_info(db, caller)


@router.get("/{principal}", response_model=UserResponse)
def get_user_info(principal: str, db: Session = Depends(get_db)):
    """Get a user by principal."""
    user = ledger_store.get_user_info(db, principal)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
