from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from learnledger.core.errors import LedgerError


def ledger_http_error(err: LedgerError) -> HTTPException:
    """Surface a rejected call with the ledger's own error code in the body."""
    return HTTPException(status_code=err.http_status, detail=err.to_dict())


def database_http_error(err: SQLAlchemyError) -> HTTPException:
    return HTTPException(status_code=500, detail=f"Database error: {str(err)}")
