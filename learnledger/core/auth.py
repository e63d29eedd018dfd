from typing import Optional

from fastapi import Header, HTTPException, status


async def require_principal(principal: Optional[str] = Header(default=None, alias="X-Principal")) -> str:
    """Require the caller identity header on entry-point routes.

    The host ledger authenticates the caller before the call reaches us, so the
    header value is trusted as-is.
    """
    if not principal or not principal.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Principal header required",
        )
    return principal.strip()


async def require_block_height(block_height: int = Header(alias="X-Block-Height", ge=0)) -> int:
    """Current block height supplied by the host for this call."""
    return block_height
