"""
Combinations endpoint: all language values of one (group, key) at once.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Dict, List, Optional
from app.core.database import get_session
from app.schemas.translation import CombinationUpdateResponse
from app.services import combination_service

router = APIRouter(prefix="/combinations", tags=["combinations"])


@router.get("/{group}/{key}", response_model=List[Dict[str, str]])
async def get_combination(
    group: str,
    key: str,
    session: Session = Depends(get_session)
):
    """One {code: value} entry per known language; empty string where no value exists."""
    return combination_service.get_combination(session, group, key)


@router.put("/{group}/{key}", response_model=CombinationUpdateResponse)
async def update_combination(
    group: str,
    key: str,
    values: Dict[str, Optional[str]],
    session: Session = Depends(get_session)
):
    """
    Write the supplied languages; empty values delete that language's row.
    Languages are applied one by one and failures are listed in `failed`
    without undoing the others.
    """
    result = combination_service.update_combination(session, group, key, values)
    return CombinationUpdateResponse(
        updated=result.updated,
        deleted=result.deleted,
        unchanged=result.unchanged,
        failed=result.failed
    )


@router.delete("/{group}/{key}")
async def delete_combination(
    group: str,
    key: str,
    session: Session = Depends(get_session)
):
    deleted = combination_service.delete_combination(session, group, key)
    return {"group": group, "key": key, "deleted": deleted}
