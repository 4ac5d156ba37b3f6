from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.database import get_db_session
from classhub.schemas.common import ErrorResponse
from classhub.schemas.user import UserListItem
from classhub.services.user_service import user_service

router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserListItem],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all users by full name",
    description="Public directory of users. Never includes passwords.",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserListItem]:
    return await user_service.list_users(db)
