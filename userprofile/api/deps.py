"""Dependencies — composes UserService per request.

Invariants:
    - One AsyncSession per request, shared by every store call of that request
    - min_age comes from Settings, never from the request
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from userprofile.config import get_settings
from userprofile.infrastructure.database import get_db
from userprofile.infrastructure.user_store import SqlUserStore
from userprofile.services.user_service import UserService


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlUserStore(db), get_settings().user_min_age)
