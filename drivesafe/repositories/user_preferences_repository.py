from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Optional

from drivesafe.models.user_preferences import UserPreferences


class UserPreferencesRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user(self, user_id: str) -> Optional[UserPreferences]:
        result = await self.db.execute(
            select(UserPreferences).where(UserPreferences.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def save(self, preferences: UserPreferences) -> UserPreferences:
        self.db.add(preferences)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(preferences)
        return preferences
