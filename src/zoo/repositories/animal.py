"""Animal data-access layer.

Plain queries over a session, no business rules and no HTTP concerns.
Writes are flushed, never committed: the session scope owns the transaction.
"""

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from zoo.models import Animal


class AnimalRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def add(self, animal: Animal) -> Animal:
        self._db.add(animal)
        await self._db.flush()
        return animal

    async def delete(self, catalog_number: str) -> bool:
        """Remove the first animal with this catalog number. False if none matched."""
        animal = await self.get_specific(catalog_number)
        if animal is None:
            return False
        await self._db.delete(animal)
        await self._db.flush()
        return True

    async def get_all(self) -> list[Animal]:
        result = await self._db.execute(select(Animal).order_by(Animal.id))
        return list(result.scalars().all())

    async def get_specific(self, catalog_number: str) -> Animal | None:
        """Return the oldest animal with this catalog number, or None."""
        stmt = (
            select(Animal)
            .where(Animal.catalog_number == catalog_number)
            .order_by(Animal.id)
            .limit(1)
        )
        result = await self._db.execute(stmt)
        return result.scalars().first()

    async def search_by_type(self, animal_type: str) -> list[Animal]:
        stmt = select(Animal).where(Animal.type == animal_type).order_by(Animal.id)
        result = await self._db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, animal: Animal) -> Animal:
        """Persist changes to a tracked or detached animal.

        The row is matched by its surrogate id, so a changed catalog number
        re-keys the record.
        """
        merged = await self._db.merge(animal)
        await self._db.flush()
        return merged

    async def discard(self, animal: Animal) -> None:
        """Drop unsaved changes on a stored animal and reload it from the database.

        Instances this session does not hold as stored rows are left alone.
        """
        if animal not in self._db or not inspect(animal).persistent:
            return
        self._db.expire(animal)
        await self._db.refresh(animal)
