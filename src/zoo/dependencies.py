"""Shared FastAPI dependencies.

Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zoo.db.session import get_db
from zoo.repositories.animal import AnimalRepository
from zoo.services.animal import AnimalsManager

DB = Annotated[AsyncSession, Depends(get_db)]


def get_animals_manager(db: DB) -> AnimalsManager:
    """One manager per request, bound to the request's session."""
    return AnimalsManager(AnimalRepository(db))


Manager = Annotated[AnimalsManager, Depends(get_animals_manager)]
