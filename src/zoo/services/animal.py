"""Animal business logic.

AnimalsManager is the only place with decision logic: it validates input,
turns absence into NotFoundError and forwards everything else to the
repository. Store errors are not caught here.
"""

from typing import NoReturn

from zoo.exceptions import ArgumentError, NotFoundError, ValidationError
from zoo.logging import get_logger
from zoo.models import Animal
from zoo.repositories.animal import AnimalRepository
from zoo.validation import is_blank, is_valid_animal

logger = get_logger(__name__)

EMPTY_CATALOG_NUMBER = "Catalog number cannot be empty."
EMPTY_ANIMAL_TYPE = "Animal type cannot be empty."


class AnimalsManager:
    def __init__(self, repository: AnimalRepository) -> None:
        self.repository = repository

    async def add(self, animal: Animal | None) -> Animal:
        if animal is None or not is_valid_animal(animal):
            await self._reject(animal)
        added = await self.repository.add(animal)
        logger.info("animal_added", catalog_number=added.catalog_number, animal_id=added.id)
        return added

    async def delete(self, catalog_number: str | None) -> None:
        if catalog_number is None or is_blank(catalog_number):
            raise ArgumentError(EMPTY_CATALOG_NUMBER)
        if await self.repository.delete(catalog_number):
            logger.info("animal_deleted", catalog_number=catalog_number)

    async def get_all(self) -> list[Animal]:
        animals = await self.repository.get_all()
        if not animals:
            raise NotFoundError("No animal found.")
        return animals

    async def search_by_type(self, animal_type: str | None) -> list[Animal]:
        """Return every animal of the given type.

        A blank type is rejected before the store is queried.
        """
        if animal_type is None or is_blank(animal_type):
            raise ArgumentError(EMPTY_ANIMAL_TYPE)
        animals = await self.repository.search_by_type(animal_type)
        if not animals:
            raise NotFoundError("No animal found with the given type.")
        return animals

    async def get_specific(self, catalog_number: str | None) -> Animal:
        if catalog_number is None or is_blank(catalog_number):
            raise ArgumentError(EMPTY_CATALOG_NUMBER)
        animal = await self.repository.get_specific(catalog_number)
        if animal is None:
            raise NotFoundError(f"No animal found with catalog number: {catalog_number}")
        return animal

    async def update(self, animal: Animal | None) -> Animal:
        if animal is None or not is_valid_animal(animal):
            await self._reject(animal)
        updated = await self.repository.update(animal)
        logger.info(
            "animal_updated", catalog_number=updated.catalog_number, animal_id=updated.id
        )
        return updated

    async def _reject(self, animal: Animal | None) -> NoReturn:
        """Raise ValidationError, first reverting a stored animal's in-memory edits.

        Otherwise the next flush in the same session would write the rejected values.
        """
        if animal is not None:
            await self.repository.discard(animal)
        raise ValidationError()
