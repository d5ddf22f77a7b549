"""Animal request and response schemas.

The payload is deliberately loose: only JSON types are checked here, and the
manager decides whether the animal is valid.
"""

from pydantic import BaseModel

from zoo.models import Animal


class AnimalPayload(BaseModel):
    """Body of POST /animals and PUT /animals/{catalog_number}."""

    catalog_number: str | None = None
    name: str | None = None
    breed: str | None = None
    type: str | None = None
    age: int | None = None
    gender: str | None = None
    is_healthy: bool | None = None

    def to_model(self) -> Animal:
        return Animal(**self.model_dump())

    def apply_to(self, animal: Animal) -> Animal:
        """Copy every field onto an existing animal, including its catalog number."""
        for field, value in self.model_dump().items():
            setattr(animal, field, value)
        return animal


class AnimalResponse(BaseModel):
    model_config = {"from_attributes": True}

    catalog_number: str
    name: str
    breed: str
    type: str
    age: int
    gender: str
    is_healthy: bool
