"""Animal endpoints.

Thin wrappers: each route makes one or two manager calls and lets domain
exceptions reach the handlers in main.py.
"""

from fastapi import APIRouter, Query, Response

from zoo.dependencies import Manager
from zoo.schemas.animal import AnimalPayload, AnimalResponse

router = APIRouter(prefix="/animals", tags=["animals"])


@router.post("", response_model=AnimalResponse, status_code=201)
async def add_animal(payload: AnimalPayload, manager: Manager) -> AnimalResponse:
    animal = await manager.add(payload.to_model())
    return AnimalResponse.model_validate(animal)


@router.get("", response_model=list[AnimalResponse])
async def list_animals(manager: Manager) -> list[AnimalResponse]:
    animals = await manager.get_all()
    return [AnimalResponse.model_validate(a) for a in animals]


# Registered before /{catalog_number} so "search" is not taken as a key.
@router.get("/search", response_model=list[AnimalResponse])
async def search_animals(
    manager: Manager,
    animal_type: str = Query("", alias="type"),
) -> list[AnimalResponse]:
    animals = await manager.search_by_type(animal_type)
    return [AnimalResponse.model_validate(a) for a in animals]


@router.get("/{catalog_number}", response_model=AnimalResponse)
async def get_animal(catalog_number: str, manager: Manager) -> AnimalResponse:
    animal = await manager.get_specific(catalog_number)
    return AnimalResponse.model_validate(animal)


@router.put("/{catalog_number}", response_model=AnimalResponse)
async def update_animal(
    catalog_number: str, payload: AnimalPayload, manager: Manager
) -> AnimalResponse:
    """Replace an animal's fields. The body may carry a new catalog number."""
    animal = await manager.get_specific(catalog_number)
    updated = await manager.update(payload.apply_to(animal))
    return AnimalResponse.model_validate(updated)


@router.delete("/{catalog_number}", status_code=204)
async def delete_animal(catalog_number: str, manager: Manager) -> Response:
    await manager.delete(catalog_number)
    return Response(status_code=204)
