# components_api/api/routes/components.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from components_api.api.deps import get_repository
from components_api.api.schemas.component import Component, ComponentCreate, ComponentUpdate
from components_api.models.component import MAX_ID
from components_api.repository.interface import ComponentRepository

router = APIRouter(prefix="/components", tags=["components"])

NOT_FOUND = "Component not found"


@router.get("", response_model=List[Component])
def list_components(repo: ComponentRepository = Depends(get_repository)):
    """List every component ordered by id."""
    return repo.list()


@router.get("/{component_id}", response_model=Component)
def get_component(
    component_id: int = Path(..., le=MAX_ID),
    repo: ComponentRepository = Depends(get_repository),
):
    component = repo.get_by_id(component_id)
    if component is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return component


@router.post("", response_model=Component, status_code=status.HTTP_201_CREATED)
def create_component(payload: ComponentCreate, repo: ComponentRepository = Depends(get_repository)):
    """
    Create a component. `name` and `type` are required; `brand` defaults to
    null and `price`/`stock` to 0 when omitted.
    """
    return repo.create(payload.model_dump(exclude_unset=True))


@router.put("/{component_id}", response_model=Component)
def update_component(
    payload: ComponentUpdate,
    component_id: int = Path(..., le=MAX_ID),
    repo: ComponentRepository = Depends(get_repository),
):
    """
    Partial update: only the fields present in the body are written.
    An empty body returns the component unchanged.
    """
    updates = payload.model_dump(exclude_unset=True)
    updated = repo.update(component_id, updates)
    if updated is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return updated


@router.delete("/{component_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_component(
    component_id: int = Path(..., le=MAX_ID),
    repo: ComponentRepository = Depends(get_repository),
):
    if not repo.remove(component_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
