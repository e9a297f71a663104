from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.graph import AddItemUseCase, GetItemRelationsUseCase, RemoveItemUseCase
from ..models.graph import ItemRelations
from ..models.responses import OperationStatus
from ..platform.wiring import (
    get_add_item_use_case,
    get_item_relations_use_case,
    get_remove_item_use_case,
)
from .utils import item_id_path

router: APIRouter = APIRouter(tags=["items"])

# Item ids are opaque and may contain "/", so each route captures the rest of
# the path. The relations route answers GET only, so PUT and DELETE still reach
# an id that ends in "/relations".


@router.get("/items/{item_id:path}/relations", response_model=ItemRelations)
async def get_item_relations(
    item_id: str = item_id_path,
    use_case: GetItemRelationsUseCase = Depends(get_item_relations_use_case),
) -> ItemRelations:
    return await use_case(item_id)


@router.put("/items/{item_id:path}", response_model=OperationStatus)
async def add_item(
    item_id: str = item_id_path,
    use_case: AddItemUseCase = Depends(get_add_item_use_case),
) -> OperationStatus:
    return await use_case(item_id)


@router.delete("/items/{item_id:path}", response_model=OperationStatus)
async def remove_item(
    item_id: str = item_id_path,
    use_case: RemoveItemUseCase = Depends(get_remove_item_use_case),
) -> OperationStatus:
    return await use_case(item_id)
