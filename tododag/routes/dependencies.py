from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.graph import (
    AddDependencyUseCase,
    ListDependenciesUseCase,
    RemoveDependencyUseCase,
)
from ..models.graph import DependencyEdge
from ..models.responses import OperationStatus
from ..platform.wiring import (
    get_add_dependency_use_case,
    get_list_dependencies_use_case,
    get_remove_dependency_use_case,
)

router: APIRouter = APIRouter(tags=["dependencies"])


@router.get("/dependencies", response_model=List[DependencyEdge])
async def list_dependencies(
    use_case: ListDependenciesUseCase = Depends(get_list_dependencies_use_case),
) -> List[DependencyEdge]:
    return await use_case()


@router.post("/dependencies", status_code=201, response_model=OperationStatus)
async def add_dependency(
    edge: DependencyEdge,
    use_case: AddDependencyUseCase = Depends(get_add_dependency_use_case),
) -> OperationStatus:
    status = await use_case(edge)
    if status.reason is not None:
        raise HTTPException(
            status_code=409,
            detail={
                "error": f"Cannot add dependency {edge.blocker} -> {edge.blocked}",
                "reason": status.reason.value,
            },
        )
    return status


@router.delete("/dependencies", response_model=OperationStatus)
async def remove_dependency(
    blocker: str = Query(..., min_length=1, description="Item that must come first."),
    blocked: str = Query(..., min_length=1, description="Item that must come after the blocker."),
    use_case: RemoveDependencyUseCase = Depends(get_remove_dependency_use_case),
) -> OperationStatus:
    return await use_case(DependencyEdge(blocker=blocker, blocked=blocked))
