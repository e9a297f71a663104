from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.graph import ExportGraphUseCase, ReplaceGraphUseCase, ValidateGraphUseCase
from ..models.graph import GraphReplaceResponse, GraphSnapshot, GraphValidationResponse
from ..platform.wiring import (
    get_export_graph_use_case,
    get_replace_graph_use_case,
    get_validate_graph_use_case,
)

router: APIRouter = APIRouter(tags=["graph"])


@router.get("/graph", response_model=GraphSnapshot)
async def export_graph(
    use_case: ExportGraphUseCase = Depends(get_export_graph_use_case),
) -> GraphSnapshot:
    return await use_case()


@router.put("/graph", response_model=GraphReplaceResponse)
async def replace_graph(
    snapshot: GraphSnapshot,
    use_case: ReplaceGraphUseCase = Depends(get_replace_graph_use_case),
) -> GraphReplaceResponse:
    return await use_case(snapshot)


@router.post("/graph/validation", response_model=GraphValidationResponse)
async def validate_graph(
    snapshot: GraphSnapshot,
    use_case: ValidateGraphUseCase = Depends(get_validate_graph_use_case),
) -> GraphValidationResponse:
    """Check a snapshot before replacing the graph with it."""
    return await use_case(snapshot)
