from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.graph import CheckMoveUseCase, GetOrderUseCase
from ..models.graph import MoveCheckRequest, MoveCheckResponse, OrderResponse
from ..platform.wiring import get_check_move_use_case, get_order_use_case

router: APIRouter = APIRouter(tags=["order"])


@router.get("/order", response_model=OrderResponse)
async def get_order(
    use_case: GetOrderUseCase = Depends(get_order_use_case),
) -> OrderResponse:
    return await use_case()


@router.post("/order/move-check", response_model=MoveCheckResponse)
async def check_move(
    request: MoveCheckRequest,
    use_case: CheckMoveUseCase = Depends(get_check_move_use_case),
) -> MoveCheckResponse:
    return await use_case(request)
