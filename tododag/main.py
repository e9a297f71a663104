from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .domain.dag import ConstraintGraph, InvariantViolationError
from .platform.config import get_settings
from .platform.logs import configure_logging
from .routes.dependencies import router as dependencies_router
from .routes.graph import router as graph_router
from .routes.items import router as items_router
from .routes.order import router as order_router
from .services.graph_io import load_graph_definitions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the graph owned by this application instance."""

    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.graph_inputs_dir is not None:
        graph = load_graph_definitions(settings.graph_inputs_dir)
        logger.info(
            "Seeded graph from %s with %d item(s) and %d dependency(ies)",
            settings.graph_inputs_dir,
            len(graph),
            graph.edge_count,
        )
    else:
        graph = ConstraintGraph()
    app.state.graph = graph
    yield


app: FastAPI = FastAPI(
    title="Todo DAG",
    version="1.0.0",
    description="Keeps to-do items in an order that respects their blocking dependencies",
    lifespan=lifespan,
)


@app.exception_handler(InvariantViolationError)
async def invariant_violation_handler(
    request: Request, exc: InvariantViolationError
) -> JSONResponse:
    logger.error("Invariant violation while serving %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={
            "detail": {
                "error": "invariant_violation",
                "ordered": exc.ordered,
                "unsorted": exc.unsorted,
            }
        },
    )


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get("/v1/api-schema")
async def get_api_schema(request: Request) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    return JSONResponse(openapi_schema)


for router in (
    items_router,
    dependencies_router,
    order_router,
    graph_router,
):
    app.include_router(router, prefix="/v1")
