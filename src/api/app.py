"""HTTP API for advocate search.

Endpoints:
  POST /api/advocates: search with a JSON body of SearchRequest fields (camelCase)
  GET  /api/advocates: same search, fields taken from query parameters

A body or query that does not validate is answered with 400 and
``{"error": "Invalid request body"}``; the engine is not invoked.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.core.config import Settings
from src.core.schemas import Advocate, SearchRequest
from src.search.engine import evaluate

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = {"error": "Invalid request body"}

router = APIRouter(prefix="/api")


def _invalid_request(reason: object) -> JSONResponse:
    logger.warning("Rejected search request: %s", reason)
    return JSONResponse(INVALID_REQUEST_BODY, status_code=400)


def _run_search(app: FastAPI, payload: Any) -> JSONResponse:
    settings: Settings = app.state.settings
    try:
        search = SearchRequest.model_validate(
            payload, context=settings.validation_context(),
        )
    except ValidationError as e:
        return _invalid_request(e.errors(include_url=False))

    result = evaluate(app.state.advocates, search)
    logger.info(
        "Search term=%r page=%d limit=%d: %d matches",
        search.search_term, search.page, search.limit, result.pagination.total_count,
    )
    return JSONResponse(result.to_response())


@router.post("/advocates")
async def search_advocates(request: Request) -> JSONResponse:
    try:
        payload = await request.json()
    except ValueError as e:
        return _invalid_request(e)
    return _run_search(request.app, payload)


@router.get("/advocates")
async def list_advocates(request: Request) -> JSONResponse:
    params = request.query_params
    payload: dict[str, Any] = {k: v for k, v in params.items() if k != "specialties"}
    if "specialties" in params:
        payload["specialties"] = params.getlist("specialties")
    return _run_search(request.app, payload)


def create_app(advocates: Sequence[Advocate], settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app serving ``advocates``.

    The roster is stored on ``app.state`` as an immutable tuple and shared by
    all requests.
    """
    app = FastAPI(title="Advocate Directory Search")
    app.state.advocates = tuple(advocates)
    app.state.settings = settings or Settings()
    app.include_router(router)
    return app
