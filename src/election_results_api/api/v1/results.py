"""Election result endpoints.

GET /{election_type}/{year} — national results
GET /{election_type}/{year}/{county} — county results

Result documents are passed through as stored. Missing, unreadable and
malformed files map to 404, 500 and 502 unless ``silent_errors`` is enabled,
in which case the response is 200 with a ``null`` body.
"""

from collections.abc import Awaitable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from loguru import logger

from election_results_api.core.config import Settings
from election_results_api.core.dependencies import get_app_settings, get_result_store
from election_results_api.lib.result_store import (
    MalformedResultError,
    ResultNotFoundError,
    ResultReadError,
    ResultStore,
    ResultStoreError,
)
from election_results_api.services import results_service

results_router = APIRouter(tags=["results"])

_ERROR_RESPONSES: dict[type[ResultStoreError], tuple[int, str]] = {
    ResultNotFoundError: (404, "Election results not found."),
    ResultReadError: (500, "Election results could not be read."),
    MalformedResultError: (502, "Election results file is not valid JSON."),
}


async def _respond(lookup: Awaitable[Any], settings: Settings) -> JSONResponse:
    """Await a result lookup and encode it, mapping store errors to HTTP."""
    try:
        document = await lookup
    except ResultStoreError as e:
        if settings.silent_errors:
            logger.info(f"Serving null body for {e.key} (silent_errors enabled)")
            return JSONResponse(content=None)
        status_code, detail = _ERROR_RESPONSES[type(e)]
        raise HTTPException(status_code=status_code, detail=detail) from e
    return JSONResponse(content=document)


@results_router.get("/{election_type}/{year}")
async def get_national_results(
    election_type: str,
    year: str,
    store: Annotated[ResultStore, Depends(get_result_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> JSONResponse:
    """Return the national result document for an election type and year."""
    return await _respond(results_service.get_national_results(store, election_type, year), settings)


@results_router.get("/{election_type}/{year}/{county}")
async def get_county_results(
    election_type: str,
    year: str,
    county: str,
    store: Annotated[ResultStore, Depends(get_result_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> JSONResponse:
    """Return the result document for one county."""
    return await _respond(results_service.get_county_results(store, election_type, year, county), settings)
