"""Sort endpoint: POST /sort."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from pivotorder.api.schemas import ErrorResponse, SortRequest, SortResponse
from pivotorder.dataset.base import UnknownFieldError
from pivotorder.dataset.memory import InMemoryDataSet
from pivotorder.settings import Settings
from pivotorder.sorting.orchestrator import SortOrchestrator

logger = logging.getLogger("pivotorder.api")

router = APIRouter()


@router.post(
    "",
    response_model=SortResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def sort_dimension_values(body: SortRequest, request: Request) -> SortResponse:
    """Order the values of one pivot dimension field."""
    settings: Settings = request.app.state.settings
    try:
        sort_param = body.sort_param.to_sort_param()
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=ErrorResponse(
                error="INVALID_SORT_PARAM", message=str(exc), path="sortParam"
            ).model_dump(),
        ) from None

    try:
        dataset = InMemoryDataSet(
            body.fields, body.data, with_totals=body.with_totals, aggregation=body.aggregation
        )
        orchestrator = SortOrchestrator(locale=body.locale or settings.sort_locale)
        result = orchestrator.resolve(sort_param, body.original_values, dataset)
    except UnknownFieldError as exc:
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(
                error="UNKNOWN_FIELD", message=str(exc), path="sortParam.query"
            ).model_dump(),
        ) from None

    logger.info("Sorted %s: %d values via %s",
                sort_param.sort_field_id, len(result.values), result.strategy)
    return SortResponse(
        values=result.values, strategy=result.strategy.value, sort_method=sort_param.sort_method
    )
