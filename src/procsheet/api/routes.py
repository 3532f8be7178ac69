"""API routes for procsheet."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..config import settings
from ..engine import process_rows

logger = logging.getLogger(__name__)

router = APIRouter()


class ProcessRequest(BaseModel):
    """Request model for the process endpoint."""

    rows: list[Any] = Field(default_factory=list)


class ProcessResponse(BaseModel):
    """Response model for the process endpoint."""

    headers: list[str]
    data: list[Any]
    gabinete_total: int = 0


@router.post("/process", response_model=ProcessResponse)
def process_grid(request: ProcessRequest):
    """Clean a decoded spreadsheet grid and add the derived columns."""
    if len(request.rows) > settings.max_grid_rows:
        raise HTTPException(
            status_code=413,
            detail=f"Grid has {len(request.rows)} rows, limit is {settings.max_grid_rows}",
        )

    result = process_rows(request.rows)
    if not result.succeeded:
        raise HTTPException(status_code=422, detail=result.error)

    return ProcessResponse(
        headers=result.headers,
        data=result.data,
        gabinete_total=result.gabinete_total,
    )


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret configuration."""
    return {
        "status": "ok",
        "service": "procsheet",
        "config": {
            "max_grid_rows": settings.max_grid_rows,
            "debug": settings.debug,
        },
    }
