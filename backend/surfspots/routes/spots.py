"""
Surf Spots Backend - Spot Route Handlers
==========================================

What:  CRUD endpoints under /api/spots.
How:   Each handler extracts the path id and/or body, delegates to
       SpotService and returns the JSON payload or an empty body.

Route Inventory:
    GET    /api/spots        → 200 JSON array of all records
    GET    /api/spots/{id}   → 200 record | 404
    POST   /api/spots        → 201 empty  | 400
    PUT    /api/spots/{id}   → 200 empty  | 400 | 404
    DELETE /api/spots/{id}   → 200 empty  | 404

Any storage, decode or encode failure is a 500 (global handlers in main.py).
Request bodies are decoded as JSON whatever the Content-Type header says.
A body that does not decode into the target model raises ValidationError
(400) before storage is touched.
"""

import logging
from typing import List, Type, TypeVar

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from surfspots.dependencies import get_spot_service
from surfspots.exceptions import ValidationError
from surfspots.schemas.spot import SpotRecord, SpotUpdate
from surfspots.services.spot_service import SpotService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/spots", tags=["Spots"])

ModelT = TypeVar("ModelT", bound=BaseModel)

_ERRORS = {
    400: {"description": "Invalid request payload"},
    404: {"description": "Spot not found"},
    500: {"description": "Storage read/write or JSON encode/decode failure"},
}


def decode_body(model: Type[ModelT], raw: bytes) -> ModelT:
    """Decode a raw request body into `model`, or raise ValidationError."""
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        logger.debug("Rejected %s body: %s", model.__name__, e.errors())
        raise ValidationError(
            context={"model": model.__name__, "errors": e.error_count()}
        ) from e


@router.get(
    "",
    response_model=List[SpotRecord],
    responses={500: _ERRORS[500]},
    summary="List all spots",
)
async def list_spots(
    service: SpotService = Depends(get_spot_service),
) -> List[SpotRecord]:
    return await service.list_spots()


@router.get(
    "/{spot_id}",
    response_model=SpotRecord,
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
    summary="Get a single spot by ID",
)
async def get_spot(
    spot_id: str,
    service: SpotService = Depends(get_spot_service),
) -> SpotRecord:
    return await service.get_spot(spot_id)


@router.post(
    "",
    status_code=201,
    response_class=Response,
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
    summary="Append a spot record",
    description="Appends the record as sent. The id is not generated or checked for uniqueness.",
)
async def create_spot(
    request: Request,
    service: SpotService = Depends(get_spot_service),
) -> Response:
    record = decode_body(SpotRecord, await request.body())
    await service.create_spot(record)
    return Response(status_code=201)


@router.put(
    "/{spot_id}",
    response_class=Response,
    responses={400: _ERRORS[400], 404: _ERRORS[404], 500: _ERRORS[500]},
    summary="Partially update a spot",
    description=(
        "Overwrites 'Surf Break' and 'Photos' when present and not null, and "
        "'Address' when non-empty. Other fields are left untouched."
    ),
)
async def update_spot(
    spot_id: str,
    request: Request,
    service: SpotService = Depends(get_spot_service),
) -> Response:
    update = decode_body(SpotUpdate, await request.body())
    await service.update_spot(spot_id, update)
    return Response(status_code=200)


@router.delete(
    "/{spot_id}",
    response_class=Response,
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
    summary="Delete a spot",
)
async def delete_spot(
    spot_id: str,
    service: SpotService = Depends(get_spot_service),
) -> Response:
    await service.delete_spot(spot_id)
    return Response(status_code=200)
