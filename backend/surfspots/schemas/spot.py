"""
Surf Spots Backend - Pydantic Schemas
======================================

What:  Pydantic models for the stored document and the API contract.
How:   The same models decode `spot.json`, validate request bodies and
       serialize responses. Python attribute names are snake_case; the JSON
       keys are fixed aliases (including spaces, e.g. "Surf Break") and must
       round-trip byte-for-byte in name.

Stored document shape:
    {
        "records": [
            {
                "id": "rec5aF9TjMjBicXCK",
                "fields": {"Surf Break": ["Reef Break"], "Address": "Pipeline, Oahu, Hawaii", ...},
                "createdTime": "2018-05-31T00:16:16.000Z"
            }
        ],
        "offset": ""
    }

No field is validated for format or range. Every field of SpotFields is
optional; absent values serialize as null. Structural keys (`id`, `fields`,
`records`, `offset`) accept null and fall back to their empty value.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpotThumbnail(BaseModel):
    """One rendition of a photo thumbnail."""
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class SpotPhotoThumbs(BaseModel):
    small: Optional[SpotThumbnail] = None
    large: Optional[SpotThumbnail] = None
    full: Optional[SpotThumbnail] = None


class SpotPhoto(BaseModel):
    """
    What:  Attachment metadata for one photo of a spot.
    Note:  `type` is the MIME type string as stored upstream, not checked.
    """
    id: Optional[str] = None
    url: Optional[str] = None
    filename: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    thumbnails: Optional[SpotPhotoThumbs] = None


class SpotFields(BaseModel):
    """
    What:  Descriptive attributes of a surfing location.
    How:   Aliases carry the exact JSON keys of the stored document.
           populate_by_name lets Python code use the attribute names.
    """
    model_config = ConfigDict(populate_by_name=True)

    surf_break: Optional[List[str]] = Field(default=None, alias="Surf Break")
    difficulty_level: Optional[int] = Field(default=None, alias="Difficulty Level")
    destination: Optional[str] = Field(default=None, alias="Destination")
    geocode: Optional[str] = Field(default=None, alias="Geocode")
    influencers: Optional[List[str]] = Field(default=None, alias="Influencers")
    magic_seaweed_link: Optional[str] = Field(default=None, alias="Magic Seaweed Link")
    photos: Optional[List[SpotPhoto]] = Field(default=None, alias="Photos")
    peak_surf_season_begins: Optional[str] = Field(default=None, alias="Peak Surf Season Begins")
    destination_state_country: Optional[str] = Field(
        default=None, alias="Destination State/Country"
    )
    peak_surf_season_ends: Optional[str] = Field(default=None, alias="Peak Surf Season Ends")
    address: Optional[str] = Field(default=None, alias="Address")


class SpotRecord(BaseModel):
    """
    What:  One surf spot entry: caller-assigned id, timestamp and fields.
    Who:   Stored in SpotCollection.records; request body of POST /api/spots;
           response body of GET /api/spots/{id}.

    The id is not generated or checked for uniqueness. `createdTime` is kept
    as an opaque string.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="Record identifier assigned by the caller")
    fields: SpotFields = Field(default_factory=SpotFields)
    created_time: Optional[str] = Field(
        default=None,
        alias="createdTime",
        description="Free-form creation time, never interpreted",
    )

    @field_validator("id", mode="before")
    @classmethod
    def null_id_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("fields", mode="before")
    @classmethod
    def null_fields_as_empty(cls, v):
        return SpotFields() if v is None else v


class SpotCollection(BaseModel):
    """
    What:  The whole stored document.
    Why:   `offset` is an upstream pagination token; it has no meaning here
           but must be written back unchanged.

    A null `records` or `offset` reads as an empty list / empty string.
    """
    records: List[SpotRecord] = Field(default_factory=list)
    offset: str = Field(default="")

    @field_validator("records", mode="before")
    @classmethod
    def null_records_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("offset", mode="before")
    @classmethod
    def null_offset_as_empty(cls, v):
        return "" if v is None else v


class SpotUpdate(BaseModel):
    """
    What:  Body of PUT /api/spots/{id}: the subset of fields to overwrite.

    Apply rules (see SpotRepository.update_fields):
        - surf_break / photos: applied when present and not null
          (an empty list is an explicit value and clears the field)
        - address: applied only when non-empty
    """
    model_config = ConfigDict(populate_by_name=True)

    surf_break: Optional[List[str]] = Field(default=None, alias="Surf Break")
    photos: Optional[List[SpotPhoto]] = Field(default=None, alias="Photos")
    address: Optional[str] = Field(default=None, alias="Address")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and storage status.
    Who:   Returned by GET /health for liveness monitoring.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Backing document status: available, unavailable")
    record_count: Optional[int] = Field(
        default=None, description="Number of stored records (null when storage is unavailable)"
    )
    uptime_seconds: float = Field(description="Seconds since service started")
